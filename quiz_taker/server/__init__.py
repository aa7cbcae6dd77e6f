"""Offline practice backend."""
