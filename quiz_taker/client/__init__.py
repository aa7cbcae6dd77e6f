"""HTTP access to the quiz backend."""
