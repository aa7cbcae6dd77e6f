"""Constants shared across the quiz client."""
