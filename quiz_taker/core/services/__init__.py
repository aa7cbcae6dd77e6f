"""Building blocks of a quiz session."""
