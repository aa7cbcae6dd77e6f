"""Quiz-related constants shared across UI and core layers."""

# A time limit of 1440 minutes is how the backend spells "no limit".
UNLIMITED_TIME_LIMIT_MINUTES: int = 1440
TIMER_TICK_INTERVAL_MS: int = 1000
LOW_TIME_WARNING_SECONDS: int = 300

TRUE_FALSE_CHOICES: tuple[str, str] = ("True", "False")
DEFAULT_PASSING_SCORE: float = 60.0
