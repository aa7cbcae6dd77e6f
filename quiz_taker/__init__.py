"""Desktop client for taking quizzes served by a quiz-management backend."""

__version__ = "0.1.0"
