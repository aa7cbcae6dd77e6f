"""Network configuration constants for the quiz client and practice backend."""

DEFAULT_API_BASE_URL: str = "http://localhost:8000/api/v1"
DEFAULT_REQUEST_TIMEOUT_SECONDS: float = 30.0

PRACTICE_HOST: str = "127.0.0.1"
PRACTICE_PORT: int = 8765

QUIZ_LIST_PATH: str = "/public/quizzes/"
QUIZ_DETAIL_PATH: str = "/public/quizzes/{quiz_id}/"
QUIZ_SUBMIT_PATH: str = "/public/quizzes/{quiz_id}/submit/"
RESULT_DETAIL_PATH: str = "/public/results/{session_id}/"
TOKEN_REFRESH_PATH: str = "/auth/token/refresh/"
