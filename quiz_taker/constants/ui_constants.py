"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "QuizTaker"

JOIN_DESCRIPTION: str = "Pick a quiz and tell us who you are to begin."
JOIN_NAME_LABEL: str = "Your Name *"
JOIN_EMAIL_LABEL: str = "Your Email *"
JOIN_START_BUTTON: str = "Start Quiz"
JOIN_PREVIEW_BUTTON: str = "Preview"
JOIN_REFRESH_BUTTON: str = "Refresh Quizzes"
JOIN_RESULTS_BUTTON: str = "View Results"
JOIN_RESULTS_PLACEHOLDER: str = "Result session id"
JOIN_NO_QUIZZES: str = "No quizzes are available right now."

TAKE_PREV_BUTTON: str = "Previous"
TAKE_NEXT_BUTTON: str = "Next"
TAKE_SUBMIT_BUTTON: str = "Submit Quiz"
TAKE_SUBMITTING_BUTTON: str = "Submitting..."
TAKE_LEAVE_BUTTON: str = "Leave Quiz"
TAKE_TEXT_PLACEHOLDER: str = "Type your answer here..."
TAKE_ANSWERED_TEMPLATE: str = "{answered} of {total} answered"
TAKE_QUESTION_TEMPLATE: str = "Question {number} of {total}"
TAKE_PREVIEW_BADGE: str = "Preview Mode"
TIME_EXPIRED_MESSAGE: str = "Time is up. Your answers are being submitted."

RESULT_HOME_BUTTON: str = "Back to Home"
ERROR_HOME_BUTTON: str = "Back to Home"
QUIZ_LOAD_FAILED_MESSAGE: str = "Failed to load quiz. Please try again."
RESULT_LOAD_FAILED_MESSAGE: str = "Failed to load results. Please try again."
SUBMIT_FAILED_MESSAGE: str = "Failed to submit quiz. Please try again."
