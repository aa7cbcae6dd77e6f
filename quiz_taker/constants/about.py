"""Static metadata describing QuizTaker."""

APP_NAME = "QuizTaker"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "QuizTaker is a desktop client for taking quizzes published by a quiz-management "
    "backend. Enter your name and email, answer the questions before the timer runs out, "
    "and review your result when the backend has scored it."
)

PRACTICE_HELP_TEXT = (
    "Practice mode serves quizzes from local .txt files. Each file holds one quiz:\n\n"
    "TITLE: Radians\nTIMELIMIT: 10\nPASSING: 60\n\n"
    "Q: What is $30^o$ in radians?\n"
    "A: \\frac{\\pi}{2}\nB: \\frac{\\pi}{6}\n"
    "CORRECT: B\nPOINTS: 2\n\n"
    "Q: Explain what a radian is.\nTYPE: TEXT\nOPTIONAL"
)
