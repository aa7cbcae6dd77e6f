"""FastAPI backend that serves practice quizzes from local text files.

It answers the same public endpoints as the real quiz backend so the desktop
client can be used offline. Grading is deliberately plain: a selectable
question is right when the chosen option is the keyed one, a text question
when the answer matches the keyed text ignoring case and surrounding spaces.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from threading import Lock, Thread
import time
from uuid import uuid4

from fastapi import Depends, FastAPI, HTTPException
import httpx
import uvicorn

from quiz_taker.client.schemas import QuizSubmissionSchema
from quiz_taker.constants.network_constants import PRACTICE_HOST, PRACTICE_PORT
from quiz_taker.core.models import QuestionType
from quiz_taker.core.participant_validation import validate_participant
from quiz_taker.core.quiz_importer import ImportedQuiz, PracticeQuestion, load_quiz_from_file

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


def _option_id(question_id: int, option_index: int) -> int:
    return question_id * 100 + option_index + 1


@dataclass(slots=True)
class _GradedAnswer:
    question: PracticeQuestion
    selected_option_text: str
    text_answer: str
    is_correct: bool

    @property
    def points_earned(self) -> float:
        return self.question.points if self.is_correct else 0.0

    @property
    def correct_option_text(self) -> str:
        if self.question.correct_index is not None:
            return self.question.options[self.question.correct_index]
        return self.question.correct_text or ""


class PracticeBackend:
    """Quizzes loaded from disk plus the results submitted against them."""

    def __init__(self, quizzes: list[ImportedQuiz]) -> None:
        self._lock = Lock()
        self._quizzes: dict[int, ImportedQuiz] = {
            index: quiz for index, quiz in enumerate(quizzes, start=1)
        }
        self._results: dict[str, dict[str, object]] = {}
        self._attempts: dict[tuple[int, str], int] = {}

    @classmethod
    def from_directory(cls, directory: Path) -> PracticeBackend:
        paths = sorted(directory.glob("*.txt"))
        quizzes = [load_quiz_from_file(path) for path in paths]
        logger.info("Loaded %d practice quiz(zes) from %s", len(quizzes), directory)
        return cls(quizzes)

    def list_quizzes(self) -> dict[str, object]:
        results = [
            {
                "id": quiz_id,
                "title": quiz.title,
                "description": quiz.description,
                "time_limit": quiz.time_limit_minutes,
                "total_questions": len(quiz.questions),
            }
            for quiz_id, quiz in self._quizzes.items()
        ]
        return {"count": len(results), "next": None, "previous": None, "results": results}

    def quiz_detail(self, quiz_id: int) -> dict[str, object]:
        quiz = self._get_quiz(quiz_id)
        questions = []
        for question_id, question in enumerate(quiz.questions, start=1):
            questions.append(
                {
                    "id": question_id,
                    "question_text": question.text,
                    "question_type": question.question_type.value,
                    "order": question_id,
                    "points": question.points,
                    "is_required": question.is_required,
                    "options": [
                        {"id": _option_id(question_id, index), "option_text": text, "order": index}
                        for index, text in enumerate(question.options)
                    ],
                }
            )
        return {
            "id": quiz_id,
            "title": quiz.title,
            "description": quiz.description,
            "time_limit": quiz.time_limit_minutes,
            "passing_score": quiz.passing_score,
            "show_results_immediately": True,
            "allow_retakes": True,
            "max_attempts": 0,
            "total_questions": len(quiz.questions),
            "total_points": sum(question.points for question in quiz.questions),
            "questions": questions,
        }

    def submit(self, quiz_id: int, submission: QuizSubmissionSchema) -> dict[str, object]:
        quiz = self._get_quiz(quiz_id)
        participant = validate_participant(submission.participant_name, submission.participant_email)

        answers_by_question = {}
        for answer in submission.answers:
            if not 1 <= answer.question_id <= len(quiz.questions):
                raise ValueError(f"Question {answer.question_id} is not part of quiz {quiz_id}.")
            answers_by_question[answer.question_id] = answer

        graded: list[_GradedAnswer] = []
        for question_id, question in enumerate(quiz.questions, start=1):
            answer = answers_by_question.get(question_id)
            graded.append(self._grade(question_id, question, answer))

        total_points = sum(question.points for question in quiz.questions)
        score = sum(item.points_earned for item in graded)
        percentage = round(score / total_points * 100, 2) if total_points else 0.0
        session_id = uuid4().hex

        with self._lock:
            attempt_key = (quiz_id, participant.email.lower())
            attempt_number = self._attempts.get(attempt_key, 0) + 1
            self._attempts[attempt_key] = attempt_number
            result = {
                "session_id": session_id,
                "quiz_title": quiz.title,
                "participant_name": participant.name,
                "score": score,
                "total_points": total_points,
                "percentage": percentage,
                "is_passed": percentage >= quiz.passing_score,
                "submitted_at": datetime.now(timezone.utc).isoformat(),
                "attempt_number": attempt_number,
                "correct_answers_count": sum(1 for item in graded if item.is_correct),
                "total_questions_count": len(graded),
                "answers": [
                    {
                        "question_text": item.question.text,
                        "question_type": item.question.question_type.value,
                        "selected_option_text": item.selected_option_text,
                        "text_answer": item.text_answer,
                        "is_correct": item.is_correct,
                        "points_earned": item.points_earned,
                        "correct_option_text": item.correct_option_text,
                        "explanation": item.question.explanation,
                    }
                    for item in graded
                ],
            }
            self._results[session_id] = result
        logger.info("Graded practice attempt %s for quiz %s: %.2f%%", session_id, quiz_id, percentage)
        return result

    def get_result(self, session_id: str) -> dict[str, object]:
        with self._lock:
            result = self._results.get(session_id)
        if result is None:
            raise KeyError(session_id)
        return result

    def _get_quiz(self, quiz_id: int) -> ImportedQuiz:
        quiz = self._quizzes.get(quiz_id)
        if quiz is None:
            raise KeyError(quiz_id)
        return quiz

    @staticmethod
    def _grade(question_id: int, question: PracticeQuestion, answer) -> _GradedAnswer:
        selected_text = ""
        text_answer = ""
        is_correct = False
        if answer is not None and question.question_type is not QuestionType.TEXT:
            chosen_index = None
            if answer.selected_option_id is not None:
                candidate = answer.selected_option_id - _option_id(question_id, 0)
                if 0 <= candidate < len(question.options):
                    chosen_index = candidate
            elif answer.text_answer and answer.text_answer.strip() in question.options:
                chosen_index = question.options.index(answer.text_answer.strip())
            if chosen_index is not None:
                selected_text = question.options[chosen_index]
                is_correct = chosen_index == question.correct_index
        elif answer is not None:
            text_answer = answer.text_answer or ""
            expected = question.correct_text
            is_correct = bool(expected) and text_answer.strip().casefold() == expected.strip().casefold()
        return _GradedAnswer(
            question=question,
            selected_option_text=selected_text,
            text_answer=text_answer,
            is_correct=is_correct,
        )


def _get_backend_dependency(backend: PracticeBackend):
    def dependency() -> PracticeBackend:
        return backend

    return dependency


def create_practice_app(backend: PracticeBackend) -> FastAPI:
    """Create a FastAPI application serving the given practice quizzes."""
    app = FastAPI(title="QuizTaker Practice API", version="0.1.0")
    backend_dep = _get_backend_dependency(backend)

    @app.get(f"{API_PREFIX}/public/quizzes/")
    def list_quizzes(store: PracticeBackend = Depends(backend_dep)) -> dict[str, object]:
        return store.list_quizzes()

    @app.get(f"{API_PREFIX}/public/quizzes/{{quiz_id}}/")
    def get_quiz(quiz_id: int, store: PracticeBackend = Depends(backend_dep)) -> dict[str, object]:
        try:
            return store.quiz_detail(quiz_id)
        except KeyError as exc:
            raise HTTPException(status_code=404, detail="Quiz not found.") from exc

    @app.post(f"{API_PREFIX}/public/quizzes/{{quiz_id}}/submit/", status_code=201)
    def submit_quiz(
        quiz_id: int,
        submission: QuizSubmissionSchema,
        store: PracticeBackend = Depends(backend_dep),
    ) -> dict[str, object]:
        try:
            result = store.submit(quiz_id, submission)
        except KeyError as exc:
            raise HTTPException(status_code=404, detail="Quiz not found.") from exc
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return {
            "error": False,
            "message": "Quiz submitted successfully",
            "data": result,
            "status_code": 201,
        }

    @app.get(f"{API_PREFIX}/public/results/{{session_id}}/")
    def get_result(session_id: str, store: PracticeBackend = Depends(backend_dep)) -> dict[str, object]:
        try:
            return store.get_result(session_id)
        except KeyError as exc:
            raise HTTPException(status_code=404, detail="Result not found.") from exc

    return app


def practice_base_url(host: str = PRACTICE_HOST, port: int = PRACTICE_PORT) -> str:
    return f"http://{host}:{port}{API_PREFIX}"


def start_practice_server(
    backend: PracticeBackend,
    host: str = PRACTICE_HOST,
    port: int = PRACTICE_PORT,
) -> Thread:
    """Start the practice backend in a background daemon thread."""
    app = create_practice_app(backend)
    config = uvicorn.Config(app=app, host=host, port=port, log_level="info")
    server = uvicorn.Server(config)

    def run_server() -> None:
        server.run()

    thread = Thread(target=run_server, name="PracticeApiServer", daemon=True)
    thread.start()
    return thread


def wait_for_practice_server(base_url: str, timeout: float = 5.0) -> bool:
    """Poll the quiz list until the server answers or ``timeout`` seconds pass."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        try:
            httpx.get(f"{base_url}/public/quizzes/", timeout=1.0)
        except httpx.TransportError:
            time.sleep(0.1)
            continue
        return True
    logger.warning("Practice server at %s did not come up within %.1fs", base_url, timeout)
    return False
