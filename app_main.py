"""Application entry point for the QuizTaker desktop client."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication

from quiz_taker.client.api_client import ApiClient
from quiz_taker.core.quiz_importer import QuizImportError
from quiz_taker.server.practice_server import (
    PracticeBackend,
    practice_base_url,
    start_practice_server,
    wait_for_practice_server,
)
from quiz_taker.ui.participant_main_window import ParticipantMainWindow
from quiz_taker.utils.logging_config import configure_logging
from quiz_taker.utils.settings import load_settings


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Take quizzes published by a quiz backend.")
    parser.add_argument(
        "--practice",
        metavar="DIR",
        type=Path,
        help="serve the .txt quizzes in DIR from a local practice backend",
    )
    parser.add_argument("--api-url", help="backend base URL (overrides QUIZ_TAKER_API_BASE_URL)")
    args, _qt_args = parser.parse_known_args(argv)
    return args


def main() -> None:
    """Initialize logging, optionally start the practice backend, and launch the Qt UI."""
    args = _parse_args(sys.argv[1:])
    settings = load_settings()
    logger = configure_logging(settings.log_level)
    logger.info("Starting QuizTaker...")

    base_url = args.api_url or settings.api_base_url
    if args.practice is not None:
        try:
            backend = PracticeBackend.from_directory(args.practice)
        except (OSError, QuizImportError) as exc:
            logger.error("Could not load practice quizzes from %s: %s", args.practice, exc)
            sys.exit(1)
        start_practice_server(backend, host=settings.practice_host, port=settings.practice_port)
        base_url = practice_base_url(settings.practice_host, settings.practice_port)
        wait_for_practice_server(base_url)
        logger.info("Practice backend available at %s", base_url)

    api = ApiClient(
        base_url,
        timeout=settings.request_timeout_seconds,
        on_logout=lambda: logger.warning("Authentication expired; continuing without tokens"),
    )

    app = QApplication(sys.argv)
    window = ParticipantMainWindow(api=api, practice_mode=args.practice is not None)
    window.resize(960, 720)
    window.show()
    exit_code = app.exec()
    api.close()
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
