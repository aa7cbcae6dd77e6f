"""HTTP client for the quiz backend's public endpoints."""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from dataclasses import dataclass

import httpx
from pydantic import ValidationError

from quiz_taker.client.schemas import (
    parse_quiz,
    parse_quiz_list,
    parse_quiz_result,
    unwrap_envelope,
)
from quiz_taker.constants.network_constants import (
    DEFAULT_API_BASE_URL,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    QUIZ_DETAIL_PATH,
    QUIZ_LIST_PATH,
    QUIZ_SUBMIT_PATH,
    RESULT_DETAIL_PATH,
    TOKEN_REFRESH_PATH,
)
from quiz_taker.core.models import Quiz, QuizResult, QuizSummary, SubmissionPayload

logger = logging.getLogger(__name__)


class QuizApiError(Exception):
    """Raised when the backend rejects a request or answers with garbage."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: dict[str, list[str]] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details or {}


class QuizNotFoundError(QuizApiError):
    """The requested quiz or result does not exist."""


class NetworkError(QuizApiError):
    """The backend could not be reached."""


@dataclass(slots=True)
class TokenStore:
    """Bearer tokens for authenticated calls. Owned by whoever builds the client."""

    access_token: str | None = None
    refresh_token: str | None = None

    def clear(self) -> None:
        self.access_token = None
        self.refresh_token = None


class RefreshingTokenAuth(httpx.Auth):
    """Bearer auth that survives one expired access token per request.

    On a 401 the refresh token is exchanged once and the original request is
    replayed once. If the refresh or the replay fails, the tokens are dropped
    and ``on_logout`` is called.
    """

    requires_response_body = True

    def __init__(
        self,
        tokens: TokenStore,
        refresh_url: str,
        on_logout: Callable[[], None] | None = None,
    ) -> None:
        self._tokens = tokens
        self._refresh_url = refresh_url
        self._on_logout = on_logout

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        if self._tokens.access_token:
            request.headers["Authorization"] = f"Bearer {self._tokens.access_token}"
        response = yield request

        if response.status_code != 401 or not self._tokens.refresh_token:
            return

        refresh_response = yield httpx.Request(
            "POST",
            self._refresh_url,
            json={"refresh": self._tokens.refresh_token},
        )
        access_token = _extract_access_token(refresh_response)
        if access_token is None:
            logger.warning("Token refresh failed with status %s", refresh_response.status_code)
            self._force_logout()
            return

        self._tokens.access_token = access_token
        request.headers["Authorization"] = f"Bearer {access_token}"
        replay_response = yield request
        if replay_response.status_code == 401:
            self._force_logout()

    def _force_logout(self) -> None:
        self._tokens.clear()
        if self._on_logout is not None:
            self._on_logout()


def _extract_access_token(response: httpx.Response) -> str | None:
    if response.status_code != 200:
        return None
    try:
        body = unwrap_envelope(response.json())
    except ValueError:
        return None
    if isinstance(body, dict):
        access = body.get("access") or body.get("access_token")
        if isinstance(access, str) and access:
            return access
    return None


def _error_from_response(response: httpx.Response) -> QuizApiError:
    try:
        body = response.json()
    except ValueError:
        body = {}
    if not isinstance(body, dict):
        body = {}
    server_message = body.get("message") or body.get("detail")
    if not isinstance(server_message, str):
        server_message = None
    details = body.get("details") if isinstance(body.get("details"), dict) else None

    status = response.status_code
    if status == 400:
        if details:
            parts = [
                f"{field}: {message}"
                for field, messages in details.items()
                for message in (messages if isinstance(messages, list) else [messages])
            ]
            return QuizApiError("; ".join(parts), status, details)
        return QuizApiError(server_message or "Bad request", status)
    if status == 403:
        return QuizApiError("You do not have permission to perform this action", status)
    if status == 404:
        return QuizNotFoundError("Resource not found", status)
    if status == 500:
        return QuizApiError("Internal server error. Please try again later.", status)
    return QuizApiError(server_message or "An error occurred", status)


class ApiClient:
    """Synchronous client for the public quiz endpoints.

    Pass ``http_client`` to reuse an existing :class:`httpx.Client` (for
    instance a FastAPI ``TestClient``); its base URL is then used as-is.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_API_BASE_URL,
        *,
        timeout: float = DEFAULT_REQUEST_TIMEOUT_SECONDS,
        tokens: TokenStore | None = None,
        on_logout: Callable[[], None] | None = None,
        transport: httpx.BaseTransport | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        self.tokens = tokens or TokenStore()
        if http_client is None:
            http_client = httpx.Client(base_url=base_url, timeout=timeout, transport=transport)
        self._client = http_client
        refresh_url = str(self._client.base_url).rstrip("/") + TOKEN_REFRESH_PATH
        self._client.auth = RefreshingTokenAuth(self.tokens, refresh_url, on_logout)

    @property
    def base_url(self) -> str:
        return str(self._client.base_url)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> ApiClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def list_quizzes(self) -> list[QuizSummary]:
        body = self._request("GET", QUIZ_LIST_PATH)
        return self._parse(parse_quiz_list, body)

    def fetch_quiz(self, quiz_id: int) -> Quiz:
        body = self._request("GET", QUIZ_DETAIL_PATH.format(quiz_id=quiz_id))
        return self._parse(parse_quiz, body)

    def submit_quiz(self, quiz_id: int, payload: SubmissionPayload) -> QuizResult:
        body = self._request(
            "POST",
            QUIZ_SUBMIT_PATH.format(quiz_id=quiz_id),
            json=payload.to_wire(),
        )
        return self._parse(parse_quiz_result, body)

    def fetch_result(self, session_id: str) -> QuizResult:
        body = self._request("GET", RESULT_DETAIL_PATH.format(session_id=session_id))
        return self._parse(parse_quiz_result, body)

    def _request(self, method: str, path: str, **kwargs: object) -> object:
        logger.debug("%s %s", method, path)
        try:
            response = self._client.request(method, path, **kwargs)
        except httpx.TransportError as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            raise NetworkError("Network error. Please check your connection.") from exc

        if response.is_error:
            error = _error_from_response(response)
            logger.warning("%s %s returned %s: %s", method, path, response.status_code, error)
            raise error

        try:
            body = response.json()
        except ValueError as exc:
            raise QuizApiError("Malformed response from server", response.status_code) from exc
        if isinstance(body, dict) and body.get("error") is True:
            raise QuizApiError(body.get("message") or "An error occurred", body.get("status_code"))
        return body

    @staticmethod
    def _parse(parser: Callable[[object], object], body: object):
        try:
            return parser(body)
        except ValidationError as exc:
            raise QuizApiError(f"Malformed response from server: {exc.error_count()} error(s)") from exc
