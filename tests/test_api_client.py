import httpx
import pytest

from quiz_taker.client.api_client import (
    ApiClient,
    NetworkError,
    QuizApiError,
    QuizNotFoundError,
    TokenStore,
)
from quiz_taker.core.models import Answer, ParticipantInfo, SubmissionPayload

BASE_URL = "http://backend.test/api/v1"

RESULT_BODY = {
    "quiz_title": "Geography",
    "participant_name": "Ada",
    "score": 1,
    "total_points": 1,
    "percentage": 100,
    "is_passed": True,
    "answers": [],
}


def make_client(handler, **kwargs):
    return ApiClient(BASE_URL, transport=httpx.MockTransport(handler), **kwargs)


class TestRequests:
    def test_submit_posts_wire_payload_and_unwraps_envelope(self):
        seen = {}

        def handler(request):
            seen["url"] = str(request.url)
            seen["body"] = request.read()
            return httpx.Response(
                201,
                json={"error": False, "message": "Quiz submitted successfully", "data": RESULT_BODY,
                      "status_code": 201},
            )

        payload = SubmissionPayload(
            participant=ParticipantInfo(name="Ada", email="ada@example.com"),
            answers=(Answer(question_id=1, selected_option_id=3),),
        )
        with make_client(handler) as client:
            result = client.submit_quiz(4, payload)

        assert seen["url"] == f"{BASE_URL}/public/quizzes/4/submit/"
        assert b'"selected_option_id":3' in seen["body"].replace(b" ", b"")
        assert b"text_answer" not in seen["body"]
        assert result.is_passed

    def test_fetch_result_uses_session_path(self):
        def handler(request):
            assert request.url.path == "/api/v1/public/results/abc123/"
            return httpx.Response(200, json=RESULT_BODY)

        with make_client(handler) as client:
            assert client.fetch_result("abc123").quiz_title == "Geography"


class TestErrorMapping:
    @pytest.mark.parametrize(
        ("status", "body", "error_type", "message"),
        [
            (400, {"message": "Quiz is closed"}, QuizApiError, "Quiz is closed"),
            (400, {"details": {"participant_email": ["Enter a valid email."]}}, QuizApiError,
             "participant_email: Enter a valid email."),
            (403, {}, QuizApiError, "You do not have permission to perform this action"),
            (404, {"detail": "Not found."}, QuizNotFoundError, "Resource not found"),
            (500, {}, QuizApiError, "Internal server error. Please try again later."),
            (418, {"message": "teapot"}, QuizApiError, "teapot"),
        ],
    )
    def test_status_codes(self, status, body, error_type, message):
        with make_client(lambda request: httpx.Response(status, json=body)) as client:
            with pytest.raises(error_type) as excinfo:
                client.fetch_quiz(1)
        assert excinfo.value.message == message
        assert excinfo.value.status_code == status

    def test_error_flag_in_successful_envelope(self):
        body = {"error": True, "message": "Quiz is not active", "data": None, "status_code": 400}
        with make_client(lambda request: httpx.Response(200, json=body)) as client:
            with pytest.raises(QuizApiError, match="Quiz is not active"):
                client.fetch_quiz(1)

    def test_transport_failure_is_a_network_error(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        with make_client(handler) as client:
            with pytest.raises(NetworkError):
                client.list_quizzes()

    def test_malformed_body_is_reported(self):
        with make_client(lambda request: httpx.Response(200, json={"unexpected": True})) as client:
            with pytest.raises(QuizApiError, match="Malformed response"):
                client.fetch_quiz(1)


class TestTokenRefresh:
    def test_401_refreshes_once_and_replays(self):
        calls = []

        def handler(request):
            calls.append((request.url.path, request.headers.get("Authorization")))
            if request.url.path.endswith("/auth/token/refresh/"):
                return httpx.Response(200, json={"access": "fresh"})
            if request.headers.get("Authorization") == "Bearer fresh":
                return httpx.Response(200, json=RESULT_BODY)
            return httpx.Response(401, json={"detail": "expired"})

        tokens = TokenStore(access_token="stale", refresh_token="r1")
        with make_client(handler, tokens=tokens) as client:
            result = client.fetch_result("s1")

        assert result.quiz_title == "Geography"
        assert tokens.access_token == "fresh"
        assert [path for path, _ in calls] == [
            "/api/v1/public/results/s1/",
            "/api/v1/auth/token/refresh/",
            "/api/v1/public/results/s1/",
        ]

    def test_failed_refresh_logs_out_without_looping(self):
        calls = []
        logouts = []

        def handler(request):
            calls.append(request.url.path)
            return httpx.Response(401, json={"detail": "expired"})

        tokens = TokenStore(access_token="stale", refresh_token="r1")
        with make_client(handler, tokens=tokens, on_logout=lambda: logouts.append(True)) as client:
            with pytest.raises(QuizApiError):
                client.fetch_result("s1")

        assert len(calls) == 2
        assert logouts == [True]
        assert tokens.access_token is None and tokens.refresh_token is None

    def test_replay_rejected_again_logs_out(self):
        calls = []
        logouts = []

        def handler(request):
            calls.append(request.url.path)
            if request.url.path.endswith("/auth/token/refresh/"):
                return httpx.Response(200, json={"data": {"access": "fresh"}, "error": False})
            return httpx.Response(401, json={})

        tokens = TokenStore(access_token="stale", refresh_token="r1")
        with make_client(handler, tokens=tokens, on_logout=lambda: logouts.append(True)) as client:
            with pytest.raises(QuizApiError):
                client.fetch_result("s1")

        assert len(calls) == 3
        assert logouts == [True]

    def test_no_refresh_without_refresh_token(self):
        calls = []

        def handler(request):
            calls.append(request.url.path)
            return httpx.Response(401, json={})

        with make_client(handler) as client:
            with pytest.raises(QuizApiError):
                client.list_quizzes()
        assert len(calls) == 1
