"""Tests for send_message."""

import pytest
import requests
import requests_mock

from mmhook.exceptions import SerializationError, TransportError
from mmhook.models import MessageBody
from mmhook.transport import post_json, send_message

WEBHOOK_URL = "https://mattermost.example.com/hooks/xxx"


def test_send_returns_200() -> None:
    """Test successful post returns the status code."""
    body = MessageBody(text="Hello, world!")

    with requests_mock.Mocker() as m:
        m.post(WEBHOOK_URL, status_code=200, text="ok")
        status = send_message(WEBHOOK_URL, body.to_json())

    assert status == 200
    assert m.call_count == 1


def test_send_sends_exact_json_body(requests_mock) -> None:
    """Test request body and content type."""
    requests_mock.post(WEBHOOK_URL, status_code=200)
    body = MessageBody(text="Hello, world!", channel="town-square")

    send_message(WEBHOOK_URL, body.to_json())

    request = requests_mock.last_request
    assert request.method == "POST"
    assert request.headers["Content-Type"] == "application/json"
    assert request.body == body.to_json().encode("utf-8")
    assert request.json() == {"text": "Hello, world!", "channel": "town-square"}


@pytest.mark.parametrize("status_code", [400, 403, 404, 500, 503])
def test_non_2xx_is_returned_not_raised(requests_mock, status_code: int) -> None:
    """Test that HTTP error statuses are ordinary results."""
    requests_mock.post(WEBHOOK_URL, status_code=status_code, text="Not Found")

    assert send_message(WEBHOOK_URL, '{"text":"hi"}') == status_code


def test_single_attempt_on_server_error(requests_mock) -> None:
    """Test that no retry happens after a 500."""
    requests_mock.post(WEBHOOK_URL, status_code=500)

    send_message(WEBHOOK_URL, '{"text":"hi"}')

    assert requests_mock.call_count == 1


def test_unreachable_host_raises_transport_error() -> None:
    """Test connection refused with nothing listening."""
    url = "http://127.0.0.1:1"

    with pytest.raises(TransportError) as exc_info:
        send_message(url, '{"text":"hi"}')

    assert exc_info.value.url == url
    assert isinstance(exc_info.value.__cause__, requests.exceptions.ConnectionError)


@pytest.mark.parametrize(
    "exc",
    [
        requests.exceptions.ConnectionError,
        requests.exceptions.SSLError,
        requests.exceptions.ConnectTimeout,
        requests.exceptions.ReadTimeout,
    ],
)
def test_transport_failures_are_wrapped(requests_mock, exc: type[Exception]) -> None:
    """Test that requests failures become TransportError."""
    requests_mock.post(WEBHOOK_URL, exc=exc)

    with pytest.raises(TransportError, match="Error while sending HTTP POST"):
        send_message(WEBHOOK_URL, '{"text":"hi"}')


@pytest.mark.parametrize(
    "url",
    ["not-a-url", "http://", "ftp://example.com/hooks/xxx", "http://a..b/"],
)
def test_malformed_url_raises_transport_error(url: str) -> None:
    """Test malformed or unsupported URLs."""
    with pytest.raises(TransportError):
        send_message(url, '{"text":"hi"}')


def test_post_json_passes_timeout(requests_mock) -> None:
    """Test that post_json forwards the timeout to requests."""
    requests_mock.post(WEBHOOK_URL, status_code=200)

    assert post_json(WEBHOOK_URL, "{}", timeout=5) == 200
    assert requests_mock.last_request.timeout == 5


def test_lone_surrogate_body_raises_serialization_error(requests_mock) -> None:
    """Test that a body that cannot be UTF-8 encoded is never sent."""
    requests_mock.post(WEBHOOK_URL, status_code=200)

    with pytest.raises(SerializationError, match="UTF-8"):
        send_message(WEBHOOK_URL, '{"text":"\ud800"}')

    assert requests_mock.call_count == 0
