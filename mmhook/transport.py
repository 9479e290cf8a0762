"""Blocking HTTP transport for webhook messages."""

import logging

import requests
from requests.exceptions import RequestException
from urllib3.exceptions import LocationParseError

from mmhook.exceptions import SerializationError, TransportError

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


def send_message(url: str, body: str) -> int:
    """POST a JSON body to a webhook URL and return the HTTP status code.

    Exactly one attempt is made. The call blocks until the server answers
    or the request fails; requests' defaults apply (no timeout).

    Any completed HTTP exchange is a success from the transport's point of
    view: 404 or 500 is returned like 200 and the caller decides what it
    means. The response body is discarded.

    Args:
        url: Webhook URL, e.g. https://chat.example.com/hooks/<id>
        body: JSON text, usually MessageBody.to_json()

    Returns:
        HTTP status code

    Raises:
        SerializationError: If the body cannot be encoded as UTF-8
        TransportError: If the request could not be completed
            (DNS, connection, TLS, timeout, malformed URL)
    """
    return post_json(url, body)


def post_json(url: str, body: str, timeout: float | None = None) -> int:
    """Same as send_message, with an optional request timeout in seconds."""
    logger.debug(f"POST {url} ({len(body)} chars)")

    try:
        data = body.encode("utf-8")
    except UnicodeEncodeError as e:
        raise SerializationError(f"Message body is not valid UTF-8 text: {e}") from e

    try:
        response = requests.post(
            url,
            data=data,
            headers=JSON_HEADERS,
            timeout=timeout,
        )
    # urllib3 raises LocationParseError for some hosts (e.g. empty labels)
    # without requests wrapping it.
    except (RequestException, LocationParseError) as e:
        raise TransportError(f"Error while sending HTTP POST to {url}: {e}", url=url) from e

    logger.debug(f"Webhook response: {response.status_code}")
    return response.status_code
