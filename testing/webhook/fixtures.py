"""Shared test fixtures for webhook client tests."""

import json
from typing import Any
from unittest.mock import MagicMock

import requests

JSON_UTF8 = "application/json; charset=utf-8"


def make_response(
    body: dict[str, Any] | str,
    status_code: int = 200,
    content_type: str | None = JSON_UTF8,
) -> MagicMock:
    """Build a mock HTTP response.

    :param body: JSON-serialisable dict or raw body text.
    :param status_code: HTTP status code.
    :param content_type: Content-Type header, or None to omit it.
    :returns: Mock standing in for requests.Response.
    """
    raw = json.dumps(body) if isinstance(body, dict) else body
    response = MagicMock()
    response.status_code = status_code
    response.content = raw.encode("utf-8")
    response.headers = {} if content_type is None else {"Content-Type": content_type}
    return response


def make_session(
    response: MagicMock | None = None,
    side_effect: Exception | None = None,
) -> MagicMock:
    """Build a mock HTTP session whose post returns the given response.

    :param response: Response returned by session.post.
    :param side_effect: Exception raised by session.post instead.
    :returns: Mock standing in for requests.Session.
    """
    session = MagicMock(spec=requests.Session)
    if side_effect is not None:
        session.post.side_effect = side_effect
    else:
        session.post.return_value = response
    return session


def posted_json(session: MagicMock) -> dict[str, Any]:
    """Decode the JSON body of the last request sent through a mock session.

    :param session: Mock session that received a post call.
    :returns: Decoded request body.
    """
    return json.loads(session.post.call_args.kwargs["data"].decode("utf-8"))
