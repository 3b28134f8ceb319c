"""
Request parameter collection for the request log.

Merges query string, body fields and path captures into one mapping,
the way Redmine-style routing exposes them to a handler.
"""
import json
from typing import Any, Dict, Iterable, Mapping, Tuple
from urllib.parse import parse_qsl

JSON_MEDIA_TYPE = "application/json"
FORM_MEDIA_TYPE = "application/x-www-form-urlencoded"


def _media_type(content_type: str | None) -> str:
    if not content_type:
        return ""
    return content_type.split(";", 1)[0].strip().lower()


def parse_body_fields(body: bytes, content_type: str | None) -> Dict[str, Any]:
    """
    Parse request body fields for logging.

    Args:
        body: Raw request body
        content_type: Value of the Content-Type header, if any

    Returns:
        Parsed fields. JSON objects contribute their keys, any other JSON
        value lands under ``body``. Unparseable or unknown bodies give {}.
    """
    if not body:
        return {}

    media_type = _media_type(content_type)

    if media_type == JSON_MEDIA_TYPE or media_type.endswith("+json"):
        try:
            decoded = json.loads(body)
        except (UnicodeDecodeError, ValueError, RecursionError):
            return {}
        if isinstance(decoded, dict):
            return decoded
        return {"body": decoded}

    if media_type == FORM_MEDIA_TYPE:
        try:
            text = body.decode("utf-8")
        except UnicodeDecodeError:
            return {}
        return dict(parse_qsl(text, keep_blank_values=True))

    return {}


def collect_params(
    path_params: Mapping[str, Any],
    query_items: Iterable[Tuple[str, str]],
    body: bytes = b"",
    content_type: str | None = None,
) -> Dict[str, Any]:
    """
    Merge all request parameters into a single mapping.

    Precedence, lowest first: query string, body fields, path captures.
    Repeated keys keep their last value.
    """
    params: Dict[str, Any] = {}
    params.update(query_items)
    params.update(parse_body_fields(body, content_type))
    params.update(path_params)
    return params
