import re

from flask import abort, request
from werkzeug.exceptions import MethodNotAllowed
from werkzeug.routing import BaseConverter


_INTEGER = re.compile(r"-?[0-9]+")

# SQLite INTEGER is a signed 64-bit value.
INT_MIN = -(2**63)
INT_MAX = 2**63 - 1


class IdSegmentConverter(BaseConverter):
    """Last path segment of an item URL, possibly empty.

    Matching the empty segment lets ``/api/books/`` reach the item views and
    fail id parsing, instead of being a separate rule that werkzeug would
    redirect the bare collection path to.
    """

    regex = "[^/]*"


def parse_id(raw, label="ID"):
    """Turn a path or query segment into an integer id, or abort with 400."""
    if raw is None or not _INTEGER.fullmatch(raw):
        abort(400, description=f"Invalid {label}")
    value = int(raw)
    if not INT_MIN <= value <= INT_MAX:
        abort(400, description=f"Invalid {label}")
    return value


def reject_method(raw_id, allowed):
    """The id is checked before the method, so a bad id wins over a 405."""
    parse_id(raw_id)
    raise MethodNotAllowed(valid_methods=allowed)


def json_body():
    """Return the request body as a dict; anything else is a 400."""
    data = request.get_json(force=True, silent=True)
    if not isinstance(data, dict):
        abort(400, description="Invalid JSON body")
    return data


def int_field(data, key):
    value = data.get(key)
    if value is None:
        return 0
    # bool is an int subclass but not a JSON number.
    if isinstance(value, bool) or not isinstance(value, int):
        abort(400, description=f"Field '{key}' must be an integer")
    if not INT_MIN <= value <= INT_MAX:
        abort(400, description=f"Field '{key}' is out of range")
    return value


def str_field(data, key):
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        abort(400, description=f"Field '{key}' must be a string")
    return value
