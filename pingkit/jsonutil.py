"""JSON helpers: unescaped encoding, random strings and structural conversion."""

from __future__ import annotations

import json
import random
import string
from typing import Any

LETTERS = string.ascii_lowercase + string.ascii_uppercase + string.digits


def _encode_object(obj: Any) -> Any:
    to_dict = getattr(obj, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def _marshal(obj: Any, *, escape_html: bool = True, sort_keys: bool = False) -> str:
    """Encode ``obj`` compactly; objects with ``to_dict`` are encoded through it."""
    text = json.dumps(
        obj,
        ensure_ascii=False,
        separators=(",", ":"),
        sort_keys=sort_keys,
        default=_encode_object,
    )
    if escape_html:
        text = (
            text.replace("<", "\\u003c")
            .replace(">", "\\u003e")
            .replace("&", "\\u0026")
        )
    return text.replace("\u2028", "\\u2028").replace("\u2029", "\\u2029")


def to_json_no_escape(obj: Any) -> str:
    """Encode ``obj`` as JSON without HTML escaping, keys sorted, ending in a newline."""
    return _marshal(obj, escape_html=False, sort_keys=True) + "\n"


def rand_string(n: int) -> str:
    """Return a random string of ``n`` ASCII letters and digits."""
    return "".join(random.choices(LETTERS, k=n))


def convert(source: Any, target: type) -> Any:
    """Re-read ``source`` through JSON as an instance of ``target``.

    ``target`` is either a class with a ``from_dict`` classmethod or a plain
    JSON type such as ``dict`` or ``list``.
    """
    data = json.loads(to_json_no_escape(source))
    from_dict = getattr(target, "from_dict", None)
    if callable(from_dict):
        return from_dict(data)
    if isinstance(data, target):
        return data
    raise TypeError(
        f"cannot convert JSON {type(data).__name__} into {target.__name__}"
    )