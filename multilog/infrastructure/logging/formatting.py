"""Shared formatting for logger output.

Console loggers and file loggers render the same argument lists in two
different shapes:

- console output is a short list of items, the first one carrying the
  logger prefix (see ``format_console_args``);
- file output is one line per call, the level tag followed by the compact
  JSON encoding of every argument (see ``encode_file_line``).
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import asdict, is_dataclass
from datetime import date, datetime
import json
import math


def format_console_args(prefix: str, args: Sequence[object]) -> list[object]:
    """Build the items a console logger prints for one call.

    ``None`` arguments are dropped first. When the first remaining argument
    is text it is joined to the prefix; a single trailing argument is kept
    as is and two or more trailing arguments are grouped into one list.
    Otherwise the bare prefix is followed by the whole filtered list.

    Args:
        prefix: Logger prefix, used verbatim
        args: Arguments passed to the logging call

    Returns:
        One or two items to hand to the console
    """
    filtered = [arg for arg in args if arg is not None]
    if filtered and isinstance(filtered[0], str):
        head = f"{prefix} {filtered[0]}"
        if len(filtered) == 1:
            return [head]
        if len(filtered) == 2:
            return [head, filtered[1]]
        return [head, filtered[1:]]

    return [prefix, filtered]


def encode_args(args: Sequence[object]) -> str:
    """Encode an argument list as compact JSON, ``None`` kept as ``null``."""
    return json.dumps(
        [_to_jsonable(arg) for arg in args],
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
    )


def encode_file_line(level: str, args: Sequence[object]) -> str:
    return f"\n{level} {encode_args(args)}"


def _to_jsonable(value: object) -> object:
    # Non-finite floats become null; keys the encoder rejects become str(key).
    if value is None or isinstance(value, (str, bool, int)):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, Mapping):
        return {_to_json_key(key): _to_jsonable(item) for key, item in value.items()}
    if is_dataclass(value) and not isinstance(value, type):
        return _to_jsonable(asdict(value))
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_to_jsonable(item) for item in value]
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)


def _to_json_key(key: object) -> object:
    if key is None or isinstance(key, (str, bool, int)):
        return key
    if isinstance(key, float) and math.isfinite(key):
        return key
    return str(key)
