# ----- decoder.py -----
import json
import re
import string
from typing import NamedTuple
from recovery.config import Config
from recovery.errors import (
    InputUnreadable, MalformedDocument, MalformedControlRecord, InvalidCoordinate,
    InvalidBase, InvalidEncodedValue, InsufficientPoints
)
from recovery.reporting import log

DIGITS = string.digits + string.ascii_lowercase
_DECIMAL = re.compile(r"[+-]?[0-9]+\Z")


class Point(NamedTuple):
    x: int
    y: int


def _is_int(value):
    return isinstance(value, int) and not isinstance(value, bool)


def parse_decimal(text):
    """Strict base-10 parse: optional sign and ASCII digits, nothing else."""
    if not isinstance(text, str) or not _DECIMAL.match(text):
        raise ValueError(f"not a decimal integer: {text!r}")
    return int(text)


def decode_value(value: str, base: int) -> int:
    """
    Decode a positional numeral in the given base.
    Digits are 0-9 then a-z (case-insensitive), with an optional leading sign.
    """
    if not Config.MIN_BASE <= base <= Config.MAX_BASE:
        raise ValueError(f"base {base} outside {Config.MIN_BASE}..{Config.MAX_BASE}")
    if not isinstance(value, str):
        raise ValueError(f"value must be a string, got {type(value).__name__}")

    digits = value[1:] if value[:1] in ("+", "-") else value
    if not digits:
        raise ValueError("empty value")

    allowed = DIGITS[:base]
    for ch in digits.lower():
        if ch not in allowed:
            raise ValueError(f"digit {ch!r} not valid in base {base}")
    return int(value, base)


def parse_control_record(document):
    """Return (k, n) from the reserved control record; n may be None."""
    control = document.get(Config.CONTROL_KEY)
    if not isinstance(control, dict):
        raise MalformedControlRecord(f"missing or invalid {Config.CONTROL_KEY!r} object")

    k = control.get("k")
    if not _is_int(k):
        raise MalformedControlRecord(f"threshold 'k' must be an integer, got {k!r}")
    if k < 1:
        raise MalformedControlRecord(f"threshold 'k' must be at least 1, got {k}")

    n = control.get("n")
    if n is not None and not _is_int(n):
        raise MalformedControlRecord(f"share count 'n' must be an integer, got {n!r}")
    return k, n


def _parse_base(x, raw):
    if _is_int(raw):
        base = raw
    else:
        try:
            base = parse_decimal(raw)
        except ValueError:
            raise InvalidBase(x, raw) from None
    if base not in Config.supported_bases():
        raise InvalidBase(x, raw)
    return base


def decode_record(x, record):
    """Decode one share record {"base": ..., "value": ...} into a Point."""
    if not isinstance(record, dict):
        raise InvalidEncodedValue(x, "share record is not an object")

    base = _parse_base(x, record.get("base"))
    try:
        y = decode_value(record.get("value"), base)
    except ValueError as e:
        raise InvalidEncodedValue(x, str(e)) from None
    return Point(x, y)


def parse_coordinate(key):
    try:
        return parse_decimal(key)
    except ValueError:
        raise InvalidCoordinate(key) from None


def select_candidates(records, k, order=None):
    """
    Pick k (x, record) pairs from (key, record) pairs.

    Document order parses only the first k keys. Sorted order needs every x,
    so every key must be a valid coordinate.
    """
    order = order or Config.SELECTION_ORDER
    if order == "document":
        return [(parse_coordinate(key), record) for key, record in records[:k]]
    if order == "sorted":
        candidates = [(parse_coordinate(key), record) for key, record in records]
        # sorted() is stable, so duplicate x values keep document order
        return sorted(candidates, key=lambda item: item[0])[:k]
    raise ValueError(f"Unknown selection order: {order}")


def decode_points(document, order=None):
    """
    Turn a parsed input document into exactly k points.

    The first k records under the selection order are decoded; the rest are
    ignored.
    """
    if not isinstance(document, dict):
        raise MalformedDocument("top-level JSON value must be an object")

    k, n = parse_control_record(document)
    log("Decoder", f"Threshold k={k}" + (f", declared shares n={n}" if n is not None else ""))

    records = [(key, record) for key, record in document.items() if key != Config.CONTROL_KEY]
    if len(records) < k:
        raise InsufficientPoints(len(records), k)

    points = [decode_record(x, record) for x, record in select_candidates(records, k, order)]
    log("Decoder", f"Selected x = {', '.join(str(p.x) for p in points)} from {len(records)} shares")
    return points


def load_document(path):
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except OSError as e:
        raise InputUnreadable(path, e.strerror or e) from e
    except UnicodeDecodeError as e:
        raise MalformedDocument(f"{path} is not valid text: {e}") from e

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedDocument(f"failed to parse JSON in {path}: {e}") from e


def read_points(path, order=None):
    """Load a share file and decode its points."""
    return decode_points(load_document(path), order)
