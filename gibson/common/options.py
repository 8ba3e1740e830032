# gibson/common/options.py
#
# Frozen dataclass for parser configuration and the coercion helpers used
# to build it from loosely typed input (JSON, CLI args, env lookups).

from __future__ import annotations

import codecs
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

_DECODE_ERROR_HANDLERS = frozenset({"strict", "ignore", "replace", "backslashreplace", "surrogateescape"})


# =============================================================================
# Helper Functions
# =============================================================================


def safe_int(value: Any, default: int) -> int:
    """int conversion. Returns default for None/bool/float or on failure.

    Note:
        bool is a subclass of int but intentionally yields default, and so
        does float to avoid silent truncation.
    """
    if value is None:
        return default
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def safe_str(value: Any, default: str | None) -> str | None:
    """str conversion. Blank strings and None yield default."""
    if value is None:
        return default
    value = str(value).strip()
    return value or default


def safe_encoding(value: Any, default: str | None) -> str | None:
    """Codec name, or default if Python doesn't know the codec."""
    name = safe_str(value, None)
    if name is None:
        return default
    try:
        codecs.lookup(name)
    except LookupError:
        return default
    return name


# =============================================================================
# Options
# =============================================================================


@dataclass(frozen=True)
class ParseOptions:
    """How raw bytes are turned into GIB text.

    Attributes:
        encoding: Forced encoding. None means: try UTF-8, then detect.
        fallback_encoding: Used when detection gives no (known) answer.
        detect_sample_size: Number of leading bytes handed to chardet.
        decode_errors: Codec error handler for the final decode.
    """

    encoding: str | None = None
    fallback_encoding: str = "utf-8"
    detect_sample_size: int = 300
    decode_errors: str = "replace"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "ParseOptions":
        """Build options from a mapping, ignoring unknown keys and bad values."""
        defaults = cls()
        if not data:
            return defaults

        sample_size = safe_int(data.get("detect_sample_size"), defaults.detect_sample_size)
        if sample_size <= 0:
            sample_size = defaults.detect_sample_size

        decode_errors = safe_str(data.get("decode_errors"), defaults.decode_errors)
        if decode_errors not in _DECODE_ERROR_HANDLERS:
            decode_errors = defaults.decode_errors

        return cls(
            encoding=safe_encoding(data.get("encoding"), defaults.encoding),
            fallback_encoding=safe_encoding(data.get("fallback_encoding"), defaults.fallback_encoding)
            or defaults.fallback_encoding,
            detect_sample_size=sample_size,
            decode_errors=decode_errors,
        )
