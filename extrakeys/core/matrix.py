"""Parse the ``extra-keys`` property into a key matrix.

Accepted shapes:
- absent: the default single row
- ``["ESC", "TAB"]``: one row
- ``[["ESC", "TAB"], ["LEFT", "RIGHT"]]``: several rows

Bare strings and JSON objects are reserved and rejected.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

from extrakeys.core.aliases import resolve_matrix
from extrakeys.core.errors import (
    ExtraKeysError,
    MalformedExtraKeysError,
    MixedTypeError,
    PerKeyConfigNotImplementedError,
    UnsupportedShapeError,
)
from extrakeys.core.result import Err, Ok, Result
from extrakeys.models import KeyMatrix

logger = logging.getLogger(__name__)

DEFAULT_EXTRA_KEYS: tuple[tuple[str, ...], ...] = (
    ("ESC", "CTRL", "ALT", "TAB", "-", "/", "|"),
)

NULL_KEY = " "


def default_extra_keys() -> KeyMatrix:
    """Return a fresh copy of the default layout."""
    return [list(row) for row in DEFAULT_EXTRA_KEYS]


def _to_rows(value: list[Any]) -> list[list[Any]]:
    """Infer the matrix dimension of a decoded JSON array."""
    row_flags = [isinstance(element, list) for element in value]
    if all(row_flags):
        # already a matrix, or an empty array
        return value
    if not any(row_flags):
        return [value]
    raise MixedTypeError(
        "extra-keys: Contains a list of mixed type, "
        "please use a list of strings or a list of list of strings"
    )


def _to_key(element: Any) -> str:
    if isinstance(element, (dict, list)):
        raise PerKeyConfigNotImplementedError(
            "extra-keys: Per key configuration are not yet implemented"
        )
    if element is None:
        return NULL_KEY
    if isinstance(element, str):
        return element
    # number or boolean, spelled as it was written in JSON
    return json.dumps(element)


def parse_raw_matrix(raw: str) -> KeyMatrix:
    """Decode and shape-check ``raw`` without alias resolution."""
    stripped = raw.lstrip()
    if stripped.startswith("{"):
        raise UnsupportedShapeError("extra-keys: JSON Objects are not yet implemented")
    if not stripped.startswith("["):
        raise UnsupportedShapeError("extra-keys: Strings are not yet implemented")

    try:
        value = json.loads(stripped)
    except json.JSONDecodeError as e:
        raise MalformedExtraKeysError(f"extra-keys: {e}") from e
    except RecursionError as e:
        raise MalformedExtraKeysError("extra-keys: nested too deeply") from e

    return [[_to_key(element) for element in row] for row in _to_rows(value)]


def parse_extra_keys(raw: Optional[str]) -> KeyMatrix:
    """Parse the ``extra-keys`` property value into an alias-resolved matrix.

    Args:
        raw: Property text, or None when the property is not set.

    Returns:
        List of rows of key identifiers. Rows may differ in length.

    Raises:
        UnsupportedShapeError: Bare string or JSON object value.
        MixedTypeError: Top-level list mixes rows and keys.
        PerKeyConfigNotImplementedError: An object inside a row.
        MalformedExtraKeysError: Invalid JSON.
    """
    if raw is None:
        return default_extra_keys()
    matrix = resolve_matrix(parse_raw_matrix(raw))
    logger.debug("Parsed extra-keys: %d row(s)", len(matrix))
    return matrix


def try_parse_extra_keys(raw: Optional[str]) -> Result[KeyMatrix, ExtraKeysError]:
    """Like ``parse_extra_keys`` but returns ``Ok``/``Err`` instead of raising."""
    try:
        return Ok(parse_extra_keys(raw))
    except ExtraKeysError as e:
        return Err(e)
