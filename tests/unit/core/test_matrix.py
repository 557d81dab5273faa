"""Unit tests for extra-keys matrix parsing."""

import json

import pytest

from extrakeys.core.errors import (
    ExtraKeysError,
    MalformedExtraKeysError,
    MixedTypeError,
    PerKeyConfigNotImplementedError,
    UnsupportedShapeError,
)
from extrakeys.core.matrix import (
    DEFAULT_EXTRA_KEYS,
    default_extra_keys,
    parse_extra_keys,
    parse_raw_matrix,
    try_parse_extra_keys,
)
from extrakeys.core.properties import parse_properties
from extrakeys.core.result import Err, Ok


def test_absent_value_yields_default_row() -> None:
    assert parse_extra_keys(None) == [["ESC", "CTRL", "ALT", "TAB", "-", "/", "|"]]


def test_default_matrix_is_a_fresh_copy() -> None:
    matrix = default_extra_keys()
    matrix[0].append("X")
    assert default_extra_keys() == [list(DEFAULT_EXTRA_KEYS[0])]


def test_flat_list_is_wrapped_as_one_row() -> None:
    row = ["a", "b", "/", "|"]
    assert parse_extra_keys(json.dumps(row)) == [row]


def test_nested_list_is_kept_as_rows() -> None:
    matrix = [["a", "b", "c"], ["d"], []]
    assert parse_extra_keys(json.dumps(matrix)) == matrix


def test_empty_array_yields_zero_rows() -> None:
    assert parse_extra_keys("[]") == []
    assert parse_extra_keys("[[]]") == [[]]


def test_leading_whitespace_is_ignored() -> None:
    assert parse_extra_keys('  \n ["a"]') == [["a"]]


def test_aliases_are_applied_to_every_cell() -> None:
    raw = '[["ESCAPE", "PAGE_UP"], ["RETURN", "x"]]'
    assert parse_extra_keys(raw) == [["ESC", "PGUP"], ["ENTER", "x"]]


def test_alias_resolution_is_skipped_by_raw_parse() -> None:
    assert parse_raw_matrix('["ESCAPE"]') == [["ESCAPE"]]


@pytest.mark.parametrize("raw", ['[["a"], "b"]', '["a", ["b"]]', "[[], 1]"])
def test_mixed_rows_and_keys_are_rejected(raw: str) -> None:
    with pytest.raises(MixedTypeError, match="list of mixed type"):
        parse_extra_keys(raw)


def test_object_inside_row_is_rejected() -> None:
    with pytest.raises(PerKeyConfigNotImplementedError):
        parse_extra_keys('[["a", {"popup": "x"}]]')


def test_object_in_flat_row_is_rejected() -> None:
    with pytest.raises(PerKeyConfigNotImplementedError):
        parse_extra_keys('["a", {"key": "b"}]')


def test_null_becomes_space() -> None:
    assert parse_extra_keys('[["a", null]]') == [["a", " "]]


def test_scalars_keep_their_json_spelling() -> None:
    assert parse_extra_keys("[1, 2.5, true, false]") == [["1", "2.5", "true", "false"]]


def test_bare_string_is_not_implemented() -> None:
    with pytest.raises(UnsupportedShapeError, match="Strings are not yet implemented"):
        parse_extra_keys("ESC CTRL ALT")


def test_object_is_not_implemented() -> None:
    with pytest.raises(
        UnsupportedShapeError, match="JSON Objects are not yet implemented"
    ):
        parse_extra_keys('{"rows": []}')


def test_unsupported_shapes_are_not_implemented_errors() -> None:
    with pytest.raises(NotImplementedError):
        parse_extra_keys("{}")
    with pytest.raises(NotImplementedError):
        parse_extra_keys('[[{"a": 1}]]')


def test_malformed_json_keeps_decoder_message() -> None:
    with pytest.raises(MalformedExtraKeysError) as exc_info:
        parse_extra_keys('["a", ')
    assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)
    assert str(exc_info.value).startswith("extra-keys: ")


def test_try_parse_returns_ok_for_valid_input() -> None:
    result = try_parse_extra_keys('["LT", "RT"]')
    assert isinstance(result, Ok)
    assert result.value == [["LEFT", "RIGHT"]]


def test_try_parse_returns_err_for_invalid_input() -> None:
    result = try_parse_extra_keys('[["a"], "b"]')
    assert isinstance(result, Err)
    assert isinstance(result.error, MixedTypeError)
    assert isinstance(result.error, ExtraKeysError)
    assert "mixed type" in result.message


def test_deeply_nested_input_is_malformed() -> None:
    raw = "[" * 100000 + "]" * 100000
    result = try_parse_extra_keys(raw)
    assert isinstance(result, Err)
    assert isinstance(result.error, MalformedExtraKeysError)


def test_escaped_astral_key_from_properties_is_one_token() -> None:
    props = parse_properties('extra-keys = ["\\ud83d\\ude00", "ESCAPE"]\n')
    assert parse_extra_keys(props["extra-keys"]) == [["\U0001F600", "ESC"]]
