"""Unit tests for identifier alias resolution."""

from extrakeys.core.aliases import CONTROL_CHAR_ALIASES, resolve_alias, resolve_matrix


def test_page_up_spellings_resolve_to_pgup() -> None:
    assert resolve_alias("PAGE_UP") == resolve_alias("PAGE-UP") == "PGUP"
    assert resolve_alias("PAGEUP") == resolve_alias("PAGE UP") == "PGUP"


def test_unknown_token_maps_to_itself() -> None:
    assert resolve_alias("HOME") == "HOME"
    assert resolve_alias("|") == "|"
    assert resolve_alias("") == ""


def test_resolution_is_idempotent() -> None:
    """No alias target is itself an alias source."""
    tokens = list(CONTROL_CHAR_ALIASES) + list(CONTROL_CHAR_ALIASES.values()) + ["x"]
    for token in tokens:
        assert resolve_alias(resolve_alias(token)) == resolve_alias(token)


def test_convenience_aliases_for_quoting_characters() -> None:
    assert resolve_alias("BACKSLASH") == "\\"
    assert resolve_alias("QUOTE") == '"'
    assert resolve_alias("APOSTROPHE") == "'"


def test_resolve_matrix_returns_new_matrix() -> None:
    """The input matrix is left untouched."""
    matrix = [["ESCAPE", "x"], ["RETURN"]]
    resolved = resolve_matrix(matrix)
    assert resolved == [["ESC", "x"], ["ENTER"]]
    assert matrix == [["ESCAPE", "x"], ["RETURN"]]


def test_no_alias_target_is_an_alias_source() -> None:
    assert not set(CONTROL_CHAR_ALIASES.values()) & set(CONTROL_CHAR_ALIASES)
