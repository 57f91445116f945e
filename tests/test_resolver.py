import pytest

from swapem.core.errors import IndexIntoLeaf, NotALeaf, ResolutionError, UnknownKey
from swapem.swapping.resolver import resolve_value

COLORS = {"color": {"red": "#ff0000"}}


def test_resolves_leaf():
    assert resolve_value(COLORS, "color.red", ".") == "#ff0000"


def test_resolves_with_multi_character_separator():
    data = {"config": {"graphics": {"framerate": "60"}}}
    assert resolve_value(data, "config->graphics->framerate", "->") == "60"


def test_top_level_leaf():
    assert resolve_value({"name": "swapem"}, "name", ".") == "swapem"


def test_not_a_leaf():
    with pytest.raises(NotALeaf) as exc:
        resolve_value(COLORS, "color", ".")

    assert str(exc.value) == 'Value path "color" didn\'t reach a leaf value'
    assert exc.value.path == "color"


def test_unknown_key_names_segment_and_path():
    with pytest.raises(UnknownKey) as exc:
        resolve_value(COLORS, "color.blue", ".")

    assert str(exc.value) == 'Tried to index with a non-existent key "blue" in path "color.blue"'
    assert exc.value.segment == "blue"
    assert exc.value.path == "color.blue"


def test_index_into_leaf():
    with pytest.raises(IndexIntoLeaf) as exc:
        resolve_value(COLORS, "color.red.dark", ".")

    assert str(exc.value) == 'Tried to index into a leaf value in path "color.red.dark"'


def test_segments_match_exactly():
    """Whitespace inside a path is part of the segment names."""
    with pytest.raises(UnknownKey) as exc:
        resolve_value(COLORS, "color. red", ".")
    assert exc.value.segment == " red"


def test_empty_path_is_unknown_key():
    with pytest.raises(UnknownKey) as exc:
        resolve_value(COLORS, "", ".")
    assert exc.value.segment == ""


@pytest.mark.parametrize("path", ["color", "color.blue", "color.red.dark"])
def test_failures_share_a_base_class(path):
    with pytest.raises(ResolutionError):
        resolve_value(COLORS, path, ".")
