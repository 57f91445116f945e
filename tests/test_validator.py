import pytest

from swapem.core.errors import ConfigError, InvalidSwapData, TemplateTooFewTokens
from swapem.core.models import SwapConfig, SwapTemplate
from swapem.validator.validator import SwapDataValidator


@pytest.mark.parametrize("data", [
    {},
    {"color": "#ff0000"},
    {"color": {"red": "#ff0000", "shades": {"dark": "#800000"}}},
])
def test_accepts_string_mapping_trees(data):
    valid, message = SwapDataValidator().validate(data)
    assert valid is True, message


@pytest.mark.parametrize("data, fragment", [
    ("just a string", "root must be an object, got str"),
    ([{"a": "b"}], "root must be an object, got array"),
    ({"framerate": 60}, "'framerate' must be a string or an object, got number"),
    ({"config": {"enabled": True}}, "'config.enabled' must be a string or an object, got boolean"),
    ({"config": {"graphics": {"shadows": None}}}, "'config.graphics.shadows'"),
    ({"list": ["a", "b"]}, "got array"),
    ({"nested": {1: "one"}}, "Key 1 at 'nested' must be a string"),
])
def test_rejects_other_shapes(data, fragment):
    valid, message = SwapDataValidator().validate(data)

    assert valid is False
    assert fragment in message


def test_ensure_valid_raises():
    with pytest.raises(InvalidSwapData):
        SwapDataValidator().ensure_valid({"a": {"b": 1}})


def test_config_from_mapping():
    config = SwapConfig.from_mapping({"template": "<! . !>", "swapData": {"a": "b"}})

    assert config.template == SwapTemplate("<!", ".", "!>")
    assert config.swap_data == {"a": "b"}


@pytest.mark.parametrize("raw", [
    {"swapData": {}},
    {"template": "<! . !>"},
    {"template": 3, "swapData": {}},
])
def test_config_requires_both_fields(raw):
    with pytest.raises(ConfigError):
        SwapConfig.from_mapping(raw)


def test_config_surfaces_data_and_template_errors():
    with pytest.raises(InvalidSwapData):
        SwapConfig.from_mapping({"template": "<! . !>", "swapData": {"a": 1}})
    with pytest.raises(TemplateTooFewTokens):
        SwapConfig.from_mapping({"template": "<!>", "swapData": {}})
