#!/usr/bin/env python3
"""
SWAPEM CORE MODELS
------------------
Defines the fundamental data structures used across the swapem engine:
the directive template, the swap data tree and the session configuration.

Author: Swapem Team
Date: 2026-10-18
"""

from dataclasses import dataclass
from typing import Any, Mapping, Union

from swapem.core.errors import ConfigError, TemplateTooFewTokens, TemplateTooManyTokens
from swapem.validator.validator import SwapDataValidator

# A node is either a leaf string or a mapping of segment names to nodes.
DataNode = Union[str, Mapping[str, Any]]
SwapData = Mapping[str, DataNode]


@dataclass(frozen=True)
class SwapTemplate:
    """
    The token triple that defines swap directive syntax.

    With the template "<! . !>", the directive <!colors.red!> resolves
    the path "colors.red" using "." as the nesting separator.
    """
    start: str              # Token opening a directive
    separator: str          # Token separating swap path segments
    end: str                # Token closing a directive

    @classmethod
    def from_string(cls, raw: str) -> "SwapTemplate":
        """
        Parses a template in the format `<start> <separator> <end>`.
        Leading and trailing whitespace is ignored.
        """
        tokens = raw.split()

        if len(tokens) > 3:
            raise TemplateTooManyTokens(
                f'Invalid directive template "{raw}" has too many tokens.', raw
            )
        if len(tokens) < 3:
            raise TemplateTooFewTokens(
                f'Invalid directive template "{raw}" has too few tokens.', raw
            )

        start, separator, end = tokens
        return cls(start=start, separator=separator, end=end)

    def __str__(self) -> str:
        return f"{self.start} {self.separator} {self.end}"


@dataclass(frozen=True)
class SwapConfig:
    """
    Everything a processing session needs: the parsed template and
    an already validated data tree. Shared read-only by every scanner.
    """
    template: SwapTemplate
    swap_data: SwapData

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "SwapConfig":
        """
        Builds a config from its external form:
        {"template": "<! . !>", "swapData": {...}}
        """
        for field_name in ("template", "swapData"):
            if field_name not in raw:
                raise ConfigError(f"Missing required configuration field '{field_name}'.")

        template = raw["template"]
        if not isinstance(template, str):
            raise ConfigError("Configuration field 'template' must be a string.")

        swap_data = raw["swapData"]
        SwapDataValidator().ensure_valid(swap_data)

        return cls(template=SwapTemplate.from_string(template), swap_data=swap_data)
