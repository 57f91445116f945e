#!/usr/bin/env python3
"""
SWAPEM VALIDATOR - The Gatekeeper
---------------------------------
The Validator is the boundary check for swap data. It runs once,
before any text is processed, and guarantees that the data tree has
exactly the shape the resolver trusts: string leaves and mappings of
string keys. Nothing else is allowed anywhere in the tree.

Author: Swapem Team
Date: 2026-10-18
"""

import logging
from collections.abc import Mapping
from typing import Any, Tuple

from swapem.core.errors import InvalidSwapData

logger = logging.getLogger("swapem.validator")


class SwapDataValidator:
    """
    Enforces the closed string/mapping shape on a swap data tree.
    Provides the 'Self-Abort' signal before the scanner ever sees it.
    """

    def validate(self, data: Any) -> Tuple[bool, str]:
        """
        The primary integrity check. Returns (valid, message) where the
        message names the first offending node.
        """
        if not isinstance(data, Mapping):
            return False, f"Swap data root must be an object, got {self._type_name(data)}."

        return self._deep_validate(data, path="")

    def ensure_valid(self, data: Any) -> None:
        """Raises InvalidSwapData when validate() fails."""
        valid, message = self.validate(data)
        if not valid:
            logger.error(message)
            raise InvalidSwapData(message)

    def _deep_validate(self, node: Mapping, path: str) -> Tuple[bool, str]:
        """Recursively checks every key and child of a mapping node."""
        for key, value in node.items():
            if not isinstance(key, str):
                return False, f"Key {key!r} at '{path or '<root>'}' must be a string."

            location = f"{path}.{key}" if path else key

            if isinstance(value, str):
                continue
            if isinstance(value, Mapping):
                valid, err = self._deep_validate(value, location)
                if not valid:
                    return False, err
                continue

            return False, (
                f"Value at '{location}' must be a string or an object, "
                f"got {self._type_name(value)}."
            )

        return True, "Swap data passes structural integrity check."

    def _type_name(self, value: Any) -> str:
        """Names a value's type the way a JSON author would recognize it."""
        if value is None:
            return "null"
        if isinstance(value, bool):
            return "boolean"
        if isinstance(value, (int, float)):
            return "number"
        if isinstance(value, (list, tuple)):
            return "array"
        return type(value).__name__
