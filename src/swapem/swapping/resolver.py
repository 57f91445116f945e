#!/usr/bin/env python3
"""
SWAPEM RESOLVER - The Pathfinder
--------------------------------
Walks a swap data tree along a separator-joined swap path and returns
the leaf string it reaches, or fails with a precise diagnosis of where
the walk went wrong.

Author: Swapem Team
Date: 2026-10-18
"""

from collections.abc import Mapping

from swapem.core.errors import IndexIntoLeaf, NotALeaf, UnknownKey
from swapem.core.models import DataNode, SwapData


def resolve_value(swap_data: SwapData, path: str, separator: str) -> str:
    """
    Resolves `path` against `swap_data`.

    The path is split on literal occurrences of `separator`; segments
    are compared for exact equality. Surrounding whitespace must already
    be stripped by the caller.

    Example: resolve_value({"color": {"red": "#ff0000"}}, "color.red", ".")
    returns "#ff0000".
    """
    node: DataNode = swap_data

    for segment in path.split(separator):
        if isinstance(node, str):
            raise IndexIntoLeaf(
                f'Tried to index into a leaf value in path "{path}"', path
            )

        if not isinstance(node, Mapping) or segment not in node:
            raise UnknownKey(
                f'Tried to index with a non-existent key "{segment}" in path "{path}"',
                path,
                segment=segment,
            )
        node = node[segment]

    if not isinstance(node, str):
        raise NotALeaf(f'Value path "{path}" didn\'t reach a leaf value', path)

    return node
