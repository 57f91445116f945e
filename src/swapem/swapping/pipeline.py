#!/usr/bin/env python3
"""
SWAPEM SWAP PIPELINE - The Conductor
------------------------------------
Drives a fresh SwapScanner across a sequence of text chunks in strict
order. Every input chunk yields exactly one output chunk (possibly
empty); the end of the stream may yield one more with a dangling
partial start token.

Author: Swapem Team
Date: 2026-10-18
"""

from typing import Dict, Iterable, Iterator, Optional

from swapem.core.models import SwapConfig
from swapem.swapping.scanner import SwapScanner


class SwapPipeline:
    """
    The Orchestrator: one scanner per stream, chunks in, chunks out.
    Errors propagate out of the iterator and nothing follows them.
    """

    def __init__(self, config: SwapConfig):
        """
        Args:
            config: Parsed template plus validated swap data. Shared
                read-only by every stream this pipeline runs.
        """
        self.config = config
        self.scanner: Optional[SwapScanner] = None

    def run(self, chunks: Iterable[str]) -> Iterator[str]:
        """Lazily substitutes directives in `chunks`."""
        self.scanner = SwapScanner(self.config.template, self.config.swap_data)

        for chunk in chunks:
            yield self.scanner.feed(chunk)

        tail = self.scanner.finish()
        if tail:
            yield tail

    def swap_text(self, text: str) -> str:
        """Substitutes directives in a whole string."""
        return "".join(self.run([text]))

    @property
    def stats(self) -> Dict[str, int]:
        """Counters of the last (or current) run."""
        if self.scanner is None:
            return {"chunks": 0, "directives": 0}
        return {
            "chunks": self.scanner.context.chunks_seen,
            "directives": self.scanner.context.directives_swapped,
        }
