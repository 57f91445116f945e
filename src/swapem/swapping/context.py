#!/usr/bin/env python3
"""
SWAPEM PROCESSING CONTEXT
-------------------------
The working record of one scanner. It holds the chunk being consumed,
the output produced for it so far and the accumulation buffer that lets
a state pick up exactly where it stopped when the chunk ran out.

Author: Swapem Team
Date: 2026-10-18
"""

from dataclasses import dataclass

from swapem.core.models import SwapData, SwapTemplate


@dataclass
class ProcessingContext:
    """
    Maintains the state of a single swap stream.

    Owned by exactly one SwapScanner. The template and swap data are
    shared references and are never mutated.
    """
    template: SwapTemplate                 # Directive syntax for this stream
    swap_data: SwapData                    # Validated data tree
    input: str = ""                        # The chunk currently being consumed
    cursor: int = 0                        # Next index of `input` to consume
    output: str = ""                       # Pending output for the current chunk
    state_buffer: str = ""                 # Belongs to the active state, not to the chunk
    chunks_seen: int = 0                   # Number of chunks fed so far
    directives_swapped: int = 0            # Number of directives resolved so far

    def load_chunk(self, chunk: str) -> None:
        """Points the cursor at the start of a new chunk."""
        self.input = chunk
        self.cursor = 0
        self.chunks_seen += 1

    def has_input(self) -> bool:
        return self.cursor < len(self.input)

    def next_char(self) -> str:
        """Consumes and returns the character under the cursor."""
        char = self.input[self.cursor]
        self.cursor += 1
        return char

    def peek_char(self) -> str:
        return self.input[self.cursor]

    def take_output(self) -> str:
        """Returns the pending output and clears it."""
        output, self.output = self.output, ""
        return output
