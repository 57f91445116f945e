#!/usr/bin/env python3
"""
SWAPEM SCANNER - The Sentinel
-----------------------------
A resumable state machine that finds swap directives in a text stream
that arrives in arbitrary chunks, down to a single character at a time.

Each state has a handler that consumes characters from the current chunk
and returns the next state. A handler that runs out of input returns its
own state and is simply called again when the next chunk arrives.

The accumulation buffer belongs to the active state:
  * a transition to a different state always clears it (_transition),
  * resuming the same state on a new chunk never touches it.

Author: Swapem Team
Date: 2026-10-18
"""

import logging
from enum import Enum
from typing import Callable, Dict

from swapem.core.errors import DirectiveTooLong, ScannerFailed, UnterminatedDirective
from swapem.core.models import SwapData, SwapTemplate
from swapem.swapping.context import ProcessingContext
from swapem.swapping.resolver import resolve_value

logger = logging.getLogger("swapem.scanner")


class ScanState(Enum):
    SCANNING = "scanning"                         # Looking for the start token
    SKIPPING_WHITESPACE = "skipping_whitespace"   # Dropping blanks after the start token
    IN_DIRECTIVE = "in_directive"                 # Collecting the path up to the end token


class SwapScanner:
    """
    Replaces swap directives in a chunked stream while passing every
    other character through untouched. One instance serves one stream.
    """

    # Guard against a missing end token buffering the rest of the stream
    MAX_DIRECTIVE_LENGTH = 1024

    def __init__(self, template: SwapTemplate, swap_data: SwapData):
        self.context = ProcessingContext(template=template, swap_data=swap_data)
        self._state = ScanState.SCANNING
        self._failed = False
        self._finished = False
        self._handlers: Dict[ScanState, Callable[[], ScanState]] = {
            ScanState.SCANNING: self._scan_for_start,
            ScanState.SKIPPING_WHITESPACE: self._skip_whitespace,
            ScanState.IN_DIRECTIVE: self._read_directive,
        }

    @property
    def state(self) -> ScanState:
        return self._state

    @property
    def failed(self) -> bool:
        return self._failed

    def feed(self, chunk: str) -> str:
        """
        Consumes every character of `chunk` and returns the output it
        produced. A directive left open at the end of the chunk is
        finished by later chunks; its value appears in their output.
        """
        self._ensure_open()
        if not isinstance(chunk, str):
            raise TypeError(f"Chunks must be str, got {type(chunk).__name__}")

        ctx = self.context
        ctx.load_chunk(chunk)

        try:
            while ctx.has_input():
                next_state = self._handlers[self._state]()
                if next_state is not self._state:
                    self._transition(next_state)
        except Exception:
            # Nothing from the failing chunk is emitted
            self._failed = True
            ctx.output = ""
            raise

        return ctx.take_output()

    def finish(self) -> str:
        """
        Signals the end of the stream. Returns a dangling partial start
        token verbatim; fails if a directive is still open.
        """
        self._ensure_open()
        ctx = self.context

        if self._state is not ScanState.SCANNING:
            self._failed = True
            raise UnterminatedDirective(
                f'Stream ended inside a swap directive opened with "{ctx.template.start}". '
                f'The directive end token "{ctx.template.end}" is likely missing.'
            )

        self._finished = True
        tail, ctx.state_buffer = ctx.state_buffer, ""
        return ctx.take_output() + tail

    def _ensure_open(self):
        if self._failed:
            raise ScannerFailed("The swap stream already failed and cannot accept more input.")
        if self._finished:
            raise ScannerFailed("The swap stream is already finished.")

    def _transition(self, next_state: ScanState):
        """Moves to a different state. The buffer never survives this."""
        logger.debug("%s -> %s", self._state.value, next_state.value)
        self.context.state_buffer = ""
        self._state = next_state

    # --- STATE HANDLERS ---

    def _scan_for_start(self) -> ScanState:
        """
        Matches the start token one character at a time. A breaking
        character flushes the partial match plus itself to the output.
        """
        ctx = self.context
        start = ctx.template.start

        while len(ctx.state_buffer) < len(start):
            if not ctx.has_input():
                return ScanState.SCANNING

            char = ctx.next_char()
            if char == start[len(ctx.state_buffer)]:
                ctx.state_buffer += char
            else:
                ctx.output += ctx.state_buffer + char
                ctx.state_buffer = ""

        return ScanState.SKIPPING_WHITESPACE

    def _skip_whitespace(self) -> ScanState:
        """Drops whitespace; the first other character is left for IN_DIRECTIVE."""
        ctx = self.context

        while ctx.has_input():
            if not ctx.peek_char().isspace():
                return ScanState.IN_DIRECTIVE
            ctx.cursor += 1

        return ScanState.SKIPPING_WHITESPACE

    def _read_directive(self) -> ScanState:
        """Collects characters until the buffer ends with the end token."""
        ctx = self.context
        end = ctx.template.end

        while ctx.has_input():
            ctx.state_buffer += ctx.next_char()

            if ctx.state_buffer.endswith(end):
                self._swap_directive()
                return ScanState.SCANNING

            if len(ctx.state_buffer) > self.MAX_DIRECTIVE_LENGTH:
                raise DirectiveTooLong(
                    f"Swap directive path is too long (over {self.MAX_DIRECTIVE_LENGTH} characters!). "
                    "The directive end token is likely missing."
                )

        return ScanState.IN_DIRECTIVE

    def _swap_directive(self):
        """Resolves the collected path and appends its value to the output."""
        ctx = self.context
        path = ctx.state_buffer[:-len(ctx.template.end)].strip()

        value = resolve_value(ctx.swap_data, path, ctx.template.separator)
        ctx.output += value
        ctx.directives_swapped += 1
        logger.debug("Swapped '%s' -> %r", path, value)
