#!/usr/bin/env python3
"""
SWAPEM ERRORS
-------------
Exception taxonomy shared by the template parser, the data resolver,
the incremental scanner and the boundary collaborators (loader, CLI).

Every error is fatal to the stream it occurs in. Only the CLI turns
them into exit codes.

Author: Swapem Team
Date: 2026-10-18
"""

from typing import Optional


class SwapError(Exception):
    """Base class for every error raised by swapem."""


# --- Template ---

class TemplateError(SwapError):
    """Raised when a directive template string is malformed."""

    def __init__(self, message: str, raw: str):
        super().__init__(message)
        self.raw = raw


class TemplateTooFewTokens(TemplateError):
    pass


class TemplateTooManyTokens(TemplateError):
    pass


# --- Resolution ---

class ResolutionError(SwapError):
    """Raised when a swap path cannot be resolved to a leaf value."""

    def __init__(self, message: str, path: str, segment: Optional[str] = None):
        super().__init__(message)
        self.path = path
        self.segment = segment


class IndexIntoLeaf(ResolutionError):
    pass


class UnknownKey(ResolutionError):
    pass


class NotALeaf(ResolutionError):
    pass


# --- Scanning ---

class ScanError(SwapError):
    """Raised when the scanner cannot continue the stream."""


class DirectiveTooLong(ScanError):
    pass


class UnterminatedDirective(ScanError):
    pass


class ScannerFailed(ScanError):
    """The scanner already failed and refuses further input."""


# --- Boundary ---

class ConfigError(SwapError):
    """Missing or conflicting configuration."""


class DataLoadError(SwapError):
    """Swap data could not be read or parsed."""


class InvalidSwapData(SwapError):
    """Swap data does not have the string/mapping tree shape."""
