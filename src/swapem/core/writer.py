#!/usr/bin/env python3
"""
SWAPEM TEMPORARY FILE WRITER
----------------------------
Streams output into a sibling temporary file and only replaces the
target once the whole stream succeeded. A failed stream never leaves a
half-written target or a stray temporary file behind.

Author: Swapem Team
Date: 2026-10-18
"""

import logging
import os
from pathlib import Path
from typing import Optional, TextIO, Union

logger = logging.getLogger("swapem.writer")

TEMP_SUFFIX = ".swapem.tmp"


class TemporaryFileWriter:
    """
    Context manager for durable output:

        with TemporaryFileWriter("out.css") as writer:
            writer.write(chunk)
    """

    def __init__(self, target: Union[str, Path]):
        self.target = Path(target).resolve()
        self.temp_file = self.target.with_name(self.target.name + TEMP_SUFFIX)
        self._handle: Optional[TextIO] = None

    def __enter__(self) -> "TemporaryFileWriter":
        if not os.access(self.target.parent, os.W_OK):
            raise PermissionError(f"No write access to {self.target.parent}")
        self._handle = open(self.temp_file, "w", encoding="utf-8", newline="")
        return self

    def write(self, text: str) -> int:
        if self._handle is None:
            raise ValueError("TemporaryFileWriter is not open.")
        return self._handle.write(text)

    def __exit__(self, exc_type, exc, tb) -> bool:
        self._handle.close()
        self._handle = None

        if exc_type is not None:
            self._discard()
            return False

        try:
            os.replace(self.temp_file, self.target)
        except OSError as e:
            self._discard()
            raise IOError(f"Atomic write failed: {str(e)}") from e

        logger.debug(f"Replaced {self.target}")
        return False

    def _discard(self):
        if self.temp_file.exists():
            self.temp_file.unlink()
            logger.debug(f"Discarded {self.temp_file}")
