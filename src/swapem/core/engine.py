#!/usr/bin/env python3
"""
SWAPEM ENGINE - The High Orchestrator
-------------------------------------
The SwapEngine wires an input source, the swap pipeline and an output
sink together. It reads input in bounded chunks, flushes every output
chunk as soon as it is produced and persists file output atomically.

Author: Swapem Team
Date: 2026-10-18
"""

import logging
import sys
import time
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, Optional, TextIO

from swapem.core.errors import ConfigError
from swapem.core.models import SwapConfig
from swapem.core.writer import TemporaryFileWriter
from swapem.swapping.pipeline import SwapPipeline

logger = logging.getLogger("swapem.engine")


class SwapEngine:
    """
    Principal orchestrator for one swap run. Owns the pipeline and
    reports what happened as a plain dictionary.
    """

    DEFAULT_CHUNK_SIZE = 65536

    def __init__(self, config: SwapConfig, chunk_size: int = DEFAULT_CHUNK_SIZE):
        if chunk_size < 1:
            raise ConfigError(f"Chunk size must be a positive integer, got {chunk_size}.")
        self.config = config
        self.chunk_size = chunk_size
        self.pipeline = SwapPipeline(config)

    def iter_input(self, input_file: Optional[str] = None, input_inline: Optional[str] = None,
                   stream: Optional[TextIO] = None) -> Iterator[str]:
        """
        Yields input chunks from a file, an inline string or a text
        stream (stdin when nothing else is given).
        """
        if input_file is not None and input_inline is not None:
            raise ConfigError("Arguments input-file and input-inline are mutually exclusive.")

        if input_inline is not None:
            yield input_inline
            return

        if input_file is not None:
            path = Path(input_file).resolve()
            with open(path, "r", encoding="utf-8", newline="") as handle:
                yield from self._read_chunks(handle)
            return

        yield from self._read_chunks(stream if stream is not None else sys.stdin)

    def run(self, chunks: Iterable[str], output: Optional[str] = None,
            stream: Optional[TextIO] = None) -> Dict[str, Any]:
        """
        Pipes `chunks` through the pipeline into `output` (a file path)
        or `stream` (stdout by default). Errors are logged and re-raised.
        """
        started = time.time()
        target = str(Path(output).resolve()) if output is not None else "<stdout>"
        logger.info(f"Swapping with template '{self.config.template}' into {target}")

        try:
            if output is not None:
                with TemporaryFileWriter(output) as writer:
                    for piece in self.pipeline.run(chunks):
                        writer.write(piece)
            else:
                sink = stream if stream is not None else sys.stdout
                for piece in self.pipeline.run(chunks):
                    if piece:
                        sink.write(piece)
                        sink.flush()
        except Exception as e:
            logger.error(f"Swap run failed after {self.pipeline.stats['chunks']} chunk(s): {e}")
            raise

        stats = self.pipeline.stats
        report = {
            "output": target,
            "written": output is not None,
            "chunks": stats["chunks"],
            "directives": stats["directives"],
            "elapsed": time.time() - started,
        }
        logger.info(f"Swapped {report['directives']} directive(s) across {report['chunks']} chunk(s)")
        return report

    def _read_chunks(self, handle: TextIO) -> Iterator[str]:
        while True:
            chunk = handle.read(self.chunk_size)
            if not chunk:
                break
            yield chunk
