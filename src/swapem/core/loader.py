#!/usr/bin/env python3
"""
SWAPEM DATA LOADER
------------------
Reads swap data from an inline JSON string or a JSON/YAML file and
hands it to the validator before anything else sees it.

Author: Swapem Team
Date: 2026-10-18
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional

from ruamel.yaml import YAML, YAMLError

from swapem.core.errors import ConfigError, DataLoadError
from swapem.core.models import SwapData
from swapem.validator.validator import SwapDataValidator

logger = logging.getLogger("swapem.loader")

YAML_SUFFIXES = (".yaml", ".yml")


def load_swap_data(data_file: Optional[str] = None, data_inline: Optional[str] = None) -> SwapData:
    """
    Loads and validates swap data. Exactly one source must be given.
    """
    if data_file is not None and data_inline is not None:
        raise ConfigError("Arguments data-file and data-inline are mutually exclusive.")
    if data_file is None and data_inline is None:
        raise ConfigError("Either data-file or data-inline must be specified.")

    if data_inline is not None:
        data = _parse_json(data_inline)
    else:
        path = Path(data_file).resolve()
        try:
            # BOM-aware, editors on Windows love to add one
            text = path.read_text(encoding="utf-8-sig")
        except OSError as e:
            raise DataLoadError(f"Unable to read data file '{data_file}': {e}") from e

        if path.suffix.lower() in YAML_SUFFIXES:
            data = _parse_yaml(text)
        else:
            data = _parse_json(text)
        logger.info(f"Loaded swap data from {path}")

    SwapDataValidator().ensure_valid(data)
    return data


def _parse_json(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise DataLoadError(f"Failed to parse JSON data: {e}") from e


def _parse_yaml(text: str) -> Any:
    yaml = YAML(typ="safe")
    try:
        return yaml.load(text)
    except YAMLError as e:
        raise DataLoadError(f"Failed to parse YAML data: {e}") from e
