"""Resolve a ``SymmetricDifferenceConfig`` from CLI or library input.

Files ending in ``.json`` are read as JSON and any other file as TOML. A
string that does not name a file is parsed inline, as JSON when it opens with
a bracket and as TOML otherwise.
"""

from __future__ import annotations

import json
import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, Union

from graphdiff.config import SymmetricDifferenceConfig

logger = logging.getLogger("graphdiff.runtime.config_loader")

ConfigSource = Union[str, Path, Dict[str, Any], None]


def _parse(text: str, as_json: bool) -> Dict[str, Any]:
    data = json.loads(text) if as_json else tomllib.loads(text)
    if not isinstance(data, dict):
        raise ValueError("Top-level configuration must be a mapping")
    return data


def load_symdiff_config(source: ConfigSource) -> SymmetricDifferenceConfig:
    """Load the operation config from ``None``, a mapping, a file or inline text.

    Raises:
        ValueError: If the document cannot be parsed or is not a mapping.
        TypeError: If the source type is not supported.
    """
    if source is None:
        return SymmetricDifferenceConfig.default()
    if isinstance(source, dict):
        return SymmetricDifferenceConfig.from_dict(source)
    if not isinstance(source, (str, Path)):
        raise TypeError(f"Unsupported config source type: {type(source)!r}")

    path = Path(source)
    if path.is_file():
        logger.info("Loading configuration from %s", path)
        data = _parse(path.read_text(encoding="utf-8"), path.suffix.lower() == ".json")
    else:
        text = str(source)
        data = _parse(text, text.lstrip().startswith(("{", "[")))
    return SymmetricDifferenceConfig.from_dict(data)


__all__ = ["load_symdiff_config"]
