"""
Recipe Serialization & Persistence Utilities.

Converts recipe objects (Pydantic models or plain dicts) into YAML and back,
with a flushed, fsync'ed write so a generated recipe is never left half
written on disk.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from ..constants import LOGGER_NAME


# YAML ORCHESTRATION
def save_config_as_yaml(data: Any, yaml_path: Path, header: str = "") -> Path:
    """
    Serializes and persists configuration data to a YAML file.

    Args:
        data (Any): The configuration object to save. Supports objects with a
            'model_dump()' method or standard dictionaries.
        yaml_path (Path): The destination filesystem path.
        header (str): Optional comment block written before the YAML body.

    Returns:
        Path: The confirmed path where the YAML was written.

    Raises:
        ValueError: If the data structure cannot be serialized.
        OSError: If a filesystem-level error occurs (permissions, disk full).
    """
    logger = logging.getLogger(LOGGER_NAME)

    try:
        raw = data.model_dump(mode="json") if hasattr(data, "model_dump") else data
        final_data = _sanitize_for_yaml(raw)
    except (TypeError, ValueError) as e:
        logger.error(f"Serialization failed: object structure is incompatible. Error: {e}")
        raise ValueError(f"Could not serialize configuration object: {e}") from e

    try:
        _persist_yaml_atomic(final_data, yaml_path, header)
        logger.debug(f"Recipe written → {yaml_path.name}")
        return yaml_path
    except OSError as e:
        logger.error(f"IO Error: Could not write YAML to {yaml_path}. Error: {e}")
        raise


def load_config_from_yaml(yaml_path: Path) -> dict[str, Any]:
    """
    Loads a raw configuration dictionary from a YAML file.

    Args:
        yaml_path (Path): Path to the source YAML file.

    Returns:
        dict[str, Any]: The loaded mapping (empty for an empty file).

    Raises:
        FileNotFoundError: If the specified path does not exist.
        ValueError: If the document cannot be parsed or is not a mapping.
    """
    if not yaml_path.exists():
        raise FileNotFoundError(f"YAML recipe file not found at: {yaml_path}")

    with open(yaml_path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Malformed YAML recipe {yaml_path.name}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"YAML recipe must be a mapping, got {type(data).__name__}")
    return data


def _sanitize_for_yaml(obj: Any) -> Any:
    """
    Recursively converts non-serializable types into YAML-standard formats.

    - Path objects -> strings
    - Tuples -> lists
    - Dicts/Lists -> processed recursively
    """
    if isinstance(obj, dict):
        return {k: _sanitize_for_yaml(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_sanitize_for_yaml(i) for i in obj]
    if isinstance(obj, Path):
        return str(obj)
    return obj


def _persist_yaml_atomic(data: Any, path: Path, header: str = "") -> None:
    """Write YAML with directory creation, buffer flush and fsync."""
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        f.write(header)
        yaml.dump(data, f, default_flow_style=False, sort_keys=False, indent=4, allow_unicode=True)
        f.flush()
        os.fsync(f.fileno())
