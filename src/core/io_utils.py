"""
I/O utilities for configuration files and rendered output.
Writes go through a temp file + os.replace() so a crash never leaves a
half-written image or config behind.
"""
import os
import yaml
import tempfile
from pathlib import Path
from typing import Any, Callable, Dict, IO
import logging

logger = logging.getLogger(__name__)


def _atomic_write(filepath: Path, mode: str, writer: Callable[[IO], None]) -> None:
    """
    Run ``writer`` against a temp file next to ``filepath``, then swap it in.

    Raises:
        IOError: If any step fails (temp file is removed)
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    # Same directory keeps os.replace() on one filesystem
    fd, temp_path = tempfile.mkstemp(
        dir=filepath.parent,
        prefix=f".{filepath.stem}_",
        suffix=".tmp"
    )

    try:
        encoding = None if "b" in mode else "utf-8"
        with os.fdopen(fd, mode, encoding=encoding) as f:
            writer(f)

        os.replace(temp_path, filepath)
        logger.debug(f"Atomically wrote {filepath}")

    except Exception as e:
        try:
            os.unlink(temp_path)
        except OSError:
            pass
        logger.error(f"Failed to write {filepath}: {e}")
        raise IOError(f"Atomic write failed: {e}") from e


def atomic_write_yaml(filepath: Path, data: Dict[str, Any]) -> None:
    """
    Write YAML file atomically.

    Args:
        filepath: Target file path
        data: Dictionary to serialize as YAML

    Raises:
        IOError: If write operation fails
    """
    _atomic_write(
        filepath,
        "w",
        lambda f: yaml.safe_dump(data, f, default_flow_style=False, allow_unicode=True)
    )


def atomic_write_bytes(filepath: Path, payload: bytes) -> None:
    """
    Write binary payload (encoded image, SVG document) atomically.

    Args:
        filepath: Target file path
        payload: Raw bytes to store

    Raises:
        IOError: If write operation fails
    """
    _atomic_write(filepath, "wb", lambda f: f.write(payload))


def load_yaml(filepath: Path) -> Dict[str, Any]:
    """
    Load YAML configuration file.

    Args:
        filepath: Path to YAML file

    Returns:
        Parsed configuration dictionary

    Raises:
        FileNotFoundError: If file does not exist
        yaml.YAMLError: If file is malformed
    """
    filepath = Path(filepath)

    if not filepath.exists():
        raise FileNotFoundError(f"Config file not found: {filepath}")

    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
        logger.debug(f"Loaded {filepath}")
        return data if data is not None else {}

    except yaml.YAMLError as e:
        logger.error(f"Failed to parse {filepath}: {e}")
        raise
