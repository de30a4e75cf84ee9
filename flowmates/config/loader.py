"""JSON config loading and writing for ~/.flowmates/."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from .models import FlowmatesConfig

logger = logging.getLogger(__name__)

CONFIG_DIR_NAME = ".flowmates"
DEFAULT_CONFIG_FILE = "config.json"


class ConfigError(Exception):
    """Raised when the flowmates config cannot be read or written."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(f"{path}: {message}")


def config_path(home: Path, filename: str = DEFAULT_CONFIG_FILE) -> Path:
    return home / CONFIG_DIR_NAME / filename


def load_flowmates_config(path: Path) -> FlowmatesConfig:
    """Load and validate a flowmates config file.

    Raises FileNotFoundError if the file is absent and ConfigError for any
    other read, parse or schema problem.
    """
    if not path.exists():
        raise FileNotFoundError(path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(path, f"unreadable ({e})") from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigError(path, f"invalid JSON ({e})") from e

    if not isinstance(data, dict):
        raise ConfigError(path, "expected a JSON object")

    try:
        return FlowmatesConfig(**data)
    except ValidationError as e:
        raise ConfigError(path, f"invalid config ({e.error_count()} error(s), repo_path required)") from e


def write_flowmates_config(
    path: Path, repo_path: Path, *, force: bool = False, dry_run: bool = False
) -> str:
    """Write a config pointing at repo_path. Returns the serialized payload.

    Refuses to overwrite an existing file unless force is set.
    """
    config = FlowmatesConfig(repo_path=str(repo_path.resolve()))
    payload = json.dumps(config.model_dump(), indent=2) + "\n"

    if path.exists() and not force:
        raise ConfigError(path, "already exists (use --force to overwrite)")

    if dry_run:
        logger.debug("dry-run: would write %s", path)
        return payload

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(payload, encoding="utf-8")
    except OSError as e:
        raise ConfigError(path, f"could not write ({e})") from e
    logger.info("wrote %s", path)
    return payload
