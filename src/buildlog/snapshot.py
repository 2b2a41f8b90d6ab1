"""Loading serialized build pass snapshots (JSON, YAML or TOML)."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import tomli
import yaml
from pydantic import ValidationError

from buildlog.core.types import BuildPass

logger = logging.getLogger(__name__)


def _load_json(text: str, source: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Failed to parse JSON build pass: {source}") from e


def _load_yaml(text: str, source: str) -> Any:
    try:
        return yaml.safe_load(text)
    except Exception as e:
        raise ValueError(f"Failed to parse YAML build pass: {source}") from e


def _load_toml(text: str, source: str) -> Any:
    try:
        return tomli.loads(text)
    except Exception as e:
        raise ValueError(f"Failed to parse TOML build pass: {source}") from e


def parse_build_pass(text: str, *, suffix: str, source: str = "<string>") -> BuildPass:
    """Parse a build pass snapshot from text.

    Parameters
    ----------
    text
        Serialized snapshot.
    suffix
        File extension including dot, selecting the format ('.json',
        '.yml', '.yaml' or '.toml').
    source
        Name of the snapshot for error messages.

    Returns
    -------
    BuildPass
        Validated snapshot.

    Raises
    ------
    ValueError
        If the format is unsupported, the text cannot be parsed, or the data
        does not describe a build pass.
    """
    suf = suffix.lower()
    if suf == ".json":
        data = _load_json(text, source)
    elif suf in (".yml", ".yaml"):
        data = _load_yaml(text, source)
    elif suf == ".toml":
        data = _load_toml(text, source)
    else:
        raise ValueError(f"Unsupported build pass format for {source}")

    try:
        build_pass = BuildPass.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid build pass in {source}: {e}") from e
    logger.debug(
        "Loaded build pass from %s: %d generated, %d copied",
        source,
        len(build_pass.generated_files),
        len(build_pass.copied_assets),
    )
    return build_pass


def load_build_pass(path: Path) -> BuildPass:
    """Read and parse a build pass snapshot file.

    Raises
    ------
    ValueError
        If the file cannot be read or parsed.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ValueError(f"Failed to read build pass: {path}") from e
    return parse_build_pass(text, suffix=path.suffix, source=str(path))
