"""Configuration loader — edgepath.yml parsing and defaults.

Each top-level section (``csv``, ``search``) is validated on its own. A bad
section falls back to its defaults without discarding the others.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pathlib import Path

import yaml
from pydantic import BaseModel, ValidationError

from edgepath.logger import logger
from edgepath.model import CsvConfig, EdgePathConfig, SearchConfig

SECTIONS: dict[str, type[BaseModel]] = {
    "csv": CsvConfig,
    "search": SearchConfig,
}


def load_config(path: Path | None = None) -> EdgePathConfig:
    """Load config from YAML file, or return defaults if no path given."""
    if path is None:
        logger.debug("No config file provided, using defaults")
        return EdgePathConfig()

    raw = _read_yaml(path)
    if raw is None:
        return EdgePathConfig()

    unknown = sorted(str(key) for key in raw if key not in SECTIONS)
    if unknown:
        logger.warning("Ignoring unknown section(s) in %s: %s", path, ", ".join(unknown))

    sections = {
        name: _load_section(path, name, model, raw.get(name))
        for name, model in SECTIONS.items()
    }
    return EdgePathConfig.model_validate(sections)


def _read_yaml(path: Path) -> dict[str, Any] | None:
    """Return the parsed mapping, or None when the file can't supply one."""
    from pathlib import Path as _Path

    try:
        text = _Path(str(path)).read_text(encoding="utf-8-sig")
    except FileNotFoundError:
        logger.warning("Config file not found: %s, using defaults", path)
        return None
    except OSError as e:
        logger.warning("Cannot read config file %s: %s, using defaults", path, e)
        return None

    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as e:
        logger.warning("Malformed YAML in %s: %s, using defaults", path, e)
        return None

    if raw is None:
        logger.debug("Config file %s is empty, using defaults", path)
        return None
    if not isinstance(raw, dict):
        logger.warning("Config file %s is not a YAML mapping, using defaults", path)
        return None
    return raw


def _load_section(
    path: Path, name: str, model: type[BaseModel], value: object
) -> BaseModel:
    if value is None:
        return model()
    if not isinstance(value, dict):
        logger.warning(
            "Section [%s] in %s is not a mapping, using [%s] defaults", name, path, name
        )
        return model()
    try:
        return model.model_validate(value)
    except ValidationError as e:
        problems = "; ".join(
            f"{name}.{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in e.errors()
        )
        logger.warning(
            "Invalid [%s] section in %s (%s), using [%s] defaults", name, path, problems, name
        )
        return model()
