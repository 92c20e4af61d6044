"""sonar_review.config

Configuration for a review run.

Load order (later wins)
-----------------------
1) :class:`ReviewConfig` defaults
2) a YAML file (``sonar_review.yml`` in the project dir, or an explicit path)
3) environment variables (``SONAR_REVIEW_*``), after loading ``.env`` if present

The defaults mirror where the analysis engine writes its issues export when it
runs with its working directory set to ``.sonar``.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from dotenv import load_dotenv


DEFAULT_CONFIG_FILENAME = "sonar_review.yml"

ENV_VARS: Dict[str, str] = {
    "sonar_output_dir": "SONAR_REVIEW_OUTPUT_DIR",
    "sonar_report_file": "SONAR_REVIEW_REPORT_FILE",
    "project_dir": "SONAR_REVIEW_PROJECT_DIR",
    "output_path": "SONAR_REVIEW_OUTPUT",
    "log_level": "SONAR_REVIEW_LOG_LEVEL",
}

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class ConfigError(ValueError):
    """Raised when configuration values are missing or malformed."""


@dataclass(frozen=True)
class ReviewConfig:
    """Settings for locating the engine report and writing review output."""

    sonar_output_dir: str = ".sonar"
    sonar_report_file: str = "sonar-report.json"
    project_dir: str = "."
    output_path: Optional[str] = None
    log_level: str = "INFO"

    @property
    def report_path(self) -> Path:
        return Path(self.project_dir) / self.sonar_output_dir / self.sonar_report_file

    @property
    def log_level_value(self) -> int:
        level = str(self.log_level).upper()
        if level not in _LOG_LEVELS:
            raise ConfigError(f"log_level must be one of {sorted(_LOG_LEVELS)} (got {self.log_level!r})")
        return getattr(logging, level)

    def with_overrides(self, **overrides: Any) -> "ReviewConfig":
        """Return a copy with non-None overrides applied and validated."""
        values = {k: v for k, v in overrides.items() if v is not None}
        return _validated(replace(self, **values)) if values else self


def _validated(cfg: ReviewConfig) -> ReviewConfig:
    for name in ("sonar_output_dir", "sonar_report_file", "project_dir"):
        value = getattr(cfg, name)
        if not isinstance(value, str) or not value.strip():
            raise ConfigError(f"{name} must be a non-empty string (got {value!r})")
    if cfg.output_path is not None and not isinstance(cfg.output_path, str):
        raise ConfigError(f"output_path must be a string (got {cfg.output_path!r})")

    level = str(cfg.log_level).upper()
    if level not in _LOG_LEVELS:
        raise ConfigError(f"log_level must be one of {sorted(_LOG_LEVELS)} (got {cfg.log_level!r})")
    if level != cfg.log_level:
        cfg = replace(cfg, log_level=level)
    return cfg


def load_yaml_config(path: Path) -> Dict[str, Any]:
    """Read a YAML config file into a dict of ReviewConfig field values."""
    try:
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(f"Could not parse config file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")

    known = {f.name for f in fields(ReviewConfig)}
    unknown = sorted(str(k) for k in data if k not in known)
    if unknown:
        raise ConfigError(f"Unknown config keys in {path}: {', '.join(unknown)}")
    return dict(data)


def _env_values(environ: Mapping[str, str]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for field_name, var in ENV_VARS.items():
        raw = environ.get(var)
        if raw is not None and raw.strip():
            out[field_name] = raw.strip()
    return out


def load_config(
    config_path: Optional[Path] = None,
    *,
    project_dir: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
    dotenv_path: Optional[Path] = None,
) -> ReviewConfig:
    """Build a ReviewConfig from YAML + environment.

    An explicit *project_dir* wins over both sources.

    An explicit *config_path* must exist; the implicit
    ``<project_dir>/sonar_review.yml`` is optional.
    """
    base = Path(project_dir) if project_dir is not None else Path(".")

    if environ is None:
        load_dotenv(dotenv_path or (base / ".env"), override=False)
        environ = os.environ

    values: Dict[str, Any] = {}
    if config_path is not None:
        if not Path(config_path).is_file():
            raise ConfigError(f"Config file not found: {config_path}")
        values.update(load_yaml_config(Path(config_path)))
    else:
        implicit = base / DEFAULT_CONFIG_FILENAME
        if implicit.is_file():
            values.update(load_yaml_config(implicit))

    values.update(_env_values(environ))
    if project_dir is not None:
        values["project_dir"] = str(project_dir)
    return _validated(ReviewConfig(**values))
