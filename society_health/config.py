"""
Application configuration management.

Load order (each layer overrides the previous):
  1. ``config/default.toml``      — committed static defaults
  2. ``config/local.toml``        — optional local overrides (gitignored)
  3. ``.env``                     — local env overrides (gitignored)
  4. Environment variables        — ``SOCIETY_HEALTH_*`` prefix

Entry point: ``load_config(config_path=None) -> AppConfig``

The scoring engine itself only ever sees a ``ScoringConfig``; when none is
passed it uses ``ScoringConfig()``, whose values are the documented defaults
(weights from ``aggregator.DEFAULT_WEIGHTS``, thresholds 80 / 50 / 70).
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from society_health.recommendations.generator import ATTENTION_THRESHOLD
from society_health.scoring.aggregator import DEFAULT_WEIGHTS, validate_weights
from society_health.scoring.classifier import (
    CRITICAL_THRESHOLD,
    HEALTHY_THRESHOLD,
    MAX_HEALTHY_THRESHOLD,
    StatusThresholds,
)
from society_health.scoring.trend import DEFAULT_PERIOD, NOISE_THRESHOLD_PCT
from society_health.taxonomy.dimension_taxonomy import Dimension, parse_dimension

logger = logging.getLogger(__name__)

# ── Sub-config models ─────────────────────────────────────────────────────────


class ScoringConfig(BaseModel):
    """Weights and thresholds used by ``compute_health_score``.

    ``healthy_threshold`` values above 80 are clamped to 80 rather than
    rejected; the healthy band can be widened by configuration, never narrowed.
    """

    model_config = ConfigDict(frozen=True)

    weights: dict[Dimension, float] = Field(default_factory=lambda: dict(DEFAULT_WEIGHTS))
    healthy_threshold: float = HEALTHY_THRESHOLD
    critical_threshold: float = CRITICAL_THRESHOLD
    attention_threshold: float = ATTENTION_THRESHOLD
    trend_noise_threshold: float = NOISE_THRESHOLD_PCT
    default_period: str = DEFAULT_PERIOD

    @field_validator("weights", mode="before")
    @classmethod
    def parse_weight_keys(cls, v: Any) -> Any:
        if isinstance(v, dict):
            return {parse_dimension(str(k)): w for k, w in v.items()}
        return v

    @field_validator("weights")
    @classmethod
    def validate_weight_vector(cls, v: dict[Dimension, float]) -> dict[Dimension, float]:
        return validate_weights(v)

    @field_validator("healthy_threshold")
    @classmethod
    def cap_healthy_threshold(cls, v: float) -> float:
        if v > MAX_HEALTHY_THRESHOLD:
            logger.warning(
                "healthy_threshold %.1f exceeds %.1f; clamped", v, MAX_HEALTHY_THRESHOLD
            )
            return MAX_HEALTHY_THRESHOLD
        return v

    @field_validator("critical_threshold", "attention_threshold")
    @classmethod
    def validate_score_range(cls, v: float) -> float:
        if not 0.0 <= v <= 100.0:
            raise ValueError(f"threshold must be in [0, 100], got {v}.")
        return v

    @field_validator("trend_noise_threshold")
    @classmethod
    def validate_noise(cls, v: float) -> float:
        if v < 0:
            raise ValueError(f"trend_noise_threshold must be non-negative, got {v}.")
        return v

    @field_validator("default_period")
    @classmethod
    def validate_period_not_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("default_period must not be empty.")
        return v.strip()

    @model_validator(mode="after")
    def validate_band_ordering(self) -> "ScoringConfig":
        if self.critical_threshold >= self.healthy_threshold:
            raise ValueError(
                f"critical_threshold ({self.critical_threshold}) must be < "
                f"healthy_threshold ({self.healthy_threshold})."
            )
        return self

    @property
    def thresholds(self) -> StatusThresholds:
        return StatusThresholds(
            healthy=self.healthy_threshold, critical=self.critical_threshold
        )


class DataConfig(BaseModel):
    """Filesystem paths for snapshot inputs and result exports."""

    model_config = ConfigDict(frozen=True)

    snapshots_dir: str = "data/snapshots"
    outputs_dir: str = "data/outputs"


class LoggingConfig(BaseModel):
    """Logging output settings."""

    model_config = ConfigDict(frozen=True)

    level: str = "INFO"
    log_file: str = ""
    json_format: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"Log level must be one of {sorted(valid)}, got '{v}'.")
        return v.upper()


class AppConfig(BaseModel):
    """Complete application configuration — the single source of truth.

    CLI commands receive an ``AppConfig`` instance constructed by
    ``load_config()``, which merges TOML + .env + environment.
    """

    model_config = ConfigDict(frozen=True)

    scoring: ScoringConfig = ScoringConfig()
    data: DataConfig = DataConfig()
    logging: LoggingConfig = LoggingConfig()
    debug: bool = False


# ── Loader ────────────────────────────────────────────────────────────────────

_PROJECT_ROOT = Path(__file__).parent.parent


def _find_project_root() -> Path:
    """Walk up from this file to find the project root (contains pyproject.toml)."""
    candidate = Path(__file__).parent
    for _ in range(5):
        if (candidate / "pyproject.toml").exists():
            return candidate
        candidate = candidate.parent
    return _PROJECT_ROOT


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Load and merge application configuration.

    Args:
        config_path: Explicit path to a TOML config file. Defaults to
            ``<project_root>/config/default.toml``; if that default file does
            not exist (e.g. an installed wheel), built-in defaults are used.

    Returns:
        Fully validated ``AppConfig`` instance.

    Raises:
        FileNotFoundError: If an explicit ``config_path`` does not exist.
        pydantic.ValidationError: If merged config values fail validation.
    """
    root = _find_project_root()

    # 1. Load .env file (silently skip if missing)
    load_dotenv(dotenv_path=root / ".env", override=False)

    # 2. Load TOML config
    raw: dict[str, Any] = {}
    if config_path is None:
        config_path = root / "config" / "default.toml"
        if not config_path.exists():
            logger.debug("No default config at %s; using built-in defaults", config_path)
            return _build_app_config(_apply_env_overrides(raw))

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "rb") as f:
        raw = tomllib.load(f)

    # Also merge local.toml if present (gitignored local overrides)
    local_config_path = config_path.parent / "local.toml"
    if local_config_path.exists():
        with open(local_config_path, "rb") as f:
            local_raw: dict[str, Any] = tomllib.load(f)
        raw = _deep_merge(raw, local_raw)

    # 3. Apply SOCIETY_HEALTH_* environment variable overrides
    raw = _apply_env_overrides(raw)

    # 4. Build and validate AppConfig
    return _build_app_config(raw)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge ``override`` into ``base``."""
    result = dict(base)
    for key, val in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(val, dict):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


def _apply_env_overrides(raw: dict[str, Any]) -> dict[str, Any]:
    """Apply SOCIETY_HEALTH_* env vars to the raw config dict.

    Supported overrides:
      SOCIETY_HEALTH_LOG_LEVEL     → raw["logging"]["level"]
      SOCIETY_HEALTH_TREND_PERIOD  → raw["scoring"]["default_period"]
      SOCIETY_HEALTH_DEBUG         → raw["debug"]
    """
    if log_level := os.environ.get("SOCIETY_HEALTH_LOG_LEVEL"):
        raw.setdefault("logging", {})["level"] = log_level

    if period := os.environ.get("SOCIETY_HEALTH_TREND_PERIOD"):
        raw.setdefault("scoring", {})["default_period"] = period

    if debug := os.environ.get("SOCIETY_HEALTH_DEBUG"):
        raw["debug"] = debug.lower() in ("1", "true", "yes")

    return raw


def _build_app_config(raw: dict[str, Any]) -> AppConfig:
    """Map raw TOML dict to ``AppConfig`` model structure."""
    project = raw.pop("project", {})

    return AppConfig(
        scoring=ScoringConfig(**raw.get("scoring", {})),
        data=DataConfig(**raw.get("data", {})),
        logging=LoggingConfig(**raw.get("logging", {})),
        debug=raw.get("debug", project.get("debug", False)),
    )
