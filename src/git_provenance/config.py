"""Configuration loading and management for git-provenance.

Configuration sources are merged in priority order:
    1. Defaults (defined in AnalysisConfig / ThresholdConfig)
    2. Global config (~/.git-provenance.toml)
    3. Project config (./git-provenance.toml)
    4. Explicit config file
    5. Environment variables (GIT_PROVENANCE_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(workers=4)
    >>> config.workers
    4
    >>> config.thresholds.burst_window_minutes
    30
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from datetime import timedelta
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]

ENV_PREFIX = "GIT_PROVENANCE_"
CONFIG_FILENAME = "git-provenance.toml"


@dataclass(frozen=True)
class ThresholdConfig:
    """Detection thresholds for the commit and source indicators.

    These are the only tunable knobs of the engine. Detection logic reads
    them from here and never hard-codes the values.

    Attributes:
        Commit size:
            large_commit_lines: Absolute line total above which a commit is large
            large_commit_std_dev_multiplier: k in ``mean + k * stddev``
            avg_lines_high_threshold: Average lines per commit considered high
                (used in descriptions only)

        First commit:
            first_commit_single_threshold: Limit when the repo has one commit
            first_commit_absolute_threshold: Absolute limit for the first commit
            first_commit_multiplier: Multiple of the remaining commits' mean

        Timing:
            burst_window_minutes: Gap below which a commit is "bursty"

        Tests:
            low_test_coverage_threshold: Percentage considered thin test activity
                (used in descriptions only)
    """

    # === Commit size ===
    large_commit_lines: int = 500
    large_commit_std_dev_multiplier: float = 2.0
    avg_lines_high_threshold: int = 100

    # === First commit ===
    first_commit_single_threshold: int = 500
    first_commit_absolute_threshold: int = 1000
    first_commit_multiplier: float = 3.0

    # === Timing ===
    burst_window_minutes: int = 30

    # === Tests ===
    low_test_coverage_threshold: float = 20.0

    def __post_init__(self) -> None:
        """Validate threshold configuration."""
        non_negative = [
            "large_commit_lines",
            "large_commit_std_dev_multiplier",
            "avg_lines_high_threshold",
            "first_commit_single_threshold",
            "first_commit_absolute_threshold",
            "first_commit_multiplier",
        ]
        for field_name in non_negative:
            value = getattr(self, field_name)
            if value < 0:
                raise InvalidConfigError(field_name, value, "must be non-negative")

        if self.burst_window_minutes <= 0:
            raise InvalidConfigError(
                "burst_window_minutes", self.burst_window_minutes, "must be positive"
            )

        if not 0.0 <= self.low_test_coverage_threshold <= 100.0:
            raise InvalidConfigError(
                "low_test_coverage_threshold",
                self.low_test_coverage_threshold,
                "must be between 0 and 100",
            )

    @property
    def burst_window(self) -> timedelta:
        """Burst window as a timedelta."""
        return timedelta(minutes=self.burst_window_minutes)


DEFAULT_THRESHOLDS = ThresholdConfig()


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for an analysis run.

    Attributes:
        workers: Threads used to read and dispatch files (1 = sequential)
        max_file_size_mb: Files larger than this are skipped by the scanner
        git_max_commits: Maximum commits read from git log (0 = unlimited)
        verbosity: Logging verbosity level
        thresholds: Detection thresholds
    """

    workers: int = 1
    max_file_size_mb: float = 10.0
    git_max_commits: int = 0
    verbosity: Verbosity = "normal"

    thresholds: ThresholdConfig = field(default_factory=ThresholdConfig)

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.workers < 1:
            raise InvalidConfigError("workers", self.workers, "must be at least 1")
        if self.max_file_size_mb <= 0:
            raise InvalidConfigError("max_file_size_mb", self.max_file_size_mb, "must be positive")
        if self.git_max_commits < 0:
            raise InvalidConfigError("git_max_commits", self.git_max_commits, "must be non-negative")
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError(
                "verbosity", self.verbosity, "expected quiet, normal or verbose"
            )

    @property
    def max_file_size_bytes(self) -> int:
        """Get max file size in bytes."""
        return int(self.max_file_size_mb * 1024 * 1024)


def load_config(config_file: Optional[Path] = None, **overrides) -> AnalysisConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so unset CLI options keep file/env values.

    Returns:
        Validated AnalysisConfig instance

    Raises:
        ConfigurationError: If a config file or value is invalid
    """
    merged: dict = {}

    global_config = Path.home() / f".{CONFIG_FILENAME}"
    if global_config.exists():
        _merge(merged, _load_toml_file(global_config), global_config)

    project_config = Path.cwd() / CONFIG_FILENAME
    if project_config.exists():
        _merge(merged, _load_toml_file(project_config), project_config)

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        _merge(merged, _load_toml_file(config_file), config_file)

    _merge(merged, _load_env_vars(), None)

    if overrides.pop("verbose", False):
        overrides["verbosity"] = "verbose"
    if overrides.pop("quiet", False):
        overrides["verbosity"] = "quiet"
    _merge(merged, {k: v for k, v in overrides.items() if v is not None}, None)

    thresholds = merged.pop("thresholds", {})
    if isinstance(thresholds, dict):
        try:
            merged["thresholds"] = ThresholdConfig(**thresholds)
        except TypeError as e:
            raise ConfigurationError(f"Invalid [thresholds] config: {e}")
    elif isinstance(thresholds, ThresholdConfig):
        merged["thresholds"] = thresholds
    else:
        raise ConfigurationError("[thresholds] must be a table")

    try:
        return AnalysisConfig(**merged)
    except TypeError as e:
        raise ConfigurationError(f"Invalid configuration: {e}")


def _merge(target: dict, source: dict, origin: Optional[Path]) -> None:
    """Shallow-merge ``source`` into ``target``, merging the thresholds table."""
    if not isinstance(source, dict):
        raise ConfigurationError(f"Invalid config '{origin}': expected a table")
    for key, value in source.items():
        if key == "thresholds" and isinstance(value, dict):
            existing = target.get("thresholds")
            if isinstance(existing, dict):
                existing.update(value)
                continue
            target["thresholds"] = dict(value)
        else:
            target[key] = value


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from GIT_PROVENANCE_* environment variables.

    Top-level fields use ``GIT_PROVENANCE_<FIELD>`` (e.g.
    ``GIT_PROVENANCE_WORKERS=4``); thresholds use
    ``GIT_PROVENANCE_THRESHOLDS_<FIELD>`` (e.g.
    ``GIT_PROVENANCE_THRESHOLDS_BURST_WINDOW_MINUTES=15``).

    Returns:
        Dict of field_name -> parsed_value for any variables found.
    """
    result: dict[str, Any] = {}

    config_hints = get_type_hints(AnalysisConfig)
    for field_name in AnalysisConfig.__dataclass_fields__:
        if field_name == "thresholds":
            continue
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        parsed = _read_env(env_key, config_hints.get(field_name))
        if parsed is not None:
            result[field_name] = parsed

    threshold_hints = get_type_hints(ThresholdConfig)
    thresholds: dict[str, Any] = {}
    for field_name in ThresholdConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}THRESHOLDS_{field_name.upper()}"
        parsed = _read_env(env_key, threshold_hints.get(field_name))
        if parsed is not None:
            thresholds[field_name] = parsed
    if thresholds:
        result["thresholds"] = thresholds

    return result


def _read_env(env_key: str, type_hint: Any) -> Any:
    env_value = os.environ.get(env_key)
    if env_value is None or type_hint is None:
        return None
    try:
        return _parse_env_value(env_value, type_hint)
    except ValueError as e:
        raise ConfigurationError(f"Invalid {env_key}: {e}")


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the correct type.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is float:
        return float(value)

    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        ConfigurationError: If the file cannot be parsed
    """
    try:
        import tomllib
    except ModuleNotFoundError:
        import tomli as tomllib  # type: ignore

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}")
