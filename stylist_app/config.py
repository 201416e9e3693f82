"""Configuration helpers for the outfit recommender."""

from dataclasses import dataclass
from pathlib import Path
import logging
import os
import random
from typing import Dict, Mapping, Optional

logger = logging.getLogger(__name__)

DEFAULT_MAX_COMBINATIONS = 10
DEFAULT_OUTFIT_COUNT = 3
DEFAULT_CONFIG_DIR = "config/environments"

# settings key -> environment variable overriding it
ENV_OVERRIDES = {
    "max_combinations": "OUTFIT_MAX_COMBINATIONS",
    "default_outfit_count": "OUTFIT_DEFAULT_COUNT",
    "random_seed": "OUTFIT_RANDOM_SEED",
    "log_level": "LOG_LEVEL",
}


def _settings_path(env_name: Optional[str]) -> Optional[Path]:
    explicit = os.getenv("APP_CONFIG_PATH")
    if explicit:
        return Path(explicit)
    if env_name:
        return Path(os.getenv("RECOMMENDER_CONFIG_DIR", DEFAULT_CONFIG_DIR)) / f"{env_name}.yaml"
    return None


def read_settings_file(path: Path) -> Dict[str, str]:
    """Read flat ``key: value`` lines; comments and nested blocks are ignored."""

    settings: Dict[str, str] = {}
    for raw_line in path.read_text().splitlines():
        if raw_line[:1].isspace():
            continue
        line = raw_line.split(" #", 1)[0].strip()
        if not line or line.startswith("#") or ":" not in line:
            continue
        key, value = (part.strip() for part in line.split(":", 1))
        if len(value) >= 2 and value[0] == value[-1] and value[0] in "'\"":
            value = value[1:-1]
        settings[key] = value
    return settings


def _positive_int(raw: Optional[str], default: int, key: str) -> int:
    if raw is None or not str(raw).strip():
        return default
    try:
        value = int(str(raw).strip())
    except ValueError:
        logger.warning("Ignoring non-integer %s=%r", key, raw)
        return default
    if value < 1:
        logger.warning("Ignoring non-positive %s=%r", key, raw)
        return default
    return value


def _optional_int(raw: Optional[str], key: str) -> Optional[int]:
    if raw is None or not str(raw).strip():
        return None
    try:
        return int(str(raw).strip())
    except ValueError:
        logger.warning("Ignoring non-integer %s=%r", key, raw)
        return None


@dataclass
class RecommenderConfig:
    """Configuration values for the recommendation engine.

    The engine itself performs no I/O, so configuration is limited to the
    generation bounds, the entropy seed and logging verbosity.
    """

    max_combinations: int = DEFAULT_MAX_COMBINATIONS
    default_outfit_count: int = DEFAULT_OUTFIT_COUNT
    random_seed: Optional[int] = None
    log_level: str = "INFO"
    environment: Optional[str] = None

    @classmethod
    def from_env(cls) -> "RecommenderConfig":
        """Build a config from a settings file merged with environment variables.

        The file is ``APP_CONFIG_PATH`` when set, otherwise
        ``<RECOMMENDER_CONFIG_DIR>/<APP_ENV>.yaml``. Environment variables win
        over file values; invalid numbers fall back to the defaults.
        """

        env_name = os.getenv("APP_ENV")
        path = _settings_path(env_name)
        file_settings = read_settings_file(path) if path and path.exists() else {}
        return cls.from_mapping(file_settings, os.environ, environment=env_name)

    @classmethod
    def from_mapping(
        cls,
        settings: Mapping[str, str],
        overrides: Mapping[str, str] | None = None,
        environment: Optional[str] = None,
    ) -> "RecommenderConfig":
        overrides = overrides or {}
        merged = {key: overrides.get(env_key, settings.get(key)) for key, env_key in ENV_OVERRIDES.items()}
        return cls(
            max_combinations=_positive_int(merged["max_combinations"], DEFAULT_MAX_COMBINATIONS, "max_combinations"),
            default_outfit_count=_positive_int(
                merged["default_outfit_count"], DEFAULT_OUTFIT_COUNT, "default_outfit_count"
            ),
            random_seed=_optional_int(merged["random_seed"], "random_seed"),
            log_level=str(merged["log_level"] or "INFO").upper(),
            environment=environment,
        )

    def build_rng(self) -> random.Random:
        """Return the entropy source used for sampling and description choice."""

        if self.random_seed is None:
            return random.Random()
        return random.Random(self.random_seed)
