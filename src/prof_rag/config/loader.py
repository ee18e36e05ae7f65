"""Configuration loading from TOML files and environment variables."""

import contextlib
import os
import tomllib
from pathlib import Path

from pydantic import ValidationError

from prof_rag.config.defaults import (
    DEFAULT_CONFIG_TOML,
    ENV_EMBEDDING_PROVIDER,
    ENV_LOG_LEVEL,
    ENV_OPENAI_API_KEY,
    ENV_PINECONE_API_KEY,
    ENV_PINECONE_INDEX_NAME,
    get_config_path,
)
from prof_rag.config.schema import EmbeddingProviderType, ProfRagConfig
from prof_rag.exceptions import ConfigError, ConfigNotFoundError, ConfigValidationError

# Process-wide configuration, loaded on first use
_config: ProfRagConfig | None = None


def load_config(
    config_path: Path | None = None,
    *,
    create_if_missing: bool = False,
) -> ProfRagConfig:
    """Load configuration from a TOML file and environment variables.

    A missing default file yields the built-in defaults. A missing file that
    was asked for explicitly is an error unless ``create_if_missing`` is set.

    Args:
        config_path: Path to config file. If None, uses the default path.
        create_if_missing: Write the default config when the file is absent.

    Returns:
        Loaded and validated configuration.

    Raises:
        ConfigNotFoundError: If an explicit config path does not exist.
        ConfigError: If the file cannot be read or parsed.
        ConfigValidationError: If configuration values are invalid.
    """
    path = config_path or get_config_path()

    if not path.exists():
        if create_if_missing:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(DEFAULT_CONFIG_TOML)
        elif config_path is not None:
            raise ConfigNotFoundError(f"Config file not found: {path}")
        else:
            return _apply_env_overrides(ProfRagConfig())

    try:
        config = ProfRagConfig.model_validate(_read_toml(path))
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid configuration in {path}: {e}") from e

    return _apply_env_overrides(config)


def _read_toml(path: Path) -> dict:
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e


def _apply_env_overrides(config: ProfRagConfig) -> ProfRagConfig:
    """Overlay PROFRAG_*, OPENAI_* and PINECONE_* variables onto ``config``."""
    provider_env = os.environ.get(ENV_EMBEDDING_PROVIDER)
    if provider_env:
        with contextlib.suppress(ValueError):
            config.embedding.provider = EmbeddingProviderType(provider_env.lower())

    log_level = os.environ.get(ENV_LOG_LEVEL)
    if log_level:
        config.logging.level = log_level.upper()

    # API keys from environment only fill gaps left by the file
    openai_key = os.environ.get(ENV_OPENAI_API_KEY)
    if openai_key and not config.embedding.api_key:
        config.embedding.api_key = openai_key

    pinecone_key = os.environ.get(ENV_PINECONE_API_KEY)
    if pinecone_key and not config.vector_store.api_key:
        config.vector_store.api_key = pinecone_key

    index_name = os.environ.get(ENV_PINECONE_INDEX_NAME)
    if index_name:
        config.vector_store.index_name = index_name

    return config


def get_config() -> ProfRagConfig:
    """The process-wide configuration, loaded from the default path on first call."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config(config_path: Path | None = None) -> ProfRagConfig:
    """Replace the process-wide configuration with a fresh load."""
    global _config
    _config = load_config(config_path)
    return _config


def reset_config() -> None:
    """Forget the loaded configuration so the next ``get_config`` reloads it."""
    global _config
    _config = None
