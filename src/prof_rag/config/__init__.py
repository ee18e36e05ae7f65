"""Configuration management."""

from prof_rag.config.loader import get_config, load_config, reload_config, reset_config
from prof_rag.config.schema import ProfRagConfig

__all__ = ["ProfRagConfig", "get_config", "load_config", "reload_config", "reset_config"]
