"""Default configuration values and paths."""

import os
from pathlib import Path
from typing import Final

DEFAULT_CONFIG_DIR: Final[Path] = Path.home() / ".config" / "prof-rag"
DEFAULT_CONFIG_FILE: Final[Path] = DEFAULT_CONFIG_DIR / "config.toml"

# Environment variable names
ENV_CONFIG_PATH: Final[str] = "PROFRAG_CONFIG"
ENV_LOG_LEVEL: Final[str] = "PROFRAG_LOG_LEVEL"
ENV_EMBEDDING_PROVIDER: Final[str] = "PROFRAG_EMBEDDING_PROVIDER"

# Service environment variables
ENV_OPENAI_API_KEY: Final[str] = "OPENAI_API_KEY"
ENV_PINECONE_API_KEY: Final[str] = "PINECONE_API_KEY"
ENV_PINECONE_INDEX_NAME: Final[str] = "PINECONE_INDEX_NAME"

# Default config content (TOML)
DEFAULT_CONFIG_TOML: Final[str] = """\
# prof-rag configuration

[embedding]
provider = "openai"
model = "text-embedding-3-small"
dimensions = 1536
timeout = 10.0
# api_key = ""  # Use OPENAI_API_KEY env var

[vector_store]
backend = "pinecone"
index_name = "rag"
top_k = 5
filter_field = "professor_id"
timeout = 10.0
# api_key = ""  # Use PINECONE_API_KEY env var

[directory]
page_size = 100

[matching]
threshold = 0.65
min_word_length = 3
max_suggestions = 5
honorifics = ["prof", "professor", "dr", "doktor", "dozent", "herr", "frau", "mr", "ms", "mrs", "miss"]

[matching.field_weights]
full_name = 2.0
normalized_name = 2.0
department = 0.5
subject = 0.5

[cache]
directory_ttl_seconds = 3600
embedding_ttl_seconds = 3600

[retry]
max_retries = 2
base_delay = 0.5

[logging]
level = "INFO"
json_format = false
"""


def get_config_path() -> Path:
    """Get the configuration file path."""
    env_path = os.environ.get(ENV_CONFIG_PATH)
    if env_path:
        return Path(env_path)
    return DEFAULT_CONFIG_FILE
