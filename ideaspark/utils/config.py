import os
import yaml
from pathlib import Path
from dotenv import load_dotenv

from ideaspark.constants import (
    DEFAULT_API_URL,
    DEFAULT_MODEL,
    DEFAULT_API_VERSION,
    DEFAULT_MAX_TOKENS,
    DEFAULT_TEMPERATURE,
    DEFAULT_TIMEOUT,
    DEFAULT_SETTINGS_FILE,
    IDEA_COUNT,
)

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_LOG_LEVEL = "INFO"


class Config:
    """Settings for one IdeaSpark process.

    Built once at start-up and handed to the factory. Values come from, in
    order of precedence: environment variables (including those loaded from
    the .env file), the ``ai`` section of the YAML settings file, and the
    defaults in ``ideaspark.constants``.
    """

    def __init__(self, settings_file: str = None):
        # Load appropriate .env file based on environment
        self.env = os.getenv("IDEASPARK_ENV", "dev")
        self._load_env_file()

        self.settings_file = Path(
            settings_file or os.getenv("IDEASPARK_SETTINGS_FILE", DEFAULT_SETTINGS_FILE)
        )
        settings = self._load_settings()

        # Text-generation settings
        self.api_key = os.getenv("ANTHROPIC_API_KEY", settings.get("api_key", ""))
        self.api_url = os.getenv("ANTHROPIC_API_URL", settings.get("api_url", DEFAULT_API_URL))
        self.model = os.getenv("ANTHROPIC_MODEL", settings.get("model", DEFAULT_MODEL))
        self.api_version = os.getenv("ANTHROPIC_VERSION", settings.get("api_version", DEFAULT_API_VERSION))
        self.max_tokens = self._get_int("ANTHROPIC_MAX_TOKENS", settings.get("max_tokens", DEFAULT_MAX_TOKENS))
        self.temperature = self._get_float("ANTHROPIC_TEMPERATURE", settings.get("temperature", DEFAULT_TEMPERATURE))
        self.timeout = self._get_float("ANTHROPIC_TIMEOUT", settings.get("timeout", DEFAULT_TIMEOUT))
        self.idea_count = self._get_int("IDEA_COUNT", settings.get("idea_count", IDEA_COUNT))
        if self.idea_count < 1:
            self.idea_count = IDEA_COUNT

        # Logging settings
        self.log_level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
        self.log_format = os.getenv("LOG_FORMAT", DEFAULT_LOG_FORMAT)

    def _load_env_file(self):
        """Load the appropriate .env file based on the environment."""
        env_file = ".env"

        # Check for environment-specific .env file
        if self.env != "dev":
            env_specific_file = f".env.{self.env}"
            if Path(env_specific_file).exists():
                env_file = env_specific_file

        load_dotenv(env_file)

    def _load_settings(self):
        """Load the ``ai`` section of the YAML settings file, if there is one."""
        if not self.settings_file.exists():
            return {}

        with open(self.settings_file, 'r') as file:
            settings = yaml.safe_load(file) or {}
            return settings.get('ai') or {}

    @staticmethod
    def _get_int(key, default):
        try:
            return int(os.getenv(key, default))
        except (TypeError, ValueError):
            return int(default)

    @staticmethod
    def _get_float(key, default):
        try:
            return float(os.getenv(key, default))
        except (TypeError, ValueError):
            return float(default)
