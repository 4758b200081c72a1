"""Constants used throughout the application."""

# Text-generation endpoint defaults
DEFAULT_API_URL = "https://api.anthropic.com/v1/messages"
DEFAULT_MODEL = "claude-3-sonnet-20240229"
DEFAULT_API_VERSION = "2023-06-01"
DEFAULT_MAX_TOKENS = 4000
DEFAULT_TEMPERATURE = 0.7
DEFAULT_TIMEOUT = 30.0

# Value shipped in example env files; treated the same as no key at all
PLACEHOLDER_API_KEY = "your_claude_api_key_here"

# Number of ideas requested from the model and produced by the fallback
IDEA_COUNT = 4

# Settings file
DEFAULT_SETTINGS_FILE = "ideaspark.yaml"
