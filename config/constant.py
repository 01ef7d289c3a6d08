from typing import Dict, Tuple


APP_TITLE = "Simple Chat"

DEFAULT_SETTINGS_FILE = "appsettings.json"
DEFAULT_LOG_FILE = "tmp/log.txt"

# provider key (lower-case) -> display name used in error messages
SUPPORTED_PROVIDERS: Dict[str, str] = {
    "github": "GitHub",
    "azure": "Azure",
    "openai": "OpenAI",
    "local": "Local",
}

DEFAULT_AZURE_API_VERSION = "2024-10-21"

# Most local servers (Ollama, LM Studio) ignore the key but the SDK requires one
LOCAL_PLACEHOLDER_KEY = "local-key"

MAX_OUTPUT_TOKENS_RANGE: Tuple[int, int] = (50, 4000)
TEMPERATURE_RANGE: Tuple[float, float] = (0.0, 2.0)

EXIT_COMMANDS = {"exit", "quit"}
