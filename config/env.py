import os
from pathlib import Path
from typing import Dict, Optional, Tuple, Type

from pydantic import BaseModel, Field
from pydantic_settings import (
    BaseSettings,
    JsonConfigSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from config.constant import DEFAULT_SETTINGS_FILE
from config.logging import logger
from domain.models import ChatOptions
from infra.providers.base import ProviderConfig, ProviderConfigError


class SettingsError(ProviderConfigError):
    """Settings file missing or invalid."""


class ChatOptionsSettings(BaseModel):
    max_output_tokens: int = 300
    temperature: float = 0.2

    def to_options(self) -> ChatOptions:
        return ChatOptions(max_output_tokens=self.max_output_tokens, temperature=self.temperature)


class UiSettings(BaseModel):
    welcome_title: str = ""
    exit_message: str = "Goodbye!"


class AppSettings(BaseSettings):
    # --- Provider ---
    selected_provider: str = "GitHub"
    providers: Dict[str, ProviderConfig] = Field(default_factory=dict)

    # --- Chat defaults ---
    chat_options: ChatOptionsSettings = Field(default_factory=ChatOptionsSettings)

    # --- Console text ---
    ui: UiSettings = Field(default_factory=UiSettings)

    model_config = SettingsConfigDict(
        env_prefix="SIMPLECHAT_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        json_file=None,  # bound by load_settings
        json_file_encoding="utf-8",
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        # env and .env win over the JSON file
        return (init_settings, env_settings, dotenv_settings, JsonConfigSettingsSource(settings_cls))

    def find_provider(self, name: str) -> Optional[Tuple[str, ProviderConfig]]:
        """Case-insensitive lookup, returns (configured name, config)."""
        wanted = name.strip().lower()
        for key, cfg in self.providers.items():
            if key.lower() == wanted:
                return key, cfg
        return None


def load_settings(settings_file: Optional[str] = None) -> AppSettings:
    path = Path(settings_file or os.environ.get("SIMPLECHAT_SETTINGS_FILE") or DEFAULT_SETTINGS_FILE)
    if not path.is_file():
        raise SettingsError(f"Settings file not found: {path}")

    class FileAppSettings(AppSettings):
        model_config = SettingsConfigDict(json_file=path)

    try:
        settings = FileAppSettings()
    except ValueError as e:  # ValidationError and malformed JSON
        raise SettingsError(f"Invalid settings in {path}: {e}") from e

    logger.info(f"[settings] Loaded {len(settings.providers)} provider(s) from {path}")
    return settings
