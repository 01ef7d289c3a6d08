from dataclasses import dataclass

from config.constant import DEFAULT_AZURE_API_VERSION, SUPPORTED_PROVIDERS


class ProviderConfigError(RuntimeError):
    """Fatal configuration problem, detected before the chat loop starts."""


class MissingCredentialError(ProviderConfigError):
    def __init__(self, provider_type: str, config_key: str):
        self.provider_type = provider_type
        self.config_key = config_key
        super().__init__(
            f"Token not found for provider '{provider_type}'. "
            f"Please set '{config_key}' in your environment or .env file."
        )


class UnsupportedProviderError(ProviderConfigError):
    def __init__(self, provider_type: str):
        self.provider_type = provider_type
        super().__init__(
            f"Provider '{provider_type}' is not supported. "
            f"Supported providers: {', '.join(SUPPORTED_PROVIDERS.values())}"
        )


class ProviderNotConfiguredError(ProviderConfigError):
    def __init__(self, provider_name: str):
        self.provider_name = provider_name
        super().__init__(f"Provider '{provider_name}' not found in configuration.")


class ChatRequestError(RuntimeError):
    """A single chat turn failed; the session keeps going."""


@dataclass(frozen=True)
class ProviderConfig:
    endpoint_url: str = ""
    model_name: str = ""
    token_config_key: str = ""    # empty -> no credential needed
    deployment_name: str = ""     # Azure only
    api_version: str = DEFAULT_AZURE_API_VERSION  # Azure only

    @property
    def requires_credential(self) -> bool:
        return bool(self.token_config_key)
