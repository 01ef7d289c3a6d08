from domain.ports import ModelProviderPort, SecretResolverPort
from config.logging import logger
from infra.providers.base import MissingCredentialError, ProviderConfig, UnsupportedProviderError
from infra.providers.azure_client import AzureOpenAIProvider
from infra.providers.github_client import GitHubModelProvider
from infra.providers.local_client import LocalModelProvider
from infra.providers.openai_client import OpenAIProvider


def create_provider(provider_type: str, settings: ProviderConfig,
                    secrets: SecretResolverPort) -> ModelProviderPort:
    """
    Pick the provider implementation for `provider_type` (case-insensitive).
    The token is resolved only when the settings name a `token_config_key`;
    no SDK client is built here.
    """
    token = ""
    if settings.requires_credential:
        token = secrets.get(settings.token_config_key) or ""
        if not token:
            logger.error(f"[factory] Missing credential '{settings.token_config_key}' for '{provider_type}'")
            raise MissingCredentialError(provider_type, settings.token_config_key)

    kind = provider_type.lower()
    if kind == "github":
        provider = GitHubModelProvider(settings, token)
    elif kind == "azure":
        provider = AzureOpenAIProvider(settings, token)
    elif kind == "openai":
        provider = OpenAIProvider(settings, token)
    elif kind == "local":
        provider = LocalModelProvider(settings)
    else:
        logger.error(f"[factory] Unsupported provider '{provider_type}'")
        raise UnsupportedProviderError(provider_type)

    logger.info(f"[factory] Using {provider.provider_name} with model '{provider.model_name}'")
    return provider
