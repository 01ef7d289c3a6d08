from openai import AzureOpenAI

from config.logging import logger
from domain.ports import ChatClientPort, ModelProviderPort
from infra.providers.base import ProviderConfig, ProviderConfigError
from infra.providers.chat_client import OpenAIChatClient, build_sdk_client


class AzureOpenAIProvider(ModelProviderPort):
    """
    Azure OpenAI.
    - endpoint_url: https://<resource>.openai.azure.com
    - deployment_name: the deployment to call, sent in place of the model name
    """
    def __init__(self, settings: ProviderConfig, token: str):
        self._settings = settings
        self._token = token

    @property
    def provider_name(self) -> str:
        return "Azure OpenAI"

    @property
    def model_name(self) -> str:
        return self._settings.model_name

    def create_chat_client(self) -> ChatClientPort:
        if not self._settings.deployment_name:
            raise ProviderConfigError("Azure OpenAI requires 'deployment_name' in the provider settings.")

        client = build_sdk_client(
            AzureOpenAI,
            self.provider_name,
            api_key=self._token,
            azure_endpoint=self._settings.endpoint_url,
            api_version=self._settings.api_version,
        )
        logger.info(f"[provider] Azure OpenAI client created for deployment '{self._settings.deployment_name}'")
        return OpenAIChatClient(client, model=self._settings.deployment_name)
