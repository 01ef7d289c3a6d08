from openai import OpenAI

from config.logging import logger
from domain.ports import ChatClientPort, ModelProviderPort
from infra.providers.base import ProviderConfig
from infra.providers.chat_client import OpenAIChatClient, build_sdk_client


class OpenAIProvider(ModelProviderPort):
    def __init__(self, settings: ProviderConfig, token: str):
        self._settings = settings
        self._token = token

    @property
    def provider_name(self) -> str:
        return "OpenAI"

    @property
    def model_name(self) -> str:
        return self._settings.model_name

    def create_chat_client(self) -> ChatClientPort:
        # api.openai.com unless an endpoint is configured (proxy, compatible gateway)
        if self._settings.endpoint_url:
            client = build_sdk_client(OpenAI, self.provider_name, api_key=self._token, base_url=self._settings.endpoint_url)
        else:
            client = build_sdk_client(OpenAI, self.provider_name, api_key=self._token)
        logger.info(f"[provider] OpenAI client created for model '{self.model_name}'")
        return OpenAIChatClient(client, model=self._settings.model_name)
