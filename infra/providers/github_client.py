from openai import OpenAI

from config.logging import logger
from domain.ports import ChatClientPort, ModelProviderPort
from infra.providers.base import ProviderConfig
from infra.providers.chat_client import OpenAIChatClient, build_sdk_client


class GitHubModelProvider(ModelProviderPort):
    """GitHub Models, reached through its OpenAI-compatible inference endpoint."""

    def __init__(self, settings: ProviderConfig, token: str):
        self._settings = settings
        self._token = token

    @property
    def provider_name(self) -> str:
        return "GitHub Models"

    @property
    def model_name(self) -> str:
        return self._settings.model_name

    def create_chat_client(self) -> ChatClientPort:
        client = build_sdk_client(OpenAI, self.provider_name, base_url=self._settings.endpoint_url, api_key=self._token)
        logger.info(f"[provider] GitHub Models client created for model '{self.model_name}'")
        return OpenAIChatClient(client, model=self._settings.model_name)
