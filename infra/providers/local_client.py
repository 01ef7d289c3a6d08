from openai import OpenAI

from config.constant import LOCAL_PLACEHOLDER_KEY
from config.logging import logger
from domain.ports import ChatClientPort, ModelProviderPort
from infra.providers.base import ProviderConfig
from infra.providers.chat_client import OpenAIChatClient, build_sdk_client


class LocalModelProvider(ModelProviderPort):
    """
    Local models (Ollama, LM Studio, or any OpenAI-compatible endpoint).
    No credential is resolved, a placeholder key is sent instead.
    """
    def __init__(self, settings: ProviderConfig):
        self._settings = settings

    @property
    def provider_name(self) -> str:
        return "Local Model"

    @property
    def model_name(self) -> str:
        return self._settings.model_name

    def create_chat_client(self) -> ChatClientPort:
        client = build_sdk_client(OpenAI, self.provider_name, api_key=LOCAL_PLACEHOLDER_KEY, base_url=self._settings.endpoint_url)
        logger.info(f"[provider] Local client created at {self._settings.endpoint_url} for model '{self.model_name}'")
        return OpenAIChatClient(client, model=self._settings.model_name)
