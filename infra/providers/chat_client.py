from typing import Any, Sequence

from openai import OpenAIError

from config.logging import logger
from domain.models import ChatMessage, ChatOptions, ChatResponse
from domain.ports import ChatClientPort
from infra.providers.base import ChatRequestError, ProviderConfigError


class OpenAIChatClient(ChatClientPort):
    """
    Chat client bound to one SDK client and one model.
    Works for every OpenAI-compatible backend (OpenAI, Azure OpenAI, GitHub Models, local servers).
    For Azure, `model` is the deployment name.
    """
    def __init__(self, client: Any, model: str):
        self._client = client
        self.model = model

    def get_response(self, messages: Sequence[ChatMessage], options: ChatOptions) -> ChatResponse:
        msgs = [{"role": m.role.value, "content": m.content} for m in messages]
        try:
            resp = self._client.chat.completions.create(
                model=self.model,
                messages=msgs,
                max_tokens=options.max_output_tokens,
                temperature=options.temperature,
            )
        except OpenAIError as e:
            logger.warning(f"[provider] Chat request to '{self.model}' failed: {e}")
            raise ChatRequestError(str(e)) from e

        if not resp.choices:
            return ChatResponse(text="")
        return ChatResponse(text=resp.choices[0].message.content or "")


def build_sdk_client(sdk_cls: Any, provider_name: str, **kwargs: Any) -> Any:
    """Construct the SDK client; constructor errors (bad endpoint, missing key) are configuration errors."""
    try:
        return sdk_cls(**kwargs)
    except (OpenAIError, ValueError) as e:
        logger.error(f"[provider] Could not create the {provider_name} client: {e}")
        raise ProviderConfigError(f"Could not create the {provider_name} client: {e}") from e
