from __future__ import annotations
from typing import Optional, Protocol, Sequence

from domain.models import ChatMessage, ChatOptions, ChatResponse


class ChatClientPort(Protocol):
    def get_response(
        self,
        messages: Sequence[ChatMessage],
        options: ChatOptions,
    ) -> ChatResponse: ...


class ModelProviderPort(Protocol):
    @property
    def provider_name(self) -> str: ...

    @property
    def model_name(self) -> str: ...

    def create_chat_client(self) -> ChatClientPort: ...


class SecretResolverPort(Protocol):
    def get(self, key: str) -> Optional[str]: ...


class ConsolePort(Protocol):
    def read_line(self, prompt: str = "") -> Optional[str]: ...

    def write_line(self, text: str = "", style: Optional[str] = None) -> None: ...
