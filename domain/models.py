from dataclasses import dataclass
from enum import Enum


class ChatRole(str, Enum):
    SYSTEM = "system"
    USER = "user"


@dataclass(frozen=True)
class ChatMessage:
    role: ChatRole
    content: str


@dataclass(frozen=True)
class ChatOptions:
    max_output_tokens: int
    temperature: float


@dataclass(frozen=True)
class ChatResponse:
    text: str
