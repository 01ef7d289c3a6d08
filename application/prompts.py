from typing import List

from domain.models import ChatMessage, ChatRole

# ============== System preamble sent with every question ==============
SYSTEM_PROMPT = (
    "You are a concise balanced assistant. "
    "You don't have access to real-time information or the open web. "
    "If asked for current or live data, say you don't have real-time access. "
    "Be clear and structured and avoid definitive claims unless clearly justified"
)


def build_messages(user_text: str) -> List[ChatMessage]:
    """System preamble + the user's question. No history is carried between turns."""
    return [
        ChatMessage(ChatRole.SYSTEM, SYSTEM_PROMPT),
        ChatMessage(ChatRole.USER, user_text),
    ]
