from dataclasses import dataclass
from typing import Literal, Protocol


Role = Literal["system", "user", "assistant"]


@dataclass(frozen=True)
class ChatMessage:
    role: Role
    content: str


class Summarizer(Protocol):
    def summarize(self, prompt: str) -> str:
        """Return summary text for ``prompt`` or raise ExternalServiceError."""
        ...
