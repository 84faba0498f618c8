from datetime import UTC, datetime

from pydantic import BaseModel, Field


def compose_reply(message: str) -> str:
    """Build the bot's reply, with the message substituted exactly as it was sent."""
    return f"Hello there! I'm a simple bot. I received your message: '{message}'. How can I help further?"


class MessageExchange(BaseModel):
    """A single request/response pair. Nothing about it outlives the request."""

    text: str
    reply: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @classmethod
    def respond_to(cls, text: str) -> "MessageExchange":
        return cls(text=text, reply=compose_reply(text))
