"""A Python client for the chat endpoint.

It follows the same exchange rules as the page in ``static/script.js``: the
user's bubble is shown before the request is sent, and whatever comes back
(a reply, a server error or no response at all) is turned into exactly one
more bubble.
"""
from datetime import UTC, datetime
from enum import StrEnum, auto
from types import TracebackType

import httpx
from loguru import logger
from pydantic import BaseModel, Field


GREETING = "Hi! I'm a simple bot. Type a message below and I'll reply."
FALLBACK_ERROR = "Something went wrong. Please try again."
NETWORK_ERROR = "Network error: unable to reach the server. Please check your connection and try again."


class Sender(StrEnum):
    USER = auto()
    BOT = auto()
    ERROR = auto()


class Bubble(BaseModel):
    sender: Sender
    text: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))


def greeting() -> Bubble:
    return Bubble(sender=Sender.BOT, text=GREETING)


def _field(response: httpx.Response, name: str) -> str | None:
    """Read a non-empty string field from a JSON object body, if there is one."""
    try:
        data = response.json()
    except ValueError:
        return None
    if isinstance(data, dict) and isinstance(data.get(name), str) and data[name]:
        return data[name]
    return None


class ChatClient:
    def __init__(
        self,
        base_url: str = "http://127.0.0.1:3000",
        transport: httpx.BaseTransport | None = None,
        timeout: float = 10.0,
    ) -> None:
        self._http = httpx.Client(base_url=base_url, transport=transport, timeout=timeout)

    def __enter__(self) -> "ChatClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        self._http.close()

    def send(self, text: str) -> list[Bubble]:
        """Send a message and return the bubbles it produced.

        Blank input produces no bubbles and no request. Otherwise the user's
        bubble comes first, followed by a bot bubble or an error bubble.
        """
        message = text.strip()
        if not message:
            return []
        bubbles = [Bubble(sender=Sender.USER, text=message)]
        try:
            response = self._http.post("/api/chat", json={"message": message})
        except httpx.TransportError as e:
            logger.warning(f"Could not reach the chat server: {e!r}")
            bubbles.append(Bubble(sender=Sender.ERROR, text=NETWORK_ERROR))
            return bubbles

        if response.is_success:
            reply = _field(response, "reply")
            if reply is not None:
                bubbles.append(Bubble(sender=Sender.BOT, text=reply))
                return bubbles
            logger.warning(f"Chat server answered {response.status_code} without a reply")
            bubbles.append(Bubble(sender=Sender.ERROR, text=FALLBACK_ERROR))
        else:
            logger.info(f"Chat server answered {response.status_code}")
            text = _field(response, "error") or FALLBACK_ERROR
            bubbles.append(Bubble(sender=Sender.ERROR, text=text))
        return bubbles
