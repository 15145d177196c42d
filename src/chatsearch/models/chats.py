"""Chat, user and message records read from the client stores."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


class ChatRecord(BaseModel):
    """A chat or user known to the client.

    Users and chats share one id space, so the directory keys both by id.
    """

    id: str
    kind: Literal["user", "private", "group", "channel"] = "private"
    title: str = ""
    first_name: str = ""
    last_name: str = ""
    username: str = ""
    is_verified: bool = False
    last_message_at: float = 0

    @property
    def display_name(self) -> str:
        if self.title:
            return self.title
        return " ".join(part for part in (self.first_name, self.last_name) if part)


class MessageRecord(BaseModel):
    """A cached message that a search token can resolve to."""

    chat_id: str
    id: int
    date: float
    text: str = ""
    media_type: str | None = None
