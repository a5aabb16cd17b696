"""Inbound interaction and outbound response envelopes."""

from enum import IntEnum
from typing import Any

from pydantic import BaseModel, ConfigDict

from pkgsearch.domain.interaction.model.component import ActionRow

# Response flag: only the invoking user sees the message
EPHEMERAL = 1 << 6


class InteractionType(IntEnum):
    PING = 1
    APPLICATION_COMMAND = 2
    MESSAGE_COMPONENT = 3


class ResponseType(IntEnum):
    PONG = 1
    CHANNEL_MESSAGE = 4
    UPDATE_MESSAGE = 7


class _Inbound(BaseModel):
    model_config = ConfigDict(extra="ignore")


class CommandOption(_Inbound):
    name: str
    type: int
    value: Any = None


class InteractionData(_Inbound):
    name: str | None = None
    options: list[CommandOption] = []
    custom_id: str | None = None
    component_type: int | None = None
    values: list[str] = []


class User(_Inbound):
    id: str
    username: str | None = None


class Member(_Inbound):
    user: User


class Interaction(_Inbound):
    """An inbound interaction; ``type`` stays a plain int so unknown kinds still parse."""

    id: str | None = None
    type: int
    data: InteractionData | None = None
    member: Member | None = None
    user: User | None = None  # Set instead of member in direct messages

    @property
    def user_id(self) -> str | None:
        if self.member is not None:
            return self.member.user.id
        if self.user is not None:
            return self.user.id
        return None

    def option(self, name: str) -> Any:
        """Value of a named command option, or None."""
        if self.data is None:
            return None
        for opt in self.data.options:
            if opt.name == name:
                return opt.value
        return None


class EmbedField(BaseModel):
    name: str
    value: str
    inline: bool | None = None


class EmbedAuthor(BaseModel):
    name: str
    url: str | None = None
    icon_url: str | None = None


class EmbedFooter(BaseModel):
    text: str


class Embed(BaseModel):
    title: str | None = None
    description: str | None = None
    url: str | None = None
    color: int | None = None
    fields: list[EmbedField] = []
    author: EmbedAuthor | None = None
    footer: EmbedFooter | None = None
    timestamp: str | None = None


class MessageData(BaseModel):
    content: str | None = None
    embeds: list[Embed] | None = None
    components: list[ActionRow] | None = None
    flags: int | None = None


class InteractionResponse(BaseModel):
    type: ResponseType
    data: MessageData | None = None

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)

    @property
    def is_ephemeral(self) -> bool:
        return self.data is not None and bool((self.data.flags or 0) & EPHEMERAL)


def pong() -> InteractionResponse:
    return InteractionResponse(type=ResponseType.PONG)


def ephemeral(content: str) -> InteractionResponse:
    return InteractionResponse(
        type=ResponseType.CHANNEL_MESSAGE,
        data=MessageData(content=content, flags=EPHEMERAL),
    )
