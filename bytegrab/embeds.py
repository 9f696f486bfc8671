"""Embed replies sent back to the chat."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import IntEnum


class Colour(IntEnum):
    """Embed side-bar colours as RGB integers."""

    BLUE = 0x3498DB
    DARK_GREEN = 0x1F8B4C
    RED = 0xE74C3C


@dataclass(frozen=True)
class Embed:
    """A rich message block with a title, text, colour and named fields."""

    title: str = ""
    description: str = ""
    colour: Colour | None = None
    fields: tuple[tuple[str, str, bool], ...] = ()

    def with_field(self, name: str, value: str, inline: bool = False) -> Embed:
        """Return a copy with one more field appended."""
        return replace(self, fields=self.fields + ((name, value, inline),))


@dataclass(frozen=True)
class Reply:
    """A message to send: plain content, embeds, or both."""

    content: str | None = None
    embeds: tuple[Embed, ...] = ()


def create_embed_reply(title: str, msg: str, colour: Colour) -> Reply:
    """Build a reply holding a single embed."""
    return Reply(embeds=(Embed(title=title, description=msg, colour=colour),))


def create_embed_success(msg: str) -> Reply:
    """Build a green success reply."""
    return create_embed_reply("Success!", msg, Colour.DARK_GREEN)


def create_embed_failure(msg: str) -> Reply:
    """Build a red failure reply."""
    return create_embed_reply("Uh oh!", msg, Colour.RED)