"""The bot's chat commands."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Protocol

from .cooldowns import CooldownTracker, format_remaining
from .database import Database
from .durations import parse_duration
from .embeds import Colour, Embed, Reply, create_embed_reply, create_embed_success
from .errors import ByteError, DiscordError

_COMMANDS: dict[str, tuple[str, tuple[str, ...]]] = {
    "byte": ("Grab a byte!", ()),
    "info": ("Check how many bytes other members have.", ()),
    "cooldown": ("Change the byte cooldown for the server.", ()),
    "leaderboard": ("Display's the guild leaderboard", ("lb",)),
    "help": ("Show this help menu.", ()),
    "role": ("", ()),
}

_HELP_FOOTER = (
    "Provide a command name to view more info.\n"
    "You can edit your message to the bot and the bot will edit its response."
)

_DEFAULT_LEADERBOARD_SIZE = 10


class _RoleManager(Protocol):
    async def add_role(self, user_id: int, role_id: int) -> None: ...

    async def remove_role(self, user_id: int, role_id: int) -> None: ...


@dataclass
class ClientData:
    """State shared by every command invocation."""

    db: Database
    byte_cooldowns: CooldownTracker = field(default_factory=CooldownTracker)


@dataclass
class Context:
    """One command invocation: who called it, where, and how to answer."""

    data: ClientData
    author_id: int
    guild_id: int | None = None
    author_is_admin: bool = False
    roles: _RoleManager | None = None
    on_send: Callable[[Reply], Awaitable[None]] | None = None
    sent: list[Reply] = field(default_factory=list)

    async def send(self, reply: Reply) -> None:
        self.sent.append(reply)
        if self.on_send is not None:
            await self.on_send(reply)


def _require_guild(ctx: Context, message: str) -> int:
    if ctx.guild_id is None:
        raise ByteError(message)
    return ctx.guild_id


def _require_admin(ctx: Context, command: str) -> None:
    if not ctx.author_is_admin:
        raise ByteError(f"You're lacking permissions for `{command}`")


async def byte(ctx: Context) -> None:
    """Grab a byte!"""
    db = ctx.data.db
    user_id = ctx.author_id
    guild_id = _require_guild(ctx, "error: no guild in ctx")

    guild = db.get_guild(guild_id)
    if guild is None:
        db.insert_guild(guild_id, user_id)
        guild = db.get_guild(guild_id)
        assert guild is not None

    tracker = ctx.data.byte_cooldowns
    remaining = tracker.remaining_cooldown(guild_id, guild.cooldown)
    if remaining is not None:
        raise ByteError(format_remaining(remaining))
    tracker.start_cooldown(guild_id)

    user = db.get_user(user_id, guild_id)
    if user is None:
        db.insert_user(user_id, guild_id)
        db.update_last_user(guild_id, user_id)
        await ctx.send(
            create_embed_success(f"<@{user_id}> grabbed a byte! They now have 1 byte.")
        )
        return

    difference = user.score if user.id == guild.last_user_id else 1
    new_score = user.score + difference

    db.update_user_score(user_id, guild_id, new_score)
    db.update_last_user(guild_id, user_id)

    await ctx.send(
        create_embed_success(
            f"<@{user_id}> grabbed {difference} bytes! They now have {new_score} bytes."
        )
    )

    role_id = guild.master_role_id
    if role_id is None:
        return
    leaders = db.get_leaderboard(guild_id, 1)
    if not leaders or leaders[0].id != user_id:
        return
    leader = leaders[0]
    if ctx.roles is None:
        raise DiscordError("guild is unavailable")
    await ctx.roles.add_role(leader.id, role_id)
    if guild.last_master_id is not None and guild.last_master_id != user_id:
        await ctx.roles.remove_role(guild.last_master_id, role_id)
    db.update_last_master(guild.id, leader.id)


async def info(ctx: Context, member: int | None = None) -> None:
    """Check how many bytes other members have."""
    user_id = ctx.author_id if member is None else member
    guild_id = _require_guild(ctx, "error: no guild in ctx")

    user = ctx.data.db.get_user(user_id, guild_id)
    if user is None:
        msg = f"user <@{user_id}> has no bytes..."
    else:
        msg = f"user <@{user.id}> has {user.score} bytes!"

    await ctx.send(create_embed_reply("Info", msg, Colour.BLUE))


async def cooldown(ctx: Context, cooldown: list[str]) -> None:
    """Change the byte cooldown for the server."""
    _require_admin(ctx, "cooldown")
    seconds = parse_duration(" ".join(cooldown)) // timedelta(seconds=1)
    guild_id = _require_guild(ctx, "no guild in context")

    db = ctx.data.db
    if db.get_guild(guild_id) is None:
        db.insert_guild(guild_id, 0)
    db.update_cooldown(guild_id, seconds)

    await ctx.send(create_embed_success(f"cooldown updated to {seconds} seconds!"))


async def leaderboard(ctx: Context, n: int | None = None) -> None:
    """Display's the guild leaderboard"""
    guild_id = _require_guild(ctx, "no guild in context")
    size = _DEFAULT_LEADERBOARD_SIZE if n is None else n

    users = ctx.data.db.get_leaderboard(guild_id, size)
    content = "".join(
        f"{rank}. <@{user.id}> - {user.score} bytes\n"
        for rank, user in enumerate(users)
    )

    embed = Embed(title="Leaderboard", colour=Colour.DARK_GREEN).with_field(
        f"Top {size} members:", content, inline=False
    )
    await ctx.send(Reply(embeds=(embed,)))


def _resolve_command(name: str) -> str | None:
    if name in _COMMANDS:
        return name
    return next(
        (cmd for cmd, (_, aliases) in _COMMANDS.items() if name in aliases), None
    )


def _help_all() -> str:
    width = max(map(len, _COMMANDS)) + 2
    lines = ["```", "Commands:"]
    lines.extend(
        f"  {name.ljust(width)}{description}".rstrip()
        for name, (description, _) in _COMMANDS.items()
    )
    lines.extend(["", _HELP_FOOTER, "```"])
    return "\n".join(lines)


async def help(ctx: Context, command: str | None = None) -> None:
    """Show this help menu."""
    if command is None:
        content = _help_all()
    else:
        name = _resolve_command(command)
        if name is None:
            content = f"No such command `{command}`"
        else:
            description, _ = _COMMANDS[name]
            content = description or "No help available"
    await ctx.send(Reply(content=content))


async def role(ctx: Context, role: int) -> None:
    """Set the role given to the guild's top member."""
    _require_admin(ctx, "role")
    guild_id = _require_guild(ctx, "no guild in context")

    db = ctx.data.db
    if db.get_guild(guild_id) is None:
        db.insert_guild(guild_id, ctx.author_id)
    db.update_master_role(guild_id, role)

    await ctx.send(
        create_embed_success(f"Updated this server's byte master role to <@&{role}>")
    )