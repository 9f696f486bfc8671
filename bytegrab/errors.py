"""Errors raised by the bot's commands and its storage."""


class BotError(Exception):
    """Base class of every error the bot reports back to a user."""


class DatabaseError(BotError):
    """The storage layer failed; the underlying cause is chained."""

    def __init__(self, message: str = "database error") -> None:
        super().__init__(message)


class DiscordError(BotError):
    """A call to the chat platform failed."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"discord error: {detail}")
        self.detail = detail


class ByteError(BotError):
    """A problem with a command that is shown to the user as is."""