"""Byte-grabbing chat game: SQLite storage, duration parsing, cooldowns, replies and commands."""

__version__ = "0.1.0"

__all__ = ["commands", "cooldowns", "database", "durations", "embeds", "errors"]