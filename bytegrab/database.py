"""SQLite storage of guilds and their members' byte scores."""

from __future__ import annotations

import os
import sqlite3
from dataclasses import dataclass
from typing import Any

from .errors import DatabaseError

_STRICT = " STRICT" if sqlite3.sqlite_version_info >= (3, 37, 0) else ""

_SCHEMA = f"""
CREATE TABLE IF NOT EXISTS guilds (
    id             INTEGER PRIMARY KEY,
    last_user_id   INTEGER NOT NULL,
    cooldown       INTEGER DEFAULT 3600,
    master_role_id INTEGER,
    last_master_id INTEGER
){_STRICT};

CREATE TABLE IF NOT EXISTS users (
    id       INTEGER,
    guild_id INTEGER,
    score    INTEGER DEFAULT 1,
    PRIMARY KEY (id, guild_id),
    FOREIGN KEY (guild_id) REFERENCES guilds(id)
){_STRICT};
"""


@dataclass(frozen=True)
class User:
    """A member's score within one guild."""

    id: int
    guild_id: int
    score: int


@dataclass(frozen=True)
class Guild:
    """Per-guild settings and state."""

    id: int
    last_user_id: int
    cooldown: int
    master_role_id: int | None
    last_master_id: int | None


class Database:
    """Guild and user records kept in an SQLite file."""

    def __init__(self, path: str | os.PathLike[str] = "bytes.db3") -> None:
        try:
            self._conn = sqlite3.connect(path, check_same_thread=False)
        except sqlite3.Error as exc:
            raise DatabaseError() from exc
        try:
            self._conn.execute("PRAGMA foreign_keys = ON")
            self._conn.executescript(_SCHEMA)
        except sqlite3.Error as exc:
            self._conn.close()
            raise DatabaseError() from exc

    def __enter__(self) -> Database:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying connection."""
        self._conn.close()

    def _execute(self, *statements: tuple[str, tuple[Any, ...]]) -> None:
        """Run the statements in one transaction."""
        try:
            with self._conn:
                for sql, params in statements:
                    self._conn.execute(sql, params)
        except sqlite3.Error as exc:
            raise DatabaseError() from exc

    def _fetch(self, sql: str, params: tuple[Any, ...]) -> list[tuple[Any, ...]]:
        try:
            return self._conn.execute(sql, params).fetchall()
        except sqlite3.Error as exc:
            raise DatabaseError() from exc

    def insert_guild(self, guild_id: int, user_id: int) -> None:
        """Add a guild unless it already exists."""
        self._execute(
            (
                "INSERT OR IGNORE INTO guilds (id, last_user_id) VALUES (?, ?)",
                (guild_id, user_id),
            )
        )

    def insert_user(self, user_id: int, guild_id: int) -> None:
        """Add a member with the default score unless already present."""
        self._execute(
            ("INSERT OR IGNORE INTO guilds (id) VALUES (?)", (guild_id,)),
            (
                "INSERT OR IGNORE INTO users (id, guild_id) VALUES (?, ?)",
                (user_id, guild_id),
            ),
        )

    def get_guild(self, guild_id: int) -> Guild | None:
        rows = self._fetch(
            "SELECT id, last_user_id, cooldown, master_role_id, last_master_id "
            "FROM guilds WHERE id = ?",
            (guild_id,),
        )
        return Guild(*rows[0]) if rows else None

    def get_user(self, user_id: int, guild_id: int) -> User | None:
        rows = self._fetch(
            "SELECT id, guild_id, score FROM users WHERE id = ? AND guild_id = ?",
            (user_id, guild_id),
        )
        return User(*rows[0]) if rows else None

    def update_user_score(self, user_id: int, guild_id: int, new_score: int) -> None:
        self._execute(
            (
                "UPDATE users SET score = ? WHERE id = ? AND guild_id = ?",
                (new_score, user_id, guild_id),
            )
        )

    def update_last_master(self, guild_id: int, user_id: int) -> None:
        self._execute(
            ("UPDATE guilds SET last_master_id = ? WHERE id = ?", (user_id, guild_id))
        )

    def update_last_user(self, guild_id: int, user_id: int) -> None:
        self._execute(
            ("UPDATE guilds SET last_user_id = ? WHERE id = ?", (user_id, guild_id))
        )

    def update_cooldown(self, guild_id: int, cooldown: int) -> None:
        self._execute(
            ("UPDATE guilds SET cooldown = ? WHERE id = ?", (cooldown, guild_id))
        )

    def update_master_role(self, guild_id: int, role_id: int) -> None:
        self._execute(
            ("UPDATE guilds SET master_role_id = ? WHERE id = ?", (role_id, guild_id))
        )

    def get_leaderboard(self, guild_id: int, n: int) -> list[User]:
        """Return the guild's top ``n`` members by descending score."""
        rows = self._fetch(
            "SELECT id, guild_id, score FROM users WHERE guild_id = ? "
            "ORDER BY score DESC LIMIT ?",
            (guild_id, n),
        )
        return [User(*row) for row in rows]