# bytegrab

`bytegrab` holds the game logic for a chat-server bot. Members of a server
(a *guild*) grab bytes and compete for the top of the leaderboard. The
package stores the game state in SQLite and provides the commands as
coroutines. Your own bot code calls them.

## How the game works

- `byte` grabs a byte. A member's first grab gives them 1 byte. After that,
  each grab adds 1 byte. If the same member also made the guild's previous
  grab, their score doubles instead.
- Each guild has one cooldown, shared by all its members. The default is 3600
  seconds. A grab made too early raises a `ByteError` with a message such as
  `Please wait **1 minute and 5 seconds**`.
- A guild can have a master role. Once it is set, the member at the top of the
  leaderboard gets the role whenever they grab bytes, and the previous holder
  loses it.
- `info` shows how many bytes a member has. It shows the caller's own count
  when no member is given.
- `leaderboard` lists the top members, ranked from 0. It shows 10 unless you
  ask for another number.
- `cooldown` and `role` are for administrators. They set the guild's cooldown
  (for example `1h 30m`, whole seconds are kept) and its master role.
- `help` with no argument lists all commands. Give it a command name or alias
  (`lb`) to show that command's description.

## Installation

```
pip install .
```

To run the test suite, install the test extra:

```
pip install ".[test]"
pytest
```

The package has no dependencies outside the Python standard library.

## Storage

`bytegrab.database.Database` opens an SQLite file, `bytes.db3` by default. It
creates the `guilds` and `users` tables if they are missing. It can be used as
a context manager.

```python
from bytegrab.database import Database

with Database("bytes.db3") as db:
    db.insert_guild(1, 42)
    db.insert_user(42, 1)
    db.update_user_score(42, 1, 5)
    print(db.get_user(42, 1).score)                  # 5
    print([u.id for u in db.get_leaderboard(1, 10)])
```

Records come back as the frozen dataclasses `User` (`id`, `guild_id`, `score`)
and `Guild` (`id`, `last_user_id`, `cooldown`, `master_role_id`,
`last_master_id`). The other methods are `get_guild`, `update_last_user`,
`update_last_master`, `update_cooldown`, `update_master_role` and `close`.
Any SQLite failure is raised as `DatabaseError`.

## Running a command

A command is a coroutine that takes a `bytegrab.commands.Context`. The context
holds:

- `data`: a `ClientData` that carries the `Database` and the in-memory
  `CooldownTracker`
- `author_id` and `guild_id`
- `author_is_admin`
- `roles`: an optional object with `add_role` and `remove_role` coroutines
- `on_send`: an optional coroutine that receives each reply

Every reply is also appended to `ctx.sent`.

```python
import asyncio

from bytegrab.commands import ClientData, Context, byte
from bytegrab.database import Database

with Database("bytes.db3") as db:
    ctx = Context(data=ClientData(db=db), author_id=42, guild_id=1)
    asyncio.run(byte(ctx))
    print(ctx.sent[0].embeds[0].description)
    # <@42> grabbed a byte! They now have 1 byte.
```

Commands raise subclasses of `bytegrab.errors.BotError`:

- `ByteError` carries a message meant for the user. This covers the cooldown
  notice, a missing guild, missing permissions and bad durations.
- `DatabaseError` reports a storage failure.
- `DiscordError` is raised when the master role has to move but `ctx.roles` is
  not set.

## Durations

`bytegrab.durations.parse_duration` turns text into a `timedelta`. The text is
a sum of `<number><unit>` terms, separated by whitespace or `+`. A bare number
means seconds. A term can be multiplied by a whole number with `*`. Units run
from nanoseconds (`ns`) up to years (`y`), with `mon` for 30-day months.

```python
from bytegrab.durations import parse_duration

parse_duration("1h 30m")   # timedelta(seconds=5400)
parse_duration("90")       # timedelta(seconds=90)
```

Empty text, malformed text, unknown units and values too large for a
`timedelta` raise `ByteError`.

## Replies and cooldowns

`bytegrab.embeds` builds the replies:

- `create_embed_success` gives a green "Success!" embed.
- `create_embed_failure` gives a red "Uh oh!" embed.
- `create_embed_reply` takes any title and `Colour`.

A `Reply` has `content` and `embeds`. An `Embed` has `title`, `description`,
`colour` and `fields`, and `Embed.with_field` adds a field.

`bytegrab.cooldowns.CooldownTracker` records when each key last started a
cooldown. It uses an injectable clock, `time.monotonic` by default.
`format_remaining` turns the seconds left into the wait message.

## What this package does not do

It does not connect to a chat platform, and it has no program that runs a bot.
Your code has to:

- receive messages
- parse command arguments
- build a `Context`
- deliver the `Reply` objects
- show `BotError` messages to users
- make the actual role changes through the `roles` object

Cooldowns are kept in memory only, so they reset when the process restarts.