import pytest

from bytegrab.database import Database, Guild, User
from bytegrab.errors import DatabaseError

GUILD = 100


@pytest.fixture
def db(tmp_path):
    database = Database(tmp_path / "bytes.db3")
    yield database
    database.close()


def test_missing_guild_and_user(db):
    assert db.get_guild(GUILD) is None
    assert db.get_user(1, GUILD) is None


def test_insert_guild_defaults(db):
    db.insert_guild(GUILD, 7)
    assert db.get_guild(GUILD) == Guild(
        id=GUILD, last_user_id=7, cooldown=3600, master_role_id=None, last_master_id=None
    )


def test_insert_guild_ignores_existing(db):
    db.insert_guild(GUILD, 7)
    db.insert_guild(GUILD, 8)
    assert db.get_guild(GUILD).last_user_id == 7


def test_insert_user_default_score(db):
    db.insert_guild(GUILD, 7)
    db.insert_user(7, GUILD)
    assert db.get_user(7, GUILD) == User(id=7, guild_id=GUILD, score=1)


def test_insert_user_ignores_existing(db):
    db.insert_guild(GUILD, 7)
    db.insert_user(7, GUILD)
    db.update_user_score(7, GUILD, 9)
    db.insert_user(7, GUILD)
    assert db.get_user(7, GUILD).score == 9


def test_users_are_per_guild(db):
    db.insert_guild(GUILD, 7)
    db.insert_guild(GUILD + 1, 7)
    db.insert_user(7, GUILD)
    db.update_user_score(7, GUILD, 4)
    db.insert_user(7, GUILD + 1)
    assert db.get_user(7, GUILD + 1).score == 1
    assert db.get_user(7, GUILD).score == 4


def test_guild_updates(db):
    db.insert_guild(GUILD, 7)
    db.update_last_user(GUILD, 8)
    db.update_cooldown(GUILD, 60)
    db.update_master_role(GUILD, 55)
    db.update_last_master(GUILD, 9)
    assert db.get_guild(GUILD) == Guild(
        id=GUILD, last_user_id=8, cooldown=60, master_role_id=55, last_master_id=9
    )


def test_leaderboard_order_and_limit(db):
    db.insert_guild(GUILD, 1)
    for user_id, score in [(1, 3), (2, 10), (3, 6)]:
        db.insert_user(user_id, GUILD)
        db.update_user_score(user_id, GUILD, score)
    board = db.get_leaderboard(GUILD, 10)
    assert [u.id for u in board] == [2, 3, 1]
    scores = [u.score for u in board]
    assert scores == sorted(scores, reverse=True)
    assert [u.id for u in db.get_leaderboard(GUILD, 2)] == [2, 3]


def test_leaderboard_of_other_guild_is_empty(db):
    db.insert_guild(GUILD, 1)
    db.insert_user(1, GUILD)
    assert db.get_leaderboard(GUILD + 1, 10) == []


def test_data_persists(tmp_path):
    path = tmp_path / "bytes.db3"
    with Database(path) as first:
        first.insert_guild(GUILD, 7)
        first.insert_user(7, GUILD)
        first.update_user_score(7, GUILD, 12)
    with Database(path) as second:
        assert second.get_user(7, GUILD).score == 12


def test_closed_database_raises(tmp_path):
    database = Database(tmp_path / "bytes.db3")
    database.close()
    with pytest.raises(DatabaseError):
        database.get_guild(GUILD)