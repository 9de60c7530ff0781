import aiosqlite
import pytest

import config
from database.manager import LeaderboardEntry, LeaderboardStore
from database.migrations import initialize_database


@pytest.mark.asyncio
async def test_unknown_player_has_no_score(store):
    assert await store.get("nobody") is None
    assert await store.get_player_rank("nobody") is None
    assert await store.count() == 0
    assert await store.top_n() == []


@pytest.mark.asyncio
async def test_set_if_higher_keeps_best(store):
    await store.set_if_higher("alice", 50)
    await store.set_if_higher("alice", 30)
    assert await store.get("alice") == 50

    await store.set_if_higher("alice", 80)
    assert await store.get("alice") == 80
    assert await store.count() == 1


@pytest.mark.asyncio
async def test_top_n_orders_by_score(store):
    for player, score in [("alice", 30), ("bob", 90), ("carol", 60), ("dave", 10)]:
        await store.set_if_higher(player, score)

    top = await store.top_n(3)

    assert top == [
        LeaderboardEntry("bob", 90),
        LeaderboardEntry("carol", 60),
        LeaderboardEntry("alice", 30),
    ]


@pytest.mark.asyncio
async def test_top_n_defaults_to_seven(store):
    for i in range(10):
        await store.set_if_higher(f"player{i}", (i + 1) * 10)

    top = await store.top_n()

    assert len(top) == 7
    assert top[0] == LeaderboardEntry("player9", 100)


@pytest.mark.asyncio
async def test_ties_are_stable(store):
    await store.set_if_higher("zed", 40)
    await store.set_if_higher("amy", 40)

    first = await store.top_n()
    second = await store.top_n()

    assert first == second
    assert {entry.player for entry in first} == {"zed", "amy"}


@pytest.mark.asyncio
async def test_player_rank(store):
    await store.set_if_higher("alice", 30)
    await store.set_if_higher("bob", 90)
    await store.set_if_higher("carol", 60)

    assert await store.get_player_rank("bob") == 1
    assert await store.get_player_rank("alice") == 3


@pytest.mark.asyncio
async def test_boards_are_separate(store):
    other = LeaderboardStore(store.db_path, board="other_board")

    await store.set_if_higher("alice", 50)

    assert await other.get("alice") is None
    assert await other.count() == 0


@pytest.mark.asyncio
async def test_players_sharing_a_display_name_keep_separate_scores(store):
    await store.set_if_higher("111", 90, "Sam")
    await store.set_if_higher("222", 40, "Sam")

    top = await store.top_n()

    assert top == [
        LeaderboardEntry("111", 90, "Sam"),
        LeaderboardEntry("222", 40, "Sam"),
    ]
    assert [entry.name for entry in top] == ["Sam", "Sam"]


@pytest.mark.asyncio
async def test_display_name_follows_new_best(store):
    await store.set_if_higher("111", 50, "Sam")
    await store.set_if_higher("111", 30, "Sammy")
    assert (await store.top_n())[0].name == "Sam"

    await store.set_if_higher("111", 70, "Samantha")
    assert await store.top_n() == [LeaderboardEntry("111", 70, "Samantha")]


@pytest.mark.asyncio
async def test_entry_without_display_name_shows_key(store):
    await store.set_if_higher("alice", 20)

    entry = (await store.top_n())[0]

    assert entry.display_name is None
    assert entry.name == "alice"


@pytest.mark.asyncio
async def test_initialize_adds_display_name_to_old_table(tmp_path):
    db_path = str(tmp_path / "old.db")
    async with aiosqlite.connect(db_path) as db:
        await db.execute(
            """
            CREATE TABLE leaderboard_scores (
                board TEXT NOT NULL,
                player TEXT NOT NULL,
                score INTEGER NOT NULL DEFAULT 0,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                PRIMARY KEY (board, player)
            )
            """
        )
        await db.execute(
            "INSERT INTO leaderboard_scores (board, player, score) VALUES (?, ?, ?)",
            (config.LEADERBOARD_KEY, "alice", 30)
        )
        await db.commit()

    await initialize_database(db_path)
    await initialize_database(db_path)

    old = LeaderboardStore(db_path)
    assert await old.top_n() == [LeaderboardEntry("alice", 30)]
    await old.set_if_higher("alice", 60, "Alice")
    assert await old.top_n() == [LeaderboardEntry("alice", 60, "Alice")]
