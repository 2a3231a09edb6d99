import pytest

from neon_boost.score_db import HighScoreStore


@pytest.fixture
def memory_store():
    store = HighScoreStore(":memory:")
    yield store
    store.close()


def test_missing_score_defaults_to_zero(memory_store):
    assert memory_store.load_high_score() == 0


def test_save_and_load(memory_store):
    memory_store.save_high_score(12)
    assert memory_store.load_high_score() == 12
    memory_store.save_high_score(15)
    assert memory_store.load_high_score() == 15


def test_score_survives_reopen(tmp_path):
    db_file = str(tmp_path / "scores.db")
    store = HighScoreStore(db_file)
    store.save_high_score(42)
    store.close()

    reopened = HighScoreStore(db_file)
    assert reopened.load_high_score() == 42
    reopened.close()


def test_scores_are_keyed(tmp_path):
    db_file = str(tmp_path / "scores.db")
    a = HighScoreStore(db_file, key="a")
    b = HighScoreStore(db_file, key="b")
    a.save_high_score(3)

    assert b.load_high_score() == 0
    assert a.load_high_score() == 3
    a.close()
    b.close()


@pytest.mark.parametrize("raw", ["abc", "", "12.5", "  "])
def test_corrupt_value_reads_as_zero(memory_store, raw):
    memory_store.cur.execute(
        "INSERT INTO HighScores (key, value) VALUES (?, ?)", (memory_store.key, raw))
    memory_store.conn.commit()
    assert memory_store.load_high_score() == 0


def test_whitespace_is_tolerated(memory_store):
    memory_store.cur.execute(
        "INSERT INTO HighScores (key, value) VALUES (?, ?)", (memory_store.key, " 7\n"))
    assert memory_store.load_high_score() == 7


def test_storage_failures_do_not_raise(memory_store):
    memory_store.cur.execute("DROP TABLE HighScores")

    memory_store.save_high_score(9)
    assert memory_store.load_high_score() == 0


def test_closed_store_is_inert():
    store = HighScoreStore(":memory:")
    store.close()

    store.save_high_score(9)
    assert store.load_high_score() == 0
    store.close()


def test_corrupt_database_file_reads_as_zero(tmp_path):
    db_file = tmp_path / "neon_boost.db"
    db_file.write_text("this is not a sqlite database\n" * 60)

    store = HighScoreStore(str(db_file))
    assert not store.available
    assert store.load_high_score() == 0
    store.save_high_score(4)
    assert store.load_high_score() == 0
    store.close()


def test_unopenable_path_reads_as_zero(tmp_path):
    store = HighScoreStore(str(tmp_path / "missing_dir" / "scores.db"))
    assert not store.available
    assert store.load_high_score() == 0
    store.save_high_score(4)
    store.close()
