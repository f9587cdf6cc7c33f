"""Tests for the fixture loader."""

import json
from unittest.mock import MagicMock

import psycopg2
import pytest
from psycopg2 import sql

import db.seed
from db.seed import SEED_TABLES, load_fixture, seed


def test_bundled_fixtures_load_in_column_order():
    for table, columns in SEED_TABLES.items():
        rows = load_fixture(table)
        assert rows, f"no fixture rows for {table}"
        assert all(len(row) == len(columns) for row in rows)

    first_user = load_fixture("users")[0]
    assert first_user[0] == "Devin Sanders"


def test_missing_fixture_file_yields_nothing(tmp_path):
    assert load_fixture("users", tmp_path) == []


def test_incomplete_record_is_rejected(tmp_path):
    (tmp_path / "users.json").write_text(json.dumps([{"name": "No Email"}]))

    with pytest.raises(ValueError, match="email"):
        load_fixture("users", tmp_path)


def test_seed_skips_tables_with_rows(cursor, fake_pool):
    cursor.fetchone.return_value = (True,)

    counts = seed()

    assert counts == {table: 0 for table in SEED_TABLES}
    assert cursor.execute.call_count == len(SEED_TABLES)
    fake_pool.conn.commit.assert_called_once()
    assert fake_pool.released == [fake_pool.conn]


def _identifiers(node):
    """Identifier names of a composed statement, in order."""
    if isinstance(node, sql.Identifier):
        return list(node.strings)
    if isinstance(node, sql.Composed):
        return [name for part in node.seq for name in _identifiers(part)]
    return []


@pytest.fixture
def execute_values(monkeypatch):
    recorder = MagicMock(name="execute_values")
    monkeypatch.setattr(db.seed.extras, "execute_values", recorder)
    return recorder


def test_seed_fills_empty_tables(cursor, fake_pool, execute_values):
    cursor.fetchone.return_value = (False,)

    counts = seed()

    assert counts == {table: len(load_fixture(table)) for table in SEED_TABLES}
    assert execute_values.call_count == len(SEED_TABLES)
    for call, (table, columns) in zip(execute_values.call_args_list, SEED_TABLES.items()):
        cur, statement, rows = call.args
        assert cur is cursor
        assert _identifiers(statement) == [table, *columns]
        assert rows == load_fixture(table)
    fake_pool.conn.commit.assert_called_once()
    assert fake_pool.released == [fake_pool.conn]


def test_seed_only_fills_the_empty_tables(cursor, execute_values):
    # users and properties already hold rows
    cursor.fetchone.side_effect = [(True,), (True,), (False,), (False,)]

    counts = seed()

    assert counts["users"] == 0 and counts["properties"] == 0
    assert [_identifiers(c.args[1])[0] for c in execute_values.call_args_list] == [
        "reservations",
        "property_reviews",
    ]


def test_seed_skips_tables_without_a_fixture_file(cursor, execute_values, tmp_path):
    cursor.fetchone.return_value = (False,)
    (tmp_path / "users.json").write_text(json.dumps([
        {"name": "Eva Stanley", "email": "eva@example.com", "password": "x"},
    ]))

    counts = seed(tmp_path)

    assert counts == {"users": 1, "properties": 0, "reservations": 0, "property_reviews": 0}
    execute_values.assert_called_once()
    assert execute_values.call_args.args[2] == [("Eva Stanley", "eva@example.com", "x")]


def test_seed_failure_rolls_back_and_raises(cursor, fake_pool, execute_values):
    cursor.fetchone.return_value = (False,)
    execute_values.side_effect = psycopg2.IntegrityError("duplicate key")

    with pytest.raises(psycopg2.IntegrityError):
        seed()

    fake_pool.conn.commit.assert_not_called()
    fake_pool.conn.rollback.assert_called_once()
    assert fake_pool.released == [fake_pool.conn]
