"""Tests for the process-wide pool lifecycle."""

from unittest.mock import MagicMock

import psycopg2
import psycopg2.extras
import pytest

import db.connection as connection


@pytest.fixture
def no_pool(monkeypatch):
    monkeypatch.setattr(connection, "_pool", None)


def test_get_connection_before_init_raises(no_pool):
    with pytest.raises(RuntimeError, match="init_pool"):
        connection.get_connection()


def test_init_pool_creates_threaded_pool_once(no_pool, monkeypatch):
    factory = MagicMock(name="ThreadedConnectionPool")
    monkeypatch.setattr(connection.pool, "ThreadedConnectionPool", factory)

    connection.init_pool(2, 4, dsn="postgresql://u:p@db/lightbnb")
    connection.init_pool(2, 4, dsn="postgresql://u:p@db/lightbnb")

    factory.assert_called_once_with(2, 4, "postgresql://u:p@db/lightbnb")
    assert connection.get_connection() is factory.return_value.getconn.return_value


def test_init_pool_unreachable_database_raises(no_pool, monkeypatch):
    factory = MagicMock(side_effect=psycopg2.OperationalError("refused"))
    monkeypatch.setattr(connection.pool, "ThreadedConnectionPool", factory)

    with pytest.raises(psycopg2.OperationalError):
        connection.init_pool()
    assert connection._pool is None


def test_release_and_close(fake_pool):
    conn = connection.get_connection()
    connection.release_connection(conn)

    assert fake_pool.released == [conn]

    connection.close_pool()
    assert fake_pool.closed
    assert connection._pool is None


def test_dict_cursor_uses_real_dict_rows(fake_pool):
    with connection.dict_cursor(fake_pool.conn) as cur:
        assert cur is fake_pool.cursor

    fake_pool.conn.cursor.assert_called_once_with(cursor_factory=psycopg2.extras.RealDictCursor)
