"""Tests for PostgreSQL pool lifecycle helpers."""

import os
import unittest
from unittest.mock import AsyncMock, MagicMock, patch

from adapter.postgres import connection


class TestGetDatabaseUrl(unittest.TestCase):

    def test_database_url_wins(self):
        with patch.dict(os.environ, {"DATABASE_URL": "postgresql://u:p@db:5432/blog"}):
            self.assertEqual(connection.get_database_url(), "postgresql://u:p@db:5432/blog")

    def test_built_from_parts(self):
        env = {
            "DATABASE_URL": "",
            "POSTGRES_HOST": "pg",
            "POSTGRES_PORT": "6543",
            "POSTGRES_DB": "accounts",
            "POSTGRES_USER": "svc",
            "POSTGRES_PASSWORD": "pw",
        }
        with patch.dict(os.environ, env):
            self.assertEqual(connection.get_database_url(), "postgresql://svc:pw@pg:6543/accounts")


class TestPoolLifecycle(unittest.IsolatedAsyncioTestCase):

    @patch('adapter.postgres.connection.asyncpg.create_pool', new_callable=AsyncMock)
    async def test_create_pool_unreachable_returns_none(self, mock_create_pool):
        mock_create_pool.side_effect = OSError("connection refused")

        self.assertIsNone(await connection.create_pool("postgresql://nowhere/db"))

    @patch('adapter.postgres.connection.asyncpg.create_pool', new_callable=AsyncMock)
    async def test_create_pool_verifies_connection(self, mock_create_pool):
        conn = AsyncMock()
        acquire = MagicMock()
        acquire.__aenter__ = AsyncMock(return_value=conn)
        acquire.__aexit__ = AsyncMock(return_value=False)
        pool = MagicMock()
        pool.acquire.return_value = acquire
        mock_create_pool.return_value = pool

        result = await connection.create_pool("postgresql://db/blog")

        self.assertIs(result, pool)
        conn.fetchval.assert_awaited_once_with("SELECT 1")

    async def test_close_pool(self):
        pool = MagicMock()
        pool.close = AsyncMock()

        await connection.close_pool(pool)
        await connection.close_pool(None)

        pool.close.assert_awaited_once()

    def test_schema_declares_unique_email(self):
        schema = connection.SCHEMA_PATH.read_text()

        self.assertIn("UNIQUE (email)", schema)


if __name__ == '__main__':
    unittest.main()
