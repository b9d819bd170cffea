"""Unit tests for API dependencies — repository and session verifier wiring."""

import os
import unittest
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

from fastapi import HTTPException

from api.dependencies import get_session_verifier, get_user_repo
from adapter.postgres.user_repository import PostgresUserRepository
from adapter.session.jwt_session import JWTSessionVerifier


def _request_with_pool(pool):
    return SimpleNamespace(app=SimpleNamespace(state=SimpleNamespace(db_pool=pool)))


class TestGetUserRepo(unittest.TestCase):
    """Test cases for get_user_repo() dependency injection function."""

    def test_returns_postgres_repository_when_pool_exists(self):
        pool = MagicMock()

        repo = get_user_repo(_request_with_pool(pool))

        self.assertIsInstance(repo, PostgresUserRepository)
        self.assertIs(repo.pool, pool)

    def test_raises_503_when_pool_missing(self):
        with self.assertRaises(HTTPException) as context:
            get_user_repo(_request_with_pool(None))

        self.assertEqual(context.exception.status_code, 503)
        self.assertEqual(context.exception.detail, "Database unavailable")

    def test_returns_protocol_compatible_object(self):
        repo = get_user_repo(_request_with_pool(MagicMock()))

        expected_methods = [
            'create', 'get_by_email', 'get_by_id',
            'get_profile_with_counts', 'update', 'ping',
        ]
        for method in expected_methods:
            self.assertTrue(
                hasattr(repo, method),
                f"PostgresUserRepository missing protocol method: {method}"
            )


class TestGetSessionVerifier(unittest.TestCase):

    def setUp(self):
        get_session_verifier.cache_clear()

    def tearDown(self):
        get_session_verifier.cache_clear()

    def test_builds_jwt_verifier_from_env(self):
        with patch.dict(os.environ, {"SESSION_SECRET_KEY": "abc", "SESSION_EXPIRATION_DAYS": "7"}):
            verifier = get_session_verifier()

        self.assertIsInstance(verifier, JWTSessionVerifier)
        self.assertEqual(verifier.secret_key, "abc")
        self.assertEqual(verifier.expiration_days, 7)

    def test_missing_secret_fails_loudly(self):
        with patch.dict(os.environ, {"SESSION_SECRET_KEY": ""}):
            with self.assertRaises(ValueError):
                get_session_verifier()


if __name__ == '__main__':
    unittest.main()
