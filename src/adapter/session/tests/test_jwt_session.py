"""Tests for JWTSessionVerifier."""

import unittest
from datetime import datetime, timedelta, timezone

from jose import jwt

from adapter.session.jwt_session import JWT_ALGORITHM, JWTSessionVerifier


class TestJWTSessionVerifier(unittest.TestCase):

    def setUp(self):
        self.verifier = JWTSessionVerifier("test-secret")

    def test_requires_secret(self):
        with self.assertRaises(ValueError):
            JWTSessionVerifier("")

    def test_issued_token_resolves_to_email(self):
        token = self.verifier.issue("a@x.com")

        self.assertEqual(self.verifier.resolve(token), "a@x.com")

    def test_missing_token(self):
        self.assertIsNone(self.verifier.resolve(None))
        self.assertIsNone(self.verifier.resolve(""))

    def test_garbage_token(self):
        self.assertIsNone(self.verifier.resolve("not-a-jwt"))

    def test_token_signed_with_other_secret(self):
        token = JWTSessionVerifier("other-secret").issue("a@x.com")

        self.assertIsNone(self.verifier.resolve(token))

    def test_expired_token(self):
        token = jwt.encode(
            {"sub": "a@x.com", "exp": datetime.now(timezone.utc) - timedelta(minutes=1)},
            "test-secret",
            algorithm=JWT_ALGORITHM,
        )

        self.assertIsNone(self.verifier.resolve(token))

    def test_token_without_expiry_rejected(self):
        token = jwt.encode({"sub": "a@x.com"}, "test-secret", algorithm=JWT_ALGORITHM)

        self.assertIsNone(self.verifier.resolve(token))

    def test_token_without_subject_rejected(self):
        token = jwt.encode(
            {"exp": datetime.now(timezone.utc) + timedelta(days=1)},
            "test-secret",
            algorithm=JWT_ALGORITHM,
        )

        self.assertIsNone(self.verifier.resolve(token))


if __name__ == '__main__':
    unittest.main()
