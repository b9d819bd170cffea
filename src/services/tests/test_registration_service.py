"""Unit tests for registration_service module."""

import unittest
from unittest.mock import AsyncMock

from adapter.fake.user_repository import FakeUserRepository
from domain.model.errors import DuplicateError, ValidationError
from domain.model.user import Role
from services.registration_service import register
from utils.passwords import verify_password


class TestRegister(unittest.IsolatedAsyncioTestCase):
    """Test register function."""

    def setUp(self):
        self.repo = FakeUserRepository()

    async def test_register_success(self):
        user = await register(self.repo, name='A', email='a@x.com', password='secret1')

        self.assertIsNotNone(user.id)
        self.assertEqual(user.name, 'A')
        self.assertEqual(user.email, 'a@x.com')
        self.assertEqual(user.role, Role.USER)
        self.assertEqual(await self.repo.get_by_id(user.id), user)

    async def test_register_stores_hash_not_plaintext(self):
        user = await register(self.repo, name='A', email='a@x.com', password='secret1')

        stored = await self.repo.get_by_id(user.id)
        self.assertNotEqual(stored.password_hash, 'secret1')
        self.assertTrue(verify_password('secret1', stored.password_hash))
        self.assertFalse(verify_password('secret2', stored.password_hash))

    async def test_register_missing_fields(self):
        cases = [
            dict(name=None, email='a@x.com', password='secret1'),
            dict(name='A', email='', password='secret1'),
            dict(name='A', email='a@x.com', password=None),
            dict(name=None, email=None, password=None),
        ]
        for kwargs in cases:
            with self.subTest(**kwargs):
                with self.assertRaises(ValidationError) as context:
                    await register(self.repo, **kwargs)
                self.assertEqual(context.exception.message, "Missing required fields")
        self.assertEqual(self.repo.store, {})

    async def test_register_duplicate_email(self):
        await register(self.repo, name='A', email='a@x.com', password='secret1')

        with self.assertRaises(DuplicateError) as context:
            await register(self.repo, name='B', email='a@x.com', password='secret2')

        self.assertEqual(context.exception.message, "User with this email already exists")
        self.assertEqual(len(self.repo.store), 1)

    async def test_register_lost_race_reports_duplicate(self):
        """Store-level unique violation after a clean pre-check maps to the same error."""
        repo = AsyncMock()
        repo.get_by_email.return_value = None
        repo.create.side_effect = DuplicateError("duplicate key value")

        with self.assertRaises(DuplicateError) as context:
            await register(repo, name='A', email='a@x.com', password='secret1')

        self.assertEqual(context.exception.message, "User with this email already exists")


if __name__ == '__main__':
    unittest.main()
