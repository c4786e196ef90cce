"""Tests for the in-memory user directory and token store."""

import pytest

from gatekeeper.core.exceptions import DatabaseError
from gatekeeper.domain.entities.token import Token, TokenType
from tests.factories.user import create_fake_user


class TestInMemoryUserDirectory:
    @pytest.mark.asyncio
    async def test_find_returns_copy_without_tokens(self, user_directory):
        user = create_fake_user()
        user.add_token(Token.create(TokenType.ACTIVATION, user.id))
        await user_directory.create(user)

        found = await user_directory.find_one(user.email.value)

        assert found is not user
        assert found.tokens == []
        assert len(user_directory.owned_tokens(user.id)) == 1

    @pytest.mark.asyncio
    async def test_duplicate_create_raises(self, user_directory):
        user = create_fake_user()
        await user_directory.create(user)

        with pytest.raises(DatabaseError):
            await user_directory.create(create_fake_user(email=user.email.value))

    @pytest.mark.asyncio
    async def test_save_unknown_user_raises(self, user_directory):
        with pytest.raises(DatabaseError):
            await user_directory.save(create_fake_user())

    @pytest.mark.asyncio
    async def test_save_merges_tokens(self, user_directory):
        user = create_fake_user()
        await user_directory.create(user)

        loaded = await user_directory.find_one(user.email.value)
        first = Token.create(TokenType.ACTIVATION, user.id)
        loaded.add_token(first)
        await user_directory.save(loaded)

        again = await user_directory.find_one(user.email.value)
        second = Token.create(TokenType.ACTIVATION, user.id)
        again.add_token(second)
        await user_directory.save(again)

        assert [t.id for t in user_directory.owned_tokens(user.id)] == [first.id, second.id]


class TestInMemoryTokenStore:
    @pytest.mark.asyncio
    async def test_stored_tokens_are_copies(self, token_store):
        token = Token.create(TokenType.ACTIVATION, "u-1")
        await token_store.save_single(token)

        token.mark_used()

        found = await token_store.find_by_type_and_owner_and_used(TokenType.ACTIVATION, "u-1", False)
        assert [t.id for t in found] == [token.id]

    @pytest.mark.asyncio
    async def test_remove_missing_token_is_noop(self, token_store):
        await token_store.remove("missing")
        assert token_store.all() == []
