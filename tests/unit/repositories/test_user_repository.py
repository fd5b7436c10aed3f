import pytest

from ticketing_api.shared.repositories.user_repository import UserRepository


@pytest.mark.unit
class TestUserRepository:

    async def test_get_by_email_ignores_case(self, db_session, buyer_user):
        user = await UserRepository(db_session).get_by_email(buyer_user.email.upper())

        assert user is not None
        assert user.id == buyer_user.id

    async def test_email_exists(self, db_session, buyer_user):
        repo = UserRepository(db_session)

        assert await repo.email_exists(buyer_user.email) is True
        assert await repo.email_exists("nobody@example.com") is False

    async def test_get_by_reset_token(self, db_session, buyer_user):
        repo = UserRepository(db_session)
        await repo.update(buyer_user.id, reset_token="token-123")

        assert (await repo.get_by_reset_token("token-123")).id == buyer_user.id
        assert await repo.get_by_reset_token("other") is None
