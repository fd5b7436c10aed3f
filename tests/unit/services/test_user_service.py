import pytest

from ticketing_api.config.settings import settings
from ticketing_api.shared.core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DuplicateResourceError,
)
from ticketing_api.shared.models.enums import UserRole, UserStatus
from ticketing_api.shared.schemas.user import UserCreate, UserLogin, UserUpdate
from ticketing_api.shared.services.user_service import UserService
from ticketing_api.shared.utils.security import SecurityUtils


@pytest.fixture
def service(db_session, email_sender) -> UserService:
    return UserService(db_session, email_sender)


@pytest.fixture
async def registered(service):
    return await service.register(
        UserCreate(name="Dana", email="Dana@Example.com", password="password123")
    )


@pytest.fixture
def unchecked_email(service, monkeypatch):
    """Pretend another request registered the email after the uniqueness check."""

    async def email_exists(email: str) -> bool:
        return False

    monkeypatch.setattr(service.repo, "email_exists", email_exists)


@pytest.mark.unit
class TestRegistrationAndLogin:

    async def test_register_creates_buyer_with_lowercase_email(self, registered):
        assert registered.email == "dana@example.com"
        assert registered.role is UserRole.BUYER
        assert registered.status is UserStatus.ACTIVE

    async def test_password_is_hashed(self, service, registered):
        user = await service.repo.get_by_id(registered.id)

        assert user.password_hash != "password123"
        assert SecurityUtils.verify_password("password123", user.password_hash)

    async def test_duplicate_email_any_case(self, service, registered):
        with pytest.raises(DuplicateResourceError):
            await service.register(UserCreate(name="Other", email="DANA@example.com", password="password123"))

    async def test_duplicate_email_racing_the_check(self, service, registered, unchecked_email):
        with pytest.raises(DuplicateResourceError):
            await service.register(UserCreate(name="Other", email="dana@example.com", password="password123"))

    async def test_login_returns_typed_tokens(self, service, registered):
        auth = await service.login(UserLogin(email="dana@example.com", password="password123"))

        access = SecurityUtils.decode_token(auth.access_token, settings.SECRET_KEY, "access")
        refresh = SecurityUtils.decode_token(auth.refresh_token, settings.SECRET_KEY, "refresh")
        assert access["user_id"] == str(registered.id)
        assert access["role"] == "buyer"
        assert refresh["email"] == "dana@example.com"
        assert auth.expires_in == settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60

    async def test_login_wrong_password(self, service, registered):
        with pytest.raises(AuthenticationError):
            await service.login(UserLogin(email="dana@example.com", password="wrong-password"))

    async def test_login_unknown_email(self, service):
        with pytest.raises(AuthenticationError):
            await service.login(UserLogin(email="ghost@example.com", password="password123"))

    async def test_inactive_user_cannot_login(self, service, registered):
        await service.repo.update(registered.id, status=UserStatus.INACTIVE)

        with pytest.raises(AuthorizationError):
            await service.login(UserLogin(email="dana@example.com", password="password123"))


@pytest.mark.unit
class TestTokenRefresh:

    async def test_refresh_issues_new_pair(self, service, registered):
        auth = await service.login(UserLogin(email="dana@example.com", password="password123"))

        tokens = await service.refresh(auth.refresh_token)

        payload = SecurityUtils.decode_token(tokens.access_token, settings.SECRET_KEY, "access")
        assert payload["user_id"] == str(registered.id)

    async def test_access_token_cannot_refresh(self, service, registered):
        auth = await service.login(UserLogin(email="dana@example.com", password="password123"))

        with pytest.raises(AuthenticationError):
            await service.refresh(auth.access_token)

    async def test_garbage_token(self, service):
        with pytest.raises(AuthenticationError):
            await service.refresh("not-a-jwt")


@pytest.mark.unit
class TestProfile:

    async def test_update_name_and_password(self, service, registered):
        updated = await service.update_profile(registered.id, UserUpdate(name="Dana S", password="newpassword1"))

        assert updated.name == "Dana S"
        await service.login(UserLogin(email="dana@example.com", password="newpassword1"))

    async def test_email_taken_by_someone_else(self, service, registered, buyer_user):
        with pytest.raises(DuplicateResourceError):
            await service.update_profile(registered.id, UserUpdate(email=buyer_user.email))

    async def test_email_taken_after_the_check(self, service, registered, buyer_user, unchecked_email):
        with pytest.raises(DuplicateResourceError):
            await service.update_profile(registered.id, UserUpdate(email=buyer_user.email))

    async def test_keeping_own_email_is_fine(self, service, registered):
        updated = await service.update_profile(registered.id, UserUpdate(email="DANA@example.com"))

        assert updated.email == "dana@example.com"


@pytest.mark.unit
class TestPasswordReset:

    async def test_reset_flow(self, service, registered, email_sender):
        await service.request_password_reset("dana@example.com")
        email, token = email_sender.sent[-1]

        await service.reset_password(token, "brandnew123")

        assert email == "dana@example.com"
        await service.login(UserLogin(email="dana@example.com", password="brandnew123"))

    async def test_reset_token_works_once(self, service, registered, email_sender):
        await service.request_password_reset("dana@example.com")
        _, token = email_sender.sent[-1]
        await service.reset_password(token, "brandnew123")

        with pytest.raises(AuthenticationError):
            await service.reset_password(token, "another1234")

    async def test_unknown_email_sends_nothing(self, service, email_sender):
        await service.request_password_reset("ghost@example.com")

        assert email_sender.sent == []

    async def test_access_token_is_not_a_reset_token(self, service, registered):
        auth = await service.login(UserLogin(email="dana@example.com", password="password123"))

        with pytest.raises(AuthenticationError):
            await service.reset_password(auth.access_token, "brandnew123")
