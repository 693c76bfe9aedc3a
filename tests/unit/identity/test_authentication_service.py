"""Unit tests for AuthenticationService."""

from unittest.mock import AsyncMock, Mock

import pytest

from folio_identity import (
    AuthenticationService,
    EmailAlreadyExistsError,
    InvalidCredentialsError,
    JWTService,
    PasswordHashingService,
    PasswordMismatchError,
    RegistrationClosedError,
    User,
    UserCredentialData,
)

TEST_EMAIL = "ada@example.com"
TEST_PASSWORD = "secret1"


class TestAuthenticationServiceRegister:
    """Tests for register."""

    def setup_method(self):
        """Set up test fixtures."""
        self.user_repo = AsyncMock()
        self.credential_repo = AsyncMock()
        self.password_service = PasswordHashingService(rounds=4)
        self.jwt_service = Mock(spec=JWTService)

        self.user_repo.find_by_email.return_value = None
        self.user_repo.count.return_value = 0

        self.service = AuthenticationService(
            user_repository=self.user_repo,
            credential_repository=self.credential_repo,
            password_service=self.password_service,
            jwt_service=self.jwt_service,
        )

    @pytest.mark.asyncio
    async def test_register_success(self):
        """New user is saved with a hashed credential and no token."""
        user = await self.service.register("Ada", "Ada@Example.com", TEST_PASSWORD)

        assert user.email == TEST_EMAIL
        assert user.name == "Ada"
        self.user_repo.save.assert_awaited_once_with(user)

        kwargs = self.credential_repo.save.call_args.kwargs
        assert kwargs["user_id"] == user.id
        assert kwargs["password_hash"] != TEST_PASSWORD
        self.jwt_service.create_access_token.assert_not_called()

    @pytest.mark.asyncio
    async def test_register_duplicate_email(self):
        """Registering an existing email is a conflict."""
        self.user_repo.find_by_email.return_value = User.create("Ada", TEST_EMAIL)

        with pytest.raises(EmailAlreadyExistsError):
            await self.service.register("Ada", TEST_EMAIL, TEST_PASSWORD)

        self.user_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_register_password_mismatch(self):
        with pytest.raises(PasswordMismatchError):
            await self.service.register(
                "Ada",
                TEST_EMAIL,
                TEST_PASSWORD,
                confirm_password="different",
            )

    @pytest.mark.asyncio
    async def test_single_admin_mode_blocks_second_user(self):
        """Only the first account can register in single_admin mode."""
        self.user_repo.count.return_value = 1
        service = AuthenticationService(
            user_repository=self.user_repo,
            credential_repository=self.credential_repo,
            password_service=self.password_service,
            jwt_service=self.jwt_service,
            registration_mode="single_admin",
        )

        with pytest.raises(RegistrationClosedError):
            await service.register("Eve", "eve@example.com", TEST_PASSWORD)

    @pytest.mark.asyncio
    async def test_open_mode_allows_more_users(self):
        self.user_repo.count.return_value = 3

        user = await self.service.register("Bob", "bob@example.com", TEST_PASSWORD)

        assert user.email == "bob@example.com"


class TestAuthenticationServiceLogin:
    """Tests for login."""

    def setup_method(self):
        """Set up test fixtures."""
        self.user_repo = AsyncMock()
        self.credential_repo = AsyncMock()
        self.password_service = PasswordHashingService(rounds=4)
        self.jwt_service = JWTService(secret_key="test-secret")

        self.user = User.create("Ada", TEST_EMAIL)
        self.user_repo.find_by_email.return_value = self.user
        self.credential_repo.find_by_user_id.return_value = UserCredentialData(
            user_id=self.user.id,
            password_hash=self.password_service.hash(TEST_PASSWORD),
            last_login_at=None,
        )

        self.service = AuthenticationService(
            user_repository=self.user_repo,
            credential_repository=self.credential_repo,
            password_service=self.password_service,
            jwt_service=self.jwt_service,
        )

    @pytest.mark.asyncio
    async def test_login_success(self):
        """Valid credentials return the user and a verifiable token."""
        user, token = await self.service.login(TEST_EMAIL, TEST_PASSWORD)

        assert user == self.user
        assert self.service.verify_token(token).user_id == self.user.id
        self.credential_repo.update_last_login.assert_awaited_once_with(self.user.id)

    @pytest.mark.asyncio
    async def test_login_wrong_password(self):
        with pytest.raises(InvalidCredentialsError):
            await self.service.login(TEST_EMAIL, "wrong-password")

        self.credential_repo.update_last_login.assert_not_called()

    @pytest.mark.asyncio
    async def test_login_unknown_email(self):
        self.user_repo.find_by_email.return_value = None

        with pytest.raises(InvalidCredentialsError):
            await self.service.login("nobody@example.com", TEST_PASSWORD)

    @pytest.mark.asyncio
    async def test_login_malformed_email_is_invalid_credentials(self):
        """A malformed email must not reveal anything beyond bad credentials."""
        with pytest.raises(InvalidCredentialsError):
            await self.service.login("not-an-email", TEST_PASSWORD)

        self.user_repo.find_by_email.assert_not_called()

    @pytest.mark.asyncio
    async def test_login_without_credential_row(self):
        self.credential_repo.find_by_user_id.return_value = None

        with pytest.raises(InvalidCredentialsError):
            await self.service.login(TEST_EMAIL, TEST_PASSWORD)
