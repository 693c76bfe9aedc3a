"""Authentication service for user registration and login."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Literal

from folio_identity.domain.user import (
    EmailAlreadyExistsError,
    InvalidEmailError,
    User,
)
from folio_identity.domain.user.value_objects import Email
from folio_identity.exceptions import (
    InvalidCredentialsError,
    PasswordMismatchError,
    RegistrationClosedError,
)
from folio_identity.repositories import UserCredentialRepository
from folio_identity.schemas import TokenPayload
from folio_identity.services import JWTService, PasswordHashingService

if TYPE_CHECKING:
    from folio_identity.domain.user import UserRepository

logger = logging.getLogger(__name__)

RegistrationMode = Literal["open", "single_admin"]


class AuthenticationService:
    """
    Application service for user authentication.

    Orchestrates the auth infrastructure (password hashing, JWT tokens)
    with the User aggregate to provide:
    - Registration (no token is issued; the admin logs in afterwards)
    - Login with password
    - Token verification
    """

    def __init__(
        self,
        user_repository: UserRepository,
        credential_repository: UserCredentialRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
        registration_mode: RegistrationMode = "open",
    ):
        self._user_repo = user_repository
        self._credential_repo = credential_repository
        self._password_service = password_service
        self._jwt_service = jwt_service
        self._registration_mode = registration_mode

    async def register(
        self,
        name: str,
        email: str,
        password: str,
        confirm_password: str | None = None,
    ) -> User:
        if confirm_password is not None and confirm_password != password:
            raise PasswordMismatchError

        if self._registration_mode == "single_admin":
            user_count = await self._user_repo.count()
            if user_count > 0:
                logger.warning("Registration rejected (single admin): %s", email)
                raise RegistrationClosedError

        normalized_email = Email(email).value
        existing_user = await self._user_repo.find_by_email(normalized_email)
        if existing_user is not None:
            raise EmailAlreadyExistsError(normalized_email)

        password_hash = self._password_service.hash(password)
        user = User.create(name=name, email=normalized_email)
        await self._user_repo.save(user)
        await self._credential_repo.save(user_id=user.id, password_hash=password_hash)

        logger.info("User registered: %s", user.email)
        return user

    async def login(
        self,
        email: str,
        password: str,
    ) -> tuple[User, str]:
        try:
            user = await self._user_repo.find_by_email(Email(email))
        except InvalidEmailError:
            user = None
        if user is None:
            logger.warning("Login failed for unknown email: %s", email)
            raise InvalidCredentialsError

        credential = await self._credential_repo.find_by_user_id(user.id)
        if credential is None:
            raise InvalidCredentialsError

        if not self._password_service.verify(password, credential.password_hash):
            logger.warning("Login failed (wrong password): %s", user.email)
            raise InvalidCredentialsError

        await self._credential_repo.update_last_login(user.id)

        access_token = self._jwt_service.create_access_token(
            user_id=user.id,
            email=user.email,
        )

        logger.info("User logged in: %s", user.email)
        return user, access_token

    def verify_token(self, token: str) -> TokenPayload:
        return self._jwt_service.verify_token(token)
