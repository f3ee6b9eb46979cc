# portfolio_api/services/auth/service.py
from __future__ import annotations

import logging

from pymongo.errors import DuplicateKeyError

from portfolio_api.repositories import ROLE_USER, AccountRepository
from portfolio_api.services._shared.base import BaseService, ServiceContext
from portfolio_api.services._shared.errors import AuthenticationError, ConflictError
from portfolio_api.services._shared.ports import PasswordHasher, TokenProvider
from portfolio_api.services.auth.dto import AuthTokenConfig, LoginIn, RegisterIn, TokenOut

log = logging.getLogger(__name__)

EMAIL_TAKEN = "User already exist!!!"


class AuthService(BaseService):
    """
    Account registration and login.

    Passwords are hashed through a :class:`PasswordHasher`; tokens are
    signed through a :class:`TokenProvider`. Tokens are stateless: there is
    no logout or server-side revocation.
    """

    def __init__(
        self,
        *,
        accounts: AccountRepository,
        token_provider: TokenProvider,
        hasher: PasswordHasher,
        token_cfg: AuthTokenConfig | None = None,
        ctx: ServiceContext | None = None,
    ) -> None:
        """
        Initialize the service with its dependencies.

        :param accounts: Repository over the ``users`` collection.
        :param token_provider: Adapter for signing JWTs.
        :param hasher: Adapter for password hashing.
        :param token_cfg: Access token expiry configuration.
        """
        super().__init__(ctx=ctx)
        self.accounts = accounts
        self.tokens = token_provider
        self.hasher = hasher
        self.cfg = token_cfg or AuthTokenConfig()

    # ------------------------------------------------------------------ #
    # Registration
    # ------------------------------------------------------------------ #

    def register(self, dto: RegisterIn) -> None:
        """
        Create an account with role ``user``.

        :raises ConflictError: If the email is already registered, including
            when a concurrent registration wins the race (unique index).
        """
        with self.store_guard("users.register"):
            if self.accounts.exists_by_email(dto.email):
                log.info("auth.register.email_taken", extra=self.log_extra(collection="users"))
                raise ConflictError("Account", EMAIL_TAKEN)

            digest = self.hasher.hash(dto.password)
            try:
                self.accounts.create(
                    username=dto.username,
                    email=dto.email,
                    password_hash=digest,
                    role=ROLE_USER,
                )
            except DuplicateKeyError:
                log.info("auth.register.email_taken_race", extra=self.log_extra(collection="users"))
                raise ConflictError("Account", EMAIL_TAKEN) from None
        log.info("auth.register.created", extra=self.log_extra(collection="users"))

    # ------------------------------------------------------------------ #
    # Login
    # ------------------------------------------------------------------ #

    def login(self, dto: LoginIn) -> TokenOut:
        """
        Verify credentials and issue an access token with ``email`` and
        ``role`` claims.

        :raises AuthenticationError: For an unknown email or a wrong password
            alike.
        """
        with self.store_guard("users.login"):
            account = self.accounts.get_by_email(dto.email)
        if account is None or not self.hasher.verify(dto.password, account.get("password", "")):
            log.info("auth.login.rejected", extra=self.log_extra(collection="users"))
            raise AuthenticationError()

        email = account["email"]
        role = account.get("role", ROLE_USER)
        token = self.tokens.create_access_token(
            identity=email,
            additional_claims={"email": email, "role": role},
            expires_delta=self.cfg.access_expires,
        )
        return TokenOut(access_token=token, email=email, role=role)
