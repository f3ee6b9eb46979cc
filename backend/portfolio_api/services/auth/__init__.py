from .dto import AuthTokenConfig, LoginIn, RegisterIn, TokenOut
from .service import AuthService

__all__ = ["AuthService", "AuthTokenConfig", "LoginIn", "RegisterIn", "TokenOut"]
