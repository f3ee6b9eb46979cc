"""Registration and login endpoints."""

from __future__ import annotations

from flask import Blueprint

from portfolio_api.api.deps import build_auth_service, json_response, read_json_body, timing
from portfolio_api.schemas import (
    LoginResponseSchema,
    LoginSchema,
    RegisterResponseSchema,
    RegisterSchema,
)
from portfolio_api.services import LoginIn, RegisterIn

bp = Blueprint("auth", __name__)

register_schema = RegisterSchema()
login_schema = LoginSchema()
register_response_schema = RegisterResponseSchema()
login_response_schema = LoginResponseSchema()


@bp.post("/register")
@timing
def register():
    """Create an account with role ``user``."""

    data = register_schema.load(read_json_body())
    build_auth_service().register(RegisterIn(**data))
    body = register_response_schema.dump(
        {"success": True, "message": "User registered successfully!"}
    )
    return json_response(body, status=201)


@bp.post("/login")
@timing
def login():
    """Check credentials and issue a bearer token."""

    data = login_schema.load(read_json_body())
    token = build_auth_service().login(LoginIn(**data))
    body = login_response_schema.dump(
        {
            "success": True,
            "message": "User successfully logged in!",
            "accessToken": token.access_token,
        }
    )
    return json_response(body)
