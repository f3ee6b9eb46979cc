"""Authentication-related Marshmallow schemas.

Only presence of the credential fields is enforced; unknown keys are dropped.
"""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, fields, validate

_required = validate.Length(min=1)


class RegisterSchema(Schema):
    """Input payload for account registration."""

    class Meta:
        unknown = EXCLUDE

    username = fields.String(required=True, validate=_required)
    email = fields.String(required=True, validate=_required)
    password = fields.String(required=True, validate=_required)


class LoginSchema(Schema):
    """Input payload for authenticating an account."""

    class Meta:
        unknown = EXCLUDE

    email = fields.String(required=True, validate=_required)
    password = fields.String(required=True, validate=_required)


class RegisterResponseSchema(Schema):
    """Response payload after a successful registration."""

    success = fields.Boolean(required=True)
    message = fields.String(required=True)


class LoginResponseSchema(RegisterResponseSchema):
    """Response payload carrying the issued access token."""

    accessToken = fields.String(required=True)
