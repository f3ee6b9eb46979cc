"""Convenience exports for application schemas."""

from __future__ import annotations

from .auth import LoginResponseSchema, LoginSchema, RegisterResponseSchema, RegisterSchema

__all__ = [
    "LoginSchema",
    "LoginResponseSchema",
    "RegisterSchema",
    "RegisterResponseSchema",
]
