"""Verita: OAuth 2.0 authorization request construction."""

from verita.auth.models.errors import (
    AuthorizationRequestError,
    AuthorizationRequestErrorKind,
    InvalidClientIdError,
    InvalidRedirectUriError,
    InvalidScopeError,
    InvalidStateError,
    OAuth2Error,
)
from verita.auth.models.flow import AuthorizationRequest, AuthorizationRequestResult

__all__ = [
    "AuthorizationRequest",
    "AuthorizationRequestError",
    "AuthorizationRequestErrorKind",
    "AuthorizationRequestResult",
    "InvalidClientIdError",
    "InvalidRedirectUriError",
    "InvalidScopeError",
    "InvalidStateError",
    "OAuth2Error",
]
