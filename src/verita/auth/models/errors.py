"""Exception hierarchy for OAuth 2.0 authorization request errors.

Each validated field of an authorization request has its own error kind and
exception type so callers can report precisely which input was rejected.
"""

from __future__ import annotations

from enum import Enum


class AuthorizationRequestErrorKind(str, Enum):
    """Reason an authorization request could not be constructed."""

    INVALID_CLIENT_ID = "invalid_client_id"
    INVALID_REDIRECT_URI = "invalid_redirect_uri"
    INVALID_SCOPE = "invalid_scope"
    INVALID_STATE = "invalid_state"

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    AuthorizationRequestErrorKind.INVALID_CLIENT_ID: (
        "invalid client_id: must be a non-empty string"
    ),
    AuthorizationRequestErrorKind.INVALID_REDIRECT_URI: (
        "invalid redirect_uri: must be a valid HTTP or HTTPS URL"
    ),
    AuthorizationRequestErrorKind.INVALID_SCOPE: (
        "invalid scope: must be a string or list of strings"
    ),
    AuthorizationRequestErrorKind.INVALID_STATE: "invalid state: must be a string",
}


class OAuth2Error(Exception):
    """Base exception for all OAuth 2.0 related errors."""

    pass


class AuthorizationRequestError(OAuth2Error, ValueError):
    """Raised when authorization request parameters fail validation.

    The ``kind`` attribute identifies the rejected field.
    """

    kind: AuthorizationRequestErrorKind

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.kind.message)

    @classmethod
    def from_kind(cls, kind: AuthorizationRequestErrorKind) -> AuthorizationRequestError:
        return _ERRORS_BY_KIND[kind]()


class InvalidClientIdError(AuthorizationRequestError):
    """Raised when client_id is missing, not a string, or empty."""

    kind = AuthorizationRequestErrorKind.INVALID_CLIENT_ID


class InvalidRedirectUriError(AuthorizationRequestError):
    """Raised when redirect_uri is not an absolute HTTP(S) URL with a host."""

    kind = AuthorizationRequestErrorKind.INVALID_REDIRECT_URI


class InvalidScopeError(AuthorizationRequestError):
    """Raised when scope is neither a string nor a sequence of strings."""

    kind = AuthorizationRequestErrorKind.INVALID_SCOPE


class InvalidStateError(AuthorizationRequestError):
    """Raised when state is not a string."""

    kind = AuthorizationRequestErrorKind.INVALID_STATE


_ERRORS_BY_KIND: dict[AuthorizationRequestErrorKind, type[AuthorizationRequestError]] = {
    error.kind: error
    for error in (
        InvalidClientIdError,
        InvalidRedirectUriError,
        InvalidScopeError,
        InvalidStateError,
    )
}
