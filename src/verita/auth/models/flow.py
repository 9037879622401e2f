"""Authorization request models for the OAuth 2.0 Authorization Code Grant.

Per RFC 6749 Section 4.1.1 an authorization request carries:

1. ``response_type`` - REQUIRED, always ``"code"``
2. ``client_id`` - REQUIRED, the client identifier (Section 2.2)
3. ``redirect_uri`` - OPTIONAL (Section 3.1.2)
4. ``scope`` - OPTIONAL (Section 3.3)
5. ``state`` - RECOMMENDED, an opaque value for CSRF protection (Section 10.12)
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import urlencode

from verita.auth.models.errors import (
    AuthorizationRequestError,
    AuthorizationRequestErrorKind,
    InvalidClientIdError,
    InvalidRedirectUriError,
    InvalidScopeError,
    InvalidStateError,
)
from verita.auth.security import validate_redirect_uri

logger = logging.getLogger(__name__)

RESPONSE_TYPE_CODE = "code"

_OPTION_NAMES = frozenset({"redirect_uri", "scope", "state"})


@dataclass(frozen=True)
class AuthorizationRequest:
    """Validated, immutable OAuth 2.0 authorization request.

    Every field is validated on construction, in the order client_id,
    redirect_uri, scope, state. The dataclass constructor takes ``scope`` as
    a sequence of tokens only; ``new()`` and ``new_or_raise()`` also accept a
    space-delimited scope string.

    Raises:
        AuthorizationRequestError: Subclass matching the first rejected field
    """

    client_id: str
    redirect_uri: str | None = None
    scope: tuple[str, ...] | None = None
    state: str | None = None
    response_type: str = field(default=RESPONSE_TYPE_CODE, init=False)

    def __post_init__(self) -> None:
        _validate_client_id(self.client_id)
        _validate_redirect_uri(self.redirect_uri)
        # frozen: store list scopes as a tuple
        object.__setattr__(self, "scope", _validate_scope(self.scope))
        _validate_state(self.state)

    @classmethod
    def new(cls, client_id: Any, **options: Any) -> AuthorizationRequestResult:
        """Create a new authorization request.

        Fields are checked in order (client_id, redirect_uri, scope, state)
        and the first failure is reported.

        Args:
            client_id: The client identifier, must be a non-empty string
            **options: ``redirect_uri`` (str), ``scope`` (space-delimited str
                or sequence of str) and ``state`` (str). ``None`` or a missing
                key means the parameter is not sent.

        Returns:
            AuthorizationRequestResult: The request, or the error kind
        """
        unknown = set(options) - _OPTION_NAMES
        if unknown:
            logger.debug(
                f"Ignoring unknown authorization request options: {sorted(unknown)}"
            )

        try:
            request = cls(
                client_id=client_id,
                redirect_uri=options.get("redirect_uri"),
                scope=_split_scope(options.get("scope")),
                state=options.get("state"),
            )
        except AuthorizationRequestError as e:
            logger.debug(f"Rejected authorization request: {e.kind.value}")
            return AuthorizationRequestResult.err(e.kind)

        return AuthorizationRequestResult.ok(request)

    @classmethod
    def new_or_raise(cls, client_id: Any, **options: Any) -> AuthorizationRequest:
        """Create a new authorization request, raising on invalid input.

        Raises:
            AuthorizationRequestError: Subclass matching the rejected field
        """
        return cls.new(client_id, **options).unwrap()

    def to_params(self) -> dict[str, str]:
        """Return the request parameters, omitting absent fields.

        Keys are ordered response_type, client_id, redirect_uri, scope, state.
        """
        params = {
            "response_type": self.response_type,
            "client_id": self.client_id,
        }

        if self.redirect_uri is not None:
            params["redirect_uri"] = self.redirect_uri
        if self.scope is not None:
            params["scope"] = " ".join(self.scope)
        if self.state is not None:
            params["state"] = self.state

        return params

    def to_query_string(self) -> str:
        """Encode the parameters as an application/x-www-form-urlencoded query."""
        return urlencode(self.to_params())

    def to_url(self, base_url: str) -> str:
        """Build the full authorization URL.

        ``base_url`` is used verbatim; a URL that already has a query string
        is not merged with the request parameters.
        """
        return f"{base_url}?{self.to_query_string()}"


@dataclass(frozen=True)
class AuthorizationRequestResult:
    """Outcome of ``AuthorizationRequest.new()``.

    Holds exactly one of ``request`` or ``error``; build it with ``ok()`` or
    ``err()``.
    """

    request: AuthorizationRequest | None = None
    error: AuthorizationRequestErrorKind | None = None

    def __post_init__(self) -> None:
        if (self.request is None) == (self.error is None):
            raise ValueError("Result must carry exactly one of request or error")

    @classmethod
    def ok(cls, request: AuthorizationRequest) -> AuthorizationRequestResult:
        return cls(request=request)

    @classmethod
    def err(cls, kind: AuthorizationRequestErrorKind) -> AuthorizationRequestResult:
        return cls(error=kind)

    def is_success(self) -> bool:
        return self.request is not None

    def is_error(self) -> bool:
        return self.error is not None

    def unwrap(self) -> AuthorizationRequest:
        """Return the request or raise the error it was rejected with."""
        if self.request is None:
            raise AuthorizationRequestError.from_kind(self.error)
        return self.request


def _validate_client_id(client_id: Any) -> None:
    if not isinstance(client_id, str) or not client_id:
        raise InvalidClientIdError()


def _validate_redirect_uri(uri: Any) -> None:
    if uri is not None and not validate_redirect_uri(uri):
        raise InvalidRedirectUriError()


def _validate_scope(scope: Any) -> tuple[str, ...] | None:
    if scope is None:
        return None
    # str and bytes are Sequences but never a token sequence
    if isinstance(scope, Sequence) and not isinstance(scope, (str, bytes, bytearray)):
        if all(isinstance(token, str) for token in scope):
            return tuple(scope)
    raise InvalidScopeError()


def _validate_state(state: Any) -> None:
    if state is not None and not isinstance(state, str):
        raise InvalidStateError()


def _split_scope(scope: Any) -> Any:
    """Split a space-delimited scope string into tokens; pass anything else on."""
    if isinstance(scope, str):
        return tuple(token for token in scope.split(" ") if token)
    return scope
