"""Failure taxonomy and the single funnel every remote-call error goes through."""

from enum import Enum
from typing import Any, Optional

import httpx

from endpoints import CREDENTIAL_COOKIE, LOGIN_ROUTE
from .utils import get_logger

AUTH_FAILED = "error.auth_failed_check_password"
LOAD_FAILED = "error.generic_load_failed"
DELETE_FAILED = "error.delete_failed"

UNAUTHORIZED = 401


class ApiError(RuntimeError):
    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class FailureKind(str, Enum):
    AUTHENTICATION = "authentication"
    TRANSIENT = "transient"


def status_of(exc: BaseException) -> Optional[int]:
    """Best-effort HTTP status lookup on an arbitrary exception."""
    if isinstance(exc, httpx.HTTPStatusError):
        return exc.response.status_code
    for attr in ("status_code", "status"):
        value = getattr(exc, attr, None)
        if isinstance(value, int):
            return value
    response = getattr(exc, "response", None)
    if response is not None:
        value = getattr(response, "status_code", None)
        if value is None:
            value = getattr(response, "status", None)
        if isinstance(value, int):
            return value
    return None


def classify(exc: BaseException) -> FailureKind:
    if status_of(exc) == UNAUTHORIZED:
        return FailureKind.AUTHENTICATION
    return FailureKind.TRANSIENT


class ErrorClassifier:
    """Turns a failed remote call into user-visible side effects.

    A 401 anywhere logs the user out: toast, drop the credential cookie,
    go to the login route. Anything else only produces the toast keyed by
    the operation that failed.
    """

    def __init__(self, notifier: Any, credentials: Any, navigator: Any, localizer: Any) -> None:
        self._notifier = notifier
        self._credentials = credentials
        self._navigator = navigator
        self._localizer = localizer
        self.logger = get_logger("filemanage.errors")

    def handle(self, exc: BaseException, message_key: str) -> FailureKind:
        kind = classify(exc)
        if kind is FailureKind.AUTHENTICATION:
            self.logger.warning("Authentication rejected (%s), logging out", exc)
            self._notifier.notify(self._localizer.translate(AUTH_FAILED), "error")
            self._credentials.remove_credential(CREDENTIAL_COOKIE)
            self._navigator.navigate_to(LOGIN_ROUTE)
            return kind
        self.logger.error("Remote call failed status=%s: %s", status_of(exc), exc)
        self._notifier.notify(self._localizer.translate(message_key), "error")
        return kind
