"""Builders shared by the test modules."""

from datetime import datetime, timezone
from unittest.mock import Mock

from filemanage.models import RemoteObject


def make_file(key, last_modified=None, size=1024):
    """Build a remote object the way the listing API would return it."""
    if isinstance(last_modified, str):
        last_modified = datetime.fromisoformat(last_modified).replace(tzinfo=timezone.utc)
    return RemoteObject(key=key, last_modified=last_modified, size=size, etag=f'"{key}-etag"')


def keys(items):
    return [item.key for item in items]


class StatusError(Exception):
    """Transport failure carrying an HTTP status on its response."""

    def __init__(self, status, message='Error'):
        super().__init__(message)
        self.response = Mock(status_code=status)
