from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx

from endpoints import FILES
from .client import FileManageClient
from .errors import ApiError
from .models import ListPage, RemoteObject


def _json_or_raise(resp: httpx.Response) -> Dict[str, Any]:
    try:
        payload = resp.json()
    except ValueError as exc:
        raise ApiError(f"Non-JSON response: {resp.text[:200]}") from exc
    if not isinstance(payload, dict):
        raise ApiError(f"Unexpected response: {payload!r}")
    return payload


def list_files(client: FileManageClient, continuation_token: Optional[str] = None) -> ListPage:
    params = {}
    if continuation_token:
        params["continuationToken"] = continuation_token
    resp = client.request(FILES["list"]["method"], FILES["list"]["path"], params=params)
    payload = _json_or_raise(resp)
    contents = payload.get("Contents")
    objects = None
    if contents is not None:
        objects = [RemoteObject.from_payload(row) for row in contents if isinstance(row, dict)]
    truncated = payload.get("IsTruncated")
    return ListPage(
        objects=objects,
        is_truncated=bool(truncated) if truncated is not None else None,
        next_continuation_token=payload.get("NextContinuationToken") or None,
    )


def delete_file(client: FileManageClient, key: str) -> None:
    path = FILES["delete"]["path"].format(key=quote(key, safe=""))
    client.request(FILES["delete"]["method"], path)


class HttpFileApi:
    """Binds the listing and delete calls to one client."""

    def __init__(self, client: FileManageClient) -> None:
        self.client = client

    def list_files(self, continuation_token: Optional[str] = None) -> ListPage:
        return list_files(self.client, continuation_token)

    def delete_file(self, key: str) -> None:
        delete_file(self.client, key)
