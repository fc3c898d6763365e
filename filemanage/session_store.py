import json
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import httpx

from endpoints import CREDENTIAL_COOKIE
from .utils import get_logger


def load_cookies_from_json(path: str) -> httpx.Cookies:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    cookies = httpx.Cookies()

    # Common browser export format: list of cookie dicts
    if isinstance(data, list):
        for item in data:
            _set_cookie(cookies, item)
        return cookies

    # Fallback: dict of name -> value
    if isinstance(data, dict):
        for name, value in data.items():
            if isinstance(value, dict) and "value" in value:
                _set_cookie(cookies, dict(value, name=name))
            else:
                cookies.set(name, value)
        return cookies

    raise ValueError("Unsupported cookies JSON format")


def _set_cookie(cookies: httpx.Cookies, item: Dict[str, Any]) -> None:
    name = item.get("name")
    value = item.get("value")
    if name and value:
        cookies.set(name, value, domain=item.get("domain") or "", path=item.get("path", "/"))


def _export_cookies(cookies: httpx.Cookies) -> List[Dict[str, Any]]:
    out: List[Dict[str, Any]] = []
    for c in cookies.jar:
        out.append(
            {
                "name": c.name,
                "value": c.value,
                "domain": c.domain,
                "path": c.path,
            }
        )
    return out


def save_session(path: str, cookies: httpx.Cookies) -> None:
    session_path = Path(path)
    session_path.parent.mkdir(parents=True, exist_ok=True)
    payload = {"cookies": _export_cookies(cookies)}
    session_path.write_text(json.dumps(payload, indent=2, ensure_ascii=True) + "\n", encoding="utf-8")
    os.chmod(session_path, 0o600)


def load_session(path: str) -> httpx.Cookies:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("Session file must be a JSON object")
    cookies = httpx.Cookies()
    for item in data.get("cookies", []):
        _set_cookie(cookies, item)
    return cookies


class CookieCredentialStore:
    """Credential cookies shared with the HTTP client, mirrored to a session file."""

    def __init__(self, cookies: httpx.Cookies, path: Optional[str] = None) -> None:
        self.cookies = cookies
        self.path = path
        self.logger = get_logger("filemanage.session")

    @classmethod
    def open(cls, path: str) -> "CookieCredentialStore":
        cookies = load_session(path) if Path(path).exists() else httpx.Cookies()
        return cls(cookies, path)

    def get_credential(self, name: str = CREDENTIAL_COOKIE) -> Optional[str]:
        for c in self.cookies.jar:
            if c.name == name:
                return c.value
        return None

    def set_credential(self, value: str, name: str = CREDENTIAL_COOKIE) -> None:
        self.cookies.set(name, value)
        self._persist()

    def remove_credential(self, name: str = CREDENTIAL_COOKIE) -> None:
        # httpx.Cookies.delete covers every domain/path the name was set on
        self.cookies.delete(name)
        self.logger.info("Removed credential cookie %s", name)
        self._persist()

    def _persist(self) -> None:
        if self.path:
            save_session(self.path, self.cookies)
