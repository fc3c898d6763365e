from typing import Any, Optional
import json

try:
    import httpx
except ModuleNotFoundError as exc:  # pragma: no cover - user environment dependency
    raise ModuleNotFoundError(
        "Missing dependency 'httpx'. Install with: pip install httpx"
    ) from exc

from . import settings
from .utils import append_log_line, get_logger, redact_payload, redacted_headers, truncate_text


class FileManageClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        cookies: Optional[httpx.Cookies] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
        http_log_path: Optional[str] = None,
    ):
        self.base_url = (base_url or settings.base_url()).rstrip('/')
        self.timeout = timeout if timeout is not None else settings.timeout()
        self.logger = get_logger('filemanage.http')
        self._client = httpx.Client(
            base_url=self.base_url,
            cookies=cookies,
            timeout=self.timeout,
            transport=transport,
        )
        # the client copies the jar; keep a handle on the live one
        self.cookies = self._client.cookies
        if http_log_path is None and settings.http_log_enabled():
            http_log_path = settings.http_log_path()
        self.http_log_path = http_log_path

    def _log(self, line: str) -> None:
        if self.http_log_path:
            append_log_line(self.http_log_path, line)

    def request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        url = path if path.startswith('http') else f"{self.base_url}{path}"
        headers = dict(kwargs.get('headers', {}) or {})
        headers.setdefault("Accept", "application/json")
        kwargs['headers'] = headers
        redacted = redacted_headers(headers)
        params = kwargs.get("params")
        self.logger.debug('HTTP %s %s headers=%s params=%s', method, url, redacted, params)
        if params:
            self._log(f"{method} {url} headers={redacted} params={redact_payload(params)}")
        else:
            self._log(f"{method} {url} headers={redacted}")
        resp = self._client.request(method, url, **kwargs)
        response_body: Any = None
        try:
            response_body = redact_payload(resp.json())
        except ValueError:
            response_body = truncate_text(resp.text or "")
        self._log(
            f"{method} {url} status={resp.status_code} response={json.dumps(response_body, ensure_ascii=True, default=str)}",
        )
        resp.raise_for_status()
        return resp

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "FileManageClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
