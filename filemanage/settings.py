import os

from endpoints import BASE_URL

DEFAULT_SESSION_PATH = ".filemanage/session.json"
DEFAULT_HTTP_LOG = "filemanage_http.log"


def _env_str(name: str, default: str) -> str:
    value = os.getenv(name)
    if not value:
        return default
    return value.strip() or default


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if not value:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value in ("1", "true", "TRUE")


def base_url() -> str:
    return _env_str("FILEMANAGE_BASE_URL", BASE_URL)


def timeout() -> float:
    return _env_float("FILEMANAGE_TIMEOUT", 30.0)


def session_path() -> str:
    return _env_str("FILEMANAGE_SESSION", DEFAULT_SESSION_PATH)


def language() -> str:
    return _env_str("FILEMANAGE_LANG", "en")


def http_log_path() -> str:
    return _env_str("FILEMANAGE_HTTP_LOG", os.path.join(os.getcwd(), DEFAULT_HTTP_LOG))


def http_log_enabled() -> bool:
    return not _env_bool("FILEMANAGE_DISABLE_HTTP_LOG", False)
