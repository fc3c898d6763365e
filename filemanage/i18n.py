from typing import Dict, Optional

from . import settings

MESSAGES: Dict[str, Dict[str, str]] = {
    "en": {
        "error.auth_failed_check_password": "Authentication failed. Please check your password and try again.",
        "error.generic_load_failed": "Failed to load files. Please try again later.",
        "error.delete_failed": "Failed to delete file. Please try again later.",
    },
    "zh": {
        "error.auth_failed_check_password": "认证失败，请检查您的密码后重试。",
        "error.generic_load_failed": "加载文件失败，请稍后再试。",
        "error.delete_failed": "删除文件失败，请稍后再试。",
    },
}

FALLBACK_LANGUAGE = "en"


class Localizer:
    def __init__(self, language: Optional[str] = None) -> None:
        lang = (language or settings.language()).lower()
        self.language = lang if lang in MESSAGES else FALLBACK_LANGUAGE

    def translate(self, key: str) -> str:
        """Look ``key`` up in the active language, then English, then echo it."""
        table = MESSAGES[self.language]
        if key in table:
            return table[key]
        return MESSAGES[FALLBACK_LANGUAGE].get(key, key)
