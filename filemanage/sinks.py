from collections import deque
from typing import Deque, Optional

from .utils import get_logger

HISTORY_LIMIT = 50


class LogNotifier:
    """Toast sink for headless use: every notification goes to the log."""

    def __init__(self) -> None:
        self.logger = get_logger("filemanage")

    def notify(self, message: str, level: str = "info") -> None:
        if level == "error":
            self.logger.error(message)
        elif level == "warning":
            self.logger.warning(message)
        else:
            self.logger.info(message)


class RouteNavigator:
    def __init__(self, start: str = "/filemanage", limit: int = HISTORY_LIMIT) -> None:
        self.history: Deque[str] = deque([start], maxlen=limit)
        self.logger = get_logger("filemanage")

    @property
    def current(self) -> Optional[str]:
        return self.history[-1] if self.history else None

    def navigate_to(self, route: str) -> None:
        self.logger.debug("Navigate %s -> %s", self.current, route)
        self.history.append(route)
