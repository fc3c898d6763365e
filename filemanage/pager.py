import threading
from typing import Any, Callable, Optional

from .errors import DELETE_FAILED, LOAD_FAILED
from .models import NOT_STARTED, FileListState, HasMore, ListPage, LoadState, continuation_after
from .utils import get_logger

ListFiles = Callable[[Optional[str]], ListPage]
DeleteFile = Callable[[str], Any]
Report = Callable[[BaseException, str], Any]


class Pager:
    """Pulls every page of the remote listing into ``state.files``.

    Each ``reset_and_load`` run takes a new generation number. A run only
    merges pages while its generation is still the current one, so a
    refresh started mid-scan silently retires the older run.
    """

    def __init__(
        self,
        state: FileListState,
        lock: threading.Lock,
        list_files: ListFiles,
        delete_file: DeleteFile,
        report: Report,
    ) -> None:
        self.state = state
        self._lock = lock
        self._list_files = list_files
        self._delete_file = delete_file
        self._report = report
        self.logger = get_logger("filemanage.pager")

    def reset_and_load(self) -> bool:
        with self._lock:
            self.state.generation += 1
            generation = self.state.generation
            self.state.files = []
            self.state.continuation = NOT_STARTED
            self.state.load_state = LoadState.LOADING

        token: Optional[str] = None
        pages = 0
        while True:
            try:
                page = self._list_files(token)
            except Exception as exc:
                with self._lock:
                    if generation != self.state.generation:
                        self.logger.debug("Dropping failure of superseded load gen=%s", generation)
                        return False
                    self.state.load_state = LoadState.ERROR
                self._report(exc, LOAD_FAILED)
                return False

            with self._lock:
                if generation != self.state.generation:
                    self.logger.debug("Dropping page of superseded load gen=%s", generation)
                    return False
                pages += 1
                self.state.files.extend(page.objects or [])
                self.state.continuation = continuation_after(page)
                if isinstance(self.state.continuation, HasMore):
                    token = self.state.continuation.token
                    self.logger.debug("Page %d merged, continuing", pages)
                    continue
                self.state.load_state = LoadState.IDLE
                total = len(self.state.files)
            self.logger.info("%d file(s) loaded in %d page(s).", total, pages)
            return True

    def delete_entry(self, key: str) -> bool:
        try:
            self._delete_file(key)
        except Exception as exc:
            self._report(exc, DELETE_FAILED)
            return False
        self.logger.info("Deleted %s, resyncing listing", key)
        return self.reset_and_load()
