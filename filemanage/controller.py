"""File-manage view state: paged listing, sorted projection, error funnel."""

import threading
from typing import Any, List, Optional, Tuple, Union

from .errors import ErrorClassifier
from .models import ContinuationState, FileListState, LoadState, RemoteObject, SortKey, SortSpec
from .pager import DeleteFile, ListFiles, Pager
from .sorter import next_sort, sorted_view
from .utils import get_logger


class FileManageController:
    """Owns one listing's state and is the only thing that mutates it.

    Collaborators are duck-typed: ``notifier.notify(message, level)``,
    ``credentials.remove_credential(name)``, ``navigator.navigate_to(path)``
    and ``localizer.translate(key)``.
    """

    def __init__(
        self,
        list_files: ListFiles,
        delete_file: DeleteFile,
        notifier: Any,
        credentials: Any,
        navigator: Any,
        localizer: Any,
    ) -> None:
        self._state = FileListState()
        self._lock = threading.Lock()
        self.logger = get_logger("filemanage.controller")
        self.classifier = ErrorClassifier(notifier, credentials, navigator, localizer)
        self.pager = Pager(self._state, self._lock, list_files, delete_file, self.classifier.handle)
        self._view_cache: Optional[Tuple[int, int, SortSpec, List[RemoteObject]]] = None

    def mount(self) -> bool:
        return self.reset_and_load()

    def reset_and_load(self) -> bool:
        return self.pager.reset_and_load()

    def delete_entry(self, key: str) -> bool:
        return self.pager.delete_entry(key)

    def set_sort(self, key: Union[str, SortKey]) -> SortSpec:
        with self._lock:
            self._state.sort = next_sort(self._state.sort, key)
            spec = self._state.sort
        self.logger.debug("Sort set to %s %s", spec.key.value, spec.order.value)
        return spec

    @property
    def sort_spec(self) -> SortSpec:
        return self._state.sort

    @property
    def load_state(self) -> LoadState:
        return self._state.load_state

    @property
    def continuation(self) -> ContinuationState:
        return self._state.continuation

    @property
    def files(self) -> List[RemoteObject]:
        with self._lock:
            return list(self._state.files)

    @property
    def sorted_files(self) -> List[RemoteObject]:
        with self._lock:
            state = self._state
            stamp = (state.generation, len(state.files), state.sort)
            cached = self._view_cache
            if cached is None or cached[:3] != stamp:
                cached = stamp + (sorted_view(state.files, state.sort),)
                self._view_cache = cached
            return list(cached[3])
