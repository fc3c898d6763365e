from .controller import FileManageController
from .models import LoadState, RemoteObject, SortKey, SortOrder, SortSpec

__all__ = [
    "FileManageController",
    "LoadState",
    "RemoteObject",
    "SortKey",
    "SortOrder",
    "SortSpec",
]
