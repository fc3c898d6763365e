from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional, Union


@dataclass
class RemoteObject:
    key: Optional[str]
    last_modified: Optional[datetime] = None
    size: int = 0
    etag: Optional[str] = None
    storage_class: Optional[str] = None

    @classmethod
    def from_payload(cls, row: Dict[str, Any]) -> "RemoteObject":
        return cls(
            key=row.get("Key"),
            last_modified=_parse_timestamp(row.get("LastModified")),
            size=_parse_size(row.get("Size")),
            etag=row.get("ETag"),
            storage_class=row.get("StorageClass"),
        )


@dataclass
class ListPage:
    objects: Optional[List[RemoteObject]] = None
    is_truncated: Optional[bool] = None
    next_continuation_token: Optional[str] = None


class SortKey(str, Enum):
    NAME = "name"
    LAST_MODIFIED = "lastModified"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"

    def toggled(self) -> "SortOrder":
        return SortOrder.DESC if self is SortOrder.ASC else SortOrder.ASC


@dataclass(frozen=True)
class SortSpec:
    key: SortKey = SortKey.NAME
    order: SortOrder = SortOrder.ASC


class LoadState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    ERROR = "error"


@dataclass(frozen=True)
class NotStarted:
    pass


@dataclass(frozen=True)
class HasMore:
    token: str


@dataclass(frozen=True)
class Exhausted:
    pass


ContinuationState = Union[NotStarted, HasMore, Exhausted]

NOT_STARTED = NotStarted()
EXHAUSTED = Exhausted()


def continuation_after(page: ListPage) -> ContinuationState:
    """Next cursor state once ``page`` has been merged."""
    token = page.next_continuation_token
    if token and page.is_truncated is not False:
        return HasMore(token)
    return EXHAUSTED


@dataclass
class FileListState:
    files: List[RemoteObject] = field(default_factory=list)
    continuation: ContinuationState = NOT_STARTED
    sort: SortSpec = field(default_factory=SortSpec)
    load_state: LoadState = LoadState.IDLE
    generation: int = 0


def _parse_size(value: Any) -> int:
    try:
        return int(value or 0)
    except (TypeError, ValueError, OverflowError):
        return 0


def _parse_timestamp(value: Any) -> Optional[datetime]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, (int, float)):
        # epoch milliseconds, as serialized by JS clients
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    else:
        text = str(value).strip()
        if text.endswith("Z"):
            text = f"{text[:-1]}+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
