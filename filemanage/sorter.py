from typing import Any, Callable, Dict, List, Sequence, Tuple, Union

from .models import RemoteObject, SortKey, SortOrder, SortSpec


def name_of(item: RemoteObject) -> str:
    return item.key or ""


def name_order(item: RemoteObject) -> Tuple[str, str]:
    """Alphabetical first, then code point order so "B" lands before "b"."""
    name = name_of(item)
    return name.casefold(), name


def instant_of(item: RemoteObject) -> float:
    if item.last_modified is None:
        return 0.0
    return item.last_modified.timestamp()


EXTRACTORS: Dict[SortKey, Callable[[RemoteObject], Any]] = {
    SortKey.NAME: name_order,
    SortKey.LAST_MODIFIED: instant_of,
}


def parse_sort_key(value: Union[str, SortKey]) -> SortKey:
    try:
        return SortKey(value)
    except ValueError:
        choices = ", ".join(k.value for k in SortKey)
        raise ValueError(f"Unknown sort key {value!r} (expected one of: {choices})") from None


def next_sort(current: SortSpec, key: Union[str, SortKey]) -> SortSpec:
    """Clicking the active column flips the order, any other column starts ascending."""
    new_key = parse_sort_key(key)
    if new_key is current.key:
        return SortSpec(new_key, current.order.toggled())
    return SortSpec(new_key, SortOrder.ASC)


def sorted_view(files: Sequence[RemoteObject], spec: SortSpec) -> List[RemoteObject]:
    # sorted() is stable for reverse=True as well, so ties keep page order
    return sorted(files, key=EXTRACTORS[spec.key], reverse=spec.order is SortOrder.DESC)
