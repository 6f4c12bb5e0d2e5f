"""Typed paths into nested data containers."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, MutableMapping, Sequence
from dataclasses import dataclass
from typing import Any

Segment = str | int


class _Missing:
    """Marker for a location that holds no value."""

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()


@dataclass(frozen=True)
class DataPath:
    """Sequence of mapping keys (``str``) and sequence indices (``int``)."""

    segments: tuple[Segment, ...] = ()

    @classmethod
    def of(cls, segments: Iterable[Segment]) -> DataPath:
        return cls(tuple(segments))

    @classmethod
    def from_pointer(cls, pointer: str) -> DataPath:
        """Parse a JSON pointer such as ``/items/0/name``.

        Segments stay strings; digit segments address list indices when read or
        written against a list.
        """
        if not pointer:
            return cls()
        if not pointer.startswith("/"):
            raise ValueError(f"JSON pointer must start with '/': {pointer!r}")
        return cls(
            tuple(
                part.replace("~1", "/").replace("~0", "~") for part in pointer[1:].split("/")
            )
        )

    @property
    def is_root(self) -> bool:
        return not self.segments

    @property
    def parent(self) -> DataPath:
        return DataPath(self.segments[:-1])

    def child(self, segment: Segment) -> DataPath:
        return DataPath((*self.segments, segment))

    def to_pointer(self) -> str:
        """Render the path as a JSON pointer (``""`` for the root)."""
        return "".join(
            "/" + str(segment).replace("~", "~0").replace("/", "~1") for segment in self.segments
        )

    def read(self, container: Any, default: Any = MISSING) -> Any:
        """Return the value at this path, or ``default`` when any segment is absent."""
        current = container
        for segment in self.segments:
            current = _read_segment(current, segment)
            if current is MISSING:
                return default
        return current

    def write(self, container: Any, value: Any) -> Any:
        """Set the value at this path, creating intermediate containers as needed.

        Returns the root container. A root path write into a mapping is stored
        under the ``""`` key; any other root is replaced by ``value``.
        Intermediate values that are not containers are replaced.
        """
        if self.is_root:
            if isinstance(container, MutableMapping):
                container[""] = value
                return container
            return value

        root = container if _is_writable(container) else _new_container(self.segments[0])
        current = root
        for segment, next_segment in zip(self.segments[:-1], self.segments[1:], strict=True):
            existing = _read_segment(current, segment)
            if not _is_writable(existing):
                existing = _new_container(next_segment)
                _write_segment(current, segment, existing)
            current = existing
        _write_segment(current, self.segments[-1], value)
        return root

    def __str__(self) -> str:
        return ".".join(str(segment) for segment in self.segments)


def _read_segment(container: Any, segment: Segment) -> Any:
    if isinstance(container, Mapping):
        if segment in container:
            return container[segment]
        return MISSING
    if isinstance(container, Sequence) and not isinstance(container, str | bytes):
        index = _as_index(segment)
        if index is None or index >= len(container):
            return MISSING
        return container[index]
    return MISSING


def _write_segment(container: Any, segment: Segment, value: Any) -> None:
    if isinstance(container, MutableMapping):
        container[segment] = value
        return
    index = _as_index(segment)
    if index is None:
        raise TypeError(f"Cannot address list element with key {segment!r}")
    if index >= len(container):
        container.extend([None] * (index + 1 - len(container)))
    container[index] = value


def _as_index(segment: Segment) -> int | None:
    if isinstance(segment, int) and not isinstance(segment, bool):
        return segment if segment >= 0 else None
    if isinstance(segment, str) and segment.isdigit():
        return int(segment)
    return None


def _is_writable(value: Any) -> bool:
    return isinstance(value, MutableMapping | list)


def _new_container(next_segment: Segment) -> dict[Segment, Any] | list[Any]:
    if isinstance(next_segment, int) and not isinstance(next_segment, bool):
        return []
    return {}
