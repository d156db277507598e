"""
Property paths for validation diagnostics.

A path renders as the root property name followed by array indices and
shape keys:

- "bar"
- "bar[0]"
- "bar[0].fizz"
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class PathSegmentType(Enum):
    KEY = auto()
    INDEX = auto()


@dataclass(frozen=True, slots=True)
class PathSegment:
    """Represents a single segment in a path."""

    type: PathSegmentType
    value: str | int

    @classmethod
    def key(cls, name: str) -> PathSegment:
        return cls(PathSegmentType.KEY, name)

    @classmethod
    def index(cls, idx: int) -> PathSegment:
        return cls(PathSegmentType.INDEX, idx)


@dataclass(frozen=True, slots=True)
class PropertyPath:
    """Immutable location of a value inside the validated property."""

    segments: tuple[PathSegment, ...] = ()
    separator: str = "."

    @classmethod
    def root(cls, name: str | PropertyPath = "", separator: str = ".") -> PropertyPath:
        if isinstance(name, PropertyPath):
            return name
        if not name:
            return cls((), separator)
        return cls((PathSegment.key(name),), separator)

    def key(self, name: str) -> PropertyPath:
        return PropertyPath((*self.segments, PathSegment.key(str(name))), self.separator)

    def index(self, idx: int) -> PropertyPath:
        return PropertyPath((*self.segments, PathSegment.index(idx)), self.separator)

    def __str__(self) -> str:
        parts: list[str] = []
        for segment in self.segments:
            if segment.type == PathSegmentType.INDEX:
                parts.append(f"[{segment.value}]")
            elif parts:
                parts.append(f"{self.separator}{segment.value}")
            else:
                parts.append(str(segment.value))
        return "".join(parts)
