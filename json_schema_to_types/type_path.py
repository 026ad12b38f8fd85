"""
Canonical addresses of schema nodes.

A type path is the ordered list of segments leading from the document root
to a node, rendered as a JSON-Pointer-like fragment such as
"#/definitions/link". It is the key of a type dictionary.
"""

from __future__ import annotations

from dataclasses import dataclass

ROOT_SEGMENT = "#"


def _escape(segment: str) -> str:
    return segment.replace("~", "~0").replace("/", "~1")


def _unescape(segment: str) -> str:
    return segment.replace("~1", "/").replace("~0", "~")


@dataclass(frozen=True)
class TypePath:
    """An immutable, order-significant sequence of path segments."""

    segments: tuple[str, ...] = ()

    @staticmethod
    def root() -> TypePath:
        """The canonical root path, rendered as "#"."""
        return TypePath((ROOT_SEGMENT,))

    @staticmethod
    def from_string(text: str) -> TypePath:
        """
        Parse a rendered path back into segments.

        Args:
            text: A fragment such as "#/definitions/link" or "#"

        Returns:
            The corresponding TypePath
        """
        if text in ("", ROOT_SEGMENT):
            return TypePath.root()
        head, *rest = text.split("/")
        segments = [head] if head else [ROOT_SEGMENT]
        segments.extend(_unescape(part) for part in rest)
        return TypePath(tuple(segments))

    def add_child(self, segment: str | int) -> TypePath:
        """Return a new path with one segment appended."""
        return TypePath(self.segments + (str(segment),))

    def is_root(self) -> bool:
        return self.segments == (ROOT_SEGMENT,)

    def __str__(self) -> str:
        if not self.segments:
            return ""
        head, *rest = self.segments
        # The leading "#" is never escaped so the rendering stays a fragment
        return "/".join([head] + [_escape(part) for part in rest])

    def __len__(self) -> int:
        return len(self.segments)
