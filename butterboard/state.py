"""Small pieces of application state: redraw requests, camera target, file loading."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Generic, Optional, TypeVar, Union

T = TypeVar("T")


@dataclass
class ForceRedraw:
    """A one-shot flag asking for the window to be redrawn."""

    requested: bool = False

    def set(self) -> None:
        """Request a redraw."""
        self.requested = True

    def reset(self) -> bool:
        """Clear the request and return whether one was pending."""
        pending = self.requested
        self.requested = False
        return pending


@dataclass
class Target(Generic[T]):
    """The entity the camera is focused on, if any."""

    entity: Optional[T] = None

    def set(self, entity: T) -> None:
        """Focus the camera on ``entity``."""
        self.entity = entity

    def reset(self) -> None:
        """Drop the camera focus."""
        self.entity = None


@dataclass(frozen=True)
class FileLoaded:
    """A breadboard source file that was read from disk."""

    name: str
    contents: str


def load_file(path: Union[str, os.PathLike]) -> Optional[FileLoaded]:
    """Read a UTF-8 text file, or return ``None`` if it is not a readable file."""
    source = Path(path)
    if not source.is_file() or not source.name:
        return None
    try:
        contents = source.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError):
        return None
    return FileLoaded(name=source.name, contents=contents)