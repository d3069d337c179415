"""Chunks of file data and the interface of anything that stores them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from xvault.xfile import XFile

CHUNK_SIZE = 512


@dataclass
class Chunk:
    """A fixed-size block of file data.

    ``data`` always holds ``CHUNK_SIZE`` bytes; ``length`` is set only on the
    final chunk of a file and gives how many of those bytes are meaningful.
    """

    uid: str
    data: bytes
    length: Optional[int] = None

    def __repr__(self) -> str:
        return f"Chunk {{ uid: {self.uid}, length: {self.length!r} }}"


class ChunkHandler(ABC):
    """Something that can store and look up chunks."""

    @abstractmethod
    def is_full(self) -> bool:
        """Return True when no more chunks can be accepted."""

    @abstractmethod
    def get_chunk(self, uid: str) -> Optional[Chunk]:
        """Return the chunk with the given uid, or None."""

    @abstractmethod
    def add_chunk(self, chunk: Chunk) -> Optional[str]:
        """Store a chunk and return the uid of where it went, or None."""

    def add_chunks_from_file(self, file: "XFile") -> None:
        """Store every chunk of a file."""
        for chunk in list(file.chunks):
            self.add_chunk(chunk)