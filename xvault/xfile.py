"""Files split into chunks with deterministic uids."""

from __future__ import annotations

import hashlib
import os
import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from xvault.chunk import CHUNK_SIZE, Chunk


def _uuid_v5(namespace: uuid.UUID, name: bytes) -> uuid.UUID:
    digest = hashlib.sha1(namespace.bytes + name).digest()
    return uuid.UUID(bytes=digest[:16], version=5)


def _index_bytes(index: int) -> bytes:
    return index.to_bytes(8, "big")


@dataclass
class XFileQuery:
    """Identifies a file's chunks: its uid and how many chunks to look for."""

    uid: str
    chunk_count: int


@dataclass
class XFile:
    """A file as an ordered list of chunks."""

    uid: str
    vpath: str
    size: int
    chunks: List[Chunk] = field(default_factory=list)

    @staticmethod
    def build_chunk_uid(file_uid: str, index: int) -> str:
        """Return the uid of the chunk at ``index`` of the given file."""
        return str(_uuid_v5(uuid.UUID(file_uid), _index_bytes(index)))

    def chunk_uid(self, index: int) -> str:
        """Return the uid of this file's chunk at ``index``."""
        return XFile.build_chunk_uid(self.uid, index)

    @classmethod
    def from_path(
        cls,
        user_uid: Union[uuid.UUID, str],
        file_path: Union[str, os.PathLike],
        vfolder: str,
    ) -> "XFile":
        """Read a file from disk and split it into chunks."""
        user = user_uid if isinstance(user_uid, uuid.UUID) else uuid.UUID(user_uid)
        path = Path(file_path)
        with open(path, "rb") as fp:
            vabs = f"{vfolder}/{path.name}"
            file_uid = _uuid_v5(user, vabs.encode("utf-8"))
            file_length = os.fstat(fp.fileno()).st_size

            chunks: List[Chunk] = []
            index = 0
            while True:
                block = fp.read(CHUNK_SIZE)
                short = len(block) < CHUNK_SIZE
                chunks.append(
                    Chunk(
                        uid=str(_uuid_v5(file_uid, _index_bytes(index))),
                        data=block.ljust(CHUNK_SIZE, b"\x00"),
                        length=file_length - CHUNK_SIZE * index if short else None,
                    )
                )
                if short:
                    break
                index += 1

        return cls(uid=str(file_uid), vpath=vabs, size=file_length, chunks=chunks)

    def export(self, path: Union[str, os.PathLike]) -> None:
        """Write the file's contents to ``path``, creating parent directories."""
        target = Path(path)
        parent = target.parent
        if str(parent):
            parent.mkdir(parents=True, exist_ok=True)
        with open(target, "wb") as fp:
            for chunk in self.chunks:
                data = chunk.data if chunk.length is None else chunk.data[: chunk.length]
                fp.write(data)


class XFileHandler(ABC):
    """Something that can locate the chunks of a file."""

    @abstractmethod
    def find_file_chunks(self, query: XFileQuery) -> Optional[List[Chunk]]:
        """Return the chunks of the queried file that were found, or None."""