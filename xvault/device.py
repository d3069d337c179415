"""Devices: collections of volumes addressed by uid."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from xvault.chunk import Chunk, ChunkHandler
from xvault.volume import Volume
from xvault.xfile import XFile, XFileHandler, XFileQuery


@dataclass
class Device(ChunkHandler, XFileHandler):
    """A device holding volumes; chunks are spread across its volumes."""

    uid: str
    volumes: Dict[str, Volume] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.uid = str(uuid.UUID(self.uid))

    def add_volume(self, volume: Volume) -> None:
        """Attach a volume, replacing any with the same uid."""
        self.volumes[volume.uid] = volume

    def get_chunk(self, uid: str) -> Optional[Chunk]:
        for volume in self.volumes.values():
            chunk = volume.get_chunk(uid)
            if chunk is not None:
                return chunk
        return None

    def add_chunk(self, chunk: Chunk) -> Optional[str]:
        """Store the chunk in the least-filled volume that is not full."""
        for volume in sorted(self.volumes.values(), key=lambda v: len(v.chunks)):
            if not volume.is_full():
                return volume.add_chunk(chunk)
        return None

    def is_full(self) -> bool:
        return all(volume.is_full() for volume in self.volumes.values())

    def find_file_chunks(self, query: XFileQuery) -> Optional[List[Chunk]]:
        found = [
            chunk
            for chunk in (
                self.get_chunk(XFile.build_chunk_uid(query.uid, index))
                for index in range(query.chunk_count)
            )
            if chunk is not None
        ]
        return found or None