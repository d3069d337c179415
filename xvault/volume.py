"""Volumes: containers of chunks backed by a file on disk."""

from __future__ import annotations

import os
import uuid
from dataclasses import dataclass, field
from typing import Dict, Optional

from xvault.chunk import Chunk, ChunkHandler

_ENCODE_LIMIT = 4096 * 10


class VolumeError(Exception):
    """Raised when a volume cannot be saved."""


class VolumeFileNotFoundError(VolumeError, FileNotFoundError):
    """Raised when the backing file of a volume does not exist."""


def _varint(value: int) -> bytes:
    if value < 251:
        return bytes([value])
    if value < 1 << 16:
        return b"\xfb" + value.to_bytes(2, "little")
    if value < 1 << 32:
        return b"\xfc" + value.to_bytes(4, "little")
    return b"\xfd" + value.to_bytes(8, "little")


def _encode_str(text: str) -> bytes:
    raw = text.encode("utf-8")
    return _varint(len(raw)) + raw


def _encode_chunk(chunk: Chunk) -> bytes:
    out = _encode_str(chunk.uid) + _varint(len(chunk.data)) + bytes(chunk.data)
    if chunk.length is None:
        return out + b"\x00"
    return out + b"\x01" + _varint(chunk.length)


@dataclass
class Volume(ChunkHandler):
    """A bounded set of chunks stored in a single file."""

    uid: str = ""
    path: str = ""
    chunks: Dict[str, Chunk] = field(default_factory=dict)
    max_size: int = 0

    def assign_uid(self, device_uid: str) -> "Volume":
        """Derive this volume's uid from the device uid and the volume path."""
        if not device_uid:
            raise ValueError("Device UID cannot be empty")
        if not self.path:
            raise ValueError("Volume path cannot be empty")
        device = uuid.UUID(device_uid)
        self.uid = str(uuid.uuid5(device, self.path))
        return self

    def build(self) -> "Volume":
        """Validate the volume and make sure its backing file exists."""
        if not self.uid:
            raise ValueError("Volume uid cannot be empty")
        if not self.path:
            raise ValueError("Volume path cannot be empty")
        if self.max_size <= 0:
            raise ValueError("Volume max_size cannot be 0")

        original = self.path
        existed = os.path.exists(original)
        if not os.path.isabs(original) and existed:
            self.path = os.path.realpath(original)
        if not existed:
            with open(original, "wb"):
                pass
        return self

    def save(self) -> None:
        """Write the volume to its backing file."""
        if not self.exists():
            raise VolumeFileNotFoundError(self.path)
        with open(self.path, "wb") as fp:
            encoded = self._encode()
            if len(encoded) > _ENCODE_LIMIT:
                raise VolumeError(
                    f"encoded volume is {len(encoded)} bytes, limit is {_ENCODE_LIMIT}"
                )
            fp.write(encoded)

    def _encode(self) -> bytes:
        parts = [_encode_str(self.uid), _encode_str(self.path), _varint(len(self.chunks))]
        for key, chunk in self.chunks.items():
            parts.append(_encode_str(key))
            parts.append(_encode_chunk(chunk))
        parts.append(_varint(self.max_size))
        return b"".join(parts)

    def exists(self) -> bool:
        """Return True if the backing file exists."""
        return os.path.exists(self.path)

    def is_full(self) -> bool:
        return len(self.chunks) >= self.max_size

    def get_chunk(self, uid: str) -> Optional[Chunk]:
        return self.chunks.get(uid)

    def add_chunk(self, chunk: Chunk) -> Optional[str]:
        self.chunks[chunk.uid] = chunk
        return self.uid