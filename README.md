# xvault

xvault splits files into 512-byte chunks and gives each chunk a deterministic UUID.
It stores those chunks in volumes that belong to a device. From the chunks it can
find, it writes the original file back out.

## Installation

```
pip install .
```

## Concepts

### `Chunk` (`xvault.chunk`)

A `Chunk` has three fields:

- `uid`, a string.
- `data`, which always holds `CHUNK_SIZE` (512) bytes.
- `length`, which is `None` except on the last chunk of a file. There it gives the number of bytes in `data` that belong to the file.

`ChunkHandler` is the abstract interface for stores:

- `is_full()`
- `get_chunk(uid)`
- `add_chunk(chunk)`
- `add_chunks_from_file(file)`, which adds every chunk of an `XFile`.

### `XFile` and `XFileQuery` (`xvault.xfile`)

An `XFile` has a `uid`, a virtual path `vpath`, a `size` and an ordered list of `chunks`.

- `XFile.from_path(user_uid, file_path, vfolder)` reads a file from disk.
  - `vpath` is `"<vfolder>/<filename>"`.
  - The file's UUID is the UUIDv5 of `vpath` in the namespace `user_uid`.
  - Chunk `i` has the UUIDv5 of `i` as 8 big-endian bytes, in the file's namespace.
  - The last chunk is padded with zeros. A file whose size is an exact multiple of 512 bytes ends with an extra chunk whose `length` is `0`.
- `XFile.build_chunk_uid(file_uid, index)` computes the UUID of a chunk without reading the file. `xfile.chunk_uid(index)` does the same for an existing `XFile`.
- `xfile.export(path)` creates the parent directories and writes the chunks in order. For each chunk it writes only the first `length` bytes when `length` is set.

An `XFileQuery(uid, chunk_count)` names a file's UUID and the number of chunks to look for. `XFileHandler` is the abstract interface with `find_file_chunks(query)`.

### `Volume` (`xvault.volume`)

A `Volume` is a dataclass with these fields:

- `uid`
- `path`
- `chunks`, a dict from chunk UUID to `Chunk`.
- `max_size`, the number of chunks at which the volume counts as full.

Its methods:

- `assign_uid(device_uid)` sets `uid` to the UUIDv5 of `path` in the device's namespace. It raises `ValueError` if either one is empty.
- `build()` checks the volume and creates the backing file if it is missing.
  - It raises `ValueError` if `uid` or `path` is empty, or if `max_size` is not positive.
  - If the path is relative and the file already exists, the path is replaced by its resolved absolute form.
- `save()` writes a compact binary encoding of the volume to its backing file.
  - It raises `VolumeFileNotFoundError` if the file does not exist.
  - It raises `VolumeError` if the encoding is larger than 40 960 bytes.
- `exists()` reports whether the backing file exists.
- `is_full()`, `get_chunk(uid)` and `add_chunk(chunk)` work as a `ChunkHandler`.
  - `add_chunk` does not check `max_size`.
  - `add_chunk` returns the volume's `uid`.

`assign_uid` and `build` return the volume, so you can chain them.

### `Device` (`xvault.device`)

`Device(uid)` checks that `uid` is a valid UUID and normalises it. Any string that is not a valid UUID raises `ValueError`.

- `add_volume(volume)` attaches a volume under its `uid`. A volume with the same `uid` is replaced.
- `add_chunk(chunk)` stores the chunk in the least-filled volume that is not full. It returns that volume's `uid`. If every volume is full it returns `None`.
- `get_chunk(uid)` searches every volume.
- `is_full()` is true when every volume is full.
- `find_file_chunks(query)` returns the chunks it found for indices `0 .. chunk_count - 1`, in index order. Chunks that are missing are skipped. If none are found it returns `None`.

## Example

```python
import math
import uuid
from xvault.chunk import CHUNK_SIZE
from xvault.device import Device
from xvault.volume import Volume
from xvault.xfile import XFile, XFileQuery

USER_UID = uuid.UUID("00000000-0000-4000-8000-000000000001")
DEVICE_UID = "00000000-0000-4000-8000-000000000002"

xfile = XFile.from_path(USER_UID, "notes.txt", "home")

volume = Volume(path="vol1.rootfs", max_size=100)
volume.assign_uid(DEVICE_UID).build()

device = Device(DEVICE_UID)
device.add_volume(volume)
for chunk in xfile.chunks:
    device.add_chunk(chunk)

query = XFileQuery(uid=xfile.uid, chunk_count=math.ceil(xfile.size / CHUNK_SIZE))
chunks = device.find_file_chunks(query) or []

restored = XFile(uid=xfile.uid, vpath=xfile.vpath, size=xfile.size, chunks=chunks)
restored.export("exports/notes.txt")
```

## What it does not do

- There is no command-line tool; xvault is used as a library only.
- Chunks are held in memory. `Volume.save()` writes a volume to disk, but nothing reads a saved volume back.
- There is no networking between devices, and no redundancy or error correction across volumes.

## Running the tests

```
pip install .[test]
pytest
```