import os
import uuid

import pytest

from xvault.chunk import CHUNK_SIZE, Chunk
from xvault.volume import Volume, VolumeError, VolumeFileNotFoundError

DEVICE_UID = "4754f539-a953-4dc4-ad37-7a8ab142218c"


def _chunk(name, length=None):
    return Chunk(uid=name, data=bytes(CHUNK_SIZE), length=length)


def test_assign_uid_is_v5_of_path():
    vol = Volume(path="./tmp/vol.rootfs")
    result = vol.assign_uid(DEVICE_UID)
    assert result is vol
    assert vol.uid == str(uuid.uuid5(uuid.UUID(DEVICE_UID), "./tmp/vol.rootfs"))


def test_assign_uid_differs_by_path():
    a = Volume(path="a").assign_uid(DEVICE_UID)
    b = Volume(path="b").assign_uid(DEVICE_UID)
    assert a.uid != b.uid
    assert uuid.UUID(a.uid).version == 5


def test_assign_uid_rejects_empty_device():
    with pytest.raises(ValueError):
        Volume(path="x").assign_uid("")


def test_assign_uid_rejects_empty_path():
    with pytest.raises(ValueError):
        Volume().assign_uid(DEVICE_UID)


def test_assign_uid_rejects_bad_uuid():
    with pytest.raises(ValueError):
        Volume(path="x").assign_uid("not-a-uuid")


def test_build_requires_fields():
    with pytest.raises(ValueError):
        Volume(path="p", max_size=1).build()
    with pytest.raises(ValueError):
        Volume(uid="u", path="p", max_size=0).build()


def test_build_creates_missing_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    vol = Volume(path="vol.rootfs", max_size=5).assign_uid(DEVICE_UID)
    vol.build()
    assert (tmp_path / "vol.rootfs").is_file()
    assert vol.path == "vol.rootfs"
    assert vol.exists() is True


def test_build_resolves_existing_relative_path(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "vol.rootfs").write_bytes(b"")
    vol = Volume(path="vol.rootfs", max_size=5).assign_uid(DEVICE_UID)
    result = vol.build()
    assert result is vol
    assert os.path.isabs(result.path)
    assert os.path.samefile(result.path, tmp_path / "vol.rootfs")


def test_add_and_get_chunk():
    vol = Volume(uid="vol-uid", path="p", max_size=2)
    assert vol.add_chunk(_chunk("one")) == "vol-uid"
    assert vol.get_chunk("one").uid == "one"
    assert vol.get_chunk("two") is None


def test_is_full():
    vol = Volume(uid="v", path="p", max_size=2)
    assert vol.is_full() is False
    vol.add_chunk(_chunk("a"))
    vol.add_chunk(_chunk("b"))
    assert vol.is_full() is True


def test_add_chunk_replaces_same_uid():
    vol = Volume(uid="v", path="p", max_size=5)
    vol.add_chunk(_chunk("a"))
    vol.add_chunk(_chunk("a", length=3))
    assert len(vol.chunks) == 1
    assert vol.get_chunk("a").length == 3


def test_save_missing_file(tmp_path):
    vol = Volume(uid="v", path=str(tmp_path / "missing.rootfs"), max_size=1)
    with pytest.raises(VolumeFileNotFoundError):
        vol.save()


def test_save_writes_encoded_volume(tmp_path):
    path = tmp_path / "vol.rootfs"
    vol = Volume(path=str(path), max_size=10).assign_uid(DEVICE_UID).build()
    vol.add_chunk(_chunk("c", length=1))
    vol.save()
    raw = path.read_bytes()
    assert raw[0] == len(vol.uid)
    assert raw[1 : 1 + len(vol.uid)] == vol.uid.encode()
    assert raw[-1] == 10
    assert bytes(CHUNK_SIZE) in raw


def test_save_too_large(tmp_path):
    path = tmp_path / "vol.rootfs"
    vol = Volume(path=str(path), max_size=100).assign_uid(DEVICE_UID).build()
    for n in range(100):
        vol.add_chunk(_chunk(f"chunk-{n}"))
    with pytest.raises(VolumeError):
        vol.save()