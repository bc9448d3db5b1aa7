import os
import zipfile
from pathlib import Path


def make_zip(path: Path, entries: dict[str, bytes], mtime: int | None = None) -> Path:
    """Create a ZIP archive with the given entries and optional mtime.

    Entry names ending with '/' become directory entries.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(path, 'w') as z:
        for name, content in entries.items():
            z.writestr(name, content)
    if mtime is not None:
        os.utime(path, (mtime, mtime))
    return path


def make_zip_with_bad_name(path: Path, mtime: int | None = None) -> Path:
    """Create a ZIP whose only entry is flagged UTF-8 but has undecodable name bytes."""
    good_name = "bad_é.txt"
    make_zip(path, {good_name: b"data"})
    raw = path.read_bytes()
    path.write_bytes(raw.replace(good_name.encode('utf-8'), b"bad_\xff\xfe.txt"))
    if mtime is not None:
        os.utime(path, (mtime, mtime))
    return path
