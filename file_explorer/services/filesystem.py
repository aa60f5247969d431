from __future__ import annotations

import asyncio
import os
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Protocol

EntryType = Literal['file', 'directory']


@dataclass(frozen=True)
class DirEntry:
    name: str
    type: EntryType


@dataclass(frozen=True)
class StatSnapshot:
    type: EntryType


class FileSystemPort(Protocol):
    async def read_dir(self, path: str) -> list[DirEntry]:
        ...

    async def stat(self, path: str) -> StatSnapshot:
        ...

    async def copy_file(self, source: str, destination: str) -> None:
        ...

    async def mkdir(self, path: str, recursive: bool = False) -> None:
        ...

    async def rm(self, path: str, recursive: bool = False, force: bool = False) -> None:
        ...

    async def rename(self, source: str, destination: str) -> None:
        ...

    async def exists(self, path: str) -> bool:
        ...


class LocalFileSystem:
    """Filesystem port backed by the local disk.

    Every call runs in a worker thread so callers only suspend on I/O.
    """

    async def read_dir(self, path: str) -> list[DirEntry]:
        return await asyncio.to_thread(_read_dir, path)

    async def stat(self, path: str) -> StatSnapshot:
        return await asyncio.to_thread(_stat, path)

    async def copy_file(self, source: str, destination: str) -> None:
        await asyncio.to_thread(shutil.copyfile, source, destination)

    async def mkdir(self, path: str, recursive: bool = False) -> None:
        await asyncio.to_thread(Path(path).mkdir, parents=recursive, exist_ok=recursive)

    async def rm(self, path: str, recursive: bool = False, force: bool = False) -> None:
        await asyncio.to_thread(_rm, path, recursive, force)

    async def rename(self, source: str, destination: str) -> None:
        await asyncio.to_thread(os.rename, source, destination)

    async def exists(self, path: str) -> bool:
        return await asyncio.to_thread(os.path.lexists, path)


def _read_dir(path: str) -> list[DirEntry]:
    with os.scandir(path) as it:
        return [DirEntry(entry.name, 'directory' if entry.is_dir() else 'file') for entry in it]


def _stat(path: str) -> StatSnapshot:
    target = Path(path)
    target.stat()
    return StatSnapshot('directory' if target.is_dir() else 'file')


def _rm(path: str, recursive: bool, force: bool) -> None:
    target = Path(path)
    try:
        if target.is_dir() and not target.is_symlink():
            if recursive:
                shutil.rmtree(target)
            else:
                target.rmdir()
        else:
            target.unlink()
    except FileNotFoundError:
        if not force:
            raise
