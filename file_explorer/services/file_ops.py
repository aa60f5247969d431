from __future__ import annotations

import errno
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Awaitable, Callable, Iterable, Sequence

import structlog

from .filesystem import EntryType, FileSystemPort, LocalFileSystem
from .naming import DirectoryNameGenerator, RandomDirectoryNameGenerator
from .selection import Selection, absolute

logger = structlog.get_logger()

MAX_RANDOM_ATTEMPTS = 10


class NoSelectionError(RuntimeError):
    def __init__(self, message: str = 'No entries selected.'):
        super().__init__(message)


def validate_path(requested_path: str, roots: Sequence[str]) -> Path:
    candidate = Path(requested_path).resolve(strict=False)
    for root in roots:
        base = Path(root).resolve(strict=False)
        if base == candidate or base in candidate.parents:
            return candidate
    raise PermissionError('Path is outside the allowed roots')


@dataclass(frozen=True)
class Entry:
    name: str
    path: str
    type: EntryType

    def to_dict(self) -> dict:
        return {'name': self.name, 'type': self.type, 'path': self.path}


@dataclass(frozen=True)
class OperationFailure:
    path: str
    error: BaseException

    @property
    def code(self) -> str | None:
        if isinstance(self.error, OSError) and self.error.errno is not None:
            return errno.errorcode.get(self.error.errno)
        return None

    @property
    def message(self) -> str:
        if isinstance(self.error, OSError) and self.error.strerror:
            return self.error.strerror
        return str(self.error) or type(self.error).__name__

    def to_dict(self) -> dict:
        return {'path': self.path, 'error': self.message, 'code': self.code}


@dataclass
class OperationResult:
    processed: list[str] = field(default_factory=list)
    failed: list[OperationFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed

    def to_dict(self) -> dict:
        return {'processed': list(self.processed), 'failed': [f.to_dict() for f in self.failed]}


class FileExplorer:
    """Lists directories and runs copy/move/delete over a held selection.

    Entries of one bulk call are processed sequentially in selection order.
    A failing entry is recorded in the result and stays selected; it never
    aborts the rest of the batch.
    """

    def __init__(
        self,
        fs: FileSystemPort | None = None,
        name_generator: DirectoryNameGenerator | None = None,
        selection: Selection | None = None,
        max_random_attempts: int = MAX_RANDOM_ATTEMPTS,
    ):
        self.fs = fs or LocalFileSystem()
        self.name_generator = name_generator or RandomDirectoryNameGenerator()
        self.selection = selection if selection is not None else Selection()
        self.max_random_attempts = max(max_random_attempts, 1)
        self._log = logger.bind(service='file_explorer')

    async def list_entries(self, directory: str) -> list[Entry]:
        base = absolute(directory)
        children = await self.fs.read_dir(base)
        entries = [Entry(child.name, os.path.join(base, child.name), child.type) for child in children]
        entries.sort(key=lambda e: e.name)
        return entries

    def select(self, paths: Iterable[str]) -> None:
        self.selection.select(paths)

    def select_all(self, entries: Iterable[Entry]) -> None:
        self.selection.select_all(entry.path for entry in entries)

    def deselect(self, paths: Iterable[str]) -> None:
        self.selection.deselect(paths)

    def clear_selection(self) -> None:
        self.selection.clear()

    def get_selection(self) -> list[str]:
        return self.selection.snapshot()

    async def copy_selection(self, destination_root: str | None = None) -> OperationResult:
        selected = self._snapshot()
        destination = await self._prepare_destination(selected, destination_root)

        async def copy_one(source: str) -> str:
            target = _target_for(source, destination)
            await self._copy_recursive(source, target)
            return target

        return await self._run('copy', selected, copy_one)

    async def move_selection(self, destination_root: str | None = None) -> OperationResult:
        selected = self._snapshot()
        destination = await self._prepare_destination(selected, destination_root)

        async def move_one(source: str) -> str:
            target = _target_for(source, destination)
            await self._move(source, target)
            self.selection.replace(source, target)
            return target

        return await self._run('move', selected, move_one)

    async def delete_selection(self) -> OperationResult:
        selected = self._snapshot()

        async def delete_one(source: str) -> str:
            await self.fs.rm(source, recursive=True, force=True)
            self.selection.discard(source)
            return source

        return await self._run('delete', selected, delete_one)

    def _snapshot(self) -> list[str]:
        selected = self.selection.snapshot()
        if not selected:
            raise NoSelectionError()
        return selected

    async def _prepare_destination(self, selected: list[str], destination_root: str | None) -> str:
        destination = await self.resolve_destination(selected, destination_root)
        await self.fs.mkdir(destination, recursive=True)
        return destination

    async def resolve_destination(self, selected: list[str], destination_root: str | None = None) -> str:
        if destination_root:
            return absolute(destination_root)

        parent = os.path.dirname(selected[0])
        name = ''
        for attempt in range(1, self.max_random_attempts + 1):
            name = self.name_generator.generate()
            candidate = os.path.join(parent, name)
            if not await self.fs.exists(candidate):
                self._log.debug('file_explorer.destination.generated', path=candidate, attempt=attempt)
                return candidate

        # Random names exhausted: number the last one, never re-randomise.
        suffix = 1
        while True:
            candidate = os.path.join(parent, f'{name}-{suffix}')
            if not await self.fs.exists(candidate):
                self._log.debug('file_explorer.destination.numbered', path=candidate, suffix=suffix)
                return candidate
            suffix += 1

    async def _copy_recursive(self, source: str, destination: str) -> None:
        snapshot = await self.fs.stat(source)
        if snapshot.type == 'directory':
            await self.fs.mkdir(destination, recursive=True)
            for child in await self.fs.read_dir(source):
                await self._copy_recursive(os.path.join(source, child.name), os.path.join(destination, child.name))
        else:
            await self.fs.mkdir(os.path.dirname(destination), recursive=True)
            await self.fs.copy_file(source, destination)

    async def _move(self, source: str, destination: str) -> None:
        if await self._try_rename(source, destination):
            return
        await self._copy_recursive(source, destination)
        await self.fs.rm(source, recursive=True, force=True)

    async def _try_rename(self, source: str, destination: str) -> bool:
        try:
            await self.fs.rename(source, destination)
        except Exception as exc:
            self._log.debug('file_explorer.move.rename_fallback', source=source, destination=destination, error=str(exc))
            return False
        return True

    async def _run(
        self,
        operation: str,
        selected: list[str],
        performer: Callable[[str], Awaitable[str]],
    ) -> OperationResult:
        result = OperationResult()
        for source in selected:
            try:
                result.processed.append(await performer(source))
            except Exception as exc:
                failure = OperationFailure(source, exc)
                result.failed.append(failure)
                self._log.warning(
                    f'file_explorer.{operation}.entry_failed',
                    path=source,
                    error=failure.message,
                    code=failure.code,
                )

        self._log.info(
            f'file_explorer.{operation}.completed',
            selected=len(selected),
            processed=len(result.processed),
            failed=len(result.failed),
        )
        return result


def _target_for(source: str, destination: str) -> str:
    target = os.path.join(destination, os.path.basename(source))
    if os.path.commonpath([source, target]) == source:
        raise OSError(errno.EINVAL, 'Cannot place a directory inside itself', target)
    return target
