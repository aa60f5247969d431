from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException, Query

from ..deps import get_explorer, resolve_within_roots
from ..schemas import (
    ListingOut,
    OperationResultOut,
    SelectAllRequest,
    SelectionOut,
    SelectionRequest,
    TransferRequest,
)
from ..services.file_ops import FileExplorer, NoSelectionError, OperationResult

router = APIRouter(prefix='/api', tags=['files'])


@router.get('/files', response_model=ListingOut)
async def list_files(path: str | None = Query(default=None), explorer: FileExplorer = Depends(get_explorer)):
    directory = resolve_within_roots(path)
    try:
        entries = await explorer.list_entries(directory)
    except PermissionError as exc:
        raise HTTPException(status_code=403, detail=str(exc))
    except Exception as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return {'path': directory, 'entries': [entry.to_dict() for entry in entries]}


@router.get('/selection', response_model=SelectionOut)
def get_selection(explorer: FileExplorer = Depends(get_explorer)):
    return {'paths': explorer.get_selection()}


@router.post('/selection', response_model=SelectionOut)
def select(payload: SelectionRequest, explorer: FileExplorer = Depends(get_explorer)):
    explorer.select([resolve_within_roots(path) for path in payload.paths])
    return {'paths': explorer.get_selection()}


@router.post('/selection/remove', response_model=SelectionOut)
def deselect(payload: SelectionRequest, explorer: FileExplorer = Depends(get_explorer)):
    explorer.deselect([str(Path(path).resolve(strict=False)) for path in payload.paths])
    return {'paths': explorer.get_selection()}


@router.post('/selection/all', response_model=SelectionOut)
async def select_all(payload: SelectAllRequest, explorer: FileExplorer = Depends(get_explorer)):
    directory = resolve_within_roots(payload.path)
    try:
        entries = await explorer.list_entries(directory)
    except Exception as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    explorer.select_all(entries)
    return {'paths': explorer.get_selection()}


@router.delete('/selection', response_model=SelectionOut)
def clear_selection(explorer: FileExplorer = Depends(get_explorer)):
    explorer.clear_selection()
    return {'paths': []}


@router.post('/files/copy', response_model=OperationResultOut)
async def copy_selection(payload: TransferRequest, explorer: FileExplorer = Depends(get_explorer)):
    try:
        destination = await _destination(payload, explorer)
        result = await explorer.copy_selection(destination)
    except NoSelectionError as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    except OSError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return _respond(result)


@router.post('/files/move', response_model=OperationResultOut)
async def move_selection(payload: TransferRequest, explorer: FileExplorer = Depends(get_explorer)):
    try:
        destination = await _destination(payload, explorer)
        result = await explorer.move_selection(destination)
    except NoSelectionError as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    except OSError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return _respond(result)


@router.post('/files/delete', response_model=OperationResultOut)
async def delete_selection(explorer: FileExplorer = Depends(get_explorer)):
    try:
        result = await explorer.delete_selection()
    except NoSelectionError as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    return _respond(result)


async def _destination(payload: TransferRequest, explorer: FileExplorer) -> str:
    # Generated destinations are held to the same roots as explicit ones.
    if payload.destination:
        return resolve_within_roots(payload.destination)
    selected = explorer.get_selection()
    if not selected:
        raise NoSelectionError()
    return resolve_within_roots(await explorer.resolve_destination(selected))


def _respond(result: OperationResult) -> dict:
    if not result.ok:
        raise HTTPException(status_code=409, detail=result.to_dict())
    return result.to_dict()
