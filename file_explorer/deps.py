from __future__ import annotations

from typing import Optional

from fastapi import HTTPException, Request, status

from .config import settings
from .services.file_ops import FileExplorer, validate_path


def get_explorer(request: Request) -> FileExplorer:
    return request.app.state.explorer


def resolve_within_roots(path: Optional[str], roots: Optional[list[str]] = None) -> str:
    allowed = roots or settings.root_list
    try:
        return str(validate_path(path or allowed[0], allowed))
    except PermissionError as exc:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc))
