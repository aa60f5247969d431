from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field


class SelectionRequest(BaseModel):
    paths: list[str] = Field(min_length=1)


class SelectAllRequest(BaseModel):
    path: Optional[str] = None


class TransferRequest(BaseModel):
    destination: Optional[str] = None


class EntryOut(BaseModel):
    name: str
    type: Literal['file', 'directory']
    path: str


class ListingOut(BaseModel):
    path: str
    entries: list[EntryOut]


class SelectionOut(BaseModel):
    paths: list[str]


class FailureOut(BaseModel):
    path: str
    error: str
    code: Optional[str] = None


class OperationResultOut(BaseModel):
    processed: list[str]
    failed: list[FailureOut] = Field(default_factory=list)
