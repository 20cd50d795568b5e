from __future__ import annotations
from pydantic import BaseModel, Field
from typing import Dict, List, Optional


class SearchRequest(BaseModel):
    word: Optional[str] = None


class SearchResult(BaseModel):
    word: str
    valid: bool


class AnagramsResult(BaseModel):
    word: str
    anagrams: List[str] = []
    count: int = 0


class ServiceInfo(BaseModel):
    message: str
    endpoints: Dict[str, str]
    wordCount: int


class ErrorResponse(BaseModel):
    error: str


class NotFoundResponse(ErrorResponse):
    availableEndpoints: Dict[str, str] = Field(default_factory=dict)
