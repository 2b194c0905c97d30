"""Pydantic models for API I/O."""

from .requests import ChatRequest, CompareRequest, GeneratePlayerRequest

__all__ = [
    "ChatRequest",
    "CompareRequest",
    "GeneratePlayerRequest",
]
