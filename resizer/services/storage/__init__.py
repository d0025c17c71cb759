from __future__ import annotations

from .base import ObjectStore
from .registry import get_store

__all__ = [
    "ObjectStore",
    "get_store",
]
