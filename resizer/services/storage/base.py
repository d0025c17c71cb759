from __future__ import annotations

from abc import ABC, abstractmethod

from resizer.models import StoredObject


class ObjectStore(ABC):
    """Abstract interface for an object-storage backend."""

    name: str = "abstract"

    @abstractmethod
    def get_object(self, bucket: str, key: str) -> StoredObject:
        """Fetch one object.

        Raises
        ------
        resizer.errors.NotFound
            The bucket or the key does not exist.
        resizer.errors.StorageError
            Any other backend failure.
        """
