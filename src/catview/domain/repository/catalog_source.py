"""Abstract source of raw catalog records.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (HTTP, in-memory) live in the
infrastructure layer and in the test fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class CatalogSource(ABC):

    @abstractmethod
    def fetch_records(self) -> list[Any]:
        """Return the raw product records, in catalog order.

        Raises LoadError if the records cannot be retrieved and
        DecodeError if the response cannot be decoded into a list.
        """
