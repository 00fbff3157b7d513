"""Abstract repository for the product catalog.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (file-backed, in-memory)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from kiosk.domain.model.product import Catalog


class ProductRepository(ABC):

    @abstractmethod
    def load_catalog(self) -> Catalog:
        """Return the catalog as it stands when the kiosk opens."""
