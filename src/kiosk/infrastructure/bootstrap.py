"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pathlib import Path

from kiosk.domain.model.session import SessionState
from kiosk.infrastructure.persistence.file_product_repository import (
    FileProductRepository,
)
from kiosk.infrastructure.persistence.file_promotion_repository import (
    FilePromotionRepository,
)
from kiosk.infrastructure.persistence.in_memory_session_repository import (
    InMemorySessionRepository,
)

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

PRODUCTS_FILE = "products.md"
PROMOTIONS_FILE = "promotions.md"


def product_repository(data_dir: Path = DEFAULT_DATA_DIR) -> FileProductRepository:
    return FileProductRepository(data_dir / PRODUCTS_FILE)


def promotion_repository(data_dir: Path = DEFAULT_DATA_DIR) -> FilePromotionRepository:
    return FilePromotionRepository(data_dir / PROMOTIONS_FILE)


def session_repository(data_dir: Path = DEFAULT_DATA_DIR) -> InMemorySessionRepository:
    """Open a fresh session on the catalog as stored in ``data_dir``."""
    catalog = product_repository(data_dir).load_catalog()
    return InMemorySessionRepository(SessionState(catalog=catalog))
