"""File-backed implementation of PromotionRepository.

Reads the store's ``promotions.md``::

    name,buy,get,start_date,end_date
    탄산2+1,2,1,2026-01-01,2026-12-31
"""

from __future__ import annotations

import csv
import io
from datetime import date
from pathlib import Path

from kiosk.domain.exceptions import CatalogIntegrityError, ValidationError
from kiosk.domain.model.promotion import Promotion
from kiosk.domain.repository.promotion_repository import PromotionRepository

_FIELDS = ("name", "buy", "get", "start_date", "end_date")


class FilePromotionRepository(PromotionRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._promotions: dict[str, Promotion] | None = None

    # --- PromotionRepository interface ----------------------------------------

    def get_by_name(self, name: str) -> Promotion | None:
        return self._load().get(name)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Promotion]:
        if self._promotions is None:
            self._promotions = {
                promotion.name: promotion
                for promotion in (self._to_domain(raw) for raw in self._load_raw())
            }
        return self._promotions

    @staticmethod
    def _to_domain(raw: dict) -> Promotion:
        try:
            return Promotion(
                name=raw["name"].strip(),
                buy=int(raw["buy"]),
                get=int(raw["get"]),
                start_date=date.fromisoformat(raw["start_date"].strip()),
                end_date=date.fromisoformat(raw["end_date"].strip()),
            )
        except (AttributeError, TypeError, ValueError, ValidationError) as exc:
            raise CatalogIntegrityError(f"Invalid promotion row: {raw}") from exc

    def _load_raw(self) -> list[dict]:
        if not self._file_path.exists():
            raise CatalogIntegrityError(f"Promotion catalog not found: {self._file_path}")
        text = self._file_path.read_text(encoding="utf-8")
        reader = csv.DictReader(io.StringIO(text), skipinitialspace=True)
        if reader.fieldnames is None or tuple(reader.fieldnames) != _FIELDS:
            raise CatalogIntegrityError(
                f"Promotion catalog header must be {','.join(_FIELDS)}"
            )
        rows = []
        for raw in reader:
            if None in raw:
                raise CatalogIntegrityError(f"Too many columns in {self._file_path.name}: {raw}")
            if any((value or "").strip() for value in raw.values()):
                rows.append(raw)
        return rows
