"""Abstract repository for Promotion definitions."""

from __future__ import annotations

from abc import ABC, abstractmethod

from kiosk.domain.model.promotion import Promotion


class PromotionRepository(ABC):

    @abstractmethod
    def get_by_name(self, name: str) -> Promotion | None:
        """Return a promotion by its name, or None if not found."""
