"""
Интерфейсы (порты) для журнала отзывов.
"""

from __future__ import annotations

from typing import List, Optional, Protocol

from ..shared_kernel import EntityId
from .domain import Review


class IReviewRepository(Protocol):
    """Интерфейс репозитория для отзывов."""

    def next_id(self) -> EntityId: ...
    def add(self, review: Review) -> None: ...
    def get_by_id(self, review_id: EntityId) -> Optional[Review]: ...
    def find_by_booking(self, booking_id: EntityId) -> List[Review]: ...
    def find_by_equipment(self, equipment_id: EntityId) -> List[Review]: ...
