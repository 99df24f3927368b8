"""
Интерфейсы (порты) для контекста бронирования.
"""

from __future__ import annotations

from typing import List, Optional, Protocol

from ..shared_kernel import EntityId, Principal, Timestamp
from .domain import Booking


class IBookingRepository(Protocol):
    """Интерфейс репозитория для бронирований."""

    def next_id(self) -> EntityId: ...
    def add(self, booking: Booking) -> None: ...
    def get_by_id(self, booking_id: EntityId) -> Optional[Booking]: ...
    def update(self, booking: Booking) -> None: ...
    def find_by_renter(self, renter: Principal) -> List[Booking]: ...
    def find_by_equipment(self, equipment_id: EntityId) -> List[Booking]: ...


class IAvailabilityChecker(Protocol):
    """Внешняя проверка, свободен ли интервал для оборудования."""

    def is_available(
        self, equipment_id: EntityId, start_time: Timestamp, end_time: Timestamp
    ) -> bool: ...
