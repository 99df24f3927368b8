"""
Инфраструктурный слой журнала отзывов.
"""

from typing import Dict, List, Optional

from ..booking import interfaces as booking_ports
from ..booking.infrastructure import InMemoryBookingRepository
from ..shared_kernel import EntityId, UnitOfWork
from ..shared_kernel import interfaces as kernel_ports
from . import interfaces as ports
from .domain import Review


class InMemoryReviewRepository(ports.IReviewRepository):
    """Реализация репозитория отзывов в памяти. Только добавление."""

    def __init__(self):
        self._reviews: Dict[EntityId, Review] = {}
        self._last_id = 0

    def next_id(self) -> EntityId:
        return self._last_id + 1

    def add(self, review: Review) -> None:
        if review.id != self.next_id():
            raise ValueError(f"Ожидался id {self.next_id()}, получен {review.id}")
        self._reviews[review.id] = review
        self._last_id = review.id

    def get_by_id(self, review_id: EntityId) -> Optional[Review]:
        return self._reviews.get(review_id)

    def find_by_booking(self, booking_id: EntityId) -> List[Review]:
        return [r for r in self._reviews.values() if r.booking_id == booking_id]

    def find_by_equipment(self, equipment_id: EntityId) -> List[Review]:
        return [r for r in self._reviews.values() if r.equipment_id == equipment_id]


class ReviewUnitOfWork(UnitOfWork):
    """Единица работы для журнала отзывов. Бронирования только читаются."""

    def __init__(
        self,
        reviews_repo: Optional[ports.IReviewRepository] = None,
        bookings_repo: Optional[booking_ports.IBookingRepository] = None,
        event_bus: Optional[kernel_ports.IEventBus] = None,
        logger: Optional[kernel_ports.ILogger] = None,
    ):
        super().__init__(event_bus=event_bus, logger=logger)
        self._reviews = (
            reviews_repo if reviews_repo is not None else InMemoryReviewRepository()
        )
        self._bookings = (
            bookings_repo if bookings_repo is not None else InMemoryBookingRepository()
        )

    @property
    def reviews(self) -> ports.IReviewRepository:
        return self._reviews

    @property
    def bookings(self) -> booking_ports.IBookingRepository:
        return self._bookings
