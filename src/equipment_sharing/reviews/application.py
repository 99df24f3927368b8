"""
Прикладной слой журнала отзывов.
"""

from typing import List, Optional

from ..config import Settings
from ..shared_kernel import (
    DomainException,
    EntityId,
    IClock,
    InvalidStateException,
    LogicalClock,
    LoguruLogger,
    NotFoundException,
    Principal,
)
from ..shared_kernel import interfaces as kernel_ports
from .domain import Review, ReviewPolicy
from .infrastructure import ReviewUnitOfWork


class ReviewLedger:
    """Сервис приложения для отзывов об оборудовании."""

    def __init__(
        self,
        uow: ReviewUnitOfWork,
        clock: Optional[IClock] = None,
        settings: Optional[Settings] = None,
        logger: Optional[kernel_ports.ILogger] = None,
    ):
        self._uow = uow
        self._clock = clock or LogicalClock()
        self._settings = settings or Settings()
        self._logger = logger or LoguruLogger("reviews")

    @property
    def uow(self) -> ReviewUnitOfWork:
        return self._uow

    def submit(
        self,
        caller: Principal,
        equipment_id: EntityId,
        booking_id: EntityId,
        rating: int,
        comments: str,
    ) -> EntityId:
        """Публикует отзыв по завершенному бронированию."""
        try:
            with self._uow:
                booking = self._uow.bookings.get_by_id(booking_id)
                if booking is None:
                    raise NotFoundException("Бронирование", booking_id)

                ReviewPolicy.check_eligibility(booking, caller, equipment_id)
                ReviewPolicy.validate_rating(
                    rating, self._settings.min_rating, self._settings.max_rating
                )
                already_reviewed = bool(self._uow.reviews.find_by_booking(booking_id))
                if self._settings.one_review_per_booking and already_reviewed:
                    raise InvalidStateException(
                        f"Отзыв по бронированию {booking_id} уже оставлен"
                    )

                review = Review.submit(
                    review_id=self._uow.reviews.next_id(),
                    booking=booking,
                    reviewer=caller,
                    equipment_id=equipment_id,
                    rating=rating,
                    comments=comments,
                    now=self._clock.now(),
                )
                self._uow.reviews.add(review)
                self._uow.collect(review.pull_domain_events())
        except DomainException as e:
            self._logger.warning(
                f"Отзыв отклонен: {e}",
                booking_id=booking_id,
                caller=caller,
                code=e.code,
            )
            raise

        self._logger.info(
            "Отзыв опубликован", review_id=review.id, booking_id=booking_id
        )
        return review.id

    def get(self, review_id: EntityId) -> Optional[Review]:
        # Отзыв неизменяем, копия не нужна
        return self._uow.reviews.get_by_id(review_id)

    def list_for_equipment(self, equipment_id: EntityId) -> List[Review]:
        return self._uow.reviews.find_by_equipment(equipment_id)

    def average_rating(self, equipment_id: EntityId) -> Optional[float]:
        """Средняя оценка оборудования или None, если отзывов нет."""
        reviews = self._uow.reviews.find_by_equipment(equipment_id)
        if not reviews:
            return None
        return sum(r.rating for r in reviews) / len(reviews)
