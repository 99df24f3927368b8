"""
Доменная модель журнала отзывов.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, PrivateAttr

from ..booking.domain import Booking
from ..shared_kernel import (
    BookingStatus,
    BusinessRuleValidationException,
    DomainEvent,
    EntityId,
    ForbiddenException,
    Principal,
    Timestamp,
)


class ReviewSubmitted(DomainEvent):
    """Событие публикации отзыва."""

    review_id: EntityId
    equipment_id: EntityId
    booking_id: EntityId
    rating: int


class ReviewPolicy:
    """Правила допуска к отзыву."""

    @classmethod
    def check_eligibility(
        cls, booking: Booking, reviewer: Principal, equipment_id: EntityId
    ) -> None:
        """Отзыв оставляет арендатор по завершенному бронированию этого оборудования."""
        if (
            booking.renter != reviewer
            or booking.equipment_id != equipment_id
            or booking.status != BookingStatus.COMPLETED
        ):
            raise ForbiddenException(
                f"Нет права оставить отзыв по бронированию {booking.id}"
            )

    @classmethod
    def validate_rating(cls, rating: int, min_rating: int, max_rating: int) -> None:
        if not isinstance(rating, int) or isinstance(rating, bool):
            raise BusinessRuleValidationException("Оценка должна быть целым числом")
        if not min_rating <= rating <= max_rating:
            raise BusinessRuleValidationException(
                f"Оценка должна быть в диапазоне от {min_rating} до {max_rating}"
            )


class Review(BaseModel):
    """Отзыв арендатора. После создания не изменяется."""

    model_config = ConfigDict(frozen=True)

    id: EntityId
    equipment_id: EntityId
    booking_id: EntityId
    reviewer: Principal
    rating: int
    comments: str
    reviewed_at: Timestamp

    _domain_events: List[DomainEvent] = PrivateAttr(default_factory=list)

    def pull_domain_events(self) -> List[DomainEvent]:
        events = list(self._domain_events)
        self._domain_events.clear()
        return events

    @classmethod
    def submit(
        cls,
        review_id: EntityId,
        booking: Booking,
        reviewer: Principal,
        equipment_id: EntityId,
        rating: int,
        comments: str,
        now: Timestamp,
    ) -> "Review":
        """Создает отзыв, если бронирование дает на него право."""
        ReviewPolicy.check_eligibility(booking, reviewer, equipment_id)

        review = cls(
            id=review_id,
            equipment_id=equipment_id,
            booking_id=booking.id,
            reviewer=reviewer,
            rating=rating,
            comments=comments,
            reviewed_at=now,
        )
        review._domain_events.append(
            ReviewSubmitted(
                review_id=review_id,
                equipment_id=equipment_id,
                booking_id=booking.id,
                rating=rating,
                occurred_on=now,
            )
        )
        return review
