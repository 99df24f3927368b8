"""
Доменная модель контекста бронирования.

Жизненный цикл бронирования:
    pending -> confirmed (подтверждает владелец)
    pending | confirmed -> completed (владелец или арендатор)
    pending | confirmed -> cancelled (владелец или арендатор)
Статусы completed и cancelled конечные.
"""

from typing import List

from pydantic import BaseModel, PrivateAttr

from ..registry.domain import Equipment
from ..shared_kernel import (
    BookingStatus,
    BusinessRuleValidationException,
    DomainEvent,
    EntityId,
    ForbiddenException,
    InvalidStateException,
    PaymentStatus,
    Principal,
    Timestamp,
)


class BookingCreated(DomainEvent):
    """Событие создания бронирования."""

    booking_id: EntityId
    equipment_id: EntityId
    renter: Principal
    total_cost: int


class BookingConfirmed(DomainEvent):
    """Событие подтверждения бронирования."""

    booking_id: EntityId


class BookingCompleted(DomainEvent):
    """Событие завершения аренды."""

    booking_id: EntityId
    completed_by: Principal


class BookingCancelled(DomainEvent):
    """Событие отмены бронирования."""

    booking_id: EntityId
    cancelled_by: Principal


class BookingPolicy:
    """Политики и бизнес-правила для бронирований."""

    SECONDS_PER_HOUR = 3600

    @classmethod
    def validate_period(cls, start_time: Timestamp, end_time: Timestamp) -> None:
        """Интервал должен быть непустым: бронирование нулевой длины отклоняется."""
        if end_time <= start_time:
            raise BusinessRuleValidationException(
                "Время окончания должно быть позже времени начала"
            )

    @classmethod
    def calculate_total_cost(
        cls, hourly_rate: int, start_time: Timestamp, end_time: Timestamp
    ) -> int:
        """Стоимость = ставка * длительность в секундах / 3600, с отбрасыванием дробной части."""
        return hourly_rate * (end_time - start_time) // cls.SECONDS_PER_HOUR


class Booking(BaseModel):
    """Бронирование оборудования на интервал времени."""

    id: EntityId
    equipment_id: EntityId
    renter: Principal
    start_time: Timestamp
    end_time: Timestamp
    total_cost: int
    status: BookingStatus = BookingStatus.PENDING
    payment_status: PaymentStatus = PaymentStatus.PENDING
    notes: str = ""
    created_at: Timestamp

    _domain_events: List[DomainEvent] = PrivateAttr(default_factory=list)

    def pull_domain_events(self) -> List[DomainEvent]:
        events = list(self._domain_events)
        self._domain_events.clear()
        return events

    def is_party(self, caller: Principal, equipment: Equipment) -> bool:
        """Вызывающий является арендатором или владельцем оборудования."""
        return caller == self.renter or equipment.is_owned_by(caller)

    def confirm(self, caller: Principal, equipment: Equipment, now: Timestamp) -> None:
        """Подтверждает бронирование. Доступно только владельцу."""
        if not equipment.is_owned_by(caller):
            raise ForbiddenException(
                f"Подтвердить бронирование {self.id} может только владелец оборудования"
            )
        if self.status != BookingStatus.PENDING:
            raise InvalidStateException(
                f"Невозможно подтвердить бронирование в статусе {self.status.value}"
            )

        self.status = BookingStatus.CONFIRMED
        self._domain_events.append(BookingConfirmed(booking_id=self.id, occurred_on=now))

    def complete(
        self,
        caller: Principal,
        equipment: Equipment,
        now: Timestamp,
        enforce_terminal_states: bool = True,
    ) -> None:
        """Отмечает аренду завершенной."""
        if not self.is_party(caller, equipment):
            raise ForbiddenException(
                f"Завершить бронирование {self.id} может только владелец или арендатор"
            )
        if enforce_terminal_states and self.status.is_terminal:
            raise InvalidStateException(
                f"Невозможно завершить бронирование в статусе {self.status.value}"
            )

        self.status = BookingStatus.COMPLETED
        self._domain_events.append(
            BookingCompleted(booking_id=self.id, completed_by=caller, occurred_on=now)
        )

    def cancel(
        self,
        caller: Principal,
        equipment: Equipment,
        now: Timestamp,
        enforce_terminal_states: bool = True,
    ) -> None:
        """Отменяет бронирование."""
        if not self.is_party(caller, equipment):
            raise ForbiddenException(
                f"Отменить бронирование {self.id} может только владелец или арендатор"
            )
        if enforce_terminal_states and self.status.is_terminal:
            raise InvalidStateException(
                f"Невозможно отменить бронирование в статусе {self.status.value}"
            )

        self.status = BookingStatus.CANCELLED
        self._domain_events.append(
            BookingCancelled(booking_id=self.id, cancelled_by=caller, occurred_on=now)
        )

    @classmethod
    def create(
        cls,
        booking_id: EntityId,
        equipment: Equipment,
        renter: Principal,
        start_time: Timestamp,
        end_time: Timestamp,
        notes: str,
        now: Timestamp,
    ) -> "Booking":
        """Создает новое бронирование в статусе pending."""
        BookingPolicy.validate_period(start_time, end_time)

        booking = cls(
            id=booking_id,
            equipment_id=equipment.id,
            renter=renter,
            start_time=start_time,
            end_time=end_time,
            total_cost=BookingPolicy.calculate_total_cost(
                equipment.hourly_rate, start_time, end_time
            ),
            notes=notes,
            created_at=now,
        )
        booking._domain_events.append(
            BookingCreated(
                booking_id=booking.id,
                equipment_id=equipment.id,
                renter=renter,
                total_cost=booking.total_cost,
                occurred_on=now,
            )
        )
        return booking
