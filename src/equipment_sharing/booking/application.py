"""
Прикладной слой контекста бронирования.

Координирует проверку существования, прав и статусов, после чего
сохраняет изменения через единицу работы.
"""

from typing import Callable, List, Optional, Tuple

from ..config import Settings
from ..registry.domain import Equipment
from ..shared_kernel import (
    DomainException,
    EntityId,
    IClock,
    LogicalClock,
    LoguruLogger,
    NotFoundException,
    Principal,
    Timestamp,
    UnavailableException,
)
from ..shared_kernel import interfaces as kernel_ports
from . import interfaces as ports
from .domain import Booking, BookingPolicy
from .infrastructure import AlwaysAvailable, BookingUnitOfWork


class BookingEngine:
    """Сервис приложения для работы с бронированиями."""

    def __init__(
        self,
        uow: BookingUnitOfWork,
        availability: Optional[ports.IAvailabilityChecker] = None,
        clock: Optional[IClock] = None,
        settings: Optional[Settings] = None,
        logger: Optional[kernel_ports.ILogger] = None,
    ):
        self._uow = uow
        self._availability = availability or AlwaysAvailable()
        self._clock = clock or LogicalClock()
        self._settings = settings or Settings()
        self._logger = logger or LoguruLogger("booking")

    @property
    def uow(self) -> BookingUnitOfWork:
        return self._uow

    def create(
        self,
        caller: Principal,
        equipment_id: EntityId,
        start_time: Timestamp,
        end_time: Timestamp,
        notes: str = "",
    ) -> EntityId:
        """Создает бронирование от имени арендатора."""
        try:
            with self._uow:
                equipment = self._uow.equipment.get_by_id(equipment_id)
                if equipment is None:
                    raise NotFoundException("Оборудование", equipment_id)

                BookingPolicy.validate_period(start_time, end_time)
                if not self._availability.is_available(
                    equipment_id, start_time, end_time
                ):
                    raise UnavailableException(
                        f"Оборудование {equipment_id} занято в интервале "
                        f"[{start_time}, {end_time})"
                    )

                booking = Booking.create(
                    booking_id=self._uow.bookings.next_id(),
                    equipment=equipment,
                    renter=caller,
                    start_time=start_time,
                    end_time=end_time,
                    notes=notes,
                    now=self._clock.now(),
                )
                self._uow.bookings.add(booking)
                self._uow.collect(booking.pull_domain_events())
        except DomainException as e:
            self._logger.warning(
                f"Бронирование отклонено: {e}",
                equipment_id=equipment_id,
                caller=caller,
                code=e.code,
            )
            raise

        self._logger.info(
            "Бронирование создано",
            booking_id=booking.id,
            equipment_id=equipment_id,
            total_cost=booking.total_cost,
        )
        return booking.id

    def confirm(self, caller: Principal, booking_id: EntityId) -> EntityId:
        """Подтверждает бронирование (только владелец оборудования)."""
        return self._transition(
            "confirm",
            caller,
            booking_id,
            lambda booking, equipment, now: booking.confirm(caller, equipment, now),
        )

    def complete(self, caller: Principal, booking_id: EntityId) -> EntityId:
        """Завершает аренду (владелец или арендатор)."""
        return self._transition(
            "complete",
            caller,
            booking_id,
            lambda booking, equipment, now: booking.complete(
                caller,
                equipment,
                now,
                enforce_terminal_states=self._settings.enforce_terminal_states,
            ),
        )

    def cancel(self, caller: Principal, booking_id: EntityId) -> EntityId:
        """Отменяет бронирование (владелец или арендатор)."""
        return self._transition(
            "cancel",
            caller,
            booking_id,
            lambda booking, equipment, now: booking.cancel(
                caller,
                equipment,
                now,
                enforce_terminal_states=self._settings.enforce_terminal_states,
            ),
        )

    def get(self, booking_id: EntityId) -> Optional[Booking]:
        """Возвращает снимок бронирования или None."""
        booking = self._uow.bookings.get_by_id(booking_id)
        return booking.model_copy(deep=True) if booking is not None else None

    def list_by_renter(self, renter: Principal) -> List[Booking]:
        return [b.model_copy(deep=True) for b in self._uow.bookings.find_by_renter(renter)]

    def list_by_equipment(self, equipment_id: EntityId) -> List[Booking]:
        return [
            b.model_copy(deep=True)
            for b in self._uow.bookings.find_by_equipment(equipment_id)
        ]

    def _load(self, booking_id: EntityId) -> Tuple[Booking, Equipment]:
        booking = self._uow.bookings.get_by_id(booking_id)
        if booking is None:
            raise NotFoundException("Бронирование", booking_id)
        equipment = self._uow.equipment.get_by_id(booking.equipment_id)
        if equipment is None:
            raise NotFoundException("Оборудование", booking.equipment_id)
        return booking, equipment

    def _transition(
        self,
        action: str,
        caller: Principal,
        booking_id: EntityId,
        apply: Callable[[Booking, Equipment, Timestamp], None],
    ) -> EntityId:
        try:
            with self._uow:
                booking, equipment = self._load(booking_id)
                apply(booking, equipment, self._clock.now())
                self._uow.bookings.update(booking)
                self._uow.collect(booking.pull_domain_events())
        except DomainException as e:
            self._logger.warning(
                f"Операция {action} отклонена: {e}",
                booking_id=booking_id,
                caller=caller,
                code=e.code,
            )
            raise

        self._logger.info(
            f"Операция {action} выполнена",
            booking_id=booking_id,
            status=booking.status.value,
        )
        return booking_id
