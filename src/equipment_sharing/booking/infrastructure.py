"""
Инфраструктурный слой контекста бронирования.
"""

from typing import Callable, Dict, List, Optional

from ..registry import interfaces as registry_ports
from ..registry.infrastructure import InMemoryEquipmentRepository
from ..shared_kernel import EntityId, Principal, Timestamp, UnitOfWork
from ..shared_kernel import interfaces as kernel_ports
from . import interfaces as ports
from .domain import Booking


class InMemoryBookingRepository(ports.IBookingRepository):
    """Реализация репозитория бронирований в памяти."""

    def __init__(self):
        self._bookings: Dict[EntityId, Booking] = {}
        self._last_id = 0

    def next_id(self) -> EntityId:
        return self._last_id + 1

    def add(self, booking: Booking) -> None:
        if booking.id != self.next_id():
            raise ValueError(f"Ожидался id {self.next_id()}, получен {booking.id}")
        self._bookings[booking.id] = booking
        self._last_id = booking.id

    def get_by_id(self, booking_id: EntityId) -> Optional[Booking]:
        return self._bookings.get(booking_id)

    def update(self, booking: Booking) -> None:
        if booking.id not in self._bookings:
            raise KeyError(f"Booking with id {booking.id} not found")
        self._bookings[booking.id] = booking

    def find_by_renter(self, renter: Principal) -> List[Booking]:
        return [
            booking for booking in self._bookings.values() if booking.renter == renter
        ]

    def find_by_equipment(self, equipment_id: EntityId) -> List[Booking]:
        return [
            booking
            for booking in self._bookings.values()
            if booking.equipment_id == equipment_id
        ]


class AlwaysAvailable(ports.IAvailabilityChecker):
    """Проверка по умолчанию: любой интервал свободен."""

    def is_available(
        self, equipment_id: EntityId, start_time: Timestamp, end_time: Timestamp
    ) -> bool:
        return True


class PredicateAvailabilityChecker(ports.IAvailabilityChecker):
    """Оборачивает произвольную функцию (equipment_id, start, end) -> bool."""

    def __init__(self, predicate: Callable[[EntityId, Timestamp, Timestamp], bool]):
        self._predicate = predicate

    def is_available(
        self, equipment_id: EntityId, start_time: Timestamp, end_time: Timestamp
    ) -> bool:
        return bool(self._predicate(equipment_id, start_time, end_time))


class BookingUnitOfWork(UnitOfWork):
    """Единица работы для контекста бронирования.

    Репозиторий оборудования приходит из реестра и используется только
    для чтения.
    """

    def __init__(
        self,
        bookings_repo: Optional[ports.IBookingRepository] = None,
        equipment_repo: Optional[registry_ports.IEquipmentRepository] = None,
        event_bus: Optional[kernel_ports.IEventBus] = None,
        logger: Optional[kernel_ports.ILogger] = None,
    ):
        super().__init__(event_bus=event_bus, logger=logger)
        self._bookings = (
            bookings_repo if bookings_repo is not None else InMemoryBookingRepository()
        )
        self._equipment = (
            equipment_repo if equipment_repo is not None else InMemoryEquipmentRepository()
        )

    @property
    def bookings(self) -> ports.IBookingRepository:
        return self._bookings

    @property
    def equipment(self) -> registry_ports.IEquipmentRepository:
        return self._equipment
