from dataclasses import dataclass
from typing import Optional

from .booking.application import BookingEngine
from .booking.infrastructure import BookingUnitOfWork, InMemoryBookingRepository
from .booking.interfaces import IAvailabilityChecker
from .config import Settings
from .registry.application import EquipmentRegistryService
from .registry.infrastructure import InMemoryEquipmentRepository, RegistryUnitOfWork
from .reviews.application import ReviewLedger
from .reviews.infrastructure import InMemoryReviewRepository, ReviewUnitOfWork
from .shared_kernel import (
    IClock,
    InMemoryEventBus,
    LogicalClock,
    LoguruLogger,
    configure_logging,
)


@dataclass
class Marketplace:
    """Набор настроенных сервисов, разделяющих хранилища и шину событий."""

    registry: EquipmentRegistryService
    bookings: BookingEngine
    reviews: ReviewLedger
    event_bus: InMemoryEventBus
    clock: IClock
    settings: Settings


def bootstrap_app(
    settings: Optional[Settings] = None,
    clock: Optional[IClock] = None,
    availability: Optional[IAvailabilityChecker] = None,
    configure_logs: bool = False,
) -> Marketplace:
    """Создает и настраивает все компоненты приложения."""
    settings = settings or Settings()
    if configure_logs:
        configure_logging(settings.log_level)
    clock = clock or LogicalClock(settings.initial_logical_time)

    # 1. Общие хранилища: каждый контекст пишет только в свое
    equipment_repo = InMemoryEquipmentRepository()
    bookings_repo = InMemoryBookingRepository()
    reviews_repo = InMemoryReviewRepository()
    event_bus = InMemoryEventBus(LoguruLogger("event_bus"))

    # 2. Единицы работы, передавая чужие репозитории только для чтения
    registry_uow = RegistryUnitOfWork(
        equipment_repo, event_bus=event_bus, logger=LoguruLogger("registry.uow")
    )
    booking_uow = BookingUnitOfWork(
        bookings_repo,
        equipment_repo,
        event_bus=event_bus,
        logger=LoguruLogger("booking.uow"),
    )
    review_uow = ReviewUnitOfWork(
        reviews_repo,
        bookings_repo,
        event_bus=event_bus,
        logger=LoguruLogger("reviews.uow"),
    )

    # 3. Сервисы приложения
    return Marketplace(
        registry=EquipmentRegistryService(registry_uow, clock=clock),
        bookings=BookingEngine(
            booking_uow, availability=availability, clock=clock, settings=settings
        ),
        reviews=ReviewLedger(review_uow, clock=clock, settings=settings),
        event_bus=event_bus,
        clock=clock,
        settings=settings,
    )
