"""
Общее ядро (Shared Kernel) для маркетплейса аренды оборудования.

Содержит общие типы данных, исключения и инфраструктурные порты,
используемые в различных ограниченных контекстах.
"""

from .domain import (
    BookingStatus,
    BusinessRuleValidationException,
    DomainEvent,
    # Исключения
    DomainException,
    # Базовые типы
    EntityId,
    ForbiddenException,
    InvalidStateException,
    NotFoundException,
    PaymentStatus,
    Principal,
    Timestamp,
    UnavailableException,
)
from .infrastructure import (
    InMemoryEventBus,
    LogicalClock,
    LoguruLogger,
    SystemClock,
    UnitOfWork,
    configure_logging,
)
from .interfaces import IClock, IEventBus, ILogger

__all__ = [
    # Базовые типы
    "EntityId",
    "Principal",
    "Timestamp",
    "DomainEvent",
    # Перечисления
    "BookingStatus",
    "PaymentStatus",
    # Исключения
    "DomainException",
    "NotFoundException",
    "ForbiddenException",
    "UnavailableException",
    "InvalidStateException",
    "BusinessRuleValidationException",
    # Порты
    "IClock",
    "IEventBus",
    "ILogger",
    # Инфраструктура
    "InMemoryEventBus",
    "LogicalClock",
    "LoguruLogger",
    "SystemClock",
    "UnitOfWork",
    "configure_logging",
]
