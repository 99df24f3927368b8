"""
Основные доменные типы и исключения общего ядра.
"""

from enum import Enum
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

# Идентификаторы назначаются последовательно, начиная с 1
EntityId = int

# Непрозрачная ссылка на участника (аккаунт, публичный ключ и т.п.)
Principal = str

# Логическое время, которое задает внешний контекст исполнения
Timestamp = int


class DomainEvent(BaseModel):
    """Базовый класс для всех доменных событий."""

    model_config = ConfigDict(frozen=True)

    event_id: UUID = Field(default_factory=uuid4)
    occurred_on: Timestamp


class BookingStatus(str, Enum):
    """Статусы бронирования."""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self in (BookingStatus.COMPLETED, BookingStatus.CANCELLED)


class PaymentStatus(str, Enum):
    """Статусы оплаты. Сами расчеты вне системы."""

    PENDING = "pending"
    PAID = "paid"
    REFUNDED = "refunded"


# Общие исключения
class DomainException(Exception):
    """Базовое исключение для доменных ошибок."""

    code = 500


class NotFoundException(DomainException):
    """Сущность с указанным идентификатором не существует."""

    code = 404

    def __init__(self, entity: str, entity_id: EntityId):
        super().__init__(f"{entity} с id {entity_id} не найден(о)")
        self.entity = entity
        self.entity_id = entity_id


class ForbiddenException(DomainException):
    """У вызывающего нет нужной роли для операции."""

    code = 403


class UnavailableException(DomainException):
    """Ресурс занят на запрошенный интервал."""

    code = 410


class InvalidStateException(DomainException):
    """Операция недопустима в текущем статусе."""

    code = 409


class BusinessRuleValidationException(DomainException):
    """Исключение при нарушении бизнес-правил."""

    code = 400
