"""
Общие порты, которые использует каждый контекст.
"""

from __future__ import annotations

from typing import Any, Callable, Protocol, Type, TypeVar

from .domain import DomainEvent, Timestamp

T_Event = TypeVar("T_Event", bound=DomainEvent)


class ILogger(Protocol):
    """Интерфейс для логгера."""

    def info(self, message: str, **kwargs: Any) -> None: ...
    def error(self, message: str, **kwargs: Any) -> None: ...
    def warning(self, message: str, **kwargs: Any) -> None: ...
    def debug(self, message: str, **kwargs: Any) -> None: ...


class IEventBus(Protocol):
    """Интерфейс для шины событий."""

    def publish(self, event: DomainEvent) -> None: ...
    def subscribe(
        self, event_type: Type[T_Event], handler: Callable[[T_Event], None]
    ) -> None: ...


class IClock(Protocol):
    """Источник логического времени."""

    def now(self) -> Timestamp: ...
