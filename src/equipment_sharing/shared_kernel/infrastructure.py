"""
Инфраструктура общего ядра: логгер, шина событий, часы и базовая
единица работы.
"""

import sys
import time
from typing import Any, Callable, Dict, List, Optional, Type

from loguru import logger as _loguru_logger

from . import interfaces as ports
from .domain import DomainEvent, Timestamp

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level> "
    "{extra}"
)


def configure_logging(level: str = "INFO", sink: Any = None) -> None:
    """Оставляет у loguru единственный sink (по умолчанию stderr) с нужным уровнем."""
    _loguru_logger.remove()
    _loguru_logger.add(
        sink if sink is not None else sys.stderr,
        level=level.upper(),
        format=LOG_FORMAT,
    )


class LoguruLogger(ports.ILogger):
    """Логгер поверх loguru. Контекст из kwargs попадает в extra записи."""

    def __init__(self, component: str = "equipment_sharing"):
        self._logger = _loguru_logger.bind(component=component)

    def info(self, message: str, **kwargs: Any) -> None:
        self._logger.opt(depth=1).bind(**kwargs).info(message)

    def error(self, message: str, **kwargs: Any) -> None:
        self._logger.opt(depth=1).bind(**kwargs).error(message)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._logger.opt(depth=1).bind(**kwargs).warning(message)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._logger.opt(depth=1).bind(**kwargs).debug(message)


class LogicalClock(ports.IClock):
    """Ручные часы: время меняется только явно, как высота блока."""

    def __init__(self, start: Timestamp = 0):
        self._now = start

    def now(self) -> Timestamp:
        return self._now

    def set(self, value: Timestamp) -> None:
        if value < self._now:
            raise ValueError("Логическое время не может идти назад")
        self._now = value

    def advance(self, delta: Timestamp = 1) -> Timestamp:
        self.set(self._now + delta)
        return self._now


class SystemClock(ports.IClock):
    """Часы на основе системного времени (секунды Unix)."""

    def now(self) -> Timestamp:
        return int(time.time())


class InMemoryEventBus(ports.IEventBus):
    """Реализация шины событий в памяти."""

    def __init__(self, logger: Optional[ports.ILogger] = None):
        self._subscribers: Dict[Type[DomainEvent], List[Callable]] = {}
        self._logger = logger or LoguruLogger("event_bus")

    def publish(self, event: DomainEvent) -> None:
        """Публикует событие."""
        event_type = type(event)
        if event_type not in self._subscribers:
            self._logger.debug(f"No subscribers for event type {event_type.__name__}")
            return

        self._logger.info(
            f"Publishing event: {event_type.__name__}", event=event.model_dump()
        )

        for handler in self._subscribers[event_type]:
            try:
                handler(event)
            except Exception as e:
                self._logger.error(
                    f"Error in event handler for {event_type.__name__}",
                    error=str(e),
                    event=event.model_dump(),
                )

    def subscribe(self, event_type: Type[DomainEvent], handler: Callable) -> None:
        """Подписывает обработчик на события указанного типа."""
        self._subscribers.setdefault(event_type, []).append(handler)
        self._logger.debug(f"Subscribed handler to {event_type.__name__} events")


class UnitOfWork:
    """Базовая единица работы.

    Собирает доменные события, накопленные за операцию, и публикует их
    только при фиксации. При откате события отбрасываются.
    """

    def __init__(
        self,
        event_bus: Optional[ports.IEventBus] = None,
        logger: Optional[ports.ILogger] = None,
    ):
        self._logger = logger or LoguruLogger(type(self).__name__)
        self._event_bus = event_bus or InMemoryEventBus(self._logger)
        self._pending_events: List[DomainEvent] = []

    @property
    def event_bus(self) -> ports.IEventBus:
        return self._event_bus

    def collect(self, events: List[DomainEvent]) -> None:
        """Добавляет события агрегата в очередь на публикацию."""
        self._pending_events.extend(events)

    def commit(self) -> None:
        """Фиксирует изменения и публикует события."""
        events, self._pending_events = self._pending_events, []
        self._logger.debug(f"{type(self).__name__} committed", events=len(events))
        for event in events:
            self._event_bus.publish(event)

    def rollback(self) -> None:
        """Откатывает изменения."""
        dropped = len(self._pending_events)
        self._pending_events = []
        self._logger.warning(f"{type(self).__name__} rolled back", dropped=dropped)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.commit()
        else:
            self.rollback()
        return False  # Пробрасываем исключение дальше, если оно было
