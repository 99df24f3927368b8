"""
Тесты для общего ядра и настроек.
"""

import io

import pytest
from loguru import logger as loguru_logger
from pydantic import ValidationError

from equipment_sharing import bootstrap_app
from equipment_sharing.config import Settings
from equipment_sharing.shared_kernel import (
    BookingStatus,
    BusinessRuleValidationException,
    DomainEvent,
    ForbiddenException,
    InMemoryEventBus,
    InvalidStateException,
    LogicalClock,
    LoguruLogger,
    NotFoundException,
    UnavailableException,
    UnitOfWork,
    configure_logging,
)


class PingHappened(DomainEvent):
    payload: str


class TestExceptions:
    """Коды ошибок соответствуют транспортным."""

    @pytest.mark.parametrize(
        "exc, code",
        [
            (NotFoundException("Оборудование", 1), 404),
            (ForbiddenException("нет"), 403),
            (UnavailableException("занято"), 410),
            (InvalidStateException("статус"), 409),
            (BusinessRuleValidationException("правило"), 400),
        ],
    )
    def test_codes(self, exc, code):
        assert exc.code == code

    def test_not_found_keeps_entity(self):
        exc = NotFoundException("Бронирование", 7)
        assert exc.entity == "Бронирование"
        assert exc.entity_id == 7
        assert "7" in str(exc)


class TestBookingStatus:
    def test_terminal_statuses(self):
        assert BookingStatus.COMPLETED.is_terminal
        assert BookingStatus.CANCELLED.is_terminal
        assert not BookingStatus.PENDING.is_terminal
        assert not BookingStatus.CONFIRMED.is_terminal


class TestLogicalClock:
    def test_advance_and_set(self):
        clock = LogicalClock(100)
        assert clock.now() == 100
        assert clock.advance(5) == 105
        clock.set(200)
        assert clock.now() == 200

    def test_cannot_go_back(self):
        clock = LogicalClock(10)
        with pytest.raises(ValueError):
            clock.set(9)


class TestEventBus:
    def test_publish_to_subscribers(self):
        bus = InMemoryEventBus()
        received = []
        bus.subscribe(PingHappened, received.append)

        bus.publish(PingHappened(payload="hi", occurred_on=1))

        assert [e.payload for e in received] == ["hi"]

    def test_failing_handler_does_not_break_others(self):
        bus = InMemoryEventBus()
        received = []

        def broken(event):
            raise RuntimeError("boom")

        bus.subscribe(PingHappened, broken)
        bus.subscribe(PingHappened, received.append)

        bus.publish(PingHappened(payload="x", occurred_on=1))

        assert len(received) == 1

    def test_publish_without_subscribers(self):
        InMemoryEventBus().publish(PingHappened(payload="x", occurred_on=1))


class TestUnitOfWork:
    def test_commit_publishes_collected_events(self):
        bus = InMemoryEventBus()
        received = []
        bus.subscribe(PingHappened, received.append)
        uow = UnitOfWork(event_bus=bus)

        with uow:
            uow.collect([PingHappened(payload="a", occurred_on=1)])
            # До фиксации ничего не опубликовано
            assert received == []

        assert len(received) == 1

    def test_rollback_drops_events(self):
        bus = InMemoryEventBus()
        received = []
        bus.subscribe(PingHappened, received.append)
        uow = UnitOfWork(event_bus=bus)

        with pytest.raises(ForbiddenException):
            with uow:
                uow.collect([PingHappened(payload="a", occurred_on=1)])
                raise ForbiddenException("нет")

        uow.commit()
        assert received == []


class TestLogging:
    def test_logger_writes_context(self):
        sink = io.StringIO()
        configure_logging("debug", sink=sink)
        try:
            LoguruLogger("tests").info("Проверка", booking_id=7)
        finally:
            configure_logging("INFO")

        output = sink.getvalue()
        assert "Проверка" in output
        assert "booking_id" in output

    def test_record_points_at_caller(self):
        sink = io.StringIO()
        configure_logging("debug", sink=sink)
        try:
            LoguruLogger("tests").warning("Откуда")
        finally:
            configure_logging("INFO")

        output = sink.getvalue()
        assert "test_record_points_at_caller" in output
        assert "shared_kernel.infrastructure" not in output

    def test_bootstrap_keeps_host_sinks(self, settings):
        sink = io.StringIO()
        sink_id = loguru_logger.add(sink, level="INFO", format="{message}")
        try:
            bootstrap_app(settings=settings)
            loguru_logger.info("host record")
        finally:
            loguru_logger.remove(sink_id)

        assert "host record" in sink.getvalue()


class TestSettings:
    def test_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.min_rating == 1
        assert settings.max_rating == 5
        assert settings.enforce_terminal_states is True
        assert settings.one_review_per_booking is True
        assert settings.log_level == "INFO"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("EQUIPMENT_SHARING_MAX_RATING", "10")
        monkeypatch.setenv("EQUIPMENT_SHARING_ONE_REVIEW_PER_BOOKING", "false")

        settings = Settings(_env_file=None)

        assert settings.max_rating == 10
        assert settings.one_review_per_booking is False

    def test_invalid_rating_bounds(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, min_rating=4, max_rating=3)
