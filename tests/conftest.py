"""
Общие фикстуры для тестов маркетплейса.
"""

import pytest

from equipment_sharing import Settings, bootstrap_app
from equipment_sharing.shared_kernel import LogicalClock

OWNER = "ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM"
RENTER = "ST2PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM"
STRANGER = "ST3J2GVMMM2R07ZFBJDWTYEYAR8FZH5WKDTFJ9AHA"

BLOCK_HEIGHT = 100

LOOM = dict(
    name="Industrial Floor Loom",
    equipment_type="loom",
    description="8-harness floor loom suitable for complex weaving patterns",
    location="Textile Studio, 123 Craft St, Artisan Valley",
    hourly_rate=500,
    availability="Weekdays 9am-5pm, Weekends by appointment",
    maintenance_status="excellent",
)


@pytest.fixture
def settings() -> Settings:
    """Настройки по умолчанию, не зависящие от окружения."""
    return Settings(_env_file=None)


@pytest.fixture
def clock() -> LogicalClock:
    return LogicalClock(BLOCK_HEIGHT)


@pytest.fixture
def marketplace(settings, clock):
    """Полностью собранное приложение с чистыми хранилищами."""
    return bootstrap_app(settings=settings, clock=clock, configure_logs=False)


@pytest.fixture
def equipment_id(marketplace) -> int:
    """Зарегистрированный ткацкий станок владельца."""
    return marketplace.registry.register(OWNER, **LOOM)


@pytest.fixture
def booking_id(marketplace, equipment_id) -> int:
    """Бронирование арендатора в статусе pending."""
    return marketplace.bookings.create(
        RENTER,
        equipment_id,
        BLOCK_HEIGHT + 100,
        BLOCK_HEIGHT + 108,
        "Need to weave a custom blanket for an exhibition",
    )
