"""
Тесты для реестра оборудования.
"""

import pytest
from conftest import BLOCK_HEIGHT, LOOM, OWNER, RENTER

from equipment_sharing.registry.domain import (
    Equipment,
    EquipmentDetails,
    EquipmentRegistered,
    EquipmentUpdated,
)
from equipment_sharing.shared_kernel import (
    BusinessRuleValidationException,
    ForbiddenException,
    NotFoundException,
)

UPDATED_LOOM = dict(
    name="Professional Floor Loom",
    equipment_type="loom",
    description="12-harness floor loom suitable for complex weaving patterns and fine textiles",
    location="Textile Studio, 123 Craft St, Artisan Valley",
    hourly_rate=600,
    availability="Weekdays 9am-7pm, Weekends 10am-4pm",
    maintenance_status="excellent",
)


class TestEquipmentDomain:
    """Тесты для агрегата Equipment."""

    def test_register_records_event(self):
        equipment = Equipment.register(1, OWNER, EquipmentDetails(**LOOM), now=5)

        events = equipment.pull_domain_events()
        assert len(events) == 1
        assert isinstance(events[0], EquipmentRegistered)
        assert events[0].occurred_on == 5
        assert equipment.pull_domain_events() == []

    def test_negative_rate_rejected(self):
        details = EquipmentDetails(**{**LOOM, "hourly_rate": -1})
        with pytest.raises(BusinessRuleValidationException):
            Equipment.register(1, OWNER, details, now=0)

    def test_update_by_stranger_leaves_record_intact(self):
        equipment = Equipment.register(1, OWNER, EquipmentDetails(**LOOM), now=0)

        with pytest.raises(ForbiddenException):
            equipment.update_details(RENTER, EquipmentDetails(**UPDATED_LOOM), now=1)

        assert equipment.details == EquipmentDetails(**LOOM)


class TestEquipmentRegistryService:
    """Тесты для сервиса реестра."""

    def test_register_and_get_round_trip(self, marketplace):
        equipment_id = marketplace.registry.register(OWNER, **LOOM)

        assert equipment_id == 1
        equipment = marketplace.registry.get(1)
        assert equipment is not None
        assert equipment.owner == OWNER
        assert equipment.registered_at == BLOCK_HEIGHT
        for field_name, value in LOOM.items():
            assert getattr(equipment, field_name) == value

    def test_ids_are_dense(self, marketplace):
        ids = [marketplace.registry.register(OWNER, **LOOM) for _ in range(3)]
        assert ids == [1, 2, 3]

    def test_failed_register_does_not_consume_id(self, marketplace):
        with pytest.raises(BusinessRuleValidationException):
            marketplace.registry.register(OWNER, **{**LOOM, "hourly_rate": -5})

        assert marketplace.registry.register(OWNER, **LOOM) == 1

    def test_get_unknown_returns_none(self, marketplace):
        assert marketplace.registry.get(42) is None

    def test_get_returns_snapshot(self, marketplace, equipment_id):
        snapshot = marketplace.registry.get(equipment_id)
        snapshot.name = "changed"

        assert marketplace.registry.get(equipment_id).name == LOOM["name"]

    def test_update_by_owner(self, marketplace, equipment_id, clock):
        clock.advance(10)

        result = marketplace.registry.update(OWNER, equipment_id, **UPDATED_LOOM)

        assert result == equipment_id
        equipment = marketplace.registry.get(equipment_id)
        for field_name, value in UPDATED_LOOM.items():
            assert getattr(equipment, field_name) == value
        # Владелец и дата регистрации не меняются
        assert equipment.owner == OWNER
        assert equipment.registered_at == BLOCK_HEIGHT

    def test_update_by_non_owner_forbidden(self, marketplace, equipment_id):
        with pytest.raises(ForbiddenException):
            marketplace.registry.update(RENTER, equipment_id, **UPDATED_LOOM)

        assert marketplace.registry.get(equipment_id).hourly_rate == 500

    def test_update_unknown_not_found(self, marketplace):
        with pytest.raises(NotFoundException):
            marketplace.registry.update(OWNER, 99, **UPDATED_LOOM)

    def test_events_published_on_commit(self, marketplace):
        received = []
        marketplace.event_bus.subscribe(EquipmentRegistered, received.append)
        marketplace.event_bus.subscribe(EquipmentUpdated, received.append)

        equipment_id = marketplace.registry.register(OWNER, **LOOM)
        marketplace.registry.update(OWNER, equipment_id, **UPDATED_LOOM)

        assert [type(e) for e in received] == [EquipmentRegistered, EquipmentUpdated]
        assert received[1].hourly_rate == 600

    def test_list_by_owner(self, marketplace):
        marketplace.registry.register(OWNER, **LOOM)
        marketplace.registry.register(RENTER, **UPDATED_LOOM)

        owned = marketplace.registry.list_by_owner(OWNER)

        assert [e.id for e in owned] == [1]
