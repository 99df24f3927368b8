"""
Доменная модель реестра оборудования.

Оборудование регистрирует владелец; изменять карточку может только он.
Записи никогда не удаляются.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, PrivateAttr

from ..shared_kernel import (
    BusinessRuleValidationException,
    DomainEvent,
    EntityId,
    ForbiddenException,
    Principal,
    Timestamp,
)


class EquipmentDetails(BaseModel):
    """Изменяемые поля карточки оборудования."""

    model_config = ConfigDict(frozen=True)

    name: str
    equipment_type: str
    description: str
    location: str
    hourly_rate: int  # В минимальных единицах валюты
    availability: str
    maintenance_status: str

    def validate_rules(self) -> None:
        if self.hourly_rate < 0:
            raise BusinessRuleValidationException(
                "Почасовая ставка не может быть отрицательной"
            )


class EquipmentRegistered(DomainEvent):
    """Событие регистрации оборудования."""

    equipment_id: EntityId
    owner: Principal


class EquipmentUpdated(DomainEvent):
    """Событие изменения карточки оборудования."""

    equipment_id: EntityId
    hourly_rate: int


class Equipment(BaseModel):
    """Единица оборудования, сдаваемая в аренду."""

    id: EntityId
    owner: Principal
    name: str
    equipment_type: str
    description: str
    location: str
    hourly_rate: int
    availability: str
    maintenance_status: str
    registered_at: Timestamp

    _domain_events: List[DomainEvent] = PrivateAttr(default_factory=list)

    @property
    def details(self) -> EquipmentDetails:
        return EquipmentDetails(
            **self.model_dump(include=set(EquipmentDetails.model_fields))
        )

    def pull_domain_events(self) -> List[DomainEvent]:
        events = list(self._domain_events)
        self._domain_events.clear()
        return events

    def is_owned_by(self, principal: Principal) -> bool:
        return self.owner == principal

    def update_details(
        self, caller: Principal, details: EquipmentDetails, now: Timestamp
    ) -> None:
        """Заменяет все изменяемые поля. Владелец и дата регистрации сохраняются."""
        if not self.is_owned_by(caller):
            raise ForbiddenException(
                f"Только владелец может изменять оборудование {self.id}"
            )
        details.validate_rules()

        for field_name, value in details.model_dump().items():
            setattr(self, field_name, value)
        self._domain_events.append(
            EquipmentUpdated(
                equipment_id=self.id, hourly_rate=self.hourly_rate, occurred_on=now
            )
        )

    @classmethod
    def register(
        cls,
        equipment_id: EntityId,
        owner: Principal,
        details: EquipmentDetails,
        now: Timestamp,
    ) -> "Equipment":
        """Создает карточку нового оборудования."""
        details.validate_rules()
        equipment = cls(
            id=equipment_id,
            owner=owner,
            registered_at=now,
            **details.model_dump(),
        )
        equipment._domain_events.append(
            EquipmentRegistered(equipment_id=equipment_id, owner=owner, occurred_on=now)
        )
        return equipment
