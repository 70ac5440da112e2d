# 📄 File: plant_tracker/modules/plant_management/domain/services/care_record_store.py
# 🧭 Purpose (Layman Explanation):
# Keeps the list of your plants and the list of everything you did for them, and is the only
# place where plants are added, edited or removed and where watering is written down.
# 🧪 Purpose (Technical Summary):
# In-memory record store for Plant and CareEvent collections with synchronous, all-or-nothing
# create/update/delete operations, atomic water-event recording and ordered event listings.
# 🔗 Dependencies:
# plant domain models, plant events, plant_tracker.shared.core (exceptions, event bus), app logging
# 🔄 Connected Modules / Calls From:
# undo_buffer.py, sample data seeding, plant management presentation dependencies and endpoints

from typing import Any, Iterable, List, Mapping, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from plant_tracker.shared.core.event_bus import EventBus
from plant_tracker.shared.core.exceptions import (
    PlantNotFoundError,
    ValidationError,
    validation_error_from_pydantic,
)
from plant_tracker.shared.utils.helpers import Clock, IdFactory, new_id, utc_now
from plant_tracker.shared.utils.logging import get_logger

from ..events.plant_events import PlantEventType, care_event_recorded, plant_event
from ..models.care_event import CareEvent, CareEventType
from ..models.plant import Plant, PlantData

logger = get_logger(__name__)

PlantInput = Union[PlantData, Mapping[str, Any]]


class CareRecordStore:
    """
    Owner of the plant and care-event collections.

    One store is created per application and handed to every consumer; nothing
    else mutates the collections. Every operation either completes or leaves
    both collections exactly as they were.

    Plants keep insertion order. Deleting a plant does not touch its care
    events.
    """

    def __init__(
        self,
        clock: Clock = utc_now,
        event_bus: Optional[EventBus] = None,
        id_factory: IdFactory = new_id,
    ):
        self._clock = clock
        self._event_bus = event_bus
        self._id_factory = id_factory
        self._plants: List[Plant] = []
        self._events: List[CareEvent] = []

    # =========================================================================
    # READS
    # =========================================================================

    def now(self):
        """Current instant according to the store's clock"""
        return self._clock()

    def list_plants(self) -> List[Plant]:
        return list(self._plants)

    def get_plant(self, plant_id: str) -> Plant:
        return self._plants[self._index_of(plant_id)]

    def has_plant(self, plant_id: str) -> bool:
        return any(plant.id == plant_id for plant in self._plants)

    def list_events(self) -> List[CareEvent]:
        """All care events, most recent first, including orphaned ones."""
        return sorted(self._events, key=lambda e: e.timestamp, reverse=True)

    def list_events_for_plant(self, plant_id: str) -> List[CareEvent]:
        """
        Care events of one plant, most recent first.

        Events with equal timestamps stay in the order they were recorded.
        Works for deleted plants too, whose events are kept.
        """
        return sorted(
            (event for event in self._events if event.plant_id == plant_id),
            key=lambda e: e.timestamp,
            reverse=True,
        )

    def __len__(self) -> int:
        return len(self._plants)

    # =========================================================================
    # PLANT LIFECYCLE
    # =========================================================================

    def add_plant(self, data: PlantInput) -> Plant:
        """
        Register a new plant under a fresh identifier.

        Raises:
            ValidationError: if ``data`` is malformed
        """
        plant_data = PlantData.parse_form(data)
        plant = Plant.from_data(self._fresh_plant_id(), plant_data)

        self._plants.append(plant)

        logger.log_business_event(
            PlantEventType.PLANT_CREATED.value,
            f"Plant {plant.name!r} added",
            entity_id=plant.id,
            entity_type="plant",
            extra=plant.summary(),
        )
        self._publish(plant_event(PlantEventType.PLANT_CREATED, plant))
        return plant

    def update_plant(self, plant_id: str, data: PlantInput) -> Plant:
        """
        Replace every field of a plant except its identifier.

        The plant keeps its position in the collection.

        Raises:
            ValidationError: if ``data`` is malformed
            PlantNotFoundError: if no plant has ``plant_id``
        """
        plant_data = PlantData.parse_form(data)
        index = self._index_of(plant_id)

        previous = self._plants[index]
        plant = Plant.from_data(plant_id, plant_data)
        self._plants[index] = plant

        changed = sorted(
            field for field, value in plant.model_dump().items()
            if getattr(previous, field) != value
        )
        logger.log_business_event(
            PlantEventType.PLANT_UPDATED.value,
            f"Plant {plant.name!r} updated",
            entity_id=plant.id,
            entity_type="plant",
            extra={"changed_fields": changed},
        )
        self._publish(plant_event(PlantEventType.PLANT_UPDATED, plant, changed_fields=changed))
        return plant

    def delete_plant(self, plant_id: str) -> Plant:
        """
        Remove a plant and return it, e.g. for the undo buffer.

        Raises:
            PlantNotFoundError: if no plant has ``plant_id``
        """
        index = self._index_of(plant_id)
        plant = self._plants.pop(index)

        logger.log_business_event(
            PlantEventType.PLANT_DELETED.value,
            f"Plant {plant.name!r} deleted",
            entity_id=plant.id,
            entity_type="plant",
        )
        self._publish(plant_event(PlantEventType.PLANT_DELETED, plant))
        return plant

    def restore_plant(self, plant: Plant) -> Plant:
        """
        Put back a previously deleted plant, unchanged, at the end of the collection.

        Raises:
            ValidationError: if a plant with the same id is already present
        """
        if self.has_plant(plant.id):
            raise ValidationError(
                "A plant with this id is already present",
                field="id",
                value=plant.id,
                constraint="unique"
            )

        self._plants.append(plant)

        logger.log_business_event(
            PlantEventType.PLANT_RESTORED.value,
            f"Plant {plant.name!r} restored",
            entity_id=plant.id,
            entity_type="plant",
        )
        self._publish(plant_event(PlantEventType.PLANT_RESTORED, plant))
        return plant

    # =========================================================================
    # CARE EVENTS
    # =========================================================================

    def record_care_event(
        self,
        plant_id: str,
        event_type: Union[CareEventType, str],
        note: Optional[str] = None,
    ) -> CareEvent:
        """
        Record care given to a plant now.

        A water event also moves the plant's ``last_watered`` to the event
        timestamp; the event and the plant change are applied together or
        not at all.

        Raises:
            PlantNotFoundError: if no plant has ``plant_id``
            ValidationError: for an unknown event type or an invalid note
        """
        index = self._index_of(plant_id)
        care_type = self._parse_event_type(event_type)

        try:
            event = CareEvent(
                id=self._id_factory(),
                plant_id=plant_id,
                type=care_type,
                timestamp=self._clock(),
                note=note,
            )
        except PydanticValidationError as e:
            raise validation_error_from_pydantic(e, message="Invalid care event") from e

        previous_plant = self._plants[index]
        events_before = len(self._events)
        try:
            self._events.append(event)
            if event.type is CareEventType.WATER:
                self._plants[index] = previous_plant.with_last_watered(event.timestamp)
        except Exception:
            del self._events[events_before:]
            self._plants[index] = previous_plant
            raise

        plant = self._plants[index]
        logger.log_business_event(
            PlantEventType.CARE_EVENT_RECORDED.value,
            f"{event.type.label} recorded for {plant.name!r}",
            entity_id=event.id,
            entity_type="care_event",
            extra={"plant_id": plant.id, "care_type": event.type.value},
        )
        self._publish(care_event_recorded(event, plant))
        return event

    # =========================================================================
    # SEEDING
    # =========================================================================

    def seed(self, plants: Iterable[Plant], events: Iterable[CareEvent] = ()) -> None:
        """
        Load existing records as they are, without publishing events.

        Raises:
            ValidationError: if a plant id is already present
        """
        plants = list(plants)
        events = list(events)
        seen = {plant.id for plant in self._plants}
        for plant in plants:
            if plant.id in seen:
                raise ValidationError(
                    "Duplicate plant id in seed data",
                    field="id",
                    value=plant.id,
                    constraint="unique"
                )
            seen.add(plant.id)

        self._plants.extend(plants)
        self._events.extend(events)
        logger.info(
            "Store seeded",
            plants=len(plants),
            care_events=len(events),
        )

    # =========================================================================
    # INTERNALS
    # =========================================================================

    def _index_of(self, plant_id: str) -> int:
        for index, plant in enumerate(self._plants):
            if plant.id == plant_id:
                return index
        raise PlantNotFoundError(plant_id)

    def _fresh_plant_id(self) -> str:
        plant_id = self._id_factory()
        while self.has_plant(plant_id):
            plant_id = self._id_factory()
        return plant_id

    @staticmethod
    def _parse_event_type(event_type: Union[CareEventType, str]) -> CareEventType:
        try:
            return CareEventType(event_type)
        except ValueError:
            raise ValidationError(
                f"Unknown care event type: {event_type}",
                field="type",
                value=event_type,
                constraint=f"one of {[t.value for t in CareEventType]}"
            ) from None

    def _publish(self, event) -> None:
        if self._event_bus is not None:
            self._event_bus.publish(event)
