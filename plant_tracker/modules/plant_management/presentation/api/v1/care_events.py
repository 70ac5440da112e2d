# 📄 File: plant_tracker/modules/plant_management/presentation/api/v1/care_events.py
# 🧭 Purpose (Layman Explanation):
# The care history of all your plants in one list, newest first.
# 🧪 Purpose (Technical Summary):
# FastAPI endpoint listing every care event across plants, including events of deleted plants.
# 🔗 Dependencies:
# FastAPI, plant API schemas, presentation dependencies, CareRecordStore
# 🔄 Connected Modules / Calls From:
# plant management presentation router

from typing import Dict, Optional

from fastapi import APIRouter, Depends, Query

from ....domain.models import CareEventType, Plant
from ....domain.services.care_record_store import CareRecordStore
from ...dependencies import get_store, require_authenticated
from ..schemas.plant_schemas import CareEventListResponse, CareEventResponse

care_events_router = APIRouter(dependencies=[Depends(require_authenticated)])


@care_events_router.get(
    "",
    response_model=CareEventListResponse,
    summary="Care history",
    description="Every recorded care event, most recent first. plant_name is null for deleted plants.",
)
async def list_care_events(
    care_type: Optional[CareEventType] = Query(default=None, alias="type"),
    limit: Optional[int] = Query(default=None, ge=1, le=500),
    store: CareRecordStore = Depends(get_store),
) -> CareEventListResponse:
    events = store.list_events()
    if care_type is not None:
        events = [event for event in events if event.type is care_type]
    if limit is not None:
        events = events[:limit]

    plants: Dict[str, Plant] = {plant.id: plant for plant in store.list_plants()}
    return CareEventListResponse(
        events=[CareEventResponse.from_domain(event, plants.get(event.plant_id)) for event in events],
        total=len(events),
    )
