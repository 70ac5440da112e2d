# 📄 File: plant_tracker/modules/plant_management/presentation/api/v1/schedule.py
# 🧭 Purpose (Layman Explanation):
# The "upcoming waterings" list: for every plant, when it needs water next and how many days are left.
# 🧪 Purpose (Technical Summary):
# FastAPI endpoint computing next watering, days until, due label and schedule-derived flags
# for every plant at the store's current instant.
# 🔗 Dependencies:
# FastAPI, plant API schemas, presentation dependencies, CareRecordStore
# 🔄 Connected Modules / Calls From:
# plant management presentation router

from fastapi import APIRouter, Depends, Query

from ....domain.services.care_record_store import CareRecordStore
from ...dependencies import get_store, require_authenticated
from ..schemas.plant_schemas import ScheduleEntryResponse, ScheduleResponse

schedule_router = APIRouter(dependencies=[Depends(require_authenticated)])


@schedule_router.get(
    "",
    response_model=ScheduleResponse,
    summary="Upcoming waterings",
    description=(
        "One entry per plant. Entries keep the plant order unless sort=due, which "
        "puts the soonest (or most overdue) watering first."
    ),
)
async def get_schedule(
    sort: str = Query(default="plants", pattern="^(plants|due)$"),
    store: CareRecordStore = Depends(get_store),
) -> ScheduleResponse:
    now = store.now()
    entries = [ScheduleEntryResponse.from_domain(plant, now) for plant in store.list_plants()]
    if sort == "due":
        entries.sort(key=lambda entry: entry.next_watering)
    return ScheduleResponse(as_of=now, entries=entries)
