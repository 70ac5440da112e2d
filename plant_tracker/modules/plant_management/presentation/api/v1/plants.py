# 📄 File: plant_tracker/modules/plant_management/presentation/api/v1/plants.py
# 🧭 Purpose (Layman Explanation):
# The web endpoints behind the plant cards and the plant detail view: list, add, edit and delete
# plants, undo a delete, water a plant now, log other care and watch the time since last watering.
# 🧪 Purpose (Technical Summary):
# FastAPI plant endpoints forwarding plain data to the CareRecordStore and UndoBuffer, plus a
# websocket streaming elapsed-since-watering on a ticker bound to the connection lifetime.
# 🔗 Dependencies:
# FastAPI, plant API schemas, presentation dependencies, domain services, app logging
# 🔄 Connected Modules / Calls From:
# plant management presentation router, plant_tracker.api.v1.router

"""
Plants API Endpoints

Endpoints:
- GET /plants: List plants in insertion order
- POST /plants: Add a plant
- GET /plants/form-defaults: Pre-filled values of the add-plant form
- POST /plants/undo-delete: Restore the last deleted plant within its window
- GET /plants/{plant_id}: Get one plant
- PUT /plants/{plant_id}: Replace a plant's fields
- DELETE /plants/{plant_id}: Delete a plant (restorable for the undo window)
- POST /plants/{plant_id}/water: Record a watering now
- POST /plants/{plant_id}/care-events: Record any care event now
- GET /plants/{plant_id}/care-events: Care history, most recent first
- GET /plants/{plant_id}/elapsed: Time since last watering
- WS /plants/{plant_id}/elapsed/ws: Same, pushed every tick while connected
"""

import asyncio
from typing import Optional

from fastapi import APIRouter, Body, Depends, Query, WebSocket, status

from plant_tracker.shared.config.settings import Settings
from plant_tracker.shared.core.exceptions import NothingToRestoreError
from plant_tracker.shared.core.security import AuthState
from plant_tracker.shared.utils.logging import get_logger

from ....domain.models import CareEventType, Plant, PlantStatus, SunlightLevel
from ....domain.services.care_record_store import CareRecordStore
from ....domain.services.time_math import Elapsed, elapsed_since
from ....domain.services.undo_buffer import UndoBuffer
from ....domain.services.watering_ticker import elapsed_ticker
from ...dependencies import (
    get_app_settings,
    get_auth_state,
    get_store,
    get_undo_buffer,
    is_access_allowed,
    require_authenticated,
)
from ..schemas.plant_schemas import (
    CareEventCreateRequest,
    CareEventListResponse,
    CareEventResponse,
    ElapsedResponse,
    PlantCreateRequest,
    PlantDeletedResponse,
    PlantFormDefaultsResponse,
    PlantListResponse,
    PlantResponse,
    PlantUpdateRequest,
    WaterPlantRequest,
)

logger = get_logger(__name__)

plants_router = APIRouter()

# HTTP routes share the authentication guard; the websocket checks it itself
_guard = [Depends(require_authenticated)]


# =========================================================================
# PLANT CRUD
# =========================================================================

@plants_router.get(
    "",
    response_model=PlantListResponse,
    summary="List plants",
    dependencies=_guard,
)
async def list_plants(store: CareRecordStore = Depends(get_store)) -> PlantListResponse:
    plants = store.list_plants()
    return PlantListResponse(
        plants=[PlantResponse.from_domain(plant) for plant in plants],
        total=len(plants),
    )


@plants_router.post(
    "",
    response_model=PlantResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a plant",
    dependencies=_guard,
)
async def add_plant(
    payload: PlantCreateRequest,
    store: CareRecordStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
) -> PlantResponse:
    plant = store.add_plant(
        payload.to_form_data(store.now(), default_frequency=settings.DEFAULT_WATERING_FREQUENCY)
    )
    return PlantResponse.from_domain(plant)


@plants_router.get(
    "/form-defaults",
    response_model=PlantFormDefaultsResponse,
    summary="Add-plant form defaults",
    dependencies=_guard,
)
async def get_form_defaults(
    store: CareRecordStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
) -> PlantFormDefaultsResponse:
    return PlantFormDefaultsResponse(
        watering_frequency=settings.DEFAULT_WATERING_FREQUENCY,
        sunlight=SunlightLevel.MEDIUM,
        status=PlantStatus.HEALTHY,
        last_watered=store.now(),
    )


@plants_router.post(
    "/undo-delete",
    response_model=PlantResponse,
    summary="Restore the last deleted plant",
    description="Works once, while the undo window of the last delete is open.",
    responses={404: {"description": "Nothing to restore"}},
    dependencies=_guard,
)
async def undo_delete(undo_buffer: UndoBuffer = Depends(get_undo_buffer)) -> PlantResponse:
    plant = undo_buffer.restore()
    if plant is None:
        raise NothingToRestoreError()
    return PlantResponse.from_domain(plant)


@plants_router.get(
    "/{plant_id}",
    response_model=PlantResponse,
    summary="Get a plant",
    responses={404: {"description": "Plant not found"}},
    dependencies=_guard,
)
async def get_plant(
    plant_id: str,
    store: CareRecordStore = Depends(get_store),
) -> PlantResponse:
    return PlantResponse.from_domain(store.get_plant(plant_id))


@plants_router.put(
    "/{plant_id}",
    response_model=PlantResponse,
    summary="Replace a plant's fields",
    responses={404: {"description": "Plant not found"}},
    dependencies=_guard,
)
async def update_plant(
    plant_id: str,
    payload: PlantUpdateRequest,
    store: CareRecordStore = Depends(get_store),
) -> PlantResponse:
    plant = store.update_plant(plant_id, payload.to_form_data(store.now()))
    return PlantResponse.from_domain(plant)


@plants_router.delete(
    "/{plant_id}",
    response_model=PlantDeletedResponse,
    summary="Delete a plant",
    description="The plant can be restored with POST /plants/undo-delete until undo_deadline.",
    responses={404: {"description": "Plant not found"}},
    dependencies=_guard,
)
async def delete_plant(
    plant_id: str,
    store: CareRecordStore = Depends(get_store),
    undo_buffer: UndoBuffer = Depends(get_undo_buffer),
) -> PlantDeletedResponse:
    plant = store.delete_plant(plant_id)
    deadline = undo_buffer.capture(plant)
    return PlantDeletedResponse(
        plant=PlantResponse.from_domain(plant),
        undo_deadline=deadline,
        undo_window_ms=undo_buffer.window_ms,
    )


# =========================================================================
# CARE EVENTS
# =========================================================================

@plants_router.post(
    "/{plant_id}/water",
    response_model=CareEventResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Water a plant now",
    responses={404: {"description": "Plant not found"}},
    dependencies=_guard,
)
async def water_plant(
    plant_id: str,
    payload: Optional[WaterPlantRequest] = Body(default=None),
    store: CareRecordStore = Depends(get_store),
) -> CareEventResponse:
    note = payload.note if payload else None
    event = store.record_care_event(plant_id, CareEventType.WATER, note)
    return CareEventResponse.from_domain(event, store.get_plant(plant_id))


@plants_router.post(
    "/{plant_id}/care-events",
    response_model=CareEventResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Record care for a plant",
    responses={404: {"description": "Plant not found"}},
    dependencies=_guard,
)
async def record_care_event(
    plant_id: str,
    payload: CareEventCreateRequest,
    store: CareRecordStore = Depends(get_store),
) -> CareEventResponse:
    event = store.record_care_event(plant_id, payload.type, payload.note)
    return CareEventResponse.from_domain(event, store.get_plant(plant_id))


@plants_router.get(
    "/{plant_id}/care-events",
    response_model=CareEventListResponse,
    summary="Care history of a plant",
    description="Most recent first. Also answers for deleted plants, whose events are kept.",
    dependencies=_guard,
)
async def list_plant_care_events(
    plant_id: str,
    care_type: Optional[CareEventType] = Query(default=None, alias="type"),
    store: CareRecordStore = Depends(get_store),
) -> CareEventListResponse:
    events = store.list_events_for_plant(plant_id)
    if care_type is not None:
        events = [event for event in events if event.type is care_type]

    plant: Optional[Plant] = store.get_plant(plant_id) if store.has_plant(plant_id) else None
    return CareEventListResponse(
        events=[CareEventResponse.from_domain(event, plant) for event in events],
        total=len(events),
    )


# =========================================================================
# TIME SINCE LAST WATERING
# =========================================================================

@plants_router.get(
    "/{plant_id}/elapsed",
    response_model=ElapsedResponse,
    summary="Time since last watering",
    responses={404: {"description": "Plant not found"}},
    dependencies=_guard,
)
async def get_elapsed(
    plant_id: str,
    store: CareRecordStore = Depends(get_store),
) -> ElapsedResponse:
    plant = store.get_plant(plant_id)
    now = store.now()
    return ElapsedResponse.from_elapsed(plant, elapsed_since(plant.last_watered, now), now)


@plants_router.websocket("/{plant_id}/elapsed/ws")
async def stream_elapsed(
    websocket: WebSocket,
    plant_id: str,
    store: CareRecordStore = Depends(get_store),
    auth_state: AuthState = Depends(get_auth_state),
    settings: Settings = Depends(get_app_settings),
):
    """
    Push the time since last watering once per tick.

    The ticker lives exactly as long as the connection. The socket is closed
    by the server when the plant is deleted.
    """
    if not is_access_allowed(auth_state, settings):
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION, reason="Authentication required")
        return
    if not store.has_plant(plant_id):
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION, reason="Plant not found")
        return

    await websocket.accept()

    async def push(plant: Plant, elapsed: Elapsed) -> None:
        response = ElapsedResponse.from_elapsed(plant, elapsed, store.now())
        await websocket.send_json(response.model_dump(mode="json"))

    ticker = elapsed_ticker(store, plant_id, push, interval=settings.TICK_INTERVAL_SECONDS)
    disconnected = asyncio.ensure_future(_wait_for_disconnect(websocket))
    ticker_done = None
    client_left = False
    try:
        async with ticker:
            ticker_done = asyncio.ensure_future(ticker.wait())
            await asyncio.wait({disconnected, ticker_done}, return_when=asyncio.FIRST_COMPLETED)
            client_left = disconnected.done()
    finally:
        disconnected.cancel()
        if ticker_done is not None:
            ticker_done.cancel()

    if not client_left:
        logger.debug("Plant gone, closing elapsed stream", plant_id=plant_id)
        await websocket.close(code=status.WS_1000_NORMAL_CLOSURE, reason="Plant removed")


async def _wait_for_disconnect(websocket: WebSocket) -> None:
    while True:
        message = await websocket.receive()
        if message["type"] == "websocket.disconnect":
            return
