"""Control panel API — FastAPI backend for the profile chunk editor and live status."""

import os
from functools import lru_cache

from fastapi import Depends, FastAPI, Header, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from heatpanel.config.loader import load_config
from heatpanel.config.schema import PanelConfig
from heatpanel.ingest.profile_adapter import ProfileFormatError, normalize_records, record_to_wire
from heatpanel.ingest.status_client import StatusClient
from heatpanel.ingest.transport import AuthenticatedTransport, TransportError, static_token_provider
from heatpanel.models.edit import ChunkEdit, ChunkEditError
from heatpanel.models.profile import Chunk, HalfHourlyRecord, default_day
from heatpanel.models.status import BoostType
from heatpanel.schedule.compressor import compress, temperature_bounds
from heatpanel.schedule.deleter import delete_chunk
from heatpanel.schedule.editor import apply_edit

app = FastAPI(title="Heating Control Panel", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@lru_cache
def get_config() -> PanelConfig:
    return load_config(os.environ.get("HEATPANEL_CONFIG"))


def get_status_client(
    authorization: str | None = Header(default=None),
    config: PanelConfig = Depends(get_config),
) -> StatusClient:
    """Status client authenticated with the caller's own bearer token."""
    token = None
    if authorization and authorization.lower().startswith("bearer "):
        token = authorization[7:]
    transport = AuthenticatedTransport(
        static_token_provider(token),
        timeout=config.api.timeout_seconds,
        max_retries=config.api.max_retries,
        retry_base_delay=config.api.retry_base_delay,
    )
    return StatusClient(transport, config.api.status_url, config.api.boost_url)


class RecordsRequest(BaseModel):
    records: list[dict]


class EditRequest(RecordsRequest):
    start_time: str
    end_time: str
    low_temp: float
    high_temp: float
    chunk_index: int | None = None


class DeleteRequest(RecordsRequest):
    chunk_index: int


def _records(raw: list[dict]) -> list[HalfHourlyRecord]:
    try:
        return list(normalize_records(raw))
    except ProfileFormatError as e:
        raise HTTPException(
            status_code=422, detail={"rule": "RECORDS", "message": str(e)}
        ) from e


def _chunk_json(c: Chunk) -> dict:
    return {
        "index": c.index,
        "start_time": c.start_time,
        "end_time": c.end_time,
        "end_of_period": c.end_of_period,
        "low_temp": c.low_temp,
        "high_temp": c.high_temp,
        "is_first": c.is_first,
        "is_last": c.is_last,
    }


def _view(records: list[HalfHourlyRecord]) -> dict:
    bounds = temperature_bounds(records)
    return {
        "records": [record_to_wire(r) for r in records],
        "chunks": [_chunk_json(c) for c in compress(records)],
        "bounds": (
            {"min_temp": bounds.min_temp, "max_temp": bounds.max_temp} if bounds else None
        ),
    }


# ── Chunk editor ────────────────────────────────────────────────


@app.post("/api/chunks")
def get_chunks(req: RecordsRequest):
    """Chunk view of a profile's half-hourly records."""
    return _view(_records(req.records))


@app.post("/api/chunks/edit")
def edit_chunk(req: EditRequest, config: PanelConfig = Depends(get_config)):
    """Apply a chunk edit or new period. 422 with the failed rule on bad input."""
    records = _records(req.records)
    chunks = compress(records)
    if req.chunk_index is not None and not 0 <= req.chunk_index < len(chunks):
        raise HTTPException(status_code=404, detail=f"No chunk {req.chunk_index}")
    edit = ChunkEdit(
        start_time=req.start_time,
        end_time=req.end_time,
        low_temp=req.low_temp,
        high_temp=req.high_temp,
        chunk_index=req.chunk_index,
    )
    try:
        updated = apply_edit(records, edit, config.editor.min_band_width)
    except ChunkEditError as e:
        raise HTTPException(
            status_code=422, detail={"rule": str(e.rule), "message": e.message}
        ) from e
    return _view(updated)


@app.post("/api/chunks/delete")
def remove_chunk(req: DeleteRequest):
    records = _records(req.records)
    chunks = compress(records)
    if not 0 <= req.chunk_index < len(chunks):
        raise HTTPException(status_code=404, detail=f"No chunk {req.chunk_index}")
    result = delete_chunk(records, chunks[req.chunk_index])
    return {**_view(result.records), "changed": result.changed}


@app.get("/api/defaults/day")
def get_default_day(config: PanelConfig = Depends(get_config)):
    """Uniform day used to seed a new profile."""
    return _view(default_day(config.editor.default_low_temp, config.editor.default_high_temp))


# ── Live status ─────────────────────────────────────────────────


@app.get("/api/status")
def get_status(client: StatusClient = Depends(get_status_client)):
    try:
        s = client.get_status()
    except TransportError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return {
        "user_name": s.user_name,
        "room_temperature": s.room_temperature,
        "water_temperature": s.water_temperature,
        "status": s.running_status,
        "demand_low": s.demand_low,
        "demand_high": s.demand_high,
        "boost_type": str(s.boost_type),
        "weekly_savings": round(s.weekly_savings, 2),
        "tank_fullness_pct": round(s.tank_fullness_pct, 1),
        "tank_status_text": s.tank_status_text,
    }


@app.post("/api/boost/{kind}")
def toggle_boost(kind: str, client: StatusClient = Depends(get_status_client)):
    requested = {"heating": BoostType.HEATING, "water": BoostType.WATER}.get(kind)
    if requested is None:
        raise HTTPException(status_code=404, detail=f"Unknown boost kind: {kind}")
    try:
        current = client.get_status().boost_type
        new_state = client.toggle_boost(current, requested)
    except TransportError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return {"boost_type": str(new_state)}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8777)
