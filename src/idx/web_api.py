from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import List, Optional

from fastapi import Depends, FastAPI, HTTPException, Query
from pydantic import BaseModel

from .config import IdxConfig, load_config
from .constants import ULID_LEN
from .errors import IdxError, TimestampRangeError, UnavailableSourceError
from .ids import uuid4
from .ulid import UlidGenerator, default_generator

logger = logging.getLogger(__name__)

app = FastAPI(title="idx", version="0.1.0")

_config: Optional[IdxConfig] = None


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def get_config() -> IdxConfig:
    global _config
    if _config is None:
        _config = load_config()
    return _config


def get_generator() -> UlidGenerator:
    return default_generator()


class IdsResponse(BaseModel):
    kind: str
    ids: List[str]
    generatedAt: str


class HealthResponse(BaseModel):
    status: str
    ulidLength: int
    randomSource: str
    strictTimeRange: bool


def _check_count(count: int, cfg: IdxConfig) -> None:
    if count > cfg.max_count:
        raise HTTPException(status_code=422, detail=f"count must be at most {cfg.max_count}")


@app.get("/health", response_model=HealthResponse)
def health(cfg: IdxConfig = Depends(get_config)):
    return HealthResponse(
        status="ok",
        ulidLength=ULID_LEN,
        randomSource=cfg.random_source,
        strictTimeRange=cfg.strict_time_range,
    )


@app.get("/ulid", response_model=IdsResponse)
def new_ulids(
    time: Optional[float] = Query(None, description="Seconds since unix epoch, millisecond precision"),
    count: int = Query(1, ge=1),
    cfg: IdxConfig = Depends(get_config),
    generator: UlidGenerator = Depends(get_generator),
):
    _check_count(count, cfg)
    try:
        ids = generator.generate_many(count, time)
    except TimestampRangeError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except UnavailableSourceError as e:
        logger.error("ulid generation failed: %s", e)
        raise HTTPException(status_code=503, detail=str(e))
    except IdxError as e:
        logger.error("ulid generation failed: %s", e)
        raise HTTPException(status_code=500, detail=str(e))
    return IdsResponse(kind="ulid", ids=ids, generatedAt=_now_iso())


@app.get("/uuid", response_model=IdsResponse)
def new_uuids(count: int = Query(1, ge=1), cfg: IdxConfig = Depends(get_config)):
    _check_count(count, cfg)
    return IdsResponse(kind="uuid", ids=[uuid4() for _ in range(count)], generatedAt=_now_iso())
