"""Lightweight EventLog entry helper reused across services."""
from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional
from uuid import uuid4

from pydantic import BaseModel, Field

from suggester.config import runtime_config

EVENTS_LOGGER_NAME = "suggester.events"

logger = logging.getLogger(EVENTS_LOGGER_NAME)

_configured = False


class EventLogEntry(BaseModel):
    event_id: str = Field(default_factory=lambda: str(uuid4()))
    event_type: str
    asset_type: str
    asset_id: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    metadata: Dict[str, Any] = Field(default_factory=dict)
    surface: str = "suggester"


EventLogger = Callable[[EventLogEntry], Dict[str, Any]]


def default_event_logger(entry: EventLogEntry) -> Dict[str, Any]:
    """Emit the entry as one structured JSON line on the events logger."""
    payload = {"env": runtime_config.get_env(), "event": entry.model_dump(mode="json")}
    logger.info(json.dumps(payload, sort_keys=True))
    return {"status": "accepted", "event_id": entry.event_id}


def configure_logging(level: Optional[str] = None) -> None:
    global _configured
    if _configured:
        return
    logging.basicConfig(
        level=(level or runtime_config.get_log_level()),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    _configured = True
