"""Aggregate app for the component suggester."""
from __future__ import annotations

import logging

from fastapi import FastAPI

from suggester import __version__
from suggester.common.error_envelope import register_error_handlers
from suggester.common.health import router as health_router
from suggester.config import runtime_config
from suggester.logging.event_log import configure_logging
from suggester.search_analytics.routes import router as search_analytics_router
from suggester.search_analytics.service import get_search_analytics_service
from suggester.suggestions.routes import router as suggestions_router

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(title="Component Suggester", version=__version__)

    register_error_handlers(app)

    app.include_router(health_router)
    app.include_router(search_analytics_router)
    app.include_router(suggestions_router)

    if runtime_config.search_analytics_seed_demo_enabled():
        get_search_analytics_service().seed_demo_records()

    logger.info("Component suggester ready (env=%s)", runtime_config.get_env())
    return app


app = create_app()
