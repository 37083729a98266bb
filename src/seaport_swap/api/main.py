"""REST API receiving order records from listing sessions."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..services.record_repository import OrderRecordRepository
from .endpoints import orders as order_endpoints

logger = logging.getLogger(__name__)


def create_app(
    repository: Optional[OrderRecordRepository] = None,
) -> FastAPI:
    """Build the records API application.

    Parameters
    ----------
    repository : Optional[OrderRecordRepository]
        Record storage to serve; a fresh in-memory repository if None

    Returns
    -------
    FastAPI
        Application with the order record routes mounted and the
        repository stored in ``app.state.record_repository``
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Order records API started")
        yield
        logger.info(
            f"Order records API stopped with "
            f"{len(app.state.record_repository)} records"
        )

    app = FastAPI(
        title="Seaport Swap Records API",
        description="Storage endpoint for created and fulfilled swap orders",
        version="1.0.0",
        lifespan=lifespan,
    )

    if repository is None:
        repository = OrderRecordRepository()
    app.state.record_repository = repository

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/")
    async def root():
        """Health check endpoint."""
        return {
            "status": "ok",
            "service": "Seaport Swap Records API",
            "records": len(app.state.record_repository),
        }

    app.include_router(order_endpoints.router)
    return app


app = create_app()
