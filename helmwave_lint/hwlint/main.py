"""FastAPI application -- Helmwave lint entrypoint."""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

import hwlint.deps as deps
from hwlint.api.validate import router as validate_router
from hwlint.config import load_options

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan: configure logging and load options on startup."""
    log_level = logging.DEBUG if os.environ.get("HWLINT_DEV_MODE") else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    deps._options = load_options()
    logger.info("Helmwave lint starting with options: %s", deps._options.model_dump())

    yield

    deps._options = None


app = FastAPI(
    title="Helmwave Lint",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(validate_router)
