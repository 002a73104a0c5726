# backend/relay/main.py

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api import notifications
from .core.logging_config import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    logger = logging.getLogger(__name__)
    logger.info("Relay startup completed.")
    yield
    logger.info("Relay shutdown completed.")


app = FastAPI(
    title="DesignFlow Mail Relay",
    description="Relays design review notifications to clients and the studio admin.",
    version="1.0.0",
    lifespan=lifespan,
)

# Browsers post here from any origin.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)

app.include_router(notifications.router, prefix="/api", tags=["Notifications"])


@app.get("/", tags=["Root"])
def read_root():
    return {"message": "Welcome to the DesignFlow mail relay. Visit /docs for API documentation."}
