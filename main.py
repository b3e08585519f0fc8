import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from core.config import settings
from core.errors import register_exception_handlers
from core.logging import setup_logging

from api import contact

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    logger.info("🚀 App starting up...")
    yield
    logger.info("🛑 App shutting down...")


app = FastAPI(lifespan=lifespan, title=settings.APP_TITLE)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.FRONTEND_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type"],
)

register_exception_handlers(app)

# Routers
app.include_router(contact.router)


@app.get("/api")
def read_root():
    return {"message": "Portfolio backend running!"}


os.makedirs(settings.STATIC_DIR, exist_ok=True)

# Static portfolio site, mounted last so it never shadows the API
app.mount("/", StaticFiles(directory=settings.STATIC_DIR, html=True), name="static")
