# app/main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.db.session import AsyncSessionLocal

from app.routers.bets import router as bets_router
from app.routers.game_modes import router as game_modes_router
import logging, sys

from app.tasks.scheduler import start_scheduler, stop_scheduler
from app.services.bootstrap_service import (
    init_db,
    ensure_default_game_modes,
    ensure_system_settings,
)

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logging.getLogger("uvicorn").setLevel(logging.WARNING)
logging.getLogger("uvicorn.error").setLevel(logging.WARNING)
logging.getLogger("uvicorn.access").setLevel(logging.CRITICAL)
logging.getLogger("apscheduler").setLevel(logging.ERROR)

# bet placement and settlement are worth keeping
logging.getLogger("app.services.bet_service").setLevel(logging.INFO)
logging.getLogger("app.tasks.settlement").setLevel(logging.INFO)

app.include_router(game_modes_router)
app.include_router(bets_router)

@app.on_event("startup")
async def on_startup() -> None:
    await init_db()
    async with AsyncSessionLocal() as session:
        await ensure_system_settings(session)
        await ensure_default_game_modes(session)
    start_scheduler()

@app.on_event("shutdown")
async def on_shutdown() -> None:
    stop_scheduler()

@app.get("/ping")
async def ping():
    return {"ok": True, "env": settings.APP_ENV}

@app.get("/healthz")
async def healthz():
    return {"status": "healthy"}
