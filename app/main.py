import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.dependencies import close_store, init_store
from app.routers.alertas import router as alertas_router
from app.routers.colaboradores import router as colaboradores_router
from app.routers.motos import router as motos_router
from app.utils.exceptions import register_exception_handlers
from app.utils.logger import configure_logging

configure_logging(settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_store()
    logger.info("%s %s started", settings.app_title, settings.app_version)
    yield
    await close_store()


app = FastAPI(
    title=settings.app_title,
    description="API para gerenciamento de motos no pátio, com colaboradores e alertas.",
    version=settings.app_version,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    response = await call_next(request)
    duration = round((time.perf_counter() - start) * 1000, 2)
    logger.debug("%s %s -> %s (%sms)", request.method, request.url.path, response.status_code, duration)
    return response


app.include_router(motos_router)
app.include_router(colaboradores_router)
app.include_router(alertas_router)


@app.get("/health")
async def health_check():
    return {"status": "ok", "service": "mottu-api", "version": settings.app_version}
