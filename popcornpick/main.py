import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from popcornpick.routers import health, auth, movies, watchlist, cache
from popcornpick.core.config import get_settings
from popcornpick.core.exceptions import BaseAppException, UnauthorizedException
from popcornpick.db import Base, engine
from popcornpick import models  # ensure models are imported
from popcornpick.services.scheduler import create_scheduler

settings = get_settings()
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="PopcornPick API",
    description="TMDB proxy with accounts and watchlists",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins(),
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(auth.router, prefix=settings.API_PREFIX)
app.include_router(movies.router, prefix=settings.API_PREFIX)
app.include_router(watchlist.router, prefix=settings.API_PREFIX)
app.include_router(cache.router, prefix=settings.API_PREFIX)

@app.exception_handler(BaseAppException)
async def app_exception_handler(request: Request, exc: BaseAppException):
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, UnauthorizedException) else None
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict(), headers=headers)

@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.info(f"Rejected request to {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": "Invalid request"})

scheduler = create_scheduler(settings) if settings.ENABLE_SCHEDULER else None

@app.on_event("startup")
async def init_db():
    if settings.AUTO_CREATE_TABLES:
        Base.metadata.create_all(bind=engine)
    if scheduler is not None and not scheduler.running:
        scheduler.start()

@app.on_event("shutdown")
async def stop_scheduler():
    if scheduler is not None and scheduler.running:
        scheduler.shutdown(wait=False)
