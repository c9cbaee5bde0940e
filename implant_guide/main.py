from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from .config import settings
from .routers import planning, standards, teeth

logger = logging.getLogger("implant_guide")

app = FastAPI(
    title=settings.APP_NAME,
    description="Implant placement planning from clinical landmarks",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routes
app.include_router(planning.router, prefix="/api")
app.include_router(teeth.router, prefix="/api")
app.include_router(standards.router, prefix="/api")


@app.get("/health")
def health():
    return {"status": "ok", "app": "implant-guide"}


@app.on_event("startup")
def log_startup():
    logger.info(
        "%s started (undersized length fallback: %s)",
        settings.APP_NAME, "on" if settings.ALLOW_UNDERSIZED_LENGTH else "off",
    )
