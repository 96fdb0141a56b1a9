"""
FastAPI Main Application

Position math API for concentrated liquidity (CLAMM) positions.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from clamm_math import ClammMathError

from app.config import settings
from app.api.schemas import ErrorResponse
from app.api.v1 import health, positions

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title=settings.API_TITLE,
    description=settings.API_DESCRIPTION,
    version=settings.API_VERSION,
    docs_url="/docs",
    redoc_url="/redoc"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Include routers
app.include_router(positions.router, prefix="/api/v1", tags=["Positions"])
app.include_router(health.router, prefix="/api/v1", tags=["Health"])


@app.exception_handler(ClammMathError)
async def clamm_math_error_handler(request: Request, exc: ClammMathError):
    """Math errors are deterministic input problems: 422, never retried"""
    logger.info("Math error on %s: %s", request.url.path, exc)
    body = ErrorResponse(kind=exc.kind.value, message=str(exc))
    return JSONResponse(status_code=422, content=body.model_dump(mode="json"))


@app.get("/")
async def root():
    """Root endpoint with API information"""
    return {
        "name": settings.API_TITLE,
        "version": settings.API_VERSION,
        "description": settings.API_DESCRIPTION,
        "docs": "/docs",
        "health": "/api/v1/health",
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG
    )
