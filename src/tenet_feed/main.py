# src/tenet_feed/main.py
"""Main entry point for the Tenet Feed application."""

from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from tenet_feed.api.v1 import engagement_router, posts_router, replies_router, users_router
from tenet_feed.core.errors import (
    PostNotFound,
    StoreUnavailable,
    Unauthenticated,
    ValidationRejected,
)
from tenet_feed.core.settings import settings

# Initialize FastAPI app
app = FastAPI(
    title="Tenet Feed API",
    description="Posts, replies, agreement scores and echoes for the Tenet feed",
    version=settings.app_version,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

# Add GZip middleware for compression
app.add_middleware(GZipMiddleware)

# Include API routers
app.include_router(posts_router, prefix="/api/v1")
app.include_router(engagement_router, prefix="/api/v1")
app.include_router(replies_router, prefix="/api/v1")
app.include_router(users_router, prefix="/api/v1")


@app.exception_handler(ValidationRejected)
async def validation_rejected_handler(request: Request, exc: ValidationRejected) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": exc.reason},
    )


@app.exception_handler(Unauthenticated)
async def unauthenticated_handler(request: Request, exc: Unauthenticated) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"detail": str(exc)},
    )


@app.exception_handler(PostNotFound)
async def post_not_found_handler(request: Request, exc: PostNotFound) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": "Post not found"},
    )


@app.exception_handler(StoreUnavailable)
async def store_unavailable_handler(request: Request, exc: StoreUnavailable) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Something went wrong. Please try again."},
    )


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint to verify the service is running."""
    return {"status": "ok"}


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint with basic information about the API."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
        "redoc": "/redoc",
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("tenet_feed.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
