"""Main FastAPI application."""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from vivida.config import settings
from vivida.api import auth, public, contact, journey, team_members, services, work, site_settings
from vivida.constants import INTERNAL_ERROR
from vivida.database import init_db
from vivida.utils.logger import logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    # In production, prefer migrations and set CREATE_TABLES=false
    if settings.create_tables:
        init_db()
    yield


app = FastAPI(
    title="Vivida API",
    description="Content API for the Vivida marketing site and its admin console",
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies are a 400 and never reach storage."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Invalid request data", "errors": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": INTERNAL_ERROR},
    )


# Include routers
app.include_router(public.router)
app.include_router(journey.public_router)
app.include_router(contact.public_router)
app.include_router(auth.router)
app.include_router(site_settings.router)
app.include_router(team_members.router)
app.include_router(services.router)
app.include_router(journey.router)
app.include_router(work.router)
app.include_router(contact.router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Vivida API",
        "version": "0.1.0",
        "docs": "/docs",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("vivida.main:app", host=settings.api_host, port=settings.api_port)
