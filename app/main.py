import logging

from fastapi import FastAPI, Depends, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.endpoints.receipts import router as receipts_router
from app.config import get_settings, Settings
from app.errors import MalformedReceiptError
from app.logging_config import configure_logging
from app.store.memory import InMemoryReceiptStore, get_receipt_store

settings = get_settings()
configure_logging(settings.log_level)

logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Scores purchase receipts against a fixed set of reward-points rules",
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(receipts_router)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log every incoming request and the status it was answered with."""
    logger.info("Received %s request for %s", request.method, request.url.path)
    response = await call_next(request)
    logger.info(
        "Completed %s %s with status %d",
        request.method,
        request.url.path,
        response.status_code,
    )
    return response


@app.exception_handler(RequestValidationError)
async def malformed_request_handler(request: Request, exc: RequestValidationError):
    """Undecodable or wrongly shaped bodies are a 400, not FastAPI's default 422."""
    logger.warning("Error decoding JSON for %s: %s", request.url.path, exc.errors())
    error = MalformedReceiptError()
    return JSONResponse(status_code=400, content={"detail": error.message})


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "status": "running",
    }


@app.get("/health")
def health_check(
    settings: Settings = Depends(get_settings),
    store: InMemoryReceiptStore = Depends(get_receipt_store),
):
    """Health check endpoint with store size."""
    return {
        "status": "healthy",
        "version": settings.app_version,
        "receipts_stored": len(store),
    }
