"""
Sales API - Backend
Branches, customers, products, sales and users over a SQL database
"""
import logging
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import OperationalError

# Load environment variables
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(env_path)

from sales_api.api import branches, customers, products, sales, users
from sales_api.core.config import settings
from sales_api.core.database import init_db, wait_for_database
from sales_api.core.errors import (
    ApplicationError,
    BusinessRuleError,
    ConflictError,
    NotFoundError,
    TransactionError,
    ValidationError,
)

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Wait for the database, then create missing tables"""
    wait_for_database()
    init_db()
    logger.info(f"{settings.API_TITLE} {settings.API_VERSION} started")
    yield


# Crear aplicación FastAPI
app = FastAPI(
    title=settings.API_TITLE,
    version=settings.API_VERSION,
    description=settings.API_DESCRIPTION,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_allowed_origins(),
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
    allow_headers=["*"],
)


# ============================================================================
# Error handlers
# ============================================================================

def error_response(status_code: int, message: str, errors: list = None) -> JSONResponse:
    body = {"status": "error", "message": message}
    if errors:
        body["errors"] = errors
    return JSONResponse(status_code=status_code, content=body)


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, exc.message, exc.to_list())


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        {"field": ".".join(str(part) for part in error["loc"] if part != "body"), "message": error["msg"]}
        for error in exc.errors()
    ]
    return error_response(status.HTTP_400_BAD_REQUEST, "Validation failed", errors)


@app.exception_handler(BusinessRuleError)
async def business_rule_error_handler(request: Request, exc: BusinessRuleError) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, exc.message)


@app.exception_handler(NotFoundError)
async def not_found_error_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return error_response(status.HTTP_404_NOT_FOUND, exc.message)


@app.exception_handler(ConflictError)
async def conflict_error_handler(request: Request, exc: ConflictError) -> JSONResponse:
    return error_response(status.HTTP_409_CONFLICT, exc.message)


@app.exception_handler(TransactionError)
async def transaction_error_handler(request: Request, exc: TransactionError) -> JSONResponse:
    logger.error(f"Transaction failed on {request.url.path}: {exc.message} (cause: {exc.cause})")
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, exc.message)


@app.exception_handler(ApplicationError)
async def application_error_handler(request: Request, exc: ApplicationError) -> JSONResponse:
    logger.error(f"Unmapped application error on {request.url.path}: {exc.message}")
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, exc.message)


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled exception on {request.url.path}")
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


# Include API routers
app.include_router(branches.router, prefix="/api/v1/branches", tags=["Branches"])
app.include_router(customers.router, prefix="/api/v1/customers", tags=["Customers"])
app.include_router(products.router, prefix="/api/v1/products", tags=["Products"])
app.include_router(sales.router, prefix="/api/v1/sales", tags=["Sales"])
app.include_router(users.router, prefix="/api/v1/users", tags=["Users"])


@app.get("/")
async def root():
    """Endpoint raíz - Verificación de estado de la API"""
    return {
        "message": settings.API_TITLE,
        "status": "online",
        "version": settings.API_VERSION,
        "description": settings.API_DESCRIPTION
    }


@app.get("/health")
def health():
    """Health check endpoint para monitoreo - tests database connectivity"""
    db_status = "unknown"
    db_latency_ms = None
    db_error = None

    try:
        # Fast check, no retries
        db_latency_ms = wait_for_database(max_retries=1)
        db_status = "connected"
    except OperationalError as e:
        db_status = "disconnected"
        db_error = str(e)

    return {
        "status": "healthy" if db_status == "connected" else "degraded",
        "service": "sales-api",
        "version": settings.API_VERSION,
        "database": {
            "status": db_status,
            "latency_ms": db_latency_ms,
            "error": db_error
        }
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "sales_api.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.API_DEBUG
    )
