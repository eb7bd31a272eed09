"""
FastAPI application for the Firearms Catalog API.

Exposes the firearms table via one GET endpoint per filter dimension, with
auto-generated OpenAPI documentation at /docs.

Run with:
    python -m api.main
    uvicorn api.main:create_app --factory --port 4000
"""

import logging
import os
import re
from contextlib import asynccontextmanager
from typing import List

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from database import DatabaseManager, SeedError, StorageInitError
from .config import Settings, settings
from .data_access import FirearmDataProvider
from .errors import CatalogError, FirearmNotFoundError, InvalidParameterError
from .models import ErrorResponse, FirearmRecord, HealthResponse, MessageResponse

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT64_MIN, _INT64_MAX = -2**63, 2**63 - 1

# Shown on the index page
ROUTES = [
    ("/brand/{brand}", "Firearms whose brand contains the value"),
    ("/name/{name}", "Firearms whose model name contains the value"),
    ("/caliber/{caliber}", "Firearms whose caliber contains the value"),
    ("/year/{year}", "Firearms introduced in the given year"),
    ("/type/{type}", "Firearms whose type contains the value"),
    ("/country/{country}", "Firearms whose country of origin contains the value"),
    ("/price/{min}/{max}", "Firearms priced within the inclusive range"),
    ("/id/{id}", "A single firearm by identifier"),
    ("/all", "Every firearm in the catalog"),
]

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": MessageResponse},
    500: {"model": ErrorResponse},
}

router = APIRouter()


# ----------------------------------------------------------------
# Dependencies & helpers
# ----------------------------------------------------------------

def get_provider(request: Request) -> FirearmDataProvider:
    """The process-wide data provider, stored on app.state by create_app."""
    return request.app.state.provider


def _require(value: str, param: str) -> str:
    if not value:
        raise InvalidParameterError(f"{param} parameter is required")
    return value


def _parse_price(value: str, label: str) -> int:
    # ASCII digits only, and must fit a signed 64-bit SQLite INTEGER
    if not _INT_RE.fullmatch(value):
        raise InvalidParameterError(f"{label} price must be a valid integer")
    n = int(value)
    if not _INT64_MIN <= n <= _INT64_MAX:
        raise InvalidParameterError(f"{label} price must be a valid integer")
    return n


def _records(rows: List[dict], not_found: str) -> List[FirearmRecord]:
    if not rows:
        raise FirearmNotFoundError(not_found)
    return [FirearmRecord(**row) for row in rows]


def _missing(param: str):
    def handler():
        raise InvalidParameterError(f"{param} parameter is required")
    return handler


# Bare prefixes (e.g. /brand or /brand/) answer 400 instead of a routing 404
for _prefix, _param in [
    ("brand", "brand"),
    ("name", "name"),
    ("caliber", "caliber"),
    ("year", "year"),
    ("type", "type"),
    ("country", "country"),
    ("id", "id"),
]:
    for _path in (f"/{_prefix}", f"/{_prefix}/"):
        router.add_api_route(_path, _missing(_param), methods=["GET"],
                             include_in_schema=False)


def _missing_price():
    raise InvalidParameterError("min and max price parameters are required")


def _missing_max_price(min_price: str):
    _missing_price()


for _path in ("/price", "/price/"):
    router.add_api_route(_path, _missing_price, methods=["GET"],
                         include_in_schema=False)
for _path in ("/price/{min_price}", "/price/{min_price}/"):
    router.add_api_route(_path, _missing_max_price, methods=["GET"],
                         include_in_schema=False)


# ----------------------------------------------------------------
# Health & Index
# ----------------------------------------------------------------

@router.get("/", include_in_schema=False)
def index(request: Request, data: FirearmDataProvider = Depends(get_provider)):
    """Server-rendered landing page listing the available routes."""
    return request.app.state.templates.TemplateResponse(
        request,
        "index.html",
        {
            "title": request.app.title,
            "record_count": data.count(),
            "routes": ROUTES,
        },
    )


@router.get("/health", response_model=HealthResponse, tags=["Health"])
def health(request: Request, data: FirearmDataProvider = Depends(get_provider)):
    """
    API health check and information.

    Returns service status and the number of catalog records.
    """
    config: Settings = request.app.state.settings
    return {
        "service": config.API_TITLE,
        "version": config.API_VERSION,
        "status": "healthy",
        "database_path": data.db_path,
        "record_count": data.count(),
    }


# ----------------------------------------------------------------
# Filter Endpoints
# ----------------------------------------------------------------

@router.get("/brand/{brand}", response_model=List[FirearmRecord],
            responses=ERROR_RESPONSES, tags=["Firearms"])
def get_firearms_by_brand(brand: str, data: FirearmDataProvider = Depends(get_provider)):
    """
    Get firearms by brand (partial, case-insensitive).

    Args:
        brand: Brand name or fragment (e.g., 'glock', 'h&k')
    """
    _require(brand, "brand")
    return _records(data.get_by_brand(brand), f"no firearms found for brand: {brand}")


@router.get("/name/{name}", response_model=List[FirearmRecord],
            responses=ERROR_RESPONSES, tags=["Firearms"])
def get_firearms_by_name(name: str, data: FirearmDataProvider = Depends(get_provider)):
    """Get firearms by model name (partial, case-insensitive)."""
    _require(name, "name")
    return _records(data.get_by_name(name), f"no firearms found with name: {name}")


@router.get("/caliber/{caliber}", response_model=List[FirearmRecord],
            responses=ERROR_RESPONSES, tags=["Firearms"])
def get_firearms_by_caliber(caliber: str, data: FirearmDataProvider = Depends(get_provider)):
    """Get firearms by caliber (partial, case-insensitive, e.g. '9mm')."""
    _require(caliber, "caliber")
    return _records(data.get_by_caliber(caliber), f"no firearms found for caliber: {caliber}")


@router.get("/year/{year}", response_model=List[FirearmRecord],
            responses=ERROR_RESPONSES, tags=["Firearms"])
def get_firearms_by_year(year: str, data: FirearmDataProvider = Depends(get_provider)):
    """Get firearms introduced in a given year (exact match)."""
    _require(year, "year")
    return _records(data.get_by_year(year), f"no firearms found for year: {year}")


@router.get("/type/{weapon_type}", response_model=List[FirearmRecord],
            responses=ERROR_RESPONSES, tags=["Firearms"])
def get_firearms_by_type(weapon_type: str, data: FirearmDataProvider = Depends(get_provider)):
    """Get firearms by type (e.g., 'pistol', 'submachine gun')."""
    _require(weapon_type, "type")
    return _records(data.get_by_type(weapon_type), f"no firearms found for type: {weapon_type}")


@router.get("/country/{country}", response_model=List[FirearmRecord],
            responses=ERROR_RESPONSES, tags=["Firearms"])
def get_firearms_by_country(country: str, data: FirearmDataProvider = Depends(get_provider)):
    """Get firearms by country of origin (partial, case-insensitive)."""
    _require(country, "country")
    return _records(data.get_by_country(country), f"no firearms found for country: {country}")


@router.get("/price/{min_price}/{max_price}", response_model=List[FirearmRecord],
            responses=ERROR_RESPONSES, tags=["Firearms"])
def get_firearms_by_price(
    min_price: str,
    max_price: str,
    data: FirearmDataProvider = Depends(get_provider)
):
    """
    Get firearms within an inclusive price range.

    Args:
        min_price: Lower bound (integer)
        max_price: Upper bound (integer), must not be below min_price
    """
    if not min_price or not max_price:
        raise InvalidParameterError("min and max price parameters are required")
    low = _parse_price(min_price, "min")
    high = _parse_price(max_price, "max")
    if low > high:
        raise InvalidParameterError("min price cannot be greater than max price")

    return _records(
        data.get_by_price_range(low, high),
        f"no firearms found for price range: {low} to {high}"
    )


@router.get("/id/{firearm_id}", response_model=FirearmRecord,
            responses=ERROR_RESPONSES, tags=["Firearms"])
def get_firearm_by_id(firearm_id: str, data: FirearmDataProvider = Depends(get_provider)):
    """Get a single firearm by its identifier."""
    _require(firearm_id, "id")
    row = data.get_by_id(firearm_id)
    if not row:
        raise FirearmNotFoundError(f"no firearm found with id: {firearm_id}")
    return FirearmRecord(**row)


@router.get("/all", response_model=List[FirearmRecord],
            responses={500: {"model": ErrorResponse}}, tags=["Firearms"])
def get_all_firearms(data: FirearmDataProvider = Depends(get_provider)):
    """Get every firearm in the catalog."""
    return [FirearmRecord(**row) for row in data.get_all()]


# ----------------------------------------------------------------
# Application factory
# ----------------------------------------------------------------

async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


def create_app(config: Settings = None) -> FastAPI:
    """
    Build the API around a freshly opened database.

    Schema and seed failures propagate: the server must not start without
    its table.
    """
    config = config or settings

    try:
        db = DatabaseManager(config.DB_PATH)
    except StorageInitError as e:
        logger.error(f"Failed to initialize database: {e}")
        raise
    logger.info(f"Connected to database: {db.db_path}")

    if config.SEED_ON_STARTUP:
        try:
            inserted = db.seed_firearms()
        except SeedError as e:
            logger.error(f"Failed to seed database: {e}")
            db.close()
            raise
        logger.info(f"Seeded {inserted} new records ({db.count_firearms()} total)")

    provider = FirearmDataProvider(db)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        provider.close()
        logger.info("Database connection closed")

    app = FastAPI(
        title=config.API_TITLE,
        description=config.API_DESCRIPTION,
        version=config.API_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.settings = config
    app.state.provider = provider
    app.state.templates = Jinja2Templates(directory=config.TEMPLATES_DIR)

    # Enable CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(CatalogError, catalog_error_handler)

    if os.path.isdir(config.STATIC_DIR):
        app.mount("/static", StaticFiles(directory=config.STATIC_DIR), name="static")
    else:
        logger.warning(f"Static directory not found, /static disabled: {config.STATIC_DIR}")

    app.include_router(router)
    return app


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "api.main:create_app",
        factory=True,
        host=settings.HOST,
        port=settings.PORT,
        log_level="info"
    )
