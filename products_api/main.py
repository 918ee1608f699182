# products_api/main.py
"""
FastAPI application for the product catalog.

``create_app`` wires a ``CatalogService`` into a new application together
with the product routes, error handlers and middleware. A module-level
``app`` is built from the environment settings so it can be served with::

    uvicorn products_api.main:app --port 8085
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, FastAPI, Request, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.httpsredirect import HTTPSRedirectMiddleware
from fastapi.responses import JSONResponse

from .config import Settings, settings as default_settings
from .core import CatalogError, CatalogService
from .logging_config import setup_logging
from .models import Message, Product, ProductIn, ValidationMessage

logger = logging.getLogger(__name__)

OPENAPI_URL = "/swagger/v1/swagger.json"
VALIDATION_FAILED = "One or more validation errors occurred."

router = APIRouter(prefix="/api/products", tags=["Products"])


def get_catalog(request: Request) -> CatalogService:
    return request.app.state.catalog


# ---------------------------
# Product endpoints
# ---------------------------
@router.get("", response_model=List[Product], summary="Retrieves all products from the catalog")
def list_products(catalog: CatalogService = Depends(get_catalog)):
    return catalog.list_products()


@router.get(
    "/{id}",
    response_model=Product,
    summary="Retrieves a specific product by ID",
    responses={404: {"model": Message, "description": "Product not found"}},
)
def get_product(id: int, catalog: CatalogService = Depends(get_catalog)):
    return catalog.get_product(id)


@router.post(
    "",
    response_model=Product,
    status_code=status.HTTP_201_CREATED,
    summary="Creates a new product in the catalog",
    responses={400: {"model": Message, "description": "Invalid product data"}},
)
def create_product(
    request: Request,
    response: Response,
    product: Optional[ProductIn] = Body(None),
    catalog: CatalogService = Depends(get_catalog),
):
    created = catalog.create_product(product)
    response.headers["Location"] = str(request.url_for("get_product", id=created.id))
    return created


@router.put(
    "/{id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Updates an existing product",
    responses={
        400: {"model": Message, "description": "Invalid product data or ID mismatch"},
        404: {"model": Message, "description": "Product not found"},
    },
)
def update_product(
    id: int,
    product: Optional[ProductIn] = Body(None),
    catalog: CatalogService = Depends(get_catalog),
):
    catalog.update_product(id, product)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Deletes a product from the catalog",
    responses={404: {"model": Message, "description": "Product not found"}},
)
def delete_product(id: int, catalog: CatalogService = Depends(get_catalog)):
    catalog.delete_product(id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ---------------------------
# Utility: reset (for demos, opt-in)
# ---------------------------
reset_router = APIRouter(prefix="/api/products", tags=["Maintenance"])


@reset_router.post("/reset", response_model=Message, summary="Restores the seeded catalog")
def reset_catalog(request: Request, catalog: CatalogService = Depends(get_catalog)):
    catalog.reset(seed=request.app.state.settings.seed_catalog)
    return {"message": "Catalog reset"}


# ---------------------------
# Error handlers
# ---------------------------
async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug("request validation failed on %s %s", request.method, request.url.path)
    body = ValidationMessage(message=VALIDATION_FAILED, errors=jsonable_encoder(exc.errors()))
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump())


def create_app(
    settings: Optional[Settings] = None,
    catalog: Optional[CatalogService] = None,
) -> FastAPI:
    """Build a configured application.

    Parameters
    ----------
    settings : Optional[Settings]
        Defaults to the settings read from the environment.
    catalog : Optional[CatalogService]
        Service instance to serve. A new one is created when omitted,
        seeded according to ``settings.seed_catalog``.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        description=settings.description,
        contact={"name": settings.contact_name, "email": settings.contact_email},
        openapi_url=OPENAPI_URL,
        # interactive docs at the site root, development only
        docs_url="/" if settings.is_development else None,
        redoc_url=None,
    )
    app.state.settings = settings
    app.state.catalog = catalog if catalog is not None else CatalogService(seed=settings.seed_catalog)

    if settings.https_redirect:
        app.add_middleware(HTTPSRedirectMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(CatalogError, catalog_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    if settings.enable_reset:
        app.include_router(reset_router)
    app.include_router(router)

    logger.info(
        "%s %s ready (%d products, environment=%s)",
        settings.project_name, settings.api_version, len(app.state.catalog), settings.environment,
    )
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=default_settings.host, port=default_settings.port)
