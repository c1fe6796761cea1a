"""
Hotel Listing Backend — Country Route Handlers
================================================

What:  /api/country, served in two API versions.

    1.0 (default)       paged country DTOs, detail with hotels, admin CRUD
    2.0 (deprecated)    GET /api/country only: raw rows straight from the
                        session, no repository, no DTO

Version selection: `api-version` header or query parameter (see
hotel_listing.versioning). Only the collection GET implements 2.0; every
other route here answers 400 to a 2.0 request.
"""

import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, Query, Request, Response, status
from sqlalchemy import inspect, select
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_listing.database import get_db_session
from hotel_listing.models.country import Country
from hotel_listing.models.identity import ROLE_ADMINISTRATOR
from hotel_listing.repositories.unit_of_work import UnitOfWork, get_unit_of_work
from hotel_listing.schemas.catalog import (
    CountryDetailResponse,
    CountryResponse,
    CreateCountryRequest,
    UpdateCountryRequest,
)
from hotel_listing.schemas.common import ErrorResponse, RequestParams
from hotel_listing.security.auth import require_roles
from hotel_listing.services.country_service import country_service
from hotel_listing.versioning import V1, V2, require_api_version

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/country", tags=["Countries"])

V1_ONLY = Depends(require_api_version(V1))
ADMIN_ONLY = Depends(require_roles(ROLE_ADMINISTRATOR))

WRITE_ERRORS = {
    400: {"description": "Invalid input or unknown country", "model": ErrorResponse},
    401: {"description": "Missing or invalid token", "model": ErrorResponse},
    403: {"description": "Administrator role required", "model": ErrorResponse},
}


def row_to_dict(row: Country) -> Dict[str, Any]:
    """Column attributes of a mapped row, keyed by attribute name."""
    return {attr.key: getattr(row, attr.key) for attr in inspect(row).mapper.column_attrs}


async def list_countries_v2(session: AsyncSession) -> List[Dict[str, Any]]:
    """Deprecated v2 listing: every row as stored, bypassing the repository."""
    result = await session.execute(select(Country))
    return [row_to_dict(country) for country in result.scalars().all()]


@router.get(
    "",
    response_model=None,
    responses={
        200: {"description": "v1: page of countries; v2: raw rows", "model": List[CountryResponse]},
        400: {"description": "Unsupported API version", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="List countries (v1 paged DTOs, v2 deprecated raw rows)",
)
async def list_countries(
    response: Response,
    page_number: int = Query(default=1, ge=1, alias="pageNumber"),
    page_size: int = Query(default=10, ge=1, alias="pageSize"),
    version: str = Depends(require_api_version(V1, V2)),
    session: AsyncSession = Depends(get_db_session),
):
    if version == V2:
        return await list_countries_v2(session)

    params = RequestParams(page_number=page_number, page_size=page_size)
    countries, total = await country_service.list_countries(UnitOfWork(session), params)
    response.headers["X-Total-Count"] = str(total)
    return countries


@router.get(
    "/{country_id:int}",
    name="get_country",
    response_model=CountryDetailResponse,
    dependencies=[V1_ONLY],
    responses={
        404: {"description": "Country not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Get a country with its hotels",
)
async def get_country(
    country_id: int,
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> CountryDetailResponse:
    """One country with its hotels. An unknown id answers 404."""
    return await country_service.get_country(uow, country_id)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=CountryResponse,
    dependencies=[V1_ONLY, ADMIN_ONLY],
    responses=WRITE_ERRORS,
    summary="Create a country (Administrator)",
)
async def create_country(
    country: CreateCountryRequest,
    request: Request,
    response: Response,
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> CountryResponse:
    created = await country_service.create_country(uow, country)
    response.headers["Location"] = str(request.url_for("get_country", country_id=created.id))
    return created


@router.put(
    "/{country_id:int}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    dependencies=[V1_ONLY, ADMIN_ONLY],
    responses=WRITE_ERRORS,
    summary="Replace a country's fields (Administrator)",
)
async def update_country(
    country_id: int,
    country: UpdateCountryRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> Response:
    await country_service.update_country(uow, country_id, country)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{country_id:int}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    dependencies=[V1_ONLY, ADMIN_ONLY],
    responses=WRITE_ERRORS,
    summary="Delete a country and its hotels (Administrator)",
)
async def delete_country(
    country_id: int,
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> Response:
    await country_service.delete_country(uow, country_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
