"""
Hotel Listing Backend — Hotel Route Handlers
==============================================

What:  GET/POST /api/hotel and GET/PUT/DELETE /api/hotel/{id} (API v1).
How:   Thin handlers: FastAPI validates the body, the router-level
       dependency checks the API version, write routes check the
       Administrator role, then HotelService does the work.

Status codes:
    GET    list            200
    GET    by id           200, 404 (unknown or non-numeric id)
    POST                   201 + Location, 400, 401, 403
    PUT    by id           204, 400, 401, 403
    DELETE by id           204, 400, 401, 403
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Request, Response, status

from hotel_listing.models.identity import ROLE_ADMINISTRATOR
from hotel_listing.repositories.unit_of_work import UnitOfWork, get_unit_of_work
from hotel_listing.schemas.catalog import (
    CreateHotelRequest,
    HotelDetailResponse,
    HotelResponse,
    UpdateHotelRequest,
)
from hotel_listing.schemas.common import ErrorResponse
from hotel_listing.security.auth import require_roles
from hotel_listing.services.hotel_service import hotel_service
from hotel_listing.versioning import V1, require_api_version

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/hotel",
    tags=["Hotels"],
    dependencies=[Depends(require_api_version(V1))],
)

ADMIN_ONLY = [Depends(require_roles(ROLE_ADMINISTRATOR))]

WRITE_ERRORS = {
    400: {"description": "Invalid input or unknown hotel", "model": ErrorResponse},
    401: {"description": "Missing or invalid token", "model": ErrorResponse},
    403: {"description": "Administrator role required", "model": ErrorResponse},
    500: {"description": "Server error", "model": ErrorResponse},
}


@router.get(
    "",
    response_model=List[HotelResponse],
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="List all hotels",
)
async def list_hotels(
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> List[HotelResponse]:
    """Every hotel, unpaged and unfiltered."""
    return await hotel_service.list_hotels(uow)


@router.get(
    "/{hotel_id:int}",
    name="get_hotel",
    response_model=HotelDetailResponse,
    responses={
        404: {"description": "Hotel not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Get a hotel with its country",
)
async def get_hotel(
    hotel_id: int,
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> HotelDetailResponse:
    """
    One hotel with its country. An unknown id answers 404 rather than 200
    with an empty body; a non-numeric id does not match the route (404).
    """
    return await hotel_service.get_hotel(uow, hotel_id)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=HotelResponse,
    dependencies=ADMIN_ONLY,
    responses=WRITE_ERRORS,
    summary="Create a hotel (Administrator)",
)
async def create_hotel(
    hotel: CreateHotelRequest,
    request: Request,
    response: Response,
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> HotelResponse:
    """
    Inserts the hotel and answers 201 with a Location header pointing at
    GET /api/hotel/{id}.
    """
    created = await hotel_service.create_hotel(uow, hotel)
    response.headers["Location"] = str(request.url_for("get_hotel", hotel_id=created.id))
    return created


@router.put(
    "/{hotel_id:int}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    dependencies=ADMIN_ONLY,
    responses=WRITE_ERRORS,
    summary="Replace a hotel's fields (Administrator)",
)
async def update_hotel(
    hotel_id: int,
    hotel: UpdateHotelRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> Response:
    await hotel_service.update_hotel(uow, hotel_id, hotel)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{hotel_id:int}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    dependencies=ADMIN_ONLY,
    responses=WRITE_ERRORS,
    summary="Delete a hotel (Administrator)",
)
async def delete_hotel(
    hotel_id: int,
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> Response:
    await hotel_service.delete_hotel(uow, hotel_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
