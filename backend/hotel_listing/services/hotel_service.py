"""
Hotel Listing Backend — Hotel Service
=======================================

What:  Business rules for the hotel endpoints.
How:   Works through a UnitOfWork, maps entities to response DTOs, and
       raises application exceptions that the global handlers turn into
       status codes.
Who:   Called by routes/hotels.py.

Failure mapping:
    id < 1, unknown country, missing hotel on update/delete → ValidationError (400)
    missing hotel on read                                   → NotFoundError (404)
    SQLAlchemy failure                                      → DatabaseError (500)
"""

import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError

from hotel_listing.exceptions import DatabaseError, NotFoundError, ValidationError
from hotel_listing.mappers import (
    apply_hotel_update,
    hotel_from_request,
    hotel_to_detail,
    hotel_to_response,
    hotels_to_response,
)
from hotel_listing.repositories.unit_of_work import UnitOfWork
from hotel_listing.schemas.catalog import (
    CreateHotelRequest,
    HotelDetailResponse,
    HotelResponse,
    UpdateHotelRequest,
)

logger = logging.getLogger(__name__)


def ensure_positive_id(entity_id: int, operation: str) -> None:
    """Rejects identifiers below 1 before any query runs."""
    if entity_id < 1:
        logger.error("Invalid %s attempt: id %s is not positive", operation, entity_id)
        raise ValidationError(
            message="Identifier must be a positive integer",
            field="id",
            context={"operation": operation, "id": entity_id},
        )


class HotelService:
    """
    Stateless hotel operations; each call receives the request's UnitOfWork.

    Responsibilities:
        - list_hotels(): every hotel, summary DTOs
        - get_hotel(): one hotel with its country
        - create_hotel(): insert + commit
        - update_hotel(): load, apply fields, commit
        - delete_hotel(): load, delete, commit
    """

    async def list_hotels(self, uow: UnitOfWork) -> List[HotelResponse]:
        try:
            hotels = await uow.hotels.get_all()
        except SQLAlchemyError as e:
            logger.error("Database error listing hotels: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve hotels. Please try again.",
                context={"error_type": type(e).__name__},
            )
        return hotels_to_response(hotels)

    async def get_hotel(self, uow: UnitOfWork, hotel_id: int) -> HotelDetailResponse:
        try:
            hotel = await uow.hotels.get_with_country(hotel_id)
        except SQLAlchemyError as e:
            logger.error("Database error fetching hotel %s: %s", hotel_id, str(e))
            raise DatabaseError(
                message="Could not retrieve the hotel. Please try again.",
                context={"hotel_id": hotel_id},
            )

        if hotel is None:
            raise NotFoundError(resource="hotel", resource_id=str(hotel_id))
        return hotel_to_detail(hotel)

    async def create_hotel(
        self, uow: UnitOfWork, request: CreateHotelRequest
    ) -> HotelResponse:
        """
        Inserts a hotel and commits.

        Returns:
            HotelResponse carrying the store-assigned id.

        Raises:
            ValidationError: country_id does not name an existing country
        """
        await self._ensure_country_exists(uow, request.country_id, "create_hotel")

        hotel = hotel_from_request(request)
        await uow.hotels.insert(hotel)
        await uow.save()

        logger.info("Hotel %s created: %s", hotel.id, hotel.name)
        return hotel_to_response(hotel)

    async def update_hotel(
        self, uow: UnitOfWork, hotel_id: int, request: UpdateHotelRequest
    ) -> None:
        ensure_positive_id(hotel_id, "update_hotel")

        hotel = await uow.hotels.get(hotel_id)
        if hotel is None:
            logger.error("Invalid UPDATE attempt in update_hotel: hotel %s not found", hotel_id)
            raise ValidationError(context={"operation": "update_hotel", "id": hotel_id})

        await self._ensure_country_exists(uow, request.country_id, "update_hotel")

        apply_hotel_update(request, hotel)
        await uow.hotels.update(hotel)
        await uow.save()
        logger.info("Hotel %s updated", hotel_id)

    async def delete_hotel(self, uow: UnitOfWork, hotel_id: int) -> None:
        ensure_positive_id(hotel_id, "delete_hotel")

        hotel = await uow.hotels.get(hotel_id)
        if hotel is None:
            logger.error("Invalid DELETE attempt in delete_hotel: hotel %s not found", hotel_id)
            raise ValidationError(context={"operation": "delete_hotel", "id": hotel_id})

        await uow.hotels.delete(hotel_id)
        await uow.save()
        logger.info("Hotel %s deleted", hotel_id)

    async def _ensure_country_exists(
        self, uow: UnitOfWork, country_id: int, operation: str
    ) -> None:
        if not await uow.countries.exists(country_id):
            logger.error("Invalid %s attempt: country %s does not exist", operation, country_id)
            raise ValidationError(
                message=f"Country with ID '{country_id}' does not exist",
                field="countryId",
                context={"operation": operation, "country_id": country_id},
            )


hotel_service = HotelService()
