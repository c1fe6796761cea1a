"""
Hotel Listing Backend — Country Service (API v1)
==================================================

What:  Business rules for the v1 country endpoints: paged listing, detail
       with hotels, and administrator CRUD.
Who:   Called by routes/countries.py. The deprecated v2 listing does not go
       through this service.
"""

import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError

from hotel_listing.exceptions import DatabaseError, NotFoundError, ValidationError
from hotel_listing.mappers import (
    apply_country_update,
    countries_to_response,
    country_from_request,
    country_to_detail,
    country_to_response,
)
from hotel_listing.repositories.unit_of_work import UnitOfWork
from hotel_listing.schemas.catalog import (
    CountryDetailResponse,
    CountryResponse,
    CreateCountryRequest,
    UpdateCountryRequest,
)
from hotel_listing.schemas.common import RequestParams
from hotel_listing.services.hotel_service import ensure_positive_id

logger = logging.getLogger(__name__)


class CountryService:
    """Stateless country operations over the request's UnitOfWork."""

    async def list_countries(
        self, uow: UnitOfWork, params: RequestParams
    ) -> tuple[List[CountryResponse], int]:
        """
        One page of countries ordered by id, plus the total row count for
        the X-Total-Count header.
        """
        try:
            countries = await uow.countries.get_page(
                offset=params.offset, limit=params.effective_page_size
            )
            total = await uow.countries.count()
        except SQLAlchemyError as e:
            logger.error("Database error listing countries: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve countries. Please try again.",
                context={"error_type": type(e).__name__},
            )
        return countries_to_response(countries), total

    async def get_country(self, uow: UnitOfWork, country_id: int) -> CountryDetailResponse:
        try:
            country = await uow.countries.get_with_hotels(country_id)
        except SQLAlchemyError as e:
            logger.error("Database error fetching country %s: %s", country_id, str(e))
            raise DatabaseError(
                message="Could not retrieve the country. Please try again.",
                context={"country_id": country_id},
            )

        if country is None:
            raise NotFoundError(resource="country", resource_id=str(country_id))
        return country_to_detail(country)

    async def create_country(
        self, uow: UnitOfWork, request: CreateCountryRequest
    ) -> CountryResponse:
        country = country_from_request(request)
        await uow.countries.insert(country)
        await uow.save()
        logger.info("Country %s created: %s", country.id, country.name)
        return country_to_response(country)

    async def update_country(
        self, uow: UnitOfWork, country_id: int, request: UpdateCountryRequest
    ) -> None:
        ensure_positive_id(country_id, "update_country")

        country = await uow.countries.get(country_id)
        if country is None:
            logger.error("Invalid UPDATE attempt in update_country: country %s not found", country_id)
            raise ValidationError(context={"operation": "update_country", "id": country_id})

        apply_country_update(request, country)
        await uow.countries.update(country)
        await uow.save()
        logger.info("Country %s updated", country_id)

    async def delete_country(self, uow: UnitOfWork, country_id: int) -> None:
        """Deletes the country; its hotels go with it (ON DELETE CASCADE)."""
        ensure_positive_id(country_id, "delete_country")

        country = await uow.countries.get(country_id)
        if country is None:
            logger.error("Invalid DELETE attempt in delete_country: country %s not found", country_id)
            raise ValidationError(context={"operation": "delete_country", "id": country_id})

        await uow.countries.delete(country_id)
        await uow.save()
        logger.info("Country %s deleted", country_id)


country_service = CountryService()
