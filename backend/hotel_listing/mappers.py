"""
Hotel Listing Backend — Entity ⇄ DTO Mapping
==============================================

What:  One explicit function per entity/DTO pair.
How:   Plain attribute copies. Functions that read relationships
       (hotel_to_detail, country_to_detail) require the relationship to have
       been eagerly loaded by the repository; the models raise otherwise.
"""

from typing import Iterable, List

from hotel_listing.models.country import Country
from hotel_listing.models.hotel import Hotel
from hotel_listing.models.identity import User
from hotel_listing.schemas.account import UserResponse
from hotel_listing.schemas.catalog import (
    CountryDetailResponse,
    CountryResponse,
    CreateCountryRequest,
    CreateHotelRequest,
    HotelDetailResponse,
    HotelResponse,
    UpdateCountryRequest,
    UpdateHotelRequest,
)


# ── Hotel ─────────────────────────────────────────────────────────────────

def hotel_to_response(hotel: Hotel) -> HotelResponse:
    return HotelResponse(
        id=hotel.id,
        name=hotel.name,
        address=hotel.address,
        rating=hotel.rating,
        country_id=hotel.country_id,
    )


def hotels_to_response(hotels: Iterable[Hotel]) -> List[HotelResponse]:
    return [hotel_to_response(hotel) for hotel in hotels]


def hotel_to_detail(hotel: Hotel) -> HotelDetailResponse:
    return HotelDetailResponse(
        id=hotel.id,
        name=hotel.name,
        address=hotel.address,
        rating=hotel.rating,
        country_id=hotel.country_id,
        country=country_to_response(hotel.country),
    )


def hotel_from_request(request: CreateHotelRequest) -> Hotel:
    return Hotel(
        name=request.name,
        address=request.address,
        rating=request.rating,
        country_id=request.country_id,
    )


def apply_hotel_update(request: UpdateHotelRequest, hotel: Hotel) -> Hotel:
    """Copies every updatable field onto an existing entity; id is untouched."""
    hotel.name = request.name
    hotel.address = request.address
    hotel.rating = request.rating
    hotel.country_id = request.country_id
    return hotel


# ── Country ───────────────────────────────────────────────────────────────

def country_to_response(country: Country) -> CountryResponse:
    return CountryResponse(
        id=country.id,
        name=country.name,
        short_code=country.short_code,
        long_code=country.long_code,
    )


def countries_to_response(countries: Iterable[Country]) -> List[CountryResponse]:
    return [country_to_response(country) for country in countries]


def country_to_detail(country: Country) -> CountryDetailResponse:
    return CountryDetailResponse(
        id=country.id,
        name=country.name,
        short_code=country.short_code,
        long_code=country.long_code,
        hotels=hotels_to_response(country.hotels),
    )


def country_from_request(request: CreateCountryRequest) -> Country:
    return Country(
        name=request.name,
        short_code=request.short_code,
        long_code=request.long_code,
    )


def apply_country_update(request: UpdateCountryRequest, country: Country) -> Country:
    country.name = request.name
    country.short_code = request.short_code
    country.long_code = request.long_code
    return country


# ── Identity ──────────────────────────────────────────────────────────────

def user_to_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id,
        email=user.email,
        first_name=user.first_name,
        last_name=user.last_name,
        phone_number=user.phone_number,
        roles=user.role_names,
    )
