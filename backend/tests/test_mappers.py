"""
Hotel Listing Backend — Mapper Unit Tests
===========================================

What:  The entity ⇄ DTO functions copy the right fields and nothing else.
"""

import uuid

from hotel_listing.mappers import (
    apply_country_update,
    apply_hotel_update,
    country_to_detail,
    hotel_from_request,
    hotel_to_detail,
    hotel_to_response,
    user_to_response,
)
from hotel_listing.models import Country, Hotel, Role, User
from hotel_listing.schemas.catalog import (
    CreateHotelRequest,
    UpdateCountryRequest,
    UpdateHotelRequest,
)


def make_country():
    return Country(id=1, name="Jamaica", short_code="JM", long_code="JAM")


def make_hotel(country=None):
    hotel = Hotel(id=1, name="Sandals Resort and Spa", address="Negril", rating=4.5, country_id=1)
    if country is not None:
        hotel.country = country
    return hotel


def test_hotel_to_response_serializes_camel_case():
    dto = hotel_to_response(make_hotel())

    assert dto.model_dump(by_alias=True) == {
        "id": 1,
        "name": "Sandals Resort and Spa",
        "address": "Negril",
        "rating": 4.5,
        "countryId": 1,
    }


def test_hotel_to_detail_nests_country():
    dto = hotel_to_detail(make_hotel(make_country()))

    assert dto.country.name == "Jamaica"
    assert dto.country.long_code == "JAM"


def test_hotel_from_request_leaves_id_to_the_store():
    request = CreateHotelRequest(name="Grand", address="X", rating=4, country_id=2)
    hotel = hotel_from_request(request)

    assert hotel.id is None
    assert (hotel.name, hotel.address, hotel.rating, hotel.country_id) == ("Grand", "X", 4, 2)


def test_apply_hotel_update_keeps_identity():
    hotel = make_hotel()
    request = UpdateHotelRequest(name="Sandals", address="Montego Bay", rating=5, country_id=2)

    apply_hotel_update(request, hotel)

    assert hotel.id == 1
    assert hotel.name == "Sandals"
    assert hotel.address == "Montego Bay"
    assert hotel.country_id == 2


def test_country_to_detail_lists_hotels():
    country = make_country()
    country.hotels = [make_hotel()]

    dto = country_to_detail(country)

    assert [hotel.name for hotel in dto.hotels] == ["Sandals Resort and Spa"]


def test_apply_country_update_clears_long_code():
    country = make_country()

    apply_country_update(UpdateCountryRequest(name="Jamaica", short_code="JA"), country)

    assert country.short_code == "JA"
    assert country.long_code is None


def test_user_to_response_omits_password_hash():
    user = User(
        id=uuid.uuid4(),
        email="jane@hotellisting.com",
        normalized_email="JANE@HOTELLISTING.COM",
        password_hash="$2b$12$hash",
        first_name="Jane",
    )
    user.roles = [Role(name="User", normalized_name="USER"), Role(name="Administrator", normalized_name="ADMINISTRATOR")]

    dto = user_to_response(user)

    assert dto.roles == ["Administrator", "User"]
    assert "password_hash" not in dto.model_dump()
