"""
Hotel Listing Backend — Catalog Request/Response Schemas
==========================================================

What:  Pydantic models defining the hotel and country API contracts.
How:   FastAPI validates request bodies against the *Request models (a
       failure becomes a 400) and serializes the *Response models.
Who:   Used by the route handlers; produced by hotel_listing.mappers.

Creation and update bodies never carry the identifier: it comes from the
store on insert and from the URL on update.

The deprecated v2 country listing does not use these; it returns raw rows.
"""

from typing import List, Optional

from pydantic import Field

from hotel_listing.schemas.common import ApiModel


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class CreateHotelRequest(ApiModel):
    """Body of POST /api/hotel."""
    name: str = Field(min_length=1, max_length=150, description="Hotel name")
    address: str = Field(min_length=1, max_length=250, description="Street address")
    rating: float = Field(ge=1, le=5, description="Star rating between 1 and 5")
    country_id: int = Field(ge=1, description="Identifier of the owning country")


class UpdateHotelRequest(CreateHotelRequest):
    """Body of PUT /api/hotel/{id}. Every field is replaced."""


class CreateCountryRequest(ApiModel):
    """Body of POST /api/country."""
    name: str = Field(min_length=1, max_length=50, description="Country name")
    short_code: str = Field(min_length=1, max_length=2, description="Two-letter code")
    long_code: Optional[str] = Field(
        default=None, min_length=1, max_length=3, description="Three-letter code"
    )


class UpdateCountryRequest(CreateCountryRequest):
    """Body of PUT /api/country/{id}; same constraints as creation."""


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class HotelResponse(ApiModel):
    """
    Hotel summary.

    Returned by GET /api/hotel (as a list), by POST /api/hotel, and nested
    inside CountryDetailResponse.
    """
    id: int = Field(description="Hotel identifier")
    name: str
    address: str
    rating: float
    country_id: int


class CountryResponse(ApiModel):
    """Country summary, used in listings and nested inside hotel detail."""
    id: int = Field(description="Country identifier")
    name: str
    short_code: str
    long_code: Optional[str] = None


class HotelDetailResponse(HotelResponse):
    """Returned by GET /api/hotel/{id}: the summary plus the owning country."""
    country: CountryResponse


class CountryDetailResponse(CountryResponse):
    """Returned by GET /api/country/{id}: the country plus its hotels."""
    hotels: List[HotelResponse] = Field(default_factory=list)
