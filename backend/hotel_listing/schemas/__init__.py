# Schemas package init
"""
Hotel Listing Backend — API Schemas
=====================================

Pydantic contracts at the HTTP boundary. SQLAlchemy models never leave the
service layer; hotel_listing.mappers converts between the two.
"""
