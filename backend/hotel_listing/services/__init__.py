# Services package init
"""
Hotel Listing Backend — Services Layer
========================================

What:  Business rules between the routes (HTTP) and the unit of work
       (persistence).
How:   Services receive the request's UnitOfWork, return response DTOs and
       raise application exceptions; they never build HTTP responses.

Service Inventory:
    - HotelService:   hotel CRUD, country reference check
    - CountryService: v1 country paging and CRUD
    - AccountService: registration and token issue
"""
