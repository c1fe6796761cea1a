# Routes package init
"""
Hotel Listing Backend — API Routes Package
============================================

Route Inventory:
    - hotels.py:     GET/POST /api/hotel, GET/PUT/DELETE /api/hotel/{id}
    - countries.py:  GET/POST /api/country, GET/PUT/DELETE /api/country/{id}
                     (GET /api/country also serves deprecated v2)
    - account.py:    POST /api/account/register, POST /api/account/login
    - health.py:     GET /health

Routes stay thin: extract input, call a service, set status and headers.
"""
