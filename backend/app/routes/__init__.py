"""
Booklist Backend - API Routes Package
======================================

Route Inventory:
    - root.py:       GET /                      (welcome text)
    - health.py:     GET /health                (service health check)
    - resources.py:  /api/v1/{books,movies,shows} CRUD, one router per resource

Design Principle:
    Routes are THIN. They handle HTTP concerns only (parse the request,
    call the service, choose status code and headers). Business rules live
    in app/services/resource_service.py.
"""
