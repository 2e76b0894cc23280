"""
FastAPI routers grouped by resource (pages, threads, users).

Each module exposes an APIRouter that the application module includes.
Routers only gather request values, validate them and hand them to a service.
"""
