"""
Endpoint subpackage.

Each module in this package defines an APIRouter for one resource
(events, participants, enrollments).  The routers are aggregated in
``api/router.py`` and mounted under ``/api`` by the application.
"""
