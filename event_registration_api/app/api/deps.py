"""FastAPI dependencies shared by the endpoint modules."""

from fastapi import HTTPException, Request, status

from event_registration_api.app.core.errors import DomainError, NotFoundError
from event_registration_api.app.services import Services


def get_services(request: Request) -> Services:
    """Return the service graph wired by ``create_app``."""
    return request.app.state.services


def http_error(exc: DomainError, not_found_status: int = status.HTTP_400_BAD_REQUEST) -> HTTPException:
    """Translate a business error into an ``HTTPException``.

    Lookups pass ``not_found_status=404``; everything else answers 400
    with the error message as detail.
    """
    code = not_found_status if isinstance(exc, NotFoundError) else status.HTTP_400_BAD_REQUEST
    return HTTPException(status_code=code, detail=exc.message)
