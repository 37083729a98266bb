"""FastAPI dependency injection functions.

Endpoints reach shared state through these functions instead of module
globals, so tests can build an app around their own repository.
"""

from fastapi import Request

from ..services.record_repository import OrderRecordRepository


def get_record_repository(request: Request) -> OrderRecordRepository:
    """Dependency to get the record repository from app state.

    Parameters
    ----------
    request : Request
        FastAPI request object containing app reference

    Returns
    -------
    OrderRecordRepository
        The repository created at application startup

    Raises
    ------
    AttributeError
        If the repository is not found in app state
    """
    return request.app.state.record_repository
