"""Order record endpoints."""

import logging
from datetime import datetime

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ...constants.errors import ErrorCodes, ErrorMessages
from ...infrastructure.api.models import (
    ApiError,
    ApiResponse,
    OrderRecordPayload,
)
from ...services.record_repository import OrderRecordRepository
from ..dependencies import get_record_repository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/orders", tags=["orders"])


@router.post("", response_model=ApiResponse)
async def create_order_record(
    payload: OrderRecordPayload,
    repository: OrderRecordRepository = Depends(get_record_repository),
):
    """Store the record of a created and fulfilled order.

    Parameters
    ----------
    payload : OrderRecordPayload
        Flat record: id, signed order, offer and consideration items

    Returns
    -------
    ApiResponse
        ``success=True`` with the record id once stored, or
        ``success=False`` with ``DUPLICATE_RECORD`` if the id is taken

    Raises
    ------
    HTTPException
        422 Unprocessable Entity for a malformed body
    """
    try:
        repository.add(payload.to_record_dict())
    except KeyError:
        logger.warning(f"Duplicate order record {payload.id}")
        return ApiResponse(
            success=False,
            record_id=payload.id,
            error=ApiError(
                code=ErrorCodes.DUPLICATE_RECORD,
                message=ErrorMessages.format_duplicate_record(payload.id),
            ),
            timestamp=datetime.now(),
        )

    return ApiResponse(
        success=True, record_id=payload.id, timestamp=datetime.now()
    )


@router.get("/{record_id}", response_model=ApiResponse)
async def get_order_record(
    record_id: str,
    repository: OrderRecordRepository = Depends(get_record_repository),
):
    """Return one stored record by id.

    Returns
    -------
    ApiResponse
        The record body under ``data``, or a 404 response with
        ``RECORD_NOT_FOUND``
    """
    record = repository.get(record_id)
    if record is None:
        response = ApiResponse(
            success=False,
            record_id=record_id,
            error=ApiError(
                code=ErrorCodes.RECORD_NOT_FOUND,
                message=ErrorMessages.RECORD_NOT_FOUND,
            ),
        )
        return JSONResponse(
            status_code=404, content=response.model_dump(mode="json")
        )

    return ApiResponse(success=True, record_id=record_id, data=record)
