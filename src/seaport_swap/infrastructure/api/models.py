"""Pydantic models for REST API requests and responses."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ApiError(BaseModel):
    """Error details for failed API requests."""

    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: Optional[Dict[str, Any]] = Field(
        default=None, description="Additional error context"
    )


class ApiResponse(BaseModel):
    """Generic API response for all operations.

    This unified response structure is used for both successful and failed
    operations, providing a consistent interface for clients.
    """

    success: bool = Field(..., description="Whether the request succeeded")
    record_id: Optional[str] = Field(
        default=None, description="Id of the stored or requested record"
    )
    data: Optional[Dict[str, Any]] = Field(
        default=None, description="Response data for lookups"
    )
    error: Optional[ApiError] = Field(
        default=None, description="Error details if failed"
    )
    timestamp: datetime = Field(
        default_factory=datetime.now, description="Server timestamp"
    )

    model_config = {
        "json_schema_extra": {
            "examples": {
                "success": {
                    "value": {
                        "success": True,
                        "record_id": "-873187034",
                        "error": None,
                        "timestamp": "2024-01-15T10:00:01.001Z",
                    }
                },
                "failure": {
                    "value": {
                        "success": False,
                        "record_id": "-873187034",
                        "error": {
                            "code": "DUPLICATE_RECORD",
                            "message": "Order record already exists",
                        },
                        "timestamp": "2024-01-15T10:00:01.001Z",
                    }
                },
            }
        }
    }


class ItemPayload(BaseModel):
    """One offer or consideration item as stored with a record."""

    model_config = ConfigDict(populate_by_name=True)

    type: int = Field(..., ge=0, le=5, description="Protocol item type")
    input_item: Dict[str, Any] = Field(
        ..., alias="inputItem", description="Protocol item descriptor"
    )
    token: Optional[str] = None
    identifier: Optional[str] = None
    amount: Optional[str] = None
    end_amount: Optional[str] = Field(default=None, alias="endAmount")
    name: Optional[str] = None
    symbol: Optional[str] = None
    image_url: Optional[str] = Field(default=None, alias="imageUrl")


class SignedOrderPayload(BaseModel):
    """Signed order as returned by the exchange protocol."""

    parameters: Dict[str, Any] = Field(
        ..., description="Protocol order parameters"
    )
    signature: str = Field(..., min_length=1, description="Order signature")


class OrderRecordPayload(BaseModel):
    """Request body of the "create order record" endpoint."""

    id: str = Field(..., min_length=1, description="Signature-derived id")
    order: SignedOrderPayload
    offers: List[ItemPayload] = Field(default_factory=list)
    considerations: List[ItemPayload] = Field(default_factory=list)

    model_config = {
        "json_schema_extra": {
            "example": {
                "id": "-873187034",
                "order": {
                    "parameters": {"offerer": "0xAbc", "counter": 0},
                    "signature": "0x5f1e",
                },
                "offers": [
                    {
                        "type": 0,
                        "inputItem": {"amount": "1000000000000000000"},
                    }
                ],
                "considerations": [
                    {
                        "type": 2,
                        "token": "0x8a90",
                        "identifier": "42",
                        "inputItem": {
                            "itemType": 2,
                            "token": "0x8a90",
                            "identifier": "42",
                        },
                    }
                ],
            }
        }
    }

    def to_record_dict(self) -> Dict[str, Any]:
        """Dump in the same camelCase shape the client sent."""
        return self.model_dump(by_alias=True, exclude_none=True)
