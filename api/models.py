"""
API Request and Response Models.

Pydantic models for serializing responses.
"""

from typing import Optional

from pydantic import BaseModel


# ============================================================================
# Timestamp Models
# ============================================================================

class TimestampResponse(BaseModel):
    """Result of normalizing a timestamp."""
    input: str
    value: Optional[str]
    error: Optional[str] = None
    precision: Optional[str] = None  # "HOUR" ... "NANOS"; None keeps the parsed precision

    class Config:
        json_schema_extra = {
            "example": {
                "input": "2022-07-27T16:38:00.5-07:00",
                "value": "2022-07-27T09:38Z",
                "error": None,
                "precision": "MINUTE"
            }
        }


# ============================================================================
# Error Models
# ============================================================================

class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str
    detail: Optional[str] = None
    status_code: int

    class Config:
        json_schema_extra = {
            "example": {
                "error": "Invalid request",
                "detail": "unknown precision 'fortnight'",
                "status_code": 400
            }
        }
