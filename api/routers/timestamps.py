"""
Timestamp API Endpoints.

Endpoints for normalizing ISO-8601(ish) timestamps to Zulu form.
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from api.models import ErrorResponse, TimestampResponse
from domain.time_length import TimeLength
from domain.timestamp import ZuluTimestamp

router = APIRouter()


@router.get(
    "/timestamps/normalize",
    response_model=TimestampResponse,
    responses={400: {"model": ErrorResponse, "description": "Unknown precision"}},
    summary="Normalize Timestamp",
    description="Parse a timestamp, fold its offset into UTC and optionally adjust its precision."
)
def normalize_timestamp(
    value: str = Query(..., description="Timestamp to normalize (e.g., '2022-07-27T16:38-07:00')"),
    precision: Optional[str] = Query(
        None, description="Target precision: hour, minute, second, millis, micros or nanos"
    ),
):
    """
    Normalize a timestamp to its Zulu form.

    Parse failures are not HTTP errors: the response carries the original
    input in `value` and the diagnostic in `error`.

    **Example usage:**
    - `GET /api/v1/timestamps/normalize?value=2022-07-27T16:38Z`
    - `GET /api/v1/timestamps/normalize?value=2022-07-27T16:38:00.5Z&precision=nanos`
    """
    time_length = None
    if precision:
        try:
            time_length = TimeLength.from_name(precision)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))

    timestamp = ZuluTimestamp.parse(value)
    if time_length is not None:
        timestamp = timestamp.adjust_to(time_length)

    return TimestampResponse(
        input=value,
        value=timestamp.value,
        error=timestamp.error,
        precision=time_length.name if time_length is not None else None,
    )
