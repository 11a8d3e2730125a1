"""Base conversion routes: binary, decimal and hexadecimal."""

import logging

from fastapi import APIRouter, HTTPException

from backend.models import ChunkRequest, ChunkResponse, ConvertRequest, ConvertResponse
from calc_engine.converter import convert, convert_all, format_chunked, format_digits
from calc_engine.models import Radix

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/convert", response_model=ConvertResponse)
async def convert_endpoint(request: ConvertRequest):
    """Convert a value to one base, or to all three when to_base is omitted."""
    if request.to_base is not None:
        result = convert(request.value, request.from_base, request.to_base)
        if result is None:
            logger.warning("Rejected %s value %.40r", request.from_base.value, request.value)
            raise HTTPException(
                status_code=400,
                detail=f"Invalid {request.from_base.name.lower()} number",
            )
        return ConvertResponse(value=result)

    results = convert_all(request.value, request.from_base)
    if results is None:
        logger.warning("Rejected %s value %.40r", request.from_base.value, request.value)
        raise HTTPException(
            status_code=400,
            detail=f"Invalid {request.from_base.name.lower()} number",
        )

    return ConvertResponse(
        **results.to_dict(),
        binary_grouped=format_digits(results.binary, Radix.BINARY),
    )


@router.post("/convert/format", response_model=ChunkResponse)
async def format_endpoint(request: ChunkRequest):
    """Left-pad a bit string and split it into space-separated chunks."""
    return ChunkResponse(formatted=format_chunked(request.bits, request.chunk_size))
