"""Resistor routes: color bands to value and back."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from backend.config import Settings, get_settings
from backend.models import (
    DecodeRequest,
    DecodeResponse,
    EncodeRequest,
    EncodeResponse,
    ParseValueRequest,
    ParseValueResponse,
    ResistorBandsModel,
)
from calc_engine.errors import UnsupportedValueError, ValidationError
from calc_engine.models import ResistorBands
from calc_engine.resistor import decode, encode, format_resistance, parse_value

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/resistor/decode", response_model=DecodeResponse)
async def decode_endpoint(request: DecodeRequest):
    """Resistance, tolerance and tempco from a band selection.

    An incomplete selection is not an error: missing quantities come back null.
    """
    bands = ResistorBands(**request.bands.model_dump())
    result = decode(bands, request.band_count)
    return DecodeResponse(**result.to_dict(), complete=result.complete)


@router.post("/resistor/encode", response_model=EncodeResponse)
async def encode_endpoint(request: EncodeRequest, settings: Settings = Depends(get_settings)):
    """Color bands for a resistance, trying band counts in preference order."""
    band_counts = request.band_counts or settings.default_band_counts
    series = request.series or settings.e_series

    try:
        encoding = encode(request.value, request.tolerance, band_counts, series=series)
    except ValidationError as e:
        logger.warning("Rejected resistor value %r: %s", request.value, e)
        raise HTTPException(status_code=400, detail=str(e))
    except UnsupportedValueError as e:
        logger.warning("No band encoding for %r: %s", request.value, e)
        raise HTTPException(status_code=422, detail=str(e))

    resistance = decode(encoding.bands, encoding.band_count).resistance
    return EncodeResponse(
        bands=ResistorBandsModel(**encoding.bands.to_dict()),
        band_count=encoding.band_count,
        resistance=resistance,
        formatted=format_resistance(resistance),
    )


@router.post("/resistor/parse", response_model=ParseValueResponse)
async def parse_endpoint(request: ParseValueRequest):
    """Parse a human resistance entry such as '4k7' or '220 ohms'."""
    ohms = parse_value(request.value)
    if ohms is None:
        logger.warning("Rejected resistor value %r", request.value)
        raise HTTPException(status_code=400, detail=f"Invalid resistance value: {request.value!r}")
    return ParseValueResponse(ohms=ohms, formatted=format_resistance(ohms))
