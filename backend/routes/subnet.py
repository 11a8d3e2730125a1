"""Subnet routes: IPv4 subnet breakdowns and CIDR masks."""

import logging

from fastapi import APIRouter, HTTPException

from backend.models import MaskResponse, SubnetRequest, SubnetResponse
from calc_engine.errors import InvalidPrefix
from calc_engine.subnet import (
    calculate_subnet_details,
    cidr_to_mask,
    cidr_to_wildcard,
    ip_to_binary,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/subnet", response_model=SubnetResponse)
async def subnet_endpoint(request: SubnetRequest):
    """Network, broadcast, host range and binary renderings for an address/prefix."""
    try:
        report = calculate_subnet_details(request.ip, request.prefix)
    except InvalidPrefix as e:
        logger.warning("Rejected subnet request: %s", e)
        raise HTTPException(status_code=400, detail=str(e))

    if report is None:
        logger.warning("Rejected subnet request: invalid address %r", request.ip)
        raise HTTPException(status_code=400, detail=f"Invalid IPv4 address format: {request.ip!r}")

    return SubnetResponse(**report.to_dict())


@router.get("/subnet/mask/{prefix}", response_model=MaskResponse)
async def mask_endpoint(prefix: int):
    """Subnet and wildcard masks for a CIDR prefix."""
    try:
        subnet_mask = cidr_to_mask(prefix)
        wildcard_mask = cidr_to_wildcard(prefix)
    except InvalidPrefix as e:
        raise HTTPException(status_code=400, detail=str(e))

    return MaskResponse(
        prefix=prefix,
        subnet_mask=subnet_mask,
        wildcard_mask=wildcard_mask,
        binary_subnet_mask=ip_to_binary(subnet_mask),
    )
