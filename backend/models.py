"""Pydantic models for the calculator API requests and responses."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field

from calc_engine.models import BandColor, Radix


# --- Subnet ---

class SubnetRequest(BaseModel):
    ip: str = Field(..., description="Dotted-decimal IPv4 address (e.g., 192.168.1.100)")
    prefix: int = Field(..., description="CIDR prefix length, 0-32")


class SubnetResponse(BaseModel):
    ip_address: str
    prefix: int
    subnet_mask: str
    wildcard_mask: str
    network_address: str
    broadcast_address: str
    first_usable_host: str
    last_usable_host: str
    total_hosts: int
    usable_hosts: int
    binary_ip_address: str
    binary_subnet_mask: str
    binary_network_address: str
    binary_broadcast_address: str
    ip_class: str
    is_private: bool


class MaskResponse(BaseModel):
    prefix: int
    subnet_mask: str
    wildcard_mask: str
    binary_subnet_mask: str


# --- Base conversion ---

class ConvertRequest(BaseModel):
    value: str = Field(..., max_length=100_000, description="Digit string in from_base")
    from_base: Radix
    to_base: Optional[Radix] = Field(None, description="Omit to get all three bases")


class ConvertResponse(BaseModel):
    value: Optional[str] = None
    binary: Optional[str] = None
    decimal: Optional[str] = None
    hexadecimal: Optional[str] = None
    binary_grouped: Optional[str] = None


class ChunkRequest(BaseModel):
    bits: str = Field(..., pattern=r"^[01]*$")
    chunk_size: int = Field(8, ge=1, le=64)


class ChunkResponse(BaseModel):
    formatted: str


# --- Resistor ---

class ResistorBandsModel(BaseModel):
    """Band slots in storage order; see calc_engine.resistor for role mapping."""
    band1: Optional[BandColor] = None
    band2: Optional[BandColor] = None
    band3: Optional[BandColor] = None
    multiplier: Optional[BandColor] = None
    tolerance: Optional[BandColor] = None
    temp_coefficient: Optional[BandColor] = None


class DecodeRequest(BaseModel):
    bands: ResistorBandsModel
    band_count: Literal[4, 5, 6]


class DecodeResponse(BaseModel):
    resistance: Optional[float] = Field(None, description="Ohms; null if a required band is missing")
    tolerance: Optional[float] = Field(None, description="Percent")
    temp_coefficient: Optional[int] = Field(None, description="ppm/K, 6-band only")
    formatted: str
    complete: bool


class EncodeRequest(BaseModel):
    value: str = Field(..., min_length=1, max_length=64, description="e.g. 4k7, 10k, 220 ohms")
    tolerance: Optional[float] = Field(None, gt=0, description="Percent")
    band_counts: Optional[list[Literal[4, 5, 6]]] = Field(None, min_length=1, description="Preference order")
    series: Optional[Literal["E6", "E12", "E24", "E48", "E96"]] = Field(None, description="Snap to this E-series first")


class EncodeResponse(BaseModel):
    bands: ResistorBandsModel
    band_count: int
    resistance: float
    formatted: str


class ParseValueRequest(BaseModel):
    value: str = Field(..., max_length=64)


class ParseValueResponse(BaseModel):
    ohms: float
    formatted: str
