"""Calc Engine Backend: FastAPI application entry point."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.config import settings
from backend.routes import convert, resistor, subnet

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Calc Engine API",
    description="IPv4 subnet, number base and resistor color code calculators",
    version="0.1.0",
)

# CORS: localhost always, plus FRONTEND_URL when set
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_url] if settings.frontend_url else [],
    allow_origin_regex=r"^https?://(localhost|127\.0\.0\.1)(:\d+)?$",
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register route modules
app.include_router(subnet.router, prefix="/api", tags=["Subnet"])
app.include_router(convert.router, prefix="/api", tags=["Base Conversion"])
app.include_router(resistor.router, prefix="/api", tags=["Resistor"])


@app.get("/api/health")
async def health_check():
    return {"status": "healthy", "service": "calc-engine-backend"}
