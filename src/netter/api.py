"""Minimal FastAPI service for IPv4 address validation."""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI, HTTPException, Query

from netter import __version__
from netter.core.ipv4 import ScanMode, valid_ipv4
from netter.models import InvalidAddressError

app = FastAPI(title="netter API", version=__version__)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/validate")
def validate(
    address: str = Query(...),
    mode: ScanMode = ScanMode.STRICT,
) -> dict[str, Any]:
    """Validate a single IPv4 address string."""
    try:
        valid_ipv4(address, mode)
    except InvalidAddressError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    return {"address": address, "is_valid": True}


# To run: uvicorn netter.api:app --host 0.0.0.0 --port 8000
