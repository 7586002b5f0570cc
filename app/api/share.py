"""
Share link API endpoints.

Scenarios are shared as URLs carrying only the non-default inputs.
"""

import logging
from dataclasses import asdict
from typing import Dict, Optional

from fastapi import APIRouter, Request
from pydantic import BaseModel

from app.api.calculations import CalculatorInput
from app.calculations import share
from app.config import get_settings

logger = logging.getLogger(__name__)
settings = get_settings()

router = APIRouter()


class ShareInput(CalculatorInput):
    """Inputs to encode, with an optional page URL to append them to."""

    base_url: Optional[str] = None


class ShareResponse(BaseModel):
    """Encoded share parameters."""

    params: Dict[str, str]
    url: str


@router.post("/encode", response_model=ShareResponse)
async def encode_share_link(inputs: ShareInput):
    """Encode the non-default inputs as short query parameters."""
    calc_inputs = inputs.to_inputs()
    base_url = inputs.base_url or settings.share_base_url

    return ShareResponse(
        params=share.encode_share_params(calc_inputs),
        url=share.build_share_url(base_url, calc_inputs),
    )


@router.get("/decode")
async def decode_share_link(request: Request):
    """Rebuild calculator inputs from share query parameters."""
    params = dict(request.query_params)
    ignored = [key for key in params if key not in share.REVERSE_URL_KEYS]
    if ignored:
        logger.debug(f"Ignoring unknown share parameters: {ignored}")

    return {"inputs": asdict(share.parse_share_params(params))}
