"""Interaction webhook.

The chat platform POSTs every slash command and component event here and
renders whatever JSON comes back. Requests must carry a valid Ed25519
signature over ``timestamp + body``.
"""

import logging
from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Request
from pydantic import ValidationError as PydanticValidationError

from pkgsearch.domain.interaction.model.envelope import Interaction
from pkgsearch.domain.interaction.port.signature_verifier import SignatureVerifier
from pkgsearch.domain.interaction.service.interaction import InteractionService

logger = logging.getLogger(__name__)

SIGNATURE_HEADER = "X-Signature-Ed25519"
TIMESTAMP_HEADER = "X-Signature-Timestamp"

router = APIRouter(
    prefix="/interactions",
    tags=["interactions"],
    route_class=DishkaRoute,
)


@router.post("")
async def handle_interaction(
    request: Request,
    verifier: FromDishka[SignatureVerifier],
    service: FromDishka[InteractionService],
) -> dict[str, Any]:
    """Verify, decode and answer a single interaction."""
    body = await request.body()
    signature = request.headers.get(SIGNATURE_HEADER)
    timestamp = request.headers.get(TIMESTAMP_HEADER)

    if not signature or not timestamp or not verifier.verify(body, signature, timestamp):
        logger.warning("Rejected interaction with missing or invalid signature")
        raise HTTPException(status_code=401, detail="Invalid request signature")

    try:
        interaction = Interaction.model_validate_json(body)
    except PydanticValidationError as e:
        raise HTTPException(status_code=400, detail="Malformed interaction payload") from e

    response = await service.handle(interaction)
    return response.to_payload()
