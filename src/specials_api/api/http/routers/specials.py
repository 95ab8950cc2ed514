"""Special API router with CRUD operations."""

import math
from typing import Any

from fastapi import APIRouter, Depends, status
from loguru import logger
from starlette.responses import JSONResponse

from src.specials_api.api.http.deps import get_special_service
from src.specials_api.api.http.errors import error_response
from src.specials_api.core.errors import InvalidPriceError
from src.specials_api.core.services import (
    CreateSpecialDto,
    SpecialService,
    UpdateSpecialDto,
)
from src.specials_api.entities._base import CamelModel
from src.specials_api.entities.special import Special

router = APIRouter(prefix="/specials", tags=["specials"])

SPECIAL_NOT_FOUND = "Special not found"
INVALID_PRICE = "Price must be a valid number"
NOT_NULLABLE = "Title and isActive cannot be null"


class SpecialPayload(CamelModel):
    """Request body for create and update.

    ``price`` arrives as a string from form-driven clients; plain JSON numbers
    are accepted as well. It is left untyped so ``parse_price`` sees the raw
    JSON value and can reject booleans.
    """

    title: str | None = None
    description: str | None = None
    price: Any = None
    is_active: bool | None = None


def parse_price(value: Any) -> float:
    """Parse a request price into a finite float or raise ``InvalidPriceError``."""
    if value is None or isinstance(value, bool):
        raise InvalidPriceError(value)
    try:
        price = float(value.strip() if isinstance(value, str) else value)
    except (TypeError, ValueError) as e:
        raise InvalidPriceError(value) from e
    if not math.isfinite(price):
        raise InvalidPriceError(value)
    return price


@router.get("", response_model=list[Special])
def list_specials(
    service: SpecialService = Depends(get_special_service),
) -> list[Special] | JSONResponse:
    """List all specials, newest first."""
    try:
        return service.get_all_specials()
    except Exception:
        logger.exception("Failed to fetch specials")
        return error_response(500, "Failed to fetch specials")


# Registered before /{special_id} so "active" is not read as an id
@router.get("/active", response_model=list[Special])
def list_active_specials(
    service: SpecialService = Depends(get_special_service),
) -> list[Special] | JSONResponse:
    """List active specials, newest first."""
    try:
        return service.get_active_specials()
    except Exception:
        logger.exception("Failed to fetch active specials")
        return error_response(500, "Failed to fetch active specials")


@router.get("/{special_id}", response_model=Special)
def get_special(
    special_id: str,
    service: SpecialService = Depends(get_special_service),
) -> Special | JSONResponse:
    """Get a special by ID."""
    try:
        special = service.get_special_by_id(special_id)
    except Exception:
        logger.exception("Failed to fetch special {}", special_id)
        return error_response(500, "Failed to fetch special")

    if special is None:
        return error_response(404, SPECIAL_NOT_FOUND)
    return special


@router.post("", response_model=Special, status_code=status.HTTP_201_CREATED)
def create_special(
    payload: SpecialPayload | None = None,
    service: SpecialService = Depends(get_special_service),
) -> Special | JSONResponse:
    """Create a new special. ``title`` and ``price`` are required.

    A price of ``0`` or ``""`` counts as provided; only an absent key is
    missing. A provided price that is not a finite number is rejected.
    """
    payload = payload or SpecialPayload()
    if not payload.title or "price" not in payload.model_fields_set:
        return error_response(400, "Title and price are required")

    try:
        price = parse_price(payload.price)
    except InvalidPriceError:
        return error_response(400, INVALID_PRICE)

    data = CreateSpecialDto(
        title=payload.title,
        description=payload.description,
        price=price,
        is_active=payload.is_active,
    )
    try:
        return service.create_special(data)
    except Exception:
        logger.exception("Failed to create special")
        return error_response(500, "Failed to create special")


@router.put("/{special_id}", response_model=Special)
def update_special(
    special_id: str,
    payload: SpecialPayload | None = None,
    service: SpecialService = Depends(get_special_service),
) -> Special | JSONResponse:
    """Update the fields present in the body."""
    payload = payload or SpecialPayload()
    changes = payload.model_dump(exclude_unset=True)
    # Explicit null on a NOT NULL column; description may be cleared
    if any(
        field in changes and changes[field] is None
        for field in ("title", "is_active")
    ):
        return error_response(400, NOT_NULLABLE)
    if "price" in changes:
        try:
            changes["price"] = parse_price(changes["price"])
        except InvalidPriceError:
            return error_response(400, INVALID_PRICE)

    try:
        special = service.update_special(special_id, UpdateSpecialDto(**changes))
    except Exception:
        logger.exception("Failed to update special {}", special_id)
        return error_response(500, "Failed to update special")

    if special is None:
        return error_response(404, SPECIAL_NOT_FOUND)
    return special


@router.delete("/{special_id}", response_model=None)
def delete_special(
    special_id: str,
    service: SpecialService = Depends(get_special_service),
) -> dict[str, str] | JSONResponse:
    """Delete a special."""
    try:
        special = service.delete_special(special_id)
    except Exception:
        logger.exception("Failed to delete special {}", special_id)
        return error_response(500, "Failed to delete special")

    if special is None:
        return error_response(404, SPECIAL_NOT_FOUND)
    return {"message": "Special deleted successfully"}
