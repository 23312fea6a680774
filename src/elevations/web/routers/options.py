"""Attribute option endpoint."""

from fastapi import APIRouter

from elevations.domain.value_objects import OPTIONS
from elevations.web.schemas.responses import OptionsSchema

router = APIRouter(prefix="/options", tags=["options"])


@router.get("", response_model=OptionsSchema)
async def list_options() -> OptionsSchema:
    """Allowed values for every elevation attribute."""
    return OptionsSchema(options={name: list(values) for name, values in OPTIONS.items()})
