"""Color harmony and paint mixing endpoints."""

from fastapi import APIRouter, Query

from everwood.domain.services import HarmonyType, generate_harmony, mix_paint_colors
from everwood.web.schemas.requests import MixRequest
from everwood.web.schemas.responses import MixResultSchema, PaletteSchema

router = APIRouter(prefix="/palette", tags=["palette"])


@router.post("/mix", response_model=MixResultSchema)
async def mix_colors(request: MixRequest) -> MixResultSchema:
    """Average the channels of the given colors; no colors mixes to black."""
    return MixResultSchema(color=mix_paint_colors(request.colors))


@router.get("/{harmony}", response_model=PaletteSchema)
async def harmony_palette(
    harmony: HarmonyType,
    color: str = Query(..., description="Base hex color"),
    count: int = Query(default=5, ge=1, le=24, description="Palette size where applicable"),
) -> PaletteSchema:
    """Generate a harmony palette from a base color.

    Raises:
        InvalidColorError: If ``color`` is not a hex color (handled by exception handler).
    """
    colors = generate_harmony(color, harmony, count)
    return PaletteSchema(harmony=harmony.value, base_color=color, colors=colors)
