"""Design configuration store.

Owns the live DesignConfiguration, keeps its price current and tells
subscribers about every change. Share links are generated from, and loaded
into, the store as a whole.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable, Sequence
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any

from everwood.application.config.schema import ShareConfig
from everwood.domain import (
    PALETTE_HEX_PATTERN,
    ColorPattern,
    CustomColor,
    DesignConfiguration,
    Dimensions,
    InvalidColorError,
    ItemDesign,
    Orientation,
    PatternStyle,
    PriceBreakdown,
    SavedPalette,
    ShippingSpeed,
    StyleType,
    calculate_price,
)
from everwood.domain.services import blend_colors
from everwood.infrastructure.share_codec import (
    generate_shareable_url,
    generate_short_shareable_url,
    parse_share_link,
)

__all__ = ["DesignConfigurationStore", "Listener"]

logger = logging.getLogger(__name__)

Listener = Callable[["DesignConfigurationStore"], None]

MAX_SELECTED_COLORS = 2


def _validate_palette_hex(hex_value: str) -> str:
    if not isinstance(hex_value, str) or not PALETTE_HEX_PATTERN.match(hex_value):
        raise InvalidColorError(hex_value)
    return hex_value


class DesignConfigurationStore:
    """Single owner of the configuration being designed.

    Mutations go through the setters, which recompute pricing when size or
    shipping change and then notify subscribers. Readers get copies, never
    the live configuration.

    Example:
        store = DesignConfigurationStore()
        unsubscribe = store.subscribe(lambda s: print(s.pricing.total))
        store.set_dimensions(Dimensions(width=20, height=10))
        link = store.generate_short_shareable_link()
        unsubscribe()
    """

    def __init__(
        self,
        configuration: DesignConfiguration | None = None,
        share_config: ShareConfig | None = None,
    ) -> None:
        self._config = configuration.copy() if configuration else DesignConfiguration()
        self._share = share_config or ShareConfig()
        self._pricing = calculate_price(self._config.dimensions, self._config.shipping_speed)
        self._selected_colors: list[str] = []
        self._saved_palettes: list[SavedPalette] = []
        self._listeners: list[Listener] = []

    # -------------------------------------------------------------------------
    # Reading and subscribing
    # -------------------------------------------------------------------------

    @property
    def configuration(self) -> DesignConfiguration:
        return self._config.copy()

    @property
    def pricing(self) -> PriceBreakdown:
        return self._pricing

    @property
    def selected_colors(self) -> tuple[str, ...]:
        return tuple(self._selected_colors)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener called after every change.

        Returns:
            A function that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    def _update(self, **changes: Any) -> None:
        self._config = replace(self._config, **changes)
        if "dimensions" in changes or "shipping_speed" in changes:
            self._pricing = calculate_price(
                self._config.dimensions, self._config.shipping_speed
            )
        logger.debug(f"Configuration updated: {', '.join(changes)}")
        self._notify()

    # -------------------------------------------------------------------------
    # Configuration setters
    # -------------------------------------------------------------------------

    def set_dimensions(self, dimensions: Dimensions | None) -> None:
        self._update(dimensions=dimensions)

    def set_selected_design(self, design: ItemDesign | int) -> None:
        self._update(selected_design=ItemDesign(design))

    def next_design(self) -> None:
        self.set_selected_design(self._config.selected_design.next())

    def previous_design(self) -> None:
        self.set_selected_design(self._config.selected_design.previous())

    def set_shipping_speed(self, speed: ShippingSpeed | str) -> None:
        self._update(shipping_speed=ShippingSpeed(speed))

    def set_color_pattern(self, pattern: ColorPattern | str) -> None:
        self._update(color_pattern=ColorPattern(pattern))

    def set_orientation(self, orientation: Orientation | str) -> None:
        self._update(orientation=Orientation(orientation))

    def set_is_reversed(self, value: bool) -> None:
        self._update(is_reversed=value)

    def set_is_rotated(self, value: bool) -> None:
        self._update(is_rotated=value)

    def set_pattern_style(self, pattern_style: PatternStyle | str) -> None:
        self._update(pattern_style=PatternStyle(pattern_style))

    def set_style(self, style: StyleType | str) -> None:
        self._update(style=StyleType(style))

    def set_use_mini(self, value: bool) -> None:
        self._update(use_mini=value)

    # -------------------------------------------------------------------------
    # Palette editing
    # -------------------------------------------------------------------------

    def set_custom_palette(self, palette: Sequence[CustomColor]) -> None:
        self._update(custom_palette=list(palette))

    def add_custom_color(self, hex_value: str, name: str | None = None) -> None:
        """Append a color and switch to the custom design."""
        color = CustomColor(hex=_validate_palette_hex(hex_value), name=name)
        self._update(
            custom_palette=[*self._config.custom_palette, color],
            selected_design=ItemDesign.CUSTOM,
        )

    def remove_custom_color(self, index: int) -> None:
        palette = list(self._config.custom_palette)
        removed = palette.pop(index)
        self._selected_colors = [h for h in self._selected_colors if h != removed.hex]
        self._update(custom_palette=palette, selected_design=ItemDesign.CUSTOM)

    def move_color_left(self, index: int) -> None:
        """Swap a color with its left neighbour; no-op at the left edge."""
        palette = list(self._config.custom_palette)
        if index <= 0 or index >= len(palette):
            return
        palette[index - 1], palette[index] = palette[index], palette[index - 1]
        self._update(custom_palette=palette)

    def move_color_right(self, index: int) -> None:
        """Swap a color with its right neighbour; no-op at the right edge."""
        palette = list(self._config.custom_palette)
        if index < 0 or index >= len(palette) - 1:
            return
        palette[index + 1], palette[index] = palette[index], palette[index + 1]
        self._update(custom_palette=palette)

    def update_color_name(self, index: int, name: str | None) -> None:
        palette = list(self._config.custom_palette)
        palette[index] = replace(palette[index], name=name)
        self._update(custom_palette=palette)

    def update_color_hex(self, index: int, hex_value: str) -> None:
        """Change a palette color, keeping any selection of it.

        Raises:
            InvalidColorError: If ``hex_value`` is not ``#RRGGBB``.
        """
        _validate_palette_hex(hex_value)
        palette = list(self._config.custom_palette)
        old_hex = palette[index].hex
        palette[index] = replace(palette[index], hex=hex_value)
        self._selected_colors = [
            hex_value if h == old_hex else h for h in self._selected_colors
        ]
        self._update(custom_palette=palette)

    def toggle_color_selection(self, hex_value: str) -> None:
        """Select or deselect a palette color.

        At most two colors are selected; selecting a third replaces the first.
        """
        if hex_value in self._selected_colors:
            self._selected_colors.remove(hex_value)
        elif len(self._selected_colors) < MAX_SELECTED_COLORS:
            self._selected_colors.append(hex_value)
        else:
            self._selected_colors = [hex_value, self._selected_colors[1]]
        self._notify()

    def clear_selected_colors(self) -> None:
        self._selected_colors = []
        self._notify()

    def add_blended_colors(self, count: int) -> None:
        """Insert ``count`` blends between the two selected colors.

        Blends go right after whichever selected color comes first in the
        palette and run toward the other one. The selection is cleared.

        Raises:
            ValueError: Unless exactly two palette colors are selected.
        """
        if len(self._selected_colors) != MAX_SELECTED_COLORS:
            raise ValueError("Select exactly two colors to blend")
        palette = list(self._config.custom_palette)
        hexes = [color.hex for color in palette]
        try:
            start, end = sorted(hexes.index(h) for h in self._selected_colors)
        except ValueError as e:
            raise ValueError("Selected colors are not in the palette") from e

        blends = [
            CustomColor(hex=h)
            for h in blend_colors(palette[start].hex, palette[end].hex, count)
        ]
        palette[start + 1:start + 1] = blends
        self._selected_colors = []
        self._update(custom_palette=palette)

    # -------------------------------------------------------------------------
    # Saved palettes
    # -------------------------------------------------------------------------

    @property
    def saved_palettes(self) -> tuple[SavedPalette, ...]:
        return tuple(self._saved_palettes)

    def _find_saved_palette(self, palette_id: str) -> SavedPalette | None:
        for palette in self._saved_palettes:
            if palette.id == palette_id:
                return palette
        logger.debug(f"No saved palette with id {palette_id}")
        return None

    def save_palette(self, name: str | None = None) -> SavedPalette | None:
        """Keep a copy of the current custom palette.

        An empty palette is not saved. Without a name the palette is called
        ``Palette N``, N counting the palettes saved so far.

        Returns:
            The saved palette, or None when there was nothing to save.
        """
        if not self._config.custom_palette:
            return None
        palette = SavedPalette(
            id=uuid.uuid4().hex,
            name=name or f"Palette {len(self._saved_palettes) + 1}",
            colors=tuple(self._config.custom_palette),
            created_at=datetime.now(timezone.utc),
        )
        self._saved_palettes.append(palette)
        self._notify()
        return palette

    def update_palette(
        self,
        palette_id: str,
        name: str | None = None,
        colors: Sequence[CustomColor] | None = None,
    ) -> None:
        """Rename or recolor a saved palette; unknown ids are ignored."""
        palette = self._find_saved_palette(palette_id)
        if palette is None:
            return
        changes: dict[str, Any] = {"updated_at": datetime.now(timezone.utc)}
        if name is not None:
            changes["name"] = name
        if colors is not None:
            changes["colors"] = tuple(colors)
        index = self._saved_palettes.index(palette)
        self._saved_palettes[index] = replace(palette, **changes)
        self._notify()

    def delete_palette(self, palette_id: str) -> None:
        palette = self._find_saved_palette(palette_id)
        if palette is None:
            return
        self._saved_palettes.remove(palette)
        self._notify()

    def apply_palette(self, palette_id: str) -> None:
        """Use a saved palette as the custom palette and switch to Custom."""
        palette = self._find_saved_palette(palette_id)
        if palette is None:
            return
        self._update(custom_palette=list(palette.colors), selected_design=ItemDesign.CUSTOM)

    def load_palette_for_editing(self, palette_id: str) -> None:
        """Like apply_palette, but also clears the color selection."""
        palette = self._find_saved_palette(palette_id)
        if palette is None:
            return
        self._selected_colors = []
        self._update(custom_palette=list(palette.colors), selected_design=ItemDesign.CUSTOM)

    # -------------------------------------------------------------------------
    # Sharing
    # -------------------------------------------------------------------------

    def generate_shareable_link(self) -> str:
        """Verbose share link for the current configuration."""
        return generate_shareable_url(
            self._config.to_share_state(), self._share.origin, self._share.path
        )

    def generate_short_shareable_link(self) -> str:
        """Short share link for the current configuration."""
        return generate_short_shareable_url(
            self._config.to_share_state(), self._share.origin, self._share.path
        )

    def load_from_shareable_data(self, data: str) -> DesignConfiguration:
        """Replace the configuration with one decoded from a share link.

        The state is only replaced once the link decodes into a complete
        configuration; on failure the store is left untouched.

        Raises:
            ShareTokenError: If the token is corrupt.
            IncompleteConfigurationError: If fields are missing or invalid.
        """
        state = parse_share_link(data)
        configuration = DesignConfiguration.from_share_state(state)

        self._config = configuration
        self._selected_colors = []
        self._pricing = calculate_price(configuration.dimensions, configuration.shipping_speed)
        logger.info(
            f"Loaded shared design {configuration.selected_design.display_name} "
            f"with {len(configuration.custom_palette)} custom colors"
        )
        self._notify()
        return configuration.copy()
