"""Plain-text formatters for CLI output."""

from __future__ import annotations

from typing import TYPE_CHECKING

from everwood.domain.services import get_contrast_text_color, get_dimensions_details

if TYPE_CHECKING:
    from everwood.domain import DesignConfiguration, PriceBreakdown


class PriceBreakdownFormatter:
    """Formats a price breakdown as a receipt-style table."""

    WIDTH = 40

    def format(self, breakdown: PriceBreakdown) -> str:
        if breakdown.debug.total_blocks == 0:
            return "No size selected."

        debug = breakdown.debug
        lines = [
            "PRICE BREAKDOWN",
            "=" * self.WIDTH,
            f"Size: {debug.width} x {debug.height} blocks ({debug.total_blocks} total)",
            "-" * self.WIDTH,
            self._row("Base price", breakdown.base_price),
            self._row("Shipping (base)", breakdown.shipping.base),
            self._row("Shipping (height)", breakdown.shipping.additional_height),
            self._row("Shipping (speed)", breakdown.shipping.expedited),
            self._row("Tax", breakdown.tax),
            "-" * self.WIDTH,
            self._row("TOTAL", breakdown.total),
        ]
        return "\n".join(lines)

    def _row(self, label: str, amount: float) -> str:
        return f"{label:<24}{f'${amount:,.2f}':>16}"


class PaletteFormatter:
    """Formats a list of hex colors with a text-contrast hint for each."""

    def format(self, colors: list[str], title: str = "PALETTE") -> str:
        if not colors:
            return "No colors."
        lines = [title, "=" * 30]
        for index, color in enumerate(colors, start=1):
            lines.append(f"{index:>3}. {color:<9} ({get_contrast_text_color(color)} text)")
        return "\n".join(lines)


class DesignSummaryFormatter:
    """Formats a design configuration for display."""

    def format(self, config: DesignConfiguration) -> str:
        lines = ["DESIGN", "=" * 40]
        details = get_dimensions_details(config.dimensions)
        if details is None:
            lines.append("Size:           (not selected)")
        else:
            lines.append(
                f"Size:           {details.width_blocks} x {details.height_blocks} blocks "
                f"({details.width_inches:g}\" x {details.height_inches:g}\", "
                f"{details.square_feet:.1f} sq ft)"
            )
        lines.extend(
            [
                f"Design:         {config.selected_design.display_name}",
                f"Shipping:       {config.shipping_speed.value}",
                f"Pattern:        {config.color_pattern.value} ({config.orientation.value})",
                f"Style:          {config.style.value} / {config.pattern_style.value}",
                f"Reversed:       {'yes' if config.is_reversed else 'no'}",
                f"Rotated:        {'yes' if config.is_rotated else 'no'}",
            ]
        )
        if config.custom_palette:
            lines.append("Palette:")
            for color in config.custom_palette:
                suffix = f"  {color.name}" if color.name else ""
                lines.append(f"  - {color.hex}{suffix}")
        return "\n".join(lines)
