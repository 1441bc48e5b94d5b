"""Pytest configuration and shared fixtures for everwood tests."""

from __future__ import annotations

import logging

import pytest

from everwood.application import DesignConfigurationStore
from everwood.domain import (
    ColorPattern,
    CustomColor,
    DesignConfiguration,
    Dimensions,
    ItemDesign,
    Orientation,
    PatternStyle,
    ShippingSpeed,
    StyleType,
)
from everwood.infrastructure.logging import PACKAGE_LOGGER


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: end-to-end CLI and API tests")


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def custom_configuration() -> DesignConfiguration:
    """A fully populated custom-palette design.

    Mixes named and unnamed palette entries and uses non-default values for
    every field so round trips can't pass by falling back to defaults.
    """
    return DesignConfiguration(
        dimensions=Dimensions(width=20, height=10),
        selected_design=ItemDesign.CUSTOM,
        shipping_speed=ShippingSpeed.EXPEDITED,
        color_pattern=ColorPattern.CENTER_FADE,
        orientation=Orientation.VERTICAL,
        custom_palette=[
            CustomColor(hex="#2A9D8F", name="Teal"),
            CustomColor(hex="#E9C46A"),
            CustomColor(hex="#F4A261", name="Sandy Brown"),
        ],
        is_reversed=True,
        is_rotated=True,
        pattern_style=PatternStyle.GEOMETRIC,
        style=StyleType.TILED,
        use_mini=True,
    )


@pytest.fixture
def store() -> DesignConfigurationStore:
    """A store holding the starter design."""
    return DesignConfigurationStore()


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo any setup_logging call so each test starts with the default logger."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    level, handlers, propagate = logger.level, logger.handlers[:], logger.propagate
    yield
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.setLevel(level)
    logger.propagate = propagate
    for handler in handlers:
        logger.addHandler(handler)
