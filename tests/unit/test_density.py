"""Unit tests for density predicates."""

import pytest

from pageenv.environment.density import (
    HIGH_DENSITY_QUERIES,
    RETINA_QUERIES,
    is_high_density,
    is_retina,
    pixel_ratio,
)
from pageenv.host import StaticHost

from user_agents import ANDROID_PIE_UA, IPAD_UA, IPHONE_UA, WINDOWS_10_UA


class TestPixelRatio:
    """Tests for pixel_ratio()."""

    @pytest.mark.parametrize("reported", [None, 0])
    def test_defaults_to_one(self, reported):
        """Test hosts without a usable ratio report 1.0."""
        assert pixel_ratio(StaticHost(device_pixel_ratio=reported)) == 1.0

    def test_reported_ratio(self):
        """Test the host ratio is passed through."""
        assert pixel_ratio(StaticHost(device_pixel_ratio=2.625)) == 2.625


class TestHighDensity:
    """Tests for is_high_density()."""

    def test_threshold_is_exclusive(self):
        """Test a ratio of exactly 1.3 is not high density."""
        assert is_high_density(StaticHost(device_pixel_ratio=1.3)) is False
        assert is_high_density(StaticHost(device_pixel_ratio=1.31)) is True

    def test_media_query_match(self):
        """Test a matching media query is enough on its own."""
        host = StaticHost(device_pixel_ratio=1.0, matching_media={HIGH_DENSITY_QUERIES[1]})

        assert is_high_density(host) is True

    def test_media_api_unavailable(self):
        """Test hosts without media queries fall back to the ratio."""
        assert is_high_density(StaticHost(device_pixel_ratio=1.0, matching_media=None)) is False
        assert is_high_density(StaticHost(device_pixel_ratio=2.0, matching_media=None)) is True

    def test_nothing_reported(self):
        """Test a bare host is not high density."""
        assert is_high_density(StaticHost()) is False


class TestRetina:
    """Tests for is_retina()."""

    def test_ipad_at_two_x(self):
        """Test an iPad at 2x is retina."""
        assert is_retina(StaticHost(device_pixel_ratio=2.0), IPAD_UA) is True

    def test_iphone_at_three_x(self):
        """Test higher ratios also qualify."""
        assert is_retina(StaticHost(device_pixel_ratio=3.0), IPHONE_UA) is True

    @pytest.mark.parametrize("user_agent", [ANDROID_PIE_UA, WINDOWS_10_UA, ""])
    def test_non_apple_devices_are_never_retina(self, user_agent):
        """Test dense non-Apple displays are not reported as retina."""
        assert is_retina(StaticHost(device_pixel_ratio=2.0), user_agent) is False

    def test_apple_below_threshold(self):
        """Test Apple devices under 2x are not retina."""
        assert is_retina(StaticHost(device_pixel_ratio=1.5), IPHONE_UA) is False

    def test_retina_media_query(self):
        """Test a retina media query match counts as density."""
        host = StaticHost(device_pixel_ratio=1.0, matching_media={RETINA_QUERIES[0]})

        assert is_retina(host, IPHONE_UA) is True

    def test_custom_threshold(self):
        """Test the density threshold is adjustable."""
        assert is_retina(StaticHost(device_pixel_ratio=1.5), IPHONE_UA, threshold=1.5) is True
