# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for horizon depression angles."""
import pytest

from sunrisecalc.domain.horizon import Horizon, depression_angle_deg


# ── Horizon enum ──────────────────────────────────────────────────

class TestHorizon:

    def test_values(self):
        """Horizon has NORMAL, CIVIL, NAUTICAL, ASTRONOMICAL values."""
        assert Horizon.NORMAL.value == "normal"
        assert Horizon.CIVIL.value == "civil"
        assert Horizon.NAUTICAL.value == "nautical"
        assert Horizon.ASTRONOMICAL.value == "astronomical"

    def test_lookup_by_value(self):
        """CLI-style lookup by string value."""
        assert Horizon("civil") is Horizon.CIVIL


# ── Depression angle table ────────────────────────────────────────

class TestDepressionAngle:

    def test_normal_includes_refraction_and_radius(self):
        """Normal horizon ≈ -0.833° (34' refraction + 16' semi-diameter)."""
        assert depression_angle_deg(Horizon.NORMAL) == pytest.approx(-50.0 / 60.0, abs=1e-3)

    @pytest.mark.parametrize("horizon, expected", [
        (Horizon.CIVIL, -6.0),
        (Horizon.NAUTICAL, -12.0),
        (Horizon.ASTRONOMICAL, -18.0),
    ])
    def test_twilight_angles(self, horizon, expected):
        """Twilight horizons sit at 6° steps below the geometric horizon."""
        assert depression_angle_deg(horizon) == expected

    def test_strictly_deeper_in_order(self):
        """Normal > Civil > Nautical > Astronomical."""
        order = [Horizon.NORMAL, Horizon.CIVIL, Horizon.NAUTICAL, Horizon.ASTRONOMICAL]
        angles = [depression_angle_deg(h) for h in order]
        assert angles == sorted(angles, reverse=True)
        assert len(set(angles)) == 4

    def test_all_below_geometric_horizon(self):
        """Every horizon lies below 0°."""
        for horizon in Horizon:
            assert depression_angle_deg(horizon) < 0.0

    def test_rejects_non_horizon(self):
        """Plain strings are not accepted."""
        with pytest.raises(TypeError):
            depression_angle_deg("civil")
