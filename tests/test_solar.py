# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for the daily solar ephemeris."""
import ast
from datetime import date, datetime, timedelta, timezone

import pytest

from sunrisecalc.domain.solar import (
    SolarEphemerisResult,
    day_of_year,
    julian_centuries_j2000,
    solar_ephemeris,
)


# ── SolarEphemerisResult dataclass ────────────────────────────────

class TestSolarEphemerisResult:

    def test_frozen(self):
        """SolarEphemerisResult is immutable."""
        r = SolarEphemerisResult(
            day_of_year=1, julian_centuries=0.0,
            declination_deg=-23.0, equation_of_time_min=-3.0,
        )
        with pytest.raises(AttributeError):
            r.declination_deg = 0.0

    def test_fields(self):
        """SolarEphemerisResult exposes expected fields."""
        r = SolarEphemerisResult(
            day_of_year=172, julian_centuries=0.21,
            declination_deg=23.4, equation_of_time_min=-1.5,
        )
        assert r.day_of_year == 172
        assert r.julian_centuries == 0.21
        assert r.declination_deg == 23.4
        assert r.equation_of_time_min == -1.5


# ── Time parameters ───────────────────────────────────────────────

class TestTimeParameters:

    def test_j2000_epoch_is_zero(self):
        """J2000.0 (2000-01-01 12:00:00 UTC) → T = 0.0."""
        j2000 = datetime(2000, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
        assert julian_centuries_j2000(j2000) == pytest.approx(0.0, abs=1e-12)

    def test_ephemeris_evaluated_at_noon(self):
        """The ephemeris for 2000-01-01 uses T = 0 (12:00 UTC)."""
        assert solar_ephemeris(date(2000, 1, 1)).julian_centuries == pytest.approx(0.0, abs=1e-12)

    def test_one_day_step(self):
        """Consecutive days differ by 1/36525 century."""
        t1 = solar_ephemeris(date(2021, 5, 1)).julian_centuries
        t2 = solar_ephemeris(date(2021, 5, 2)).julian_centuries
        assert t2 - t1 == pytest.approx(1.0 / 36525.0, rel=1e-9)

    @pytest.mark.parametrize("day, expected", [
        (date(2021, 1, 1), 1),
        (date(2021, 12, 31), 365),
        (date(2020, 12, 31), 366),
        (date(2021, 6, 21), 172),
    ])
    def test_day_of_year(self, day, expected):
        """Ordinal day handles leap years."""
        assert day_of_year(day) == expected
        assert solar_ephemeris(day).day_of_year == expected


# ── Declination ───────────────────────────────────────────────────

class TestDeclination:

    def test_june_solstice(self):
        """2021-06-21: declination ≈ +23.44°."""
        assert solar_ephemeris(date(2021, 6, 21)).declination_deg == pytest.approx(23.44, abs=0.05)

    def test_december_solstice(self):
        """2021-12-21: declination ≈ -23.44°."""
        assert solar_ephemeris(date(2021, 12, 21)).declination_deg == pytest.approx(-23.44, abs=0.05)

    def test_march_equinox(self):
        """2021-03-20: declination ≈ 0°."""
        assert abs(solar_ephemeris(date(2021, 3, 20)).declination_deg) < 0.5

    def test_september_equinox(self):
        """2021-09-22: declination ≈ 0°."""
        assert abs(solar_ephemeris(date(2021, 9, 22)).declination_deg) < 0.5

    def test_bounded_by_obliquity(self):
        """|declination| never exceeds the obliquity over a year."""
        start = date(2021, 1, 1)
        for offset in range(365):
            dec = solar_ephemeris(start + timedelta(days=offset)).declination_deg
            assert abs(dec) < 23.45

    def test_time_of_day_ignored(self):
        """Only the calendar fields of a datetime are used."""
        from_dt = solar_ephemeris(datetime(2021, 7, 8, 23, 59))
        from_date = solar_ephemeris(date(2021, 7, 8))
        assert from_dt == from_date


# ── Equation of time ──────────────────────────────────────────────

class TestEquationOfTime:

    def test_meeus_example(self):
        """Meeus Example 28.b: 1992-10-13, E ≈ +13.7 min."""
        eot = solar_ephemeris(date(1992, 10, 13)).equation_of_time_min
        assert eot == pytest.approx(13.7, abs=0.3)

    def test_february_minimum(self):
        """Mid-February: sundial ~14 min behind the clock."""
        eot = solar_ephemeris(date(2021, 2, 11)).equation_of_time_min
        assert eot == pytest.approx(-14.2, abs=0.5)

    def test_november_maximum(self):
        """Early November: sundial ~16 min ahead of the clock."""
        eot = solar_ephemeris(date(2021, 11, 3)).equation_of_time_min
        assert eot == pytest.approx(16.4, abs=0.5)

    def test_june_zero_crossing(self):
        """Mid-June zero crossing."""
        eot = solar_ephemeris(date(2021, 6, 13)).equation_of_time_min
        assert abs(eot) < 0.5

    def test_bounded(self):
        """|E| stays under 17 minutes all year."""
        start = date(2021, 1, 1)
        for offset in range(365):
            eot = solar_ephemeris(start + timedelta(days=offset)).equation_of_time_min
            assert abs(eot) < 17.0


# ── Domain purity ─────────────────────────────────────────────────

class TestSolarPurity:

    def test_solar_module_pure(self):
        """solar.py must only import stdlib modules and numpy."""
        import sunrisecalc.domain.solar as mod

        allowed = {'math', 'dataclasses', 'typing', 'enum', '__future__', 'datetime', 'numpy'}
        with open(mod.__file__) as f:
            tree = ast.parse(f.read())

        for node in ast.walk(tree):
            if isinstance(node, ast.Import):
                for alias in node.names:
                    root = alias.name.split('.')[0]
                    if root not in allowed:
                        assert False, f"Disallowed import '{alias.name}'"
            if isinstance(node, ast.ImportFrom):
                if node.module and node.level == 0:
                    root = node.module.split('.')[0]
                    if root not in allowed and root != 'sunrisecalc':
                        assert False, f"Disallowed import from '{node.module}'"
