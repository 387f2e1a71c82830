# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Public day classification and event result types.

Relabels the hour-angle outcome into the caller-facing tri-state and
pairs it with the composed event instants. Under a polar classification
the instants are extrapolated placeholders, not horizon crossings.
"""
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from sunrisecalc.domain.hour_angle import HourAngleOutcome


class DiurnalResult(Enum):
    NORMAL_DAY = "normal_day"
    SUN_ALWAYS_ABOVE = "sun_always_above"
    SUN_ALWAYS_BELOW = "sun_always_below"


@dataclass(frozen=True)
class SolarEvent:
    """Classification plus a single event instant."""
    diurnal: DiurnalResult
    instant: datetime


@dataclass(frozen=True)
class SolarEvents:
    """Classification plus rise and set instants."""
    diurnal: DiurnalResult
    rise: datetime
    set: datetime


_OUTCOME_TO_DIURNAL: dict[HourAngleOutcome, DiurnalResult] = {
    HourAngleOutcome.CROSSING: DiurnalResult.NORMAL_DAY,
    HourAngleOutcome.POLAR_ABOVE: DiurnalResult.SUN_ALWAYS_ABOVE,
    HourAngleOutcome.POLAR_BELOW: DiurnalResult.SUN_ALWAYS_BELOW,
}


def classify(outcome: HourAngleOutcome) -> DiurnalResult:
    return _OUTCOME_TO_DIURNAL[outcome]


def classify_events(
    outcome: HourAngleOutcome,
    rise: datetime,
    set_: datetime,
) -> SolarEvents:
    """Wrap composed instants with their classification, unchanged."""
    return SolarEvents(diurnal=classify(outcome), rise=rise, set=set_)
