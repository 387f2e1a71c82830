# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Pure solar geometry: ephemeris, hour angle, event times, classification."""
