# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Port interfaces for external collaborators."""
from sunrisecalc.ports.timezone import TimezoneProjector

__all__ = ["TimezoneProjector"]
