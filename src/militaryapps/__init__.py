# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""Military apps messaging — Geomessage reports for shared tactical maps.

This package builds Geomessage reports (chem lights) and hands them to a
message sink for delivery to listening map clients.
"""

__version__ = "0.1.0"
