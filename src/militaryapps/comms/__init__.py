# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""Geomessage construction, report controllers and message sinks."""

from .chemlight import ChemLightController
from .colors import afm_geoevent_color_string
from .geomessage import Geomessage, GeomessageBuilder, GeomessageError, new_geomessage
from .message_controller import MessageController, MessageSink, UDPMessageController

__all__ = [
    "ChemLightController",
    "afm_geoevent_color_string",
    "Geomessage",
    "GeomessageBuilder",
    "GeomessageError",
    "new_geomessage",
    "MessageController",
    "MessageSink",
    "UDPMessageController",
]
