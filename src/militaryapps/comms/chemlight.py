# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""ChemLightController — sends chem light Geomessages to listening clients.

A chem light is a colored point marker on the shared map.  The wire
protocol has only two actions:

    UPDATE   create the chem light, or move/recolor it if the recipient
             already holds one with the same id
    REMOVE   delete the chem light with that id

Recipients decide create-vs-update by id, so callers that want to update
a chem light must keep the id they sent it with.  This controller keeps no
record of ids it has sent.

Sends are fire-and-forget: any failure while building or delivering a
message is logged at ERROR and swallowed, so a failed report never breaks
the caller.
"""

from __future__ import annotations

import logging
import threading
import uuid
from datetime import datetime, timezone
from typing import Callable

from .colors import afm_geoevent_color_string
from .geomessage import (
    ACTION_FIELD_NAME,
    ACTION_REMOVE,
    ACTION_UPDATE,
    COLOR_FIELD_NAME,
    CONTROL_POINTS_FIELD_NAME,
    DATETIME_MODIFIED_FIELD_NAME,
    DATETIME_SUBMITTED_FIELD_NAME,
    DEFAULT_WKID,
    ID_FIELD_NAME,
    UNIQUE_DESIGNATION_FIELD_NAME,
    WKID_FIELD_NAME,
    Geomessage,
    format_geomessage_date,
    new_geomessage,
)
from .message_controller import MessageSink

logger = logging.getLogger("militaryapps.chemlight")

# Geomessage type for chem light reports
REPORT_TYPE = "chemlight"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ChemLightController:
    """Builds chem light Geomessages and hands each to a message sink.

    Args:
        message_controller: Sink that delivers finished messages.
        unique_designation: Sender designation attached to every UPDATE.
            Typically a human-readable username, but a UUID works too.
        color_encoder: Converts packed ARGB ints to the wire color string.
        clock: Returns the current time as an aware UTC datetime.
    """

    def __init__(
        self,
        message_controller: MessageSink,
        unique_designation: str | None = None,
        *,
        color_encoder: Callable[[int], str] = afm_geoevent_color_string,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._message_controller = message_controller
        self._color_encoder = color_encoder
        self._clock = clock or _utc_now
        self._lock = threading.Lock()
        self._unique_designation = unique_designation

    # -----------------------------------------------------------------------
    # Sender designation
    # -----------------------------------------------------------------------

    @property
    def unique_designation(self) -> str | None:
        with self._lock:
            return self._unique_designation

    @unique_designation.setter
    def unique_designation(self, value: str | None) -> None:
        # Last writer wins; sends already in flight keep the value they read.
        with self._lock:
            self._unique_designation = value

    def get_unique_designation(self) -> str | None:
        return self.unique_designation

    def set_unique_designation(self, value: str | None) -> None:
        self.unique_designation = value

    # -----------------------------------------------------------------------
    # Send / remove
    # -----------------------------------------------------------------------

    def send_chem_light(
        self,
        x: float,
        y: float,
        spatial_reference_wkid: int,
        rgb_color: int,
        chem_light_id: str | None = None,
    ) -> None:
        """Send a chem light to listening clients.

        If ``chem_light_id`` is None or empty a new id is generated and the
        message creates a new chem light.  Otherwise the id is sent as-is and
        updates the location and color of the matching chem light, if any.

        Control points use Python float formatting, so Web Mercator values
        read ``-13046000.5`` rather than the E-notation ``-1.30460005E7``.

        Args:
            x: X-coordinate in the given spatial reference.
            y: Y-coordinate in the given spatial reference.
            spatial_reference_wkid: WKID of the coordinates' spatial reference.
            rgb_color: Packed ARGB color, e.g. 0xFFFF0000 for red.
            chem_light_id: Id of the chem light to update, or None for a new one.
        """
        if not chem_light_id:
            chem_light_id = str(uuid.uuid4())
        self._dispatch(
            lambda: self._build_update(x, y, spatial_reference_wkid, rgb_color, chem_light_id),
            "Could not send chem light",
        )

    def send_chem_light_wgs84(
        self,
        longitude: float,
        latitude: float,
        rgb_color: int,
        chem_light_id: str | None = None,
    ) -> None:
        """Shorthand for send_chem_light(longitude, latitude, 4326, ...)."""
        self.send_chem_light(longitude, latitude, DEFAULT_WKID, rgb_color, chem_light_id)

    def remove_chem_light(self, chem_light_id: str | None) -> None:
        """Send a REMOVE message for the chem light with this id.

        None is ignored.  An empty string is forwarded as the id.
        """
        if chem_light_id is None:
            return
        self._dispatch(
            lambda: self._build_remove(chem_light_id),
            "Could not send chem light remove message",
        )

    # -----------------------------------------------------------------------
    # Message assembly
    # -----------------------------------------------------------------------

    def _build_update(
        self,
        x: float,
        y: float,
        spatial_reference_wkid: int,
        rgb_color: int,
        chem_light_id: str,
    ) -> Geomessage:
        designation = self.unique_designation

        builder = (
            new_geomessage(REPORT_TYPE)
            .add_field(ID_FIELD_NAME, chem_light_id)
            .add_field(WKID_FIELD_NAME, str(int(spatial_reference_wkid)))
            .add_field(CONTROL_POINTS_FIELD_NAME, f"{float(x)},{float(y)}")
            .add_field(ACTION_FIELD_NAME, ACTION_UPDATE)
        )
        if designation is not None:
            builder.add_field(UNIQUE_DESIGNATION_FIELD_NAME, designation)
        builder.add_field(COLOR_FIELD_NAME, self._color_encoder(rgb_color))

        # Submitted and modified are both "now" on every send, updates included.
        date_string = format_geomessage_date(self._clock())
        builder.add_field(DATETIME_SUBMITTED_FIELD_NAME, date_string)
        builder.add_field(DATETIME_MODIFIED_FIELD_NAME, date_string)
        return builder.build()

    def _build_remove(self, chem_light_id: str) -> Geomessage:
        return (
            new_geomessage(REPORT_TYPE)
            .add_field(ID_FIELD_NAME, chem_light_id)
            .add_field(ACTION_FIELD_NAME, ACTION_REMOVE)
            .build()
        )

    def _dispatch(self, build: Callable[[], Geomessage], failure_message: str) -> bool:
        """Build one message and deliver it.  Failures are logged, never raised.

        Returns True if the sink accepted the message.
        """
        try:
            message = build()
            self._message_controller.send_message(message)
        except Exception as e:
            logger.error(f"{failure_message}: {e}", exc_info=True)
            return False
        return True
