# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""Geomessage documents — ordered text-field messages and their XML form.

A Geomessage is a flat, ordered list of named text fields.  Report
controllers assemble one with the fluent builder:

    message = (
        new_geomessage("chemlight")
        .add_field(ID_FIELD_NAME, "abc")
        .add_field(ACTION_FIELD_NAME, ACTION_REMOVE)
        .build()
    )

The XML rendering is the document that map clients listen for:

    <geomessages>
      <geomessage v="1.0">
        <type>chemlight</type>
        <id>abc</id>
        <action>REMOVE</action>
      </geomessage>
    </geomessages>

Zero external dependencies (only xml.etree.ElementTree).
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass
from datetime import datetime, timezone


# ---------------------------------------------------------------------------
# Field names and constants
# ---------------------------------------------------------------------------

TYPE_FIELD_NAME = "type"
ID_FIELD_NAME = "id"
WKID_FIELD_NAME = "wkid"
CONTROL_POINTS_FIELD_NAME = "controlpoints"
ACTION_FIELD_NAME = "action"
UNIQUE_DESIGNATION_FIELD_NAME = "uniquedesignation"
COLOR_FIELD_NAME = "color"
DATETIME_SUBMITTED_FIELD_NAME = "datetimesubmitted"
DATETIME_MODIFIED_FIELD_NAME = "datetimemodified"

ACTION_UPDATE = "UPDATE"
ACTION_REMOVE = "REMOVE"

# WGS84
DEFAULT_WKID = 4326

GEOMESSAGES_TAG = "geomessages"
GEOMESSAGE_TAG = "geomessage"
GEOMESSAGE_VERSION = "1.0"

DATE_FORMAT_GEOMESSAGE = "%Y-%m-%d %H:%M:%S"


class GeomessageError(Exception):
    """Raised when a Geomessage cannot be constructed."""


def format_geomessage_date(when: datetime) -> str:
    """Format a timestamp as UTC in the Geomessage date format.

    Naive datetimes are taken to be UTC already.
    """
    if when.tzinfo is not None:
        when = when.astimezone(timezone.utc)
    return when.strftime(DATE_FORMAT_GEOMESSAGE)


# ---------------------------------------------------------------------------
# Message
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Geomessage:
    """An immutable Geomessage: ordered (name, value) text fields."""

    fields: tuple[tuple[str, str], ...]

    @property
    def message_type(self) -> str:
        return self.get(TYPE_FIELD_NAME, "")

    @property
    def message_id(self) -> str:
        return self.get(ID_FIELD_NAME, "")

    @property
    def action(self) -> str:
        return self.get(ACTION_FIELD_NAME, "")

    def field_names(self) -> list[str]:
        return [name for name, _ in self.fields]

    def get(self, name: str, default: str | None = None) -> str | None:
        """Return the first value for ``name``, or ``default``."""
        for field_name, value in self.fields:
            if field_name == name:
                return value
        return default

    def __contains__(self, name: object) -> bool:
        return any(field_name == name for field_name, _ in self.fields)

    def to_dict(self) -> dict[str, str]:
        return dict(self.fields)

    def to_element(self) -> ET.Element:
        """Render as a ``<geomessages>`` element tree."""
        root = ET.Element(GEOMESSAGES_TAG)
        geomessage = ET.SubElement(root, GEOMESSAGE_TAG)
        geomessage.set("v", GEOMESSAGE_VERSION)
        for name, value in self.fields:
            elem = ET.SubElement(geomessage, name)
            elem.text = value
        return root

    def to_xml(self) -> str:
        return ET.tostring(self.to_element(), encoding="unicode", xml_declaration=False)

    def to_bytes(self) -> bytes:
        return self.to_xml().encode("utf-8")


# ---------------------------------------------------------------------------
# Builder
# ---------------------------------------------------------------------------

class GeomessageBuilder:
    """Accumulates text fields for one Geomessage."""

    def __init__(self, message_type: str) -> None:
        if not message_type:
            raise GeomessageError("Geomessage type must be a non-empty string")
        self._fields: list[tuple[str, str]] = []
        self.add_field(TYPE_FIELD_NAME, message_type)

    def add_field(self, name: str, value: str) -> GeomessageBuilder:
        """Append a text field.  Returns self for chaining."""
        if not isinstance(name, str) or not name:
            raise GeomessageError(f"Invalid Geomessage field name: {name!r}")
        if not isinstance(value, str):
            raise GeomessageError(
                f"Geomessage field {name!r} must be text, got {type(value).__name__}"
            )
        self._fields.append((name, value))
        return self

    def build(self) -> Geomessage:
        return Geomessage(fields=tuple(self._fields))


def new_geomessage(message_type: str) -> GeomessageBuilder:
    """Start a new Geomessage whose ``type`` field is ``message_type``."""
    return GeomessageBuilder(message_type)
