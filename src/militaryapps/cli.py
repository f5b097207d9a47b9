# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""Send or remove a chem light from the command line.

Usage:
    militaryapps-chemlight send --x -117.1 --y 34.0 --color red
    militaryapps-chemlight send --x -117.1 --y 34.0 --color 0xFF00FF00 --id cl-1
    militaryapps-chemlight remove cl-1

Host, port, default WKID and designation come from MILAPPS_* settings
unless given on the command line.
"""

from __future__ import annotations

import argparse
import logging
import sys

from militaryapps.comms.chemlight import ChemLightController
from militaryapps.comms.colors import parse_color
from militaryapps.comms.message_controller import UDPMessageController
from militaryapps.config import get_settings
from militaryapps.logging import setup_logging

logger = logging.getLogger("militaryapps.cli")


def _color_arg(text: str) -> int:
    try:
        return parse_color(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _log_level_arg(text: str) -> str:
    level = text.upper()
    if level not in _LOG_LEVELS:
        raise argparse.ArgumentTypeError(
            f"invalid log level: {text!r} (choose from {', '.join(_LOG_LEVELS)})"
        )
    return level


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="militaryapps-chemlight",
        description="Send chem light Geomessages to listening map clients",
    )
    parser.add_argument("--host", help="Destination host (default: settings)")
    parser.add_argument("--port", type=int, help="Destination UDP port (default: settings)")
    parser.add_argument("--log-level", type=_log_level_arg, help="Logging level (default: settings)")

    sub = parser.add_subparsers(dest="command", required=True)

    send = sub.add_parser("send", help="Create or update a chem light")
    send.add_argument("--x", type=float, required=True, help="X-coordinate (longitude for 4326)")
    send.add_argument("--y", type=float, required=True, help="Y-coordinate (latitude for 4326)")
    send.add_argument("--wkid", type=int, help="Spatial reference WKID (default: settings)")
    send.add_argument(
        "--color", type=_color_arg, default="red",
        help="red, green, blue, yellow or 0xAARRGGBB (default: red)",
    )
    send.add_argument("--id", dest="chem_light_id", help="Id of the chem light to update")
    send.add_argument("--designation", help="Sender designation (default: settings)")

    remove = sub.add_parser("remove", help="Remove a chem light")
    remove.add_argument("chem_light_id", help="Id of the chem light to remove")

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    setup_logging(args.log_level or settings.log_level)

    host = args.host if args.host is not None else settings.message_host
    port = args.port if args.port is not None else settings.message_port

    with UDPMessageController(host, port) as sink:
        if args.command == "send":
            designation = (
                args.designation if args.designation is not None else settings.unique_designation
            )
            controller = ChemLightController(sink, designation)
            wkid = args.wkid if args.wkid is not None else settings.default_wkid
            controller.send_chem_light(args.x, args.y, wkid, args.color, args.chem_light_id)
        else:
            controller = ChemLightController(sink)
            controller.remove_chem_light(args.chem_light_id)
        sent = sink.stats["messages_sent"]

    logger.info(f"{args.command}: {sent} message(s) sent to {host}:{port}")
    return 0 if sent else 1


if __name__ == "__main__":
    sys.exit(main())
