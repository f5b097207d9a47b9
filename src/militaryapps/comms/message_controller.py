# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""Message sinks — deliver finished Geomessages to listening clients.

Report controllers only need ``send_message(message)``.  Two sinks ship:

    MessageController     in-process; hands each message to registered listeners
    UDPMessageController  broadcasts the Geomessage XML as one UDP datagram,
                          then notifies listeners

Map clients on the same network listen on the broadcast port and render
whatever Geomessages arrive.
"""

from __future__ import annotations

import logging
import socket
import threading
from typing import Callable, Protocol, runtime_checkable

from .geomessage import Geomessage

logger = logging.getLogger("militaryapps.messages")

DEFAULT_BROADCAST_HOST = "255.255.255.255"
DEFAULT_MESSAGE_PORT = 45678

MessageListener = Callable[[Geomessage], None]


@runtime_checkable
class MessageSink(Protocol):
    """Anything that accepts one finished Geomessage for delivery."""

    def send_message(self, message: Geomessage) -> None:
        ...


class MessageController:
    """In-process sink: every sent message goes to each registered listener.

    Listener exceptions propagate to the sender.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._listeners: list[MessageListener] = []

    def add_listener(self, listener: MessageListener) -> None:
        with self._lock:
            if listener not in self._listeners:
                self._listeners.append(listener)

    def remove_listener(self, listener: MessageListener) -> bool:
        """Unregister a listener.  Returns False if it was not registered."""
        with self._lock:
            try:
                self._listeners.remove(listener)
            except ValueError:
                return False
            return True

    @property
    def listeners(self) -> list[MessageListener]:
        with self._lock:
            return list(self._listeners)

    def send_message(self, message: Geomessage) -> None:
        self._notify(message)

    def _notify(self, message: Geomessage) -> None:
        for listener in self.listeners:
            listener(message)


class UDPMessageController(MessageController):
    """Broadcasts each Geomessage as a UTF-8 XML datagram.

    The socket is opened on first send and kept until close().  Socket
    errors propagate to the caller.  Once the datagram is out the send has
    succeeded: listener errors are logged and do not reach the caller.
    """

    def __init__(
        self,
        host: str = DEFAULT_BROADCAST_HOST,
        port: int = DEFAULT_MESSAGE_PORT,
    ) -> None:
        super().__init__()
        self._host = host
        self._port = port
        self._sock: socket.socket | None = None
        self._sock_lock = threading.Lock()
        self._messages_sent: int = 0

    # -----------------------------------------------------------------------
    # Properties
    # -----------------------------------------------------------------------

    @property
    def host(self) -> str:
        return self._host

    @property
    def port(self) -> int:
        return self._port

    @property
    def stats(self) -> dict:
        return {
            "host": self._host,
            "port": self._port,
            "messages_sent": self._messages_sent,
        }

    # -----------------------------------------------------------------------
    # Send
    # -----------------------------------------------------------------------

    def send_message(self, message: Geomessage) -> None:
        payload = message.to_bytes()
        with self._sock_lock:
            if self._sock is None:
                self._sock = self._open_socket()
            self._sock.sendto(payload, (self._host, self._port))
            self._messages_sent += 1
        logger.debug(
            f"Sent {message.message_type} {message.action} {message.message_id} "
            f"to {self._host}:{self._port} ({len(payload)} bytes)"
        )
        self._notify(message)

    def _notify(self, message: Geomessage) -> None:
        for listener in self.listeners:
            try:
                listener(message)
            except Exception as e:
                logger.error(
                    f"Listener failed for {message.message_type} {message.message_id}: {e}",
                    exc_info=True,
                )

    def _open_socket(self) -> socket.socket:
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
        return sock

    # -----------------------------------------------------------------------
    # Lifecycle
    # -----------------------------------------------------------------------

    def close(self) -> None:
        with self._sock_lock:
            if self._sock is not None:
                self._sock.close()
                self._sock = None

    def __enter__(self) -> UDPMessageController:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
