"""Queue-backed mailbox implementing :class:`ProcessHandle`.

Purpose
-------
Give in-process consumers an addressable inbox that sinks can deliver to
without waiting, mirroring the weak delivery guarantee of the sink: a send is
a non-blocking enqueue with no acknowledgement and no retry.

Contents
--------
* :class:`Mailbox` - thread-safe inbox with an explicit lifetime.

System Role
-----------
Default destination adapter used by the runtime, the CLI demo, and tests.
Consumers typically read from it on their own thread.
"""

from __future__ import annotations

import logging
import queue
import socket
import threading
from typing import Any

from process_log_sink.application.ports.process import ProcessHandle

LOGGER = logging.getLogger(__name__)


class Mailbox(ProcessHandle):
    """Inbox owned by a consumer; alive until :meth:`close` is called.

    Examples
    --------
    >>> inbox = Mailbox()
    >>> inbox.send("hello")
    True
    >>> inbox.receive(timeout=0)
    'hello'
    >>> inbox.close()
    >>> inbox.send("lost")
    False
    """

    def __init__(self, *, maxsize: int = 0, node: str | None = None) -> None:
        """Create an open mailbox.

        Parameters
        ----------
        maxsize:
            Maximum number of pending messages; ``0`` means unbounded. Sends to
            a full mailbox are lost.
        node:
            Node owning the mailbox; defaults to the local host name.
        """
        self._queue: queue.Queue[Any] = queue.Queue(maxsize=maxsize)
        self._closed = threading.Event()
        self.node = node or socket.gethostname()

    def is_alive(self) -> bool:
        """Return ``True`` until the mailbox has been closed."""
        return not self._closed.is_set()

    def send(self, message: Any) -> bool:
        """Enqueue ``message`` without blocking; return ``False`` when it is lost."""
        if self._closed.is_set():
            return False
        try:
            self._queue.put_nowait(message)
        except queue.Full:
            LOGGER.debug("mailbox full; message discarded")
            return False
        return True

    def receive(self, timeout: float | None = None) -> Any:
        """Return the next message.

        ``timeout=None`` waits forever, ``0`` does not wait at all.

        Raises
        ------
        queue.Empty
            When no message arrived within ``timeout``.
        """
        if timeout == 0:
            return self._queue.get_nowait()
        return self._queue.get(timeout=timeout)

    def drain(self) -> list[Any]:
        """Return and remove every pending message in arrival order."""
        messages: list[Any] = []
        while True:
            try:
                messages.append(self._queue.get_nowait())
            except queue.Empty:
                return messages

    def close(self) -> None:
        """Mark the mailbox dead; later sends are discarded."""
        self._closed.set()

    def __len__(self) -> int:
        return self._queue.qsize()


__all__ = ["Mailbox"]
