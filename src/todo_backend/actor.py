"""
GenServer - a serialized worker that owns a piece of mutable state.

A GenServer keeps its state private to one task. Callers never touch that
state; they `call()` the server with a request and await the reply. Requests
queue up in an unbounded mailbox and are handled strictly one at a time, in
arrival order, so no two requests ever interleave their read-modify-write.

Subclasses implement:
  - init() -> initial state
  - handle_call(request, state) -> (reply, new_state)

An exception raised by handle_call() fails only the caller that sent the
request: it is re-raised from `call()` and the server keeps running with its
previous state.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Generic, Optional, Tuple, TypeVar

import anyio
from anyio.abc import TaskGroup
from anyio.streams.memory import MemoryObjectReceiveStream, MemoryObjectSendStream

logger = logging.getLogger(__name__)

S = TypeVar("S")


class ServerNotRunning(RuntimeError):
    """Raised when calling a GenServer that was never started or has been stopped."""


class _Call:
    """One pending request and the slot its reply is delivered into."""

    __slots__ = ("request", "done", "reply", "error")

    def __init__(self, request: Any):
        self.request = request
        self.done = anyio.Event()
        self.reply: Any = None
        self.error: Optional[BaseException] = None


class GenServer(Generic[S]):
    """Base class for single-worker servers. See module docstring."""

    def __init__(self) -> None:
        self._mailbox: Optional[MemoryObjectSendStream] = None

    @property
    def running(self) -> bool:
        return self._mailbox is not None

    async def start(self, task_group: TaskGroup) -> None:
        """Build the initial state and spawn the server loop in `task_group`."""
        if self._mailbox is not None:
            raise RuntimeError(f"{self.__class__.__name__} is already running")

        state = await self.init()
        send, receive = anyio.create_memory_object_stream(math.inf)
        self._mailbox = send
        task_group.start_soon(self._serve, send, receive, state, name=f"{self.__class__.__name__}.serve")
        logger.debug("%s started", self.__class__.__name__)

    async def stop(self) -> None:
        """Close the mailbox. Requests already queued are still answered."""
        if self._mailbox is None:
            return
        mailbox, self._mailbox = self._mailbox, None
        await mailbox.aclose()

    async def call(self, request: Any) -> Any:
        """Send `request` to the server and wait for its reply."""
        if self._mailbox is None:
            raise ServerNotRunning(f"{self.__class__.__name__} is not running")

        pending = _Call(request)
        try:
            self._mailbox.send_nowait(pending)
        except (anyio.ClosedResourceError, anyio.BrokenResourceError) as e:
            raise ServerNotRunning(f"{self.__class__.__name__} is not running") from e

        await pending.done.wait()
        if pending.error is not None:
            raise pending.error
        return pending.reply

    async def _serve(self, send: MemoryObjectSendStream, mailbox: MemoryObjectReceiveStream, state: S) -> None:
        pending: Optional[_Call] = None
        try:
            async for pending in mailbox:
                try:
                    reply, state = await self.handle_call(pending.request, state)
                except Exception as e:
                    logger.warning("%s failed request %r: %s", self.__class__.__name__, pending.request, e)
                    pending.error = e
                else:
                    pending.reply = reply
                pending.done.set()
                pending = None
        finally:
            self._abandon(send, mailbox, pending)
        logger.debug("%s stopped", self.__class__.__name__)

    def _abandon(
        self,
        send: MemoryObjectSendStream,
        mailbox: MemoryObjectReceiveStream,
        in_flight: Optional[_Call],
    ) -> None:
        """Fail every caller still waiting once the loop has exited, e.g. on cancellation."""
        # a restarted server owns a newer mailbox; leave that one alone
        if self._mailbox is send:
            self._mailbox = None
        send.close()

        orphaned = [in_flight] if in_flight is not None else []
        while True:
            try:
                orphaned.append(mailbox.receive_nowait())
            except (anyio.WouldBlock, anyio.EndOfStream):
                break
        mailbox.close()

        for pending in orphaned:
            pending.error = ServerNotRunning(f"{self.__class__.__name__} stopped before replying")
            pending.done.set()
        if orphaned:
            logger.warning("%s stopped with %d unanswered requests", self.__class__.__name__, len(orphaned))

    # --- Override these ---

    async def init(self) -> S:
        """Return the initial state."""
        raise NotImplementedError(f"{self.__class__.__name__}.init/0 not implemented")

    async def handle_call(self, request: Any, state: S) -> Tuple[Any, S]:
        """
        Handle one request. Returns (reply, new_state).

        Override this method to handle call requests.
        """
        raise NotImplementedError(f"{self.__class__.__name__}.handle_call/2 not implemented")
