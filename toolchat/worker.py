"""A transport driven by a background worker task."""

from __future__ import annotations

import abc
import asyncio
import logging
from collections import deque
from dataclasses import dataclass
from typing import Any, Callable

logger = logging.getLogger(__name__)


class WorkerQuit(Exception):
    """Base of all reasons a worker stops."""


class WorkerFatal(WorkerQuit):
    """The transport hit an unrecoverable error."""

    def __init__(self, error: str, context: str) -> None:
        self.error = error
        self.context = context
        super().__init__(f"Transport fatal {error}, when {context}")


class WorkerCancelled(WorkerQuit):
    """The worker was cancelled."""

    def __init__(self) -> None:
        super().__init__("Transport cancelled")


class TransportClosed(WorkerQuit):
    """The underlying transport closed."""

    def __init__(self) -> None:
        super().__init__("Transport closed")


class HandlerTerminated(WorkerQuit):
    """The handler side of the transport went away."""

    def __init__(self) -> None:
        super().__init__("Handler terminated")


class WorkerJoinError(WorkerQuit):
    """The worker task crashed."""

    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        super().__init__(f"Join error {cause}")


def fatal_context(context: str) -> Callable[[BaseException], WorkerFatal]:
    """Return a function turning an exception into a WorkerFatal for *context*."""

    def convert(error: BaseException) -> WorkerFatal:
        return WorkerFatal(str(error), context)

    return convert


@dataclass
class WorkerConfig:
    name: str | None = None
    channel_buffer_capacity: int = 16


class _ChannelClosed(Exception):
    pass


class _Channel:
    """A bounded async channel that can be closed from either side."""

    def __init__(self, capacity: int) -> None:
        self._items: deque[Any] = deque()
        self._capacity = max(1, capacity)
        self._closed = False
        self._cond = asyncio.Condition()

    async def send(self, item: Any) -> None:
        async with self._cond:
            await self._cond.wait_for(
                lambda: self._closed or len(self._items) < self._capacity
            )
            if self._closed:
                raise _ChannelClosed
            self._items.append(item)
            self._cond.notify_all()

    async def recv(self) -> Any:
        async with self._cond:
            await self._cond.wait_for(lambda: self._items or self._closed)
            if self._items:
                item = self._items.popleft()
                self._cond.notify_all()
                return item
            raise _ChannelClosed

    async def close(self) -> None:
        async with self._cond:
            self._closed = True
            self._cond.notify_all()


@dataclass
class WorkerSendRequest:
    """A message from the handler, with a future the worker resolves once sent."""

    message: Any
    responder: asyncio.Future


@dataclass
class WorkerContext:
    """The worker's view of its channels and cancellation signal."""

    to_handler: _Channel
    from_handler: _Channel
    cancellation: asyncio.Event

    async def send_to_handler(self, item: Any) -> None:
        try:
            await self.to_handler.send(item)
        except _ChannelClosed:
            raise HandlerTerminated() from None

    async def recv_from_handler(self) -> WorkerSendRequest:
        try:
            return await self.from_handler.recv()
        except _ChannelClosed:
            raise HandlerTerminated() from None


class Worker(abc.ABC):
    """Something that moves messages between a handler and a real transport."""

    @abc.abstractmethod
    async def run(self, context: WorkerContext) -> None:
        """Run until done; raise a WorkerQuit to report why it stopped."""

    def config(self) -> WorkerConfig:
        return WorkerConfig()

    def closed_error(self) -> BaseException:
        """The exception a sender sees once the worker is gone."""
        return TransportClosed()


class WorkerTransport:
    """Runs a worker in a background task and exposes send/receive."""

    def __init__(self, worker: Worker, cancellation: asyncio.Event | None = None) -> None:
        config = worker.config()
        self._worker = worker
        self.cancellation = cancellation if cancellation is not None else asyncio.Event()
        self._to_handler = _Channel(config.channel_buffer_capacity)
        self._from_handler = _Channel(config.channel_buffer_capacity)
        self._pending: set[asyncio.Future] = set()
        context = WorkerContext(self._to_handler, self._from_handler, self.cancellation)
        self._task: asyncio.Task | None = asyncio.get_running_loop().create_task(
            self._drive(context, config.name)
        )

    async def _drive(self, context: WorkerContext, name: str | None) -> WorkerQuit | None:
        label = name or "transport_worker"
        try:
            await self._worker.run(context)
        except WorkerQuit as reason:
            if isinstance(reason, (WorkerFatal, WorkerJoinError)):
                logger.error("%s quit: %s", label, reason)
            else:
                logger.debug("%s quit with reason: %r", label, reason)
            return reason
        else:
            logger.debug("%s quit", label)
            return None
        finally:
            await context.to_handler.close()
            await context.from_handler.close()
            for future in list(self._pending):
                if not future.done():
                    future.set_exception(self._worker.closed_error())

    def cancel(self) -> None:
        """Signal the worker to stop."""
        self.cancellation.set()

    async def send(self, item: Any) -> None:
        """Hand a message to the worker and wait until it has been sent."""
        responder = asyncio.get_running_loop().create_future()
        self._pending.add(responder)
        try:
            try:
                await self._from_handler.send(WorkerSendRequest(item, responder))
            except _ChannelClosed:
                raise self._worker.closed_error() from None
            await responder
        finally:
            self._pending.discard(responder)

    async def receive(self) -> Any | None:
        """Return the next message from the worker, or None once it is gone."""
        try:
            return await self._to_handler.recv()
        except _ChannelClosed:
            return None

    async def close(self) -> None:
        """Stop the worker and wait for it; a crash raises WorkerJoinError."""
        task, self._task = self._task, None
        if task is None:
            return
        self.cancel()
        await self._from_handler.close()
        await self._to_handler.close()
        try:
            await task
        except Exception as exc:
            raise WorkerJoinError(exc) from exc

    async def __aenter__(self) -> WorkerTransport:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()