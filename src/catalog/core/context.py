"""Per-request context carried through the service and repository layers.

A ``RequestContext`` holds the correlation ID used in every log line of a
request, a cancellation flag and an optional deadline.  It is created by
whatever transport hosts the service and handed, unchanged, to every
repository call so that I/O can be abandoned when the caller goes away.
"""

from __future__ import annotations

import threading
import time
import uuid
from dataclasses import dataclass, field
from typing import ContextManager, Optional

import structlog

from catalog.core.exceptions import ContextCancelled, DeadlineExceeded


@dataclass(frozen=True)
class RequestContext:
    """Immutable request context.

    ``deadline`` is expressed on the ``time.monotonic()`` clock.  Derived
    contexts share the cancellation event of their parent, so cancelling
    the parent cancels every child.
    """

    correlation_id: str
    deadline: Optional[float] = None
    _done: threading.Event = field(
        default_factory=threading.Event, repr=False, compare=False
    )

    @classmethod
    def background(cls) -> RequestContext:
        """Context with a fresh correlation ID, no deadline, never cancelled."""
        return cls(correlation_id=str(uuid.uuid4()))

    @classmethod
    def new(
        cls, correlation_id: Optional[str] = None, timeout: Optional[float] = None
    ) -> RequestContext:
        cid = correlation_id or str(uuid.uuid4())
        deadline = time.monotonic() + timeout if timeout is not None else None
        return cls(correlation_id=cid, deadline=deadline)

    def with_timeout(self, timeout: float) -> RequestContext:
        """Derive a child context that expires no later than ``timeout`` from now."""
        deadline = time.monotonic() + timeout
        if self.deadline is not None:
            deadline = min(deadline, self.deadline)
        return RequestContext(
            correlation_id=self.correlation_id, deadline=deadline, _done=self._done
        )

    def bound_logging(self) -> ContextManager[None]:
        """Bind ``correlation_id`` into structlog contextvars for a ``with`` block.

        Every log line emitted inside the block, repository logs included,
        carries the correlation ID through ``merge_contextvars``.
        """
        return structlog.contextvars.bound_contextvars(
            correlation_id=self.correlation_id
        )

    def cancel(self) -> None:
        self._done.set()

    @property
    def cancelled(self) -> bool:
        return self._done.is_set()

    @property
    def expired(self) -> bool:
        return self.deadline is not None and time.monotonic() >= self.deadline

    def remaining(self) -> Optional[float]:
        """Seconds left before the deadline, or ``None`` when unbounded."""
        if self.deadline is None:
            return None
        return max(0.0, self.deadline - time.monotonic())

    def raise_if_done(self) -> None:
        """Raise if the context was cancelled or its deadline has passed.

        Raises:
            ContextCancelled: ``cancel()`` was called.
            DeadlineExceeded: the deadline is in the past.
        """
        if self.cancelled:
            raise ContextCancelled()
        if self.expired:
            raise DeadlineExceeded()
