"""Background rendering that only ever publishes the latest request."""

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from .renderer import DiagramRenderer

logger = logging.getLogger(__name__)


class RenderStatus(str, Enum):
    """Visible state of the pipeline."""

    IDLE = "idle"
    PENDING = "pending"
    READY = "ready"
    FAILED = "failed"


@dataclass(frozen=True)
class RenderResult:
    """The outcome of rendering one generation key.

    The key is the diagram source the result was computed from.
    """

    status: RenderStatus
    key: str | None = None
    image: bytes | None = None
    reason: str | None = None

    @classmethod
    def idle(cls) -> "RenderResult":
        return cls(RenderStatus.IDLE)

    @classmethod
    def pending(cls, key: str) -> "RenderResult":
        return cls(RenderStatus.PENDING, key=key)

    @classmethod
    def ready(cls, key: str, image: bytes) -> "RenderResult":
        return cls(RenderStatus.READY, key=key, image=image)

    @classmethod
    def failed(cls, key: str, reason: str) -> "RenderResult":
        return cls(RenderStatus.FAILED, key=key, reason=reason)


UpdateCallback = Callable[[RenderResult], None]


class RenderPipeline:
    """Renders diagram sources off the calling thread.

    Each request carries its source as the generation key. A new key
    cancels the previous render only if it has not started yet; work
    already in flight runs to completion and its result is dropped
    because its key is no longer current. Renderer exceptions become
    ``failed`` results and never reach the caller.
    """

    def __init__(
        self,
        renderer: DiagramRenderer,
        max_workers: int = 2,
        on_update: UpdateCallback | None = None,
    ):
        """Initialize the pipeline.

        Args:
            renderer: The external renderer to call.
            max_workers: Size of the background thread pool.
            on_update: Called with every result that becomes visible.
                Completions call it from a worker thread.
        """
        self.renderer = renderer
        self.on_update = on_update
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="edgeview-render"
        )
        self._lock = threading.Lock()
        self._notify_lock = threading.RLock()
        self._current_key: str | None = None
        self._current_future: Future | None = None
        self._result = RenderResult.idle()
        self._last_image: bytes | None = None

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def current_key(self) -> str | None:
        """Get the generation key of the latest request."""
        return self._current_key

    @property
    def result(self) -> RenderResult:
        """Get the visible result."""
        return self._result

    @property
    def last_image(self) -> bytes | None:
        """Get the most recent successfully rendered image."""
        return self._last_image

    # -------------------------------------------------------------------------
    # Requests
    # -------------------------------------------------------------------------

    def request(self, source: str) -> Future | None:
        """Start rendering a source unless it is already the current key.

        Args:
            source: The diagram source; also the generation key.

        Returns:
            The Future of the new render, or None if nothing was started.
        """
        with self._lock:
            if source == self._current_key:
                return None
            self._current_key = source
            pending = RenderResult.pending(source)
            self._result = pending

        previous = self._current_future
        if previous is not None and previous.cancel():
            logger.debug("Cancelled queued render of a superseded source")

        self._notify(pending)
        future = self._executor.submit(self._run, source)
        self._current_future = future
        return future

    def wait(self, timeout: float | None = None) -> RenderResult:
        """Block until the current render finishes.

        Args:
            timeout: Seconds to wait, or None to wait indefinitely.

        Returns:
            The visible result afterwards.

        Raises:
            concurrent.futures.TimeoutError: If the render does not finish in time.
        """
        future = self._current_future
        if future is not None:
            future.result(timeout=timeout)
        return self._result

    def shutdown(self, wait: bool = True) -> None:
        """Stop the worker threads."""
        self._executor.shutdown(wait=wait)

    def __enter__(self) -> "RenderPipeline":
        return self

    def __exit__(self, *exc_info) -> None:
        self.shutdown()

    # -------------------------------------------------------------------------
    # Worker side
    # -------------------------------------------------------------------------

    def _run(self, key: str) -> RenderResult:
        try:
            image = self.renderer.render(key)
        except Exception as e:
            logger.warning("Diagram render failed: %s", e)
            outcome = RenderResult.failed(key, str(e) or type(e).__name__)
        else:
            outcome = RenderResult.ready(key, image)

        self._apply(outcome)
        return outcome

    def _apply(self, outcome: RenderResult) -> None:
        with self._lock:
            if outcome.key != self._current_key:
                logger.debug("Discarding stale %s render", outcome.status.value)
                return
            self._result = outcome
            if outcome.status == RenderStatus.READY:
                self._last_image = outcome.image

        self._notify(outcome)

    def _notify(self, result: RenderResult) -> None:
        if self.on_update is None:
            return
        # Deliveries are serialized and only the visible result goes out,
        # so the last update a listener sees is always the current one.
        with self._notify_lock:
            if result is not self._result:
                logger.debug("Skipping superseded %s update", result.status.value)
                return
            try:
                self.on_update(result)
            except Exception:
                logger.exception("Render update callback failed")
