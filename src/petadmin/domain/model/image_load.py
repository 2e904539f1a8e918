"""Image loading state machine.

Each rendered product image owns one ``ImageResolver``. The resolver
walks the candidate URLs from ``build_candidate_urls`` one at a time:

    Pending(c) --load ok-->  Succeeded(c)                 (terminal)
    Pending(c) --load err--> Pending(c + 1)               if c + 1 < K
    Pending(c) --load err--> Exhausted                    if c + 1 == K
    Exhausted  --retry-->    Pending(0)
    any        --new ref-->  Pending(0)                   (hard reset)

Load failures are routine (revoked sharing, hotlink protection, flaky
network) and never leave the resolver as exceptions.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Union

from petadmin.domain.exceptions import ValidationError
from petadmin.domain.service.image_candidates import build_candidate_urls

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Pending:
    cursor: int


@dataclass(frozen=True)
class Succeeded:
    cursor: int


@dataclass(frozen=True)
class Exhausted:
    pass


ImageLoadState = Union[Pending, Succeeded, Exhausted]
StateListener = Callable[[ImageLoadState], None]


class ImageResolver:
    """Walks the candidate list of a single image reference.

    Use ``ImageResolver.for_reference`` when the reference may be empty:
    an empty reference gets no resolver and renders a placeholder.

    ``on_load`` and ``on_error`` accept the URL the event belongs to.
    Events for a URL that is no longer current (a late callback from a
    swapped-out source) are ignored, as is everything after ``dispose``.
    """

    def __init__(self, reference: str, listener: StateListener | None = None) -> None:
        self._listener = listener
        self._disposed = False
        self._reference = ""
        self._candidates: list[str] = []
        self._state: ImageLoadState = Pending(0)
        self.reset(reference)

    @staticmethod
    def for_reference(
        reference: str | None, listener: StateListener | None = None
    ) -> ImageResolver | None:
        if not reference or not reference.strip():
            return None
        return ImageResolver(reference, listener)

    # --- Read-only view -------------------------------------------------------

    @property
    def reference(self) -> str:
        return self._reference

    @property
    def candidates(self) -> list[str]:
        return list(self._candidates)

    @property
    def state(self) -> ImageLoadState:
        return self._state

    @property
    def current_url(self) -> str | None:
        """The URL the image element should point at, None once exhausted."""
        if isinstance(self._state, (Pending, Succeeded)):
            return self._candidates[self._state.cursor]
        return None

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    # --- Transitions ----------------------------------------------------------

    def reset(self, reference: str) -> None:
        """Observe a (new) reference: rebuild candidates, restart at 0."""
        candidates = build_candidate_urls(reference)
        if not candidates:
            raise ValidationError("Image reference is empty")
        self._reference = reference.strip()
        self._candidates = candidates
        self._transition(Pending(0))

    def on_load(self, url: str | None = None) -> None:
        pending = self._pending_for(url)
        if pending is None:
            return
        logger.debug("Image loaded: %s", self._candidates[pending.cursor])
        self._transition(Succeeded(pending.cursor))

    def on_error(self, url: str | None = None) -> None:
        pending = self._pending_for(url)
        if pending is None:
            return
        cursor = pending.cursor
        logger.debug(
            "Image failed to load (attempt %d/%d): %s",
            cursor + 1, len(self._candidates), self._candidates[cursor],
        )
        if cursor + 1 < len(self._candidates):
            self._transition(Pending(cursor + 1))
        else:
            logger.warning("All %d image URLs failed for %s",
                           len(self._candidates), self._reference)
            self._transition(Exhausted())

    def retry(self) -> None:
        """Manual retry from Exhausted: run the whole chain again."""
        if self._disposed or not isinstance(self._state, Exhausted):
            return
        self._transition(Pending(0))

    def dispose(self) -> None:
        self._disposed = True
        self._listener = None

    # --- Internal helpers -----------------------------------------------------

    def _pending_for(self, url: str | None) -> Pending | None:
        """The current Pending state if an event for *url* may act on it."""
        if self._disposed or not isinstance(self._state, Pending):
            return None
        if url is not None and url != self.current_url:
            return None
        return self._state

    def _transition(self, state: ImageLoadState) -> None:
        self._state = state
        if self._listener is not None:
            self._listener(state)


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


class ImageViewKind(Enum):
    PLACEHOLDER = "placeholder"
    IMAGE = "image"
    ERROR = "error"


@dataclass(frozen=True)
class ImageView:
    """What the renderer should draw for one product image."""

    kind: ImageViewKind
    src: str | None = None
    link: str | None = None
    can_retry: bool = False


def render_image(resolver: ImageResolver | None) -> ImageView:
    if resolver is None:
        return ImageView(ImageViewKind.PLACEHOLDER)
    if isinstance(resolver.state, Exhausted):
        return ImageView(ImageViewKind.ERROR, link=resolver.reference, can_retry=True)
    return ImageView(ImageViewKind.IMAGE, src=resolver.current_url)
