"""Drives an ImageResolver with real HTTP loads.

The interactive table loads images in the browser; from the command line
we do the loading ourselves. A candidate counts as loaded when it
answers 2xx with an ``image/*`` content type.
"""

from __future__ import annotations

import logging

import requests

from petadmin.domain.model.image_load import ImageLoadState, ImageResolver, Pending

logger = logging.getLogger(__name__)


class HttpImageProbe:

    def __init__(self, timeout: float = 5.0, session: requests.Session | None = None) -> None:
        self._timeout = timeout
        self._session = session or requests.Session()

    def resolve(self, resolver: ImageResolver) -> ImageLoadState:
        """Walk the candidates until one loads or the list is exhausted."""
        while isinstance(resolver.state, Pending) and not resolver.is_disposed:
            url = resolver.current_url
            if self.load(url):
                resolver.on_load(url)
            else:
                resolver.on_error(url)
        return resolver.state

    def load(self, url: str | None) -> bool:
        if not url:
            return False
        try:
            response = self._session.get(
                url, timeout=self._timeout, stream=True, allow_redirects=True
            )
        except requests.RequestException as exc:
            logger.info("Image request failed for %s: %s", url, exc)
            return False
        try:
            content_type = response.headers.get("Content-Type", "")
            ok = response.ok and content_type.lower().startswith("image/")
            if not ok:
                logger.info(
                    "Image not usable at %s (status=%s, content-type=%r)",
                    url, response.status_code, content_type,
                )
            return ok
        finally:
            response.close()
