"""Tests for HttpImageProbe against a fake requests session."""

import requests

from petadmin.domain.model.image_load import Exhausted, ImageResolver, Succeeded
from petadmin.infrastructure.api.image_probe import HttpImageProbe

SHARE_LINK = "https://drive.google.com/file/d/XYZ/view"


class FakeResponse:

    def __init__(self, status_code=200, content_type="image/png"):
        self.status_code = status_code
        self.headers = {"Content-Type": content_type}
        self.closed = False

    @property
    def ok(self):
        return self.status_code < 400

    def close(self):
        self.closed = True


class FakeSession:
    """Answers GETs from a url -> response (or exception) map; 404 otherwise."""

    def __init__(self, answers=None):
        self.answers = answers or {}
        self.urls = []

    def get(self, url, **kwargs):
        self.urls.append(url)
        answer = self.answers.get(url, FakeResponse(404, "text/html"))
        if isinstance(answer, Exception):
            raise answer
        return answer


class TestLoad:

    def test_image_response_loads(self):
        response = FakeResponse()
        probe = HttpImageProbe(session=FakeSession({"u": response}))
        assert probe.load("u")
        assert response.closed

    def test_html_response_does_not_load(self):
        probe = HttpImageProbe(session=FakeSession({"u": FakeResponse(200, "text/html")}))
        assert not probe.load("u")

    def test_error_status_does_not_load(self):
        probe = HttpImageProbe(session=FakeSession({"u": FakeResponse(403)}))
        assert not probe.load("u")

    def test_network_error_does_not_load(self):
        probe = HttpImageProbe(session=FakeSession({"u": requests.Timeout("slow")}))
        assert not probe.load("u")

    def test_no_url(self):
        assert not HttpImageProbe(session=FakeSession()).load(None)


class TestResolve:

    def test_falls_back_to_fourth_candidate(self):
        resolver = ImageResolver(SHARE_LINK)
        fourth = resolver.candidates[3]
        session = FakeSession({fourth: FakeResponse()})
        state = HttpImageProbe(session=session).resolve(resolver)
        assert state == Succeeded(3)
        assert session.urls == resolver.candidates[:4]

    def test_exhausts_when_nothing_loads(self):
        resolver = ImageResolver(SHARE_LINK)
        session = FakeSession()
        assert HttpImageProbe(session=session).resolve(resolver) == Exhausted()
        assert session.urls == resolver.candidates

    def test_disposed_resolver_is_not_probed(self):
        resolver = ImageResolver(SHARE_LINK)
        resolver.dispose()
        session = FakeSession()
        HttpImageProbe(session=session).resolve(resolver)
        assert session.urls == []
