"""Unit tests for the image resolver state machine."""

import pytest

from petadmin.domain.exceptions import ValidationError
from petadmin.domain.model.image_load import (
    Exhausted,
    ImageResolver,
    ImageViewKind,
    Pending,
    Succeeded,
    render_image,
)

SHARE_LINK = "https://drive.google.com/file/d/XYZ/view"
OTHER_LINK = "https://drive.google.com/file/d/ABC/view"


def _resolver(reference=SHARE_LINK):
    states = []
    resolver = ImageResolver(reference, listener=states.append)
    return resolver, states


class TestInitialState:

    def test_starts_pending_at_first_candidate(self):
        resolver, states = _resolver()
        assert resolver.state == Pending(0)
        assert resolver.current_url == resolver.candidates[0]
        assert states == [Pending(0)]

    def test_empty_reference_gets_no_resolver(self):
        assert ImageResolver.for_reference("") is None
        assert ImageResolver.for_reference(None) is None

    def test_empty_reference_rejected_by_constructor(self):
        with pytest.raises(ValidationError, match="empty"):
            ImageResolver("  ")


class TestTransitions:

    def test_success_is_terminal(self):
        resolver, _ = _resolver()
        resolver.on_load()
        assert resolver.state == Succeeded(0)
        resolver.on_error()
        assert resolver.state == Succeeded(0)

    def test_failure_moves_to_next_candidate(self):
        resolver, _ = _resolver()
        resolver.on_error()
        assert resolver.state == Pending(1)
        assert resolver.current_url == resolver.candidates[1]

    def test_fourth_candidate_succeeds_after_three_failures(self):
        resolver, _ = _resolver()
        for _ in range(3):
            resolver.on_error()
        resolver.on_load()
        assert resolver.state == Succeeded(3)
        assert resolver.current_url == resolver.candidates[3]

    def test_all_failures_pass_through_k_pending_states(self):
        resolver, states = _resolver()
        k = len(resolver.candidates)
        for _ in range(k):
            resolver.on_error()
        assert states == [Pending(i) for i in range(k)] + [Exhausted()]
        assert resolver.current_url is None

    def test_single_candidate_exhausts_after_one_failure(self):
        resolver, _ = _resolver("https://cdn.example.com/cat.png")
        resolver.on_error()
        assert resolver.state == Exhausted()

    def test_events_after_exhaustion_ignored(self):
        resolver, _ = _resolver("https://cdn.example.com/cat.png")
        resolver.on_error()
        resolver.on_load()
        resolver.on_error()
        assert resolver.state == Exhausted()


class TestRetry:

    def test_retry_restarts_chain(self):
        resolver, _ = _resolver()
        for _ in resolver.candidates:
            resolver.on_error()
        resolver.retry()
        assert resolver.state == Pending(0)

    def test_retry_ignored_unless_exhausted(self):
        resolver, _ = _resolver()
        resolver.on_error()
        resolver.retry()
        assert resolver.state == Pending(1)


class TestStaleAndDisposed:

    def test_late_callback_for_previous_url_ignored(self):
        resolver, _ = _resolver()
        first = resolver.current_url
        resolver.on_error(first)
        resolver.on_error(first)  # duplicate event for the swapped-out source
        assert resolver.state == Pending(1)
        resolver.on_load(first)
        assert resolver.state == Pending(1)

    def test_callback_for_current_url_applies(self):
        resolver, _ = _resolver()
        resolver.on_load(resolver.current_url)
        assert resolver.state == Succeeded(0)

    def test_disposed_resolver_ignores_events(self):
        resolver, states = _resolver()
        resolver.dispose()
        resolver.on_error()
        resolver.on_load()
        assert resolver.state == Pending(0)
        assert states == [Pending(0)]
        assert resolver.is_disposed


class TestReset:

    def test_new_reference_is_hard_reset(self):
        resolver, _ = _resolver()
        resolver.on_error()
        resolver.on_load()
        resolver.reset(OTHER_LINK)
        assert resolver.state == Pending(0)
        assert "ABC" in resolver.current_url
        assert resolver.reference == OTHER_LINK


class TestRenderImage:

    def test_no_resolver_renders_placeholder(self):
        view = render_image(None)
        assert view.kind == ImageViewKind.PLACEHOLDER
        assert view.src is None

    def test_pending_renders_current_candidate(self):
        resolver, _ = _resolver()
        resolver.on_error()
        view = render_image(resolver)
        assert view.kind == ImageViewKind.IMAGE
        assert view.src == resolver.candidates[1]

    def test_succeeded_renders_loaded_candidate(self):
        resolver, _ = _resolver()
        resolver.on_load()
        assert render_image(resolver).src == resolver.candidates[0]

    def test_exhausted_renders_error_with_link_and_retry(self):
        resolver, _ = _resolver()
        for _ in resolver.candidates:
            resolver.on_error()
        view = render_image(resolver)
        assert view.kind == ImageViewKind.ERROR
        assert view.link == SHARE_LINK
        assert view.can_retry
