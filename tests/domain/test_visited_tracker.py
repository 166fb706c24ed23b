from docscrawl.domain.visited_tracker import VisitedTracker


def test_url_not_visited_initially():
    tracker = VisitedTracker()
    assert not tracker.is_visited("https://docs.example.com/")


def test_claiming_url_makes_it_visited():
    tracker = VisitedTracker()
    tracker.claim("https://docs.example.com/")
    assert tracker.is_visited("https://docs.example.com/")


def test_different_urls_tracked_independently():
    tracker = VisitedTracker()
    tracker.claim("https://docs.example.com/")
    assert tracker.is_visited("https://docs.example.com/")
    assert not tracker.is_visited("https://docs.example.com/guide")


def test_claim_only_succeeds_once():
    tracker = VisitedTracker()
    assert tracker.claim("https://docs.example.com/a") is True
    assert tracker.claim("https://docs.example.com/a") is False
    assert tracker.is_visited("https://docs.example.com/a")
    assert len(tracker) == 1


def test_empty_tracker_is_falsy_but_usable():
    tracker = VisitedTracker()
    assert len(tracker) == 0
    assert not tracker
