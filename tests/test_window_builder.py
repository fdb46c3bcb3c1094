"""Window building and merging tests."""

from passage_context.engine.core import Occurrence, PassageCandidate
from passage_context.engine.scoring import build_candidates


def _spans(candidates):
    return [(c.start, c.end, c.score) for c in candidates]


def test_nearby_matches_merge_into_one_candidate():
    occurrences = [Occurrence("alpha", 3000), Occurrence("alpha", 3200)]
    candidates = build_candidates(occurrences, document_length=10000, window_radius=1500)
    assert _spans(candidates) == [(1500, 4705, 2)]


def test_distant_matches_stay_separate():
    occurrences = [Occurrence("alpha", 2000), Occurrence("alpha", 12000)]
    candidates = build_candidates(occurrences, document_length=20000, window_radius=1500)
    assert _spans(candidates) == [(500, 3505, 1), (10500, 13505, 1)]


def test_window_clamped_to_document():
    candidates = build_candidates([Occurrence("abc", 100)], document_length=1000, window_radius=1500)
    assert _spans(candidates) == [(0, 1000, 1)]


def test_touching_windows_merge():
    # [0, 10) and [10, 21) share only the boundary offset
    occurrences = [Occurrence("x", 4), Occurrence("x", 15)]
    candidates = build_candidates(occurrences, document_length=100, window_radius=5)
    assert _spans(candidates) == [(0, 21, 2)]


def test_merge_is_not_transitive():
    # A=[10,31), C=[50,71), then B=[30,51) touches both but only joins A.
    occurrences = [Occurrence("a", 20), Occurrence("c", 60), Occurrence("b", 40)]
    candidates = build_candidates(occurrences, document_length=100, window_radius=10)
    assert _spans(candidates) == [(10, 51, 2), (50, 71, 1)]
    assert candidates[0].overlaps(candidates[1])


def test_no_occurrences_no_candidates():
    assert build_candidates([], document_length=100, window_radius=10) == []


def test_candidate_overlap_is_strict():
    assert not PassageCandidate(0, 10).overlaps(PassageCandidate(10, 20))
    assert PassageCandidate(0, 11).overlaps(PassageCandidate(10, 20))
