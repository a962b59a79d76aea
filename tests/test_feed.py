from __future__ import annotations

import pytest

from scrollwise.config import FeedConfig
from scrollwise.feed import FeedEngine

CLICKBAIT_TOKENS = {"shocking", "viral", "clickbait", "garbage", "you", "wont", "believe"}


def test_empty_engine_falls_back_to_trending() -> None:
    assert FeedEngine().generate_query(8) == ["trending"]


def test_only_disliked_history_falls_back(make_event) -> None:
    engine = FeedEngine()
    engine.add_watch(make_event("Bad video", ("junk",), disliked=True))
    assert engine.extract_words() == []
    assert engine.generate_query(4) == ["trending"]


def test_fallback_term_is_configurable() -> None:
    assert FeedEngine(FeedConfig(fallback_term="popular")).generate_query() == ["popular"]


def test_disliked_event_populates_exclusions(make_event) -> None:
    engine = FeedEngine()
    engine.add_watch(make_event("Clickbait garbage you wont believe", ("Shocking", "viral"), disliked=True))
    assert engine.excluded_terms == ("shocking", "viral", "clickbait", "garbage", "you", "wont", "believe")
    assert len(engine.history) == 1
    assert engine.is_excluded("VIRAL")


def test_exclusions_survive_later_likes(make_event) -> None:
    engine = FeedEngine()
    engine.add_watch(make_event("Clickbait garbage you wont believe", ("shocking", "viral"), disliked=True))
    engine.add_watch(make_event("Viral dance moves", ("viral", "dance"), liked=True))
    words = engine.extract_words()
    assert "viral" not in words
    assert "dance" in words
    assert "viral" not in engine.tfidf_top_words(10)


def test_extract_words_weights_recency_and_likes(make_event) -> None:
    engine = FeedEngine()
    engine.add_watch(make_event("old", ("a",)))
    engine.add_watch(make_event("mid", ("b",), liked=True))
    engine.add_watch(make_event("new", ("c",)))
    # repeats: ceil(1/3*3)=1, ceil(2/3*3)=2, ceil(3/3*3)=3
    assert engine.extract_words() == [
        "old", "a",
        "mid", "b", "b",
        "mid", "b", "b",
        "new", "c",
        "new", "c",
        "new", "c",
    ]


def test_disliked_events_still_count_towards_recency(make_event) -> None:
    engine = FeedEngine()
    engine.add_watch(make_event("first"))
    engine.add_watch(make_event("nope", disliked=True))
    # first event sits at position 1 of 2: ceil(0.5 * 3) == 2
    assert engine.extract_words() == ["first", "first"]


def test_sample_extraction_excludes_clickbait(sample_engine) -> None:
    words = sample_engine.extract_words()
    assert words[:11] == [
        "how", "to", "make", "pasta", "carbonara",
        "cooking", "pasta", "italian",
        "cooking", "pasta", "italian",
    ]
    assert len(words) == 11 + 2 * 8 + 3 * 14
    assert not CLICKBAIT_TOKENS & set(words)


def test_sample_relevance_ranking(sample_engine) -> None:
    assert sample_engine.tfidf_top_words(4) == ["pasta", "cooking", "how", "to"]
    assert sample_engine.tfidf_top_words(0) == []


def test_sample_query(sample_engine) -> None:
    query = sample_engine.generate_query(8)
    assert query == ["pasta", "cooking", "how", "to", "carbonara", "secrets", "from"]
    assert len(query) == len(set(query)) <= 8
    assert all(token == token.lower() for token in query)
    assert not CLICKBAIT_TOKENS & set(query)


@pytest.mark.parametrize("word_count", [1, 2, 3, 5])
def test_query_is_truncated(sample_engine, word_count: int) -> None:
    assert len(sample_engine.generate_query(word_count)) <= word_count


def test_relevance_tokens_win_merge_order(sample_engine) -> None:
    query = sample_engine.generate_query(2)
    # one relevance token, walk starts at the same token and adds one more
    assert query == ["pasta", "carbonara"]


def test_walk_starts_from_first_word_when_nothing_is_ranked(make_event) -> None:
    engine = FeedEngine()
    engine.add_watch(make_event("solo clip"))
    # half of 1 is 0, so no token is ranked and the walk takes no steps
    assert engine.generate_query(1) == ["solo"]


def test_query_is_stable_across_calls(sample_engine) -> None:
    assert sample_engine.generate_query(8) == sample_engine.generate_query(8)


def test_random_selection_is_reproducible(sample_history) -> None:
    queries = []
    for _ in range(2):
        engine = FeedEngine(FeedConfig(selection="random", random_state=7))
        for event in sample_history:
            engine.add_watch(event)
        queries.append(engine.generate_query(10))
    assert queries[0] == queries[1]
    assert queries[0][:5] == ["pasta", "cooking", "how", "to", "make"]
    assert len(set(queries[0])) == len(queries[0])
