import random

import pytest
from caption_analyzer.tokenizer import tokenize
from caption_analyzer.hashtags import (
    build_candidates,
    count_ngrams,
    existing_tags,
    extend_exclusions,
    is_valid_word,
    normalize_tags,
    recommend_hashtags,
    to_hashtag,
)


@pytest.fixture
def rng():
    return random.Random(42)


def test_is_valid_word():
    assert is_valid_word("growth")
    assert not is_valid_word("go")  # too short
    assert not is_valid_word("the")  # stopword
    assert not is_valid_word("video")  # noise
    assert not is_valid_word("123")  # numeric


def test_to_hashtag():
    assert to_hashtag("growth marketing") == "#growthmarketing"
    assert to_hashtag("!!") == ""


def test_normalize_tags():
    assert normalize_tags(["Growth", "#Marketing", "  "]) == {"#growth", "#marketing"}
    assert normalize_tags(None) == set()


def test_count_ngrams_requires_adjacency():
    grams = count_ngrams(["we", "love", "growth", "marketing", "and", "tips"])
    assert grams["unigrams"] == {"love": 1, "growth": 1, "marketing": 1, "tips": 1}
    # "marketing tips" is not a pair because "and" sits between them
    assert grams["bigrams"] == {"love growth": 1, "growth marketing": 1}


def test_build_candidates_jitter_is_small(rng):
    tokenized = tokenize("growth growth marketing")
    base = {"growth": 2.0, "marketing": 1.0, "growth growth": 2.0, "growth marketing": 2.0}
    for c in build_candidates(tokenized, rng):
        assert abs(c.score - base[c.term]) <= 0.05


def test_build_candidates_emoji_cues(rng):
    candidates = build_candidates(tokenize("Launch day 🚀🚀"), rng)
    cue = [c for c in candidates if c.term == "launch" and c.score > 2]
    assert cue and cue[0].score == pytest.approx(2.4, abs=0.05)


def test_recommend_respects_cap_and_uniqueness(rng):
    tokenized = tokenize(
        "Content strategy matters for creators. Building audience trust takes daily "
        "storytelling and honest feedback."
    )
    out = recommend_hashtags(tokenized, "twitter", set(), set(), rng)
    assert len(out) == 3
    assert len(set(out)) == len(out)


def test_recommend_skips_existing_tags(rng):
    tokenized = tokenize("Growth tips for growth teams #growth")
    out = recommend_hashtags(tokenized, "linkedin", {"#growth"}, set(), rng)
    assert "#growth" not in out


def test_recommend_ranks_frequent_terms_first(rng):
    tokenized = tokenize(
        "Growth matters. We focus on growth marketing and growth every day. Marketing wins."
    )
    out = recommend_hashtags(tokenized, "linkedin", set(), set(), rng)
    assert out[0] == "#growth"


def test_recommend_empty_text_falls_back_to_general(rng):
    out = recommend_hashtags(tokenize(""), "twitter", set(), set(), rng)
    assert out == ["#growth", "#marketing", "#strategy"]


def test_recommend_returns_empty_when_everything_excluded(rng):
    exclusions = {"#growth", "#marketing", "#strategy", "#content"}
    assert recommend_hashtags(tokenize(""), "twitter", set(), exclusions, rng) == []


def test_recommend_same_seed_same_order():
    tokenized = tokenize("alpha beta gamma delta epsilon zeta eta theta")
    a = recommend_hashtags(tokenized, "instagram", set(), set(), random.Random(3))
    b = recommend_hashtags(tokenized, "instagram", set(), set(), random.Random(3))
    assert a == b


def test_extend_exclusions():
    assert extend_exclusions({"#a"}, ["#B", "c"]) == {"#a", "#b", "#c"}


def test_existing_tags_splits_glued_hashtags():
    tokenized = tokenize("Ship it #Growth#marketing and #tips")
    assert existing_tags(tokenized) == {"#growth", "#marketing", "#tips"}
