import pytest
from caption_analyzer.lexicon import CTA_REGEX, SAMPLE_CAPTIONS
from caption_analyzer.pipeline import analyze
from caption_analyzer.variants import (
    append_hashtags,
    build_base,
    ensure_cta,
    synthesize_variants,
)


@pytest.fixture
def quote():
    return SAMPLE_CAPTIONS["short-quote"]


def test_build_base():
    assert build_base("One. Two! Three?") == "One. Two."
    assert build_base("Just one line") == "Just one line."
    assert build_base("") == ""


def test_ensure_cta():
    assert ensure_cta("Join us", "twitter") == "Join us"
    assert ensure_cta("Hello", "twitter") == "Hello Comment 'yes' for details."
    assert ensure_cta("Hello", "youtube").endswith(
        "Subscribe for more and comment your thoughts."
    )


def test_synthesize_variants_templates(quote):
    result = analyze(quote, "twitter", nonce=1)
    variants = synthesize_variants(quote, "twitter", result)
    base = "Consistency beats intensity. Show up, even when it's not perfect."
    tags = " ".join(result.hashtagSuggestions[:3])

    assert variants.concise == (
        f"🚀 Consistency — {base} Comment 'yes' for details. {tags}"
    )
    assert variants.benefit == (
        f"Want better consistency? Here's how we approach beats. {base} "
        f"Comment 'yes' for details. {tags}"
    )
    assert variants.list == (
        f"consistency • beats • intensity — {base} Comment 'yes' for details. {tags}"
    )


def test_every_variant_has_cta_and_tags(quote):
    for platform in ("instagram", "tiktok", "linkedin"):
        result = analyze(quote, platform, nonce=2)
        variants = synthesize_variants(quote, platform, result)
        tags = " ".join(result.hashtagSuggestions[:3])
        for v in (variants.concise, variants.benefit, variants.list):
            assert CTA_REGEX.search(v)
            assert v.endswith(tags)


def test_existing_cta_not_duplicated():
    text = "Join our waitlist today. Spots are limited."
    result = analyze(text, "twitter", nonce=1)
    variants = synthesize_variants(text, "twitter", result)
    assert "Comment 'yes' for details" not in variants.concise


def test_default_keywords_when_empty():
    result = analyze("", "twitter", nonce=1)
    variants = synthesize_variants("", "twitter", result)

    assert variants.concise.startswith("🚀 Comment 'yes' for details.")
    assert "Want better results? Here's how we approach growth." in variants.benefit
    assert variants.list.startswith("results • growth • tips —")


def test_append_hashtags():
    assert append_hashtags("Hi", ["#a", "#b"]) == "Hi #a #b"
    assert append_hashtags("Hi", []) == "Hi"
