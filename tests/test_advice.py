from caption_analyzer.advice import build_recommendations
from caption_analyzer.pipeline import analyze


def test_recommendations_for_empty_caption():
    tips = build_recommendations(analyze("", "twitter", nonce=1))

    assert len(tips) == 5
    assert any("positive language" in t for t in tips)
    assert any("specific hashtags" in t for t in tips)
    assert any("call-to-action" in t for t in tips)
    assert any("Expand the content" in t for t in tips)
    assert tips[-1] == "Post when your audience is most active: Tue–Thu 9–11am."


def test_recommendations_skip_satisfied_checks():
    text = "Love this amazing launch! Join the waitlist #launch #startup"
    result = analyze(text, "linkedin", nonce=1)
    tips = build_recommendations(result)

    assert result.cta
    assert not any("call-to-action" in t for t in tips)
    assert not any("positive language" in t for t in tips)
    assert any("Reduce the number of hashtags" in t for t in tips)
