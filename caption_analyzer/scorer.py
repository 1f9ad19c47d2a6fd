import math
import re
from typing import List

from .lexicon import (
    BEST_TIME,
    CTA_REGEX,
    EXCLAMATION_RUN,
    MAX_KEYWORDS,
    NEGATIVE_WORDS,
    POSITIVE_EMOJI,
    POSITIVE_WORDS,
    STOPWORDS,
    TARGET_WORD_COUNT,
)
from .types import CaptionScores, Keyword, Platform, RadarPoint, TokenizedText

# ============================================================
# Helpers
# ============================================================


def clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return max(low, min(high, value))


def round_half_up(n: float) -> int:
    # Python's round() is banker's rounding; scores round .5 upwards
    return int(math.floor(n + 0.5))


# ============================================================
# 1. Sentiment
# ============================================================


def compute_sentiment(words: List[str], text: str) -> float:
    positive = sum(1 for w in words if w in POSITIVE_WORDS)
    negative = sum(1 for w in words if w in NEGATIVE_WORDS)
    emoji = len(POSITIVE_EMOJI.findall(text))
    exclamations = len(EXCLAMATION_RUN.findall(text))

    return clamp(50 + 10 * (positive - negative) + 5 * emoji + 2 * exclamations)


# ============================================================
# 2. Clarity (approximate Flesch Reading Ease)
# ============================================================


def estimate_syllables(word: str) -> int:
    w = re.sub(r"e$", " ", word.lower())
    return max(1, len(re.findall(r"[aeiouy]+", w)))


def compute_clarity(words: List[str], sentence_count: int) -> float:
    word_count = max(1, len(words))
    sentence_count = max(1, sentence_count)
    syllables = sum(estimate_syllables(w) for w in words)

    reading_ease = (
        206.835
        - 1.015 * (len(words) / sentence_count)
        - 84.6 * (syllables / word_count)
    )
    return clamp(reading_ease + 10)


# ============================================================
# 3. Hashtags, CTA, length
# ============================================================


def compute_hashtag_density(hashtag_count: int, word_count: int) -> float:
    return min(100.0, (hashtag_count / max(1, word_count)) * 600)


def has_call_to_action(text: str) -> bool:
    return bool(CTA_REGEX.search(text))


def compute_length_fit(word_count: int, platform: Platform) -> float:
    target = TARGET_WORD_COUNT[platform]
    return max(0.0, 100 - abs(word_count - target) * 0.8)


# ============================================================
# 4. Engagement (weighted toy model)
# ============================================================


def compute_engagement(
    sentiment: float,
    clarity: float,
    cta: bool,
    hashtag_count: int,
    length_fit: float,
) -> int:
    return round_half_up(
        0.30 * sentiment
        + 0.25 * clarity
        + 0.15 * (100 if cta else 50)
        + 0.15 * min(100, hashtag_count * 20)
        + 0.15 * length_fit
    )


# ============================================================
# 5. Keywords & radar
# ============================================================


def extract_keywords(words: List[str], limit: int = MAX_KEYWORDS) -> List[Keyword]:
    freq = {}
    for w in words:
        if w in STOPWORDS:
            continue
        freq[w] = freq.get(w, 0) + 1

    # sorted() is stable, so equal counts keep first-seen order
    ranked = sorted(freq.items(), key=lambda x: x[1], reverse=True)[:limit]
    return [Keyword(term=w, frequency=c) for w, c in ranked]


def build_radar(
    sentiment: float,
    clarity: float,
    hashtag_density: float,
    cta: bool,
    length_fit: float,
) -> List[RadarPoint]:
    return [
        RadarPoint(dimension="Emotion", value=round_half_up(sentiment)),
        RadarPoint(dimension="Clarity", value=round_half_up(clarity)),
        RadarPoint(dimension="Hashtags", value=round_half_up(hashtag_density)),
        RadarPoint(dimension="CTA", value=100 if cta else 30),
        RadarPoint(dimension="Length", value=round_half_up(length_fit)),
    ]


def score_caption(tokenized: TokenizedText, platform: Platform) -> CaptionScores:
    """
    Runs every deterministic metric over one tokenized caption.
    No jitter happens here, identical input always gives identical scores.
    """
    words = tokenized.words
    word_count = len(words)
    hashtag_count = len(tokenized.hashtags)

    sentiment = compute_sentiment(words, tokenized.text)
    clarity = compute_clarity(words, tokenized.sentence_count)
    density = compute_hashtag_density(hashtag_count, word_count)
    cta = has_call_to_action(tokenized.text)
    length_fit = compute_length_fit(word_count, platform)

    return CaptionScores(
        platform=platform,
        wordCount=word_count,
        sentiment=round_half_up(sentiment),
        clarity=round_half_up(clarity),
        hashtagCount=hashtag_count,
        mentionCount=len(tokenized.mentions),
        linkCount=len(tokenized.links),
        hashtagDensity=round_half_up(density),
        cta=cta,
        lengthFit=round_half_up(length_fit),
        engagement=compute_engagement(sentiment, clarity, cta, hashtag_count, length_fit),
        radar=build_radar(sentiment, clarity, density, cta, length_fit),
        keywords=extract_keywords(words),
        bestTime=BEST_TIME[platform],
    )
