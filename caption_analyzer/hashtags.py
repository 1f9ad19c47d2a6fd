import random
import re
from typing import Dict, Iterable, List, Optional, Set

from .lexicon import (
    BIGRAM_WEIGHT,
    EMOJI_CUE_SCORE,
    EMOJI_CUES,
    GENERAL_HASHTAGS,
    HASHTAG_CAP,
    JITTER_SPREAD,
    MIN_SUGGESTIONS,
    NOISE_WORDS,
    STOPWORDS,
)
from .types import HashtagCandidate, Platform, TokenizedText


def is_valid_word(word: str) -> bool:
    return (
        len(word) >= 3
        and word not in NOISE_WORDS
        and word not in STOPWORDS
        and not word.isdigit()
    )


def to_hashtag(term: str) -> str:
    cleaned = re.sub(r"[^a-z0-9]+", "", term, flags=re.IGNORECASE).lower()
    return f"#{cleaned}" if cleaned else ""


def existing_tags(tokenized: TokenizedText) -> Set[str]:
    """Every tag written in the caption, including ones glued together like #a#b."""
    return set(re.findall(r"#[a-z0-9]+", " ".join(tokenized.tokens)))


def normalize_tags(tags: Optional[Iterable[str]]) -> Set[str]:
    """Lowercases tags and adds the # prefix where it is missing."""
    out = set()
    for tag in tags or []:
        tag = tag.strip().lower()
        if not tag:
            continue
        out.add(tag if tag.startswith("#") else f"#{tag}")
    return out


# ============================================================
# Candidate pool
# ============================================================


def count_ngrams(words: List[str]) -> Dict[str, Dict[str, int]]:
    unigrams: Dict[str, int] = {}
    for w in words:
        if is_valid_word(w):
            unigrams[w] = unigrams.get(w, 0) + 1

    # Pairs must be adjacent in the caption, not just after filtering
    bigrams: Dict[str, int] = {}
    for a, b in zip(words, words[1:]):
        if is_valid_word(a) and is_valid_word(b):
            key = f"{a} {b}"
            bigrams[key] = bigrams.get(key, 0) + 1

    return {"unigrams": unigrams, "bigrams": bigrams}


def build_candidates(
    tokenized: TokenizedText, rng: random.Random
) -> List[HashtagCandidate]:
    grams = count_ngrams(tokenized.words)

    candidates: List[HashtagCandidate] = []
    for term, count in grams["unigrams"].items():
        candidates.append(HashtagCandidate(term=term, score=float(count)))
    for term, count in grams["bigrams"].items():
        candidates.append(HashtagCandidate(term=term, score=count * BIGRAM_WEIGHT))

    for emoji, term in EMOJI_CUES.items():
        occurrences = tokenized.text.count(emoji)
        if occurrences:
            candidates.append(
                HashtagCandidate(term=term, score=occurrences * EMOJI_CUE_SCORE)
            )

    # Jitter reshuffles near-ties between regenerate calls
    for c in candidates:
        c.score += (rng.random() - 0.5) * JITTER_SPREAD

    return sorted(candidates, key=lambda c: c.score, reverse=True)


# ============================================================
# Selection
# ============================================================


def recommend_hashtags(
    tokenized: TokenizedText,
    platform: Platform,
    existing: Set[str],
    exclusions: Set[str],
    rng: random.Random,
) -> List[str]:
    """
    Ranks n-gram and emoji candidates, drops tags already in the caption or
    in the caller's exclusion set, and tops up with general tags.

    Returns an empty list only when every candidate and every general tag is
    excluded; the caller decides whether to reset the pool.
    """
    cap = HASHTAG_CAP[platform]
    out: List[str] = []

    for candidate in build_candidates(tokenized, rng):
        tag = to_hashtag(candidate.term)
        if not tag:
            continue
        if tag in existing or tag in exclusions or tag in out:
            continue
        out.append(tag)
        if len(out) >= cap:
            break

    floor = max(MIN_SUGGESTIONS, cap)
    for general in GENERAL_HASHTAGS:
        if len(out) >= floor:
            break
        if general in existing or general in exclusions or general in out:
            continue
        out.append(general)

    return out


def extend_exclusions(exclusions: Iterable[str], suggestions: Iterable[str]) -> Set[str]:
    """Exclusion set for the next regenerate call."""
    return normalize_tags(exclusions) | normalize_tags(suggestions)
