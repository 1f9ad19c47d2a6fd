import random
from typing import Iterable, Optional

from .hashtags import existing_tags, normalize_tags, recommend_hashtags
from .lexicon import MAX_SUGGESTIONS, PLATFORMS
from .scorer import score_caption
from .tokenizer import tokenize
from .types import AnalysisResult, CaptionVariants, Platform
from .variants import synthesize_variants as _synthesize


def _check_platform(platform: str) -> None:
    if platform not in PLATFORMS:
        raise ValueError(
            f"Unknown platform '{platform}', expected one of: {', '.join(PLATFORMS)}"
        )


def analyze(
    text: str,
    platform: Platform,
    exclusion_tags: Optional[Iterable[str]] = None,
    nonce: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> AnalysisResult:
    """
    Tokenizes, scores and recommends hashtags for one caption.

    The engine keeps no state between calls. To regenerate hashtags the caller
    feeds back the tags it has already shown via exclusion_tags, and can pass
    a nonce (e.g. a regenerate counter) to seed the tie-break jitter. An
    explicit rng takes precedence over the nonce.
    """
    _check_platform(platform)
    if rng is None:
        rng = random.Random(nonce) if nonce is not None else random.Random()

    tokenized = tokenize(text)
    scores = score_caption(tokenized, platform)

    existing = existing_tags(tokenized)
    exclusions = normalize_tags(exclusion_tags)

    suggestions = recommend_hashtags(tokenized, platform, existing, exclusions, rng)
    pool_reset = False
    if not suggestions and exclusions:
        # Nothing new left; the caller learns about the reset via poolReset
        suggestions = recommend_hashtags(tokenized, platform, existing, set(), rng)
        pool_reset = True

    return AnalysisResult(
        **scores.model_dump(),
        hashtagSuggestions=suggestions[:MAX_SUGGESTIONS],
        poolReset=pool_reset,
    )


def synthesize_variants(
    text: str, platform: Platform, result: AnalysisResult
) -> CaptionVariants:
    _check_platform(platform)
    return _synthesize(text, platform, result)
