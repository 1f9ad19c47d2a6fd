import re
from typing import List

from .lexicon import CTA_PHRASE, CTA_REGEX, DEFAULT_KEYWORDS, HOOK_EMOJI
from .tokenizer import split_sentences
from .types import AnalysisResult, CaptionVariants, Platform


def build_base(text: str) -> str:
    """First two sentences, re-joined and closed with a period."""
    sentences = split_sentences(text)
    if not sentences:
        return ""
    return ". ".join(sentences[:2]) + "."


def ensure_cta(text: str, platform: Platform) -> str:
    if CTA_REGEX.search(text):
        return text
    return f"{text} {CTA_PHRASE[platform]}."


def with_tags(text: str, suggestions: List[str]) -> str:
    tags = " ".join(suggestions[:3])
    return f"{text} {tags}" if tags else text


def _keyword(result: AnalysisResult, index: int) -> str:
    if index < len(result.keywords):
        return result.keywords[index].term
    return DEFAULT_KEYWORDS[index]


def synthesize_variants(
    text: str, platform: Platform, result: AnalysisResult
) -> CaptionVariants:
    base = build_base(text)
    k1, k2, k3 = (_keyword(result, i) for i in range(3))

    if result.keywords:
        top = result.keywords[0].term
        hook = f"{HOOK_EMOJI} {top[:1].upper() + top[1:]} —"
    else:
        hook = HOOK_EMOJI

    concise = re.sub(r"\s+", " ", f"{hook} {base}").strip()
    benefit = f"Want better {k1}? Here's how we approach {k2}. {base}"
    listed = f"{k1} • {k2} • {k3} — {base}"

    tags = result.hashtagSuggestions
    return CaptionVariants(
        concise=with_tags(ensure_cta(concise, platform), tags),
        benefit=with_tags(ensure_cta(benefit, platform), tags),
        list=with_tags(ensure_cta(listed, platform), tags),
    )


def append_hashtags(text: str, suggestions: List[str]) -> str:
    """The "add to caption" action: suggestions appended after a space."""
    if not suggestions:
        return text
    return f"{text} {' '.join(suggestions)}"
