from typing import List

from .lexicon import LINK_REGEX, NON_TOKEN_CHARS, SENTENCE_SPLIT
from .types import TokenizedText


def split_tokens(text: str) -> List[str]:
    """
    Lowercases, drops links and everything except letters, digits, # and @,
    then splits on whitespace.
    """
    normalized = LINK_REGEX.sub(" ", text.lower())
    normalized = NON_TOKEN_CHARS.sub(" ", normalized)
    return [t for t in normalized.split() if t]


def split_sentences(text: str) -> List[str]:
    return [s.strip() for s in SENTENCE_SPLIT.split(text) if s.strip()]


def tokenize(text: str) -> TokenizedText:
    text = text or ""
    tokens = split_tokens(text)

    return TokenizedText(
        text=text,
        tokens=tokens,
        words=[t for t in tokens if not t.startswith("#") and not t.startswith("@")],
        sentences=split_sentences(text),
        hashtags=[t for t in tokens if t.startswith("#")],
        mentions=[t for t in tokens if t.startswith("@")],
        links=LINK_REGEX.findall(text),
    )
