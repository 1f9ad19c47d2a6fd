from typing import List, Literal
from pydantic import BaseModel, ConfigDict

Platform = Literal["twitter", "instagram", "tiktok", "youtube", "linkedin"]

# ============================================================
# TOKENIZED TEXT — what the tokenizer hands to the scorer
# ============================================================


class TokenizedText(BaseModel):
    text: str  # original, unmodified caption
    tokens: List[str]
    words: List[str]  # tokens without a # or @ prefix
    sentences: List[str]
    hashtags: List[str]
    mentions: List[str]
    links: List[str]

    @property
    def sentence_count(self) -> int:
        return max(1, len(self.sentences))


# ============================================================
# SCORES — output of the deterministic scorer
# ============================================================


class RadarPoint(BaseModel):
    dimension: Literal["Emotion", "Clarity", "Hashtags", "CTA", "Length"]
    value: int


class Keyword(BaseModel):
    term: str
    frequency: int


class CaptionScores(BaseModel):
    platform: Platform
    wordCount: int
    sentiment: int
    clarity: int
    hashtagCount: int
    mentionCount: int
    linkCount: int
    hashtagDensity: int
    cta: bool
    lengthFit: int
    engagement: int
    radar: List[RadarPoint]
    keywords: List[Keyword]  # top 8 by frequency
    bestTime: str


# ============================================================
# HASHTAG RANKING
# ============================================================


class HashtagCandidate(BaseModel):
    term: str
    score: float


# ============================================================
# FULL ANALYSIS — one analyze() call
# ============================================================


class AnalysisResult(CaptionScores):
    model_config = ConfigDict(frozen=True)

    hashtagSuggestions: List[str]
    poolReset: bool = False  # exclusions were dropped because nothing new was left


class CaptionVariants(BaseModel):
    concise: str
    benefit: str
    list: str
