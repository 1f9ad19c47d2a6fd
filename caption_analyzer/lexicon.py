"""
Static tables used by the scorer, hashtag recommender and variant templates.
Kept as plain data so they can be swapped in tests without touching the
algorithms.
"""

import re
from typing import Dict, List

PLATFORMS = ["twitter", "instagram", "tiktok", "youtube", "linkedin"]

# ============================================================
# Tokenizing
# ============================================================

LINK_REGEX = re.compile(r"https?://\S+")
NON_TOKEN_CHARS = re.compile(r"[^a-z0-9#@\s]")
SENTENCE_SPLIT = re.compile(r"[.!?]+")

# ============================================================
# Sentiment
# ============================================================

POSITIVE_WORDS = {
    "great",
    "amazing",
    "love",
    "win",
    "wow",
    "good",
    "awesome",
    "best",
    "excited",
    "happy",
    "success",
    "ready",
    "incredible",
}

NEGATIVE_WORDS = {
    "bad",
    "hate",
    "problem",
    "fail",
    "sad",
    "angry",
    "worst",
    "bug",
    "issue",
    "late",
    "slow",
}

# Emoticons block U+1F600..U+1F64F plus ✨ 🚀 🔥 💥 💯 🥳 😊 😍 👍 👏
POSITIVE_EMOJI = re.compile(
    "[\U0001F600-\U0001F64F\u2728\U0001F680\U0001F525\U0001F4A5\U0001F4AF"
    "\U0001F973\U0001F60A\U0001F60D\U0001F44D\U0001F44F]"
)
EXCLAMATION_RUN = re.compile(r"!+")

# ============================================================
# Call-to-action
# ============================================================

# No word boundaries: "like" also hits "likes", "try" hits "entry".
CTA_REGEX = re.compile(
    r"(join|sign up|comment|like|share|retweet|follow|subscribe|download|try)",
    re.IGNORECASE,
)

# ============================================================
# Keywords & hashtags
# ============================================================

STOPWORDS = {
    "the",
    "a",
    "an",
    "and",
    "or",
    "but",
    "if",
    "in",
    "on",
    "for",
    "with",
    "to",
    "of",
    "at",
    "by",
    "from",
    "as",
    "is",
    "it",
    "this",
    "that",
    "we",
    "you",
    "our",
    "your",
    "be",
    "are",
    "was",
    "were",
    "us",
}

# Generic or spammy terms that never make a useful hashtag
NOISE_WORDS = {
    "http",
    "https",
    "www",
    "com",
    "views",
    "likes",
    "subscribers",
    "subscribe",
    "channel",
    "video",
    "click",
    "here",
    "watch",
    "today",
    "live",
    "breaking",
    "news",
    "2024",
    "2025",
    "official",
    "new",
    "latest",
    "link",
    "bio",
    "follow",
    "pls",
    "please",
}

EMOJI_CUES: Dict[str, str] = {
    "\U0001F680": "launch",  # 🚀
    "\U0001F525": "trending",  # 🔥
    "\u2728": "tips",  # ✨
    "\U0001F3AF": "goals",  # 🎯
    "\U0001F4C8": "growth",  # 📈
}

GENERAL_HASHTAGS: List[str] = ["#growth", "#marketing", "#strategy", "#content"]

MAX_SUGGESTIONS = 6
MIN_SUGGESTIONS = 3
MAX_KEYWORDS = 8

BIGRAM_WEIGHT = 2.0
EMOJI_CUE_SCORE = 1.2
JITTER_SPREAD = 0.1  # scores move by at most +/- half of this

# ============================================================
# Per-platform constants
# ============================================================

HASHTAG_CAP: Dict[str, int] = {
    "twitter": 3,
    "instagram": 7,
    "tiktok": 5,
    "youtube": 5,
    "linkedin": 5,
}

TARGET_WORD_COUNT: Dict[str, int] = {
    "twitter": 120,
    "instagram": 140,
    "tiktok": 120,
    "youtube": 200,
    "linkedin": 180,
}

BEST_TIME: Dict[str, str] = {
    "twitter": "Tue–Thu 9–11am",
    "instagram": "Mon–Fri 11am–1pm",
    "tiktok": "Tue–Thu 6–9pm",
    "youtube": "Thu–Sun 12–3pm",
    "linkedin": "Tue–Thu 8–10am",
}

CTA_PHRASE: Dict[str, str] = {
    "twitter": "Comment 'yes' for details",
    "instagram": "Save this and share with a friend",
    "tiktok": "Follow for more and drop a 'yes' if you want the link",
    "youtube": "Subscribe for more and comment your thoughts",
    "linkedin": "Comment 'interested' for details",
}

# ============================================================
# Variant templates
# ============================================================

HOOK_EMOJI = "\U0001F680"  # 🚀
DEFAULT_KEYWORDS = ["results", "growth", "tips"]

# ============================================================
# Sample captions (CLI --sample)
# ============================================================

SAMPLE_CAPTIONS: Dict[str, str] = {
    "launch-tease": (
        "We just dropped something big \U0001F680 Can you guess what's coming? "
        "Early birds get access first — comment 'ready' to join the waitlist! "
        "#startup #productlaunch"
    ),
    "value-post": (
        "5 hooks that boosted our engagement by 3x:\n"
        "1) 'You won't believe…'\n"
        "2) 'We made a mistake…'\n"
        "3) 'This saved us $10k'\n"
        "4) 'Stop doing this'\n"
        "5) 'We tested everything' #marketing #growth"
    ),
    "short-quote": "Consistency beats intensity. Show up, even when it's not perfect. \u2728",
}
