from typing import List

from .types import AnalysisResult


def build_recommendations(result: AnalysisResult) -> List[str]:
    """
    Turns an analysis into short, actionable tips. The best-time tip is
    always present so the list is never empty.
    """
    tips: List[str] = []

    if result.sentiment < 60:
        tips.append("Use more positive language or an exciting benefit to lift sentiment.")
    if result.clarity < 70:
        tips.append("Shorten sentences and remove filler words to improve clarity.")
    if result.hashtagDensity < 30:
        tips.append("Add 2–3 specific hashtags to increase discoverability.")
    if result.hashtagDensity > 70:
        tips.append("Reduce the number of hashtags for a cleaner, more focused message.")
    if not result.cta:
        tips.append("Add a clear call-to-action (e.g., “Join the waitlist”, “Subscribe”).")

    length = next((p.value for p in result.radar if p.dimension == "Length"), None)
    if length is not None:
        if length < 60:
            tips.append("Expand the content slightly to provide more context for this platform.")
        elif length > 90:
            tips.append("Trim the content to keep it punchy and within the platform sweet spot.")

    tips.append(f"Post when your audience is most active: {result.bestTime}.")
    return tips
