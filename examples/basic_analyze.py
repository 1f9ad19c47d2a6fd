import random

from caption_analyzer.advice import build_recommendations
from caption_analyzer.hashtags import extend_exclusions
from caption_analyzer.lexicon import SAMPLE_CAPTIONS
from caption_analyzer.pipeline import analyze, synthesize_variants


def main():
    # Score a sample caption, then regenerate hashtags twice the way an
    # interactive client would, keeping the exclusion set on our side
    text = SAMPLE_CAPTIONS["launch-tease"]
    rng = random.Random(7)

    print("Analyzing sample caption for Instagram...")
    result = analyze(text, "instagram", rng=rng)
    print(result.model_dump_json(indent=2))

    exclusions = set()
    for round_no in range(2):
        exclusions = extend_exclusions(exclusions, result.hashtagSuggestions)
        result = analyze(text, "instagram", exclusions, rng=rng)
        print(f"Regenerate #{round_no + 1}: {' '.join(result.hashtagSuggestions)}")

    variants = synthesize_variants(text, "instagram", result)
    print(variants.model_dump_json(indent=2))

    for tip in build_recommendations(result):
        print(f"- {tip}")


if __name__ == "__main__":
    main()
