import argparse
import json
import os
import sys

from .advice import build_recommendations
from .extractors import extract_text_from_path
from .hashtags import extend_exclusions, normalize_tags
from .lexicon import PLATFORMS, SAMPLE_CAPTIONS
from .pipeline import analyze, synthesize_variants


def _add_input_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--text", type=str, help="Caption text to analyze")
    parser.add_argument(
        "--file",
        type=str,
        help="Path to a .txt, .pdf or image file to read the caption from",
    )
    parser.add_argument(
        "--sample",
        type=str,
        choices=sorted(SAMPLE_CAPTIONS),
        help="Use one of the built-in sample captions",
    )
    parser.add_argument(
        "--platform",
        type=str,
        choices=PLATFORMS,
        default=os.environ.get("CAPTION_ANALYZER_PLATFORM", "twitter"),
        help="Target platform (default: $CAPTION_ANALYZER_PLATFORM or twitter)",
    )
    parser.add_argument(
        "--exclude",
        type=str,
        action="append",
        help="Hashtags to leave out of suggestions (repeatable, comma separated)",
    )
    parser.add_argument(
        "--seed", type=int, help="Seed for hashtag tie-break jitter (reproducible runs)"
    )


def _load_text(args) -> str:
    if args.text:
        return args.text
    if args.sample:
        return SAMPLE_CAPTIONS[args.sample]
    if args.file:
        print(f"[Extract] Reading {args.file}...", file=sys.stderr)
        return extract_text_from_path(args.file)
    return ""


def _parse_exclusions(values) -> set:
    tags = []
    for v in values or []:
        tags.extend([x.strip() for x in v.split(",") if x.strip()])
    return normalize_tags(tags)


def _emit(payload: str, output: str | None) -> None:
    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(payload)
        print(f"Saved output to {output}")
    else:
        print(payload)


def main():
    parser = argparse.ArgumentParser(
        description="Social Media Caption Analyzer — scores, hashtags and rewrites"
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Command: analyze
    ana_parser = subparsers.add_parser(
        "analyze", help="Score a caption and suggest hashtags"
    )
    _add_input_args(ana_parser)
    ana_parser.add_argument(
        "--variants",
        action="store_true",
        help="Include the concise / benefit / list rewrites",
    )
    ana_parser.add_argument(
        "--tips", action="store_true", help="Include improvement recommendations"
    )
    ana_parser.add_argument(
        "--output", type=str, help="Path to save JSON analysis output (optional)"
    )

    # Command: hashtags (regenerate loop)
    tag_parser = subparsers.add_parser(
        "hashtags", help="Suggest hashtags, optionally regenerating several rounds"
    )
    _add_input_args(tag_parser)
    tag_parser.add_argument(
        "--rounds",
        type=int,
        default=1,
        help="Number of regenerate rounds, each excluding earlier suggestions",
    )

    # Command: variants
    var_parser = subparsers.add_parser(
        "variants", help="Rewrite a caption into three platform-tuned variants"
    )
    _add_input_args(var_parser)
    var_parser.add_argument(
        "--output", type=str, help="Path to save JSON output (optional)"
    )

    # Command: extract
    ext_parser = subparsers.add_parser(
        "extract", help="Extract caption text from a PDF or image (no analysis)"
    )
    ext_parser.add_argument("--file", type=str, required=True, help="Path to the file")

    # Command: samples
    subparsers.add_parser("samples", help="List the built-in sample captions")

    args = parser.parse_args()

    if args.command == "extract":
        try:
            text = extract_text_from_path(args.file)
        except Exception as e:
            print(f"Extraction failed: {e}", file=sys.stderr)
            sys.exit(1)
        if not text:
            print(
                "No text found. Try another file or paste the text.", file=sys.stderr
            )
            sys.exit(1)
        print(text)

    elif args.command == "samples":
        for label, text in SAMPLE_CAPTIONS.items():
            print(f"{label}:\n{text}\n")

    elif args.command in ("analyze", "hashtags", "variants"):
        try:
            text = _load_text(args).strip()
        except Exception as e:
            print(f"Extraction failed: {e}", file=sys.stderr)
            sys.exit(1)

        if not text:
            if args.file and not (args.text or args.sample):
                print(
                    "No text found. Try another file or paste the text.",
                    file=sys.stderr,
                )
            else:
                print(
                    "Error: Must provide caption text via --text, --file or --sample",
                    file=sys.stderr,
                )
            sys.exit(1)

        exclusions = _parse_exclusions(args.exclude)

        try:
            if args.command == "analyze":
                result = analyze(text, args.platform, exclusions, nonce=args.seed)
                payload = {"analysis": result.model_dump()}
                if args.variants:
                    variants = synthesize_variants(text, args.platform, result)
                    payload["variants"] = variants.model_dump()
                if args.tips:
                    payload["tips"] = build_recommendations(result)
                _emit(json.dumps(payload, indent=2, ensure_ascii=False), args.output)

            elif args.command == "hashtags":
                for i in range(max(1, args.rounds)):
                    nonce = None if args.seed is None else args.seed + i
                    result = analyze(text, args.platform, exclusions, nonce=nonce)
                    if result.poolReset:
                        print("No more new tags — we reset the pool.", file=sys.stderr)
                        exclusions = set()
                    print(" ".join(result.hashtagSuggestions))
                    exclusions = extend_exclusions(exclusions, result.hashtagSuggestions)

            else:
                result = analyze(text, args.platform, exclusions, nonce=args.seed)
                variants = synthesize_variants(text, args.platform, result)
                _emit(variants.model_dump_json(indent=2), args.output)

        except Exception as e:
            print(f"Analysis failed: {e}", file=sys.stderr)
            sys.exit(1)

    else:
        parser.print_help()


if __name__ == "__main__":
    main()
