"""
WER Tools - Shared entry points for transcript scoring.

Re-exports the engine functions used by the service and scripts, and runs a
small command-line scorer:

    python wer_tools.py "the cat sat" "the cat sat down"
    python wer_tools.py hyp.txt ref.txt --files --html
"""
import argparse
import sys
from pathlib import Path

from wer_core.alignment import align_words, txt_preprocess, split_words
from wer_core.asr import transcribe_audio
from wer_core.models import InvariantViolation
from wer_core.scoring import get_summaries, get_wer, score_transcript


__all__ = [
    "align_words",
    "txt_preprocess",
    "split_words",
    "transcribe_audio",
    "get_summaries",
    "get_wer",
    "score_transcript",
    "main",
]


def _read_text(value, from_file):
    if not from_file:
        return value
    return Path(value).read_text(encoding="utf-8")


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Score a hypothesis transcript against a reference transcript."
    )
    parser.add_argument("hypothesis", help="Recognizer output (text, or a path with --files)")
    parser.add_argument("reference", help="Ground-truth text (text, or a path with --files)")
    parser.add_argument("--files", action="store_true", help="Treat both arguments as file paths")
    parser.add_argument("--html", action="store_true", help="Also print the highlighted diff")
    args = parser.parse_args(argv)

    try:
        hypothesis = _read_text(args.hypothesis, args.files)
        reference = _read_text(args.reference, args.files)
    except OSError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    result = score_transcript(hypothesis, reference)
    if isinstance(result, InvariantViolation):
        print(f"ERROR: WER calculation mistake: {result.describe()}", file=sys.stderr)
        return 1

    print(result.summary)
    print(result.details)
    if args.html:
        print(result.html)
    return 0


if __name__ == "__main__":
    sys.exit(main())
