"""
Simple CLI tool for trying phrases against the phrase validation rules

Usage:
    python scripts/validate_phrase.py "hello world" "the cat sat the cat sat the cat"
    python scripts/validate_phrase.py            # interactive mode
"""

import sys
import logging
from pathlib import Path
from typing import List

# Add src to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from src.services.common.service_factory import ServiceFactory
from src.services.phrase_validation import EvaluationError, format_result_text
from src.services.phrase_validation.config import LOG_FORMAT, LOG_DATE_FORMAT, LOG_LEVEL

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_ERROR = 2


def print_header(text):
    """Print formatted header"""
    print("\n" + "=" * 60)
    print(f"  {text}")
    print("=" * 60)


def check_phrase(phrase: str) -> int:
    """Validate one phrase, print its report and return its exit code"""
    evaluator = ServiceFactory.get_phrase_evaluator()
    print(f"\n  Phrase: {phrase!r}")

    try:
        result = evaluator.validate(phrase)
    except EvaluationError as e:
        print(f"  Error: {e}")
        return EXIT_ERROR

    print(format_result_text(result))
    return EXIT_VALID if result.is_valid else EXIT_INVALID


def check_phrases(phrases: List[str]) -> int:
    """Validate every phrase; the worst outcome decides the exit code"""
    print_header("PHRASE VALIDATION")
    return max(check_phrase(phrase) for phrase in phrases)


def interactive_loop() -> int:
    print_header("PHRASE VALIDATION TOOL")
    evaluator = ServiceFactory.get_phrase_evaluator()
    print("\nActive rules:")
    for name in evaluator.rule_names:
        print(f"  - {name}")
    print("\nEnter a phrase to validate (empty line to exit).")

    while True:
        phrase = input("\nPhrase: ")
        if phrase == "":
            print("\nExiting. Goodbye!")
            return EXIT_VALID
        check_phrase(phrase)


def main(argv: List[str]) -> int:
    logging.basicConfig(
        level=LOG_LEVEL,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        handlers=[logging.StreamHandler()],
    )

    if argv:
        return check_phrases(argv)
    return interactive_loop()


if __name__ == "__main__":
    try:
        sys.exit(main(sys.argv[1:]))
    except KeyboardInterrupt:
        print("\n\nInterrupted by user. Exiting...")
        sys.exit(0)
