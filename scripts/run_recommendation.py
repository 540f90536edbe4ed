#!/usr/bin/env python3
"""
Travel Recommendation Smoke Script

Runs the recommendation pipeline once against the live Groq API without
starting the HTTP server or the frontend.

Usage:
    python scripts/run_recommendation.py
    python scripts/run_recommendation.py --answer "Mood?=Relaxed" --answer "Climate?=Tropical/Hot"
    python scripts/run_recommendation.py --catalog-defaults --debug
"""

import argparse
import asyncio
import json
import logging
import os
import sys
from typing import List

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from travel_backend.config import Settings
from travel_backend.schemas.recommendations import Answer
from travel_backend.services.completion_client import GroqCompletionClient
from travel_backend.services.errors import DecodeError, RecommendationError, RemoteError
from travel_backend.services.question_catalog import get_questions
from travel_backend.services.recommendation_service import generate_recommendation


# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def parse_answer(raw: str) -> Answer:
    """Parse a 'question=answer' command-line pair."""
    question, separator, answer = raw.partition("=")
    if not separator:
        raise argparse.ArgumentTypeError(f"expected QUESTION=ANSWER, got {raw!r}")
    return Answer(question=question.strip(), answer=answer.strip())


def catalog_default_answers() -> List[Answer]:
    """Answer every catalog question with its first option."""
    return [
        Answer(question=question.question, answer=question.options[0])
        for question in get_questions()
    ]


async def run_once(answers: List[Answer]) -> int:
    """Run the pipeline and print the record. Returns a process exit code."""
    settings = Settings()

    if not settings.GROQ_API_KEY:
        print("\n⚠️  ERROR: GROQ_API_KEY environment variable not set!")
        print("   Please set it in your .env file or export it:")
        print("   export GROQ_API_KEY=your-groq-api-key")
        return 1

    print("\n" + "=" * 60)
    print(f"TRAVEL RECOMMENDATION ({settings.GROQ_MODEL})")
    print("=" * 60)
    for answer in answers:
        print(f"  {answer.question}: {answer.answer}")
    print("\nCalling Groq API...")

    provider = GroqCompletionClient.from_settings(settings)

    try:
        recommendation = await generate_recommendation(answers, provider)
    except RemoteError as e:
        print(f"\n❌ Provider returned HTTP {e.status_code}")
        print(e.body)
        return 1
    except DecodeError as e:
        print(f"\n❌ Could not decode model output: {e.cause}")
        print(e.content)
        return 1
    except RecommendationError as e:
        print(f"\n❌ {type(e).__name__}: {e}")
        return 1

    print(json.dumps(recommendation.model_dump(by_alias=True), indent=2, ensure_ascii=False))
    return 0


def main():
    parser = argparse.ArgumentParser(
        description="Run the travel recommendation pipeline once",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--answer", "-a",
        type=parse_answer,
        action="append",
        default=[],
        help="Answered question as QUESTION=ANSWER (repeatable)"
    )
    parser.add_argument(
        "--catalog-defaults",
        action="store_true",
        help="Answer every catalog question with its first option"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )

    args = parser.parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    answers = list(args.answer)
    if args.catalog_defaults or not answers:
        answers = catalog_default_answers() + answers

    sys.exit(asyncio.run(run_once(answers)))


if __name__ == "__main__":
    main()
