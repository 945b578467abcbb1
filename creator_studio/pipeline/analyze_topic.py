#!/usr/bin/env python3
"""Headless topic analysis: run the market report and print or save the JSON.

Usage examples:
    creator-studio-analyze --topic 캠핑 --region Japan
    python -m creator_studio.pipeline.analyze_topic --topic "코딩 교육" \
        --output reports/coding.json --provider openrouter
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from creator_studio.analysis.topic_insights import REGIONS, AnalysisError, analyze_topic
from creator_studio.config.settings import SETTINGS
from creator_studio.llms import get_default_client

logger = logging.getLogger(__name__)


def parse_cli(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(description="Analyze a YouTube topic/niche market.")
    parser.add_argument("--topic", required=True, help="Topic or niche to analyze")
    parser.add_argument(
        "--region",
        default=SETTINGS.default_region,
        choices=list(REGIONS.keys()),
        help="Target market region",
    )
    parser.add_argument(
        "--provider",
        default=SETTINGS.llm_provider,
        choices=["gemini", "openrouter"],
        help="LLM provider for the report",
    )
    parser.add_argument("--output", type=Path, help="Write the JSON report here instead of stdout")
    args = parser.parse_args(argv)

    if not args.topic.strip():
        parser.error("--topic must not be blank.")
    if not SETTINGS.api_key_for(args.provider):
        parser.error(f"No API key configured for provider '{args.provider}'.")
    return args


def main(argv: Optional[List[str]] = None) -> int:
    """Run the analysis from the command line."""
    logging.basicConfig(level=logging.INFO)
    args = parse_cli(argv)

    try:
        report = analyze_topic(args.topic, args.region, client=get_default_client(args.provider))
    except AnalysisError as e:
        logger.error("%s", e)
        return 1
    except Exception as e:
        logger.error("Analysis failed: %s", e)
        return 1

    payload = report.to_json()
    if args.output is not None:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(payload, encoding="utf-8")
        logger.info("Saved report → %s", args.output)
    else:
        sys.stdout.write(payload + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
