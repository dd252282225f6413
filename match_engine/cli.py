"""
Command-line runner over JSON data files.

Usage:
    # Positions similar to a job
    python -m match_engine similar job_1 --mode job --limit 5

    # Personalised internships for a candidate (naive Bayes)
    python -m match_engine personalized cand_7 --mode internship --method naive_bayes

    # Screen every applicant to a job
    python -m match_engine screen job_1

    # Single candidate / position preview
    python -m match_engine classify cand_7 job_1

Data comes from MATCH_ENGINE_DATA_DIR (positions.json, candidates.json,
applications.json) unless --data-dir is given.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .engine import MatchEngine
from .errors import NotFoundError
from .models.position import PositionKind
from .settings import EngineSettings
from .stores import InMemoryApplicationStore, InMemoryCandidateStore, InMemoryPositionStore

logger = logging.getLogger(__name__)


def build_engine(data_dir: Path, settings: EngineSettings) -> MatchEngine:
    """Create a MatchEngine over the JSON files in data_dir."""
    return MatchEngine(
        positions=InMemoryPositionStore.from_json(data_dir / "positions.json"),
        candidates=InMemoryCandidateStore.from_json(data_dir / "candidates.json"),
        applications=InMemoryApplicationStore.from_json(data_dir / "applications.json"),
        config=settings.load_engine_config(),
    )


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="match_engine",
        description="Position/candidate matching and ranking",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--data-dir", type=Path, default=None, help="Directory with the JSON data files")
    sub = parser.add_subparsers(dest="command", required=True)

    def add_mode(p):
        p.add_argument(
            "--mode",
            choices=[k.value for k in PositionKind],
            default=PositionKind.JOB.value,
        )

    similar = sub.add_parser("similar", help="Positions similar to a position")
    similar.add_argument("position_id")
    similar.add_argument("--limit", type=int, default=5)
    similar.add_argument("--method", choices=["knn", "feature_similarity"], default="knn")
    add_mode(similar)

    personalized = sub.add_parser("personalized", help="Personalised positions for a candidate")
    personalized.add_argument("candidate_id")
    personalized.add_argument("--limit", type=int, default=10)
    personalized.add_argument("--method", choices=["knn", "naive_bayes"], default="knn")
    add_mode(personalized)

    screen = sub.add_parser("screen", help="Rank all applicants to a position")
    screen.add_argument("position_id")
    add_mode(screen)

    classify = sub.add_parser("classify", help="Fit preview for one candidate and position")
    classify.add_argument("candidate_id")
    classify.add_argument("position_id")
    add_mode(classify)

    return parser


def run(args: argparse.Namespace, engine: MatchEngine):
    mode = PositionKind(args.mode)
    if args.command == "similar":
        results = engine.similar_to(args.position_id, mode, args.limit, args.method)
        return [r.model_dump(mode="json") for r in results]
    if args.command == "personalized":
        return engine.personalized_for(args.candidate_id, mode, args.limit, args.method).model_dump(mode="json")
    if args.command == "screen":
        return engine.screen(args.position_id, mode).model_dump(mode="json")
    return engine.classify_single(args.candidate_id, args.position_id, mode).model_dump(mode="json")


def main(argv: Optional[List[str]] = None) -> int:
    settings = EngineSettings.from_env()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    args = _parser().parse_args(argv)
    try:
        engine = build_engine(args.data_dir or settings.data_dir, settings)
        output = run(args, engine)
    except (NotFoundError, FileNotFoundError) as e:
        logger.error("%s", e)
        return 1
    json.dump(output, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0
