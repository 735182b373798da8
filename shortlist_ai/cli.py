"""
Command-line entry point: shortlist a job from a JSON manifest, or extract features from one CV.
Persistence is in-memory for the duration of the command; documents come from the upload directory.
"""

import argparse
import csv
import io
import json
import sys
from typing import List, Optional

from pydantic import ValidationError

from shortlist_ai.config import DEFAULT_TOP_N, UPLOAD_DIR
from shortlist_ai.errors import ShortlistError
from shortlist_ai.ranking.shortlist_service import ShortlistService
from shortlist_ai.schemas.job_criteria import JobCriteria
from shortlist_ai.schemas.records import Application, Job
from shortlist_ai.schemas.shortlist_result import ShortlistResult
from shortlist_ai.services.document_store import LocalDocumentStore
from shortlist_ai.services.repositories import (
    InMemoryApplicationRepository,
    InMemoryCriteriaRepository,
    InMemoryJobRepository,
    InMemoryProfileRepository,
)
from shortlist_ai.utils.logger import get_logger

logger = get_logger(__name__)

CSV_HEADERS = ["rank", "application_id", "applicant_name", "applicant_email", "computed_score", "shortlisted", "reason"]


def build_service(manifest: dict, upload_dir: str) -> ShortlistService:
    """
    Build an in-memory service from a manifest:
    {"job": {...}, "criteria": {...} (optional), "applications": [{...}, ...]}
    """
    job = Job.model_validate(manifest["job"])
    criteria_repo = InMemoryCriteriaRepository()
    if manifest.get("criteria"):
        criteria_repo.save(JobCriteria.model_validate({**manifest["criteria"], "job_id": job.id}))
    applications = [
        Application.model_validate({**a, "job_id": a.get("job_id", job.id)})
        for a in manifest.get("applications") or []
    ]
    return ShortlistService(
        jobs=InMemoryJobRepository([job]),
        applications=InMemoryApplicationRepository(applications),
        criteria=criteria_repo,
        profiles=InMemoryProfileRepository(),
        store=LocalDocumentStore(upload_dir),
    )


def export_csv(results: List[ShortlistResult]) -> str:
    """Ranked results as CSV text."""
    out = io.StringIO()
    writer = csv.writer(out)
    writer.writerow(CSV_HEADERS)
    for rank, r in enumerate(results, start=1):
        writer.writerow([
            rank,
            r.application_id,
            r.applicant_name,
            r.applicant_email,
            "%.2f" % r.computed_score,
            r.shortlisted,
            r.reason,
        ])
    return out.getvalue()


def _format_table(results: List[ShortlistResult]) -> str:
    lines = []
    for rank, r in enumerate(results, start=1):
        mark = "*" if r.shortlisted else " "
        lines.append(f"{mark} {rank:>3}. {r.computed_score:6.2f}  {r.applicant_name} <{r.applicant_email}>  {r.reason}")
    return "\n".join(lines)


def _cmd_shortlist(args: argparse.Namespace) -> int:
    with open(args.manifest, "r", encoding="utf-8") as f:
        manifest = json.load(f)
    service = build_service(manifest, args.upload_dir)
    job_id = manifest["job"]["id"]
    results = service.shortlist(job_id, args.top_n)
    if args.format == "json":
        print(json.dumps([r.model_dump() for r in results], indent=2))
    elif args.format == "csv":
        sys.stdout.write(export_csv(results))
    else:
        print(_format_table(results))
    return 0


def _cmd_extract(args: argparse.Namespace) -> int:
    service = ShortlistService(
        jobs=InMemoryJobRepository(),
        applications=InMemoryApplicationRepository(),
        criteria=InMemoryCriteriaRepository(),
        profiles=InMemoryProfileRepository(),
        store=LocalDocumentStore(args.upload_dir),
    )
    profile = service.extract_features(args.file)
    exclude = None if args.include_text else {"raw_text"}
    print(json.dumps(profile.model_dump(mode="json", exclude=exclude), indent=2))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        description="CV Shortlist AI - rank applicants for a job from their CVs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Shortlist the top 5 applicants described in a manifest
  python run_shortlist.py shortlist --manifest job.json --top-n 5

  # Show what is extracted from one CV
  python run_shortlist.py extract --file alice_cv.pdf
        """,
    )
    parser.add_argument(
        "--upload-dir",
        type=str,
        default=UPLOAD_DIR,
        help=f"Directory holding uploaded CVs (default: {UPLOAD_DIR})",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    shortlist_parser = subparsers.add_parser("shortlist", help="Score and shortlist a job's applications")
    shortlist_parser.add_argument("--manifest", type=str, required=True, help="JSON file with job and applications")
    shortlist_parser.add_argument("--top-n", type=int, default=DEFAULT_TOP_N, help="How many to shortlist")
    shortlist_parser.add_argument("--format", choices=("table", "json", "csv"), default="table")
    shortlist_parser.set_defaults(func=_cmd_shortlist)

    extract_parser = subparsers.add_parser("extract", help="Extract features from one stored CV")
    extract_parser.add_argument("--file", type=str, required=True, help="CV filename inside the upload dir")
    extract_parser.add_argument("--include-text", action="store_true", help="Include the raw extracted text")
    extract_parser.set_defaults(func=_cmd_extract)

    args = parser.parse_args(argv)
    try:
        return args.func(args)
    except (ShortlistError, ValidationError, KeyError, OSError, json.JSONDecodeError) as e:
        logger.error("%s failed: %s", args.command, e)
        return 1
