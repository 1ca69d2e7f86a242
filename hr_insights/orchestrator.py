# hr_insights/orchestrator.py
"""
Report run orchestrator.
Runs Load → Validate → Report → Export over one snapshot of the employee table.
"""

import argparse
import logging
import sys
from typing import Any, Dict, List, Optional

from hr_insights import config
from hr_insights.common.exceptions import AnalyticsError
from hr_insights.common.logging import configure_logging, create_run_log_file
from hr_insights.dataset.loader import load_dataset
from hr_insights.dataset.snapshot import EmployeeDataset
from hr_insights.dataset.validator import summarize_dataset
from hr_insights.reports.catalogue import REPORTS
from hr_insights.reports.runner import export_results, run_reports

logger = logging.getLogger(__name__)


def run_insights(
    csv_path: Optional[str] = None,
    reports: Optional[List[str]] = None,
    output_dir: Optional[str] = None,
    fmt: Optional[str] = None,
    on_invalid: Optional[str] = None,
    dataset: Optional[EmployeeDataset] = None
) -> Dict[str, Any]:
    """
    Run a full report pass.

    Pipeline Flow:
        Load snapshot → Validate → Build reports → Export (optional)

    Args:
        csv_path: CSV export to read instead of the database table
        reports: Report names to build (default: whole catalogue)
        output_dir: Directory to export report files to; nothing is written if None
        fmt: Export format, "csv" or "json" (default from config)
        on_invalid: "skip" or "abort" for malformed records (default from config)
        dataset: Already loaded snapshot; skips the load step

    Returns:
        dict: Results from each step
    """
    results: Dict[str, Any] = {
        "dataset": None,
        "validation": None,
        "reports": None,
        "exported": [],
    }

    try:
        # STEP 1: LOAD SNAPSHOT
        logger.info("")
        logger.info("=" * 70)
        logger.info("  STEP 1: LOADING EMPLOYEE SNAPSHOT")
        logger.info("=" * 70)

        if dataset is None:
            dataset = load_dataset(csv_path, on_invalid=on_invalid)
        results["dataset"] = dataset

        logger.info(f"Load complete: {len(dataset)} records, {dataset.skipped} skipped")

        # STEP 2: VALIDATE SNAPSHOT
        logger.info("")
        logger.info("=" * 70)
        logger.info("  STEP 2: VALIDATING SNAPSHOT")
        logger.info("=" * 70)

        validation = summarize_dataset(dataset)
        results["validation"] = validation
        if not validation.passed:
            logger.warning("Snapshot validation found issues; global reports may fail")

        # STEP 3: BUILD REPORTS
        logger.info("")
        logger.info("=" * 70)
        logger.info("  STEP 3: BUILDING REPORTS")
        logger.info("=" * 70)

        report_results = run_reports(dataset, reports)
        results["reports"] = report_results

        # STEP 4: EXPORT
        if output_dir:
            logger.info("")
            logger.info("=" * 70)
            logger.info("  STEP 4: EXPORTING REPORTS")
            logger.info("=" * 70)
            results["exported"] = export_results(report_results, output_dir, fmt or config.REPORT_FORMAT)

        logger.info("")
        logger.info("=" * 70)
        logger.info(f"  REPORT RUN COMPLETE: {len(report_results)} reports")
        logger.info("=" * 70)

        return results

    except AnalyticsError as e:
        logger.error(f"REPORT RUN FAILED: {e}")
        raise


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hr-insights",
        description="Build HR dashboard reports from the EmployeeData table",
        formatter_class=argparse.RawTextHelpFormatter
    )
    parser.add_argument(
        "-c", "--csv",
        default=None,
        help="CSV export of the EmployeeData table (default: read DATABASE_URL)"
    )
    parser.add_argument(
        "-r", "--report",
        action="append",
        dest="reports",
        help="Report name to build; repeat for several (default: all)"
    )
    parser.add_argument(
        "-o", "--output-dir",
        default=config.REPORT_OUTPUT_DIR,
        help=f"Directory for exported reports (default: {config.REPORT_OUTPUT_DIR})"
    )
    parser.add_argument(
        "-f", "--format",
        choices=["csv", "json"],
        default=config.REPORT_FORMAT,
        help="Export format"
    )
    parser.add_argument(
        "--on-invalid",
        choices=["skip", "abort"],
        default=config.ON_INVALID_RECORD,
        help="What to do with malformed records"
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List available reports and exit"
    )
    parser.add_argument(
        "--log-file",
        action="store_true",
        help="Also write a timestamped log file to LOG_DIR (default: logs)"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line entry point."""
    args = build_parser().parse_args(argv)

    log_file = create_run_log_file(config.LOG_DIR or "logs") if args.log_file else None
    configure_logging(level=config.LOG_LEVEL, log_file=log_file)

    if args.list:
        for definition in REPORTS.values():
            print(f"{definition.name:<40} {definition.title}")
        return 0

    try:
        run_insights(
            csv_path=args.csv,
            reports=args.reports,
            output_dir=args.output_dir,
            fmt=args.format,
            on_invalid=args.on_invalid,
        )
    except AnalyticsError:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
