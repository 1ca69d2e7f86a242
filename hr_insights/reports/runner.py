# hr_insights/reports/runner.py
"""
Report Runner - builds named reports from a snapshot and exports their tables.
"""

import json
import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

import pandas as pd

from hr_insights.dataset.snapshot import EmployeeDataset
from hr_insights.reports.catalogue import get_report, report_names

logger = logging.getLogger(__name__)

EXPORT_FORMATS = ("csv", "json")


@dataclass
class ReportResult:
    """One report table plus the context needed to interpret it."""
    name: str
    title: str
    section: str
    table: pd.DataFrame
    skipped_records: int = 0
    source: str = ""
    generated_at: datetime = field(default_factory=datetime.now)

    @property
    def columns(self) -> List[str]:
        return [str(col) for col in self.table.columns]

    def to_records(self) -> List[Dict[str, Any]]:
        """Rows as plain-Python dicts, ready for JSON serialization."""
        as_objects = self.table.astype(object)
        rows = as_objects.where(pd.notna(as_objects), None).to_dict(orient="records")
        return [{key: _native(value) for key, value in row.items()} for row in rows]

    def to_dict(self, include_generated_at: bool = True) -> Dict[str, Any]:
        """
        JSON-ready form of the result.

        generated_at is the wall-clock build time, so two runs over the same
        snapshot differ only in that field. Leave it out for reproducible output.
        """
        payload = {
            "name": self.name,
            "title": self.title,
            "section": self.section,
            "source": self.source,
            "skipped_records": self.skipped_records,
        }
        if include_generated_at:
            payload["generated_at"] = self.generated_at.isoformat(timespec="seconds")
        payload["columns"] = self.columns
        payload["rows"] = self.to_records()
        return payload


def _native(value):
    # numpy scalars expose item(); plain Python values pass through
    return value.item() if hasattr(value, "item") else value


def run_report(dataset: EmployeeDataset, name: str) -> ReportResult:
    """
    Build one named report.

    Raises:
        UnknownReportError: If the name is not in the catalogue
        EmptyDatasetError: For global aggregates over an empty snapshot
    """
    definition = get_report(name)
    table = definition.run(dataset.frame)
    logger.info(f"  {name}: {len(table)} rows")
    return ReportResult(
        name=definition.name,
        title=definition.title,
        section=definition.section,
        table=table,
        skipped_records=dataset.skipped,
        source=dataset.source,
    )


def run_reports(dataset: EmployeeDataset, names: Optional[Iterable[str]] = None) -> Dict[str, ReportResult]:
    """
    Build several reports (default: the whole catalogue) from the same snapshot.

    Returns:
        dict: Report name -> ReportResult, in the order requested
    """
    names = list(names) if names is not None else report_names()
    logger.info(f"Running {len(names)} reports on {len(dataset)} records from {dataset.source}")
    if dataset.skipped:
        logger.warning(f"{dataset.skipped} malformed records were skipped and are not in any report")

    return {name: run_report(dataset, name) for name in names}


def export_results(
    results: Dict[str, ReportResult],
    output_dir: str,
    fmt: str = "csv",
    include_generated_at: bool = True
) -> List[str]:
    """
    Write one file per report into output_dir.

    Args:
        results: Output of run_reports
        output_dir: Directory to write into (created if missing)
        fmt: "csv" or "json"
        include_generated_at: Stamp JSON files with the build time; turn off
            for byte-identical exports of the same snapshot

    Returns:
        List of written file paths
    """
    fmt = fmt.lower()
    if fmt not in EXPORT_FORMATS:
        raise ValueError(f"Export format must be one of {EXPORT_FORMATS}, got '{fmt}'")

    out_dir = Path(output_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    written = []
    for name, result in results.items():
        path = out_dir / f"{name}.{fmt}"
        if fmt == "csv":
            result.table.to_csv(path, index=False)
        else:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(result.to_dict(include_generated_at), f, indent=2)
        written.append(str(path))
        logger.info(f"  Exported {name} -> {path}")

    return written
