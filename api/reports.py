# api/reports.py
"""Read-only report endpoints."""

from fastapi import APIRouter, Depends, HTTPException

from api.database import get_dataset
from api.schemas import ReportListResponse, ReportResponse, ReportSummary, SnapshotResponse
from hr_insights.common.exceptions import EmptyDatasetError, EmptyGroupError, UnknownReportError
from hr_insights.dataset.snapshot import EmployeeDataset
from hr_insights.reports.catalogue import REPORTS
from hr_insights.reports.runner import run_report

router = APIRouter(prefix="/reports", tags=["Reports"])


@router.get("", response_model=ReportListResponse)
def list_reports():
    """
    List every report in the catalogue.

    - **name**: Stable name to fetch the report with
    - **section**: Dashboard section the report belongs to
    """
    reports = [
        ReportSummary(
            name=definition.name,
            title=definition.title,
            section=definition.section,
            global_aggregate=definition.global_aggregate,
            order=[list(pair) for pair in definition.order] if definition.order else None,
        )
        for definition in REPORTS.values()
    ]
    return ReportListResponse(total=len(reports), reports=reports)


@router.get("/snapshot", response_model=SnapshotResponse)
def get_snapshot(dataset: EmployeeDataset = Depends(get_dataset)):
    """Describe the employee snapshot the reports are computed from."""
    return SnapshotResponse(
        source=dataset.source,
        loaded_at=dataset.loaded_at,
        records=len(dataset),
        skipped_records=dataset.skipped,
    )


@router.get("/{report_name}", response_model=ReportResponse)
def get_report(report_name: str, dataset: EmployeeDataset = Depends(get_dataset)):
    """
    Build a report by name.

    - **report_name**: One of the names returned by `GET /reports`
    """
    try:
        result = run_report(dataset, report_name)
    except UnknownReportError:
        raise HTTPException(status_code=404, detail=f"Report '{report_name}' not found")
    except (EmptyDatasetError, EmptyGroupError) as e:
        raise HTTPException(status_code=422, detail=e.message)

    return ReportResponse(
        name=result.name,
        title=result.title,
        section=result.section,
        source=result.source,
        generated_at=result.generated_at,
        skipped_records=result.skipped_records,
        row_count=len(result.table),
        columns=result.columns,
        rows=result.to_records(),
    )
