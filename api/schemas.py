"""Pydantic schemas for report responses."""

from datetime import datetime
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field


# REPORT SCHEMAS

class ReportSummary(BaseModel):
    """Catalogue entry for one report."""
    name: str = Field(..., description="Stable report name used in URLs")
    title: str
    section: str
    global_aggregate: bool = Field(False, description="True if the report fails on an empty dataset")
    order: Optional[List[List[Any]]] = Field(None, description="(column, ascending) pairs")


class ReportListResponse(BaseModel):
    """All reports in catalogue order."""
    total: int
    reports: List[ReportSummary]


class ReportResponse(BaseModel):
    """One report table."""
    name: str
    title: str
    section: str
    source: str
    generated_at: datetime
    skipped_records: int = Field(0, description="Malformed records left out of the snapshot")
    row_count: int
    columns: List[str]
    rows: List[Dict[str, Any]]


# SNAPSHOT SCHEMAS

class SnapshotResponse(BaseModel):
    """Summary of the loaded snapshot."""
    source: str
    loaded_at: datetime
    records: int
    skipped_records: int
