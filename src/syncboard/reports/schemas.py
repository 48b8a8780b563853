"""Pydantic v2 schemas for dashboard reporting endpoints."""

from enum import Enum

from syncboard.core.schemas import ApiResponse, BackendModel


class ReportMetric(str, Enum):
    SYNC_RUN_TRIGGERED = "sync_run_triggered"
    TOTAL_SYNC_RUN_ROWS = "total_sync_run_rows"
    ALL = "all"


class ReportTimePeriod(str, Enum):
    THIRTY_DAYS = "thirty_days"
    ONE_WEEK = "one_week"
    ONE_DAY = "one_day"


class ReportDataPoint(BackendModel):
    time_slice: str
    total_count: int = 0
    failed_count: int = 0
    success_count: int = 0


class ReportData(BackendModel):
    """Time series keyed by metric name, oldest slice first."""

    sync_run_triggered: list[ReportDataPoint] = []
    total_sync_run_rows: list[ReportDataPoint] = []


Report = ApiResponse[ReportData]
