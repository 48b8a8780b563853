"""Workspace activity report endpoint."""

from __future__ import annotations

from collections.abc import Sequence

from syncboard.core.resource import Resource
from syncboard.reports.schemas import Report, ReportMetric, ReportTimePeriod


class ReportsResource(Resource):
    base_path = "/reports"

    async def get_report(
        self,
        metric: ReportMetric | str = ReportMetric.ALL,
        time_period: ReportTimePeriod | str = ReportTimePeriod.ONE_WEEK,
        connector_ids: Sequence[int] | None = None,
    ) -> Report:
        """Return sync-run counts and synced-row totals over *time_period*.

        *connector_ids* narrows the report; an empty list means no filter and
        is left out of the query.
        """
        url = self.path(
            params={
                "type": "workspace_activity",
                "metric": ReportMetric(metric).value,
                "time_period": ReportTimePeriod(time_period).value,
                "connector_ids": list(connector_ids) if connector_ids else None,
            }
        )
        return await self._request(Report, url)
