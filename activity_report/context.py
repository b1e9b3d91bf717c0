from dataclasses import dataclass
from datetime import date

from activity_report.models import StatsResponse
from activity_report.settings import DashboardSettings


@dataclass(frozen=True)
class ReportContext:
    user_id: str
    stats: StatsResponse
    today_date: date
    settings: DashboardSettings

    @property
    def today(self):
        return self.stats.today

    @property
    def history(self):
        return self.stats.history
