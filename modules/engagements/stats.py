"""
Freelancer dashboard statistics.

Pure computation over work items; the service feeds it rows and the
profile rating.
"""

from datetime import datetime, timedelta, timezone
from typing import Iterable, Optional

from .models import WorkItem, FreelancerStats, ChartPoint, STATS_WINDOW_DAYS

WEEKDAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def earnings_chart(
    completed: Iterable[WorkItem], now: Optional[datetime] = None
) -> list[ChartPoint]:
    """
    Earnings per day for the last seven days, oldest first, today last.

    Work without a completion time is counted in totals but not charted.
    """
    now = now or datetime.now(timezone.utc)
    days = [(now - timedelta(days=offset)).date() for offset in range(STATS_WINDOW_DAYS - 1, -1, -1)]
    totals = {day: 0.0 for day in days}

    for item in completed:
        if item.completed_at is None:
            continue
        day = item.completed_at.astimezone(timezone.utc).date()
        if day in totals:
            totals[day] += item.price

    return [ChartPoint(name=WEEKDAY_NAMES[day.weekday()], value=totals[day]) for day in days]


def compute_stats(
    completed: list[WorkItem],
    active_count: int,
    rating: float,
    now: Optional[datetime] = None,
) -> FreelancerStats:
    return FreelancerStats(
        total_earnings=sum(item.price for item in completed),
        active_jobs=active_count,
        rating=rating,
        completed_jobs=len(completed),
        chart_data=earnings_chart(completed, now),
    )
