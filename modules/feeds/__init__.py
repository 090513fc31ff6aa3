"""
Feeds module.

Timeout-guarded loading of the client home feed and the freelancer
dashboard.
"""

from .models import ClientHomeFeed, DashboardFeed
from .service import FeedService, get_feed_service, reset_feed_service

__all__ = [
    "ClientHomeFeed",
    "DashboardFeed",
    "FeedService",
    "get_feed_service",
    "reset_feed_service",
]
