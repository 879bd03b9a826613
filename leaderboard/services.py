"""
Leaderboard Service Layer
Read-only queries over legend points.
"""
from typing import List, Optional

from django.conf import settings

from .models import LegendPoints


class LeaderboardService:
    """Service for reading the legend-points leaderboard."""

    @staticmethod
    def top(limit: Optional[int] = None) -> List[LegendPoints]:
        """
        Highest scores first, at most ``limit`` rows (LEADERBOARD_SIZE by
        default). Equal scores keep the earlier last_updated first.
        """
        if limit is None:
            limit = getattr(settings, 'LEADERBOARD_SIZE', 10)
        return list(
            LegendPoints.objects.select_related('user')
            .order_by('-total_points', 'last_updated', 'user_id')[:limit]
        )

    @staticmethod
    def standing(user) -> Optional[int]:
        """The user's point total, or None if they have no row yet."""
        return (
            LegendPoints.objects.filter(user=user)
            .values_list('total_points', flat=True)
            .first()
        )
