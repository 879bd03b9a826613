"""
Leaderboard app models

LegendPoints model holding each user's gamification score.
"""
from django.conf import settings
from django.db import models


class LegendPoints(models.Model):
    """
    Running legend-point total for one user.

    Points are awarded outside this application; rows are read here and
    can be corrected through the admin.
    """

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='legend_points',
    )
    total_points = models.IntegerField(default=0)
    last_updated = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"{self.user.username}: {self.total_points} pts"

    class Meta:
        verbose_name = 'Legend Points'
        verbose_name_plural = 'Legend Points'
        ordering = ['-total_points', 'last_updated', 'user_id']
