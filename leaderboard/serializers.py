"""
Leaderboard app serializers
"""
from rest_framework import serializers
from .models import LegendPoints


class LeaderboardEntrySerializer(serializers.ModelSerializer):
    """
    One leaderboard row. ``is_current_user`` marks the requester's own row.
    """

    rank = serializers.SerializerMethodField()
    is_current_user = serializers.SerializerMethodField()

    class Meta:
        model = LegendPoints
        fields = ['rank', 'user', 'total_points', 'last_updated', 'is_current_user']
        read_only_fields = fields

    def get_rank(self, obj: LegendPoints) -> int:
        ranks = self.context.get('ranks', {})
        return ranks.get(obj.pk, 0)

    def get_is_current_user(self, obj: LegendPoints) -> bool:
        request = self.context.get('request')
        return bool(request and obj.user_id == request.user.pk)
