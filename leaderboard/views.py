"""
Leaderboard app views
"""
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from .serializers import LeaderboardEntrySerializer
from .services import LeaderboardService


def serialize_leaderboard(request):
    entries = LeaderboardService.top()
    ranks = {entry.pk: position for position, entry in enumerate(entries, start=1)}
    return LeaderboardEntrySerializer(
        entries,
        many=True,
        context={'request': request, 'ranks': ranks},
    ).data


class LeaderboardView(APIView):
    """
    GET /api/leaderboard/

    Top users by legend points, highest first.
    """

    permission_classes = [IsAuthenticated]

    def get(self, request):
        return Response(serialize_leaderboard(request))
