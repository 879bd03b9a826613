"""
Main project views.
"""
import logging

from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from applications.serializers import ApplicationSerializer
from applications.services import ApplicationService
from leaderboard.services import LeaderboardService
from leaderboard.views import serialize_leaderboard
from reminders.serializers import ReminderSerializer
from reminders.services import ReminderService
from resumes.serializers import ResumeFileSerializer, ResumeVersionSerializer
from resumes.services import ResumeStorageService, ResumeVersionService

logger = logging.getLogger(__name__)


class DashboardView(APIView):
    """
    GET /api/dashboard/

    Everything the dashboard page shows in one response.
    """

    permission_classes = [IsAuthenticated]

    def get(self, request):
        user = request.user

        try:
            current_resume = ResumeStorageService().current(user)
        except Exception:  # noqa: BLE001
            logger.exception("Could not load current resume for user %s", user.pk)
            current_resume = None

        default_version = ResumeVersionService.default_for(user)
        recent_applications = ApplicationService.list_applications(user)[:5]
        context = {'request': request}

        return Response({
            'current_resume': ResumeFileSerializer(current_resume).data if current_resume else None,
            'default_version': (
                ResumeVersionSerializer(default_version).data if default_version else None
            ),
            'application_counts': ApplicationService.status_counts(user),
            'recent_applications': ApplicationSerializer(
                recent_applications, many=True, context=context
            ).data,
            'upcoming_reminders': ReminderSerializer(
                ReminderService.upcoming(user), many=True, context=context
            ).data,
            'legend_points': LeaderboardService.standing(user),
            'leaderboard': serialize_leaderboard(request),
        })
