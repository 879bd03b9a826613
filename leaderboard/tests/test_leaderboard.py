from datetime import datetime, timezone as dt_timezone

from django.contrib.auth import get_user_model
from django.test import TestCase, override_settings
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from leaderboard.models import LegendPoints
from leaderboard.services import LeaderboardService


class LeaderboardTests(TestCase):
    def setUp(self) -> None:
        User = get_user_model()
        self.users = [
            User.objects.create_user(username=f"user{index}", password="secret")
            for index in range(12)
        ]
        for index, user in enumerate(self.users):
            LegendPoints.objects.create(user=user, total_points=index * 10)
        self.client = APIClient()
        self.client.force_authenticate(user=self.users[-1])

    def test_top_ten_highest_first(self) -> None:
        entries = LeaderboardService.top()

        self.assertEqual(len(entries), 10)
        points = [entry.total_points for entry in entries]
        self.assertEqual(points, sorted(points, reverse=True))
        self.assertEqual(points[0], 110)

    @override_settings(LEADERBOARD_SIZE=3)
    def test_size_follows_settings(self) -> None:
        self.assertEqual(len(LeaderboardService.top()), 3)

    def test_ties_keep_earlier_update_first(self) -> None:
        LegendPoints.objects.filter(user=self.users[0]).update(
            total_points=500, last_updated=datetime(2024, 5, 1, tzinfo=dt_timezone.utc),
        )
        LegendPoints.objects.filter(user=self.users[1]).update(
            total_points=500, last_updated=datetime(2024, 1, 1, tzinfo=dt_timezone.utc),
        )

        entries = LeaderboardService.top(limit=2)

        self.assertEqual([entry.user_id for entry in entries], [self.users[1].pk, self.users[0].pk])

    def test_standing(self) -> None:
        newcomer = get_user_model().objects.create_user(username="new", password="secret")

        self.assertEqual(LeaderboardService.standing(self.users[3]), 30)
        self.assertIsNone(LeaderboardService.standing(newcomer))

    def test_endpoint_marks_current_user(self) -> None:
        response = self.client.get(reverse("leaderboard"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), 10)
        self.assertEqual([row["rank"] for row in response.data], list(range(1, 11)))
        self.assertEqual(response.data[0]["user"], self.users[-1].pk)
        self.assertEqual([row["is_current_user"] for row in response.data], [True] + [False] * 9)

    def test_empty_leaderboard(self) -> None:
        LegendPoints.objects.all().delete()
        self.assertEqual(self.client.get(reverse("leaderboard")).data, [])
