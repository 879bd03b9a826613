from datetime import datetime, timezone as dt_timezone
from unittest import mock

from django.contrib.auth import get_user_model
from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import TestCase, override_settings
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from applications.services import ApplicationService
from leaderboard.models import LegendPoints
from reminders.services import ReminderService
from resumes.services import ResumeStorageService, ResumeVersionService
from resumes.tests.test_views import IN_MEMORY_STORAGES


class DashboardAPITests(TestCase):
    def setUp(self) -> None:
        storage_override = override_settings(STORAGES=IN_MEMORY_STORAGES)
        storage_override.enable()
        self.addCleanup(storage_override.disable)

        self.user = get_user_model().objects.create_user(username="jane", password="secret")
        self.client = APIClient()
        self.client.force_authenticate(user=self.user)

    def test_empty_dashboard(self) -> None:
        response = self.client.get(reverse("dashboard"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIsNone(response.data["current_resume"])
        self.assertIsNone(response.data["default_version"])
        self.assertEqual(response.data["recent_applications"], [])
        self.assertEqual(response.data["upcoming_reminders"], [])
        self.assertIsNone(response.data["legend_points"])
        self.assertEqual(response.data["application_counts"]["Applied"], 0)

    def test_dashboard_summary(self) -> None:
        ResumeStorageService().upload(SimpleUploadedFile("cv.pdf", b"%PDF-1.4"), self.user)
        version = ResumeVersionService.create(
            self.user, resume_id="cv.pdf", original_filename="cv.pdf", tweaked_text="text",
        )
        ResumeVersionService.set_default(version.pk, self.user)
        ApplicationService.create_application(self.user, job_title="Engineer", company="Acme")
        ReminderService.create_reminder(
            self.user, "Follow up", datetime(2025, 3, 1, 9, 0, tzinfo=dt_timezone.utc),
        )
        LegendPoints.objects.create(user=self.user, total_points=42)

        data = self.client.get(reverse("dashboard")).data

        self.assertEqual(data["current_resume"]["name"], "cv.pdf")
        self.assertEqual(data["default_version"]["id"], version.pk)
        self.assertEqual(data["application_counts"]["Applied"], 1)
        self.assertEqual(len(data["recent_applications"]), 1)
        self.assertEqual(data["upcoming_reminders"][0]["title"], "Follow up")
        self.assertEqual(data["legend_points"], 42)
        self.assertTrue(data["leaderboard"][0]["is_current_user"])

    def test_storage_failure_does_not_break_dashboard(self) -> None:
        with mock.patch.object(ResumeStorageService, "current", side_effect=OSError("bucket down")):
            response = self.client.get(reverse("dashboard"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIsNone(response.data["current_resume"])
