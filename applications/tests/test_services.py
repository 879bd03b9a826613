from datetime import date

from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError
from django.test import TestCase
from django.utils import timezone

from applications.models import Application
from applications.services import ApplicationService


class ApplicationServiceTests(TestCase):
    def setUp(self) -> None:
        User = get_user_model()
        self.user = User.objects.create_user(username="jane", password="secret")
        self.other = User.objects.create_user(username="sam", password="secret")

    def test_create_defaults_status_and_date(self) -> None:
        application = ApplicationService.create_application(
            self.user, job_title="Frontend Developer", company="Acme",
        )

        self.assertEqual(application.status, Application.Status.APPLIED)
        self.assertEqual(application.applied_date, timezone.localdate())
        self.assertIsNone(application.resume)
        self.assertIsNone(application.cover_letter)

    def test_create_requires_job_title_and_company(self) -> None:
        with self.assertRaises(ValidationError) as ctx:
            ApplicationService.create_application(self.user, job_title="  ", notes="hi")

        self.assertEqual(ctx.exception.messages, ["job_title is required", "company is required"])
        self.assertFalse(Application.objects.exists())

    def test_create_rejects_unknown_status(self) -> None:
        with self.assertRaises(ValidationError):
            ApplicationService.create_application(
                self.user, job_title="Engineer", company="Acme", status="Ghosted",
            )

    def test_blank_notes_become_null(self) -> None:
        application = ApplicationService.create_application(
            self.user, job_title="Engineer", company="Acme", notes="",
        )
        self.assertIsNone(application.notes)

    def test_any_status_may_follow_any_other(self) -> None:
        application = ApplicationService.create_application(
            self.user, job_title="Engineer", company="Acme", status=Application.Status.OFFER,
        )

        ApplicationService.update_application(application, status=Application.Status.APPLIED)

        application.refresh_from_db()
        self.assertEqual(application.status, Application.Status.APPLIED)

    def test_update_cannot_blank_company(self) -> None:
        application = ApplicationService.create_application(
            self.user, job_title="Engineer", company="Acme",
        )
        with self.assertRaises(ValidationError):
            ApplicationService.update_application(application, company="")

    def test_list_filters_by_status_newest_applied_first(self) -> None:
        older = ApplicationService.create_application(
            self.user, job_title="A", company="Acme", applied_date=date(2024, 1, 10),
            status=Application.Status.INTERVIEW,
        )
        newer = ApplicationService.create_application(
            self.user, job_title="B", company="Beta", applied_date=date(2024, 2, 10),
            status=Application.Status.INTERVIEW,
        )
        ApplicationService.create_application(
            self.user, job_title="C", company="Gamma", status=Application.Status.REJECTED,
        )
        ApplicationService.create_application(
            self.other, job_title="D", company="Delta", status=Application.Status.INTERVIEW,
        )

        interviews = ApplicationService.list_applications(self.user, status="Interview")

        self.assertEqual([application.pk for application in interviews], [newer.pk, older.pk])
        self.assertEqual(len(ApplicationService.list_applications(self.user)), 3)

    def test_list_rejects_unknown_status(self) -> None:
        with self.assertRaises(ValidationError):
            ApplicationService.list_applications(self.user, status="Pending")

    def test_status_counts(self) -> None:
        ApplicationService.create_application(self.user, job_title="A", company="Acme")
        ApplicationService.create_application(
            self.user, job_title="B", company="Beta", status=Application.Status.OFFER,
        )

        self.assertEqual(
            ApplicationService.status_counts(self.user),
            {"Applied": 1, "Interview": 0, "Rejected": 0, "Offer": 1},
        )
