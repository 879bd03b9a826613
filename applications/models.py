"""
Applications app models

Application model for tracking submitted job applications.
"""
from django.conf import settings
from django.db import models
from django.utils import timezone


class Application(models.Model):
    """
    A job application the user has submitted.

    Status changes are unconstrained: any status may follow any other.
    """

    class Status(models.TextChoices):
        APPLIED = 'Applied', 'Applied'
        INTERVIEW = 'Interview', 'Interview'
        REJECTED = 'Rejected', 'Rejected'
        OFFER = 'Offer', 'Offer'

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='applications',
    )
    job_title = models.CharField(max_length=255)
    company = models.CharField(max_length=255)
    applied_date = models.DateField(default=timezone.localdate)
    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.APPLIED,
    )
    notes = models.TextField(null=True, blank=True)
    resume = models.ForeignKey(
        'resumes.ResumeVersion',
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name='applications',
    )
    cover_letter = models.ForeignKey(
        'generation.CoverLetter',
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name='applications',
    )
    follow_up_date = models.DateField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"{self.job_title} at {self.company} ({self.status})"

    class Meta:
        verbose_name = 'Application'
        verbose_name_plural = 'Applications'
        ordering = ['-applied_date', '-created_at']
        indexes = [
            models.Index(fields=['user', 'status'], name='application_user_status_idx'),
        ]
