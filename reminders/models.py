"""
Reminders app models

Reminder model for follow-up reminders on job applications.
"""
from django.conf import settings
from django.db import models


class Reminder(models.Model):
    """
    A follow-up reminder.

    Status only moves forward: Pending to Completed.
    """

    class Status(models.TextChoices):
        PENDING = 'Pending', 'Pending'
        COMPLETED = 'Completed', 'Completed'

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='reminders',
    )
    application = models.ForeignKey(
        'applications.Application',
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name='reminders',
    )
    title = models.CharField(max_length=255)
    reminder_time = models.DateTimeField()
    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.PENDING,
    )
    note = models.TextField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return f"{self.title} @ {self.reminder_time:%Y-%m-%d %H:%M} ({self.status})"

    @property
    def is_completed(self) -> bool:
        return self.status == self.Status.COMPLETED

    class Meta:
        verbose_name = 'Reminder'
        verbose_name_plural = 'Reminders'
        ordering = ['reminder_time', 'id']
