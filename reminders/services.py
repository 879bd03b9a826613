"""
Reminder Service Layer
Handles validation and status changes for follow-up reminders.
"""
import logging
from typing import List

from django.core.exceptions import ValidationError

from .models import Reminder

logger = logging.getLogger(__name__)


class ReminderService:
    """Service for the user's follow-up reminders."""

    EDITABLE_FIELDS = ['title', 'reminder_time', 'note', 'application', 'status']

    @staticmethod
    def create_reminder(user, title: str, reminder_time, note=None, application=None) -> Reminder:
        """
        Create a pending reminder.

        Raises:
            ValidationError: If title or reminder_time is missing
        """
        errors = []
        if not (title or '').strip():
            errors.append("title is required")
        if not reminder_time:
            errors.append("reminder_time is required")
        if errors:
            raise ValidationError(errors)

        reminder = Reminder.objects.create(
            user=user,
            title=title.strip(),
            reminder_time=reminder_time,
            note=note or None,
            application=application,
            status=Reminder.Status.PENDING,
        )
        logger.info("Saved reminder %s for user %s", reminder.pk, user.pk)
        return reminder

    @staticmethod
    def update_reminder(reminder: Reminder, **fields) -> Reminder:
        """
        Edit a reminder.

        Status may move from Pending to Completed; a completed reminder
        cannot be reopened.

        Raises:
            ValidationError: Unknown field, blank title or reopening attempt
        """
        unknown = sorted(set(fields) - set(ReminderService.EDITABLE_FIELDS))
        if unknown:
            raise ValidationError(f"Unknown fields: {', '.join(unknown)}")

        if 'title' in fields:
            fields['title'] = (fields['title'] or '').strip()
            if not fields['title']:
                raise ValidationError("title is required")
        if 'reminder_time' in fields and not fields['reminder_time']:
            raise ValidationError("reminder_time is required")

        new_status = fields.get('status')
        if new_status is not None:
            if new_status not in Reminder.Status.values:
                raise ValidationError(f"status must be one of: {', '.join(Reminder.Status.values)}")
            if reminder.is_completed and new_status != Reminder.Status.COMPLETED:
                raise ValidationError("Completed reminders cannot be reopened.")

        for attr, value in fields.items():
            setattr(reminder, attr, value)
        reminder.save()
        return reminder

    @staticmethod
    def mark_completed(reminder: Reminder) -> Reminder:
        """
        Mark a reminder completed. Calling it again is a no-op.
        """
        if not reminder.is_completed:
            reminder.status = Reminder.Status.COMPLETED
            reminder.save(update_fields=['status'])
            logger.info("Reminder %s marked as completed", reminder.pk)
        return reminder

    @staticmethod
    def delete_reminder(reminder: Reminder) -> None:
        reminder.delete()

    @staticmethod
    def list_reminders(user) -> List[Reminder]:
        """Get a user's reminders, soonest first."""
        return list(Reminder.objects.filter(user=user).order_by('reminder_time', 'id'))

    @staticmethod
    def upcoming(user, limit: int = 5) -> List[Reminder]:
        return list(
            Reminder.objects.filter(user=user, status=Reminder.Status.PENDING)
            .order_by('reminder_time', 'id')[:limit]
        )
