"""
Application Service Layer
Handles validation and persistence for tracked job applications.
"""
import logging
from typing import Dict, List, Optional

from django.core.exceptions import ValidationError
from django.utils import timezone

from .models import Application

logger = logging.getLogger(__name__)


class ApplicationService:
    """Service for creating, editing and listing job applications."""

    REQUIRED_FIELDS = ['job_title', 'company']
    EDITABLE_FIELDS = [
        'job_title',
        'company',
        'applied_date',
        'status',
        'notes',
        'resume',
        'cover_letter',
        'follow_up_date',
    ]

    @staticmethod
    def validate_fields(data: Dict, *, partial: bool = False) -> Dict:
        """
        Validate application fields.

        Args:
            data: Field values keyed by model field name
            partial: When True, required fields are only checked if present

        Returns:
            Cleaned data dictionary

        Raises:
            ValidationError: If validation fails
        """
        errors = []
        cleaned = {}

        unknown = sorted(set(data) - set(ApplicationService.EDITABLE_FIELDS))
        if unknown:
            errors.append(f"Unknown fields: {', '.join(unknown)}")

        for field in ApplicationService.REQUIRED_FIELDS:
            if partial and field not in data:
                continue
            value = (data.get(field) or '').strip()
            if not value:
                errors.append(f"{field} is required")
            cleaned[field] = value

        status = data.get('status')
        if status is not None and status not in Application.Status.values:
            errors.append(f"status must be one of: {', '.join(Application.Status.values)}")

        if errors:
            raise ValidationError(errors)

        for field in ApplicationService.EDITABLE_FIELDS:
            if field in data and field not in cleaned:
                cleaned[field] = data[field]

        # Empty strings from forms mean "no value" for the optional fields
        for field in ('notes', 'resume', 'cover_letter', 'follow_up_date'):
            if field in cleaned and cleaned[field] == '':
                cleaned[field] = None

        return cleaned

    @staticmethod
    def create_application(user, **fields) -> Application:
        """
        Create a tracked application.

        Status defaults to Applied and applied_date to today.

        Raises:
            ValidationError: If job_title or company is missing
        """
        clean_data = ApplicationService.validate_fields(fields)
        if not clean_data.get('status'):
            clean_data['status'] = Application.Status.APPLIED
        if not clean_data.get('applied_date'):
            clean_data['applied_date'] = timezone.localdate()

        application = Application.objects.create(user=user, **clean_data)
        logger.info(
            "Added application %s: %s at %s",
            application.pk,
            application.job_title,
            application.company,
        )
        return application

    @staticmethod
    def update_application(application: Application, **fields) -> Application:
        """
        Overwrite the given fields of an application.

        Any status may replace any other.

        Raises:
            ValidationError: If a required field is blanked or a value is invalid
        """
        clean_data = ApplicationService.validate_fields(fields, partial=True)
        for attr, value in clean_data.items():
            setattr(application, attr, value)
        application.save()
        return application

    @staticmethod
    def list_applications(user, status: Optional[str] = None) -> List[Application]:
        """
        Get a user's applications, most recently applied first.

        Args:
            user: Django user instance
            status: Only return applications with this status

        Raises:
            ValidationError: If status is not a known value
        """
        queryset = Application.objects.filter(user=user)
        if status:
            if status not in Application.Status.values:
                raise ValidationError(f"status must be one of: {', '.join(Application.Status.values)}")
            queryset = queryset.filter(status=status)
        return list(queryset.order_by('-applied_date', '-created_at'))

    @staticmethod
    def status_counts(user) -> Dict[str, int]:
        counts = {value: 0 for value in Application.Status.values}
        for application in Application.objects.filter(user=user).only('status'):
            counts[application.status] = counts.get(application.status, 0) + 1
        return counts
