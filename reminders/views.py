"""
Reminders app views

ViewSet for follow-up reminders.
"""
from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import serializers, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from accounts.permissions import IsAdminOrOwner

from .models import Reminder
from .serializers import ReminderSerializer
from .services import ReminderService


class ReminderViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Reminder.

    - POST: Create a pending reminder
    - GET: List current user's reminders, soonest first
    - GET {id}: Retrieve specific reminder
    - PUT/PATCH {id}: Edit reminder (status cannot go back to Pending)
    - DELETE {id}: Delete reminder
    - POST {id}/complete/: Mark reminder completed
    """

    serializer_class = ReminderSerializer
    permission_classes = [IsAuthenticated, IsAdminOrOwner]

    def get_queryset(self):
        """
        Filter to show only current user's reminders.
        Admins can see all reminders.
        """
        if self.request.user.role == 'ADMIN':
            queryset = Reminder.objects.all()
        else:
            queryset = Reminder.objects.filter(user=self.request.user)
        return queryset.order_by('reminder_time', 'id')

    def perform_create(self, serializer):
        data = dict(serializer.validated_data)
        data.pop('status', None)
        try:
            serializer.instance = ReminderService.create_reminder(self.request.user, **data)
        except DjangoValidationError as e:
            raise serializers.ValidationError({'errors': e.messages})

    def perform_update(self, serializer):
        try:
            serializer.instance = ReminderService.update_reminder(
                serializer.instance,
                **serializer.validated_data,
            )
        except DjangoValidationError as e:
            raise serializers.ValidationError({'errors': e.messages})

    def perform_destroy(self, instance):
        ReminderService.delete_reminder(instance)

    @action(detail=True, methods=['post'])
    def complete(self, request, pk=None):
        """
        Mark a reminder as completed.

        POST /api/reminders/{id}/complete/
        """
        reminder = ReminderService.mark_completed(self.get_object())
        return Response(self.get_serializer(reminder).data)
