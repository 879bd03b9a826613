"""
Reminders app serializers

Serializers for Reminder model.
"""
from rest_framework import serializers

from applications.models import Application

from .models import Reminder


class ReminderSerializer(serializers.ModelSerializer):
    """
    Serializer for Reminder.

    New reminders always start as Pending; status is only writable on update.
    """

    application = serializers.PrimaryKeyRelatedField(
        queryset=Application.objects.all(),
        required=False,
        allow_null=True,
    )

    class Meta:
        model = Reminder
        fields = [
            'id',
            'user',
            'title',
            'reminder_time',
            'status',
            'note',
            'application',
            'created_at',
        ]
        read_only_fields = ['id', 'user', 'created_at']
        extra_kwargs = {
            'status': {'required': False},
            'note': {'required': False, 'allow_blank': True},
        }

    def validate_application(self, value):
        if self.instance is not None:
            owner_id = self.instance.user_id
        else:
            request = self.context.get('request')
            owner_id = request.user.pk if request is not None else None
        if value is not None and owner_id is not None and value.user_id != owner_id:
            raise serializers.ValidationError('Application belongs to a different user.')
        return value
