from django.contrib import admin
from .models import Reminder


@admin.register(Reminder)
class ReminderAdmin(admin.ModelAdmin):
    """Admin interface for Reminder."""

    list_display = ['title', 'user', 'reminder_time', 'status', 'application']
    list_filter = ['status', 'reminder_time']
    search_fields = ['title', 'note', 'user__username']
    readonly_fields = ['created_at']
