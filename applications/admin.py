from django.contrib import admin
from .models import Application


@admin.register(Application)
class ApplicationAdmin(admin.ModelAdmin):
    """Admin interface for Application."""

    list_display = ['job_title', 'company', 'user', 'status', 'applied_date', 'follow_up_date']
    list_filter = ['status', 'applied_date', 'company']
    search_fields = ['job_title', 'company', 'user__username', 'notes']
    readonly_fields = ['created_at', 'updated_at']

    fieldsets = (
        ('Basic Info', {
            'fields': ('user', 'job_title', 'company', 'status', 'applied_date', 'follow_up_date')
        }),
        ('Documents', {
            'fields': ('resume', 'cover_letter')
        }),
        ('Notes', {
            'fields': ('notes',)
        }),
        ('Metadata', {
            'fields': ('created_at', 'updated_at')
        }),
    )
