from django.contrib import admin
from .models import CoverLetter


@admin.register(CoverLetter)
class CoverLetterAdmin(admin.ModelAdmin):
    """Admin interface for CoverLetter."""

    list_display = ['id', 'user', 'job_title', 'company_name', 'resume_id', 'created_at']
    list_filter = ['created_at', 'company_name']
    search_fields = ['user__username', 'job_title', 'company_name']
    readonly_fields = ['created_at']

    fieldsets = (
        ('Job', {
            'fields': ('user', 'job_title', 'company_name', 'job_description')
        }),
        ('Generated Output', {
            'fields': ('resume_id', 'content')
        }),
        ('Metadata', {
            'fields': ('created_at',)
        }),
    )
