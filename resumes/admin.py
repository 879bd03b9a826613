from django.contrib import admin
from .models import ResumeVersion


@admin.register(ResumeVersion)
class ResumeVersionAdmin(admin.ModelAdmin):
    """Admin interface for ResumeVersion."""

    list_display = ['id', 'user', 'original_filename', 'is_default', 'created_at']
    list_filter = ['is_default', 'created_at']
    search_fields = ['user__username', 'original_filename', 'job_description']
    readonly_fields = ['created_at']

    fieldsets = (
        ('Source', {
            'fields': ('user', 'resume_id', 'original_filename', 'is_default')
        }),
        ('Content', {
            'fields': ('job_description', 'tweaked_text')
        }),
        ('Metadata', {
            'fields': ('created_at',)
        }),
    )
