from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.db.models import Count

from leaderboard.models import LegendPoints
from .models import User


class LegendPointsInline(admin.StackedInline):
    model = LegendPoints
    can_delete = False
    readonly_fields = ['last_updated']


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """Admin interface for job seekers and admins."""

    list_display = [
        'username',
        'email',
        'role',
        'application_count',
        'resume_version_count',
    ]
    list_filter = ['role', 'is_staff']
    inlines = [LegendPointsInline]

    fieldsets = BaseUserAdmin.fieldsets + (
        ('Resume Legend', {'fields': ('role',)}),
    )
    add_fieldsets = BaseUserAdmin.add_fieldsets + (
        ('Resume Legend', {'fields': ('role',)}),
    )

    def get_queryset(self, request):
        return super().get_queryset(request).annotate(
            _application_count=Count('applications', distinct=True),
            _resume_version_count=Count('resume_versions', distinct=True),
        )

    @admin.display(description='Applications', ordering='_application_count')
    def application_count(self, obj):
        return obj._application_count

    @admin.display(description='Resume versions', ordering='_resume_version_count')
    def resume_version_count(self, obj):
        return obj._resume_version_count
