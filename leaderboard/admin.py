from django.contrib import admin
from .models import LegendPoints


@admin.register(LegendPoints)
class LegendPointsAdmin(admin.ModelAdmin):
    """Admin interface for LegendPoints."""

    list_display = ['user', 'total_points', 'last_updated']
    search_fields = ['user__username']
    readonly_fields = ['last_updated']
