# ==========================================
# apps/reports/admin.py
# ==========================================

from django.contrib import admin
from .models import ReportPreset


@admin.register(ReportPreset)
class ReportPresetAdmin(admin.ModelAdmin):
    """Admin interface for saved report presets."""

    list_display = ['name', 'report_type', 'created_by', 'is_default', 'updated_at']
    list_filter = ['report_type', 'is_default']
    search_fields = ['name', 'description', 'created_by__email']
    raw_id_fields = ['created_by']
    readonly_fields = ['created_at', 'updated_at']
