# ==========================================
# apps/weights/admin.py
# ==========================================

from django.contrib import admin
from .models import WeightRecord


@admin.register(WeightRecord)
class WeightRecordAdmin(admin.ModelAdmin):
    """Admin interface for weight records."""

    list_display = ['bird', 'date', 'weight_grams', 'milestone', 'recorded_by']
    list_filter = ['milestone']
    raw_id_fields = ['bird']
    date_hierarchy = 'date'
