# ==========================================
# apps/eggs/admin.py
# ==========================================

from django.contrib import admin
from .models import EggRecord, IncubationRecord


@admin.register(EggRecord)
class EggRecordAdmin(admin.ModelAdmin):
    """Admin interface for egg records."""

    list_display = ['__str__', 'bird', 'date', 'shell_quality', 'weight_grams']
    list_filter = ['shell_quality', 'date']
    search_fields = ['egg_mark', 'bird__name']
    raw_id_fields = ['bird']
    date_hierarchy = 'date'


@admin.register(IncubationRecord)
class IncubationRecordAdmin(admin.ModelAdmin):
    """Admin interface for incubation records."""

    list_display = ['egg', 'set_date', 'expected_hatch_date', 'outcome', 'chick']
    list_filter = ['outcome']
    raw_id_fields = ['egg', 'chick']
