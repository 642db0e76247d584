# ==========================================
# apps/health/admin.py
# ==========================================

from django.contrib import admin
from .models import HealthIncident, Vaccination, Medication


@admin.register(HealthIncident)
class HealthIncidentAdmin(admin.ModelAdmin):
    """Admin interface for health incidents."""

    list_display = ['date_noticed', 'outcome', 'diagnosis', 'reported_by']
    list_filter = ['outcome']
    search_fields = ['symptoms', 'diagnosis', 'treatment']
    filter_horizontal = ['birds']
    date_hierarchy = 'date_noticed'


@admin.register(Vaccination)
class VaccinationAdmin(admin.ModelAdmin):
    """Admin interface for vaccinations."""

    list_display = ['vaccine_name', 'date_given', 'next_due_date', 'method']
    search_fields = ['vaccine_name']
    filter_horizontal = ['birds']


@admin.register(Medication)
class MedicationAdmin(admin.ModelAdmin):
    """Admin interface for medications."""

    list_display = ['medication_name', 'start_date', 'end_date', 'withdrawal_days']
    search_fields = ['medication_name']
    filter_horizontal = ['birds']
    raw_id_fields = ['health_incident']
