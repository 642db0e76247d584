# ==========================================
# apps/coops/admin.py
# ==========================================

from django.contrib import admin
from .models import Coop


@admin.register(Coop)
class CoopAdmin(admin.ModelAdmin):
    """Admin interface for coops."""

    list_display = ['name', 'coop_type', 'status', 'capacity', 'created_at']
    list_filter = ['coop_type', 'status']
    search_fields = ['name', 'notes']
    readonly_fields = ['id', 'created_at', 'updated_at']
