# ==========================================
# apps/breeds/admin.py
# ==========================================

from django.contrib import admin
from .models import Breed, SourceFarm


@admin.register(Breed)
class BreedAdmin(admin.ModelAdmin):
    """Admin interface for breeds."""

    list_display = ['name', 'code', 'created_at']
    search_fields = ['name', 'code', 'description']
    filter_horizontal = ['source_farms']
    readonly_fields = ['id', 'created_at', 'updated_at']


@admin.register(SourceFarm)
class SourceFarmAdmin(admin.ModelAdmin):
    """Admin interface for source farms."""

    list_display = ['name', 'location', 'contact_info', 'created_at']
    search_fields = ['name', 'location']
    readonly_fields = ['id', 'created_at', 'updated_at']
