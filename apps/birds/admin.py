# ==========================================
# apps/birds/admin.py
# ==========================================

from django.contrib import admin
from .models import Bird, BirdIdentifier, BirdBreed, BirdNote, CoopAssignment


class BirdIdentifierInline(admin.TabularInline):
    """Inline admin for identifiers."""
    model = BirdIdentifier
    extra = 1
    fields = ['id_type', 'id_value', 'notes']


class BirdBreedInline(admin.TabularInline):
    """Inline admin for breed composition rows."""
    model = BirdBreed
    extra = 0
    fields = ['breed', 'percentage']
    autocomplete_fields = ['breed']


class CoopAssignmentInline(admin.TabularInline):
    """Inline admin for coop placement history."""
    model = CoopAssignment
    extra = 0
    fields = ['coop', 'assigned_at', 'removed_at', 'notes']


@admin.register(Bird)
class BirdAdmin(admin.ModelAdmin):
    """Admin interface for birds."""

    list_display = [
        '__str__',
        'sex',
        'status',
        'hatch_date',
        'coop',
        'breed_override',
        'created_at',
    ]
    list_filter = ['sex', 'status', 'comb_type', 'coop']
    search_fields = ['name', 'color', 'identifiers__id_value']
    raw_id_fields = ['sire', 'dam']
    readonly_fields = ['id', 'created_by', 'created_at', 'updated_at']
    inlines = [BirdIdentifierInline, BirdBreedInline, CoopAssignmentInline]


@admin.register(BirdNote)
class BirdNoteAdmin(admin.ModelAdmin):
    """Admin interface for bird notes."""

    list_display = ['bird', 'created_by', 'created_at']
    search_fields = ['content']
    raw_id_fields = ['bird']
