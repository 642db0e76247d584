# ==========================================
# apps/farm_settings/admin.py
# ==========================================

from django.contrib import admin
from .models import BirdColor, EggSizeCategory, FeedStage


@admin.register(BirdColor)
class BirdColorAdmin(admin.ModelAdmin):
    """Admin interface for plumage colours."""

    list_display = ['name', 'name_tl', 'hex_code']
    search_fields = ['name', 'name_tl']
    readonly_fields = ['id', 'created_at', 'updated_at']


@admin.register(EggSizeCategory)
class EggSizeCategoryAdmin(admin.ModelAdmin):
    """Admin interface for egg size categories."""

    list_display = ['name', 'min_weight_grams', 'max_weight_grams', 'is_active', 'sort_order']
    list_filter = ['is_active']
    readonly_fields = ['id', 'created_at', 'updated_at']


@admin.register(FeedStage)
class FeedStageAdmin(admin.ModelAdmin):
    """Admin interface for feed stages."""

    list_display = ['name', 'feed_type', 'min_age_days', 'max_age_days', 'is_active']
    list_filter = ['feed_type', 'is_active']
    readonly_fields = ['id', 'created_at', 'updated_at']
