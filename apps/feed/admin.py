# ==========================================
# apps/feed/admin.py
# ==========================================

from django.contrib import admin
from .models import FeedInventory, FeedConsumption


@admin.register(FeedInventory)
class FeedInventoryAdmin(admin.ModelAdmin):
    """Admin interface for feed stock."""

    list_display = ['feed_type', 'brand', 'quantity_kg', 'reorder_level', 'low_stock']
    list_filter = ['feed_type']
    search_fields = ['brand']

    def low_stock(self, obj):
        return obj.is_low_stock
    low_stock.boolean = True


@admin.register(FeedConsumption)
class FeedConsumptionAdmin(admin.ModelAdmin):
    """Admin interface for feed consumption."""

    list_display = ['date', 'coop', 'feed_inventory', 'quantity_kg', 'recorded_by']
    list_filter = ['coop', 'feed_inventory__feed_type']
    date_hierarchy = 'date'
