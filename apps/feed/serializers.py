from rest_framework import serializers
from decimal import Decimal
from apps.coops.models import Coop
from .models import FeedInventory, FeedConsumption, FeedType


class FeedInventorySerializer(serializers.ModelSerializer):
    """Feed stock with its low-stock flag."""

    is_low_stock = serializers.BooleanField(read_only=True)

    class Meta:
        model = FeedInventory
        fields = [
            'id',
            'feed_type',
            'brand',
            'quantity_kg',
            'cost_per_kg',
            'reorder_level',
            'is_low_stock',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'is_low_stock', 'created_at', 'updated_at']


class FeedStockInputSerializer(serializers.Serializer):
    """Validate stock added through POST /api/feed/inventory/."""

    feed_type = serializers.ChoiceField(choices=FeedType.choices)
    brand = serializers.CharField(max_length=100, required=False, allow_blank=True, default='')
    quantity_kg = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=Decimal('0.01'),
        error_messages={'min_value': 'Quantity must be positive'}
    )
    cost_per_kg = serializers.DecimalField(
        max_digits=8,
        decimal_places=2,
        min_value=Decimal('0'),
        required=False,
        allow_null=True
    )
    reorder_level = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=Decimal('0'),
        required=False,
        allow_null=True
    )


class FeedConsumptionSerializer(serializers.ModelSerializer):
    """Feed consumption record."""

    coop_name = serializers.CharField(source='coop.name', read_only=True)
    feed_name = serializers.CharField(source='feed_inventory.__str__', read_only=True)

    class Meta:
        model = FeedConsumption
        fields = [
            'id',
            'coop',
            'coop_name',
            'feed_inventory',
            'feed_name',
            'date',
            'quantity_kg',
            'notes',
            'recorded_by',
            'created_at',
        ]
        read_only_fields = fields


class FeedConsumptionInputSerializer(serializers.Serializer):
    """Validate a consumption entry."""

    coop = serializers.PrimaryKeyRelatedField(queryset=Coop.objects.all())
    feed_inventory_id = serializers.UUIDField()
    date = serializers.DateField(required=False)
    quantity_kg = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=Decimal('0.01'),
        error_messages={'min_value': 'Quantity must be positive'}
    )
    notes = serializers.CharField(required=False, allow_blank=True)


class ConsumptionFilterSerializer(serializers.Serializer):
    """Validate consumption list query parameters."""

    coop = serializers.UUIDField(required=False)
    date_from = serializers.DateField(required=False)
    date_to = serializers.DateField(required=False)
