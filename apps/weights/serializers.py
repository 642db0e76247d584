from rest_framework import serializers
from django.utils import timezone
from decimal import Decimal
from apps.birds.models import Bird
from .models import WeightRecord, WeightMilestone


class WeightRecordSerializer(serializers.ModelSerializer):
    """Serializer for weight records."""

    bird = serializers.PrimaryKeyRelatedField(queryset=Bird.objects.all())
    bird_name = serializers.CharField(source='bird.__str__', read_only=True)
    weight_grams = serializers.DecimalField(
        max_digits=7,
        decimal_places=1,
        min_value=Decimal('0.1'),
        coerce_to_string=False,
        error_messages={'min_value': 'Weight must be greater than 0'}
    )

    class Meta:
        model = WeightRecord
        fields = [
            'id',
            'bird',
            'bird_name',
            'date',
            'weight_grams',
            'milestone',
            'notes',
            'recorded_by',
            'created_at',
        ]
        read_only_fields = ['id', 'recorded_by', 'created_at']

    def validate_date(self, value):
        if value > timezone.localdate():
            raise serializers.ValidationError('Date cannot be in the future')
        return value


class WeightFilterSerializer(serializers.Serializer):
    """Validate weight list query parameters."""

    bird = serializers.UUIDField(required=False)
    milestone = serializers.ChoiceField(choices=WeightMilestone.choices, required=False)
