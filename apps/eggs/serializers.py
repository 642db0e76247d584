from rest_framework import serializers
from django.utils import timezone
from decimal import Decimal
from apps.birds.models import Bird
from .models import EggRecord, IncubationRecord, ShellQuality, IncubationOutcome


class IncubationSummarySerializer(serializers.ModelSerializer):
    """Incubation state nested in an egg record."""

    class Meta:
        model = IncubationRecord
        fields = ['id', 'set_date', 'expected_hatch_date', 'actual_hatch_date', 'outcome']
        read_only_fields = fields


class EggRecordSerializer(serializers.ModelSerializer):
    """Main serializer for egg records."""

    bird_name = serializers.CharField(source='bird.__str__', read_only=True)
    recorded_by_name = serializers.CharField(
        source='recorded_by.get_display_name',
        read_only=True,
        default=None
    )
    incubation = serializers.SerializerMethodField()

    class Meta:
        model = EggRecord
        fields = [
            'id',
            'bird',
            'bird_name',
            'date',
            'egg_mark',
            'weight_grams',
            'shell_quality',
            'notes',
            'incubation',
            'recorded_by',
            'recorded_by_name',
            'created_at',
        ]
        read_only_fields = ['id', 'bird', 'recorded_by', 'created_at']

    def get_incubation(self, obj):
        incubation = getattr(obj, 'incubation', None)
        if incubation is None:
            return None
        return IncubationSummarySerializer(incubation).data

    def validate_date(self, value):
        if value > timezone.localdate():
            raise serializers.ValidationError('Date cannot be in the future')
        return value


class EggRecordCreateSerializer(serializers.Serializer):
    """Validate a new egg record."""

    bird_id = serializers.UUIDField()
    date = serializers.DateField(required=False)
    egg_mark = serializers.CharField(max_length=50, required=False, allow_blank=True)
    weight_grams = serializers.DecimalField(
        max_digits=6,
        decimal_places=1,
        min_value=Decimal('0.1'),
        required=False,
        allow_null=True
    )
    shell_quality = serializers.ChoiceField(
        choices=ShellQuality.choices,
        required=False,
        allow_blank=True
    )
    notes = serializers.CharField(required=False, allow_blank=True)

    def validate_date(self, value):
        if value > timezone.localdate():
            raise serializers.ValidationError('Date cannot be in the future')
        return value


class EggFilterSerializer(serializers.Serializer):
    """
    Validate egg list query parameters.

    Query Parameters:
        bird, date_from, date_to, shell_quality
    """

    bird = serializers.UUIDField(required=False)
    date_from = serializers.DateField(required=False)
    date_to = serializers.DateField(required=False)
    shell_quality = serializers.ChoiceField(choices=ShellQuality.choices, required=False)

    def validate(self, attrs):
        date_from = attrs.get('date_from')
        date_to = attrs.get('date_to')
        if date_from and date_to and date_from > date_to:
            raise serializers.ValidationError({'date_from': 'date_from cannot be after date_to'})
        return attrs


class IncubationRecordSerializer(serializers.ModelSerializer):
    """Incubation record with its egg and hen."""

    egg = EggRecordSerializer(read_only=True)
    chick_name = serializers.CharField(source='chick.__str__', read_only=True, default=None)

    class Meta:
        model = IncubationRecord
        fields = [
            'id',
            'egg',
            'set_date',
            'expected_hatch_date',
            'actual_hatch_date',
            'outcome',
            'chick',
            'chick_name',
            'notes',
            'created_by',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class IncubationCreateSerializer(serializers.Serializer):
    """Validate starting an incubation."""

    egg_id = serializers.UUIDField()
    set_date = serializers.DateField()
    notes = serializers.CharField(required=False, allow_blank=True)


class IncubationUpdateSerializer(serializers.Serializer):
    """Validate incubation updates; only sent fields are applied."""

    set_date = serializers.DateField(required=False)
    actual_hatch_date = serializers.DateField(required=False, allow_null=True)
    outcome = serializers.ChoiceField(choices=IncubationOutcome.choices, required=False)
    chick = serializers.PrimaryKeyRelatedField(
        queryset=Bird.objects.all(),
        required=False,
        allow_null=True
    )
    notes = serializers.CharField(required=False, allow_blank=True)
