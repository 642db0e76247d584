from rest_framework import serializers
from decimal import Decimal
from .models import BirdColor, EggSizeCategory, FeedStage


class BirdColorSerializer(serializers.ModelSerializer):
    """Plumage colour; ``usage`` is only set when sorted by breed."""

    name = serializers.CharField(
        max_length=100,
        error_messages={'required': 'Color name is required', 'blank': 'Color name is required'},
    )
    usage = serializers.IntegerField(read_only=True)

    class Meta:
        model = BirdColor
        fields = ['id', 'name', 'name_tl', 'hex_code', 'description', 'usage', 'created_at', 'updated_at']
        read_only_fields = ['id', 'created_at', 'updated_at']

    def validate_name(self, value):
        duplicates = BirdColor.objects.filter(name__iexact=value)
        if self.instance is not None:
            duplicates = duplicates.exclude(id=self.instance.id)
        if duplicates.exists():
            raise serializers.ValidationError('A color with this name already exists')
        return value

    def validate_hex_code(self, value):
        if value and not (len(value) == 7 and value.startswith('#')):
            raise serializers.ValidationError('Hex code must look like #A1B2C3')
        return value


class EggSizeCategorySerializer(serializers.ModelSerializer):
    """Egg weight band."""

    class Meta:
        model = EggSizeCategory
        fields = [
            'id',
            'name',
            'name_tl',
            'min_weight_grams',
            'max_weight_grams',
            'description',
            'is_active',
            'sort_order',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']

    def validate(self, attrs):
        low = attrs.get('min_weight_grams', getattr(self.instance, 'min_weight_grams', None))
        high = attrs.get('max_weight_grams', getattr(self.instance, 'max_weight_grams', None))
        if low is not None and high is not None and low >= high:
            raise serializers.ValidationError(
                {'max_weight_grams': 'Maximum weight must be above the minimum'}
            )
        return attrs


class FeedStageSerializer(serializers.ModelSerializer):
    """Feed type by age window."""

    feed_type_display = serializers.CharField(source='get_feed_type_display', read_only=True)

    class Meta:
        model = FeedStage
        fields = [
            'id',
            'name',
            'name_tl',
            'feed_type',
            'feed_type_display',
            'min_age_days',
            'max_age_days',
            'notes',
            'is_active',
            'sort_order',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']

    def validate(self, attrs):
        low = attrs.get('min_age_days', getattr(self.instance, 'min_age_days', None))
        high = attrs.get('max_age_days', getattr(self.instance, 'max_age_days', None))
        if low is not None and high is not None and low > high:
            raise serializers.ValidationError(
                {'max_age_days': 'Maximum age cannot be below the minimum'}
            )
        return attrs


class EggWeightQuerySerializer(serializers.Serializer):
    """Query of GET /api/settings/egg-sizes/classify/."""

    weight = serializers.DecimalField(max_digits=6, decimal_places=1, min_value=Decimal('0'))
