"""
Serializers for birds app.

Input serializers validate request bodies and query parameters; output
serializers shape birds for list and detail views. Breed composition is
exposed as a list of ``{breed_id, breed_name, breed_code, percentage}``
regardless of how it is stored.
"""

from rest_framework import serializers
from django.utils import timezone
from decimal import Decimal
from apps.coops.models import Coop
from .models import (
    Bird,
    BirdIdentifier,
    BirdNote,
    BirdSex,
    BirdStatus,
    CombType,
    CoopAssignment,
    IdentifierType,
)
from .services import get_total_percentage, get_primary_breed, round_percentage


def breed_composition_payload(bird):
    """Composition rows with breed names, largest share first."""
    links = sorted(
        bird.breed_composition.all(),
        key=lambda link: link.percentage,
        reverse=True,
    )
    return [
        {
            'breed_id': str(link.breed_id),
            'breed_name': link.breed.name,
            'breed_code': link.breed.code,
            'percentage': float(link.percentage),
        }
        for link in links
    ]


# =============================================================================
# Nested / Shared Serializers
# =============================================================================

class BirdIdentifierSerializer(serializers.ModelSerializer):
    """Leg band, wing band and other marks."""

    class Meta:
        model = BirdIdentifier
        fields = ['id', 'id_type', 'id_value', 'notes']
        read_only_fields = ['id']


class BreedShareSerializer(serializers.Serializer):
    """One breed's share in a composition (input)."""

    breed_id = serializers.UUIDField()
    percentage = serializers.DecimalField(
        max_digits=None,
        decimal_places=None,
        min_value=Decimal('0'),
        max_value=Decimal('100'),
        coerce_to_string=False,
    )

    def validate_percentage(self, value):
        # Stored with one decimal place
        return round_percentage(value)


class BirdSummarySerializer(serializers.ModelSerializer):
    """Compact bird reference for parents and lists."""

    band_number = serializers.SerializerMethodField()

    class Meta:
        model = Bird
        fields = ['id', 'name', 'sex', 'band_number']
        read_only_fields = fields

    def get_band_number(self, obj):
        return obj.get_identifier(IdentifierType.BAND)


class CoopAssignmentSerializer(serializers.ModelSerializer):
    """Coop placement history entry."""

    coop_name = serializers.CharField(source='coop.name', read_only=True)

    class Meta:
        model = CoopAssignment
        fields = ['id', 'coop', 'coop_name', 'assigned_at', 'removed_at', 'notes']
        read_only_fields = fields


class BirdNoteSerializer(serializers.ModelSerializer):
    """Free-text note on a bird."""

    created_by_name = serializers.CharField(source='created_by.get_display_name', read_only=True)

    class Meta:
        model = BirdNote
        fields = ['id', 'content', 'created_by', 'created_by_name', 'created_at']
        read_only_fields = ['id', 'created_by', 'created_by_name', 'created_at']


# =============================================================================
# Output Serializers
# =============================================================================

class BirdListSerializer(serializers.ModelSerializer):
    """Lightweight serializer for list views."""

    coop_name = serializers.CharField(source='coop.name', read_only=True, default=None)
    identifiers = BirdIdentifierSerializer(many=True, read_only=True)
    age_months = serializers.SerializerMethodField()
    primary_breed = serializers.SerializerMethodField()

    class Meta:
        model = Bird
        fields = [
            'id',
            'name',
            'sex',
            'status',
            'hatch_date',
            'age_months',
            'color',
            'coop',
            'coop_name',
            'identifiers',
            'primary_breed',
            'created_at',
        ]
        read_only_fields = fields

    def get_age_months(self, obj):
        return obj.age_in_months()

    def get_primary_breed(self, obj):
        return get_primary_breed(breed_composition_payload(obj))


class BirdSerializer(BirdListSerializer):
    """Full bird detail."""

    sire = BirdSummarySerializer(read_only=True)
    dam = BirdSummarySerializer(read_only=True)
    breed_composition = serializers.SerializerMethodField()
    total_percentage = serializers.SerializerMethodField()
    is_complete = serializers.SerializerMethodField()

    class Meta(BirdListSerializer.Meta):
        fields = BirdListSerializer.Meta.fields + [
            'sire',
            'dam',
            'comb_type',
            'early_life_notes',
            'breed_override',
            'breed_composition',
            'total_percentage',
            'is_complete',
            'created_by',
            'updated_at',
        ]
        read_only_fields = fields

    def get_breed_composition(self, obj):
        return breed_composition_payload(obj)

    def get_total_percentage(self, obj):
        return float(get_total_percentage(breed_composition_payload(obj)))

    def get_is_complete(self, obj):
        return self.get_total_percentage(obj) == 100


# =============================================================================
# Input Serializers
# =============================================================================

class BirdWriteSerializer(serializers.Serializer):
    """
    Validate bird create/update bodies.

    No field has a default so partial updates only touch what was sent.
    """

    name = serializers.CharField(max_length=100, required=False, allow_blank=True)
    sex = serializers.ChoiceField(choices=BirdSex.choices, required=False)
    status = serializers.ChoiceField(choices=BirdStatus.choices, required=False)
    hatch_date = serializers.DateField(required=False, allow_null=True)
    sire_id = serializers.UUIDField(required=False, allow_null=True)
    dam_id = serializers.UUIDField(required=False, allow_null=True)
    coop = serializers.PrimaryKeyRelatedField(
        queryset=Coop.objects.all(),
        required=False,
        allow_null=True,
    )
    color = serializers.CharField(max_length=100, required=False, allow_blank=True)
    comb_type = serializers.ChoiceField(choices=CombType.choices, required=False, allow_blank=True)
    early_life_notes = serializers.CharField(required=False, allow_blank=True)
    identifiers = BirdIdentifierSerializer(many=True, required=False)
    breed_composition = BreedShareSerializer(many=True, required=False)
    breed_override = serializers.BooleanField(required=False)

    def validate_hatch_date(self, value):
        if value and value > timezone.localdate():
            raise serializers.ValidationError('Hatch date cannot be in the future')
        return value

    def validate(self, attrs):
        sire_id = attrs.get('sire_id')
        dam_id = attrs.get('dam_id')
        if sire_id and dam_id and sire_id == dam_id:
            raise serializers.ValidationError({'dam_id': 'Sire and dam must be different birds'})
        return attrs


class BirdFilterSerializer(serializers.Serializer):
    """
    Validate bird list query parameters.

    Query Parameters:
        search, status, sex, coop, parent, color, breed, source_farm,
        age_min, age_max (months), include_archived
    """

    search = serializers.CharField(required=False, allow_blank=True)
    status = serializers.ChoiceField(choices=BirdStatus.choices, required=False)
    sex = serializers.ChoiceField(choices=BirdSex.choices, required=False)
    coop = serializers.UUIDField(required=False)
    parent = serializers.UUIDField(required=False)
    color = serializers.CharField(required=False, allow_blank=True)
    breed = serializers.UUIDField(required=False)
    source_farm = serializers.UUIDField(required=False)
    age_min = serializers.IntegerField(required=False, min_value=0)
    age_max = serializers.IntegerField(required=False, min_value=0)
    include_archived = serializers.BooleanField(required=False, default=False)

    def validate(self, attrs):
        age_min = attrs.get('age_min')
        age_max = attrs.get('age_max')
        if age_min is not None and age_max is not None and age_min > age_max:
            raise serializers.ValidationError({'age_min': 'age_min cannot exceed age_max'})
        return attrs


class BreedCompositionInputSerializer(serializers.Serializer):
    """Body of PUT /api/birds/{id}/breeds/."""

    breed_composition = BreedShareSerializer(many=True)


class ParentCompositionInputSerializer(serializers.Serializer):
    """Body of POST /api/birds/breed-composition/."""

    sire_id = serializers.UUIDField(required=False, allow_null=True)
    dam_id = serializers.UUIDField(required=False, allow_null=True)


class BreedCompositionResponseSerializer(serializers.Serializer):
    """Composition plus completeness flags."""

    breed_composition = serializers.ListField(child=serializers.DictField())
    total_percentage = serializers.FloatField()
    is_complete = serializers.BooleanField()


class BulkActionSerializer(serializers.Serializer):
    """Body of POST /api/birds/bulk/."""

    action = serializers.ChoiceField(choices=['move', 'status', 'delete'])
    bird_ids = serializers.ListField(child=serializers.UUIDField(), min_length=1)
    value = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class BirdLookupSerializer(serializers.ModelSerializer):
    """Minimal bird card returned for a scanned tag."""

    displayId = serializers.CharField(source='display_id', read_only=True)

    class Meta:
        model = Bird
        fields = ['id', 'name', 'sex', 'status', 'displayId']
