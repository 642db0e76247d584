"""
Serializers for health app.

Every record type links to birds through ``bird_ids`` on write and returns
``birds`` (compact summaries) on read.
"""

from rest_framework import serializers
from apps.birds.serializers import BirdSummarySerializer
from .models import HealthIncident, HealthOutcome, Vaccination, Medication
from .services import create_health_record, update_health_record


class BirdLinkedSerializer(serializers.ModelSerializer):
    """Base serializer for records that apply to a set of birds."""

    birds = BirdSummarySerializer(many=True, read_only=True)
    bird_ids = serializers.ListField(
        child=serializers.UUIDField(),
        write_only=True,
        allow_empty=False,
        error_messages={'empty': 'At least one bird is required'}
    )

    def create(self, validated_data):
        return create_health_record(self.Meta.model, **validated_data)

    def update(self, instance, validated_data):
        return update_health_record(instance, **validated_data)


class HealthIncidentSerializer(BirdLinkedSerializer):
    """Health incident."""

    symptoms = serializers.CharField(
        allow_blank=False,
        error_messages={'blank': 'Symptoms are required'}
    )

    class Meta:
        model = HealthIncident
        fields = [
            'id',
            'birds',
            'bird_ids',
            'date_noticed',
            'symptoms',
            'diagnosis',
            'treatment',
            'outcome',
            'notes',
            'reported_by',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'reported_by', 'created_at', 'updated_at']


class VaccinationSerializer(BirdLinkedSerializer):
    """Vaccination given to one or more birds."""

    class Meta:
        model = Vaccination
        fields = [
            'id',
            'birds',
            'bird_ids',
            'vaccine_name',
            'date_given',
            'dosage',
            'method',
            'next_due_date',
            'notes',
            'administered_by',
            'created_at',
        ]
        read_only_fields = ['id', 'administered_by', 'created_at']

    def validate(self, attrs):
        date_given = attrs.get('date_given', getattr(self.instance, 'date_given', None))
        next_due_date = attrs.get('next_due_date')
        if date_given and next_due_date and next_due_date < date_given:
            raise serializers.ValidationError({'next_due_date': 'Next due date cannot be before the date given'})
        return attrs


class MedicationSerializer(BirdLinkedSerializer):
    """Medication course."""

    withdrawal_end_date = serializers.DateField(read_only=True)

    class Meta:
        model = Medication
        fields = [
            'id',
            'birds',
            'bird_ids',
            'health_incident',
            'medication_name',
            'dosage',
            'start_date',
            'end_date',
            'withdrawal_days',
            'withdrawal_end_date',
            'notes',
            'administered_by',
            'created_at',
        ]
        read_only_fields = ['id', 'withdrawal_end_date', 'administered_by', 'created_at']

    def validate(self, attrs):
        start_date = attrs.get('start_date', getattr(self.instance, 'start_date', None))
        end_date = attrs.get('end_date')
        if start_date and end_date and end_date < start_date:
            raise serializers.ValidationError({'end_date': 'End date cannot be before start date'})
        return attrs


class IncidentFilterSerializer(serializers.Serializer):
    """Validate incident list query parameters."""

    bird = serializers.UUIDField(required=False)
    outcome = serializers.ChoiceField(choices=HealthOutcome.choices, required=False)


class VaccinationFilterSerializer(serializers.Serializer):
    """Validate vaccination list query parameters."""

    bird = serializers.UUIDField(required=False)
    upcoming = serializers.BooleanField(required=False, default=False)


class MedicationFilterSerializer(serializers.Serializer):
    """Validate medication list query parameters."""

    bird = serializers.UUIDField(required=False)
    active = serializers.BooleanField(required=False, allow_null=True, default=None)


class HealthSummarySerializer(serializers.Serializer):
    """Response schema for GET /api/health/summary/."""

    upcoming_vaccinations = serializers.ListField(child=serializers.DictField())
    active_incidents = serializers.ListField(child=serializers.DictField())
    recent_vaccinations = serializers.ListField(child=serializers.DictField())
    birds_in_withdrawal = serializers.ListField(child=serializers.DictField())
