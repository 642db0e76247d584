from rest_framework import serializers
from .models import Coop


class CoopSerializer(serializers.ModelSerializer):
    """Coop with its current occupancy."""

    occupancy = serializers.IntegerField(read_only=True)
    is_full = serializers.SerializerMethodField()

    class Meta:
        model = Coop
        fields = [
            'id',
            'name',
            'capacity',
            'coop_type',
            'status',
            'notes',
            'occupancy',
            'is_full',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'occupancy', 'is_full', 'created_at', 'updated_at']

    def get_is_full(self, obj):
        occupancy = getattr(obj, 'occupancy', None)
        if occupancy is None or not obj.capacity:
            return False
        return occupancy >= obj.capacity
