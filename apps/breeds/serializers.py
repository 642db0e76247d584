from rest_framework import serializers
from .models import Breed, SourceFarm


class SourceFarmSerializer(serializers.ModelSerializer):
    """Serializer for source farms."""

    breed_count = serializers.IntegerField(source='breeds.count', read_only=True)

    class Meta:
        model = SourceFarm
        fields = [
            'id',
            'name',
            'location',
            'contact_info',
            'notes',
            'breed_count',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'breed_count', 'created_at', 'updated_at']


class SourceFarmSummarySerializer(serializers.ModelSerializer):
    """Compact source farm info nested in breeds."""

    class Meta:
        model = SourceFarm
        fields = ['id', 'name']
        read_only_fields = fields


class BreedSerializer(serializers.ModelSerializer):
    """Main serializer for breeds."""

    source_farms = SourceFarmSummarySerializer(many=True, read_only=True)
    bird_count = serializers.SerializerMethodField()

    class Meta:
        model = Breed
        fields = [
            'id',
            'name',
            'code',
            'description',
            'varieties',
            'source_farms',
            'bird_count',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields

    def get_bird_count(self, obj):
        return obj.bird_links.values('bird').distinct().count()


class BreedWriteSerializer(serializers.ModelSerializer):
    """Serializer for creating and updating breeds."""

    # Uniqueness is checked case-insensitively by the service
    name = serializers.CharField(max_length=100)
    code = serializers.CharField(max_length=10)
    varieties = serializers.ListField(
        child=serializers.CharField(max_length=100),
        required=False,
    )
    source_farms = serializers.PrimaryKeyRelatedField(
        queryset=SourceFarm.objects.all(),
        many=True,
        required=False,
    )

    class Meta:
        model = Breed
        fields = [
            'name',
            'code',
            'description',
            'varieties',
            'source_farms',
        ]

    def validate_code(self, value):
        value = value.strip().upper()
        if not value:
            raise serializers.ValidationError('Code cannot be blank')
        return value


class SourceFarmDetailSerializer(SourceFarmSerializer):
    """Source farm with its linked breeds."""

    breeds = serializers.SerializerMethodField()

    class Meta(SourceFarmSerializer.Meta):
        fields = SourceFarmSerializer.Meta.fields + ['breeds']

    def get_breeds(self, obj):
        return [
            {'id': str(breed.id), 'name': breed.name, 'code': breed.code}
            for breed in obj.breeds.all()
        ]
