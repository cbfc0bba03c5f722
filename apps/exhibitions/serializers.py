from rest_framework import serializers
from decimal import Decimal
from apps.artworks.models import Artwork
from apps.artworks.serializers import ArtworkSummarySerializer
from .models import Exhibition, ExhibitionStatus


class LocationSerializer(serializers.Serializer):
    """Venue details grouped under `location`."""

    venue = serializers.CharField(required=False, allow_blank=True, max_length=200)
    address = serializers.CharField(required=False, allow_blank=True, max_length=300)
    city = serializers.CharField(required=False, allow_blank=True, max_length=100)
    country = serializers.CharField(required=False, allow_blank=True, max_length=100)


class ExhibitionSerializer(serializers.ModelSerializer):
    """Main serializer for exhibitions with artworks resolved."""

    artworks = ArtworkSummarySerializer(many=True, read_only=True)
    location = LocationSerializer(source='*', read_only=True)

    class Meta:
        model = Exhibition
        fields = [
            'id',
            'title',
            'description',
            'start_date',
            'end_date',
            'image_url',
            'curator',
            'location',
            'status',
            'ticket_price',
            'artworks',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class ExhibitionInputSerializer(serializers.Serializer):
    """Serializer for creating and updating exhibitions."""

    title = serializers.CharField(max_length=200)
    description = serializers.CharField()
    start_date = serializers.DateField()
    end_date = serializers.DateField()
    curator = serializers.CharField(max_length=200)
    image_url = serializers.URLField(required=False, allow_blank=True, max_length=500)
    location = LocationSerializer(source='*', required=False)
    status = serializers.ChoiceField(choices=ExhibitionStatus.choices, required=False)
    ticket_price = serializers.DecimalField(
        max_digits=8, decimal_places=2, min_value=Decimal('0.00'), required=False
    )
    artworks = serializers.PrimaryKeyRelatedField(
        queryset=Artwork.objects.all(),
        many=True,
        required=False
    )

    def validate(self, attrs):
        """Validate date range when both ends are given."""
        start = attrs.get('start_date')
        end = attrs.get('end_date')
        if start and end and end < start:
            raise serializers.ValidationError({
                'end_date': 'End date must not be before start date'
            })
        return attrs


class ExhibitionFilterSerializer(serializers.Serializer):
    """Validate exhibition list query parameters."""

    status = serializers.ChoiceField(choices=ExhibitionStatus.choices, required=False)
    city = serializers.CharField(required=False, allow_blank=True)
    upcoming = serializers.BooleanField(required=False, default=False)
