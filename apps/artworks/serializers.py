from rest_framework import serializers
from decimal import Decimal
from apps.artists.models import Artist
from apps.artists.serializers import ArtistSummarySerializer
from .models import Artwork, ArtworkStatus, DimensionUnit


class DimensionsSerializer(serializers.Serializer):
    """Physical size grouped under `dimensions`."""

    height = serializers.DecimalField(
        max_digits=8, decimal_places=2, required=False, allow_null=True,
        min_value=Decimal('0')
    )
    width = serializers.DecimalField(
        max_digits=8, decimal_places=2, required=False, allow_null=True,
        min_value=Decimal('0')
    )
    unit = serializers.ChoiceField(
        source='dimension_unit',
        choices=DimensionUnit.choices,
        required=False
    )


class ArtworkSerializer(serializers.ModelSerializer):
    """Main serializer for artworks."""

    artist = ArtistSummarySerializer(read_only=True)
    dimensions = DimensionsSerializer(source='*', read_only=True)

    class Meta:
        model = Artwork
        fields = [
            'id',
            'title',
            'artist',
            'description',
            'price',
            'image_url',
            'category',
            'medium',
            'dimensions',
            'year',
            'status',
            'tags',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class ArtworkListSerializer(serializers.ModelSerializer):
    """Lightweight serializer for list views."""

    artist = ArtistSummarySerializer(read_only=True)

    class Meta:
        model = Artwork
        fields = [
            'id',
            'title',
            'artist',
            'price',
            'image_url',
            'category',
            'medium',
            'year',
            'status',
            'created_at',
        ]
        read_only_fields = fields


class ArtworkSummarySerializer(serializers.ModelSerializer):
    """Artwork reference embedded in exhibitions and sales."""

    artist = ArtistSummarySerializer(read_only=True)

    class Meta:
        model = Artwork
        fields = ['id', 'title', 'artist', 'price', 'image_url', 'status']
        read_only_fields = fields


class ArtworkInputSerializer(serializers.Serializer):
    """Serializer for creating and updating artworks."""

    title = serializers.CharField(max_length=200)
    artist = serializers.PrimaryKeyRelatedField(queryset=Artist.objects.all())
    description = serializers.CharField()
    price = serializers.DecimalField(
        max_digits=12, decimal_places=2, min_value=Decimal('0.01')
    )
    category = serializers.CharField(max_length=100)
    image_url = serializers.URLField(required=False, allow_blank=True, max_length=500)
    medium = serializers.CharField(required=False, allow_blank=True, max_length=100)
    dimensions = DimensionsSerializer(source='*', required=False)
    year = serializers.IntegerField(required=False, allow_null=True, min_value=0, max_value=9999)
    status = serializers.ChoiceField(choices=ArtworkStatus.choices, required=False)
    tags = serializers.ListField(
        child=serializers.CharField(max_length=50),
        required=False,
    )


class ArtworkFilterSerializer(serializers.Serializer):
    """Validate artwork list query parameters."""

    search = serializers.CharField(required=False, allow_blank=True)
    status = serializers.ChoiceField(choices=ArtworkStatus.choices, required=False)
    category = serializers.CharField(required=False, allow_blank=True)
    artist = serializers.UUIDField(required=False)
    min_price = serializers.DecimalField(max_digits=12, decimal_places=2, required=False)
    max_price = serializers.DecimalField(max_digits=12, decimal_places=2, required=False)

    def validate(self, attrs):
        """Validate price range."""
        min_price = attrs.get('min_price')
        max_price = attrs.get('max_price')
        if min_price is not None and max_price is not None and min_price > max_price:
            raise serializers.ValidationError({
                'min_price': 'min_price must not exceed max_price'
            })
        return attrs
