from rest_framework import serializers
from django.contrib.auth.password_validation import validate_password
from .models import Artist


class ContactSerializer(serializers.Serializer):
    """Contact details grouped under `contact` in the artist payload."""

    email = serializers.EmailField(required=False, allow_blank=True, allow_null=True)
    phone = serializers.CharField(required=False, allow_blank=True, max_length=50)
    website = serializers.URLField(required=False, allow_blank=True, max_length=500)


class AchievementSerializer(serializers.Serializer):
    """Single entry of an artist's achievements list."""

    title = serializers.CharField(max_length=200)
    year = serializers.IntegerField(required=False, allow_null=True, min_value=1000, max_value=9999)
    description = serializers.CharField(required=False, allow_blank=True)


class ArtistSerializer(serializers.ModelSerializer):
    """Main serializer for artists."""

    contact = ContactSerializer(source='*', read_only=True)
    achievements = AchievementSerializer(many=True, read_only=True)

    class Meta:
        model = Artist
        fields = [
            'id',
            'name',
            'bio',
            'image_url',
            'contact',
            'specialization',
            'achievements',
            'is_active',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class ArtistListSerializer(serializers.ModelSerializer):
    """Lightweight serializer for list views."""

    contact = ContactSerializer(source='*', read_only=True)
    artwork_count = serializers.IntegerField(read_only=True, default=0)

    class Meta:
        model = Artist
        fields = [
            'id',
            'name',
            'bio',
            'image_url',
            'contact',
            'specialization',
            'is_active',
            'artwork_count',
            'created_at',
        ]
        read_only_fields = fields


class ArtistSummarySerializer(serializers.ModelSerializer):
    """Artist reference embedded in artworks and sales."""

    class Meta:
        model = Artist
        fields = ['id', 'name', 'image_url']
        read_only_fields = fields


class ArtistInputSerializer(serializers.Serializer):
    """Serializer for creating and updating artists."""

    name = serializers.CharField(max_length=200)
    bio = serializers.CharField(required=False, allow_blank=True)
    image_url = serializers.URLField(required=False, allow_blank=True, max_length=500)
    contact = ContactSerializer(source='*', required=False)
    specialization = serializers.ListField(
        child=serializers.CharField(max_length=100),
        required=False,
    )
    achievements = AchievementSerializer(many=True, required=False)
    is_active = serializers.BooleanField(required=False)
    password = serializers.CharField(
        write_only=True,
        required=False,
        validators=[validate_password],
        style={'input_type': 'password'}
    )


class ArtistFilterSerializer(serializers.Serializer):
    """Validate artist list query parameters."""

    search = serializers.CharField(required=False, allow_blank=True)
    specialization = serializers.CharField(required=False, allow_blank=True)
    active = serializers.BooleanField(required=False, allow_null=True, default=None)
