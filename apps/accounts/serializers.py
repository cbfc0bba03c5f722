from rest_framework import serializers
from django.contrib.auth.password_validation import validate_password
from apps.artists.models import Artist


class AccountSerializer(serializers.ModelSerializer):
    """Minimal account info returned by register/login."""

    class Meta:
        model = Artist
        fields = ['id', 'name', 'email']
        read_only_fields = fields


class RegistrationSerializer(serializers.Serializer):
    """Serializer for account registration."""

    name = serializers.CharField(required=True, max_length=200)
    email = serializers.EmailField(required=True)
    password = serializers.CharField(
        write_only=True,
        required=True,
        validators=[validate_password],
        style={'input_type': 'password'}
    )


class LoginSerializer(serializers.Serializer):
    """Serializer for login."""

    email = serializers.EmailField(required=True)
    password = serializers.CharField(
        required=True,
        write_only=True,
        style={'input_type': 'password'}
    )
