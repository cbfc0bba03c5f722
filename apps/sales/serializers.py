from rest_framework import serializers
from decimal import Decimal
from apps.artworks.serializers import ArtworkSummarySerializer
from .models import Sale, PaymentStatus


class SaleSerializer(serializers.ModelSerializer):
    """Main serializer for sales with the artwork resolved."""

    artwork = ArtworkSummarySerializer(read_only=True)
    total_amount = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)

    class Meta:
        model = Sale
        fields = [
            'id',
            'artwork',
            'buyer',
            'buyer_email',
            'buyer_phone',
            'shipping_address',
            'price',
            'commission',
            'total_amount',
            'payment_method',
            'payment_status',
            'transaction_id',
            'date',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class SaleCreateSerializer(serializers.Serializer):
    """Serializer for recording a sale."""

    artwork = serializers.UUIDField()
    buyer = serializers.CharField(max_length=200)
    price = serializers.DecimalField(
        max_digits=12, decimal_places=2, min_value=Decimal('0.01')
    )
    payment_method = serializers.CharField(max_length=50)
    date = serializers.DateTimeField(required=False)
    buyer_email = serializers.EmailField(required=False, allow_blank=True)
    buyer_phone = serializers.CharField(required=False, allow_blank=True, max_length=50)
    shipping_address = serializers.CharField(required=False, allow_blank=True)


class SaleUpdateSerializer(serializers.Serializer):
    """Serializer for editing a sale."""

    buyer = serializers.CharField(max_length=200, required=False)
    buyer_email = serializers.EmailField(required=False, allow_blank=True)
    buyer_phone = serializers.CharField(required=False, allow_blank=True, max_length=50)
    shipping_address = serializers.CharField(required=False, allow_blank=True)
    price = serializers.DecimalField(
        max_digits=12, decimal_places=2, min_value=Decimal('0.01'), required=False
    )
    payment_method = serializers.CharField(max_length=50, required=False)
    payment_status = serializers.ChoiceField(choices=PaymentStatus.choices, required=False)
    date = serializers.DateTimeField(required=False)


class SaleFilterSerializer(serializers.Serializer):
    """Validate sale list query parameters."""

    payment_status = serializers.ChoiceField(choices=PaymentStatus.choices, required=False)
    date_from = serializers.DateField(required=False)
    date_to = serializers.DateField(required=False)
    artwork = serializers.UUIDField(required=False)

    def validate(self, attrs):
        """Validate date range."""
        date_from = attrs.get('date_from')
        date_to = attrs.get('date_to')
        if date_from and date_to and date_from > date_to:
            raise serializers.ValidationError({
                'date_from': 'date_from must be before date_to'
            })
        return attrs


class SalesStatsSerializer(serializers.Serializer):
    """Totals over completed sales."""

    total = serializers.DecimalField(max_digits=14, decimal_places=2)
    count = serializers.IntegerField()
    commission = serializers.DecimalField(max_digits=14, decimal_places=2)
