from django.db import models
from django.core.validators import MinValueValidator
from django.utils import timezone
from decimal import Decimal
import uuid


class PaymentStatus(models.TextChoices):
    PENDING = 'pending', 'Pending'
    COMPLETED = 'completed', 'Completed'
    REFUNDED = 'refunded', 'Refunded'


class Sale(models.Model):
    """Sale of an artwork to a buyer."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    artwork = models.ForeignKey(
        'artworks.Artwork',
        on_delete=models.PROTECT,
        related_name='sales'
    )

    # Buyer details
    buyer = models.CharField(max_length=200)
    buyer_email = models.EmailField(max_length=255, blank=True)
    buyer_phone = models.CharField(max_length=50, blank=True)
    shipping_address = models.TextField(blank=True)

    # Financial details
    price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    commission = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal('0.00')
    )
    payment_method = models.CharField(max_length=50)
    payment_status = models.CharField(
        max_length=20,
        choices=PaymentStatus.choices,
        default=PaymentStatus.PENDING
    )
    transaction_id = models.CharField(max_length=64, unique=True, editable=False)

    date = models.DateTimeField(default=timezone.now)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'sales'
        indexes = [
            models.Index(fields=['date'], name='sales_date_idx'),
            models.Index(fields=['payment_status', 'date'], name='sales_status_date_idx'),
            models.Index(fields=['artwork'], name='sales_artwork_idx'),
        ]
        ordering = ['-date', '-created_at']

    def __str__(self):
        return f"{self.artwork.title} - {self.price} ({self.payment_status})"

    @property
    def total_amount(self):
        """Price plus gallery commission."""
        return self.price + self.commission
