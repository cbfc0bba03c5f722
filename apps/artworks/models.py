from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal
import uuid


class ArtworkStatus(models.TextChoices):
    AVAILABLE = 'available', 'Available'
    SOLD = 'sold', 'Sold'
    EXHIBITION = 'exhibition', 'On Exhibition'


class DimensionUnit(models.TextChoices):
    CM = 'cm', 'Centimeters'
    MM = 'mm', 'Millimeters'
    IN = 'in', 'Inches'
    M = 'm', 'Meters'


class Artwork(models.Model):
    """Piece of art held by the gallery."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=200)
    artist = models.ForeignKey(
        'artists.Artist',
        on_delete=models.PROTECT,
        related_name='artworks'
    )
    description = models.TextField()
    price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    image_url = models.URLField(max_length=500, blank=True)
    category = models.CharField(max_length=100)
    medium = models.CharField(max_length=100, blank=True)

    # Physical size
    height = models.DecimalField(max_digits=8, decimal_places=2, null=True, blank=True)
    width = models.DecimalField(max_digits=8, decimal_places=2, null=True, blank=True)
    dimension_unit = models.CharField(
        max_length=5,
        choices=DimensionUnit.choices,
        default=DimensionUnit.CM
    )

    year = models.PositiveIntegerField(null=True, blank=True)
    status = models.CharField(
        max_length=20,
        choices=ArtworkStatus.choices,
        default=ArtworkStatus.AVAILABLE
    )
    tags = models.JSONField(default=list, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'artworks'
        indexes = [
            models.Index(fields=['status'], name='artworks_status_idx'),
            models.Index(fields=['category'], name='artworks_category_idx'),
            models.Index(fields=['artist', 'status'], name='artworks_artist_status_idx'),
            models.Index(fields=['created_at'], name='artworks_created_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.title} ({self.get_status_display()})"

    @property
    def dimensions(self):
        return {
            'height': self.height,
            'width': self.width,
            'unit': self.dimension_unit,
        }
