from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal
import uuid


class ExhibitionStatus(models.TextChoices):
    UPCOMING = 'upcoming', 'Upcoming'
    ONGOING = 'ongoing', 'Ongoing'
    COMPLETED = 'completed', 'Completed'


class Exhibition(models.Model):
    """Exhibition showing a set of the gallery's artworks."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=200)
    description = models.TextField()
    start_date = models.DateField()
    end_date = models.DateField()
    image_url = models.URLField(max_length=500, blank=True)
    curator = models.CharField(max_length=200)

    artworks = models.ManyToManyField(
        'artworks.Artwork',
        related_name='exhibitions',
        blank=True
    )

    # Location
    venue = models.CharField(max_length=200, blank=True)
    address = models.CharField(max_length=300, blank=True)
    city = models.CharField(max_length=100, blank=True)
    country = models.CharField(max_length=100, blank=True)

    status = models.CharField(
        max_length=20,
        choices=ExhibitionStatus.choices,
        default=ExhibitionStatus.UPCOMING
    )
    ticket_price = models.DecimalField(
        max_digits=8,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0.00'))]
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'exhibitions'
        indexes = [
            models.Index(fields=['status'], name='exhibitions_status_idx'),
            models.Index(fields=['start_date'], name='exhibitions_start_idx'),
            models.Index(fields=['city'], name='exhibitions_city_idx'),
        ]
        ordering = ['-start_date']

    def __str__(self):
        return f"{self.title} ({self.start_date} - {self.end_date})"

    @property
    def location(self):
        return {
            'venue': self.venue,
            'address': self.address,
            'city': self.city,
            'country': self.country,
        }
