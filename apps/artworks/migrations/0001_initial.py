import uuid
from decimal import Decimal
from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Artwork',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('title', models.CharField(max_length=200)),
                ('description', models.TextField()),
                ('price', models.DecimalField(decimal_places=2, max_digits=12, validators=[MinValueValidator(Decimal('0.01'))])),
                ('image_url', models.URLField(blank=True, max_length=500)),
                ('category', models.CharField(max_length=100)),
                ('medium', models.CharField(blank=True, max_length=100)),
                ('height', models.DecimalField(blank=True, decimal_places=2, max_digits=8, null=True)),
                ('width', models.DecimalField(blank=True, decimal_places=2, max_digits=8, null=True)),
                ('dimension_unit', models.CharField(choices=[('cm', 'Centimeters'), ('mm', 'Millimeters'), ('in', 'Inches'), ('m', 'Meters')], default='cm', max_length=5)),
                ('year', models.PositiveIntegerField(blank=True, null=True)),
                ('status', models.CharField(choices=[('available', 'Available'), ('sold', 'Sold'), ('exhibition', 'On Exhibition')], default='available', max_length=20)),
                ('tags', models.JSONField(blank=True, default=list)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('artist', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='artworks', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'artworks',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['status'], name='artworks_status_idx'),
                    models.Index(fields=['category'], name='artworks_category_idx'),
                    models.Index(fields=['artist', 'status'], name='artworks_artist_status_idx'),
                    models.Index(fields=['created_at'], name='artworks_created_idx'),
                ],
            },
        ),
    ]
