import uuid
from decimal import Decimal
from django.core.validators import MinValueValidator
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('artworks', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Exhibition',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('title', models.CharField(max_length=200)),
                ('description', models.TextField()),
                ('start_date', models.DateField()),
                ('end_date', models.DateField()),
                ('image_url', models.URLField(blank=True, max_length=500)),
                ('curator', models.CharField(max_length=200)),
                ('venue', models.CharField(blank=True, max_length=200)),
                ('address', models.CharField(blank=True, max_length=300)),
                ('city', models.CharField(blank=True, max_length=100)),
                ('country', models.CharField(blank=True, max_length=100)),
                ('status', models.CharField(choices=[('upcoming', 'Upcoming'), ('ongoing', 'Ongoing'), ('completed', 'Completed')], default='upcoming', max_length=20)),
                ('ticket_price', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=8, validators=[MinValueValidator(Decimal('0.00'))])),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('artworks', models.ManyToManyField(blank=True, related_name='exhibitions', to='artworks.artwork')),
            ],
            options={
                'db_table': 'exhibitions',
                'ordering': ['-start_date'],
                'indexes': [
                    models.Index(fields=['status'], name='exhibitions_status_idx'),
                    models.Index(fields=['start_date'], name='exhibitions_start_idx'),
                    models.Index(fields=['city'], name='exhibitions_city_idx'),
                ],
            },
        ),
    ]
