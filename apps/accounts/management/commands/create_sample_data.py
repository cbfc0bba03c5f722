"""
Management command to seed the gallery with sample data.

Usage:
    python manage.py create_sample_data
    python manage.py create_sample_data --clear --artists 8 --artworks 20

This creates:
- An admin login (admin@gallery.local / admin123)
- Artists with contact details, specializations and achievements
- Artworks spread over the artists
- Exhibitions with artworks on show
- Sales (pending, completed and refunded)

Everything goes through the service layer, so sold artworks always have a
completed sale and exhibited artworks belong to an exhibition.
"""

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone
from decimal import Decimal
from datetime import timedelta
import random

from apps.artists.models import Artist
from apps.artists.services import create_artist
from apps.artworks.models import Artwork, ArtworkStatus
from apps.artworks.services import create_artwork
from apps.exhibitions.models import Exhibition, ExhibitionStatus
from apps.exhibitions.services import create_exhibition
from apps.sales.models import Sale, PaymentStatus
from apps.sales.services import record_sale, update_sale


FIRST_NAMES = ['Ada', 'Bruno', 'Clara', 'Dmitri', 'Elena', 'Farid', 'Greta',
               'Hugo', 'Ines', 'Jonas', 'Keiko', 'Luca', 'Mira', 'Nils']
LAST_NAMES = ['Moreau', 'Varga', 'Lindqvist', 'Okafor', 'Ferreira', 'Novak',
              'Tanaka', 'Weber', 'Castillo', 'Hale', 'Rossi', 'Dvorak']
SPECIALIZATIONS = ['Oil painting', 'Watercolor', 'Sculpture', 'Photography',
                   'Printmaking', 'Ceramics', 'Digital art', 'Mixed media']
CATEGORIES = ['Painting', 'Sculpture', 'Photography', 'Drawing', 'Print', 'Installation']
MEDIUMS = ['Oil on canvas', 'Acrylic', 'Bronze', 'Charcoal', 'Silver gelatin print',
           'Linocut', 'Marble', 'Ink on paper']
TITLE_WORDS = ['Silent', 'Blue', 'Harbor', 'Morning', 'Echo', 'Fragment', 'Garden',
               'Northern', 'Light', 'Study', 'Threshold', 'Drift', 'Quiet', 'Red']
TAGS = ['abstract', 'portrait', 'landscape', 'minimal', 'urban', 'nature',
        'figurative', 'geometric', 'monochrome']
CITIES = [('Prague', 'Czech Republic'), ('Vienna', 'Austria'), ('Berlin', 'Germany'),
          ('Lisbon', 'Portugal'), ('Oslo', 'Norway')]
VENUES = ['Main Hall', 'East Wing', 'Riverside Pavilion', 'Project Space']
PAYMENT_METHODS = ['credit card', 'paypal', 'bank transfer']


class Command(BaseCommand):
    help = 'Create sample gallery data'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Clear existing gallery data before creating new sample data',
        )
        parser.add_argument('--artists', type=int, default=5, help='Number of artists')
        parser.add_argument('--artworks', type=int, default=10, help='Number of artworks')
        parser.add_argument('--exhibitions', type=int, default=3, help='Number of exhibitions')
        parser.add_argument('--sales', type=int, default=5, help='Number of sales')

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            self.stdout.write('Clearing existing data...')
            self.clear_data()

        self.stdout.write('Creating sample data...')

        artists = self.create_artists(options['artists'])
        artworks = self.create_artworks(artists, options['artworks'])
        self.create_exhibitions(artworks, options['exhibitions'])
        self.create_sales(options['sales'])

        self.stdout.write(self.style.SUCCESS('Sample data created successfully!'))
        self.stdout.write('')
        self.stdout.write('Login:')
        self.stdout.write('  admin@gallery.local / admin123 (superuser)')

    def clear_data(self):
        """Clear all gallery data. Order follows the protected foreign keys."""
        Sale.objects.all().delete()
        Exhibition.objects.all().delete()
        Artwork.objects.all().delete()
        Artist.objects.all().delete()

    def create_artists(self, count):
        """Create the admin login plus `count` artists."""
        self.stdout.write('  Creating artists...')

        admin = Artist.objects.filter(email='admin@gallery.local').first()
        if admin is None:
            admin = Artist.objects.create_superuser(
                'admin@gallery.local', 'admin123', name='Gallery Admin'
            )

        artists = [admin]
        for _ in range(count):
            first = random.choice(FIRST_NAMES)
            last = random.choice(LAST_NAMES)
            slug = f"{first}.{last}".lower()
            artists.append(create_artist(
                name=f"{first} {last}",
                bio=f"{first} works between {random.choice(CITIES)[0]} and the studio.",
                image_url=f"https://i.pravatar.cc/300?u={slug}",
                phone=f"+420 {random.randint(600, 799)} {random.randint(100, 999)} {random.randint(100, 999)}",
                website=f"https://{first.lower()}{last.lower()}.art",
                specialization=random.sample(SPECIALIZATIONS, 2),
                achievements=[{
                    'title': f"{random.choice(TITLE_WORDS)} Prize",
                    'year': random.randint(2005, 2024),
                    'description': 'Awarded for an outstanding solo show.',
                }],
            ))

        self.stdout.write(f'    Created {len(artists)} artists')
        return artists

    def create_artworks(self, artists, count):
        """Create `count` available artworks for random artists."""
        self.stdout.write('  Creating artworks...')

        artworks = []
        for i in range(count):
            artworks.append(create_artwork(
                title=f"{random.choice(TITLE_WORDS)} {random.choice(TITLE_WORDS)}",
                artist=random.choice(artists),
                description='Sample artwork from the gallery collection.',
                price=Decimal(random.randint(200, 12000)),
                category=random.choice(CATEGORIES),
                image_url=f"https://picsum.photos/seed/artwork{i}/600/400",
                medium=random.choice(MEDIUMS),
                height=Decimal(random.randint(10, 100)),
                width=Decimal(random.randint(10, 100)),
                year=random.randint(1990, timezone.localdate().year),
                tags=random.sample(TAGS, 2),
            ))

        self.stdout.write(f'    Created {len(artworks)} artworks')
        return artworks

    def create_exhibitions(self, artworks, count):
        """Create `count` exhibitions, each showing up to three available artworks."""
        self.stdout.write('  Creating exhibitions...')

        today = timezone.localdate()
        for i in range(count):
            status = random.choice(ExhibitionStatus.values)
            if status == ExhibitionStatus.UPCOMING:
                start = today + timedelta(days=random.randint(7, 60))
            elif status == ExhibitionStatus.ONGOING:
                start = today - timedelta(days=random.randint(0, 14))
            else:
                start = today - timedelta(days=random.randint(60, 120))

            available = [a for a in artworks if a.status == ArtworkStatus.AVAILABLE]
            shown = random.sample(available, min(3, len(available)))
            city, country = random.choice(CITIES)

            create_exhibition(
                title=f"{random.choice(TITLE_WORDS)} {random.choice(['Visions', 'Horizons', 'Forms'])}",
                description='Group show of works from the collection.',
                start_date=start,
                end_date=start + timedelta(days=random.randint(14, 45)),
                curator=f"{random.choice(FIRST_NAMES)} {random.choice(LAST_NAMES)}",
                artworks=shown,
                image_url=f"https://picsum.photos/seed/exhibition{i}/800/400",
                venue=random.choice(VENUES),
                address=f"{random.randint(1, 120)} Gallery Street",
                city=city,
                country=country,
                status=status,
                ticket_price=Decimal(random.choice([0, 5, 10, 15])),
            )
            for artwork in shown:
                artwork.status = ArtworkStatus.EXHIBITION

        self.stdout.write(f'    Created {count} exhibitions')

    def create_sales(self, count):
        """Sell up to `count` available artworks; some end up pending or refunded."""
        self.stdout.write('  Creating sales...')

        available = list(Artwork.objects.filter(status=ArtworkStatus.AVAILABLE))
        created = 0
        for artwork in random.sample(available, min(count, len(available))):
            sale = record_sale(
                artwork_id=artwork.id,
                buyer=f"{random.choice(FIRST_NAMES)} {random.choice(LAST_NAMES)}",
                price=artwork.price,
                payment_method=random.choice(PAYMENT_METHODS),
                date=timezone.now() - timedelta(days=random.randint(0, 330)),
            )
            final_status = random.choice(PaymentStatus.values)
            if final_status != PaymentStatus.COMPLETED:
                update_sale(sale_id=sale.id, data={'payment_status': final_status})
            created += 1

        self.stdout.write(f'    Created {created} sales')
