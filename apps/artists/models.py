from django.contrib.auth.models import AbstractBaseUser, BaseUserManager, PermissionsMixin
from django.db import models
import uuid


class ArtistManager(BaseUserManager):
    """Manager for artists, who double as the gallery's login accounts."""

    def create_user(self, email=None, password=None, **extra_fields):
        if not extra_fields.get('name'):
            raise ValueError('Name is required')

        email = self.normalize_email(email) if email else None
        artist = self.model(email=email, **extra_fields)
        if password:
            artist.set_password(password)
        else:
            artist.set_unusable_password()
        artist.save(using=self._db)
        return artist

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        extra_fields.setdefault('name', email.split('@')[0])

        if extra_fields.get('is_staff') is not True:
            raise ValueError('Superuser must have is_staff=True')
        if extra_fields.get('is_superuser') is not True:
            raise ValueError('Superuser must have is_superuser=True')

        return self.create_user(email, password, **extra_fields)


class Artist(AbstractBaseUser, PermissionsMixin):
    """Gallery artist profile and login account."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200)
    bio = models.TextField(blank=True)
    image_url = models.URLField(max_length=500, blank=True)

    # Contact details (email is also the login identifier)
    email = models.EmailField(unique=True, max_length=255, null=True, blank=True)
    phone = models.CharField(max_length=50, blank=True)
    website = models.URLField(max_length=500, blank=True)

    # ["Oil painting", "Sculpture", ...]
    specialization = models.JSONField(default=list, blank=True)
    # [{"title": ..., "year": ..., "description": ...}, ...]
    achievements = models.JSONField(default=list, blank=True)

    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = ArtistManager()

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = []

    class Meta:
        db_table = 'artists'
        indexes = [
            models.Index(fields=['name'], name='artists_name_idx'),
            models.Index(fields=['created_at'], name='artists_created_idx'),
        ]
        ordering = ['name']

    def __str__(self):
        return self.name

    @property
    def contact(self):
        return {
            'email': self.email,
            'phone': self.phone,
            'website': self.website,
        }
