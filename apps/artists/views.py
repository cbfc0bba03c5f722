from rest_framework import viewsets, status
from rest_framework.permissions import IsAuthenticatedOrReadOnly
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from .serializers import (
    ArtistSerializer,
    ArtistListSerializer,
    ArtistInputSerializer,
    ArtistFilterSerializer,
)
from .services import (
    create_artist,
    update_artist,
    delete_artist,
    search_artists,
    ArtistNotFoundError,
    DuplicateArtistEmailError,
    ArtistHasArtworksError,
)


class ArtistPagination(PageNumberPagination):
    """Custom pagination for artists."""
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


class ArtistViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Artist CRUD operations.

    list: Get all artists (with filters)
    create: Create a new artist
    retrieve: Get a specific artist
    update: Update an artist
    partial_update: Partially update an artist
    destroy: Delete an artist without artworks
    """

    serializer_class = ArtistSerializer
    permission_classes = [IsAuthenticatedOrReadOnly]
    pagination_class = ArtistPagination
    lookup_value_regex = '[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}'

    def get_queryset(self):
        """
        Filter artists based on query parameters.

        Filters:
        - search: Search in name, bio, email
        - specialization: Artists listing this discipline
        - active: true/false
        """
        if self.action != 'list':
            return search_artists()

        filter_serializer = ArtistFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        params = filter_serializer.validated_data

        return search_artists(
            search=params.get('search'),
            specialization=params.get('specialization'),
            active=params.get('active'),
        )

    def get_serializer_class(self):
        """Use different serializers for different actions."""
        if self.action == 'list':
            return ArtistListSerializer
        elif self.action in ['create', 'update', 'partial_update']:
            return ArtistInputSerializer
        return ArtistSerializer

    def create(self, request, *args, **kwargs):
        """Create a new artist."""
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            artist = create_artist(**serializer.validated_data)
        except DuplicateArtistEmailError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_400_BAD_REQUEST
            )

        return Response(
            ArtistSerializer(artist).data,
            status=status.HTTP_201_CREATED
        )

    def update(self, request, *args, **kwargs):
        """Update an artist (PUT and PATCH)."""
        partial = kwargs.pop('partial', False)
        serializer = self.get_serializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            artist = update_artist(
                artist_id=kwargs.get('pk'),
                data=serializer.validated_data
            )
        except ArtistNotFoundError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_404_NOT_FOUND
            )
        except DuplicateArtistEmailError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_400_BAD_REQUEST
            )

        return Response(ArtistSerializer(artist).data)

    def destroy(self, request, *args, **kwargs):
        """Delete an artist."""
        try:
            delete_artist(artist_id=kwargs.get('pk'))
        except ArtistNotFoundError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_404_NOT_FOUND
            )
        except ArtistHasArtworksError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_400_BAD_REQUEST
            )

        return Response(status=status.HTTP_204_NO_CONTENT)
