from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticatedOrReadOnly
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from .serializers import (
    ArtworkSerializer,
    ArtworkListSerializer,
    ArtworkInputSerializer,
    ArtworkFilterSerializer,
)
from .services import (
    create_artwork,
    update_artwork,
    delete_artwork,
    search_artworks,
    get_all_categories,
    ArtworkNotFoundError,
    InvalidStatusTransitionError,
    ArtworkHasSalesError,
)


class ArtworkPagination(PageNumberPagination):
    """Custom pagination for artworks."""
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


class ArtworkViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Artwork CRUD operations.

    list: Get all artworks (with filters)
    create: Create a new artwork
    retrieve: Get a specific artwork
    update: Update an artwork
    partial_update: Partially update an artwork
    destroy: Delete an artwork without sales
    """

    serializer_class = ArtworkSerializer
    permission_classes = [IsAuthenticatedOrReadOnly]
    pagination_class = ArtworkPagination
    lookup_value_regex = '[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}'

    def get_queryset(self):
        """
        Filter artworks based on query parameters.

        Filters:
        - search: Search in title, description, medium
        - status: available / sold / exhibition
        - category: Category name
        - artist: Artist UUID
        - min_price / max_price: Price range
        """
        if self.action != 'list':
            return search_artworks()

        filter_serializer = ArtworkFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        params = filter_serializer.validated_data

        return search_artworks(
            search=params.get('search'),
            status=params.get('status'),
            category=params.get('category'),
            artist_id=params.get('artist'),
            min_price=params.get('min_price'),
            max_price=params.get('max_price'),
        )

    def get_serializer_class(self):
        """Use different serializers for different actions."""
        if self.action == 'list':
            return ArtworkListSerializer
        elif self.action in ['create', 'update', 'partial_update']:
            return ArtworkInputSerializer
        return ArtworkSerializer

    def create(self, request, *args, **kwargs):
        """Create a new artwork."""
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            artwork = create_artwork(**serializer.validated_data)
        except InvalidStatusTransitionError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_400_BAD_REQUEST
            )

        return Response(
            ArtworkSerializer(artwork).data,
            status=status.HTTP_201_CREATED
        )

    def update(self, request, *args, **kwargs):
        """Update an artwork (PUT and PATCH)."""
        partial = kwargs.pop('partial', False)
        serializer = self.get_serializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            artwork = update_artwork(
                artwork_id=kwargs.get('pk'),
                data=serializer.validated_data
            )
        except ArtworkNotFoundError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_404_NOT_FOUND
            )
        except InvalidStatusTransitionError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_400_BAD_REQUEST
            )

        return Response(ArtworkSerializer(artwork).data)

    def destroy(self, request, *args, **kwargs):
        """Delete an artwork."""
        try:
            delete_artwork(artwork_id=kwargs.get('pk'))
        except ArtworkNotFoundError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_404_NOT_FOUND
            )
        except ArtworkHasSalesError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_400_BAD_REQUEST
            )

        return Response({'message': 'Artwork deleted successfully'})

    @action(detail=False, methods=['get'])
    def categories(self, request):
        """Get list of all artwork categories."""
        return Response(get_all_categories())
