from rest_framework import viewsets, status
from rest_framework.permissions import IsAuthenticatedOrReadOnly
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from .serializers import (
    ExhibitionSerializer,
    ExhibitionInputSerializer,
    ExhibitionFilterSerializer,
)
from .services import (
    create_exhibition,
    update_exhibition,
    delete_exhibition,
    search_exhibitions,
    ExhibitionNotFoundError,
    InvalidDateRangeError,
)


class ExhibitionPagination(PageNumberPagination):
    """Custom pagination for exhibitions."""
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


class ExhibitionViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Exhibition CRUD operations.

    list: Get all exhibitions (with filters)
    create: Create an exhibition and put its artworks on show
    retrieve: Get a specific exhibition
    update: Update an exhibition (re-syncs artworks when given)
    partial_update: Partially update an exhibition
    destroy: Delete an exhibition and release its artworks
    """

    serializer_class = ExhibitionSerializer
    permission_classes = [IsAuthenticatedOrReadOnly]
    pagination_class = ExhibitionPagination
    lookup_value_regex = '[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}'

    def get_queryset(self):
        """
        Filter exhibitions based on query parameters.

        Filters:
        - status: upcoming / ongoing / completed
        - city: City name
        - upcoming: true to list exhibitions starting today or later
        """
        if self.action != 'list':
            return search_exhibitions()

        filter_serializer = ExhibitionFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        params = filter_serializer.validated_data

        return search_exhibitions(
            status=params.get('status'),
            city=params.get('city'),
            upcoming=params.get('upcoming', False),
        )

    def get_serializer_class(self):
        """Use different serializers for different actions."""
        if self.action in ['create', 'update', 'partial_update']:
            return ExhibitionInputSerializer
        return ExhibitionSerializer

    def create(self, request, *args, **kwargs):
        """Create a new exhibition."""
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            exhibition = create_exhibition(**serializer.validated_data)
        except InvalidDateRangeError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_400_BAD_REQUEST
            )

        exhibition = search_exhibitions().get(id=exhibition.id)
        return Response(
            ExhibitionSerializer(exhibition).data,
            status=status.HTTP_201_CREATED
        )

    def update(self, request, *args, **kwargs):
        """Update an exhibition (PUT and PATCH)."""
        partial = kwargs.pop('partial', False)
        serializer = self.get_serializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            exhibition = update_exhibition(
                exhibition_id=kwargs.get('pk'),
                data=serializer.validated_data
            )
        except ExhibitionNotFoundError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_404_NOT_FOUND
            )
        except InvalidDateRangeError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_400_BAD_REQUEST
            )

        return Response(ExhibitionSerializer(exhibition).data)

    def destroy(self, request, *args, **kwargs):
        """Delete an exhibition."""
        try:
            delete_exhibition(exhibition_id=kwargs.get('pk'))
        except ExhibitionNotFoundError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_404_NOT_FOUND
            )

        return Response({'message': 'Exhibition deleted successfully'})
