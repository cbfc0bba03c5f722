from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema
from .serializers import (
    SaleSerializer,
    SaleCreateSerializer,
    SaleUpdateSerializer,
    SaleFilterSerializer,
    SalesStatsSerializer,
)
from .services import (
    record_sale,
    update_sale,
    delete_sale,
    search_sales,
    get_sales_stats,
    SaleNotFoundError,
    SaleArtworkNotFoundError,
    ArtworkUnavailableError,
)


class SalePagination(PageNumberPagination):
    """Custom pagination for sales."""
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


class SaleViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Sale operations.

    list: Get all sales, newest first (filterable)
    create: Record a sale and mark the artwork as sold
    retrieve: Get a specific sale
    update: Edit a sale (status changes update the artwork)
    partial_update: Partially edit a sale
    destroy: Delete a sale and release the artwork
    """

    serializer_class = SaleSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = SalePagination
    lookup_value_regex = '[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}'

    def get_queryset(self):
        """Filter sales using input serializer validation."""
        if self.action != 'list':
            return search_sales()

        filter_serializer = SaleFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        params = filter_serializer.validated_data

        return search_sales(
            payment_status=params.get('payment_status'),
            date_from=params.get('date_from'),
            date_to=params.get('date_to'),
            artwork_id=params.get('artwork'),
        )

    def get_serializer_class(self):
        """Use different serializers for different actions."""
        if self.action == 'create':
            return SaleCreateSerializer
        elif self.action in ['update', 'partial_update']:
            return SaleUpdateSerializer
        return SaleSerializer

    def create(self, request, *args, **kwargs):
        """Record a sale."""
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = serializer.validated_data.copy()
        artwork_id = data.pop('artwork')

        try:
            sale = record_sale(artwork_id=artwork_id, **data)
        except SaleArtworkNotFoundError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_404_NOT_FOUND
            )
        except ArtworkUnavailableError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_400_BAD_REQUEST
            )

        sale = search_sales().get(id=sale.id)
        return Response(
            SaleSerializer(sale).data,
            status=status.HTTP_201_CREATED
        )

    def update(self, request, *args, **kwargs):
        """Edit a sale (PUT and PATCH)."""
        partial = kwargs.pop('partial', False)
        serializer = self.get_serializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            sale = update_sale(
                sale_id=kwargs.get('pk'),
                data=serializer.validated_data
            )
        except SaleNotFoundError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_404_NOT_FOUND
            )
        except ArtworkUnavailableError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_400_BAD_REQUEST
            )

        return Response(SaleSerializer(sale).data)

    def destroy(self, request, *args, **kwargs):
        """Delete a sale."""
        try:
            delete_sale(sale_id=kwargs.get('pk'))
        except SaleNotFoundError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_404_NOT_FOUND
            )

        return Response({'message': 'Sale deleted successfully'})

    @extend_schema(responses={200: SalesStatsSerializer}, tags=['sales'])
    @action(detail=False, methods=['get'])
    def stats(self, request):
        """
        Get totals over completed sales.

        GET /api/sales/stats/
        """
        stats = get_sales_stats()
        return Response(SalesStatsSerializer(stats).data)
