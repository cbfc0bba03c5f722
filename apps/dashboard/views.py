from django.http import HttpResponse
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework import status
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from .queries import DashboardQueries
from .reports import generate_report
from .serializers import (
    # Input serializers
    SalesChartQuerySerializer,
    ReportRequestSerializer,
    # Response serializers
    DashboardStatsSerializer,
    ActivityItemSerializer,
    SalesChartSerializer,
    ErrorSerializer,
)
from .exceptions import DashboardServiceError, ReportGenerationError


@extend_schema(
    responses={200: DashboardStatsSerializer},
    description="Gallery totals with trends against the previous 30 days.",
    tags=['dashboard'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def stats(request):
    """Get dashboard counts and trends - thin HTTP handler."""
    data = DashboardQueries.stats()
    return Response(DashboardStatsSerializer(data).data)


@extend_schema(
    responses={200: ActivityItemSerializer(many=True)},
    description="Recent sales, new artworks and exhibitions, newest first.",
    tags=['dashboard'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def activity(request):
    """Get the recent activity feed - thin HTTP handler."""
    items = DashboardQueries.activity()
    return Response(ActivityItemSerializer(items, many=True).data)


@extend_schema(
    parameters=[
        OpenApiParameter('range', OpenApiTypes.STR, description="Chart range: 'week', 'month', 'year'", default='week'),
    ],
    responses={
        200: SalesChartSerializer,
        400: ErrorSerializer,
    },
    description="Completed-sale revenue bucketed by day, week or month.",
    tags=['dashboard'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def sales_chart(request):
    """Get revenue chart data - thin HTTP handler."""
    query_serializer = SalesChartQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)

    try:
        data = DashboardQueries.sales_chart(
            date_range=query_serializer.validated_data['range']
        )
    except DashboardServiceError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(data)


def _pdf_response(report_type, date_range):
    try:
        pdf, filename = generate_report(report_type=report_type, date_range=date_range)
    except ReportGenerationError as e:
        return Response({'error': str(e)}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
    except DashboardServiceError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    response = HttpResponse(pdf, content_type='application/pdf')
    response['Content-Disposition'] = f'attachment; filename="{filename}"'
    return response


@extend_schema(
    request=ReportRequestSerializer,
    responses={
        (200, 'application/pdf'): OpenApiTypes.BINARY,
        400: ErrorSerializer,
    },
    description="Generate a PDF report (dashboard, sales or inventory).",
    tags=['reports'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def generate(request):
    """Generate a PDF report download."""
    serializer = ReportRequestSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    params = serializer.validated_data

    return _pdf_response(params['type'], params['date_range'])


@extend_schema(
    request=ReportRequestSerializer,
    responses={
        (200, 'application/pdf'): OpenApiTypes.BINARY,
        400: ErrorSerializer,
    },
    description="Generate the dashboard PDF report.",
    tags=['dashboard'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def report(request):
    """Generate the dashboard PDF report."""
    serializer = ReportRequestSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    return _pdf_response('dashboard', serializer.validated_data['date_range'])
