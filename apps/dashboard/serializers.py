"""
Serializers for dashboard app.

Input Serializers:
    SalesChartQuerySerializer - Validates the chart range
    ReportRequestSerializer - Validates report type and range

Response Serializers:
    DashboardStatsSerializer - Counts with trends
    ActivityItemSerializer - One entry of the activity feed
    SalesChartSerializer - Chart labels and values
"""

from rest_framework import serializers
from .queries import CHART_RANGES
from .reports import REPORT_TYPES


# =============================================================================
# Input Serializers
# =============================================================================

class SalesChartQuerySerializer(serializers.Serializer):
    """Validate the sales chart `range` query parameter."""

    range = serializers.ChoiceField(
        choices=CHART_RANGES,
        required=False,
        default='week',
        help_text='Chart range: week, month or year'
    )


class ReportRequestSerializer(serializers.Serializer):
    """Validate a report request body."""

    type = serializers.ChoiceField(
        choices=REPORT_TYPES,
        required=False,
        default='dashboard',
        help_text='Report type: dashboard, sales or inventory'
    )
    date_range = serializers.ChoiceField(
        choices=CHART_RANGES,
        required=False,
        default='week',
        help_text='Range covered: week, month or year'
    )


# =============================================================================
# Response Serializers (API documentation)
# =============================================================================

class TrendSerializer(serializers.Serializer):
    value = serializers.FloatField(help_text='Percent change vs the previous 30 days')


class DashboardStatsSerializer(serializers.Serializer):
    artworks = serializers.IntegerField()
    artists = serializers.IntegerField()
    exhibitions = serializers.IntegerField()
    sales = serializers.IntegerField()
    revenue = serializers.DecimalField(max_digits=14, decimal_places=2, coerce_to_string=False)
    artworks_trend = TrendSerializer()
    artists_trend = TrendSerializer()
    exhibitions_trend = TrendSerializer()
    sales_trend = TrendSerializer()
    revenue_trend = TrendSerializer()


class ActivityItemSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    type = serializers.ChoiceField(choices=['sale', 'new_artwork', 'exhibition'])
    title = serializers.CharField()
    artist = serializers.CharField()
    price = serializers.DecimalField(max_digits=12, decimal_places=2, allow_null=True, coerce_to_string=False)
    date = serializers.DateTimeField()
    image = serializers.CharField()


class SalesChartSerializer(serializers.Serializer):
    labels = serializers.ListField(child=serializers.CharField())
    values = serializers.ListField(child=serializers.FloatField())


class ErrorSerializer(serializers.Serializer):
    error = serializers.CharField()
