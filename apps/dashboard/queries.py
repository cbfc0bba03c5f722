"""
Dashboard Queries
=================

Read-only aggregations behind the dashboard: headline counts with
period-over-period trends, the recent activity feed and the revenue chart.

Classes:
    DashboardQueries: Static methods for dashboard data.

Example:
    Revenue for the last 12 months::

        from apps.dashboard.queries import DashboardQueries

        chart = DashboardQueries.sales_chart(date_range='year')
        for label, value in zip(chart['labels'], chart['values']):
            print(label, value)

Note:
    Revenue figures only count sales whose payment is completed. All methods
    return plain dicts and lists ready for JSON serialization.
"""

from django.db.models import Sum, Count, Value, DecimalField
from django.db.models.functions import Coalesce
from django.utils import timezone
from datetime import date, datetime, time, timedelta
from decimal import Decimal

from apps.artists.models import Artist
from apps.artworks.models import Artwork
from apps.exhibitions.models import Exhibition
from apps.sales.models import Sale, PaymentStatus
from .exceptions import InvalidRangeError


CHART_RANGES = ('week', 'month', 'year')

WEEKDAY_LABELS = ['Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat', 'Sun']
MONTH_LABELS = ['Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun',
                'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec']

TREND_WINDOW_DAYS = 30
MONTH_WINDOW_DAYS = 30

FALLBACK_IMAGE = '/images/fallback-image.jpg'
UNKNOWN_ARTIST = 'Unknown Artist'
VARIOUS_ARTISTS = 'Various Artists'


def _percent_change(current, previous):
    """Percentage change rounded to one decimal; 100.0 when starting from zero."""
    if not previous:
        return 100.0 if current else 0.0
    return round(float(current - previous) / float(previous) * 100, 1)


def _months_between(later, earlier):
    return (later.year - earlier.year) * 12 + later.month - earlier.month


def _shift_months(day, months):
    """First day of the month `months` before `day`'s month."""
    index = day.year * 12 + (day.month - 1) - months
    return date(index // 12, index % 12 + 1, 1)


def _sale_day(sale):
    return timezone.localtime(sale.date).date()


class DashboardQueries:
    """
    Aggregations for the dashboard endpoints and the PDF report.

    Methods:
        stats: Totals and 30-day trends.
        activity: Recent sales, artworks and exhibitions merged by date.
        range_start: First day covered by a week/month/year range.
        sales_chart: Revenue buckets for a range.
    """

    @staticmethod
    def stats(today=None):
        """
        Headline counts with period-over-period trends.

        Each trend compares the last 30 days against the 30 days before:
        records created (artworks, artists, exhibitions) or completed sales
        by sale date (sales, revenue).

        Args:
            today (date, optional): Reference day, defaults to the local date.

        Returns:
            dict: artworks, artists, exhibitions, sales (count of completed
            sales), revenue (their summed price) and one
            ``<name>_trend: {'value': float}`` entry per figure.
        """
        today = today or timezone.localdate()
        window_end = today + timedelta(days=1)
        current_start = window_end - timedelta(days=TREND_WINDOW_DAYS)
        previous_start = current_start - timedelta(days=TREND_WINDOW_DAYS)

        def created_trend(model):
            current = model.objects.filter(
                created_at__date__gte=current_start,
                created_at__date__lt=window_end,
            ).count()
            previous = model.objects.filter(
                created_at__date__gte=previous_start,
                created_at__date__lt=current_start,
            ).count()
            return {'value': _percent_change(current, previous)}

        zero = Value(Decimal('0.00'), output_field=DecimalField(max_digits=14, decimal_places=2))
        completed = Sale.objects.filter(payment_status=PaymentStatus.COMPLETED)

        def sale_window(start, end):
            return completed.filter(date__date__gte=start, date__date__lt=end).aggregate(
                count=Count('id'),
                revenue=Coalesce(Sum('price'), zero),
            )

        totals = completed.aggregate(count=Count('id'), revenue=Coalesce(Sum('price'), zero))
        current_sales = sale_window(current_start, window_end)
        previous_sales = sale_window(previous_start, current_start)

        return {
            'artworks': Artwork.objects.count(),
            'artists': Artist.objects.count(),
            'exhibitions': Exhibition.objects.count(),
            'sales': totals['count'],
            'revenue': totals['revenue'],
            'artworks_trend': created_trend(Artwork),
            'artists_trend': created_trend(Artist),
            'exhibitions_trend': created_trend(Exhibition),
            'sales_trend': {
                'value': _percent_change(current_sales['count'], previous_sales['count'])
            },
            'revenue_trend': {
                'value': _percent_change(current_sales['revenue'], previous_sales['revenue'])
            },
        }

    @staticmethod
    def activity():
        """
        Recent activity feed.

        Merges the 5 latest sales, the 5 latest artworks and the 3 latest
        exhibitions (by start date) into one list sorted newest first.

        Returns:
            list[dict]: Items with id, type (sale / new_artwork / exhibition),
            title, artist, price, date and image.
        """
        items = []

        recent_sales = Sale.objects.select_related('artwork__artist').order_by('-date')[:5]
        for sale in recent_sales:
            artwork = sale.artwork
            items.append({
                'id': sale.id,
                'type': 'sale',
                'title': artwork.title,
                'artist': artwork.artist.name or UNKNOWN_ARTIST,
                'price': sale.price,
                'date': sale.date,
                'image': artwork.image_url or FALLBACK_IMAGE,
            })

        recent_artworks = Artwork.objects.select_related('artist').order_by('-created_at')[:5]
        for artwork in recent_artworks:
            items.append({
                'id': artwork.id,
                'type': 'new_artwork',
                'title': artwork.title,
                'artist': artwork.artist.name or UNKNOWN_ARTIST,
                'price': artwork.price,
                'date': artwork.created_at,
                'image': artwork.image_url or FALLBACK_IMAGE,
            })

        recent_exhibitions = Exhibition.objects.order_by('-start_date')[:3]
        for exhibition in recent_exhibitions:
            items.append({
                'id': exhibition.id,
                'type': 'exhibition',
                'title': exhibition.title,
                'artist': VARIOUS_ARTISTS,
                'price': exhibition.ticket_price,
                # Dates become midnight datetimes so the feed sorts as one list
                'date': timezone.make_aware(datetime.combine(exhibition.start_date, time.min)),
                'image': exhibition.image_url or FALLBACK_IMAGE,
            })

        items.sort(key=lambda item: item['date'], reverse=True)
        return items

    @staticmethod
    def range_start(date_range, today=None):
        """
        First day covered by a chart/report range.

        Args:
            date_range (str): 'week' (7 days), 'month' (30 days) or 'year'
                (the current month and the 11 before it).
            today (date, optional): Reference day.

        Raises:
            InvalidRangeError: For any other range.
        """
        today = today or timezone.localdate()
        if date_range == 'week':
            return today - timedelta(days=6)
        if date_range == 'month':
            return today - timedelta(days=MONTH_WINDOW_DAYS)
        if date_range == 'year':
            return _shift_months(today, 11)
        raise InvalidRangeError(
            f"Invalid range: '{date_range}'. Valid options: {', '.join(CHART_RANGES)}"
        )

    @staticmethod
    def sales_chart(date_range='week', today=None):
        """
        Completed-sale revenue bucketed for the dashboard chart.

        Buckets run oldest to newest:

        - week: one bucket per day for the last 7 days, labelled with the
          abbreviated weekday.
        - month: sales of the last 30 days in 5 buckets of 7 days,
          ``Week 1`` .. ``Week 5``; ``Week 5`` holds the most recent days.
        - year: 12 calendar months ending with the current one, labelled
          with the abbreviated month name.

        Args:
            date_range (str): week, month or year.
            today (date, optional): Reference day, defaults to the local date.

        Returns:
            dict: ``{'labels': [...], 'values': [...]}`` with float values.

        Raises:
            InvalidRangeError: If date_range is unknown.
        """
        today = today or timezone.localdate()
        start = DashboardQueries.range_start(date_range, today)

        sales = Sale.objects.filter(
            payment_status=PaymentStatus.COMPLETED,
            date__date__gte=start,
            date__date__lte=today,
        ).only('price', 'date')

        if date_range == 'week':
            labels = [WEEKDAY_LABELS[(start + timedelta(days=i)).weekday()] for i in range(7)]
            values = [Decimal('0')] * 7
            for sale in sales:
                days_ago = (today - _sale_day(sale)).days
                values[6 - days_ago] += sale.price

        elif date_range == 'month':
            labels = [f'Week {i + 1}' for i in range(5)]
            values = [Decimal('0')] * 5
            for sale in sales:
                bucket = min((today - _sale_day(sale)).days // 7, 4)
                values[4 - bucket] += sale.price

        else:
            labels = [MONTH_LABELS[_shift_months(today, 11 - i).month - 1] for i in range(12)]
            values = [Decimal('0')] * 12
            for sale in sales:
                months_ago = _months_between(today, _sale_day(sale))
                values[11 - months_ago] += sale.price

        return {
            'labels': labels,
            'values': [float(value) for value in values],
        }
