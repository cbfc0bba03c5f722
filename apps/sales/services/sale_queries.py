"""Sale listing and totals."""

from django.db.models import Sum, Count, QuerySet, Value, DecimalField
from django.db.models.functions import Coalesce
from datetime import date
from decimal import Decimal
from uuid import UUID
from typing import Optional, Dict, Any

from ..models import Sale, PaymentStatus


def search_sales(
    *,
    payment_status: Optional[str] = None,
    date_from: Optional[date] = None,
    date_to: Optional[date] = None,
    artwork_id: Optional[UUID] = None,
) -> QuerySet:
    """
    Filter sales, newest first.

    Args:
        payment_status: pending / completed / refunded
        date_from: Sales on or after this day
        date_to: Sales on or before this day
        artwork_id: Sales of one artwork

    Returns:
        QuerySet with artwork and artist preloaded
    """
    queryset = Sale.objects.select_related('artwork__artist')

    if payment_status:
        queryset = queryset.filter(payment_status=payment_status)

    if date_from:
        queryset = queryset.filter(date__date__gte=date_from)

    if date_to:
        queryset = queryset.filter(date__date__lte=date_to)

    if artwork_id:
        queryset = queryset.filter(artwork_id=artwork_id)

    return queryset.order_by('-date', '-created_at')


def get_sales_stats() -> Dict[str, Any]:
    """
    Totals over completed sales.

    Returns:
        dict: total (sum of prices), count, commission (sum of commissions).
        Zeros when nothing has been sold.
    """
    zero = Value(Decimal('0.00'), output_field=DecimalField(max_digits=12, decimal_places=2))
    totals = Sale.objects.filter(
        payment_status=PaymentStatus.COMPLETED
    ).aggregate(
        total=Coalesce(Sum('price'), zero),
        commission=Coalesce(Sum('commission'), zero),
        count=Count('id'),
    )

    return {
        'total': totals['total'],
        'count': totals['count'],
        'commission': totals['commission'],
    }
