"""
Sale recording service.

Recording a completed sale marks the artwork as sold; deleting it, or moving
it out of `completed`, puts the artwork back on the market. Every change
runs in one transaction with the sale and artwork rows locked.
"""

import logging
import uuid
from django.conf import settings
from django.db import transaction
from django.utils import timezone
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from uuid import UUID
from typing import Optional, Dict, Any

from apps.artworks.models import Artwork
from apps.artworks.services import (
    mark_artwork_sold,
    mark_artwork_available,
    ArtworkNotAvailableError,
)
from ..models import Sale, PaymentStatus
from .exceptions import (
    SaleNotFoundError,
    SaleArtworkNotFoundError,
    ArtworkUnavailableError,
)

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = [
    'buyer', 'buyer_email', 'buyer_phone', 'shipping_address',
    'payment_method', 'date',
]


def compute_commission(price: Decimal) -> Decimal:
    """Gallery commission for a sale price, rounded to cents."""
    rate = Decimal(str(settings.SALE_COMMISSION_RATE))
    return (price * rate).quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)


@transaction.atomic
def record_sale(
    *,
    artwork_id: UUID,
    buyer: str,
    price: Decimal,
    payment_method: str,
    date: Optional[datetime] = None,
    buyer_email: str = '',
    buyer_phone: str = '',
    shipping_address: str = '',
) -> Sale:
    """
    Record a completed sale and mark the artwork as sold.

    Args:
        artwork_id: Artwork being sold
        buyer: Buyer's name
        price: Sale price
        payment_method: e.g. card, bank_transfer, cash
        date: Sale timestamp (defaults to now)
        buyer_email: Optional buyer email
        buyer_phone: Optional buyer phone
        shipping_address: Optional delivery address

    Returns:
        Created Sale instance (artwork preloaded)

    Raises:
        SaleArtworkNotFoundError: If artwork doesn't exist
        ArtworkUnavailableError: If artwork is not available
    """
    try:
        artwork = (
            Artwork.objects
            .select_for_update()
            .get(id=artwork_id)
        )
    except Artwork.DoesNotExist:
        raise SaleArtworkNotFoundError("Artwork not found")

    try:
        mark_artwork_sold(artwork=artwork)
    except ArtworkNotAvailableError as e:
        raise ArtworkUnavailableError(str(e))

    sale = Sale.objects.create(
        artwork=artwork,
        buyer=buyer,
        buyer_email=buyer_email,
        buyer_phone=buyer_phone,
        shipping_address=shipping_address,
        price=price,
        commission=compute_commission(price),
        payment_method=payment_method,
        payment_status=PaymentStatus.COMPLETED,
        transaction_id=str(uuid.uuid4()),
        date=date or timezone.now(),
    )

    logger.info(
        "Sale %s recorded for artwork %s at %s",
        sale.transaction_id, artwork.id, price
    )
    return sale


@transaction.atomic
def update_sale(
    *,
    sale_id: UUID,
    data: Dict[str, Any]
) -> Sale:
    """
    Update a sale.

    A new price recomputes the commission. Leaving `completed` releases the
    artwork; re-entering `completed` marks it sold again.

    Raises:
        SaleNotFoundError: If sale doesn't exist
        ArtworkUnavailableError: If re-completing a sale whose artwork is sold
    """
    try:
        sale = (
            Sale.objects
            .select_for_update()
            .get(id=sale_id)
        )
    except Sale.DoesNotExist:
        raise SaleNotFoundError("Sale not found")

    artwork = Artwork.objects.select_for_update().get(id=sale.artwork_id)
    update_fields = []

    new_status = data.get('payment_status')
    if new_status and new_status != sale.payment_status:
        if sale.payment_status == PaymentStatus.COMPLETED:
            mark_artwork_available(artwork=artwork)
        elif new_status == PaymentStatus.COMPLETED:
            try:
                mark_artwork_sold(artwork=artwork, require_available=False)
            except ArtworkNotAvailableError as e:
                raise ArtworkUnavailableError(str(e))

        logger.info(
            "Sale %s payment status %s -> %s",
            sale.transaction_id, sale.payment_status, new_status
        )
        sale.payment_status = new_status
        update_fields.append('payment_status')

    if 'price' in data and data['price'] != sale.price:
        sale.price = data['price']
        sale.commission = compute_commission(sale.price)
        update_fields.extend(['price', 'commission'])

    for field in UPDATABLE_FIELDS:
        if field in data:
            setattr(sale, field, data[field])
            update_fields.append(field)

    if update_fields:
        update_fields.append('updated_at')
        sale.save(update_fields=update_fields)

    return Sale.objects.select_related('artwork__artist').get(id=sale.id)


@transaction.atomic
def delete_sale(*, sale_id: UUID) -> None:
    """
    Delete a sale and put a sold artwork back on the market.

    Raises:
        SaleNotFoundError: If sale doesn't exist
    """
    try:
        sale = (
            Sale.objects
            .select_for_update()
            .get(id=sale_id)
        )
    except Sale.DoesNotExist:
        raise SaleNotFoundError("Sale not found")

    if sale.payment_status == PaymentStatus.COMPLETED:
        artwork = Artwork.objects.select_for_update().get(id=sale.artwork_id)
        mark_artwork_available(artwork=artwork)

    sale.delete()
    logger.info("Sale %s deleted", sale.transaction_id)
