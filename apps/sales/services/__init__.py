"""Services for sales business logic."""

from .exceptions import (
    SalesServiceError,
    SaleNotFoundError,
    SaleArtworkNotFoundError,
    ArtworkUnavailableError,
)
from .sale_management import (
    compute_commission,
    record_sale,
    update_sale,
    delete_sale,
)
from .sale_queries import (
    search_sales,
    get_sales_stats,
)

__all__ = [
    # Exceptions
    'SalesServiceError',
    'SaleNotFoundError',
    'SaleArtworkNotFoundError',
    'ArtworkUnavailableError',
    # Sale Management
    'compute_commission',
    'record_sale',
    'update_sale',
    'delete_sale',
    # Sale Queries
    'search_sales',
    'get_sales_stats',
]
