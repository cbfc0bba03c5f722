"""
Domain exceptions for dashboard app.

Exception Hierarchy:
    DashboardServiceError (base)
    ├── InvalidRangeError
    ├── InvalidReportTypeError
    └── ReportGenerationError

Usage:
    from apps.dashboard.exceptions import InvalidRangeError

    if date_range not in CHART_RANGES:
        raise InvalidRangeError(f"Invalid range: {date_range}")
"""


class DashboardServiceError(Exception):
    """
    Base exception for all dashboard errors.

    Views catch this to turn any dashboard error into a 400 response:

        try:
            data = DashboardQueries.sales_chart(date_range='decade')
        except DashboardServiceError as e:
            return Response({'error': str(e)}, status=400)
    """

    pass


class InvalidRangeError(DashboardServiceError):
    """
    Raised when a chart or report range is not one of week, month, year.
    """

    pass


class InvalidReportTypeError(DashboardServiceError):
    """
    Raised when the report type is not one of dashboard, sales, inventory.
    """

    pass


class ReportGenerationError(DashboardServiceError):
    """
    Raised when the PDF could not be rendered.
    """

    pass
