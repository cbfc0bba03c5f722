"""
PDF report generation.

Reports are drawn directly on a reportlab canvas: a header block followed by
one section per report type. Tables that run past the bottom margin continue
on a new page.
"""

import io
import logging
from django.utils import timezone
from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas as pdf_canvas

from apps.artworks.models import Artwork, ArtworkStatus
from apps.sales.models import Sale, PaymentStatus
from .exceptions import InvalidReportTypeError, ReportGenerationError
from .queries import DashboardQueries

logger = logging.getLogger(__name__)

REPORT_TYPES = ('dashboard', 'sales', 'inventory')

PAGE_WIDTH, PAGE_HEIGHT = A4
MARGIN = 20 * mm
LINE_HEIGHT = 6 * mm


class _PageWriter:
    """Top-down text cursor over a canvas that breaks pages when full."""

    def __init__(self, canvas):
        self.canvas = canvas
        self.y = PAGE_HEIGHT - MARGIN

    def ensure_space(self, lines=1):
        if self.y - lines * LINE_HEIGHT < MARGIN:
            self.canvas.showPage()
            self.y = PAGE_HEIGHT - MARGIN

    def line(self, text, font='Helvetica', size=10, indent=0):
        self.ensure_space()
        self.canvas.setFont(font, size)
        self.canvas.drawString(MARGIN + indent, self.y, str(text))
        self.y -= LINE_HEIGHT

    def heading(self, text):
        self.ensure_space(3)
        self.y -= LINE_HEIGHT / 2
        self.line(text, font='Helvetica-Bold', size=13)

    def row(self, columns, widths, font='Helvetica', size=9):
        self.ensure_space()
        self.canvas.setFont(font, size)
        x = MARGIN
        for value, width in zip(columns, widths):
            self.canvas.drawString(x, self.y, str(value)[:int(width / (size * 0.5))])
            x += width
        self.y -= LINE_HEIGHT

    def gap(self):
        self.y -= LINE_HEIGHT / 2


def _money(value):
    return f"{value:,.2f}"


def _draw_dashboard(writer, date_range, today):
    stats = DashboardQueries.stats(today=today)
    writer.heading('Overview')
    for label, key in [
        ('Artworks', 'artworks'),
        ('Artists', 'artists'),
        ('Exhibitions', 'exhibitions'),
        ('Completed sales', 'sales'),
    ]:
        trend = stats[f'{key}_trend']['value']
        writer.line(f"{label}: {stats[key]}  ({trend:+.1f}% vs previous 30 days)")
    writer.line(
        f"Revenue: {_money(stats['revenue'])}  "
        f"({stats['revenue_trend']['value']:+.1f}% vs previous 30 days)"
    )

    chart = DashboardQueries.sales_chart(date_range=date_range, today=today)
    writer.heading(f'Revenue by {"day" if date_range == "week" else "period"}')
    widths = [40 * mm, 40 * mm]
    writer.row(['Period', 'Revenue'], widths, font='Helvetica-Bold')
    for label, value in zip(chart['labels'], chart['values']):
        writer.row([label, _money(value)], widths)


def _draw_sales(writer, date_range, today):
    start = DashboardQueries.range_start(date_range, today)
    sales = list(
        Sale.objects
        .select_related('artwork')
        .filter(date__date__gte=start, date__date__lte=today)
        .order_by('-date')
    )

    writer.heading(f'Sales since {start.isoformat()}')
    widths = [25 * mm, 50 * mm, 40 * mm, 22 * mm, 20 * mm, 13 * mm]
    writer.row(['Date', 'Artwork', 'Buyer', 'Price', 'Commission', 'Status'], widths,
               font='Helvetica-Bold')
    for sale in sales:
        writer.row([
            timezone.localtime(sale.date).date().isoformat(),
            sale.artwork.title,
            sale.buyer,
            _money(sale.price),
            _money(sale.commission),
            sale.payment_status,
        ], widths)

    # Totals cover completed sales only; pending and refunded rows are listed
    completed = [s for s in sales if s.payment_status == PaymentStatus.COMPLETED]
    writer.gap()
    writer.line(f"Sales: {len(sales)} ({len(completed)} completed)", font='Helvetica-Bold')
    writer.line(f"Total: {_money(sum(s.price for s in completed))}", font='Helvetica-Bold')
    writer.line(f"Commission: {_money(sum(s.commission for s in completed))}", font='Helvetica-Bold')


def _draw_inventory(writer):
    widths = [70 * mm, 50 * mm, 30 * mm, 20 * mm]
    for status, label in ArtworkStatus.choices:
        artworks = list(
            Artwork.objects
            .select_related('artist')
            .filter(status=status)
            .order_by('title')
        )
        writer.heading(f'{label} ({len(artworks)})')
        writer.row(['Title', 'Artist', 'Category', 'Price'], widths, font='Helvetica-Bold')
        for artwork in artworks:
            writer.row([artwork.title, artwork.artist.name, artwork.category, _money(artwork.price)],
                       widths)


def generate_report(*, report_type='dashboard', date_range='week', today=None):
    """
    Render a gallery report as PDF.

    Args:
        report_type: dashboard, sales or inventory
        date_range: week, month or year
        today: Reference day (defaults to the local date)

    Returns:
        tuple: (pdf bytes, download filename)

    Raises:
        InvalidReportTypeError: If report_type is unknown
        InvalidRangeError: If date_range is unknown
        ReportGenerationError: If reportlab fails to render
    """
    if report_type not in REPORT_TYPES:
        raise InvalidReportTypeError(
            f"Invalid report type: '{report_type}'. Valid options: {', '.join(REPORT_TYPES)}"
        )
    # Validates the range before anything is drawn
    DashboardQueries.range_start(date_range)

    now = timezone.now()
    today = today or timezone.localdate()
    buf = io.BytesIO()
    c = pdf_canvas.Canvas(buf, pagesize=A4)
    c.setTitle(f'Gallery {report_type} report')

    writer = _PageWriter(c)
    writer.line('Gallery Report', font='Helvetica-Bold', size=18)
    writer.gap()
    writer.line(f"Type: {report_type}")
    writer.line(f"Date range: {date_range}")
    writer.line(f"Generated: {now.isoformat(timespec='seconds')}")

    try:
        if report_type == 'dashboard':
            _draw_dashboard(writer, date_range, today)
        elif report_type == 'sales':
            _draw_sales(writer, date_range, today)
        else:
            _draw_inventory(writer)

        c.showPage()
        c.save()
    except (ValueError, TypeError, OSError) as e:
        logger.exception("Failed to render %s report", report_type)
        raise ReportGenerationError(f"Failed to generate report: {e}")

    filename = f"dashboard-report-{now.strftime('%Y-%m-%dT%H-%M-%S')}.pdf"
    logger.info("Generated %s report (%s) as %s", report_type, date_range, filename)
    return buf.getvalue(), filename

