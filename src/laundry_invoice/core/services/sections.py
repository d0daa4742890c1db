"""
Invoice section renderers.

Every section is a plain function ``(canvas, context, cursor) -> cursor``:
it paints one block starting from the running vertical cursor and returns
the cursor past the block plus the gap before the next one.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from laundry_invoice.config import BrandingSettings, get_logger
from laundry_invoice.core.entities.document import PaintStyle
from laundry_invoice.core.entities.order import NOT_AVAILABLE, BusinessSettings, OrderData
from laundry_invoice.core.entities.theme import InvoiceTheme
from laundry_invoice.core.interfaces.canvas import ICanvas
from laundry_invoice.core.services.brand_mark import BrandMarkRenderer
from laundry_invoice.core.services.formatting import format_date, format_money, format_timestamp

logger = get_logger(__name__)

# Business header
BRAND_MARK_WIDTH = 120.0
LOGO_SIZE = 60.0
LOGO_COLUMN = 70.0  # logo plus gutter
HEADER_RULE_OFFSET = 65.0

# Invoice header
TITLE_BAND_HEIGHT = 30.0
PAYMENT_BOX_WIDTH = 120.0
PAYMENT_BOX_HEIGHT = 55.0

# Customer block
CUSTOMER_PANEL_HEIGHT = 45.0
CUSTOMER_PANEL_HEIGHT_WITH_ADDRESS = 55.0
ADDRESS_COLUMN_WIDTH = 400.0

# Total box
TOTAL_BOX_WIDTH = 160.0
TOTAL_BOX_HEIGHT = 50.0

# Footer
FOOTER_OFFSET = 40.0

SECTION_GAP = 10.0


@dataclass(frozen=True)
class SectionContext:
    """Everything a section may read; sections never mutate it."""

    order: OrderData
    business: BusinessSettings
    theme: InvoiceTheme
    branding: BrandingSettings
    brand_mark: BrandMarkRenderer
    generated_at: datetime
    currency: str = "Rs."

    @property
    def margin(self) -> float:
        return self.theme.page_margin

    @property
    def business_name(self) -> str:
        return self.business.display_name(self.branding.default_business_name)

    def money(self, value: Decimal) -> str:
        return format_money(value, self.currency)


def _content_width(canvas: ICanvas, ctx: SectionContext) -> float:
    return canvas.page_width - ctx.margin * 2


# ----------------------------------------------------------------------
# Business header
# ----------------------------------------------------------------------


def _draw_business_logo(canvas: ICanvas, ctx: SectionContext, y: float) -> bool:
    """Paint the business logo at the left margin if its file exists."""
    logo_path = ctx.business.logo_path
    if not logo_path or not Path(logo_path).is_file():
        return False
    try:
        canvas.image(logo_path, ctx.margin, y, LOGO_SIZE, LOGO_SIZE)
    except Exception as e:
        logger.warning("business_logo_failed", path=logo_path, error=str(e))
        return False
    return True


def render_business_header(canvas: ICanvas, ctx: SectionContext, cursor: float) -> float:
    """Brand mark on the right, business logo and details on the left."""
    theme = ctx.theme
    branding = ctx.branding
    start_y = cursor

    mark_x = canvas.page_width - ctx.margin - BRAND_MARK_WIDTH
    ctx.brand_mark.render(canvas, mark_x, start_y, BRAND_MARK_WIDTH)
    mark_height = ctx.brand_mark.mark_height(BRAND_MARK_WIDTH)

    logo_column = LOGO_COLUMN if _draw_business_logo(canvas, ctx, start_y) else 0.0

    text_x = ctx.margin + logo_column
    text_width = mark_x - text_x - 15

    canvas.set_font(18, "B")
    canvas.set_fill_color(theme.primary)
    canvas.text(ctx.business_name, text_x, start_y, width=text_width)

    canvas.set_font(9)
    canvas.set_fill_color(theme.secondary)
    canvas.text(branding.tagline, text_x, start_y + 20)

    contact_y = start_y + 35
    canvas.set_font(8)
    canvas.text(
        f"Phone: {branding.contact_phone} | Email: {branding.contact_email}",
        text_x,
        contact_y,
        width=text_width,
    )
    canvas.text(f"Address: {branding.contact_address}", text_x, contact_y + 12, width=text_width)

    # Rule must clear both logos
    rule_y = max(start_y + HEADER_RULE_OFFSET, start_y + mark_height + 5)
    canvas.set_stroke_color(theme.primary)
    canvas.set_line_width(2)
    canvas.line(ctx.margin, rule_y, canvas.page_width - ctx.margin, rule_y)

    return rule_y + SECTION_GAP


# ----------------------------------------------------------------------
# Invoice header
# ----------------------------------------------------------------------


def render_invoice_header(canvas: ICanvas, ctx: SectionContext, cursor: float) -> float:
    """Title band, order details and the payment status badge."""
    theme = ctx.theme
    order = ctx.order
    start_y = cursor + SECTION_GAP
    width = _content_width(canvas, ctx)

    canvas.set_fill_color(theme.primary)
    canvas.rectangle(ctx.margin, start_y, width, TITLE_BAND_HEIGHT, PaintStyle.FILL)
    canvas.set_font(20, "B")
    canvas.set_fill_color(theme.white)
    canvas.text("SERVICE INVOICE", ctx.margin, start_y + 8, width=width, align="C")

    details_y = start_y + 40
    canvas.set_font(10, "B")
    canvas.set_fill_color(theme.primary)
    canvas.text("Order Details:", ctx.margin, details_y)

    canvas.set_font(9)
    canvas.set_fill_color(theme.ink)
    canvas.text(f"Order ID: #{order.id}", ctx.margin, details_y + 15)
    canvas.text(f"Date: {format_date(order.created_at)}", ctx.margin, details_y + 28)
    canvas.text(f"Status: {order.status}", ctx.margin, details_y + 41)

    # Payment badge
    box_x = canvas.page_width - 150
    if order.is_paid:
        badge_color, badge_background = theme.paid, theme.paid_background
    else:
        badge_color, badge_background = theme.accent, theme.unpaid_background

    canvas.set_fill_color(badge_background)
    canvas.set_stroke_color(badge_color)
    canvas.set_line_width(1)
    canvas.rectangle(
        box_x, details_y, PAYMENT_BOX_WIDTH, PAYMENT_BOX_HEIGHT, PaintStyle.FILL_STROKE
    )

    canvas.set_font(9, "B")
    canvas.set_fill_color(theme.ink)
    canvas.text("Payment Status:", box_x + 8, details_y + 8)

    canvas.set_font(12, "B")
    canvas.set_fill_color(badge_color)
    canvas.text(order.payment_status, box_x + 8, details_y + 22)

    if not order.is_paid:
        canvas.set_font(8)
        canvas.set_fill_color(theme.secondary)
        canvas.text("Pay on delivery", box_x + 8, details_y + 40)

    return details_y + 65


# ----------------------------------------------------------------------
# Customer block
# ----------------------------------------------------------------------


def customer_panel_height(order: OrderData) -> float:
    if order.has_address:
        return CUSTOMER_PANEL_HEIGHT_WITH_ADDRESS
    return CUSTOMER_PANEL_HEIGHT


def render_customer_block(canvas: ICanvas, ctx: SectionContext, cursor: float) -> float:
    """Bordered BILL TO panel; taller when an address is present."""
    theme = ctx.theme
    order = ctx.order
    start_y = cursor + SECTION_GAP
    height = customer_panel_height(order)
    x = ctx.margin + 10

    canvas.set_fill_color(theme.white)
    canvas.set_stroke_color(theme.primary)
    canvas.set_line_width(1)
    canvas.rectangle(
        ctx.margin, start_y, _content_width(canvas, ctx), height, PaintStyle.FILL_STROKE
    )

    canvas.set_font(10, "B")
    canvas.set_fill_color(theme.primary)
    canvas.text("BILL TO:", x, start_y + 8)

    canvas.set_fill_color(theme.ink)
    canvas.text(order.customer_name or NOT_AVAILABLE, x, start_y + 22)

    canvas.set_font(9)
    canvas.text(f"Phone: {order.customer_phone or NOT_AVAILABLE}", x, start_y + 35)

    if order.has_address:
        canvas.text(
            f"Address: {order.customer_address}", x, start_y + 47, width=ADDRESS_COLUMN_WIDTH
        )

    return start_y + height + SECTION_GAP


# ----------------------------------------------------------------------
# Total box
# ----------------------------------------------------------------------


def render_total_box(canvas: ICanvas, ctx: SectionContext, cursor: float) -> float:
    """Right-aligned framed grand total with payment terms on the left."""
    theme = ctx.theme
    start_y = cursor + SECTION_GAP
    box_x = canvas.page_width - ctx.margin - TOTAL_BOX_WIDTH

    canvas.set_fill_color(theme.primary)
    canvas.rectangle(box_x, start_y, TOTAL_BOX_WIDTH, TOTAL_BOX_HEIGHT, PaintStyle.FILL)

    canvas.set_fill_color(theme.white)
    canvas.set_stroke_color(theme.primary)
    canvas.set_line_width(2)
    canvas.rectangle(
        box_x + 2,
        start_y + 2,
        TOTAL_BOX_WIDTH - 4,
        TOTAL_BOX_HEIGHT - 4,
        PaintStyle.FILL_STROKE,
    )

    canvas.set_font(10, "B")
    canvas.set_fill_color(theme.primary)
    canvas.text("TOTAL AMOUNT", box_x + 10, start_y + 8)

    canvas.set_font(18, "B")
    canvas.text(ctx.money(ctx.order.total_amount), box_x + 10, start_y + 25)

    canvas.set_font(8)
    canvas.set_fill_color(theme.secondary)
    canvas.text(ctx.branding.payment_terms, ctx.margin, start_y + 10)
    canvas.text(ctx.branding.thank_you_note, ctx.margin, start_y + 22)

    return start_y + TOTAL_BOX_HEIGHT + 15


# ----------------------------------------------------------------------
# Footer
# ----------------------------------------------------------------------


def render_footer(canvas: ICanvas, ctx: SectionContext, cursor: float) -> float:
    """Contact line and generation timestamp, anchored to the page bottom."""
    theme = ctx.theme
    branding = ctx.branding
    footer_y = canvas.page_height - FOOTER_OFFSET

    canvas.set_stroke_color(theme.primary)
    canvas.set_line_width(1)
    canvas.line(ctx.margin, footer_y - 10, canvas.page_width - ctx.margin, footer_y - 10)

    canvas.set_font(7)
    canvas.set_fill_color(theme.secondary)
    canvas.text(
        f"For any queries, contact us at {branding.contact_phone} or {branding.contact_email}",
        ctx.margin,
        footer_y - 5,
    )
    canvas.text(
        f"Generated: {format_timestamp(ctx.generated_at)}",
        canvas.page_width - 150,
        footer_y - 5,
    )

    return max(cursor, footer_y)
