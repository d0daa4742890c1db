"""
Services table renderer.

Paints the caption, a header band, one banded row per service line, a
border around header and rows, and a subtotal when there is more than one
line. The border height comes from the final row cursor.
"""

from collections.abc import Callable
from decimal import Decimal

from laundry_invoice.core.entities.document import PaintStyle
from laundry_invoice.core.entities.order import ServiceLine
from laundry_invoice.core.entities.theme import InvoiceTheme
from laundry_invoice.core.interfaces.canvas import ICanvas
from laundry_invoice.core.services.sections import SECTION_GAP, SectionContext

HEADER_HEIGHT = 20.0
ROW_HEIGHT = 22.0

# (title, x offset from margin, cell width)
COLUMNS: tuple[tuple[str, float, float | None], ...] = (
    ("Service", 8, 110),
    ("Cloth Type", 120, 75),
    ("Qty", 200, None),
    ("Rate (Rs.)", 240, None),
    ("Amount (Rs.)", 300, None),
)


def row_fill_color(theme: InvoiceTheme, index: int) -> str:
    """Band color of row ``index``; depends only on its parity."""
    return theme.row_even if index % 2 == 0 else theme.row_odd


def _cells(line: ServiceLine, money: Callable[[Decimal], str]) -> list[str]:
    return [
        line.service_type,
        line.cloth_type,
        str(line.quantity),
        money(line.rate),
        money(line.amount),
    ]


def render_services_table(canvas: ICanvas, ctx: SectionContext, cursor: float) -> float:
    theme = ctx.theme
    margin = ctx.margin
    start_y = cursor + SECTION_GAP
    table_width = canvas.page_width - margin * 2

    canvas.set_font(11, "B")
    canvas.set_fill_color(theme.primary)
    canvas.text("SERVICES BREAKDOWN", margin, start_y)

    header_y = start_y + 20
    canvas.rectangle(margin, header_y, table_width, HEADER_HEIGHT, PaintStyle.FILL)

    canvas.set_font(9, "B")
    canvas.set_fill_color(theme.white)
    for title, offset, _ in COLUMNS:
        canvas.text(title, margin + offset, header_y + 6)

    row_y = header_y + HEADER_HEIGHT
    subtotal = Decimal(0)

    for index, line in enumerate(ctx.order.services):
        subtotal += line.amount

        canvas.set_fill_color(row_fill_color(theme, index))
        canvas.rectangle(margin, row_y, table_width, ROW_HEIGHT, PaintStyle.FILL)

        canvas.set_font(8)
        canvas.set_fill_color(theme.ink)
        cells = _cells(line, ctx.money)
        for column, ((_, offset, width), value) in enumerate(zip(COLUMNS, cells)):
            if column == len(COLUMNS) - 1:
                canvas.set_font(8, "B")
            canvas.text(value, margin + offset, row_y + 7, width=width)

        row_y += ROW_HEIGHT

    canvas.set_stroke_color(theme.primary)
    canvas.set_line_width(1)
    canvas.rectangle(margin, header_y, table_width, row_y - header_y, PaintStyle.STROKE)

    if len(ctx.order.services) > 1:
        row_y += 8
        canvas.set_font(10, "B")
        canvas.set_fill_color(theme.secondary)
        canvas.text(f"Subtotal: {ctx.money(subtotal)}", margin + 300, row_y)

    return row_y + 15
