"""Invoice color theme and page margin."""

from pydantic import BaseModel, ConfigDict


class InvoiceTheme(BaseModel):
    """
    Immutable styling values for one invoice.

    Passed into the composer so invoices with different themes can be
    generated side by side.
    """

    model_config = ConfigDict(frozen=True)

    page_margin: float = 30.0

    # Document palette
    primary: str = "#800000"
    secondary: str = "#4a4a4a"
    accent: str = "#a52a2a"
    white: str = "#ffffff"
    ink: str = "#000000"

    # Payment badge
    paid: str = "#10b981"
    paid_background: str = "#f0fdf4"
    unpaid_background: str = "#fef2f2"

    # Services table
    row_even: str = "#ffffff"
    row_odd: str = "#fdf2f2"

    # Brand mark
    mark_badge: str = "#9D3744"
    mark_circle: str = "#FCEAEA"
    mark_title: str = "#7D0C17"
    mark_tagline: str = "#C51D23"
