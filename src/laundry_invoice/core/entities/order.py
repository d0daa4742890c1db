"""
Order entities with Pydantic v2 validation.

Missing optional fields are replaced with display defaults instead of
raising, so every renderer downstream can rely on a complete shape.
"""

from collections.abc import Mapping
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any

from pydantic import BaseModel, Field, field_validator

NOT_AVAILABLE = "N/A"
PAID_STATUS = "Paid"
DEFAULT_PAYMENT_STATUS = "Pending"


def _coerce_decimal(v: Any) -> Decimal:
    """Convert None/empty/invalid to Decimal 0."""
    if v is None or v == "":
        return Decimal(0)
    if isinstance(v, Decimal):
        return v
    if isinstance(v, (int, float)):
        return Decimal(str(v))
    try:
        s = str(v).strip().replace(",", "")
        if s.lower() in {"none", "nan", "null", ""}:
            return Decimal(0)
        return Decimal(s)
    except (InvalidOperation, ValueError, TypeError):
        return Decimal(0)


class ServiceLine(BaseModel):
    """One billed service (e.g. washing 5 shirts)."""

    service_type: str = NOT_AVAILABLE
    cloth_type: str = NOT_AVAILABLE
    quantity: int = 1
    rate: Decimal = Decimal(0)

    @field_validator("service_type", "cloth_type", mode="before")
    @classmethod
    def coerce_label(cls, v: Any) -> str:
        """Blank labels render as N/A."""
        if v is None:
            return NOT_AVAILABLE
        text = str(v).strip()
        return text or NOT_AVAILABLE

    @field_validator("quantity", mode="before")
    @classmethod
    def coerce_quantity(cls, v: Any) -> int:
        """Missing, zero or unparseable quantities count as one."""
        try:
            quantity = int(float(v))
        except (TypeError, ValueError):
            return 1
        return quantity or 1

    @field_validator("rate", mode="before")
    @classmethod
    def coerce_rate(cls, v: Any) -> Decimal:
        return _coerce_decimal(v)

    @property
    def amount(self) -> Decimal:
        """Line amount (quantity x rate)."""
        return self.quantity * self.rate


class OrderData(BaseModel):
    """Order snapshot handed to the invoice engine for one generation call."""

    id: int
    customer_name: str | None = None
    customer_phone: str | None = None
    customer_address: str | None = None
    status: str = ""
    payment_status: str = DEFAULT_PAYMENT_STATUS
    total_amount: Decimal = Decimal(0)
    created_at: datetime = Field(default_factory=datetime.now)
    services: list[ServiceLine] = Field(default_factory=list)

    @field_validator("total_amount", mode="before")
    @classmethod
    def coerce_total(cls, v: Any) -> Decimal:
        return _coerce_decimal(v)

    @field_validator("payment_status", mode="before")
    @classmethod
    def coerce_payment_status(cls, v: Any) -> str:
        if v is None or str(v).strip() == "":
            return DEFAULT_PAYMENT_STATUS
        return str(v)

    @field_validator("status", mode="before")
    @classmethod
    def coerce_status(cls, v: Any) -> str:
        return "" if v is None else str(v)

    @field_validator("services", mode="before")
    @classmethod
    def coerce_services(cls, v: Any) -> Any:
        return [] if v is None else v

    @property
    def is_paid(self) -> bool:
        return self.payment_status == PAID_STATUS

    @property
    def has_address(self) -> bool:
        return bool(self.customer_address and self.customer_address.strip())

    @property
    def services_subtotal(self) -> Decimal:
        """Sum of all line amounts."""
        return sum((line.amount for line in self.services), Decimal(0))

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "OrderData":
        """
        Build order data from a persisted order row joined with its services.

        Accepts the storage column names (``contact_number``, ``order_date``,
        ``unit_cost``) as well as the engine's own field names.
        """
        services = []
        for service in record.get("services") or []:
            rate = service.get("rate")
            if rate is None:
                rate = service.get("unit_cost")
            services.append(
                {
                    "service_type": service.get("service_type"),
                    "cloth_type": service.get("cloth_type"),
                    "quantity": service.get("quantity"),
                    "rate": rate,
                }
            )

        data: dict[str, Any] = {
            "id": record["id"],
            "customer_name": record.get("customer_name"),
            "customer_phone": record.get("customer_phone") or record.get("contact_number"),
            "customer_address": record.get("customer_address"),
            "status": record.get("status"),
            "payment_status": record.get("payment_status"),
            "total_amount": record.get("total_amount"),
            "services": services,
        }
        created_at = record.get("created_at") or record.get("order_date")
        if created_at is not None:
            data["created_at"] = created_at
        return cls(**data)


class BusinessSettings(BaseModel):
    """Branding supplied by the business running the laundry."""

    business_name: str | None = None
    logo_path: str | None = None

    @field_validator("business_name", "logo_path", mode="before")
    @classmethod
    def blank_to_none(cls, v: Any) -> str | None:
        if v is None:
            return None
        text = str(v).strip()
        return text or None

    def display_name(self, default: str) -> str:
        return self.business_name or default
