"""Quote value objects consumed by the scoring engine.

Quotes are fetched by the caller and handed to the engine as plain records.
Parsing is lenient: a malformed number degrades to zero and a missing string
to an empty one, so one bad quote never aborts a scoring run.
"""

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _lenient_float(value: Any) -> float:
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        number = float(str(value).strip() or 0)
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) else 0.0


def _lenient_int(value: Any) -> int:
    return int(_lenient_float(value))


def _lenient_str(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


class QuoteItem(BaseModel):
    """A priced line item within a supplier quote."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = ""
    rfq_item_id: str = ""
    equipment_id: str = ""
    equipment_name: str = ""
    quantity: int = 0
    unit_price: float = 0.0
    total_price: float = 0.0
    tax_amount: float = 0.0
    delivery_timeframe: str = ""
    manufacturer_name: str = ""
    model_number: str = ""
    specifications: str = ""
    compliance_certs: str = ""

    @field_validator("quantity", mode="before")
    @classmethod
    def coerce_quantity(cls, v: Any) -> int:
        """Coerce unparseable quantities to zero."""
        return _lenient_int(v)

    @field_validator("unit_price", "total_price", "tax_amount", mode="before")
    @classmethod
    def coerce_amounts(cls, v: Any) -> float:
        """Coerce unparseable amounts to zero."""
        return _lenient_float(v)

    @field_validator(
        "id",
        "rfq_item_id",
        "equipment_id",
        "equipment_name",
        "delivery_timeframe",
        "manufacturer_name",
        "model_number",
        "specifications",
        "compliance_certs",
        mode="before",
    )
    @classmethod
    def coerce_text(cls, v: Any) -> str:
        """Treat missing text fields as empty strings."""
        return _lenient_str(v)

    @property
    def equipment_key(self) -> str:
        """Key used to line up the same equipment across quotes."""
        return self.equipment_id or self.equipment_name


class Quote(BaseModel):
    """A supplier's priced offer against an RFQ.

    Attributes:
        id: Quote identifier
        quote_number: Human-readable quote number
        supplier_id: Supplier identifier
        supplier_name: Supplier display name
        rfq_id: RFQ the quote answers
        total_amount: Quote total used for price scoring
        valid_until: Validity date as supplied by the quote service
        delivery_terms: Free-text delivery terms
        payment_terms: Free-text payment terms
        warranty_terms: Free-text warranty terms used for quality scoring
        items: Line items in quote order
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = Field(..., min_length=1)
    quote_number: str = ""
    supplier_id: str = ""
    supplier_name: str = ""
    rfq_id: str = ""
    total_amount: float = 0.0
    valid_until: str = ""
    delivery_terms: str = ""
    payment_terms: str = ""
    warranty_terms: str = ""
    items: list[QuoteItem] = Field(default_factory=list)

    @field_validator("total_amount", mode="before")
    @classmethod
    def coerce_total(cls, v: Any) -> float:
        """Coerce an unparseable total to zero."""
        return _lenient_float(v)

    @field_validator(
        "quote_number",
        "supplier_id",
        "supplier_name",
        "rfq_id",
        "valid_until",
        "delivery_terms",
        "payment_terms",
        "warranty_terms",
        mode="before",
    )
    @classmethod
    def coerce_text(cls, v: Any) -> str:
        """Treat missing text fields as empty strings."""
        return _lenient_str(v)

    @field_validator("items", mode="before")
    @classmethod
    def coerce_items(cls, v: Any) -> Any:
        """Treat a missing item list as empty."""
        return [] if v is None else v
