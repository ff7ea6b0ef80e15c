"""Quote builders shared by unit, integration and E2E tests."""

from typing import Any

from rfq_comparison.domain.value_objects.quote import Quote, QuoteItem


def make_item(**overrides: Any) -> QuoteItem:
    """Build a quote line item with blank defaults."""
    data: dict[str, Any] = {
        "id": "item-1",
        "equipment_id": "eq-1",
        "equipment_name": "Patient Monitor",
        "quantity": 1,
    }
    data.update(overrides)
    return QuoteItem(**data)


def make_quote(quote_id: str, total_amount: float, **overrides: Any) -> Quote:
    """Build a quote; supplier fields are derived from the id unless given."""
    data: dict[str, Any] = {
        "id": quote_id,
        "quote_number": f"Q-{quote_id}",
        "supplier_id": f"sup-{quote_id}",
        "supplier_name": f"Supplier {quote_id}",
        "rfq_id": "rfq-1",
        "total_amount": total_amount,
    }
    data.update(overrides)
    return Quote(**data)


def bare_quote_pair() -> list[Quote]:
    """Two quotes without items or warranty, priced 1000 and 2000."""
    return [
        make_quote("a", 1000.0, supplier_name="Alpha Medical"),
        make_quote("b", 2000.0, supplier_name="Beta Supplies"),
    ]


def detailed_quotes() -> list[Quote]:
    """Three realistic quotes covering every scoring signal."""
    return [
        make_quote(
            "a",
            12000.0,
            supplier_name="Alpha Medical",
            warranty_terms="5-year full warranty",
            items=[
                make_item(
                    id="a-1",
                    equipment_id="eq-1",
                    equipment_name="Patient Monitor",
                    quantity=2,
                    unit_price=5000.0,
                    total_price=10000.0,
                    delivery_timeframe="2 weeks",
                    manufacturer_name="Philips",
                    model_number="MX450",
                    specifications="12-inch touch display",
                    compliance_certs="FDA, CE Mark, ISO 13485",
                ),
                make_item(
                    id="a-2",
                    equipment_id="eq-2",
                    equipment_name="Infusion Pump",
                    quantity=1,
                    unit_price=2000.0,
                    total_price=2000.0,
                    delivery_timeframe="30 days",
                    manufacturer_name="Baxter",
                    model_number="Sigma",
                    specifications="Dual channel",
                    compliance_certs="FDA",
                ),
            ],
        ),
        make_quote(
            "b",
            10000.0,
            supplier_name="Beta Supplies",
            warranty_terms="1 year limited",
            items=[
                make_item(
                    id="b-1",
                    equipment_id="eq-1",
                    equipment_name="Patient Monitor",
                    quantity=2,
                    unit_price=5000.0,
                    total_price=10000.0,
                    delivery_timeframe="3 months",
                    manufacturer_name="Acme",
                    model_number="",
                    specifications="",
                    compliance_certs="",
                ),
            ],
        ),
        make_quote(
            "c",
            15000.0,
            supplier_name="Gamma Health",
            warranty_terms="",
            items=[],
        ),
    ]
