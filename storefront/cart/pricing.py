"""
Pricing engine: subtotal, shipping, tax, promo discount and total.

Pure functions over (items, promo_code). All arithmetic is Decimal at full
precision; rounding is left to the presentation layer.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Iterable, Mapping, Optional

from storefront.logging import get_logger
from storefront.money import parse_decimal, to_decimal

logger = get_logger(__name__)

FLAT_SHIPPING = Decimal("5.99")
TAX_RATE = Decimal("0.10")

FULL_WAIVER_CODE = "HIRE_SAMI"


def normalize_code(code: Optional[str]) -> str:
    """Trim and upper-case a promo code as typed by the shopper."""
    return (code or "").strip().upper()


@dataclass(frozen=True)
class PromoRule:
    """
    Discount policy for one promo code.

    ``fraction`` (0..1) is taken from the gross amount (subtotal + shipping +
    tax); ``amount`` is a fixed reduction on top of it. The discount never
    exceeds the gross amount.
    """
    code: str
    fraction: Decimal = Decimal("0")
    amount: Decimal = Decimal("0")

    def __post_init__(self):
        object.__setattr__(self, "code", normalize_code(self.code))
        object.__setattr__(self, "fraction", to_decimal(self.fraction))
        object.__setattr__(self, "amount", to_decimal(self.amount))
        if not self.code:
            raise ValueError("promo code must not be empty")
        if not (Decimal("0") <= self.fraction <= Decimal("1")):
            raise ValueError("fraction must be between 0 and 1")
        if self.amount < 0:
            raise ValueError("amount must be non-negative")

    @property
    def waives_all(self) -> bool:
        return self.fraction >= 1

    def discount_for(self, gross: Decimal) -> Decimal:
        if gross <= 0:
            return Decimal("0")
        return min(gross, gross * self.fraction + self.amount)


DEFAULT_PROMO_RULES: Dict[str, PromoRule] = {
    FULL_WAIVER_CODE: PromoRule(code=FULL_WAIVER_CODE, fraction=Decimal("1")),
}


@dataclass(frozen=True)
class PricingSnapshot:
    subtotal: Decimal
    shipping: Decimal
    tax: Decimal
    discount: Decimal
    total: Decimal

    @property
    def gross(self) -> Decimal:
        return self.subtotal + self.shipping + self.tax

    @property
    def has_discount(self) -> bool:
        return self.discount > 0


EMPTY_PRICING = PricingSnapshot(
    subtotal=Decimal("0"),
    shipping=Decimal("0"),
    tax=Decimal("0"),
    discount=Decimal("0"),
    total=Decimal("0"),
)


def calculate_subtotal(items: Iterable) -> Decimal:
    """Sum of price x quantity over all lines."""
    return sum((to_decimal(item.price) * item.quantity for item in items), Decimal("0"))


def calculate_pricing(
    items: Iterable,
    promo_code: Optional[str] = None,
    rules: Mapping[str, PromoRule] = DEFAULT_PROMO_RULES,
) -> PricingSnapshot:
    """
    Compute the pricing snapshot for a set of lines and an optional promo code.

    Args:
        items: Objects with ``price`` and ``quantity`` attributes
        promo_code: Applied code (normalized before lookup)
        rules: Known promo rules keyed by normalized code

    Returns:
        PricingSnapshot with unrounded Decimal values
    """
    subtotal = calculate_subtotal(items)
    shipping = FLAT_SHIPPING if subtotal > 0 else Decimal("0")
    tax = subtotal * TAX_RATE
    gross = subtotal + shipping + tax

    discount = Decimal("0")
    rule = rules.get(normalize_code(promo_code)) if promo_code else None
    if rule is not None:
        discount = rule.discount_for(gross)

    total = max(Decimal("0"), gross - discount)
    return PricingSnapshot(
        subtotal=subtotal,
        shipping=shipping,
        tax=tax,
        discount=discount,
        total=total,
    )


def parse_promo_rules(raw: str) -> Dict[str, PromoRule]:
    """
    Parse extra promo rules from a config string.

    Format: comma-separated ``CODE=VALUE`` pairs where VALUE is either a
    percentage (``10%``) or a fixed amount (``5`` or ``5.50``)::

        SAVE10=10%,FIVEOFF=5

    Raises:
        ValueError: on a malformed entry
    """
    rules: Dict[str, PromoRule] = {}
    for entry in (raw or "").split(","):
        entry = entry.strip()
        if not entry:
            continue
        code, sep, value = entry.partition("=")
        if not sep or not code.strip() or not value.strip():
            raise ValueError(f"Malformed promo rule: {entry!r}")
        value = value.strip()
        if value.endswith("%"):
            rule = PromoRule(code=code, fraction=parse_decimal(value[:-1].strip()) / Decimal(100))
        else:
            rule = PromoRule(code=code, amount=parse_decimal(value))
        rules[rule.code] = rule
    return rules


def build_promo_rules(raw: str = "") -> Dict[str, PromoRule]:
    """Built-in rules merged with configured ones (configured wins)."""
    rules = dict(DEFAULT_PROMO_RULES)
    extra = parse_promo_rules(raw)
    if extra:
        logger.info(f"Loaded {len(extra)} configured promo rule(s): {', '.join(sorted(extra))}")
    rules.update(extra)
    return rules
