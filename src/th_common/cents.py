"""Integer arithmetic utilities for cents-based billing.

All charges and totals use int (cents). No float, no Decimal.
Conversion to a display string happens only when a statement is rendered.
"""

CENTS_PER_DOLLAR = 100


def cents_to_display(cents: int) -> str:
    """Convert cents to US display string: 65000 -> '$650.00', -1200 -> '-$12.00'."""
    if cents < 0:
        abs_cents = -cents
        return f"-${abs_cents // CENTS_PER_DOLLAR:,}.{abs_cents % CENTS_PER_DOLLAR:02d}"
    return f"${cents // CENTS_PER_DOLLAR:,}.{cents % CENTS_PER_DOLLAR:02d}"
