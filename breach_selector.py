"""Turns breach flags into the labels listed on the notice page."""

from typing import List, Tuple

from models import BreachCategories

# Reportable categories in display order. defaced_malware is deliberately absent.
REPORTABLE_CATEGORIES: Tuple[Tuple[str, str], ...] = (
    ("address", "Address"),
    ("name", "Name"),
    ("gender", "Gender"),
    ("birthday", "Birthday"),
    ("tel", "Phone number"),
    ("card", "Payment card"),
    ("securitycode", "Security code"),
    ("token", "Access token"),
)


def select_breach_categories(categories: BreachCategories) -> List[str]:
    """Return labels for every reportable flag that is set, in display order."""
    return [label for field, label in REPORTABLE_CATEGORIES if getattr(categories, field)]
