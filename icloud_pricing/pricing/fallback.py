"""
Embedded price table used when the Apple support page cannot be scraped.

Prices are monthly, in local currency, one column per tier of PLAN_TYPES
(50GB, 200GB, 2TB, 6TB, 12TB).
"""

from typing import List, Sequence, Tuple

from ..config import PLAN_TYPES
from ..models import PlanPrice, Region

_Row = Tuple[str, str, str, Sequence[float]]

FALLBACK_ROWS: List[_Row] = [
    ("US", "United States", "USD", (0.99, 2.99, 9.99, 29.99, 59.99)),
    ("CN", "China", "CNY", (6, 21, 68, 198, 398)),
    ("JP", "Japan", "JPY", (150, 450, 1500, 4500, 9000)),
    ("GB", "United Kingdom", "GBP", (0.99, 2.99, 8.99, 26.99, 54.99)),
    ("DE", "Germany", "EUR", (0.99, 2.99, 9.99, 29.99, 59.99)),
    ("FR", "France", "EUR", (0.99, 2.99, 9.99, 29.99, 59.99)),
    ("AU", "Australia", "AUD", (1.49, 4.49, 14.99, 44.99, 89.99)),
    ("CA", "Canada", "CAD", (1.29, 3.99, 12.99, 39.99, 79.99)),
    ("KR", "South Korea", "KRW", (1100, 3300, 11000, 33000, 66000)),
    ("HK", "Hong Kong", "HKD", (8, 23, 78, 233, 468)),
    ("TW", "Taiwan", "TWD", (30, 90, 300, 900, 1800)),
    ("SG", "Singapore", "SGD", (1.28, 3.98, 12.98, 38.98, 78.98)),
    ("IN", "India", "INR", (75, 219, 749, 2249, 4499)),
    ("RU", "Russia", "RUB", (59, 149, 599, 1790, 3590)),
    ("TR", "Turkey", "TRY", (14.99, 44.99, 149.99, 449.99, 899.99)),
    ("BR", "Brazil", "BRL", (3.50, 10.90, 34.90, 104.90, 209.90)),
    ("MX", "Mexico", "MXN", (17, 49, 179, 529, 1049)),
    ("ID", "Indonesia", "IDR", (15000, 45000, 149000, 449000, 899000)),
    ("TH", "Thailand", "THB", (35, 99, 349, 1049, 2099)),
    ("MY", "Malaysia", "MYR", (3.90, 11.90, 39.90, 119.90, 239.90)),
    ("PH", "Philippines", "PHP", (49, 149, 499, 1490, 2990)),
    ("VN", "Vietnam", "VND", (19000, 59000, 199000, 599000, 1190000)),
    ("AE", "United Arab Emirates", "AED", (3.99, 10.99, 36.99, 109.99, 219.99)),
    ("SA", "Saudi Arabia", "SAR", (3.99, 10.99, 36.99, 109.99, 219.99)),
    ("ZA", "South Africa", "ZAR", (14.99, 44.99, 149.99, 449.99, 899.99)),
    ("IL", "Israel", "ILS", (3.90, 10.90, 34.90, 109.90, 219.90)),
    ("PL", "Poland", "PLN", (3.99, 11.99, 39.99, 119.99, 239.99)),
    ("SE", "Sweden", "SEK", (9, 29, 99, 299, 599)),
    ("NO", "Norway", "NOK", (12, 35, 119, 355, 709)),
    ("DK", "Denmark", "DKK", (7, 19, 69, 199, 399)),
    ("CH", "Switzerland", "CHF", (1, 3, 10, 30, 60)),
    ("NZ", "New Zealand", "NZD", (1.69, 4.99, 16.99, 49.99, 99.99)),
    ("CL", "Chile", "CLP", (800, 2500, 7900, 23900, 47900)),
    ("CO", "Colombia", "COP", (3400, 10900, 34900, 104900, 209900)),
    ("PE", "Peru", "PEN", (2.90, 9.90, 34.90, 99.90, 199.90)),
    ("EG", "Egypt", "EGP", (24.99, 74.99, 249.99, 749.99, 1499.99)),
    ("NG", "Nigeria", "NGN", (900, 2900, 9900, 29900, 59900)),
    ("PK", "Pakistan", "PKR", (200, 600, 2000, 6000, 12000)),
]


def fallback_regions() -> List[Region]:
    regions: List[Region] = []
    for iso, country, currency, prices in FALLBACK_ROWS:
        plans = [PlanPrice(name=name, price=float(price)) for name, price in zip(PLAN_TYPES, prices)]
        regions.append(Region(country_iso=iso, country=country, currency=currency, plans=plans))
    return regions
