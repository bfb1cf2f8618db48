from .normalize import convert_price, normalize, rank_regions
from .sources import collect_regions, default_sources, parse_price

__all__ = [
    "collect_regions",
    "convert_price",
    "default_sources",
    "normalize",
    "parse_price",
    "rank_regions",
]
