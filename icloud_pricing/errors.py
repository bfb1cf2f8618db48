"""Error kinds shared by the collection and query pipelines."""


class PricingError(Exception):
    """Base class for every recoverable data-acquisition failure."""


class NetworkError(PricingError):
    """Timeout, connection failure, non-2xx status or redirect loop."""


class ParseError(PricingError):
    """Response body that does not match any expected structure."""


class FormatError(PricingError):
    """Persisted dataset is not valid JSON or lacks required fields."""
