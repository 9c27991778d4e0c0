"""Client for the Wiener Linien real-time open data API.

Usage::

    from wiener_linien import WienerLinien

    wl = WienerLinien("your-api-key")
    departures = wl.monitor([4410, 4411], activate_traffic_info=True)
"""

__version__ = "0.1.0"

from .client import BASE_URL, RelatedInfo, WienerLinien
from .http import ApiError, ApiResult, DecodeError, StatusError, TransportError

__all__ = [
    "BASE_URL",
    "ApiError",
    "ApiResult",
    "DecodeError",
    "RelatedInfo",
    "StatusError",
    "TransportError",
    "WienerLinien",
]
