"""
Navigation links for the external maps service

Only URLs are built here; no request is made to the maps provider.
"""
from typing import Optional, Sequence
from urllib.parse import quote

from grounded.core.config import settings


def _encode(address: str) -> str:
    return quote(address, safe="")


def search_url(address: str, base_url: Optional[str] = None) -> str:
    """Link that opens a single address"""
    base = base_url or settings.maps.search_url
    return f"{base}&query={_encode(address)}"


def directions_url(addresses: Sequence[str], base_url: Optional[str] = None) -> Optional[str]:
    """
    Link that chains the addresses in order.

    The first address is the origin, the last is the destination and the
    rest become ``|``-separated waypoints. A single address falls back to a
    search link; no addresses gives None.
    """
    if not addresses:
        return None
    if len(addresses) == 1:
        return search_url(addresses[0])

    base = base_url or settings.maps.directions_url
    url = f"{base}&origin={_encode(addresses[0])}&destination={_encode(addresses[-1])}"
    waypoints = "|".join(_encode(address) for address in addresses[1:-1])
    if waypoints:
        url += f"&waypoints={waypoints}"
    return url
