from .config import settings, get_settings, Settings
from .constants import *  # noqa: F401,F403
from .models import AddressPortPair, Host, ResolvedHost, Timestamp, get_address_to_lookup
from .types import (
    ArpType,
    DataRepr,
    IcmpType,
    IcmpTypeV4,
    IcmpTypeV6,
    Protocol,
    Service,
    SortBy,
    SortType,
    TrafficDirection,
    TrafficType,
)
from ..exceptions import TrafficStatsError, InvalidOptionError

__all__ = [
    "settings",
    "get_settings",
    "Settings",
    "AddressPortPair",
    "Host",
    "ResolvedHost",
    "Timestamp",
    "get_address_to_lookup",
    "ArpType",
    "DataRepr",
    "IcmpType",
    "IcmpTypeV4",
    "IcmpTypeV6",
    "Protocol",
    "Service",
    "SortBy",
    "SortType",
    "TrafficDirection",
    "TrafficType",
    "TrafficStatsError",
    "InvalidOptionError",
] + [name for name in globals().keys() if name.isupper()]
