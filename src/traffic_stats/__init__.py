# src/traffic_stats/__init__.py
from .core.models import AddressPortPair, Host, Timestamp, get_address_to_lookup
from .core.types import (
    ArpType,
    DataRepr,
    IcmpTypeV4,
    IcmpTypeV6,
    Protocol,
    Service,
    SortBy,
    SortType,
    TrafficDirection,
    TrafficType,
)
from .exceptions import TrafficStatsError, InvalidOptionError
from .metrics import DataInfo, DataInfoHost, InfoAddressPortPair, InfoTraffic, merge
from .report import (
    ReportEntry,
    SearchResult,
    match_all,
    query_connections,
    query_hosts,
    query_services,
    entries_to_frame,
    hosts_to_frame,
    services_to_frame,
)


__all__ = [
    "AddressPortPair",
    "Host",
    "Timestamp",
    "get_address_to_lookup",
    "ArpType",
    "DataRepr",
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
    "DataInfo",
    "DataInfoHost",
    "InfoAddressPortPair",
    "InfoTraffic",
    "merge",
    "ReportEntry",
    "SearchResult",
    "match_all",
    "query_connections",
    "query_hosts",
    "query_services",
    "entries_to_frame",
    "hosts_to_frame",
    "services_to_frame",
]
