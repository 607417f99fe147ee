"""DataFrame views of query results for display and export."""

from __future__ import annotations

from typing import Iterable, Tuple

import pandas as pd

from ..core.models import Host
from ..core.types import DataRepr, Service
from ..metrics.data_info import DataInfo, DataInfoHost
from .entries import ReportEntry


ENTRY_COLUMNS = [
    "protocol",
    "src_ip",
    "src_port",
    "dest_ip",
    "dest_port",
    "service",
    "direction",
    "data",
    "latency_ms",
    "first_seen",
    "last_seen",
    "is_blacklisted",
]

HOST_COLUMNS = [
    "domain",
    "asn_name",
    "country",
    "incoming",
    "outgoing",
    "total",
    "is_favorite",
]

SERVICE_COLUMNS = ["service", "incoming", "outgoing", "total"]


def entries_to_frame(entries: Iterable[ReportEntry], data_repr: DataRepr) -> pd.DataFrame:
    """Return one row per report entry, volume expressed in ``data_repr``."""
    rows = []
    for entry in entries:
        key, val = entry.key, entry.val
        rows.append(
            {
                "protocol": key.protocol.value,
                "src_ip": key.address1,
                "src_port": key.port1,
                "dest_ip": key.address2,
                "dest_port": key.port2,
                "service": str(val.service),
                "direction": val.traffic_direction.value,
                "data": val.transmitted_data(data_repr),
                "latency_ms": val.latency,
                "first_seen": val.initial_timestamp.to_float(),
                "last_seen": val.final_timestamp.to_float(),
                "is_blacklisted": entry.is_blacklisted,
            }
        )
    return pd.DataFrame(rows, columns=ENTRY_COLUMNS)


def hosts_to_frame(
    host_entries: Iterable[Tuple[Host, DataInfoHost]], data_repr: DataRepr
) -> pd.DataFrame:
    rows = []
    for host, info in host_entries:
        rows.append(
            {
                "domain": host.domain,
                "asn_name": host.asn_name,
                "country": host.country,
                "incoming": info.data_info.incoming_data(data_repr),
                "outgoing": info.data_info.outgoing_data(data_repr),
                "total": info.data_info.tot_data(data_repr),
                "is_favorite": info.is_favorite,
            }
        )
    return pd.DataFrame(rows, columns=HOST_COLUMNS)


def services_to_frame(
    service_entries: Iterable[Tuple[Service, DataInfo]], data_repr: DataRepr
) -> pd.DataFrame:
    rows = [
        {
            "service": str(service),
            "incoming": info.incoming_data(data_repr),
            "outgoing": info.outgoing_data(data_repr),
            "total": info.tot_data(data_repr),
        }
        for service, info in service_entries
    ]
    return pd.DataFrame(rows, columns=SERVICE_COLUMNS)


__all__ = [
    "ENTRY_COLUMNS",
    "HOST_COLUMNS",
    "SERVICE_COLUMNS",
    "entries_to_frame",
    "hosts_to_frame",
    "services_to_frame",
]
