"""Keyed traffic tables of a capture session.

:class:`InfoTraffic` owns the connection map together with the per-host and
per-service aggregates.  Capture code builds a small ``InfoTraffic`` for each
batch of packets and the session folds it into its long-lived instance with
:meth:`InfoTraffic.refresh`.

Nothing here is thread safe: callers hold their own lock around ``refresh``
and queries, or query a :meth:`InfoTraffic.snapshot`.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Dict

from ..core.models import AddressPortPair, Host, Timestamp
from ..core.types import Service
from ..logging import get_logger
from .data_info import DataInfo, DataInfoHost
from .traffic_record import InfoAddressPortPair


logger = get_logger(__name__)


@dataclass
class InfoTraffic:
    """Connection, host and service tables plus capture-wide totals."""

    map: Dict[AddressPortPair, InfoAddressPortPair] = field(default_factory=dict)
    hosts: Dict[Host, DataInfoHost] = field(default_factory=dict)
    services: Dict[Service, DataInfo] = field(default_factory=dict)
    tot_data_info: DataInfo = field(default_factory=DataInfo)
    dropped_packets: int = 0
    last_packet_timestamp: Timestamp = field(default_factory=Timestamp)

    # ------------------------------------------------------------------
    # Updates
    # ------------------------------------------------------------------

    def refresh(self, batch: "InfoTraffic") -> None:
        """Fold the tables of ``batch`` into this instance.

        Batches must be refreshed in the order they were captured.  The
        records of ``batch`` are copied, so the batch may be reused.
        """
        new_keys = 0
        for key, delta in batch.map.items():
            current = self.map.get(key)
            if current is None:
                self.map[key] = delta.copy()
                new_keys += 1
            else:
                current.refresh(delta)

        for service, delta_info in batch.services.items():
            current_info = self.services.get(service)
            if current_info is None:
                self.services[service] = delta_info.copy()
            else:
                current_info.refresh(delta_info)

        for host, delta_host in batch.hosts.items():
            current_host = self.hosts.get(host)
            if current_host is None:
                self.hosts[host] = delta_host.copy()
            else:
                current_host.refresh(delta_host)

        self.tot_data_info.refresh(batch.tot_data_info)
        self.dropped_packets = batch.dropped_packets
        self.last_packet_timestamp = batch.last_packet_timestamp
        logger.debug(
            "Merged batch of %d connections (%d new), table size %d",
            len(batch.map),
            new_keys,
            len(self.map),
        )

    def set_favorite(self, host: Host, favorite: bool) -> bool:
        """Set the favorite flag of ``host``.

        Returns ``False`` when the host has no aggregate yet.
        """
        data_info_host = self.hosts.get(host)
        if data_info_host is None:
            return False
        data_info_host.is_favorite = favorite
        return True

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def snapshot(self) -> "InfoTraffic":
        """Return a deep copy safe to query while this instance keeps changing."""
        return copy.deepcopy(self)

    def favorite_hosts(self) -> list[Host]:
        return [host for host, info in self.hosts.items() if info.is_favorite]


__all__ = ["InfoTraffic"]
