"""Aggregate traffic counters kept per service, per host and per capture."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional

from ..core.constants import BITS_PER_BYTE
from ..core.models import Timestamp
from ..core.types import DataRepr, SortType, TrafficDirection, TrafficType
from .compare import three_way


@dataclass
class DataInfo:
    """Packet and byte counters split by traffic direction."""

    incoming_packets: int = 0
    outgoing_packets: int = 0
    incoming_bytes: int = 0
    outgoing_bytes: int = 0
    final_timestamp: Timestamp = field(default_factory=Timestamp)

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def new_with_first_packet(
        cls, num_bytes: int, direction: TrafficDirection, timestamp: Timestamp
    ) -> "DataInfo":
        info = cls(final_timestamp=timestamp)
        info.add_packet(num_bytes, direction)
        return info

    # ------------------------------------------------------------------
    # Updates
    # ------------------------------------------------------------------

    def add_packet(
        self,
        num_bytes: int,
        direction: TrafficDirection,
        timestamp: Optional[Timestamp] = None,
    ) -> None:
        self.add_packets(1, num_bytes, direction, timestamp)

    def add_packets(
        self,
        packets: int,
        num_bytes: int,
        direction: TrafficDirection,
        timestamp: Optional[Timestamp] = None,
    ) -> None:
        """Add ``packets``/``num_bytes`` to the counters of ``direction``."""
        if direction == TrafficDirection.OUTGOING:
            self.outgoing_packets += packets
            self.outgoing_bytes += num_bytes
        else:
            self.incoming_packets += packets
            self.incoming_bytes += num_bytes
        if timestamp is not None:
            self.final_timestamp = timestamp

    def refresh(self, other: "DataInfo") -> "DataInfo":
        """Accumulate ``other`` into this aggregate and adopt its timestamp."""
        self.incoming_packets += other.incoming_packets
        self.outgoing_packets += other.outgoing_packets
        self.incoming_bytes += other.incoming_bytes
        self.outgoing_bytes += other.outgoing_bytes
        self.final_timestamp = other.final_timestamp
        return self

    # ------------------------------------------------------------------
    # Projections
    # ------------------------------------------------------------------

    def tot_packets(self) -> int:
        return self.incoming_packets + self.outgoing_packets

    def tot_bytes(self) -> int:
        return self.incoming_bytes + self.outgoing_bytes

    def tot_data(self, data_repr: DataRepr) -> int:
        return self.incoming_data(data_repr) + self.outgoing_data(data_repr)

    def incoming_data(self, data_repr: DataRepr) -> int:
        if data_repr == DataRepr.PACKETS:
            return self.incoming_packets
        if data_repr == DataRepr.BITS:
            return self.incoming_bytes * BITS_PER_BYTE
        return self.incoming_bytes

    def outgoing_data(self, data_repr: DataRepr) -> int:
        if data_repr == DataRepr.PACKETS:
            return self.outgoing_packets
        if data_repr == DataRepr.BITS:
            return self.outgoing_bytes * BITS_PER_BYTE
        return self.outgoing_bytes

    def compare(self, other: "DataInfo", sort_type: SortType, data_repr: DataRepr) -> int:
        """Three-way comparison used to order aggregate tables.

        Ascending and descending order by total volume in ``data_repr``;
        neutral puts the most recently active aggregate first.
        """
        if sort_type == SortType.ASCENDING:
            return three_way(self.tot_data(data_repr), other.tot_data(data_repr))
        if sort_type == SortType.DESCENDING:
            return three_way(other.tot_data(data_repr), self.tot_data(data_repr))
        return three_way(other.final_timestamp, self.final_timestamp)

    def copy(self) -> "DataInfo":
        return replace(self)


@dataclass
class DataInfoHost:
    """Aggregate counters of a resolved host plus its display attributes."""

    data_info: DataInfo = field(default_factory=DataInfo)
    is_favorite: bool = False
    is_loopback: bool = False
    is_local: bool = False
    # Reason the address is a bogon, if it is one
    is_bogon: Optional[str] = None
    traffic_type: TrafficType = TrafficType.UNICAST

    def refresh(self, other: "DataInfoHost") -> "DataInfoHost":
        """Merge a host delta; the favorite flag stays as set by the user."""
        self.data_info.refresh(other.data_info)
        self.is_loopback = other.is_loopback
        self.is_local = other.is_local
        self.is_bogon = other.is_bogon
        self.traffic_type = other.traffic_type
        return self

    def compare(self, other: "DataInfoHost", sort_type: SortType, data_repr: DataRepr) -> int:
        return self.data_info.compare(other.data_info, sort_type, data_repr)

    def copy(self) -> "DataInfoHost":
        return replace(self, data_info=self.data_info.copy())


__all__ = ["DataInfo", "DataInfoHost"]
