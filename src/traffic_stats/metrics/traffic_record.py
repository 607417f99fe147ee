"""Per-connection traffic statistics.

:class:`InfoAddressPortPair` holds everything known about a single
:class:`~traffic_stats.core.models.AddressPortPair`.  Capture produces one
record per key for each batch of packets; the batch records are folded into
the long-lived ones with :func:`merge`.

How each field is combined is spelled out in :data:`MERGE_POLICY` rather than
in ad hoc conditionals so that the rules can be checked field by field.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, Optional, Tuple

from ..core.constants import BITS_PER_BYTE
from ..core.models import Timestamp
from ..core.types import (
    ArpType,
    DataRepr,
    IcmpType,
    Service,
    SortBy,
    SortType,
    TrafficDirection,
)
from .compare import three_way, three_way_optional


SynInfo = Tuple[Timestamp, TrafficDirection]


@dataclass
class InfoAddressPortPair:
    """Statistics about the traffic exchanged by one address:port pair."""

    mac_address1: Optional[str] = None
    mac_address2: Optional[str] = None
    transmitted_bytes: int = 0
    transmitted_packets: int = 0
    initial_timestamp: Timestamp = field(default_factory=Timestamp)
    final_timestamp: Timestamp = field(default_factory=Timestamp)
    service: Service = Service.UNKNOWN
    traffic_direction: TrafficDirection = TrafficDirection.OUTGOING
    # Empty unless the connection is ICMP / ARP
    icmp_types: Counter[IcmpType] = field(default_factory=Counter)
    arp_types: Counter[ArpType] = field(default_factory=Counter)
    # Round trip latency in milliseconds
    latency: Optional[int] = None
    syn_info: Optional[SynInfo] = None

    def refresh(self, other: "InfoAddressPortPair") -> "InfoAddressPortPair":
        """Fold ``other`` into this record; see :func:`merge`."""
        return merge(self, other)

    def transmitted_data(self, data_repr: DataRepr) -> int:
        if data_repr == DataRepr.PACKETS:
            return self.transmitted_packets
        if data_repr == DataRepr.BITS:
            return self.transmitted_bytes * BITS_PER_BYTE
        return self.transmitted_bytes

    def compare(
        self,
        other: "InfoAddressPortPair",
        sort_by: SortBy,
        sort_type: SortType,
        data_repr: DataRepr = DataRepr.BYTES,
    ) -> int:
        """Three-way comparison of two records.

        ``SortType.NEUTRAL`` ignores ``sort_by`` and puts the most recently
        active record first.  Missing latencies sort before known ones.
        ``data_repr`` does not change the order.
        """
        if sort_type == SortType.NEUTRAL:
            return three_way(other.final_timestamp, self.final_timestamp)
        left, right = (self, other) if sort_type == SortType.ASCENDING else (other, self)
        if sort_by == SortBy.PACKETS:
            return three_way(left.transmitted_packets, right.transmitted_packets)
        if sort_by == SortBy.BYTES:
            return three_way(left.transmitted_bytes, right.transmitted_bytes)
        return three_way_optional(left.latency, right.latency)

    def copy(self) -> "InfoAddressPortPair":
        """Return a copy that shares no mutable state with this record."""
        return replace(
            self,
            icmp_types=Counter(self.icmp_types),
            arp_types=Counter(self.arp_types),
        )


# ---------------------------------------------------------------------------
# Merge policy
# ---------------------------------------------------------------------------


class MergePolicy(Enum):
    """How a field of the base record is combined with the delta's value."""

    ACCUMULATE = "accumulate"
    ACCUMULATE_COUNTS = "accumulate_counts"
    REPLACE = "replace"
    REPLACE_IF_PRESENT = "replace_if_present"
    KEEP = "keep"


MERGE_POLICY: Dict[str, MergePolicy] = {
    "mac_address1": MergePolicy.KEEP,
    "mac_address2": MergePolicy.KEEP,
    "transmitted_bytes": MergePolicy.ACCUMULATE,
    "transmitted_packets": MergePolicy.ACCUMULATE,
    "initial_timestamp": MergePolicy.KEEP,
    "final_timestamp": MergePolicy.REPLACE,
    "service": MergePolicy.REPLACE,
    "traffic_direction": MergePolicy.REPLACE,
    "icmp_types": MergePolicy.ACCUMULATE_COUNTS,
    "arp_types": MergePolicy.ACCUMULATE_COUNTS,
    "latency": MergePolicy.REPLACE_IF_PRESENT,
    "syn_info": MergePolicy.REPLACE_IF_PRESENT,
}


def merge(base: InfoAddressPortPair, delta: InfoAddressPortPair) -> InfoAddressPortPair:
    """Fold ``delta`` into ``base`` following :data:`MERGE_POLICY`.

    Counters and subtype counts are summed, the latest timestamp, service and
    direction replace the old ones, latency and SYN information only replace
    the old values when the delta carries them, and the first-seen fields of
    ``base`` are kept.  ``base`` is mutated and returned.

    Deltas for a given key must be merged in chronological order: nothing here
    checks that ``delta.final_timestamp`` is newer.
    """
    for name, policy in MERGE_POLICY.items():
        incoming = getattr(delta, name)
        if policy is MergePolicy.ACCUMULATE:
            setattr(base, name, getattr(base, name) + incoming)
        elif policy is MergePolicy.ACCUMULATE_COUNTS:
            getattr(base, name).update(incoming)
        elif policy is MergePolicy.REPLACE:
            setattr(base, name, incoming)
        elif policy is MergePolicy.REPLACE_IF_PRESENT:
            if incoming is not None:
                setattr(base, name, incoming)
    return base


__all__ = ["InfoAddressPortPair", "SynInfo", "MergePolicy", "MERGE_POLICY", "merge"]
