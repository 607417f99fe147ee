"""Core value types identifying connections and hosts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .types import Protocol, TrafficDirection


@dataclass(frozen=True, order=True)
class Timestamp:
    """Capture time with microsecond resolution, ordered chronologically."""

    secs: int = 0
    usecs: int = 0

    @classmethod
    def from_float(cls, value: float) -> "Timestamp":
        # usecs is always in [0, 1_000_000)
        secs, usecs = divmod(round(value * 1_000_000), 1_000_000)
        return cls(secs=secs, usecs=usecs)

    def to_float(self) -> float:
        return self.secs + self.usecs / 1_000_000


# ---------------------------------------------------------------------------
# ``AddressPortPair``
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AddressPortPair:
    """Key identifying a connection.

    ``address1``/``port1`` belong to the sender of the first packet seen for
    the connection, ``address2``/``port2`` to its receiver.  Ports are
    ``None`` for protocols that do not carry them (ICMP, ARP).
    """

    address1: str
    port1: Optional[int]
    address2: str
    port2: Optional[int]
    protocol: Protocol

    def __str__(self) -> str:
        def endpoint(address: str, port: Optional[int]) -> str:
            if port is None:
                return address
            if ":" in address:
                return f"[{address}]:{port}"
            return f"{address}:{port}"

        return (
            f"{self.protocol.value} {endpoint(self.address1, self.port1)}"
            f" -> {endpoint(self.address2, self.port2)}"
        )


def get_address_to_lookup(key: AddressPortPair, direction: TrafficDirection) -> str:
    """Return the remote address of ``key``, the one worth resolving.

    For outgoing traffic the remote end is the destination, for incoming
    traffic it is the source.
    """
    if direction == TrafficDirection.OUTGOING:
        return key.address2
    return key.address1


# ---------------------------------------------------------------------------
# ``Host``
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Host:
    """Resolved identity of a remote endpoint."""

    domain: str
    asn_name: str = ""
    asn_code: Optional[int] = None
    country: str = ""


# Reverse DNS name together with the host it resolved to.
ResolvedHost = tuple[str, Host]


__all__ = [
    "Timestamp",
    "AddressPortPair",
    "get_address_to_lookup",
    "Host",
    "ResolvedHost",
]
