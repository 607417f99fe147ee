"""Enumerations and small value types shared across the package."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Type, TypeVar, Union

from ..exceptions import InvalidOptionError


_E = TypeVar("_E", bound="_ParsableEnum")


class _ParsableEnum(Enum):
    """Enum that can be built from a case-insensitive member name or value."""

    @classmethod
    def parse(cls: Type[_E], value: Union[str, _E]) -> _E:
        if isinstance(value, cls):
            return value
        text = str(value).strip()
        for member in cls:
            if text.upper() == member.name or text.lower() == str(member.value).lower():
                return member
        choices = ", ".join(m.value for m in cls)
        raise InvalidOptionError(
            f"Unknown {cls.__name__} '{value}'",
            suggestion=f"Use one of: {choices}",
        )


class DataRepr(_ParsableEnum):
    """Unit used to report transmitted volume."""

    PACKETS = "packets"
    BYTES = "bytes"
    BITS = "bits"


class SortBy(_ParsableEnum):
    """Field used to order connection records."""

    PACKETS = "packets"
    BYTES = "bytes"
    LATENCY = "latency"


class SortType(_ParsableEnum):
    """Ordering direction; ``NEUTRAL`` means most recently active first."""

    ASCENDING = "ascending"
    DESCENDING = "descending"
    NEUTRAL = "neutral"


class TrafficDirection(Enum):
    """Direction of a flow relative to the monitored host."""

    INCOMING = "incoming"
    OUTGOING = "outgoing"


class TrafficType(Enum):
    UNICAST = "unicast"
    MULTICAST = "multicast"
    BROADCAST = "broadcast"


class Protocol(Enum):
    TCP = "TCP"
    UDP = "UDP"
    ICMP = "ICMP"
    ARP = "ARP"


class ArpType(Enum):
    REQUEST = 1
    REPLY = 2
    UNKNOWN = -1

    @classmethod
    def from_opcode(cls, opcode: int) -> "ArpType":
        try:
            return cls(opcode)
        except ValueError:
            return cls.UNKNOWN


class IcmpTypeV4(Enum):
    ECHO_REPLY = 0
    DESTINATION_UNREACHABLE = 3
    REDIRECT = 5
    ECHO = 8
    ROUTER_ADVERTISEMENT = 9
    ROUTER_SOLICITATION = 10
    TIME_EXCEEDED = 11
    PARAMETER_PROBLEM = 12
    TIMESTAMP = 13
    TIMESTAMP_REPLY = 14
    UNKNOWN = -1

    @classmethod
    def from_code(cls, code: int) -> "IcmpTypeV4":
        try:
            return cls(code)
        except ValueError:
            return cls.UNKNOWN


class IcmpTypeV6(Enum):
    DESTINATION_UNREACHABLE = 1
    PACKET_TOO_BIG = 2
    TIME_EXCEEDED = 3
    PARAMETER_PROBLEM = 4
    ECHO_REQUEST = 128
    ECHO_REPLY = 129
    ROUTER_SOLICITATION = 133
    ROUTER_ADVERTISEMENT = 134
    NEIGHBOR_SOLICITATION = 135
    NEIGHBOR_ADVERTISEMENT = 136
    REDIRECT = 137
    UNKNOWN = -1

    @classmethod
    def from_code(cls, code: int) -> "IcmpTypeV6":
        try:
            return cls(code)
        except ValueError:
            return cls.UNKNOWN


IcmpType = Union[IcmpTypeV4, IcmpTypeV6]


@dataclass(frozen=True)
class Service:
    """Upper layer service carried by a connection.

    ``Service.UNKNOWN`` marks traffic whose service could not be identified,
    ``Service.NOT_APPLICABLE`` marks traffic without ports (ICMP, ARP).
    """

    name: str

    UNKNOWN: ClassVar["Service"]
    NOT_APPLICABLE: ClassVar["Service"]

    def __str__(self) -> str:
        return self.name


Service.UNKNOWN = Service("?")
Service.NOT_APPLICABLE = Service("-")


__all__ = [
    "DataRepr",
    "SortBy",
    "SortType",
    "TrafficDirection",
    "TrafficType",
    "Protocol",
    "ArpType",
    "IcmpTypeV4",
    "IcmpTypeV6",
    "IcmpType",
    "Service",
]
