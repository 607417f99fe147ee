"""Read queries over the traffic tables.

``query_connections`` filters, annotates, sorts and paginates the connection
map; ``query_hosts`` and ``query_services`` build the capped summaries of the
aggregate tables.  All three only read their inputs and return copies, so the
caller may keep the results after releasing its lock on the tables.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cmp_to_key
from typing import Callable, Container, List, Mapping, NamedTuple, Optional, Protocol, Tuple

from ..core.config import settings
from ..core.models import AddressPortPair, Host, ResolvedHost, get_address_to_lookup
from ..core.decorators import log_performance
from ..core.types import DataRepr, Service, SortBy, SortType, TrafficDirection
from ..logging import get_logger
from ..metrics.data_info import DataInfo, DataInfoHost
from ..metrics.traffic_record import InfoAddressPortPair


logger = get_logger(__name__)


class SearchPredicate(Protocol):
    """Decides whether a connection matches the active search."""

    def __call__(
        self,
        key: AddressPortPair,
        record: InfoAddressPortPair,
        resolved: Optional[ResolvedHost],
        is_favorite: bool,
    ) -> bool: ...


def match_all(
    key: AddressPortPair,
    record: InfoAddressPortPair,
    resolved: Optional[ResolvedHost],
    is_favorite: bool,
) -> bool:
    """Predicate accepting every connection."""
    return True


@dataclass
class ReportEntry:
    """A matched connection as shown in the report."""

    key: AddressPortPair
    val: InfoAddressPortPair
    is_blacklisted: bool = False


class SearchResult(NamedTuple):
    entries: List[ReportEntry]
    total: int
    agglomerate: DataInfo


def page_bounds(page: int, total: int, page_size: int) -> Tuple[int, int]:
    """Return the ``[start, end)`` slice of ``page`` (1-indexed).

    Pages below 1 start at 0; ``end`` never exceeds ``total`` and the range
    is empty when ``page`` lies past the last match.
    """
    start = max(page - 1, 0) * page_size
    end = max(min(page * page_size, total), 0)
    return start, max(start, end)


@log_performance
def query_connections(
    records: Mapping[AddressPortPair, InfoAddressPortPair],
    predicate: SearchPredicate,
    sort_by: SortBy,
    sort_type: SortType,
    data_repr: DataRepr,
    page: int,
    *,
    addresses_resolved: Mapping[str, ResolvedHost],
    hosts: Mapping[Host, DataInfoHost],
    blacklist: Container[str] = frozenset(),
    address_to_lookup: Callable[[AddressPortPair, TrafficDirection], str] = get_address_to_lookup,
    page_size: Optional[int] = None,
) -> SearchResult:
    """Return one page of the connections matching ``predicate``.

    Parameters
    ----------
    records:
        Connection map to search.
    predicate:
        Called with the key, its record, the resolution of the remote
        address (or ``None``) and whether that host is a favorite.
    sort_by, sort_type, data_repr:
        Ordering of the matches, see :meth:`InfoAddressPortPair.compare`.
    page:
        1-indexed page number.
    addresses_resolved:
        Address to ``(rdns, Host)`` lookup.
    hosts:
        Host aggregates; their ``is_favorite`` flag feeds the predicate.
    blacklist:
        Addresses whose connections are flagged.
    address_to_lookup:
        Picks the address of a connection to resolve.
    page_size:
        Defaults to ``settings.report_page_size``.

    Returns
    -------
    SearchResult
        The entries of ``page``, the number of matches over all pages and the
        traffic of all matches summed by direction.
    """
    size = settings.report_page_size if page_size is None else page_size
    agglomerate = DataInfo()
    matches: List[ReportEntry] = []

    for key, record in records.items():
        resolved = addresses_resolved.get(address_to_lookup(key, record.traffic_direction))
        is_favorite = False
        if resolved is not None:
            host_info = hosts.get(resolved[1])
            is_favorite = host_info is not None and host_info.is_favorite
        if not predicate(key, record, resolved, is_favorite):
            continue

        agglomerate.add_packets(
            record.transmitted_packets,
            record.transmitted_bytes,
            record.traffic_direction,
        )
        is_blacklisted = key.address1 in blacklist or key.address2 in blacklist
        matches.append(ReportEntry(key=key, val=record.copy(), is_blacklisted=is_blacklisted))

    matches.sort(key=cmp_to_key(lambda a, b: a.val.compare(b.val, sort_by, sort_type, data_repr)))

    start, end = page_bounds(page, len(matches), size)
    logger.debug(
        "Connection query matched %d of %d records, page %d -> [%d, %d)",
        len(matches),
        len(records),
        page,
        start,
        end,
    )
    return SearchResult(matches[start:end], len(matches), agglomerate)


@log_performance
def query_hosts(
    hosts: Mapping[Host, DataInfoHost],
    data_repr: DataRepr,
    sort_type: SortType,
    limit: Optional[int] = None,
) -> List[Tuple[Host, DataInfoHost]]:
    """Return the top hosts ordered by ``sort_type``, at most ``settings.top_entries``."""
    n_entry = settings.top_entries if limit is None else limit
    sorted_hosts = sorted(
        hosts.items(),
        key=cmp_to_key(lambda a, b: a[1].compare(b[1], sort_type, data_repr)),
    )
    return [(host, info.copy()) for host, info in sorted_hosts[:n_entry]]


@log_performance
def query_services(
    services: Mapping[Service, DataInfo],
    data_repr: DataRepr,
    sort_type: SortType,
    limit: Optional[int] = None,
) -> List[Tuple[Service, DataInfo]]:
    """Return the top services, skipping traffic without a service."""
    n_entry = settings.top_entries if limit is None else limit
    sorted_services = sorted(
        ((service, info) for service, info in services.items() if service != Service.NOT_APPLICABLE),
        key=cmp_to_key(lambda a, b: a[1].compare(b[1], sort_type, data_repr)),
    )
    return [(service, info.copy()) for service, info in sorted_services[:n_entry]]


__all__ = [
    "SearchPredicate",
    "match_all",
    "ReportEntry",
    "SearchResult",
    "page_bounds",
    "query_connections",
    "query_hosts",
    "query_services",
]
