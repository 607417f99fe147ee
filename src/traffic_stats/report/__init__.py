from .entries import (
    ReportEntry,
    SearchPredicate,
    SearchResult,
    match_all,
    page_bounds,
    query_connections,
    query_hosts,
    query_services,
)
from .frames import entries_to_frame, hosts_to_frame, services_to_frame

__all__ = [
    "ReportEntry",
    "SearchPredicate",
    "SearchResult",
    "match_all",
    "page_bounds",
    "query_connections",
    "query_hosts",
    "query_services",
    "entries_to_frame",
    "hosts_to_frame",
    "services_to_frame",
]
