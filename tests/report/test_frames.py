import pandas as pd

from traffic_stats.core.models import Timestamp
from traffic_stats.core.types import DataRepr, Protocol, Service, SortType
from traffic_stats.report.entries import ReportEntry, query_hosts, query_services
from traffic_stats.report.frames import (
    ENTRY_COLUMNS,
    HOST_COLUMNS,
    SERVICE_COLUMNS,
    entries_to_frame,
    hosts_to_frame,
    services_to_frame,
)
from tests.fixtures.traffic_factory import TrafficFactory


def test_entries_to_frame():
    key = TrafficFactory.key(dst_ip="1.1.1.1")
    icmp_key = TrafficFactory.key(dst_ip="2.2.2.2", src_port=None, dst_port=None, protocol=Protocol.ICMP)
    entries = [
        ReportEntry(
            key=key,
            val=TrafficFactory.record(100, 2, initial=Timestamp(1, 500_000), final=3, latency=40),
            is_blacklisted=True,
        ),
        ReportEntry(
            key=icmp_key,
            val=TrafficFactory.record(84, 1, service=Service.NOT_APPLICABLE),
        ),
    ]

    df = entries_to_frame(entries, DataRepr.BITS)

    assert list(df.columns) == ENTRY_COLUMNS
    first = df.iloc[0]
    assert first["protocol"] == "TCP"
    assert first["dest_ip"] == "1.1.1.1"
    assert first["data"] == 800
    assert first["latency_ms"] == 40
    assert first["first_seen"] == 1.5
    assert bool(first["is_blacklisted"]) is True
    second = df.iloc[1]
    assert second["service"] == "-"
    assert pd.isna(second["src_port"])


def test_summary_frames():
    hosts = dict(
        [
            TrafficFactory.host("a.example", incoming_bytes=10, outgoing_bytes=5),
            TrafficFactory.host("b.example", favorite=True, incoming_bytes=1),
        ]
    )
    services = {Service("https"): TrafficFactory.data_info(incoming_bytes=3, outgoing_bytes=4)}

    host_df = hosts_to_frame(query_hosts(hosts, DataRepr.BYTES, SortType.DESCENDING), DataRepr.BYTES)
    service_df = services_to_frame(
        query_services(services, DataRepr.BYTES, SortType.DESCENDING), DataRepr.BYTES
    )

    assert list(host_df.columns) == HOST_COLUMNS
    assert host_df["domain"].tolist() == ["a.example", "b.example"]
    assert host_df["total"].tolist() == [15, 1]
    assert host_df["is_favorite"].tolist() == [False, True]
    expected = pd.DataFrame(
        [{"service": "https", "incoming": 3, "outgoing": 4, "total": 7}], columns=SERVICE_COLUMNS
    )
    pd.testing.assert_frame_equal(service_df, expected, check_dtype=False)


def test_empty_frames_keep_columns():
    assert list(entries_to_frame([], DataRepr.BYTES).columns) == ENTRY_COLUMNS
    assert hosts_to_frame([], DataRepr.BYTES).empty
    assert list(services_to_frame([], DataRepr.BYTES).columns) == SERVICE_COLUMNS
