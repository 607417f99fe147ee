from traffic_stats.core.models import Host, Timestamp
from traffic_stats.core.types import Service, TrafficDirection
from traffic_stats.metrics.data_info import DataInfoHost
from traffic_stats.metrics.info_traffic import InfoTraffic
from tests.fixtures.traffic_factory import TrafficFactory


def _batch(key, record, host_entry=None, service=Service("https"), dropped=0, last=0):
    batch = InfoTraffic()
    batch.map[key] = record
    batch.services[service] = TrafficFactory.data_info(
        outgoing_bytes=record.transmitted_bytes,
        outgoing_packets=record.transmitted_packets,
        final=record.final_timestamp,
    )
    if host_entry is not None:
        host, info = host_entry
        batch.hosts[host] = info
    batch.tot_data_info.add_packets(
        record.transmitted_packets, record.transmitted_bytes, TrafficDirection.OUTGOING
    )
    batch.dropped_packets = dropped
    batch.last_packet_timestamp = Timestamp(last)
    return batch


def test_refresh_inserts_then_merges():
    key = TrafficFactory.key()
    traffic = InfoTraffic()

    traffic.refresh(_batch(key, TrafficFactory.record(100, 1, initial=1, final=1), last=1))
    traffic.refresh(
        _batch(key, TrafficFactory.record(50, 2, initial=2, final=3, latency=8), dropped=4, last=3)
    )

    record = traffic.map[key]
    assert record.transmitted_bytes == 150
    assert record.transmitted_packets == 3
    assert record.initial_timestamp == Timestamp(1)
    assert record.final_timestamp == Timestamp(3)
    assert record.latency == 8

    service_info = traffic.services[Service("https")]
    assert service_info.outgoing_bytes == 150
    assert service_info.final_timestamp == Timestamp(3)

    assert traffic.tot_data_info.tot_bytes() == 150
    assert traffic.dropped_packets == 4
    assert traffic.last_packet_timestamp == Timestamp(3)


def test_refresh_copies_batch_records():
    key = TrafficFactory.key()
    batch = _batch(key, TrafficFactory.record(100, 1))
    traffic = InfoTraffic()
    traffic.refresh(batch)

    batch.map[key].transmitted_bytes = 1
    batch.services[Service("https")].outgoing_bytes = 1

    assert traffic.map[key].transmitted_bytes == 100
    assert traffic.services[Service("https")].outgoing_bytes == 100


def test_refresh_hosts_and_favorite():
    key = TrafficFactory.key()
    host, info = TrafficFactory.host("example.com", outgoing_bytes=100)
    traffic = InfoTraffic()
    traffic.refresh(_batch(key, TrafficFactory.record(100, 1), host_entry=(host, info)))

    assert traffic.set_favorite(host, True) is True
    assert traffic.set_favorite(Host(domain="unknown.org"), True) is False

    traffic.refresh(
        _batch(
            key,
            TrafficFactory.record(20, 1),
            host_entry=(host, DataInfoHost(data_info=TrafficFactory.data_info(outgoing_bytes=20))),
        )
    )

    assert traffic.hosts[host].is_favorite is True
    assert traffic.hosts[host].data_info.outgoing_bytes == 120
    assert traffic.favorite_hosts() == [host]


def test_snapshot_is_independent():
    key = TrafficFactory.key()
    traffic = InfoTraffic()
    traffic.refresh(_batch(key, TrafficFactory.record(100, 1)))

    snapshot = traffic.snapshot()
    traffic.refresh(_batch(key, TrafficFactory.record(100, 1)))

    assert snapshot.map[key].transmitted_bytes == 100
    assert traffic.map[key].transmitted_bytes == 200


def test_favorite_hosts_lists_only_flagged_hosts():
    traffic = InfoTraffic(
        hosts=dict(
            [
                TrafficFactory.host("a.example", favorite=True),
                TrafficFactory.host("b.example"),
                TrafficFactory.host("c.example", favorite=True),
            ]
        )
    )

    assert [host.domain for host in traffic.favorite_hosts()] == ["a.example", "c.example"]
    assert InfoTraffic().favorite_hosts() == []
