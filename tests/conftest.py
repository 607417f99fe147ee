import sys
from pathlib import Path

# Ensure the project root and src directory are on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"
for path in (SRC_PATH, PROJECT_ROOT):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))


import pytest

from traffic_stats.metrics.info_traffic import InfoTraffic
from tests.fixtures.traffic_factory import TrafficFactory


@pytest.fixture
def info_traffic() -> InfoTraffic:
    """Return tables holding 45 connections and a favorite host."""
    traffic = InfoTraffic(map=TrafficFactory.connections(45))
    host, info = TrafficFactory.host("fav.example", favorite=True, outgoing_bytes=100)
    traffic.hosts[host] = info
    return traffic
