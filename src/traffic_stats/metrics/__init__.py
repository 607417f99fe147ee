from .data_info import DataInfo, DataInfoHost
from .info_traffic import InfoTraffic
from .traffic_record import InfoAddressPortPair, MERGE_POLICY, MergePolicy, merge

__all__ = [
    "DataInfo",
    "DataInfoHost",
    "InfoTraffic",
    "InfoAddressPortPair",
    "MERGE_POLICY",
    "MergePolicy",
    "merge",
]
