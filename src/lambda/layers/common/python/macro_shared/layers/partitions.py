"""Static partition tables for published layer regions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, Optional

DD_ACCOUNT_ID = "464622532012"
DD_GOV_ACCOUNT_ID = "002406178527"


class RegionPartition(Enum):
    COMMERCIAL = "commercial"
    GOV_CLOUD = "gov_cloud"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class PartitionInfo:
    arn_partition: str
    account_id: str
    regions: FrozenSet[str]


PARTITION_TABLES: Dict[RegionPartition, PartitionInfo] = {
    RegionPartition.COMMERCIAL: PartitionInfo(
        arn_partition="aws",
        account_id=DD_ACCOUNT_ID,
        regions=frozenset(
            {
                "us-east-1",
                "us-east-2",
                "us-west-1",
                "us-west-2",
                "ap-east-1",
                "ap-south-1",
                "ap-northeast-1",
                "ap-northeast-2",
                "ap-southeast-1",
                "ap-southeast-2",
                "ca-central-1",
                "eu-north-1",
                "eu-central-1",
                "eu-west-1",
                "eu-west-2",
                "eu-west-3",
                "sa-east-1",
            }
        ),
    ),
    RegionPartition.GOV_CLOUD: PartitionInfo(
        arn_partition="aws-us-gov",
        account_id=DD_GOV_ACCOUNT_ID,
        regions=frozenset({"us-gov-east-1", "us-gov-west-1"}),
    ),
}


def classify_region(region: Optional[str]) -> RegionPartition:
    """Return the partition whose published-region set contains ``region``."""
    for partition, info in PARTITION_TABLES.items():
        if region in info.regions:
            return partition
    return RegionPartition.UNSUPPORTED


def partition_info(region: Optional[str]) -> Optional[PartitionInfo]:
    """Return the partition record for ``region`` or None when no layer is published there."""
    return PARTITION_TABLES.get(classify_region(region))
