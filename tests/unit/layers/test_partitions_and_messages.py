from __future__ import annotations

import pytest

from macro_shared.layers import (
    DD_ACCOUNT_ID,
    DD_GOV_ACCOUNT_ID,
    PARTITION_TABLES,
    RegionPartition,
    classify_region,
    missing_layer_version_error_msg,
    partition_info,
)

pytestmark = [pytest.mark.unit, pytest.mark.layers]


@pytest.mark.parametrize(
    "region, expected",
    [
        ("us-east-1", RegionPartition.COMMERCIAL),
        ("eu-central-1", RegionPartition.COMMERCIAL),
        ("sa-east-1", RegionPartition.COMMERCIAL),
        ("us-gov-east-1", RegionPartition.GOV_CLOUD),
        ("us-gov-west-1", RegionPartition.GOV_CLOUD),
        ("cn-north-1", RegionPartition.UNSUPPORTED),
        ("US-EAST-1", RegionPartition.UNSUPPORTED),
        ("", RegionPartition.UNSUPPORTED),
        (None, RegionPartition.UNSUPPORTED),
    ],
)
def test_classify_region(region, expected) -> None:
    assert classify_region(region) is expected


def test_partition_records() -> None:
    commercial = partition_info("us-east-1")
    gov = partition_info("us-gov-west-1")

    assert commercial is not None and gov is not None
    assert (commercial.arn_partition, commercial.account_id) == ("aws", DD_ACCOUNT_ID)
    assert (gov.arn_partition, gov.account_id) == ("aws-us-gov", DD_GOV_ACCOUNT_ID)
    assert partition_info("mars-west-1") is None


def test_partition_region_sets_are_disjoint() -> None:
    commercial = PARTITION_TABLES[RegionPartition.COMMERCIAL].regions
    gov = PARTITION_TABLES[RegionPartition.GOV_CLOUD].regions
    assert not commercial & gov
    assert RegionPartition.UNSUPPORTED not in PARTITION_TABLES


def test_missing_layer_version_message() -> None:
    message = missing_layer_version_error_msg("MyFunction", "Node.js", "node")

    assert message == (
        "Resource MyFunction has a Node.js runtime, but no Node.js Lambda Library version was provided. "
        "Please add the 'nodeLayerVersion' parameter for the Datadog serverless macro."
    )


def test_missing_layer_version_messages_differ_by_key_and_family() -> None:
    messages = {
        missing_layer_version_error_msg("A", "Python", "python"),
        missing_layer_version_error_msg("B", "Python", "python"),
        missing_layer_version_error_msg("A", "Node.js", "node"),
        missing_layer_version_error_msg("A", "Python", "python"),
    }
    assert len(messages) == 3
