"""Layer resolution and injection for Lambda function resources."""

from .applicator import LAYER_NAME_PREFIX, add_layer, apply_layers, layer_arn, layer_short_name
from .messages import RUNTIME_DISPLAY_NAMES, missing_layer_version_error_msg
from .partitions import (
    DD_ACCOUNT_ID,
    DD_GOV_ACCOUNT_ID,
    PARTITION_TABLES,
    PartitionInfo,
    RegionPartition,
    classify_region,
    partition_info,
)
from .runtimes import LAMBDA_FUNCTION_TYPE, LambdaFunction, RuntimeType, classify_runtime, find_lambdas

__all__ = [
    "DD_ACCOUNT_ID",
    "DD_GOV_ACCOUNT_ID",
    "LAMBDA_FUNCTION_TYPE",
    "LAYER_NAME_PREFIX",
    "PARTITION_TABLES",
    "RUNTIME_DISPLAY_NAMES",
    "LambdaFunction",
    "PartitionInfo",
    "RegionPartition",
    "RuntimeType",
    "add_layer",
    "apply_layers",
    "classify_region",
    "classify_runtime",
    "find_lambdas",
    "layer_arn",
    "layer_short_name",
    "missing_layer_version_error_msg",
    "partition_info",
]
