"""Add Datadog Lambda Library layers to function definitions.

``apply_layers`` walks the classified functions in order and appends the
layer matching each function's runtime family and the target region to its
``Layers`` list. Functions it cannot help (unsupported runtime or region) are
left alone; functions whose family has no configured layer version produce an
error message instead. Nothing here raises.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from macro_shared.utils.logger import get_logger

from .messages import RUNTIME_DISPLAY_NAMES, missing_layer_version_error_msg
from .partitions import PartitionInfo, partition_info
from .runtimes import LambdaFunction, RuntimeType, runtime_suffix

LAYER_NAME_PREFIX = "Datadog-"

logger = get_logger(__name__)


def _node_short_name(suffix: str) -> str:
    return "Node" + suffix.replace(".", "-")


def _python_short_name(suffix: str) -> str:
    return "Python" + suffix.replace(".", "")


_SHORT_NAME_BUILDERS = {
    RuntimeType.NODE: _node_short_name,
    RuntimeType.PYTHON: _python_short_name,
}


def layer_short_name(lambda_function: LambdaFunction) -> str:
    """Return the runtime part of the layer name, e.g. ``Node12-x`` or ``Python38``."""
    build = _SHORT_NAME_BUILDERS[lambda_function.runtime_type]
    return build(runtime_suffix(lambda_function.runtime, lambda_function.runtime_type))


def layer_arn(partition: PartitionInfo, region: str, short_name: str, version: int) -> str:
    return (
        f"arn:{partition.arn_partition}:lambda:{region}:{partition.account_id}"
        f":layer:{LAYER_NAME_PREFIX}{short_name}:{version}"
    )


def add_layer(lambda_function: LambdaFunction, reference: str) -> bool:
    """Append ``reference`` to the function's layers unless already present.

    Returns True when the list was changed.
    """
    layers = lambda_function.properties.get("Layers")
    if layers is None:
        layers = []
        lambda_function.properties["Layers"] = layers
    if not isinstance(layers, list):
        logger.warning(
            "Layers is not a list, leaving it untouched",
            extra={"function_key": lambda_function.key},
        )
        return False
    if reference in layers:
        return False
    layers.append(reference)
    return True


def apply_layers(
    region: str,
    lambdas: Sequence[LambdaFunction],
    python_layer_version: Optional[int] = None,
    node_layer_version: Optional[int] = None,
) -> List[str]:
    """Add the runtime layer to each eligible function and return error messages.

    Errors are reported in function order, one per function whose runtime
    family has no layer version.
    """
    versions: Dict[RuntimeType, Optional[int]] = {
        RuntimeType.PYTHON: python_layer_version,
        RuntimeType.NODE: node_layer_version,
    }
    errors: List[str] = []

    for lambda_function in lambdas:
        if lambda_function.runtime_type is RuntimeType.UNSUPPORTED:
            logger.debug(
                "Skipping function with unsupported runtime",
                extra={"function_key": lambda_function.key, "runtime": lambda_function.runtime},
            )
            continue

        partition = partition_info(region)
        if partition is None:
            logger.debug(
                "Skipping function, no layer published in region",
                extra={"function_key": lambda_function.key, "region": region},
            )
            continue

        version = versions[lambda_function.runtime_type]
        if version is None:
            formal_runtime, param_runtime = RUNTIME_DISPLAY_NAMES[lambda_function.runtime_type]
            logger.warning(
                "Missing layer version",
                extra={"function_key": lambda_function.key, "runtime": lambda_function.runtime},
            )
            errors.append(missing_layer_version_error_msg(lambda_function.key, formal_runtime, param_runtime))
            continue

        reference = layer_arn(partition, region, layer_short_name(lambda_function), version)
        if add_layer(lambda_function, reference):
            logger.info("Added layer", extra={"function_key": lambda_function.key, "layer": reference})

    return errors
