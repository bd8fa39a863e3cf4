"""Datadog serverless macro Lambda: adds Lambda Library layers to a template.

Input event (CloudFormation macro request)
{
  "region": "us-east-1",
  "accountId": "123456789012",
  "fragment": {"Resources": {...}, "Mappings": {...}},
  "transformId": "123456789012::DatadogServerless",
  "params": {"pythonLayerVersion": 21, "nodeLayerVersion": 25},
  "requestId": "...",
  "templateParameterValues": {}
}

Output
{
  "requestId": "...",
  "status": "success" | "failure",
  "fragment": {...},
  "errorMessage": "..."   # failure only
}

Functions whose runtime family has no configured layer version fail the
transform, with one line per function in ``errorMessage``. Unsupported runtimes
and regions without a published layer are left unchanged and do not fail it.
"""

from __future__ import annotations

from typing import Any, Dict

from pydantic import ValidationError

from macro_shared.layers import apply_layers, find_lambdas
from macro_shared.models import ConfigurationError, MacroEvent, MacroResponse, load_configuration
from macro_shared.utils.logger import extract_correlation_id, get_logger


def main(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    request_id = extract_correlation_id(event)
    logger = get_logger(__name__, correlation_id=request_id)
    raw_fragment = event.get("fragment") if isinstance(event, dict) else None
    fragment: Dict[str, Any] = raw_fragment if isinstance(raw_fragment, dict) else {}

    try:
        macro_event = MacroEvent.model_validate(event)
    except ValidationError as exc:
        logger.error("Invalid macro event", extra={"error": str(exc)})
        return MacroResponse.failure(request_id, fragment, f"Invalid macro event: {exc}").to_payload()

    try:
        if macro_event.params:
            logger.info("Parsing config from CloudFormation transform/macro parameters")
        else:
            logger.info("Parsing config from CloudFormation template mappings")
        config = load_configuration(macro_event.params, macro_event.mappings)
    except ConfigurationError as exc:
        logger.error("Invalid macro configuration", extra={"error": str(exc)})
        return MacroResponse.failure(macro_event.request_id, macro_event.fragment, str(exc)).to_payload()

    if config.add_layers:
        lambdas = find_lambdas(macro_event.resources)
        logger.info(
            "Applying layers",
            extra={"region": macro_event.region, "function_count": len(lambdas)},
        )
        errors = apply_layers(
            macro_event.region,
            lambdas,
            config.python_layer_version,
            config.node_layer_version,
        )
        if errors:
            logger.error("Layers could not be applied", extra={"error_count": len(errors)})
            return MacroResponse.failure(
                macro_event.request_id, macro_event.fragment, "\n".join(errors)
            ).to_payload()

    return MacroResponse.success(macro_event.request_id, macro_event.fragment).to_payload()
