#!/usr/bin/env python3
"""
Serverless Layer Macro CDK App
Deploys the CloudFormation macro that adds Datadog Lambda Library layers to Lambda functions.
"""

import aws_cdk as cdk

from infrastructure.config.environments import get_environment_config
from infrastructure.stacks.macro_stack import ServerlessMacroStack

app = cdk.App()

# Get environment configuration
environment = app.node.try_get_context("environment") or "dev"
config = get_environment_config(environment)

# CDK environment (account/region)
cdk_env = cdk.Environment(account=config.get("account_id"), region=config.get("region", "us-east-1"))

macro_stack = ServerlessMacroStack(
    app,
    f"ServerlessMacro-{environment}",
    environment=environment,
    config=config,
    env=cdk_env,
)

# ========================================
# TAGGING STRATEGY
# ========================================

cdk.Tags.of(app).add("Environment", environment)
cdk.Tags.of(app).add("ManagedBy", "CDK")
for key, value in (config.get("tags") or {}).items():
    cdk.Tags.of(macro_stack).add(key, value)

app.synth()
