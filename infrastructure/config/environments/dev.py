"""Development environment configuration."""

import os

from infrastructure.config.types import EnvironmentConfig

dev_config: EnvironmentConfig = {
    "account_id": os.environ.get("CDK_DEFAULT_ACCOUNT"),
    "region": os.environ.get("CDK_DEFAULT_REGION", "us-east-1"),
    # Templates reference the macro as `Transform: DatadogServerless`
    "macro_name": "DatadogServerless",
    "lambda_memory": 256,
    "lambda_timeout": 30,
    "log_retention_days": 14,
    "log_level": "DEBUG",
    "removal_policy": "destroy",
    "tags": {
        "Environment": "dev",
        "Project": "ServerlessLayerMacro",
        "Owner": "PlatformTeam",
    },
}
