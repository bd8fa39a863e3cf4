"""Staging environment configuration."""

import os

from infrastructure.config.types import EnvironmentConfig

staging_config: EnvironmentConfig = {
    "account_id": os.environ.get("CDK_DEFAULT_ACCOUNT"),
    "region": os.environ.get("CDK_DEFAULT_REGION", "us-east-1"),
    "macro_name": "DatadogServerless",
    "lambda_memory": 256,
    "lambda_timeout": 60,
    "log_retention_days": 30,
    "log_level": "INFO",
    "removal_policy": "destroy",
    "tags": {
        "Environment": "staging",
        "Project": "ServerlessLayerMacro",
        "Owner": "PlatformTeam",
    },
}
