import sys
from pathlib import Path
from typing import Any, Callable, Iterator

import pytest

# Ensure 'macro_shared' layer is importable at collection time (module import stage)
_repo_root = Path(__file__).resolve().parents[1]
_repo_root_str = str(_repo_root)
if _repo_root_str not in sys.path:
    sys.path.insert(0, _repo_root_str)
_shared_path = _repo_root / "src" / "lambda" / "layers" / "common" / "python"
_shared_str = str(_shared_path)
if _shared_str not in sys.path:
    sys.path.insert(0, _shared_str)

REPO_ROOT = _repo_root
MACRO_HANDLER_PATH = str(_repo_root / "src" / "lambda" / "functions" / "serverless_macro" / "handler.py")


@pytest.fixture(autouse=True)
def macro_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Pin logging-related environment so tests do not depend on the caller's shell."""
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    yield


@pytest.fixture
def load_module() -> Callable[[str], dict[str, Any]]:
    import runpy

    def _apply(path: str) -> dict[str, Any]:
        return runpy.run_path(path)

    return _apply


@pytest.fixture
def macro_handler(load_module: Callable[[str], dict[str, Any]]) -> Callable[[dict, Any], dict]:
    """Return the macro Lambda entry point loaded from its source file."""
    return load_module(MACRO_HANDLER_PATH)["main"]


@pytest.fixture
def fake_python_function(
    monkeypatch: pytest.MonkeyPatch,
) -> Callable[[Any], None]:
    """Swap PythonFunction for an inline lambda_.Function so synth needs no Docker."""
    from aws_cdk import Duration

    def _apply(target_module: Any) -> None:
        from aws_cdk import aws_lambda as lambda_

        def _fake(scope, id, **kwargs):
            return lambda_.Function(
                scope,
                id,
                function_name=kwargs.get("function_name"),
                runtime=kwargs.get("runtime", lambda_.Runtime.PYTHON_3_12),
                handler="index.handler",
                code=lambda_.Code.from_inline("def handler(event, context): return {}"),
                memory_size=kwargs.get("memory_size", 128),
                timeout=kwargs.get("timeout", Duration.seconds(10)),
                log_group=kwargs.get("log_group"),
                layers=kwargs.get("layers", []),
                environment=kwargs.get("environment", {}),
            )

        monkeypatch.setattr(target_module, "PythonFunction", _fake, raising=False)

    return _apply


@pytest.fixture
def fake_python_layer(
    monkeypatch: pytest.MonkeyPatch,
) -> Callable[[Any], None]:
    """Swap PythonLayerVersion for an unbundled asset layer."""

    def _apply(target_module: Any) -> None:
        from aws_cdk import aws_lambda as lambda_

        def _fake(scope, id, **kwargs):
            return lambda_.LayerVersion(
                scope,
                id,
                code=lambda_.Code.from_asset(kwargs["entry"], exclude=["__pycache__", "*.pyc"]),
                layer_version_name=kwargs.get("layer_version_name"),
                description=kwargs.get("description"),
                compatible_runtimes=kwargs.get("compatible_runtimes"),
            )

        monkeypatch.setattr(target_module, "PythonLayerVersion", _fake, raising=False)

    return _apply
