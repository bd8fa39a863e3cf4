"""Deployment stacks for the serverless macro."""

from .macro_stack import ServerlessMacroStack

__all__ = ["ServerlessMacroStack"]
