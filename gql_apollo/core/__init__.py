"""Core modules for Apollo SDK code generation."""

from .base_visitor import ClientSideBaseVisitor
from .classifier import (
    UnknownOperationTypeError,
    apollo_operation,
    apollo_operation_option_type,
    classify,
    document_option_key,
)
from .config import ApolloPluginConfig, load_config
from .hooks import (
    AddHeaderHook,
    FilterOperationsHook,
    HookRunner,
    PostGenerateHook,
    PreGenerateHook,
)
from .ir import LoadedFragment, OperationKind, OperationRecord
from .loader import load_documents, load_schema
from .plugin import InvalidOutputFileError, PluginOutput, plugin, validate
from .sdk_emitter import SdkEmitter
from .visitor import GraphQLApolloVisitor

__all__ = [
    # IR types
    "LoadedFragment",
    "OperationKind",
    "OperationRecord",
    # Classifier
    "UnknownOperationTypeError",
    "apollo_operation",
    "apollo_operation_option_type",
    "classify",
    "document_option_key",
    # Config
    "ApolloPluginConfig",
    "load_config",
    # Hooks
    "PreGenerateHook",
    "PostGenerateHook",
    "AddHeaderHook",
    "FilterOperationsHook",
    "HookRunner",
    # Loaders
    "load_documents",
    "load_schema",
    # Visitors
    "ClientSideBaseVisitor",
    "GraphQLApolloVisitor",
    "SdkEmitter",
    # Plugin
    "InvalidOutputFileError",
    "PluginOutput",
    "plugin",
    "validate",
]
