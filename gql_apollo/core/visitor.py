"""Apollo SDK visitor.

Collects every named operation of a document while the base visitor emits
the per-operation document constants, then renders one aggregated getSdk
factory on request via ``sdk_content``.
"""

import logging

from graphql import GraphQLSchema, OperationDefinitionNode, print_ast

from .base_visitor import ClientSideBaseVisitor
from .classifier import classify
from .config import ApolloPluginConfig
from .ir import LoadedFragment, OperationRecord
from .sdk_emitter import SdkEmitter

logger = logging.getLogger(__name__)

PLUGIN_NAME = "typescript-graphql-apollo"


class GraphQLApolloVisitor(ClientSideBaseVisitor):
    """Visitor producing a typed SDK around ApolloClient."""

    def __init__(
        self,
        schema: GraphQLSchema | None,
        fragments: list[LoadedFragment],
        config: ApolloPluginConfig | dict | None = None,
        emitter: SdkEmitter | None = None,
    ):
        super().__init__(schema, fragments, config)
        self._operations_to_include: list[OperationRecord] = []
        self._emitter = emitter or SdkEmitter()

        type_import = "import type" if self.config.use_type_imports else "import"
        self._additional_imports.append(f"{type_import} {{ ApolloClient }} from '@apollo/client';")
        self._additional_imports.append(f"{type_import} * as Apollo from '@apollo/client';")

    def operation_definition(self, node: OperationDefinitionNode) -> str | None:
        """Skip anonymous operations, since method names derive from the operation name."""
        if node.name is None or not node.name.value:
            logger.warning(
                'Anonymous GraphQL operation was ignored in "%s", '
                "please make sure to name your operation:\n%s",
                PLUGIN_NAME,
                print_ast(node),
            )
            return None
        return super().operation_definition(node)

    def build_operation(
        self,
        node: OperationDefinitionNode,
        document_variable_name: str,
        operation_type: str,
        operation_result_type: str,
        operation_variables_types: str,
    ) -> str | None:
        """Record the operation for the aggregated SDK; emits nothing per operation."""
        self._operations_to_include.append(
            OperationRecord(
                node=node,
                document_variable_name=document_variable_name,
                operation_kind=classify(operation_type),
                result_type_name=operation_result_type,
                variables_type_name=operation_variables_types,
            )
        )
        return None

    @property
    def operations(self) -> tuple[OperationRecord, ...]:
        return tuple(self._operations_to_include)

    @property
    def sdk_content(self) -> str:
        return self._emitter.render(self._operations_to_include)
