"""Intermediate Representation (IR) for collected GraphQL operations.

This module defines the records the visitors collect while walking an
operation document, and which the SDK emitter later renders.
"""

from dataclasses import dataclass
from enum import Enum

from graphql import FragmentDefinitionNode, NonNullTypeNode, OperationDefinitionNode


class OperationKind(str, Enum):
    """Closed set of GraphQL operation kinds, labelled as in generated names."""
    QUERY = "Query"
    MUTATION = "Mutation"
    SUBSCRIPTION = "Subscription"


@dataclass(frozen=True)
class OperationRecord:
    """One named operation captured during traversal."""
    node: OperationDefinitionNode
    document_variable_name: str  # e.g., "GetUserDocument"
    operation_kind: OperationKind
    result_type_name: str  # e.g., "GetUserQuery"
    variables_type_name: str  # e.g., "GetUserQueryVariables"

    @property
    def operation_name(self) -> str:
        return self.node.name.value

    @property
    def has_optional_variables(self) -> bool:
        """True if callers may omit the options argument entirely.

        That is the case when the operation declares no variables, or every
        variable is nullable or has a default value.
        """
        definitions = self.node.variable_definitions or ()
        return all(
            not isinstance(v.type, NonNullTypeNode) or v.default_value is not None
            for v in definitions
        )


@dataclass
class LoadedFragment:
    """A fragment definition available to operation documents."""
    node: FragmentDefinitionNode
    name: str
    on_type: str
    is_external: bool = False
