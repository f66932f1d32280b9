"""Plugin entry point: turns operation documents into the SDK module."""

import os
from dataclasses import dataclass, field

from graphql import DocumentNode, FragmentDefinitionNode, GraphQLSchema, concat_ast

from .config import ApolloPluginConfig
from .ir import LoadedFragment
from .visitor import GraphQLApolloVisitor


class InvalidOutputFileError(ValueError):
    """Raised when the output file is not a TypeScript module."""


@dataclass
class PluginOutput:
    """Generated module split into its import lines and its body."""
    prepend: list[str] = field(default_factory=list)
    content: str = ""
    operation_count: int = 0

    def render(self) -> str:
        """Return the full module text."""
        parts = []
        if self.prepend:
            parts.append("\n".join(self.prepend))
        parts.append(self.content)
        return "\n\n".join(parts).rstrip("\n") + "\n"


def load_fragments(document: DocumentNode) -> list[LoadedFragment]:
    """Collect the fragment definitions of a document, one per name.

    Fragments repeated across concatenated documents keep their first definition.
    """
    fragments: dict[str, LoadedFragment] = {}
    for definition in document.definitions:
        if isinstance(definition, FragmentDefinitionNode):
            fragments.setdefault(
                definition.name.value,
                LoadedFragment(
                    node=definition,
                    name=definition.name.value,
                    on_type=definition.type_condition.name.value,
                ),
            )
    return list(fragments.values())


def plugin(
    schema: GraphQLSchema | None,
    documents: list[DocumentNode],
    config: ApolloPluginConfig | dict | None = None,
) -> PluginOutput:
    """Generate the Apollo SDK module for a set of operation documents.

    Args:
        schema: The schema the documents target
        documents: Parsed operation documents
        config: Plugin settings, as a model or a raw codegen mapping

    Returns:
        Import lines plus fragments, document constants and the getSdk block
    """
    all_ast = concat_ast(documents)
    visitor = GraphQLApolloVisitor(schema, load_fragments(all_ast), config)
    definitions = visitor.visit_document(all_ast)

    content = [visitor.fragments, *definitions, visitor.sdk_content]
    return PluginOutput(
        prepend=visitor.get_imports(),
        content="\n".join(part for part in content if part),
        operation_count=len(visitor.operations),
    )


def validate(output_file: str) -> None:
    """Check that the output file is a TypeScript module."""
    if os.path.splitext(output_file)[1] != ".ts":
        raise InvalidOutputFileError(
            f'Plugin "typescript-graphql-apollo" requires extension to be ".ts"! Got: {output_file}'
        )
