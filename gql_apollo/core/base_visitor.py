"""Client-side base visitor for GraphQL operation documents.

Walks the top-level definitions of a document, derives the names of the
per-operation document constant and result/variables types, and emits the
``gql``-tagged document constants. Subclasses hook into ``build_operation``
to add their own per-operation output.
"""

from graphql import (
    DocumentNode,
    FragmentSpreadNode,
    GraphQLSchema,
    Node,
    OperationDefinitionNode,
    Visitor,
    print_ast,
    visit,
)

from .config import ApolloPluginConfig
from .ir import LoadedFragment
from .naming import convert_name, pascal_case


class _FragmentSpreadCollector(Visitor):
    """Collects fragment spread names in first-appearance order."""

    def __init__(self):
        super().__init__()
        self.names: list[str] = []

    def enter_fragment_spread(self, node: FragmentSpreadNode, *_args):
        name = node.name.value
        if name not in self.names:
            self.names.append(name)


def collect_fragment_spreads(node: Node) -> list[str]:
    """Return the names of fragments spread directly inside a node."""
    collector = _FragmentSpreadCollector()
    visit(node, collector)
    return collector.names


class ClientSideBaseVisitor:
    """Base traversal for client-side code generation plugins."""

    def __init__(
        self,
        schema: GraphQLSchema | None,
        fragments: list[LoadedFragment],
        config: ApolloPluginConfig | dict | None = None,
    ):
        self.schema = schema
        self.config = ApolloPluginConfig.from_raw(config)
        # First definition wins when documents repeat a fragment
        self._fragments_by_name: dict[str, LoadedFragment] = {}
        for fragment in fragments:
            self._fragments_by_name.setdefault(fragment.name, fragment)
        self._fragments = list(self._fragments_by_name.values())
        self._additional_imports: list[str] = []
        self._collected_operations: list[OperationDefinitionNode] = []

    def visit_document(self, document: DocumentNode) -> list[str]:
        """Visit every operation definition in source order.

        Returns:
            The generated text of each operation that produced output
        """
        definitions = []
        for definition in document.definitions:
            if isinstance(definition, OperationDefinitionNode):
                result = self.operation_definition(definition)
                if result is not None:
                    definitions.append(result)
        return definitions

    def operation_definition(self, node: OperationDefinitionNode) -> str | None:
        """Emit the document constant for one operation and call build_operation."""
        self._collected_operations.append(node)

        operation_type = pascal_case(node.operation.value)
        name = node.name.value if node.name else ""
        base_name = convert_name(name)
        suffix = self._operation_suffix(name, operation_type)

        document_variable_name = convert_name(
            name,
            prefix=self.config.document_variable_prefix,
            suffix=self.config.document_variable_suffix,
        )
        operation_result_type = f"{base_name}{suffix}{self.config.operation_result_suffix}"
        operation_variables_types = f"{base_name}{suffix}Variables"

        parts = [self._document_constant(document_variable_name, node)]
        additional = self.build_operation(
            node,
            document_variable_name,
            operation_type,
            operation_result_type,
            operation_variables_types,
        )
        if additional:
            parts.append(additional)
        return "\n".join(parts)

    def build_operation(
        self,
        node: OperationDefinitionNode,
        document_variable_name: str,
        operation_type: str,
        operation_result_type: str,
        operation_variables_types: str,
    ) -> str | None:
        """Extension point for per-operation output. The base emits nothing."""
        return None

    @property
    def fragments(self) -> str:
        """Document constants for all locally defined fragments.

        A fragment is emitted after every fragment it spreads, so each
        interpolated constant is declared before it is read.
        """
        return "\n".join(
            self._document_constant(self.fragment_variable_name(f.name), f.node)
            for f in self._fragments_in_dependency_order()
            if not f.is_external
        )

    def _fragments_in_dependency_order(self) -> list[LoadedFragment]:
        ordered: list[LoadedFragment] = []
        seen: set[str] = set()

        def add(fragment: LoadedFragment):
            if fragment.name in seen:
                return
            seen.add(fragment.name)
            for name in collect_fragment_spreads(fragment.node):
                dependency = self._fragments_by_name.get(name)
                if dependency is not None:
                    add(dependency)
            ordered.append(fragment)

        for fragment in self._fragments:
            add(fragment)
        return ordered

    def fragment_variable_name(self, fragment_name: str) -> str:
        return convert_name(
            fragment_name,
            prefix=self.config.fragment_variable_prefix,
            suffix=self.config.fragment_variable_suffix,
        )

    def get_imports(self) -> list[str]:
        """Import lines to prepend to the generated module."""
        imports = list(self._additional_imports)
        if self._collected_operations or self._fragments:
            imports.append(self._gql_import_statement())
        return imports

    def _operation_suffix(self, name: str, operation_type: str) -> str:
        if self.config.omit_operation_suffix:
            return ""
        if self.config.dedupe_operation_suffix and name.lower().endswith(operation_type.lower()):
            return ""
        return operation_type

    def _document_constant(self, variable_name: str, node: Node) -> str:
        lines = [f"export const {variable_name} = {self.gql_tag}`", print_ast(node)]
        for fragment_name in collect_fragment_spreads(node):
            # Unknown fragments are left to the document's own printed text
            if fragment_name in self._fragments_by_name:
                lines.append(f"${{{self.fragment_variable_name(fragment_name)}}}")
        lines.append("`;")
        return "\n".join(lines)

    @property
    def gql_tag(self) -> str:
        """Identifier the document constants are tagged with."""
        _, _, name = self.config.gql_import.partition("#")
        return name or "gql"

    def _gql_import_statement(self) -> str:
        module, _, name = self.config.gql_import.partition("#")
        if name:
            return f"import {{ {name} }} from '{module}';"
        return f"import gql from '{module}';"
