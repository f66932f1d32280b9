"""Generation hooks for customizing code generation.

Provides protocols for pre- and post-generation hooks that can modify
the operation documents before generation or transform the generated
module after.

Example usage:
    from gql_apollo.core.hooks import PreGenerateHook, PostGenerateHook

    # Pre-generation hook to drop internal operations
    class DropInternal(PreGenerateHook):
        def pre_generate(self, documents):
            return [d for d in documents if not is_internal(d)]

    # Post-generation hook to add headers
    class AddLicenseHeader(PostGenerateHook):
        def post_generate(self, filename, content):
            header = "// Copyright 2024 My Company\\n\\n"
            return header + content
"""

from typing import Protocol, runtime_checkable

from graphql import DocumentNode, OperationDefinitionNode


@runtime_checkable
class PreGenerateHook(Protocol):
    """Protocol for pre-generation hooks.

    Pre-generation hooks receive the parsed operation documents before
    code generation and can replace them.
    """

    def pre_generate(self, documents: list[DocumentNode]) -> list[DocumentNode]:
        """Called before code generation.

        Args:
            documents: The parsed operation documents

        Returns:
            The (possibly modified) documents to generate from
        """
        ...


@runtime_checkable
class PostGenerateHook(Protocol):
    """Protocol for post-generation hooks.

    Post-generation hooks receive the generated module and can transform
    it before it's written to disk.
    """

    def post_generate(self, filename: str, content: str) -> str:
        """Called after code generation.

        Args:
            filename: The name of the generated file (e.g., "sdk.ts")
            content: The generated code content

        Returns:
            The (possibly transformed) code to write
        """
        ...


class AddHeaderHook:
    """Built-in hook to add a header to generated files.

    Example:
        hook = AddHeaderHook("// Auto-generated - do not edit")
    """

    def __init__(self, header: str):
        self.header = header

    def post_generate(self, _filename: str, content: str) -> str:
        """Add a header to the beginning of the file."""
        if not self.header.endswith("\n"):
            header = self.header + "\n\n"
        else:
            header = self.header + "\n"
        return header + content


class FilterOperationsHook:
    """Built-in hook to filter named operations by prefix/suffix.

    Fragments and anonymous operations are left alone.

    Example:
        # Drop all operations whose name starts with "Admin"
        hook = FilterOperationsHook(exclude_prefix="Admin")
    """

    def __init__(
        self,
        exclude_prefix: str | None = None,
        exclude_suffix: str | None = None,
        include_prefix: str | None = None,
        include_suffix: str | None = None,
    ):
        self.exclude_prefix = exclude_prefix
        self.exclude_suffix = exclude_suffix
        self.include_prefix = include_prefix
        self.include_suffix = include_suffix

    def _should_include(self, name: str) -> bool:
        """Check if an operation should be included."""
        if self.exclude_prefix and name.startswith(self.exclude_prefix):
            return False
        if self.exclude_suffix and name.endswith(self.exclude_suffix):
            return False
        if self.include_prefix and not name.startswith(self.include_prefix):
            return False
        if self.include_suffix and not name.endswith(self.include_suffix):
            return False
        return True

    def _keep(self, definition) -> bool:
        if not isinstance(definition, OperationDefinitionNode) or definition.name is None:
            return True
        return self._should_include(definition.name.value)

    def pre_generate(self, documents: list[DocumentNode]) -> list[DocumentNode]:
        """Filter operations from each document."""
        return [
            DocumentNode(
                definitions=tuple(d for d in document.definitions if self._keep(d)),
                loc=document.loc,
            )
            for document in documents
        ]


class HookRunner:
    """Runs a collection of hooks in order."""

    def __init__(self):
        self.pre_hooks: list[PreGenerateHook] = []
        self.post_hooks: list[PostGenerateHook] = []

    def add_pre_hook(self, hook: PreGenerateHook):
        """Add a pre-generation hook."""
        self.pre_hooks.append(hook)

    def add_post_hook(self, hook: PostGenerateHook):
        """Add a post-generation hook."""
        self.post_hooks.append(hook)

    def run_pre_hooks(self, documents: list[DocumentNode]) -> list[DocumentNode]:
        """Run all pre-generation hooks in order."""
        for hook in self.pre_hooks:
            documents = hook.pre_generate(documents)
        return documents

    def run_post_hooks(self, filename: str, content: str) -> str:
        """Run all post-generation hooks in order."""
        for hook in self.post_hooks:
            content = hook.post_generate(filename, content)
        return content
