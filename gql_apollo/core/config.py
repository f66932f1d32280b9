"""Configuration for the Apollo SDK plugin.

Field names are snake_case in Python; the camelCase keys used in codegen
configuration files (``useTypeImports``, ``dedupeOperationSuffix``, ...) are
accepted as aliases.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApolloPluginConfig(BaseModel):
    """Settings that shape the generated TypeScript module."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        frozen=True,
    )

    # Emit `import type` instead of `import` for the Apollo imports
    use_type_imports: bool = False
    # "module" for a default import, "module#name" for a named one
    gql_import: str = "graphql-tag"
    document_variable_prefix: str = ""
    document_variable_suffix: str = "Document"
    fragment_variable_prefix: str = ""
    fragment_variable_suffix: str = "FragmentDoc"
    operation_result_suffix: str = ""
    dedupe_operation_suffix: bool = False
    omit_operation_suffix: bool = False

    @classmethod
    def from_raw(cls, raw: "ApolloPluginConfig | dict[str, Any] | None") -> "ApolloPluginConfig":
        """Accept an existing config, a raw mapping, or None for defaults."""
        if raw is None:
            return cls()
        if isinstance(raw, cls):
            return raw
        return cls.model_validate(raw)


def load_config(path: str | Path) -> ApolloPluginConfig:
    """Load plugin settings from a JSON file."""
    with open(path, encoding="utf-8") as f:
        raw = json.load(f)
    return ApolloPluginConfig.model_validate(raw)
