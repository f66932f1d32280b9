"""Loads schema and operation documents from .graphql files.

Parsing itself is done by graphql-core; this module only finds the files
and reports which one failed.
"""

import logging
import os

from graphql import DocumentNode, GraphQLError, GraphQLSchema, Source, build_schema, parse

logger = logging.getLogger(__name__)

SCHEMA_EXTENSIONS = (".graphqls", ".graphql")
DOCUMENT_EXTENSIONS = (".graphql", ".gql")


def collect_files(path: str, extensions: tuple[str, ...]) -> list[str]:
    """Collect all files with the given extensions from a file or directory path."""
    files = []
    if os.path.isfile(path):
        if path.endswith(extensions):
            files.append(path)
    else:
        for root, _, filenames in os.walk(path):
            for filename in filenames:
                if filename.endswith(extensions):
                    files.append(os.path.join(root, filename))
    return sorted(files)


def load_schema(path: str) -> GraphQLSchema:
    """Build a schema from every SDL file under path."""
    schema_files = collect_files(path, SCHEMA_EXTENSIONS)
    if not schema_files:
        raise FileNotFoundError(f"No schema files found in {path}")

    sdl = []
    for file_path in schema_files:
        with open(file_path, encoding="utf-8") as f:
            sdl.append(f.read())
    logger.debug("Loaded %d schema file(s) from %s", len(schema_files), path)

    try:
        return build_schema("\n".join(sdl))
    except GraphQLError as e:
        logger.error("Error building schema from %s: %s", path, e)
        raise


def load_documents(paths: list[str]) -> list[DocumentNode]:
    """Parse every operation document found under the given paths."""
    documents = []
    for path in paths:
        for file_path in collect_files(path, DOCUMENT_EXTENSIONS):
            with open(file_path, encoding="utf-8") as f:
                content = f.read()
            try:
                documents.append(parse(Source(content, file_path)))
            except GraphQLError as e:
                logger.error("Error parsing %s: %s", os.path.basename(file_path), e)
                raise
    logger.debug("Loaded %d document(s)", len(documents))
    return documents
