#!/usr/bin/env python3
"""Demonstration of the generated Apollo SDK.

This script shows how to:
1. Parse a schema and some operation documents
2. Run the plugin over them
3. Print the generated TypeScript module

Note: nothing is written to disk.
"""

from graphql import build_schema, parse

from gql_apollo.core import plugin

SCHEMA = """
type User { id: ID! name: String }
type Message { id: ID! text: String! }
type Query { user(id: ID!): User }
type Mutation { rename(id: ID!, name: String!): User }
type Subscription { message(channel: String): Message }
"""

OPERATIONS = """
query GetUser($id: ID!) {
  user(id: $id) { ...UserFields }
}

mutation RenameUser($id: ID!, $name: String!) {
  rename(id: $id, name: $name) { ...UserFields }
}

subscription OnMessage($channel: String) {
  message(channel: $channel) { id text }
}

fragment UserFields on User {
  id
  name
}
"""


def main():
    print("=== Apollo SDK Demo ===\n")

    schema = build_schema(SCHEMA)
    output = plugin(schema, [parse(OPERATIONS)], {"useTypeImports": True})

    print(f"Generated {output.operation_count} SDK methods:\n")
    print(output.render())


if __name__ == "__main__":
    main()
