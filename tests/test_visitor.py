"""Tests for the Apollo SDK visitor: anonymous guard, recorder and SDK output."""

import logging

import pytest
from graphql import parse

from gql_apollo.core.classifier import UnknownOperationTypeError
from gql_apollo.core.ir import OperationKind
from gql_apollo.core.sdk_emitter import SdkEmitter
from gql_apollo.core.visitor import GraphQLApolloVisitor


# =============================================================================
# Fixtures
# =============================================================================


USER_OPERATIONS = """
query GetUser($id: ID!) {
  user(id: $id) {
    id
  }
}

mutation AddUser($input: UserInput) {
  addUser(input: $input) {
    id
  }
}
"""


def run_visitor(source: str, config=None) -> GraphQLApolloVisitor:
    visitor = GraphQLApolloVisitor(None, [], config)
    visitor.visit_document(parse(source))
    return visitor


@pytest.fixture
def user_visitor():
    return run_visitor(USER_OPERATIONS)


# =============================================================================
# Tests: Imports
# =============================================================================


class TestImports:
    """The visitor adds the ApolloClient and namespace imports."""

    def test_value_imports(self):
        visitor = GraphQLApolloVisitor(None, [])
        assert visitor.get_imports() == [
            "import { ApolloClient } from '@apollo/client';",
            "import * as Apollo from '@apollo/client';",
        ]

    def test_type_imports(self):
        visitor = GraphQLApolloVisitor(None, [], {"useTypeImports": True})
        assert visitor.get_imports()[:2] == [
            "import type { ApolloClient } from '@apollo/client';",
            "import type * as Apollo from '@apollo/client';",
        ]


# =============================================================================
# Tests: Anonymous-operation guard
# =============================================================================


class TestAnonymousOperations:
    """Anonymous operations are skipped with a warning."""

    def test_anonymous_operation_returns_nothing(self, caplog):
        visitor = GraphQLApolloVisitor(None, [])
        node = parse("mutation { addUser { id } }").definitions[0]

        with caplog.at_level(logging.WARNING):
            assert visitor.operation_definition(node) is None

        assert visitor.operations == ()
        assert "Anonymous GraphQL operation was ignored" in caplog.text
        assert "addUser" in caplog.text  # printed operation text

    def test_anonymous_operation_gets_no_document(self, caplog):
        visitor = GraphQLApolloVisitor(None, [])
        with caplog.at_level(logging.WARNING):
            definitions = visitor.visit_document(parse("{ me { id } }"))
        assert definitions == []
        # No gql import without any emitted document
        assert len(visitor.get_imports()) == 2

    def test_named_operations_still_processed(self, caplog):
        with caplog.at_level(logging.WARNING):
            visitor = run_visitor(USER_OPERATIONS + "\nquery { me { id } }")
        assert [r.operation_name for r in visitor.operations] == ["GetUser", "AddUser"]
        assert len(caplog.records) == 1


# =============================================================================
# Tests: Recorder
# =============================================================================


class TestRecorder:
    """build_operation records the operation and emits nothing."""

    def test_records_derived_names(self, user_visitor):
        record = user_visitor.operations[0]
        assert record.operation_kind is OperationKind.QUERY
        assert record.document_variable_name == "GetUserDocument"
        assert record.result_type_name == "GetUserQuery"
        assert record.variables_type_name == "GetUserQueryVariables"

    def test_preserves_document_order(self, user_visitor):
        kinds = [r.operation_kind for r in user_visitor.operations]
        assert kinds == [OperationKind.QUERY, OperationKind.MUTATION]

    def test_build_operation_returns_none(self):
        visitor = GraphQLApolloVisitor(None, [])
        node = parse("query A { a }").definitions[0]
        result = visitor.build_operation(node, "ADocument", "Query", "AQuery", "AQueryVariables")
        assert result is None
        assert len(visitor.operations) == 1

    def test_no_sdk_text_in_per_operation_output(self):
        visitor = GraphQLApolloVisitor(None, [])
        definitions = visitor.visit_document(parse(USER_OPERATIONS))
        assert len(definitions) == 2
        assert all("getSdk" not in d for d in definitions)
        assert definitions[0].startswith("export const GetUserDocument = gql`")

    def test_unknown_operation_type_fails_fast(self):
        visitor = GraphQLApolloVisitor(None, [])
        node = parse("query A { a }").definitions[0]
        with pytest.raises(UnknownOperationTypeError, match="Fragment"):
            visitor.build_operation(node, "ADocument", "Fragment", "A", "AVariables")
        assert visitor.operations == ()


# =============================================================================
# Tests: SDK content
# =============================================================================


class TestSdkContent:
    """Aggregated getSdk output."""

    def test_full_output(self, user_visitor):
        assert user_visitor.sdk_content == (
            "export const getSdk = (client: ApolloClient<any>) => ({\n"
            "  getUserQuery(options: Apollo.QueryOptions<GetUserQuery, GetUserQueryVariables>) {\n"
            "    return client.query<GetUserQuery, GetUserQueryVariables>"
            "({...options, query: GetUserDocument})\n"
            "  },\n"
            "  addUserMutation(options?: Apollo.MutationOptions<AddUserMutation, AddUserMutationVariables>) {\n"
            "    return client.mutate<AddUserMutation, AddUserMutationVariables>"
            "({...options, mutation: AddUserDocument})\n"
            "  }\n"
            "});\n"
            "export type SdkType = ReturnType<typeof getSdk>\n"
        )

    def test_idempotent(self, user_visitor):
        assert user_visitor.sdk_content == user_visitor.sdk_content

    def test_empty_document(self):
        content = GraphQLApolloVisitor(None, []).sdk_content
        assert content.startswith("export const getSdk = (client: ApolloClient<any>) => ({\n});")
        assert "export type SdkType = ReturnType<typeof getSdk>" in content

    def test_one_method_per_named_operation(self):
        visitor = run_visitor(
            """
            query ListPosts { posts { id } }
            query GetPost($id: ID!) { post(id: $id) { id } }
            subscription OnComment { comment { id } }
            """
        )
        content = visitor.sdk_content
        keys = ["listPostsQuery(", "getPostQuery(", "onCommentSubscription("]
        positions = [content.index(key) for key in keys]
        assert positions == sorted(positions)
        assert content.count("(options") == 3

    def test_get_user_with_anonymous_mutation(self, caplog):
        with caplog.at_level(logging.WARNING):
            visitor = run_visitor(
                """
                query GetUser($id: ID!) { user(id: $id) { id } }
                mutation { deleteAll }
                """
            )
        content = visitor.sdk_content
        assert content.count("(options") == 1
        assert "getUserQuery(options: Apollo.QueryOptions<GetUserQuery, GetUserQueryVariables>)" in content
        assert "client.mutate" not in content
        assert "Anonymous GraphQL operation" in caplog.text

    def test_subscription_with_nullable_variable(self):
        visitor = run_visitor(
            "subscription OnMessage($channel: String) { message(channel: $channel) { id } }"
        )
        content = visitor.sdk_content
        assert (
            "onMessageSubscription(options?: "
            "Apollo.SubscriptionOptions<OnMessageSubscription, OnMessageSubscriptionVariables>)"
        ) in content
        assert (
            "client.subscribe<OnMessageSubscription, OnMessageSubscriptionVariables>"
            "({...options, query: OnMessageDocument})"
        ) in content

    def test_required_variable_with_default_is_optional(self):
        visitor = run_visitor('query Search($term: String! = "") { search(term: $term) }')
        assert "searchQuery(options?:" in visitor.sdk_content

    def test_one_required_variable_makes_options_required(self):
        visitor = run_visitor("query Search($term: String!, $limit: Int) { search(term: $term) }")
        assert "searchQuery(options:" in visitor.sdk_content

    def test_dedupe_suffix_keeps_method_kind_suffix(self):
        visitor = run_visitor(
            "query GetUserQuery { me { id } }", {"dedupeOperationSuffix": True}
        )
        assert (
            "getUserQueryQuery(options?: Apollo.QueryOptions<GetUserQuery, GetUserQueryVariables>)"
        ) in visitor.sdk_content


# =============================================================================
# Tests: Emitter environment
# =============================================================================


class TestSdkEmitter:
    """Template environment for the TypeScript output."""

    def test_no_html_escaping(self, user_visitor):
        assert SdkEmitter().env.autoescape is False
        content = user_visitor.sdk_content
        assert "ApolloClient<any>" in content
        assert "&lt;" not in content
