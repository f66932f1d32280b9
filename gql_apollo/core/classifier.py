"""Maps GraphQL operation kinds onto Apollo client primitives."""

from .ir import OperationKind


class UnknownOperationTypeError(ValueError):
    """Raised when an operation type outside Query/Mutation/Subscription appears."""

    def __init__(self, operation_type: object):
        self.operation_type = operation_type
        super().__init__(f"unknown operation type: {operation_type}")


_APOLLO_OPERATIONS = {
    OperationKind.QUERY: "query",
    OperationKind.MUTATION: "mutate",
    OperationKind.SUBSCRIPTION: "subscribe",
}

_APOLLO_OPTION_TYPES = {
    OperationKind.QUERY: "Apollo.QueryOptions",
    OperationKind.MUTATION: "Apollo.MutationOptions",
    OperationKind.SUBSCRIPTION: "Apollo.SubscriptionOptions",
}


def classify(operation_type: OperationKind | str) -> OperationKind:
    """Resolve an operation type label such as 'Query' to its OperationKind.

    Raises:
        UnknownOperationTypeError: If the label is not one of the three kinds
    """
    if isinstance(operation_type, OperationKind):
        return operation_type
    try:
        return OperationKind(operation_type)
    except ValueError:
        raise UnknownOperationTypeError(operation_type) from None


def apollo_operation(operation_type: OperationKind | str) -> str:
    """Name of the ApolloClient method that executes this kind of operation."""
    return _APOLLO_OPERATIONS[classify(operation_type)]


def apollo_operation_option_type(operation_type: OperationKind | str) -> str:
    """Name of the Apollo options type accepted by that method."""
    return _APOLLO_OPTION_TYPES[classify(operation_type)]


def document_option_key(operation_type: OperationKind | str) -> str:
    """Options key that carries the document: 'mutation' for mutations, else 'query'."""
    if classify(operation_type) is OperationKind.MUTATION:
        return "mutation"
    return "query"
