"""Renders the aggregated getSdk factory from collected operation records.

The factory takes an ApolloClient and returns an object with one typed
method per operation, in the order the operations were recorded:

    export const getSdk = (client: ApolloClient<any>) => ({
      getUserQuery(options: Apollo.QueryOptions<GetUserQuery, GetUserQueryVariables>) {
        return client.query<GetUserQuery, GetUserQueryVariables>({...options, query: GetUserDocument})
      }
    });
    export type SdkType = ReturnType<typeof getSdk>
"""

from dataclasses import dataclass
from typing import Iterable

from jinja2 import Environment, PackageLoader, StrictUndefined

from .classifier import apollo_operation, apollo_operation_option_type, document_option_key
from .ir import OperationRecord
from .naming import camel_case


@dataclass(frozen=True)
class SdkMethod:
    """Template context for one generated SDK method."""
    method_name: str
    optional: bool
    option_type: str
    invocation: str
    generics: str
    document_key: str
    document_variable_name: str

    @classmethod
    def from_record(cls, record: OperationRecord) -> "SdkMethod":
        kind = record.operation_kind
        return cls(
            method_name=f"{camel_case(record.operation_name)}{kind.value}",
            optional=record.has_optional_variables,
            option_type=apollo_operation_option_type(kind),
            invocation=apollo_operation(kind),
            generics=f"{record.result_type_name}, {record.variables_type_name}",
            document_key=document_option_key(kind),
            document_variable_name=record.document_variable_name,
        )


class SdkEmitter:
    """Renders sdk.ts.j2 for a sequence of operation records."""

    TEMPLATE_NAME = "sdk.ts.j2"

    def __init__(self, env: Environment | None = None):
        self.env = env or Environment(
            loader=PackageLoader("gql_apollo", "templates"),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )

    def render(self, records: Iterable[OperationRecord]) -> str:
        methods = [SdkMethod.from_record(record) for record in records]
        template = self.env.get_template(self.TEMPLATE_NAME)
        return template.render(operations=methods)
