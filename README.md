# gapicrest

Building blocks for the REST side of API client library generation. The
package holds a lightweight in-memory model of protocol buffer descriptors
and works out, from `google.api.http` bindings, how each RPC maps onto an
HTTP request: its verb and URL, which request fields go into the path, the
query string or the body. It also records GAPIC metadata and renders
Markdown doc comments as plain text.

## Modules

- **`gapicrest.descriptors`** — the descriptor model:
  `FieldType`, `FieldLabel`, `FieldBehavior`, `FieldDescriptor`,
  `MessageDescriptor` (with `field(name)`), `HttpRule` (verb, path, body,
  selector; an unsupported verb raises `ValueError`), `MethodDescriptor`,
  `ServiceDescriptor` and `FileDescriptor`. `TypeIndex` maps fully
  qualified names such as `.pkg.Msg` to messages (nested ones included):
  `add_file`, `message` (raises `KeyError` for an unknown type), `in`, and
  `lookup_field`, which resolves a dotted field path or returns `None`.
- **`gapicrest.naming`** — `lower_first`, `upper_first`, `camel_to_snake`
  (keeps upper-case acronyms together), `snake_to_camel` (a word starting
  with a digit keeps a leading underscore) and `grpc_client_field`.
- **`gapicrest.helpers`** — descriptor queries (`get_field`, `has_field`,
  `is_optional`, `get_method`, `has_method`, `has_rest_method`,
  `contains_service`, `is_required`) and routing-header helpers:
  `convert_path_template_to_regex` turns a path template into a regex with
  a named capture, `get_header_name` returns the captured header name.
- **`gapicrest.http`** — `HttpInfo` (verb, url, body, and `http_method` in
  upper case), `get_http_info`, `url_format_string` (replaces each URL
  variable with `%v`), `path_variables`, `lowcase_rest_client_name` and
  `grpc_code_to_http`, which maps a gRPC status code, by number or name, to
  an HTTP status expression.
- **`gapicrest.params`** — `path_params`, `query_params` and `get_leafs`
  classify request fields. Well-known types listed in
  `WELL_KNOWN_TYPE_NAMES` count as leaves; repeated message fields are not
  traversed, and self-referencing messages stop after one level.
- **`gapicrest.metadata`** — `GapicMetadata`, `ServiceForTransport`,
  `ServiceAsClient` and `MethodList`. `add_service_for_transport` is
  idempotent, `add_method` records an RPC (raising `KeyError` if its
  service and transport were never added), and `to_json` renders
  multi-line JSON with camelCase keys, empty values left out and map keys
  sorted.
- **`gapicrest.markdown`** — `md_plain` renders Markdown with inline HTML
  as plain text: links become `text (at target)`, `<br>` becomes a line
  break, list items are indented by level, and reference links such as
  `[Foo][pkg.Foo]` are reduced to their text.

## Installation

```
pip install gapicrest
```

## Example

```python
from gapicrest.descriptors import (
    FieldDescriptor, FieldType, FileDescriptor, HttpRule,
    MessageDescriptor, MethodDescriptor, TypeIndex,
)
from gapicrest.http import get_http_info, path_variables, url_format_string
from gapicrest.params import path_params, query_params
from gapicrest.naming import camel_to_snake
from gapicrest.markdown import md_plain

request = MessageDescriptor("IdentifyRequest", fields=[
    FieldDescriptor("kingdom", type=FieldType.INT32),
    FieldDescriptor("mass_kg", type=FieldType.INT32),
])
index = TypeIndex([FileDescriptor(package="identify", messages=[request])])
method = MethodDescriptor(
    "Identify",
    input_type=".identify.IdentifyRequest",
    http=HttpRule(verb="get", path="/kingdom/{kingdom}"),
)

assert get_http_info(method).http_method == "GET"
assert sorted(path_params(index, method)) == ["kingdom"]
assert sorted(query_params(index, method)) == ["mass_kg"]

assert url_format_string("/v1/{name=projects/*}/foos") == "/v1/%v/foos"
assert path_variables("/v1/{name=projects/*}/foos") == ["name"]
assert camel_to_snake("IAMCredentials") == "iam_credentials"

print(md_plain("link to [a search engine](https://www.example.com)"))
# link to a search engine (at https://www.example.com)
```

## What the package does not do

It has no command and does not read compiled descriptor sets or plugin
requests: descriptors are built in Python from the classes above. It does
not parse generator parameter strings, sort import lists, emit client
source code, or gather the Locations, IAM policy and Operations mixin
methods from a service configuration. It supplies the pieces such a
generator would build on.

## Running the tests

```
pip install -e ".[test]"
pytest
```