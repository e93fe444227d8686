# pingkit

Building blocks for working with an uptime monitoring service:

- **Transaction checks** (`pingkit.tms_check`): `TMSCheck`, `TMSCheckStep` and
  `TMSCheckMetaData`, with validation and JSON rendering for the API.
- **Alert integrations** (`pingkit.integrations`): `WebHookIntegration` and
  `WebHookData`, plus the response records `IntegrationGetResponse`,
  `IntegrationStatus` and `IntegrationProvider`, each readable with `from_dict`.
- **Organization users** over GraphQL (`pingkit.graphql`,
  `pingkit.invitations`, `pingkit.active_users`, `pingkit.users`): invite,
  resend, revoke, list and update members of an organization.
- **Errors and helpers** (`pingkit.errors`, `pingkit.jsonutil`).

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Transaction checks

```python
from pingkit.tms_check import TMSCheck, TMSCheckStep

check = TMSCheck(
    name="login flow",
    steps=[TMSCheckStep(fn="go_to", args={"url": "www.example.com"})],
    interval=10,
    severity_level="high",
    tags=["web", "login"],
)
check.validate()                 # raises ValueError on invalid fields
body = check.render_for_json_api()
```

`validate` requires a non-empty name and at least one step. When set, the
interval must be one of 5, 10, 20, 60, 720 or 1440, and the severity level
must be `high` or `low`. Tags may only use `A-Z`, `a-z`, `0-9`, `_` and `-`.

`render_for_json_api` returns compact JSON. Empty fields are left out;
`active` is always present. A minimal check renders as:

```
{"name":"RequireParams","steps":[{"args":{"url":"www.google.com"},"fn":"go_to"}],"active":false}
```

`TMSCheck.from_dict` reads a check back from a decoded API object.

## Webhook integrations

```python
from pingkit.integrations import WebHookData, WebHookIntegration

hook = WebHookIntegration(
    active=True,
    provider_id=2,
    user_data=WebHookData(name="alerts", url="https://www.example.com/hook"),
)
hook.validate()        # provider_id must be 1 or 2; name and url non-empty
params = hook.post_params()
# {"active": "true", "provider_id": "2",
#  "data_json": '{"name":"alerts","url":"https://www.example.com/hook"}'}
```

## Users and invitations

The user services send their requests through a `GraphQLExecutor`. It wraps
a transport: a callable that takes the JSON request body as a string and
returns the raw response body (text, bytes or a readable file object). The
package itself opens no connections, so the transport is yours to supply.

```python
import urllib.request

from pingkit.active_users import ActiveUserService
from pingkit.graphql import GraphQLExecutor
from pingkit.invitations import Invitation, InvitationService, Product
from pingkit.users import UserService


def transport(body: str) -> bytes:
    request = urllib.request.Request(
        "https://api.example.com/graphql",
        data=body.encode(),
        headers={"Content-Type": "application/json"},
    )
    with urllib.request.urlopen(request) as response:
        return response.read()


executor = GraphQLExecutor(transport)
users = UserService(ActiveUserService(executor), InvitationService(executor))

users.create(Invitation(
    email="someone@example.com",
    role="MEMBER",
    products=[Product(name="PINGDOM", role="MEMBER")],
))
user = users.retrieve("someone@example.com")   # an Invitation, or None
users.delete("someone@example.com")             # revokes a pending invitation
```

`GraphQLExecutor.make_graphql_request` parses the response with
`new_graphql_response` and returns the object found under the request's
`response_type` key in `data`, as a `GraphQLResponse` (a `dict` with
`is_success()` and `message()`). A `GraphQLRequestError` is raised when the
body is not valid JSON, holds no `data`, has no object under that key, or
reports `"success": false`.

What `UserService` does:

- `create` sends an invitation; users can only join that way.
- `update` changes the role and products of an active member. If there is no
  active member with that e-mail, it revokes the pending invitation and sends
  a new one. It raises `LookupError` if there is neither.
- `delete` revokes a pending invitation. For an active member it raises a
  `ClientError` with code `ErrorCode.DELETE_ACTIVE_USER_EXCEPTION`. A failed
  revoke raises a `ClientError` with code `ErrorCode.NETWORK_EXCEPTION`.
- `retrieve` returns the active member or the pending invitation with that
  e-mail, as an `Invitation`, or `None`.

`ActiveUserService` (`list`, `get`, `update`, `get_by_email`) and
`InvitationService` (`create`, `revoke`, `resend`, `list`) can also be used
directly.

## Utilities

- `pingkit.jsonutil.to_json_no_escape(obj)` encodes compact JSON with sorted
  keys, without HTML escaping, and adds a trailing newline.
- `pingkit.jsonutil.convert(source, target)` re-reads `source` through JSON as
  `target`. `target` is a class with `from_dict`, or a plain type such as
  `dict`.
- `pingkit.jsonutil.rand_string(n)` returns `n` random ASCII letters and
  digits.
- `pingkit.graphql.retrieve_cookie(set_cookie_headers, name)` returns a cookie
  value from a list of `Set-Cookie` header values. It raises `LookupError` if
  the list is empty or the cookie is missing.

## What the package does not do

pingkit sends no HTTP requests of its own and has no sign-in or session
handling: user management needs a transport that you provide. For transaction
checks and integrations it offers the request and response models only. It
has no client that lists, creates, updates or deletes them on the service, and
no command-line tool.