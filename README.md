# icingaclient

A small Python client for the Icinga 2 REST API. It manages hosts, host
groups and services, lists downtimes and submits passive check results.
The package also has an in-memory `MockClient` with the same methods, for
use in tests and dry runs.

## Installation

```
pip install icingaclient
```

To install the test dependencies as well:

```
pip install "icingaclient[test]"
```

## Modules

- `icingaclient.models` holds the data classes `Host`, `HostGroup`,
  `Service`, `Downtime`, `Action`, `QueryFilter` and `ClientConfig`. It also
  holds the exceptions `IcingaError` and `NotFoundError` and the `flatten`
  helper.
- `icingaclient.client` holds `WebClient`, which talks HTTP through a
  `requests` session. It also holds the `Client` protocol.
- `icingaclient.mock` holds `MockClient`.

## Usage

```python
from icingaclient.client import WebClient
from icingaclient.models import Action, Host, QueryFilter, Service

password = "password"
client = WebClient(
    url="https://icinga.example.com:5665/",
    username="user",
    password=password,
    zone="",  # when set, list results are limited to objects in this zone
)

client.test_api()

client.create_host(Host(name="web01", display_name="Web 01", address="192.0.2.10"))
host = client.get_host("web01")

service = Service(
    name="http",
    host_name="web01",
    display_name="HTTP",
    check_command="http",
    vars={"http": {"port": 443, "ssl": True}},
)
client.create_service(service)

client.process_check_result(service, Action(exit_status=0, plugin_output="OK"))

downtimes = client.list_downtimes(QueryFilter(filter='host.name=="web01"'))
services = client.list_services(QueryFilter(filter='host.name=="web01"'))
hosts = client.list_hosts("")  # the string is appended to the URL as its query
```

`WebClient` takes these keyword-only options:

- `debug`: logs each request and its status code at debug level on the
  `icingaclient.client` logger.
- `disable_keep_alives`: sends `Connection: close` with every request.
- `zone`: when set, the list methods return only objects in that zone.
- `tls_config`: becomes the session's `verify` setting. Pass a CA bundle
  path, or `False` to skip certificate checks.
- `session`: a `requests.Session` to use in place of a new one.

A trailing slash is stripped from the URL. Some details of how each method
sends its request:

- `create_host` creates the host from the `generic-host` template.
- `create_service` uses the service's own `templates`.
- `delete_host` and `delete_service` delete with `cascade=1`.
- `update_host` sends an empty group list.
- `process_check_result` sets the action's filter to the given host and
  service, and sets its type to `Service`.

## Errors

`IcingaError` (in `icingaclient.models`) is raised in these cases:

- A request cannot be sent.
- A response body is not valid JSON.
- A create, update or check-result request gets an HTTP status of 400 or
  more, or gets result entries with a code of 400 or more.
- `get_host`, `get_host_group`, `get_service`, `list_downtimes` or
  `list_services` gets any status other than 200.

`NotFoundError` is a subclass of `IcingaError`. It is raised when a `get_*`
call gets 200 but no results. `list_hosts`, `list_host_groups`, the delete
methods and `test_api` raise only when the request cannot be sent. They do
not raise because of the status code.

## Service variables

`Service.to_dict()` does not send the service's `vars` as one mapping. It
flattens them into top-level `vars.<name>` keys. Nested mappings are joined
with dots, and list items become `name[0]`, `name[1]` and so on.
`icingaclient.models.flatten` does the same to any mapping:

```python
from icingaclient.models import flatten

flatten({"http": {"port": 443}, "ips": ["a", "b"]})
# {"http.port": 443, "ips[0]": "a", "ips[1]": "b"}
```

Hosts and host groups send their `vars` unchanged.

## Testing against the mock

```python
from icingaclient.mock import MockClient
from icingaclient.models import Action, Service

mock = MockClient()
svc = Service(name="disk", host_name="db01")
mock.create_service(svc)
mock.process_check_result(svc, Action(exit_status=2, plugin_output="CRITICAL"))
assert mock.actions["db01!disk"][0].exit_status == 2
```

`MockClient` keeps objects in the dictionaries `hosts`, `host_groups` and
`services`. Hosts are keyed by name. Host groups are keyed by name. Services
are keyed by `host!service`. The mock stores copies of what it is given and
returns copies. A missing object raises `NotFoundError`.

Both `WebClient` and `MockClient` satisfy the `icingaclient.client.Client`
protocol, so code written against `Client` works with either.

## Limits

- `MockClient` ignores the query passed to its list methods and returns
  every stored object.
- `MockClient.list_downtimes` always returns an empty list.
- `MockClient.get_client_config` returns an empty `ClientConfig`.
- `MockClient.test_api` only checks that the URL set with `set_url` names a
  host.
- The package has no command-line tool. It is a library only.