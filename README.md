# wins

Building blocks for a service that lets a Windows container operate its
Windows host: splitting command-line list arguments, turning port exposure
strings into ports, validating client requests, loading and saving the server
configuration, checking process paths against a whitelist, formatting call
logs and writing results as JSON.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## List arguments (`wins.listvalue`)

`ListValue` splits a space-separated argument into items while keeping quoted
sections together. Quotes stay in the items, and a single quote inside double
quotes (or the reverse) is an ordinary character.

```python
from wins.listvalue import ListValue

value = ListValue()
value.set("NICK=bye RANCHER='hello world' WINS=world")
value.get()       # ['NICK=bye', "RANCHER='hello world'", 'WINS=world']
value.is_empty()  # False
ListValue().get() # []
```

An unpaired quote makes `get()` raise `ValueError`.

## Exposing and publishing ports (`wins.exposes`)

```python
from wins.exposes import parse_exposes, parse_publishes

parse_exposes(["TCP:443", "UDP:4789-4790"])
# [ProcessExpose(protocol='TCP', port=443),
#  ProcessExpose(protocol='UDP', port=4789),
#  ProcessExpose(protocol='UDP', port=4790)]

parse_publishes(["TCP:80-81"])   # [80, 81]
```

`parse_publishes` accepts TCP only and ports from 0 to 65535. A malformed
entry, an unparsable port or a range whose low end is not below its high end
raises `ExposeError` (a `ValueError`).

## Client requests (`wins.requests`)

```python
from wins.requests import (
    build_hns_get_network_request,
    build_network_get_request,
    build_route_add_request,
)

build_hns_get_network_request("nat", "")        # HnsGetNetworkRequest(name='nat', address=None)
build_network_get_request("", "")               # NetworkGetRequest(name=None, address=None)
build_route_add_request("8.8.8.8 6.6.6.6/24")   # addresses ['8.8.8.8/32', '6.6.6.6/24']
```

- `build_hns_get_network_request` needs exactly one of name and address, and
  the address must contain `/`.
- `build_network_get_request` allows at most one of them.
- `build_route_add_request` takes a `ListValue` or its text; it must not be
  empty, and bare addresses get `/32`.

Invalid options raise `RequestError` (a `ValueError`).

## Server configuration (`wins.config`)

```python
from wins.config import default_config, load_config, save_config

config = default_config()       # listen "rancher_wins", proxy "rancher_wins_proxy"
load_config("config", config)   # a missing file leaves the config unchanged
save_config("config.saved", config)
```

The file is YAML with the keys `debug`, `listen`, `proxy`, `white_list`
(holding `processPaths` and `proxyPorts`), `systemagent`,
`agentStrictTLSMode`, `csi-proxy` and `tls-config`. Only keys present in the
file override the given config; keys are matched exactly first and then
ignoring case. `systemagent`, `csi-proxy` and `tls-config` are kept as plain
mappings.

`load_config` validates after reading: `listen` must not be blank, no process
path may be blank and every proxy port must lie between 0 and 65535. A
directory path, undecodable YAML or a failed validation raises `ConfigError`.
`decode_config(path, config)` reads without validating.

## Process path whitelist (`wins.whitelist`)

```python
from types import SimpleNamespace
from wins.whitelist import ProcessPathWhitelist, process_path_interceptor

whitelist = ProcessPathWhitelist([r"C:\etc\rancher\bin\agent.exe"])
r"c:\etc\rancher\bin\AGENT.exe" in whitelist   # True

request = SimpleNamespace(path=r"C:\other.exe")
whitelist.check("/wins.ProcessService/Start", request)   # raises InvalidPathError

intercept = process_path_interceptor([r"C:\etc\rancher\bin\agent.exe"])
intercept("/wins.ProcessService/Start", request, handler)
```

Paths are normalised Windows-style and compared case-insensitively. Only
calls to `/wins.ProcessService/Start` whose request has a string `path` are
checked; `InvalidPathError` carries `code = "InvalidArgument"`. The
interceptor returns what `handler(request)` returns.

## Call logs (`wins.grpclog`)

```python
from datetime import timedelta
from wins.grpclog import CallKind, code_to_level, format_call_log

format_call_log(CallKind.UNARY, "/wins.HostService/GetVersion",
                timedelta(milliseconds=2), "OK")
# '[GRPC - Unary ] { OK }, wins.HostService - GetVersion, cost 2ms'

code_to_level("Internal")   # logging.ERROR
```

An optional error message is appended after `": "`, and an optional deadline
is written in RFC 3339 form (a naive datetime is taken as UTC). Unknown status
codes map to `logging.ERROR`.

## JSON output (`wins.outputs`)

`write_json(stream, obj)` writes `obj` as compact JSON with sorted keys;
dataclasses are encoded as mappings. `None` and empty bytes write nothing,
and other bytes are written as text unchanged. A value that cannot be encoded
or a failed write raises `OutputError`.

## Command helpers (`wins.cmds`)

`join_flags(flags)` collects flags into a new list. `chain_funcs(*funcs)`
returns one hook that calls each non-`None` hook in order with the same
argument, stopping at the first exception; with no hooks it returns `None`.

## What this package does not do

It has no command-line program, no RPC server or client, no named-pipe
transport, no port proxy and no Windows service registration. It provides
the parsing, validation, configuration and logging pieces such programs use.