# termbus

Building blocks for a terminal workspace that manages SSH sessions,
port-forwarding tunnels and remote files, and that is extended through
plugins speaking a small line-delimited JSON RPC protocol.

The package has no runtime dependencies beyond the Python standard library
and supports Python 3.10 and later.

## What is inside

- `termbus.models` – the data model: `Session`, `Window`, `Pane`,
  `SSHHostConfig`, `KeepaliveConfig`, `ReconnectConfig`, `ForwardTunnel`,
  `FileInfo`, `AgentPlan`, `AgentStep` and the enums `SessionState`,
  `PaneType`, `ForwardType`, `TunnelStatus`, `RiskLevel`, `StepStatus`.
  `Session.to_dict()` and `ForwardTunnel.to_dict()` give JSON-ready
  mappings; `ForwardTunnel.from_dict()` reads one back.
- `termbus.interfaces` – an in-process `EventBus` (subscribe, unsubscribe,
  publish) and the abstract contracts the UI works against:
  `SessionManager`, `SFTPManager`, `TunnelManager`; plus the `HostConfig`,
  `PluginInfo` and `Field` records.
- `termbus.pluginrpc.protocol` – the request and response messages
  (`InitRequest`, `InitResponse`, `ExecuteRequest`, `ExecuteResponse`,
  `StopRequest`, `StopResponse`, `InfoResponse`, `ManifestResponse`) with
  `encode_message` and `decode_message`.
- `termbus.pluginrpc.rpc` – `ServiceImpl`, `Service` (with `dispatch`),
  `Client`, `serve` and `PluginRPCError`.
- `termbus.sdk.api` – `Plugin`, `BasePlugin`, `PluginAdapter` and `serve`.
- `termbus.sdk.cli` – the `PluginCli` tool and its `CliError`.
- `termbus.sdk.utils` – `file_exists`.
- `termbus.plugins` – ready-made plugins (`DockerPlugin`,
  `KubernetesPlugin`, `MySQLPlugin`, `RedisPlugin`, `AdvancedPlugin`,
  `HelloPlugin`) and `create_plugin(name)`.
- `termbus.tui` – text-mode UI pieces: the command-line `Parser`, `Style`
  with `strip_ansi`, `visible_width` and the editor styles, an
  `AnsiRenderer`, shell scrollback (`Enhancement`), a `Completer` and
  `CommandBar`, `Modal`, `ConfirmModal` and `AuthModal`, `TabBar`,
  `StatusBar`, `HostList`, `ShellView`, and the `EditorModel`,
  `TunnelListModel` and `TunnelEditModel` views. Components take key names
  such as `"up"`, `"enter"` or `"tab"` through `handle_key` and return
  rendered strings from `view`.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Parsing command lines

```python
from termbus.tui.parser import Parser

parser = Parser()
parser.add_alias("ll", "ls -la")
command = parser.parse(":ll --color=auto /tmp")
# command.name == "ls"
# command.flags == {"la": "true", "color": "auto"}
# command.args == ["/tmp"]
```

A leading `:` is ignored, `--key=value` and `--key` become flags, and a
single-dash flag takes the next word as its value unless that word starts
with `-`. An empty line gives `None`.

## Shell scrollback

```python
from termbus.tui.enhancement import Enhancement

scrollback = Enhancement()
scrollback.append("first\nsecond\nthird")
scrollback.visible(2)        # "second\nthird"
scrollback.search("sec")     # ["second"]
```

## Writing a plugin

Subclass `BasePlugin` from `termbus.sdk.api`, list the permissions and
commands the plugin offers, and hand an instance to `serve`:

```python
import sys

from termbus.sdk.api import BasePlugin, serve


class UptimePlugin(BasePlugin):
    def permissions(self):
        return ["ssh.execute"]

    def commands(self):
        return ["uptime"]


serve(UptimePlugin(name="uptime", version="0.1.0"), sys.stdin, sys.stdout)
```

`serve` refuses to start, raising `PluginRPCError`, unless the environment
variable `TERMBUS_PLUGIN` is set to `1`. It then reads one JSON object per
line, of the form `{"id": ..., "method": ..., "params": {...}}`, and writes
one `{"id": ..., "result": ..., "error": ...}` line per request, until its
input ends. The methods are `Plugin.Init`, `Plugin.Execute`, `Plugin.Stop`,
`Plugin.Info` and `Plugin.Manifest`.

`PluginAdapter` turns a plugin into the service the RPC layer expects:
`info()` and `manifest()` report its name, version, description, author,
permissions and commands. Output a plugin writes while executing a command
is not sent back; the reply carries only the exit code and any error.

On the calling side, `Client` takes a transport callable
`call(method, params) -> mapping` and returns decoded response messages.

## Commands

Run one of the bundled plugins as an RPC server on standard input and
output, naming it by its plugin name (`hello`, `docker`, `kubernetes`,
`mysql`, `redis` or `advanced`):

```
TERMBUS_PLUGIN=1 termbus-builtin-plugin hello
```

Check a plugin path with the plugin tool; the actions are `validate`,
`build` and `sign`, and each needs a plugin path:

```
termbus-plugin --action validate --plugin ./my-plugin
```

`validate` checks that the path exists; `build` and `sign` only check that
a path was given. An unknown action or a missing plugin path is reported
as an error and exits with status 1.

## What this package does not do

- It opens no SSH connections. `SessionManager`, `SFTPManager` and
  `TunnelManager` are abstract contracts only; no implementation of them,
  and so no session handling, file transfer or port forwarding, is
  included.
- It has no full-screen application or event loop. The UI components
  render strings and react to key names passed to them; putting them on a
  terminal and reading keys is left to the caller.
- It does not launch or manage plugin processes. It offers the plugin side
  (`serve`) and a transport-agnostic `Client`, but no host that starts
  plugins, checks their permissions or loads them.
- The bundled Docker, Kubernetes, MySQL, Redis and advanced plugins
  declare their commands and permissions but do nothing when executed;
  only `HelloPlugin` writes output.