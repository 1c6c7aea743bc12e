"""Built-in module lists consumed by the import classifier."""

from __future__ import annotations

from dataclasses import dataclass

NODE_BUILTIN_MODULES = frozenset(
    {
        "assert",
        "async_hooks",
        "buffer",
        "child_process",
        "cluster",
        "console",
        "constants",
        "crypto",
        "dgram",
        "diagnostics_channel",
        "dns",
        "domain",
        "events",
        "fs",
        "http",
        "http2",
        "https",
        "inspector",
        "module",
        "net",
        "os",
        "path",
        "perf_hooks",
        "process",
        "punycode",
        "querystring",
        "readline",
        "repl",
        "stream",
        "string_decoder",
        "sys",
        "timers",
        "tls",
        "trace_events",
        "tty",
        "url",
        "util",
        "v8",
        "vm",
        "wasi",
        "worker_threads",
        "zlib",
    }
)

# Only resolvable with the "node:" scheme; the bare names are npm packages.
NODE_PREFIX_ONLY_MODULES = frozenset({"sea", "sqlite", "test"})

BUN_BUILTIN_MODULES = frozenset({"bun", "bun:test", "bun:sqlite", "bun:ffi", "bun:jsc"})


@dataclass(frozen=True)
class ClassifierConfig:
    """Immutable classifier settings."""

    node_builtins: frozenset[str] = NODE_BUILTIN_MODULES
    node_prefix_only: frozenset[str] = NODE_PREFIX_ONLY_MODULES
    bun_builtins: frozenset[str] = BUN_BUILTIN_MODULES


DEFAULT_CLASSIFIER_CONFIG = ClassifierConfig()
