"""CLI command modules; each exposes a ``register_command(s)`` hook."""
