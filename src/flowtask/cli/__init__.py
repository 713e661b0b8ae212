"""CLI: composition root (bootstrap), slash commands, entrypoint."""
