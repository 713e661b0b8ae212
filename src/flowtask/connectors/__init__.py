"""Front ends that drive the services (console REPL)."""
