"""Technical infrastructure: manifest loading, registry, execution and logging."""
