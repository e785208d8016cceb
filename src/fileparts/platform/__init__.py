"""Platform adapters: filesystem probes and logging."""
