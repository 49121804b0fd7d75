"""Core live-update engine: streams, signals and the aggregator."""
