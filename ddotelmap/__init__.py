"""Map OpenTelemetry resource attributes to Datadog tags, sources and host metadata payloads."""

__version__ = "0.1.0"