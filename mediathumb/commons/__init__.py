"""Commons package - settings and telemetry shared by every layer."""
