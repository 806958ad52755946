"""Tags, hostnames and telemetry sources derived from resource attributes."""