"""Host metrics exporter: samples CPU, memory and network counters and serves them over HTTP."""
