"""Status API: server status, auth capability and liveness routes."""
