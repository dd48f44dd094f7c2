"""HTTP API for remote play editing."""
