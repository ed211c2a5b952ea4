"""Integration tests for the HTTP API using httpx ASGITransport."""
