"""HTTP transport for the score server."""
