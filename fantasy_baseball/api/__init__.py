"""HTTP API: app factory, auth gate, routers."""
