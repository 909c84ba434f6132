"""HTTP layer: routers, schemas and dependency wiring."""
