"""HTTP layer: application factory, routers and the dashboard template."""
