"""HTTP routers for the placeholder mapper gateway."""
