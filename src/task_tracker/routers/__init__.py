"""HTTP routers for the task tracker API."""
