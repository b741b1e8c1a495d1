"""HTTP routers for the Todo backend."""
