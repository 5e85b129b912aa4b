"""HTTP surface: FastAPI app, routes and a typed httpx client."""
