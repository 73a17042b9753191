"""Bearer-token principal resolution middleware for FastAPI/Starlette."""

__version__ = "0.1.0"
