"""gateway module: one FastAPI app mounting the status, hardware, systemd and logs routers."""
from .xGatewayService import create_app

__all__ = ["create_app"]
