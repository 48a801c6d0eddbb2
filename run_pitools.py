#!/usr/bin/env python3
"""
pitools launcher
- central logging
- gateway app
- uvicorn
"""
from __future__ import annotations

import argparse

import uvicorn


def main() -> None:
    parser = argparse.ArgumentParser(description="Serve pitools status/hardware/systemd endpoints")
    parser.add_argument("--config", help="gateway config.yml (default: GATEWAY_CONFIG or packaged)")
    parser.add_argument("--host")
    parser.add_argument("--port", type=int)
    args = parser.parse_args()

    from pitools.logwrapper import init_logging
    from pitools.gateway.config_loader import load_config
    from pitools.gateway.xGatewayService import create_app

    init_logging()
    cfg = load_config(args.config)
    app = create_app(args.config)

    host = args.host or str(cfg["server"]["host"])
    port = args.port or int(cfg["server"]["port"])
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    main()
