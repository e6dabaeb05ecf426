#!/usr/bin/env python3
import argparse
import sys

from server.config import SETTINGS
from server.server import app


def main(argv=None):
    parser = argparse.ArgumentParser(description="Serve the password API")
    parser.add_argument("--host", default=SETTINGS["host"])
    parser.add_argument("--port", type=int, default=SETTINGS["port"])
    args = parser.parse_args(argv)

    print(f"🚀 Serving on http://{args.host}:{args.port}")
    app.run(args.host, args.port, debug=False)
    return 0


if __name__ == "__main__":
    sys.exit(main())
