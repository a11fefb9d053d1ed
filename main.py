"""Command line entrypoint for the Omana Aunty backend."""

from __future__ import annotations

import argparse
import json
from typing import List, Optional

from aunty_app.config import ADDRESS_OPTIONS


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Omana aunty outfit judge and chat backend")
    subcommands = parser.add_subparsers(dest="command", required=True)

    detect = subcommands.add_parser("detect", help="Structured outfit slots for an image URI")
    detect.add_argument("uri")

    items = subcommands.add_parser("items", help="Flat clothing label list for an image URI")
    items.add_argument("uri")

    judge = subcommands.add_parser("judge", help="Ask aunty to roast the outfit")
    judge.add_argument("uri")
    judge.add_argument("--address-as", choices=ADDRESS_OPTIONS, default=None)

    serve = subcommands.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default="0.0.0.0")
    serve.add_argument("--port", type=int, default=8080)
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    args = _build_parser().parse_args(argv)

    if args.command == "detect":
        from logic.outfit_classifier import detect_outfit

        print(json.dumps(detect_outfit(args.uri).to_dict(), indent=2))
    elif args.command == "items":
        from logic.quick_items import detect_items_heuristic

        print(json.dumps({"items": detect_items_heuristic(args.uri), "caption": None}, indent=2))
    elif args.command == "judge":
        from aunty_app.app import OmanaAuntyApp

        app = OmanaAuntyApp()
        print(json.dumps(app.judge_outfit(args.uri, address_as=args.address_as), indent=2, default=str))
    elif args.command == "serve":
        import uvicorn

        uvicorn.run("server.api:get_app", factory=True, host=args.host, port=args.port, reload=False)


if __name__ == "__main__":
    main()
