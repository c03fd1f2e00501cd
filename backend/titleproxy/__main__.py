"""Process entry point — `python -m titleproxy --apikey KEY`.

Command-line values override the environment; anything not given on the
command line falls back to Settings (env vars / .env).
"""

import argparse

import uvicorn
from pydantic import ValidationError

from titleproxy.config import Settings
from titleproxy.main import create_app


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="titleproxy",
        description="Traced HTTP front-end for YouTube video title lookups.",
    )
    parser.add_argument(
        "--apikey", help="Google Cloud Platform API credential (env: YOUTUBE_API_KEY)",
    )
    parser.add_argument("--host", help="listen address (env: HOST)")
    parser.add_argument("--port", type=int, help="listen port (env: PORT)")
    return parser


def settings_from_args(args: argparse.Namespace) -> Settings:
    overrides = {
        "youtube_api_key": args.apikey,
        "host": args.host,
        "port": args.port,
    }
    return Settings(**{k: v for k, v in overrides.items() if v is not None})


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = settings_from_args(args)
    except ValidationError as e:
        parser.error(f"invalid configuration: {e}")
    uvicorn.run(
        create_app(settings), host=settings.host, port=settings.port, log_config=None,
    )


if __name__ == "__main__":
    main()
