"""Command line entry point: `text-extractor extract` and `text-extractor serve`."""
import argparse
import asyncio
import mimetypes
import sys
from pathlib import Path

from openai import OpenAIError

from text_extractor.builder import ServiceBuilder
from text_extractor.config import AppConfig
from text_extractor.logging_config import configure_logging
from text_extractor.services.clipboard import PyperclipClipboard
from text_extractor.session import ExtractionSession, Toast


def _load_config(path: str | None) -> AppConfig:
    if path:
        return AppConfig.from_yaml(path)
    if Path("config.yaml").exists():
        return AppConfig.from_yaml("config.yaml")
    return AppConfig()


def _print_toast(toast: Toast) -> None:
    print(f"{toast.title}: {toast.description}", file=sys.stderr)


def _load_image(session: ExtractionSession, args: argparse.Namespace) -> bool:
    if args.file:
        path = Path(args.file)
        mime_type, _ = mimetypes.guess_type(path.name)
        session.load_upload(path.read_bytes(), mime_type)
        return True
    return session.load_link(args.url) is not None


def run_extract(args: argparse.Namespace) -> int:
    config = _load_config(args.config)
    configure_logging(config.log_level)
    try:
        service = ServiceBuilder(config).build()
    except (OpenAIError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    session = ExtractionSession(service, clipboard=PyperclipClipboard() if args.copy else None)
    try:
        loaded = _load_image(session, args)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    if not loaded:
        _print_toast(session.notifications[-1])
        return 1

    text = asyncio.run(session.extract())
    if text is None:
        _print_toast(session.notifications[-1])
        return 1
    print(text)

    if args.copy and not session.copy_to_clipboard():
        _print_toast(session.notifications[-1])
        return 1
    return 0


def run_serve(args: argparse.Namespace) -> int:
    import uvicorn

    uvicorn.run("text_extractor.api:create_app", factory=True, host=args.host, port=args.port)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="text-extractor")
    parser.add_argument("--config", type=str, default=None, help="Path to a YAML config file")
    sub = parser.add_subparsers(dest="command", required=True)

    extract = sub.add_parser("extract", help="Extract the text from one image")
    source = extract.add_mutually_exclusive_group(required=True)
    source.add_argument("--file", type=str, help="Local image file")
    source.add_argument("--url", type=str, help="http(s) link to an image")
    extract.add_argument("--copy", action="store_true", help="Also copy the text to the clipboard")
    extract.set_defaults(func=run_extract)

    serve = sub.add_parser("serve", help="Run the web app")
    serve.add_argument("--host", type=str, default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)
    serve.set_defaults(func=run_serve)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
