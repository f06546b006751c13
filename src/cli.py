import argparse
import asyncio
import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError

from bootstrap import bootstrap
from config import ObsClientConfig
from domain.commands import Command

ENV_FILE_PATHS = (
    Path.home() / ".config" / "obs-client" / "env",
    Path(".env"),
)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130

logger = logging.getLogger(__name__)


def _load_env_files() -> None:
    for path in ENV_FILE_PATHS:
        if path.exists():
            load_dotenv(path, override=False)


def _package_version() -> str:
    try:
        return version("obs-client")
    except PackageNotFoundError:
        return "0.0.0+unknown"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="obs-client",
        description="Start or stop OBS recording through obs-websocket",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")

    connection = argparse.ArgumentParser(add_help=False)
    connection.add_argument("address", nargs="?", help="obs-websocket address (env: OBSWS_ADDR)")
    connection.add_argument("port", nargs="?", type=int, help="obs-websocket port (env: OBSWS_PORT)")
    connection.add_argument("--password", "-p", help="Password to connect to OBS (env: OBSWS_PASSWORD)")

    subparsers = parser.add_subparsers(dest="command", required=True, metavar="{record,stop}")
    subparsers.add_parser(Command.RECORD.value, parents=[connection], help="Start recording")
    subparsers.add_parser(Command.STOP.value, parents=[connection], help="Stop recording")

    return parser


def load_config(args: argparse.Namespace, parser: argparse.ArgumentParser) -> ObsClientConfig:
    overrides = {"addr": args.address, "port": args.port, "password": args.password}
    try:
        config = ObsClientConfig(**{key: value for key, value in overrides.items() if value is not None})
    except ValidationError as exc:
        parser.error(f"invalid settings: {exc}")

    missing = config.missing_connection_settings()
    if missing:
        parser.error(f"missing {', '.join(missing)}")
    return config


def main(argv: list[str] | None = None) -> None:
    _load_env_files()
    parser = build_parser()
    args = parser.parse_args(argv)
    config = load_config(args, parser)

    try:
        bootstrap(config.log_level, verbose=args.verbose)
    except ValueError as exc:
        parser.error(str(exc))

    command = Command.from_name(args.command)
    try:
        exit_code = asyncio.run(_run_command(command, config))
    except KeyboardInterrupt:
        logger.warning("Interrupted")
        exit_code = EXIT_INTERRUPTED
    sys.exit(exit_code)


async def _run_command(command: Command, config: ObsClientConfig) -> int:
    from adapters.obsws_control import ObsConnectionError
    from factory import create_control, create_runner

    try:
        control = await create_control(config)
    except ObsConnectionError as exc:
        logger.error("%s", exc)
        return EXIT_FAILURE

    try:
        outcome = await create_runner(config, control).run(command)
    finally:
        await control.close()

    return EXIT_OK if outcome.succeeded else EXIT_FAILURE


if __name__ == "__main__":
    main()
