"""Developer commands, installed as project scripts.

  runserver [--host=H] [--port=P] [--reload|--no-reload]
  run-tests [pytest args...]
  init-env                  # copy .env.example to .env if missing

Each is also reachable as ``python -m app.cli <command> [args...]``.
"""
from __future__ import annotations

import shutil
import subprocess
import sys
from pathlib import Path
from typing import List, NamedTuple, Optional

from app.core.config import settings

PROJECT_ROOT = Path(__file__).resolve().parents[1]


class ServerOptions(NamedTuple):
    host: str
    port: int
    reload: bool


def parse_server_args(args: List[str]) -> ServerOptions:
    """Apply ``runserver`` flags on top of the configured defaults.

    Reload is on by default only in the ``local`` environment.
    """
    host, port, reload = settings.HOST, settings.PORT, settings.ENV == "local"
    for arg in args:
        if arg.startswith("--host="):
            host = arg.split("=", 1)[1]
        elif arg.startswith("--port="):
            value = arg.split("=", 1)[1]
            if not value.isdigit():
                raise SystemExit(f"Invalid port: {value}")
            port = int(value)
        elif arg in ("--reload", "--no-reload"):
            reload = arg == "--reload"
        else:
            raise SystemExit(f"Unknown option: {arg}")
    return ServerOptions(host, port, reload)


def runserver(args: Optional[List[str]] = None) -> None:
    import uvicorn

    opts = parse_server_args(sys.argv[1:] if args is None else args)
    print(f"Starting uvicorn on {opts.host}:{opts.port} (reload={opts.reload})")
    uvicorn.run("app.main:app", host=opts.host, port=opts.port, reload=opts.reload)


def run_tests(args: Optional[List[str]] = None) -> None:
    """Run pytest, forwarding any arguments."""
    subprocess.run(["pytest", *(sys.argv[1:] if args is None else args)], check=True)


def init_env(root: Optional[Path] = None) -> None:
    """Create ``.env`` from ``.env.example`` unless ``.env`` already exists."""
    root = root or PROJECT_ROOT
    src, dst = root / ".env.example", root / ".env"
    if dst.exists():
        print(f".env already exists at {dst}")
        return
    if not src.exists():
        print(f".env.example not found at {src}")
        return
    shutil.copy(src, dst)
    print(f"Created .env from .env.example at {dst}")


COMMANDS = {
    "runserver": runserver,
    "run-tests": run_tests,
    "init-env": lambda args: init_env(),
}


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        print(__doc__)
        return 0
    command = COMMANDS.get(argv[0])
    if command is None:
        print(f"Unknown command: {argv[0]}")
        return 1
    command(argv[1:])
    return 0


if __name__ == "__main__":
    sys.exit(main())
