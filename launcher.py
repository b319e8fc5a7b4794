"""One-shot launcher to prepare the environment file and start the API."""

import logging
import shutil
import socket
import subprocess
import sys
from pathlib import Path

from app.core.config import Settings
from app.core.logging import configure_logging

ROOT = Path(__file__).parent.resolve()

logger = logging.getLogger("app.launcher")


def ensure_env_file(root: Path = ROOT) -> bool:
    """Create a .env from .env.example if missing so local overrides have a home.

    Returns True when a new file was written.
    """
    env_file = root / ".env"
    env_example = root / ".env.example"
    if env_file.exists():
        return False
    if not env_example.exists():
        logger.warning("No .env or .env.example in %s; running on defaults", root)
        return False
    shutil.copyfile(env_example, env_file)
    logger.info("Created .env from .env.example")
    return True


def port_available(port: int, host: str = "") -> bool:
    """Check whether a TCP port can be bound before handing it to uvicorn."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        try:
            s.bind((host, port))
            return True
        except OSError:
            return False


def find_free_port(start_port: int, limit: int = 20, host: str = "") -> int | None:
    """Find the first available port in a consecutive range starting at start_port."""
    for p in range(start_port, min(start_port + limit, 65536)):
        if port_available(p, host):
            return p
    return None


def build_uvicorn_command(python_path: str, host: str, port: int, reload: bool = False) -> list[str]:
    cmd = [python_path, "-m", "uvicorn", "app.main:app", "--host", host, "--port", str(port)]
    if reload:
        cmd.append("--reload")
    return cmd


def main() -> int:
    """Primary orchestrator for the launcher workflow."""
    ensure_env_file(ROOT)
    # read ROOT/.env, the same file the uvicorn child sees from cwd=ROOT
    settings = Settings(_env_file=ROOT / ".env")
    configure_logging(settings.LOG_LEVEL)

    port = find_free_port(settings.PORT, host=settings.HOST)
    if port is None:
        logger.error("No free port found starting at %d", settings.PORT)
        return 1
    if port != settings.PORT:
        logger.warning("Port %d is busy; using %d instead", settings.PORT, port)

    cmd = build_uvicorn_command(sys.executable, settings.HOST, port, settings.RELOAD)
    logger.info("Starting API server (Ctrl+C to stop): %s", " ".join(cmd))
    return subprocess.run(cmd, check=False, cwd=ROOT).returncode


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nShutting down.")
