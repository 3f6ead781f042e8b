import os
from dotenv import load_dotenv

from reversi import PROJECT_ROOT

load_dotenv(PROJECT_ROOT / ".env")


def parse_bool(name: str, default: str) -> bool:
    value = os.getenv(name, default)

    if value not in ["0", "1"]:
        raise ValueError(f'{name} must be "0" or "1", got "{value}"')

    return value == "1"


def get_auto_pass() -> bool:
    return parse_bool("REVERSI_AUTO_PASS", "0")


class ServerConfig:
    def __init__(self) -> None:
        self.host = os.getenv("REVERSI_SERVER_HOST", "127.0.0.1")

        raw_port = os.getenv("REVERSI_SERVER_PORT", "8000")
        try:
            self.port = int(raw_port)
        except ValueError as e:
            raise ValueError(
                f'REVERSI_SERVER_PORT must be an integer, got "{raw_port}"'
            ) from e


def get_server_url() -> str:
    url = os.getenv("REVERSI_SERVER_URL")

    if url is None:
        config = ServerConfig()
        url = f"http://{config.host}:{config.port}"

    return url.rstrip("/")
