import typer
import uvicorn
from typing import Optional

from reversi.commands.play import TerminalGame
from reversi.commands.replay import Replay
from reversi.config import ServerConfig, get_auto_pass

app = typer.Typer(pretty_exceptions_enable=False)


def resolve_auto_pass(auto_pass: Optional[bool]) -> bool:
    if auto_pass is None:
        return get_auto_pass()
    return auto_pass


@app.command()
def play(
    auto_pass: Optional[bool] = typer.Option(
        None, "--auto-pass/--no-auto-pass", help="Skip players without legal moves"
    ),
) -> None:
    TerminalGame(resolve_auto_pass(auto_pass))()


@app.command()
def replay(
    moves: str,
    auto_pass: Optional[bool] = typer.Option(
        None, "--auto-pass/--no-auto-pass", help="Skip players without legal moves"
    ),
) -> None:
    if not Replay(moves, resolve_auto_pass(auto_pass))():
        raise typer.Exit(code=1)


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host"),
    port: Optional[int] = typer.Option(None, "--port", "-p"),
) -> None:
    config = ServerConfig()
    uvicorn.run(
        "reversi.server.app:app",
        host=host or config.host,
        port=port or config.port,
    )


if __name__ == "__main__":
    app()
