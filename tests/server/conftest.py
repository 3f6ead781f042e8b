import pytest
from typing import Iterator

from reversi.server.app import ServerState, app, get_server_state


@pytest.fixture
def state() -> Iterator[ServerState]:
    state = ServerState()
    app.dependency_overrides[get_server_state] = lambda: state
    yield state
    app.dependency_overrides.clear()
