"""
Shared fixtures for the movie store tests.
"""
import socket
import threading
import time

import pytest
import uvicorn
from fastapi.testclient import TestClient

from src.moviestore.main import app
from src.moviestore.dependencies import get_store


HEAT = {"id": "m1", "name": "Heat", "year": 1995, "was_good": True}


def free_port():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]


@pytest.fixture
def unused_port():
    return free_port()


@pytest.fixture
def heat():
    return dict(HEAT)


@pytest.fixture
def client():
    """In-process client; entering it runs the lifespan, so every test gets an empty store."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def store(client):
    return get_store()


@pytest.fixture(scope="module")
def live_server():
    """Run the app under uvicorn on a free port in a background thread."""
    port = free_port()
    server = uvicorn.Server(
        uvicorn.Config(app, host="127.0.0.1", port=port, log_level="warning")
    )
    thread = threading.Thread(target=server.run, daemon=True)
    thread.start()

    deadline = time.time() + 15
    while not server.started:
        if time.time() > deadline or not thread.is_alive():
            raise RuntimeError(f"live server failed to start on port {port}")
        time.sleep(0.05)

    yield f"http://127.0.0.1:{port}"

    server.should_exit = True
    thread.join(timeout=10)
