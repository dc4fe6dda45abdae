import io
import os
import sys
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from unittest.mock import MagicMock

import pytest

# Add the project root to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))


@pytest.fixture
def desktop(tmp_path):
    """A fake desktop with an existing webs folder"""
    (tmp_path / "webs").mkdir()
    return tmp_path


@pytest.fixture
def ok_response():
    """Build a mocked successful response with the given body"""
    def _make(text):
        response = MagicMock()
        response.status_code = 200
        response.text = text
        response.headers = {"Content-Type": "text/plain; charset=utf-8"}
        response.raise_for_status.return_value = None
        return response
    return _make


@pytest.fixture
def stdin(monkeypatch):
    """Feed lines to input()"""
    def _feed(*lines):
        monkeypatch.setattr(sys, "stdin", io.StringIO("".join(f"{ln}\n" for ln in lines)))
    return _feed


@pytest.fixture
def http_server(monkeypatch):
    """Serve fixed bytes from a local HTTP server, returns its URL"""
    for var in ("NO_PROXY", "no_proxy"):
        monkeypatch.setenv(var, "127.0.0.1,localhost")
    servers = []

    def _serve(body: bytes, content_type: str = "text/html"):
        class Handler(BaseHTTPRequestHandler):
            def do_GET(self):
                self.send_response(200)
                self.send_header("Content-Type", content_type)
                self.send_header("Content-Length", str(len(body)))
                self.end_headers()
                self.wfile.write(body)

            def log_message(self, format, *args):
                pass

        server = ThreadingHTTPServer(("127.0.0.1", 0), Handler)
        threading.Thread(target=server.serve_forever, daemon=True).start()
        servers.append(server)
        return f"http://127.0.0.1:{server.server_address[1]}/page"

    yield _serve
    for server in servers:
        server.shutdown()
        server.server_close()
