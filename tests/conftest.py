# conftest.py
import socket
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

GLOSSARY = """
<html><body>
  <div class="term-name">Question 1</div>
  <div class="term-definition">Answer 1</div>
  <div class="term-name">Question 2</div>
  <div class="term-definition">Answer 2</div>
</body></html>
"""


class _Handler(BaseHTTPRequestHandler):
    def do_GET(self):
        status, body, headers = self.server.routes.get(self.path, (404, b"not found", {}))
        self.send_response(status)
        self.send_header("Content-Type", "text/html; charset=utf-8")
        self.send_header("Content-Length", str(len(body)))
        for name, value in headers.items():
            self.send_header(name, value)
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format, *args):
        pass


class Site:
    def __init__(self, server):
        self.server = server

    @property
    def base_url(self):
        host, port = self.server.server_address[:2]
        return f"http://{host}:{port}"

    def page(self, path, html, status=200, headers=None):
        body = html.encode("utf-8") if isinstance(html, str) else html
        self.server.routes[path] = (status, body, headers or {})
        return self.base_url + path


@pytest.fixture
def site():
    server = ThreadingHTTPServer(("127.0.0.1", 0), _Handler)
    server.routes = {}
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield Site(server)
    server.shutdown()
    server.server_close()


@pytest.fixture
def glossary_url(site):
    return site.page("/glossary", GLOSSARY)


@pytest.fixture
def dead_url():
    # grab a free port and release it so nothing is listening there
    with socket.socket() as s:
        s.bind(("127.0.0.1", 0))
        port = s.getsockname()[1]
    return f"http://127.0.0.1:{port}/"
