"""Desktop platform integration: browser launch and the blocking listener.

The listener only brings a handle to a listening state: it enforces the base
path, HTTP basic auth and TLS from the handle. Route handling belongs to the
feed server proper.
"""

from __future__ import annotations

import base64
import hmac
import http.server
import json
import logging
import socket
import ssl
import webbrowser
from typing import Any, Optional, Tuple

from yarr.core.exceptions import ServerStartError
from yarr.core.server import ServerHandle

logger = logging.getLogger(__name__)


def split_address(address: str) -> Tuple[str, int]:
    """Split ``host:port`` (IPv6 hosts may be bracketed)."""
    host, sep, port = address.rpartition(":")
    if not sep or not port.isdigit():
        raise ValueError(f"invalid listen address {address!r} (expected host:port)")
    return host.strip("[]"), int(port)


def address_family(host: str) -> socket.AddressFamily:
    """IPv6 literals need an AF_INET6 listener; everything else binds IPv4."""
    return socket.AF_INET6 if ":" in host else socket.AF_INET


def _authorized(header: str, handle: ServerHandle) -> bool:
    credential = handle.credential
    if credential is None:
        return True
    scheme, _, encoded = header.partition(" ")
    if scheme.lower() != "basic" or not encoded:
        return False
    try:
        decoded = base64.b64decode(encoded.strip()).decode("utf-8")
    except (ValueError, UnicodeDecodeError):
        return False
    username, _, password = decoded.partition(":")
    return hmac.compare_digest(
        username.encode("utf-8"), credential.username.encode("utf-8")
    ) and hmac.compare_digest(password.encode("utf-8"), credential.password.encode("utf-8"))


class HandleRequestHandler(http.server.BaseHTTPRequestHandler):
    server_version = "yarr"
    sys_version = ""

    @property
    def handle_config(self) -> ServerHandle:
        return self.server.handle  # type: ignore[attr-defined]

    def _send_json(self, code: int, payload: dict, extra: Optional[dict] = None) -> None:
        body = json.dumps(payload).encode("utf-8")
        self.send_response(code)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(body)))
        for k, v in (extra or {}).items():
            self.send_header(k, v)
        self.end_headers()
        if self.command != "HEAD":
            self.wfile.write(body)

    def _within_base(self) -> bool:
        base = self.handle_config.base_path
        if not base:
            return True
        path = self.path.split("?", 1)[0]
        return path == base or path.startswith(base + "/")

    def do_GET(self) -> None:
        if not self._within_base():
            self._send_json(404, {"error": "not found"})
            return
        if not _authorized(self.headers.get("Authorization", ""), self.handle_config):
            self._send_json(
                401,
                {"error": "unauthorized"},
                extra={"WWW-Authenticate": 'Basic realm="yarr"'},
            )
            return
        self._send_json(200, {"status": "ok"})

    do_HEAD = do_GET

    def log_message(self, fmt: str, *args: Any) -> None:
        logger.debug("%s - %s", self.client_address[0], fmt % args)


class HandleHTTPServer(http.server.ThreadingHTTPServer):
    daemon_threads = True

    def __init__(self, handle: ServerHandle) -> None:
        self.handle = handle
        host, port = split_address(handle.address)
        self.address_family = address_family(host)
        super().__init__((host, port), HandleRequestHandler)
        if handle.tls is not None:
            try:
                context = ssl.SSLContext(ssl.PROTOCOL_TLS_SERVER)
                context.load_cert_chain(certfile=handle.tls.cert_file, keyfile=handle.tls.key_file)
                self.socket = context.wrap_socket(self.socket, server_side=True)
            except OSError:
                self.server_close()
                raise


class DesktopPlatform:
    """Platform collaborator for a regular desktop or server process."""

    def open_browser(self, address: str) -> None:
        if not webbrowser.open(address):
            raise RuntimeError("no runnable browser found")

    def start(self, handle: ServerHandle) -> None:
        """Serve until interrupted, then release the listener and storage."""
        try:
            server = HandleHTTPServer(handle)
        except (OSError, ValueError) as exc:
            handle.storage.close()
            raise ServerStartError(
                f"Failed to start server at {handle.address}: {exc}",
                context={"address": handle.address},
            ) from exc
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            logger.info("shutting down")
        finally:
            server.server_close()
            handle.storage.close()


__all__ = ["DesktopPlatform", "HandleHTTPServer", "address_family", "split_address"]
