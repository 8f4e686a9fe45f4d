"""Serving the collected metrics over HTTP and refreshing them periodically."""

from __future__ import annotations

import argparse
import logging
import os
import threading
from collections.abc import Mapping
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

from fdb_exporter.db import StatusFetcher, StatusUnavailableError
from fdb_exporter.errlog import log_error
from fdb_exporter.metrics.reporter import DEFAULT_LISTEN_ADDRESS, MetricReporter

_log = logging.getLogger(__name__)

DEFAULT_INTERVAL = 4.0
_CONTENT_TYPE = "text/plain; version=0.0.4; charset=utf-8"


def _split_address(address: str) -> tuple[str, int]:
    host, sep, port = address.rpartition(":")
    if not sep:
        raise ValueError(f"listen address {address!r} has no port")
    try:
        port_number = int(port)
    except ValueError:
        raise ValueError(f"invalid port in listen address {address!r}") from None
    return host.strip("[]"), port_number


def _make_handler(provider: MetricProvider) -> type[BaseHTTPRequestHandler]:
    class _MetricsHandler(BaseHTTPRequestHandler):
        def do_GET(self) -> None:  # noqa: N802
            body = provider.render().encode("utf-8")
            self.send_response(200)
            self.send_header("Content-Type", _CONTENT_TYPE)
            self.send_header("Content-Length", str(len(body)))
            self.end_headers()
            self.wfile.write(body)

        def log_message(self, format: str, *args: object) -> None:
            _log.debug("%s - %s", self.address_string(), format % args)

    return _MetricsHandler


class MetricProvider:
    """Holds the current reporter, swaps in fresh ones and serves their metrics."""

    def __init__(self, fetch: StatusFetcher, environ: Mapping[str, str] | None = None) -> None:
        self.fetch = fetch
        self._environ = os.environ if environ is None else environ
        self.retry_delay = 1.0
        self._lock = threading.Lock()
        self.reporter = self._new_reporter()
        self.server: ThreadingHTTPServer | None = None

    def _new_reporter(self) -> MetricReporter:
        reporter = MetricReporter(self._environ)
        reporter.retry_delay = self.retry_delay
        return reporter

    def render(self) -> str:
        """The metrics of the current reporter in the exposition format."""
        with self._lock:
            reporter = self.reporter
        return reporter.render()

    def refresh(self) -> None:
        """Collect into a fresh reporter and make it the current one."""
        new_reporter = self._new_reporter()
        try:
            new_reporter.collect_once(self.fetch)
        except (StatusUnavailableError, RuntimeError) as exc:
            log_error(exc, "failed to collect metrics in a tick")
        with self._lock:
            old_reporter, self.reporter = self.reporter, new_reporter
        old_reporter.close()

    def serve_http(self, address: str | None = None) -> None:
        """Serve the metrics over HTTP until :meth:`close` is called."""
        address = (
            address
            or self._environ.get("FDB_EXPORTER_HTTP_LISTEN_ADDR")
            or DEFAULT_LISTEN_ADDRESS
        )
        host, port = _split_address(address)
        try:
            server = ThreadingHTTPServer((host, port), _make_handler(self))
        except OSError as exc:
            log_error(exc, "failed to start listening")
            raise
        self.server = server
        try:
            server.serve_forever()
        finally:
            server.server_close()
            if self.server is server:
                self.server = None

    def collect(
        self, interval: float = DEFAULT_INTERVAL, stop: threading.Event | None = None
    ) -> None:
        """Collect now, then refresh every ``interval`` seconds until ``stop`` is set."""
        stop = stop or threading.Event()
        try:
            self.reporter.collect_once(self.fetch)
        except (StatusUnavailableError, RuntimeError) as exc:
            log_error(exc, "failed to collect metrics")
        while not stop.wait(interval):
            self.refresh()

    def close(self) -> None:
        """Stop serving and retire the current reporter."""
        server = self.server
        if server is not None:
            server.shutdown()
        with self._lock:
            reporter = self.reporter
        reporter.close()


def file_status_fetcher(path: str | os.PathLike[str]) -> StatusFetcher:
    """A fetcher that returns the status JSON stored in the file at ``path``."""

    def fetch(key: bytes) -> bytes:
        with open(path, "rb") as f:
            return f.read()

    return fetch


def main(argv: list[str] | None = None) -> int:
    """Serve metrics collected periodically from a status JSON file."""
    parser = argparse.ArgumentParser(
        prog="fdb-exporter", description="Export cluster status metrics for Prometheus."
    )
    parser.add_argument(
        "--status-file",
        default=os.environ.get("FDB_STATUS_FILE"),
        help="file holding the status JSON document (default: $FDB_STATUS_FILE)",
    )
    parser.add_argument(
        "--listen",
        default=None,
        help="listen address (default: $FDB_EXPORTER_HTTP_LISTEN_ADDR or :8080)",
    )
    parser.add_argument(
        "--interval", type=float, default=DEFAULT_INTERVAL, help="seconds between collections"
    )
    args = parser.parse_args(argv)
    if not args.status_file:
        parser.error("a status file is required (--status-file or FDB_STATUS_FILE)")

    logging.basicConfig(level=logging.INFO)
    provider = MetricProvider(file_status_fetcher(args.status_file))
    stop = threading.Event()
    collector = threading.Thread(
        target=provider.collect, args=(args.interval, stop), daemon=True
    )
    collector.start()
    try:
        provider.serve_http(args.listen)
    except KeyboardInterrupt:
        pass
    except (OSError, ValueError) as exc:
        log_error(exc, "failed to serve metrics")
        return 1
    finally:
        stop.set()
        provider.close()
    return 0