"""
Startup sequence for a yarr server.

Each step gates the next; the first failure raises a YarrError and nothing
after it runs. There is no rollback: this is a one-shot startup path.

    1. parse arguments (help/version exit here)
    2. merge configuration
    3. establish the log sink
    4. derive the database path
    5. load auth credentials
    6. validate TLS pairing
    7. open storage
    8. construct the server
    9. apply base path, TLS and credentials
   10. optionally open a browser
   11. hand the server to the platform start routine
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Mapping, Optional, Sequence, TextIO

from yarr.core.auth import load_credentials
from yarr.core.config import (
    ConfigManager,
    ResolvedConfig,
    default_search_paths,
    parse_flags,
    validate_config,
)
from yarr.core.exceptions import StorageOpenError
from yarr.core.logging import LogSink, open_log_sink
from yarr.core.server import Platform, ServerBuilder, ServerHandle, Storage, StorageOpener
from yarr.core.utils.paths import resolve_database_path

logger = logging.getLogger(__name__)


class Bootstrapper:
    """Run the yarr startup sequence against injected collaborators."""

    def __init__(
        self,
        *,
        storage_opener: StorageOpener,
        platform: Platform,
        environ: Optional[Mapping[str, str]] = None,
        search_paths: Optional[Iterable[Path]] = None,
        user_config_dir: Optional[Path] = None,
        log_stream: Optional[TextIO] = None,
    ) -> None:
        self.storage_opener = storage_opener
        self.platform = platform
        self.environ = environ
        self.user_config_dir = user_config_dir
        self.search_paths = (
            list(search_paths)
            if search_paths is not None
            else default_search_paths(user_config_dir=user_config_dir, environ=environ)
        )
        self.log_stream = log_stream
        self.log_sink: Optional[LogSink] = None
        self.config: Optional[ResolvedConfig] = None

    def resolve_config(self, argv: Optional[Sequence[str]] = None) -> ResolvedConfig:
        """Steps 1-2: parse flags and merge every configuration source."""
        flags = parse_flags(argv)
        manager = ConfigManager(environ=self.environ, search_paths=self.search_paths)
        return manager.resolve(flags)

    def setup_logging(self, config: ResolvedConfig) -> LogSink:
        """Step 3: route yarr logging to the configured file or stream.

        Runs at most once per Bootstrapper; later calls return the same sink.
        """
        if self.log_sink is None:
            sink = open_log_sink(config.log_path, stream=self.log_stream)
            sink.install()
            self.log_sink = sink
        return self.log_sink

    def open_storage(self, path: str) -> Storage:
        """Step 7."""
        try:
            return self.storage_opener(path)
        except Exception as exc:
            raise StorageOpenError(
                f"Failed to initialise database {path}: {exc}",
                context={"path": path},
            ) from exc

    def launch_browser(self, handle: ServerHandle) -> None:
        """Step 10. Failure here is logged and otherwise ignored."""
        try:
            self.platform.open_browser(handle.effective_address)
        except Exception as exc:
            logger.warning("failed to open browser at %s: %s", handle.effective_address, exc)

    def prepare(self, argv: Optional[Sequence[str]] = None) -> ServerHandle:
        """Run steps 1-10 and return the fully configured server handle."""
        config = self.resolve_config(argv)
        self.setup_logging(config)
        if config.config_file:
            logger.info("using config file %s", config.config_file)

        config = resolve_database_path(config, self.user_config_dir, self.environ)
        self.config = config
        logger.info("using db file %s", config.database)

        credential = load_credentials(config.auth_file)
        tls = validate_config(config)

        storage = self.open_storage(config.database)

        handle = (
            ServerBuilder(storage, config.address)
            .with_base_path(config.base_path)
            .with_tls(tls)
            .with_credential(credential)
            .build()
        )

        logger.info("starting server at %s", handle.effective_address)
        if config.open_browser:
            self.launch_browser(handle)
        return handle

    def run(self, argv: Optional[Sequence[str]] = None) -> int:
        """Run the full sequence; blocks in the platform start routine.

        Returns:
            0 once the start routine returns (graceful shutdown).
        """
        handle = self.prepare(argv)
        self.platform.start(handle)
        return 0


__all__ = ["Bootstrapper"]
