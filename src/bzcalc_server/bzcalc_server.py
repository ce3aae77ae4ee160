"""HTTP server exposing the BZCalc calculator over JSON and serving static pages."""

import asyncio
import logging

from aiohttp import web

from bzcalc.bzcalc import BZCalc
from bzcalc_server.bzcalc_dispatcher import BZCalcDispatcher
from bzcalc_server.bzcalc_request_handlers import BZCalcCalculateHandler, BZCalcStaticFileHandler
from bzcalc_server.bzcalc_server_settings import BZCalcServerSettings


class BZCalcServer:
    """
    Calculation server built on aiohttp.

    Routes:
        POST /calculate   evaluate {"expression": "..."} and reply {"result": n}
        GET  /{name}      serve a static page from the resource directory
    """

    def __init__(self, settings: BZCalcServerSettings) -> None:
        """
        Initialize server.

        Args:
            settings: Server settings
        """
        self._settings = settings
        self._logger = logging.getLogger("BZCalcServer")
        self._dispatcher = BZCalcDispatcher(settings.dispatch_mode, settings.worker_count())
        self._calculator = BZCalc(max_literal=settings.max_literal)
        self._runner: web.AppRunner | None = None

    @property
    def settings(self) -> BZCalcServerSettings:
        """Settings the server was created with."""
        return self._settings

    def create_app(self) -> web.Application:
        """Build the aiohttp application with all routes registered."""
        calculate_handler = BZCalcCalculateHandler(self._calculator, self._dispatcher)
        static_handler = BZCalcStaticFileHandler(self._settings.resource_path, self._settings.static_extensions)

        app = web.Application()
        app.router.add_post("/calculate", calculate_handler.handle)
        app.router.add_get("/{name:.+}", static_handler.handle)
        return app

    async def start(self) -> None:
        """Start listening for connections."""
        self._runner = web.AppRunner(self.create_app())
        await self._runner.setup()

        site = web.TCPSite(self._runner, self._settings.host, self._settings.port)
        await site.start()

        self._logger.info(
            "Server started on %s:%d (dispatch mode %s)",
            self._settings.host,
            self._settings.port,
            self._dispatcher.mode.name
        )

    async def stop(self) -> None:
        """Stop accepting connections and release worker threads."""
        if self._runner is not None:
            await self._runner.cleanup()
            self._runner = None

        self._dispatcher.shutdown()
        self._logger.info("Server stopped")

    async def serve_forever(self) -> None:
        """Start the server and run until cancelled."""
        await self.start()
        try:
            await asyncio.Event().wait()

        finally:
            await self.stop()

    def run(self) -> None:
        """Run the server until interrupted."""
        try:
            asyncio.run(self.serve_forever())

        except KeyboardInterrupt:
            self._logger.info("Interrupted")
