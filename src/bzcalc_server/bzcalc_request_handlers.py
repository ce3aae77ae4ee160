"""aiohttp request handlers for expression calculation and static pages."""

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from aiohttp import web

from bzcalc.bzcalc import BZCalc
from bzcalc.bzcalc_error import BZCalcError, BZCalcInternalError
from bzcalc_server.bzcalc_dispatcher import BZCalcDispatcher


class BZCalcCalculateHandler:
    """Handles POST /calculate requests carrying {"expression": "..."} JSON bodies."""

    def __init__(self, calculator: BZCalc, dispatcher: BZCalcDispatcher) -> None:
        self._calculator = calculator
        self._dispatcher = dispatcher
        self._logger = logging.getLogger("BZCalcCalculateHandler")

    @staticmethod
    def _error_response(status: int, message: str, kind: str | None = None) -> web.Response:
        body: Dict[str, Any] = {"error": message}
        if kind is not None:
            body["kind"] = kind

        return web.json_response(body, status=status)

    async def handle(self, request: web.Request) -> web.Response:
        """
        Evaluate the expression in a calculation request.

        Args:
            request: Incoming HTTP request

        Returns:
            200 with {"result": n}, 400 for bad requests and user errors, 500 for internal errors
        """
        payload = await request.text()
        self._logger.debug("Received calculation request: %r", payload)

        if not payload.strip():
            return self._error_response(400, "No expression was provided.")

        try:
            data = json.loads(payload)

        except json.JSONDecodeError:
            return self._error_response(400, "Request body is not valid JSON")

        if not isinstance(data, dict):
            return self._error_response(400, "Request body is not valid JSON")

        expression = data.get("expression")
        if not isinstance(expression, str):
            return self._error_response(400, "no \"expression\" key")

        try:
            result = await self._dispatcher.run(self._calculator.evaluate, expression)

        except BZCalcInternalError as e:
            self._logger.error("Internal error evaluating %r: %s", expression, e.message)
            return self._error_response(500, str(e), type(e).__name__)

        except BZCalcError as e:
            self._logger.warning("Failed to evaluate %r: %s", expression, e.message)
            return self._error_response(400, str(e), type(e).__name__)

        return web.json_response({"result": result})


class BZCalcStaticFileHandler:
    """Serves static pages with an allowed extension from the resource directory."""

    def __init__(self, resource_path: str, extensions: List[str]) -> None:
        self._resource_path = Path(resource_path).resolve() if resource_path else None
        self._extensions = [extension.lower() for extension in extensions]
        self._logger = logging.getLogger("BZCalcStaticFileHandler")

    def should_handle(self, name: str) -> bool:
        """Return True if the requested name has one of the allowed extensions."""
        return any(name.lower().endswith(extension) for extension in self._extensions)

    def _resolve(self, name: str) -> Path | None:
        """Resolve a requested name inside the resource directory, or None if it escapes it."""
        if self._resource_path is None:
            return None

        candidate = (self._resource_path / name).resolve()
        try:
            candidate.relative_to(self._resource_path)

        except ValueError:
            self._logger.warning("Rejected path outside resource directory: %s", name)
            return None

        return candidate

    async def handle(self, request: web.Request) -> web.Response:
        """
        Serve a static page.

        Args:
            request: Incoming HTTP request with a "name" match parameter

        Returns:
            200 with the page content, 404 if the page is missing or not allowed, 500 if it cannot be read
        """
        name = request.match_info["name"]
        self._logger.debug("Received static file request: %s", name)

        path = self._resolve(name) if self.should_handle(name) else None
        if path is None or not path.is_file():
            self._logger.info("Static file not found: %s", name)
            return web.Response(
                status=404,
                text=f"File \"/{name}\" not found!",
                content_type="text/html",
                charset="utf-8"
            )

        try:
            content = await asyncio.to_thread(path.read_text, encoding="utf-8")

        except (OSError, UnicodeDecodeError) as e:
            self._logger.warning("Failed to read static file %s: %s", path, e)
            return web.Response(
                status=500,
                text=f"File \"/{name}\" could not be read!",
                content_type="text/html",
                charset="utf-8"
            )

        return web.Response(text=content, content_type="text/html", charset="utf-8")
