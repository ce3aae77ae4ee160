"""HTTP calculation service for the BZCalc calculator."""

from bzcalc_server.bzcalc_server import BZCalcServer
from bzcalc_server.bzcalc_server_settings import BZCalcServerSettings, BZCalcDispatchMode, BZCalcSettingsError
from bzcalc_server.bzcalc_dispatcher import BZCalcDispatcher
from bzcalc_server.bzcalc_request_handlers import BZCalcCalculateHandler, BZCalcStaticFileHandler


__all__ = [
    "BZCalcServer",
    "BZCalcServerSettings", "BZCalcDispatchMode", "BZCalcSettingsError",
    "BZCalcDispatcher",
    "BZCalcCalculateHandler", "BZCalcStaticFileHandler"
]
