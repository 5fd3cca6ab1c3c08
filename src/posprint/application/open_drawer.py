"""Application service: Open Cash Drawer use case."""

from __future__ import annotations

import logging

from posprint.domain.model.blocks import Pulse
from posprint.domain.repository.printer_session import PrinterSession

logger = logging.getLogger(__name__)


class OpenDrawerHandler:

    def __init__(self, session: PrinterSession) -> None:
        self._session = session

    def handle(self, pin: int = 0, on_ms: int = 120, off_ms: int = 240) -> bool:
        """Pulse the drawer kick connector.

        Returns False without touching the transport when no session is
        ready; opening a drawer is never worth failing a sale over.
        """
        if not self._session.is_ready:
            logger.warning("Drawer pulse skipped: printer has not been initialized")
            return False
        try:
            self._session.transmit([Pulse(pin, on_ms, off_ms)])
        finally:
            self._session.close()
        return True
