"""Abstract printer session: the boundary to the print transport."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from posprint.domain.model.blocks import PrintableBlock


class PrinterSession(ABC):

    @property
    @abstractmethod
    def is_ready(self) -> bool:
        """True once a transport has been acquired."""

    @abstractmethod
    def transmit(self, blocks: Sequence[PrintableBlock]) -> None:
        """Replay *blocks* against the transport, in order."""

    @abstractmethod
    def close(self) -> None:
        """Release the transport. Safe to call more than once."""
