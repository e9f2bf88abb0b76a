"""Domain interfaces implemented by infrastructure adapters."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from balind.core.models import BlockTransactionProtocolComponents


# ---------------------------------------------------------------------------
# IComponentSink
# ---------------------------------------------------------------------------

@runtime_checkable
class IComponentSink(Protocol):
    """
    Abstract downstream consumer of normalized components.

    Domain expectations:
    - It receives one block's worth of per-transaction component groups.
    - Ownership of the components transfers to the sink; the domain never
      looks at them again.
    """

    def emit(self, block_components: BlockTransactionProtocolComponents) -> None:
        """
        Accept the components created in one block.

        Implementations:
        - StreamComponentSink (JSON lines on a text stream)
        - Database or message-bus writer
        - In-memory collector for testing
        """
        ...
