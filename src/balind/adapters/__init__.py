"""Infrastructure adapters: trace document loading and component sinks."""

from balind.adapters.sinks import InMemoryComponentSink, StreamComponentSink
from balind.adapters.traces import BlockModel, CallModel, LogModel, TransactionModel, load_block

__all__ = [
    "InMemoryComponentSink",
    "StreamComponentSink",
    "BlockModel",
    "CallModel",
    "LogModel",
    "TransactionModel",
    "load_block",
]
