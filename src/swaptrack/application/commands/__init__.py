from .base import (
    CloseCommand,
    Command,
    DeleteCommand,
    ListCommand,
    OpenCommand,
    PriceCommand,
    PurgeCommand,
    ReconcileCommand,
    SignalCommand,
)

__all__ = [
    "Command",
    "ReconcileCommand",
    "OpenCommand",
    "CloseCommand",
    "ListCommand",
    "DeleteCommand",
    "PurgeCommand",
    "PriceCommand",
    "SignalCommand",
]
