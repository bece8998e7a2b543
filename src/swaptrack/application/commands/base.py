from dataclasses import dataclass


@dataclass
class Command:
    """Base command class"""

    name: str


@dataclass
class ReconcileCommand(Command):
    """Apply a completed swap to the position store"""

    from_symbol: str = ""
    to_symbol: str = ""
    from_amount: str | None = None
    to_amount: str | None = None
    timestamp: str | None = None


@dataclass
class OpenCommand(Command):
    """Open a position by hand"""

    side: str = ""
    price: str | None = None


@dataclass
class CloseCommand(Command):
    """Close a position by hand"""

    position_id: str = ""
    price: str | None = None


@dataclass
class ListCommand(Command):
    """Show all positions with P&L"""

    with_price: bool = False


@dataclass
class DeleteCommand(Command):
    """Delete one position"""

    position_id: str = ""


@dataclass
class PurgeCommand(Command):
    """Delete all positions"""

    pass


@dataclass
class PriceCommand(Command):
    """Fetch the current spot price"""

    pass


@dataclass
class SignalCommand(Command):
    """Fetch the current directional signal"""

    pass
