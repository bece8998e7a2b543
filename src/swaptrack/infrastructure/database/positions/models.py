"""Position persistence models (SQLModel tables)"""

from datetime import UTC, datetime

from sqlmodel import Field, SQLModel


class PositionTable(SQLModel, table=True):
    """Position database table

    ``seq`` preserves insertion order; ``id`` is the public identifier.
    """

    __tablename__ = "positions"

    seq: int | None = Field(default=None, primary_key=True)
    id: str = Field(unique=True, index=True)
    side: str
    status: str = Field(default="OPEN", index=True)
    price_usd: float
    opened_at: str
    close_price_usd: float | None = None
    closed_at: str | None = None
    profit_loss: float | None = None
    profit_loss_percent: float | None = None
    amount: float | None = None
    created_at: str = Field(
        default_factory=lambda: datetime.now(UTC).isoformat()
    )
