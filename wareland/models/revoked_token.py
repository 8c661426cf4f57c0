"""Revoked token model.

Bearer tokens invalidated before their natural expiry (logout).
expires_at mirrors the token's own exp claim so expired rows can be pruned.
"""

from datetime import datetime

from sqlalchemy import DateTime, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from wareland.stores.postgres import Base


class RevokedToken(Base):
    """A token that must no longer authenticate."""

    __tablename__ = "revoked_tokens"

    id: Mapped[int] = mapped_column(primary_key=True)

    token: Mapped[str] = mapped_column(Text, unique=True)
    expires_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), index=True)

    revoked_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<RevokedToken {self.id} exp={self.expires_at.isoformat()}>"
