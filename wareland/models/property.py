"""Property model.

A property listing as shown in the public catalog.
Rows are created and edited outside the catalog; the catalog only reads them.
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from wareland.models.user import User
from wareland.stores.postgres import Base


class Property(Base):
    """Real-estate listing."""

    __tablename__ = "properties"

    id: Mapped[int] = mapped_column(primary_key=True)

    address: Mapped[str] = mapped_column(Text)
    price: Mapped[float] = mapped_column(index=True)
    description: Mapped[str | None] = mapped_column(Text)

    # Seller
    owner_id: Mapped[int | None] = mapped_column(ForeignKey("users.id"), index=True)
    owner: Mapped[User | None] = relationship(back_populates="properties")

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
    )

    def __repr__(self) -> str:
        return f"<Property {self.id} {self.address!r}>"
