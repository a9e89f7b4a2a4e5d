from datetime import datetime

from sqlalchemy import DECIMAL, DateTime, ForeignKey, MetaData, String, Text, func
from sqlalchemy.ext.asyncio import AsyncAttrs
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(AsyncAttrs, DeclarativeBase):
    """Base class for all models"""

    metadata = MetaData(
        naming_convention={
            "ix": "ix_%(column_0_label)s",
            "uq": "uq_%(table_name)s_%(column_0_name)s",
            "ck": "ck_%(table_name)s_`%(constraint_name)s`",
            "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
            "pk": "pk_%(table_name)s",
        }
    )
    type_annotation_map = {
        datetime: DateTime(timezone=True),
    }


class Broth(Base):
    """
    A broth option from the catalog.

    Attributes:
        `id (str)`: Catalog identifier, referenced by orders.
        `name (str)`: Display name, used to build order descriptions.
        `description (str)`: Short text shown next to the option.
        `price (float)`: Price of the broth.
        `image_inactive (str)`: Image url shown when the option is not selected.
        `image_active (str)`: Image url shown when the option is selected.
    """

    __tablename__ = "broth"

    id: Mapped[str] = mapped_column(String(50), primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    price: Mapped[float] = mapped_column(DECIMAL(6, 2), default=0.00, nullable=False)
    image_inactive: Mapped[str] = mapped_column(String, nullable=False, default="")
    image_active: Mapped[str] = mapped_column(String, nullable=False, default="")

    def __repr__(self):
        return f"{self.__class__.__name__}({self.name!r})"


class Protein(Base):
    """
    A protein option from the catalog. Same shape as `Broth`.
    """

    __tablename__ = "protein"

    id: Mapped[str] = mapped_column(String(50), primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    price: Mapped[float] = mapped_column(DECIMAL(6, 2), default=0.00, nullable=False)
    image_inactive: Mapped[str] = mapped_column(String, nullable=False, default="")
    image_active: Mapped[str] = mapped_column(String, nullable=False, default="")

    def __repr__(self):
        return f"{self.__class__.__name__}({self.name!r})"


class Order(Base):
    """
    A placed order pairing one broth with one protein.

    Attributes:
        `id (str)`: Identifier issued by the external order id allocator.
        `broth_id (str)`: Foreign key referencing the chosen Broth.
        `protein_id (str)`: Foreign key referencing the chosen Protein.
        `description (str)`: "<broth> and <protein> Ramen", fixed at placement time.
        `image_url (str)`: Display image, empty until one is assigned.
        `created_at (datetime)`: Timestamp of when the order was stored.
    """

    __tablename__ = "order"

    id: Mapped[str] = mapped_column(String(100), primary_key=True)
    broth_id: Mapped[str] = mapped_column(ForeignKey("broth.id"), nullable=False)
    protein_id: Mapped[str] = mapped_column(ForeignKey("protein.id"), nullable=False)
    description: Mapped[str] = mapped_column(String(250), nullable=False)
    image_url: Mapped[str] = mapped_column(String, nullable=False, default="")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=func.now(), nullable=False
    )

    def __repr__(self):
        return (
            f"<Order(id={self.id}, broth_id={self.broth_id}, "
            f"protein_id={self.protein_id}, description={self.description!r})>"
        )
