"""Restaurant ORM: the single persisted resource.

Invariants:
    - id is an autoincrementing integer primary key, never reused after delete
    - name, address, category are non-nullable text
    - name is unique at the storage level as well as in the repository

Design Decisions:
    - sqlite_autoincrement: SQLite otherwise hands out max(id)+1 again after
      the newest row is deleted
    - Unique constraint on name: a create racing past the repository's
      exists() check fails at commit instead of storing a duplicate
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from restaurant_api.db.base import Base


class Restaurant(Base):
    """A stored restaurant, addressed by clients through its name."""
    __tablename__ = "restaurants"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    address: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<Restaurant id={self.id} name={self.name!r}>"
