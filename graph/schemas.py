"""SQLAlchemy schema for the combination table."""

from __future__ import annotations

from sqlalchemy import CheckConstraint, Index, Text, UniqueConstraint
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Declarative base."""


class TripleRecord(Base):
    """One combination fact. Rows are stored with the pair in canonical order."""

    __tablename__ = "triple"
    __table_args__ = (
        UniqueConstraint("a", "b", "c", name="triple_a_b_c_key"),
        Index("triple_a_b_idx", "a", "b", unique=True),
        CheckConstraint("a >= b", name="triple_canonical_pair"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    a: Mapped[str] = mapped_column(Text, nullable=False)
    b: Mapped[str] = mapped_column(Text, nullable=False)
    c: Mapped[str] = mapped_column(Text, nullable=False)
