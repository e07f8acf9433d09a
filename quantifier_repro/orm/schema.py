"""ORM schema for the Classroom → PuzzleGroup → Puzzle hierarchy.

Tables are created by the literal DDL in `quantifier_repro.orm.util`, not by
`Base.metadata.create_all`. The foreign keys declared here only tell the mapper
how the tables join; the database does not enforce them.

Identifiers are lower-case so they line up with the unquoted upper-case
identifiers of the DDL on every backend.
"""

from sqlalchemy import BigInteger, Boolean, ForeignKey, Identity, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    pass


def make_pk_column():
    """Create a storage-generated integer primary key column"""
    return mapped_column("id", BigInteger, Identity(always=True), primary_key=True)


class Classroom(Base):
    """Root of the fixture hierarchy"""

    __tablename__ = "classroom"

    id: Mapped[int] = make_pk_column()
    name: Mapped[str | None] = mapped_column("name", String(50))

    # Relationships
    puzzle_groups: Mapped[list["PuzzleGroup"]] = relationship(back_populates="classroom", order_by="PuzzleGroup.id")

    def __repr__(self) -> str:
        return f"Classroom(id={self.id!r}, name={self.name!r})"


class PuzzleGroup(Base):
    """A named group of puzzles owned by one classroom"""

    __tablename__ = "puzzle_group"

    id: Mapped[int] = make_pk_column()
    name: Mapped[str | None] = mapped_column("name", String(50))
    classroom_id: Mapped[int] = mapped_column("classroom_id", BigInteger, ForeignKey("classroom.id"), nullable=False)

    # Relationships
    classroom: Mapped["Classroom"] = relationship(back_populates="puzzle_groups")
    puzzles: Mapped[list["Puzzle"]] = relationship(back_populates="puzzle_group", order_by="Puzzle.id")

    def __repr__(self) -> str:
        return f"PuzzleGroup(id={self.id!r}, name={self.name!r}, classroom_id={self.classroom_id!r})"


class Puzzle(Base):
    """A single puzzle with a completion flag"""

    __tablename__ = "puzzle"

    id: Mapped[int] = make_pk_column()
    completed: Mapped[bool] = mapped_column("completed", Boolean(create_constraint=False), nullable=False)
    puzzle_group_id: Mapped[int] = mapped_column(
        "puzzle_group_id", BigInteger, ForeignKey("puzzle_group.id"), nullable=False
    )

    # Relationships
    puzzle_group: Mapped["PuzzleGroup"] = relationship(back_populates="puzzles")

    def __repr__(self) -> str:
        return f"Puzzle(id={self.id!r}, completed={self.completed!r}, puzzle_group_id={self.puzzle_group_id!r})"


__all__ = ["Base", "Classroom", "Puzzle", "PuzzleGroup"]
