"""Exercise catalog tables: the exercise row and its owned collections."""

from __future__ import annotations

from sqlalchemy import Boolean, Enum, ForeignKey, Index, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from exercise_library.core.extensions import db
from exercise_library.domain import MuscleGroup, RepRange, TargetMuscleFactor

from .base import PKMixin, ReprMixin, TimestampMixin

# Enums are stored by member name so the columns stay readable in SQL
MuscleGroupType = Enum(MuscleGroup, name="muscle_group", native_enum=False, length=20)
TargetFactorType = Enum(TargetMuscleFactor, name="target_muscle_factor", native_enum=False, length=20)
RepRangeType = Enum(RepRange, name="rep_range", native_enum=False, length=20)


class ExerciseRow(PKMixin, ReprMixin, TimestampMixin, db.Model):
    """Persisted exercise; ``deleted`` is a soft-delete flag."""

    __tablename__ = "exercises"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    notes: Mapped[str] = mapped_column(Text, nullable=False, default="", server_default="")
    deleted: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=text("false")
    )

    __table_args__ = (Index("ix_exercises_deleted", "deleted"),)

    target_muscles: Mapped[list[ExerciseTargetMuscleRow]] = relationship(
        "ExerciseTargetMuscleRow",
        back_populates="exercise",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="selectin",
    )
    rep_ranges: Mapped[list[ExerciseRepRangeRow]] = relationship(
        "ExerciseRepRangeRow",
        back_populates="exercise",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="selectin",
    )


class ExerciseTargetMuscleRow(db.Model):
    """One targeted muscle of an exercise with its emphasis factor."""

    __tablename__ = "exercise_target_muscles"

    exercise_id: Mapped[int] = mapped_column(
        ForeignKey("exercises.id", ondelete="CASCADE"), primary_key=True
    )
    muscle: Mapped[MuscleGroup] = mapped_column(MuscleGroupType, primary_key=True)
    factor: Mapped[TargetMuscleFactor] = mapped_column(TargetFactorType, nullable=False)

    exercise: Mapped[ExerciseRow] = relationship("ExerciseRow", back_populates="target_muscles")

    def __repr__(self) -> str:
        return f"<ExerciseTargetMuscleRow {self.exercise_id}:{self.muscle.name}={self.factor.name}>"


class ExerciseRepRangeRow(db.Model):
    """One preferred rep band of an exercise."""

    __tablename__ = "exercise_rep_ranges"

    exercise_id: Mapped[int] = mapped_column(
        ForeignKey("exercises.id", ondelete="CASCADE"), primary_key=True
    )
    rep_range: Mapped[RepRange] = mapped_column(RepRangeType, primary_key=True)

    exercise: Mapped[ExerciseRow] = relationship("ExerciseRow", back_populates="rep_ranges")

    def __repr__(self) -> str:
        return f"<ExerciseRepRangeRow {self.exercise_id}:{self.rep_range.name}>"
