"""
BodyMeasurement Model
Stores circumference measurements (waist, chest, arm, thigh, hip) over time.

The measurement date is fixed once recorded. Sizes can be corrected later,
but every assignment is checked the same way the constructor checks them.
"""

from sqlalchemy import Column, Date, Float, ForeignKey, Integer, Uuid
from sqlalchemy.orm import validates

from fitness_tracker.models.base import BaseModel
from fitness_tracker.models.validation import (
    as_date,
    reject_reassignment,
    require_not_future,
    require_positive,
)

SIZE_FIELDS = ("waist_size", "hip_size", "chest_size", "arm_size", "thigh_size")


class BodyMeasurement(BaseModel):
    """Body measurement snapshot for one day."""

    __tablename__ = "body_measurements"

    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="User these measurements belong to"
    )

    position = Column(Integer, nullable=False, default=0)

    measurement_date = Column(Date, nullable=False, index=True)

    waist_size = Column(Float, nullable=False)
    chest_size = Column(Float, nullable=False)
    arm_size = Column(Float, nullable=False)
    thigh_size = Column(Float, nullable=False)
    hip_size = Column(Float, nullable=False)

    def __init__(self, measurement_date, waist_size, hip_size, chest_size, arm_size, thigh_size):
        require_not_future(measurement_date, "measurement_date")
        sizes = {
            "waist_size": waist_size,
            "hip_size": hip_size,
            "chest_size": chest_size,
            "arm_size": arm_size,
            "thigh_size": thigh_size,
        }
        for field, value in sizes.items():
            require_positive(value, field)

        self.measurement_date = as_date(measurement_date, "measurement_date")
        for field, value in sizes.items():
            setattr(self, field, value)

    @validates("measurement_date")
    def _validate_measurement_date(self, key, value):
        return reject_reassignment(self, key, value)

    @validates(*SIZE_FIELDS)
    def _validate_size(self, key, value):
        return require_positive(value, key)

    def __repr__(self):
        return f"<BodyMeasurement(user_id={self.user_id}, measurement_date={self.measurement_date})>"
