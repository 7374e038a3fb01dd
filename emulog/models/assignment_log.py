"""
Train number log table.
One row per (date, unit, train number) ever observed. The same unit can run
several trains on one day, and the same train on many days.
"""

from sqlalchemy import Column, String
from emulog.database import Base


class AssignmentLog(Base):
    __tablename__ = "emu_log"

    date = Column(String, primary_key=True, nullable=False)      # YYYY-MM-DD
    emu_no = Column(String, primary_key=True, nullable=False)
    train_no = Column(String, primary_key=True, nullable=False)

    def __repr__(self):
        return f"<AssignmentLog {self.date} {self.emu_no} → {self.train_no}>"
