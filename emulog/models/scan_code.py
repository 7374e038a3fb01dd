"""
Known scan codes per train unit and bureau.
Rows are written by a separate ingestion process; this service only reads them.
Insertion order comes from SQLite's implicit rowid, which decides which code
represents a unit when it has several.
"""

from sqlalchemy import Column, String, literal_column
from emulog.database import Base


class ScanCode(Base):
    __tablename__ = "emu_qrcode"

    emu_no = Column(String, nullable=False, index=True)                # e.g. CRH380A-2641
    emu_bureau = Column(String(1), primary_key=True, nullable=False)   # provider code: H | P
    emu_qrcode = Column(String, primary_key=True, nullable=False)

    def __repr__(self):
        return f"<ScanCode {self.emu_no} bureau={self.emu_bureau} code={self.emu_qrcode}>"


# Not a mapped column: the table has exactly three columns
SCAN_CODE_ROWID = literal_column("emu_qrcode.rowid")
