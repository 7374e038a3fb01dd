"""
Storage: the only code that talks to the database.

Every SQLAlchemy failure is re-raised as StorageError. Callers never catch it:
a persistence failure ends the process.
"""

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

from sqlalchemy import func, text
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from emulog.database import build_session_factory, create_tables
from emulog.exceptions import StorageError
from emulog.models.assignment_log import AssignmentLog
from emulog.models.scan_code import SCAN_CODE_ROWID, ScanCode
from emulog.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class PendingScanCode:
    emu_no: str
    qrcode: str


class Storage:
    def __init__(self, engine: Engine):
        self.engine = engine
        self._session_factory = build_session_factory(engine)

    @contextmanager
    def _session(self, action: str) -> Iterator[Session]:
        """Fresh session per operation; wraps database errors in StorageError."""
        db = self._session_factory()
        try:
            yield db
        except SQLAlchemyError as e:
            db.rollback()
            raise StorageError(f"{action} failed: {e}") from e
        finally:
            db.close()

    def create_tables(self):
        try:
            create_tables(self.engine)
        except SQLAlchemyError as e:
            raise StorageError(f"create tables failed: {e}") from e

    def ping(self):
        with self._session("ping") as db:
            db.execute(text("SELECT 1"))

    def count_scan_codes(self) -> int:
        with self._session("count emu_qrcode") as db:
            return db.query(func.count()).select_from(ScanCode).scalar()

    def count_log_entries(self) -> int:
        with self._session("count emu_log") as db:
            return db.query(func.count()).select_from(AssignmentLog).scalar()

    def pending_scan_codes(self, bureau: str) -> list[PendingScanCode]:
        """
        One scan code per unit for the given bureau (the earliest inserted),
        ordered by unit number ascending.
        """
        with self._session(f"query scan codes for {bureau}") as db:
            first = (
                db.query(
                    ScanCode.emu_no.label("emu_no"),
                    func.min(SCAN_CODE_ROWID).label("first_rowid"),
                )
                .filter(ScanCode.emu_bureau == bureau)
                .group_by(ScanCode.emu_no)
                .subquery()
            )
            rows = (
                db.query(ScanCode.emu_no, ScanCode.emu_qrcode)
                .join(first, SCAN_CODE_ROWID == first.c.first_rowid)
                .order_by(ScanCode.emu_no.asc())
                .all()
            )
            return [PendingScanCode(emu_no=r.emu_no, qrcode=r.emu_qrcode) for r in rows]

    def record_assignment(self, date: str, emu_no: str, train_no: str) -> bool:
        """Insert a log row unless the exact triple exists. Returns True if a row was added."""
        stmt = (
            sqlite_insert(AssignmentLog)
            .values(date=date, emu_no=emu_no, train_no=train_no)
            .on_conflict_do_nothing(index_elements=["date", "emu_no", "train_no"])
        )
        with self._session(f"insert {date}/{emu_no}/{train_no}") as db:
            result = db.execute(stmt)
            db.commit()
            return result.rowcount > 0

    def add_scan_code(self, emu_no: str, bureau: str, qrcode: str):
        """Used by setup scripts and tests; the service itself never writes scan codes."""
        with self._session(f"insert scan code {bureau}/{qrcode}") as db:
            db.add(ScanCode(emu_no=emu_no, emu_bureau=bureau, emu_qrcode=qrcode))
            db.commit()
