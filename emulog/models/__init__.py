# EMU Log: Database Models
# Import all models here for SQLAlchemy discovery

from emulog.models.scan_code import ScanCode               # noqa
from emulog.models.assignment_log import AssignmentLog     # noqa
