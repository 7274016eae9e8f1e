from build_tgz.models.archive import ArchiveError, Archiver
from build_tgz.models.entry import Entry

__all__ = ["ArchiveError", "Archiver", "Entry"]
