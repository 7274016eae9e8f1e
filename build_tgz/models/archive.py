import contextlib
import gzip
import logging
import pathlib
import tarfile
from os import PathLike
from typing import BinaryIO, Iterable

from build_tgz.models.entry import Entry

__all__ = ["ArchiveError", "Archiver"]

logger = logging.getLogger(__name__)


class ArchiveError(Exception):
    def __init__(self, path: str, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class Archiver:
    """Writes an ordered list of files into a gzip-compressed tar archive.

    Entry names are the input path strings exactly as given, so any
    directory components in a path are kept inside the archive. Nothing is
    normalized: ``..`` segments and absolute prefixes are stored verbatim.

    The first failing file aborts the run. Entries written before it stay
    in the output.
    """

    @staticmethod
    def create_output(path: str | PathLike) -> BinaryIO:
        return pathlib.Path(path).open("wb")

    def create_archive(self, paths: Iterable[str], output: BinaryIO) -> list[Entry]:
        entries = []
        seen = set()
        # tar closes before gzip so its end-of-archive blocks get compressed.
        # dereference also turns off hard link detection: every entry gets its bytes.
        with gzip.GzipFile(fileobj=output, mode="wb") as gz, contextlib.closing(
            tarfile.open(fileobj=gz, mode="w", dereference=True)
        ) as tar:
            for path in paths:
                if path in seen:
                    logger.warning("%s is listed more than once, writing it again", path)
                seen.add(path)
                entries.append(self.add_entry(tar, path))
        return entries

    @staticmethod
    def add_entry(tar: tarfile.TarFile, path: str) -> Entry:
        try:
            with open(path, "rb") as f:
                tarinfo = tar.gettarinfo(fileobj=f)
                if tarinfo is None:
                    raise ArchiveError(path, "unsupported file type")
                # gettarinfo strips leading slashes and drive letters
                tarinfo.name = path
                tar.addfile(tarinfo, f)
        except (OSError, tarfile.TarError) as exc:
            raise ArchiveError(path, str(exc)) from exc

        entry = Entry.from_tarinfo(tarinfo)
        logger.debug("Added %s (%d bytes, mode %o)", entry.name, entry.size, entry.mode)
        return entry
