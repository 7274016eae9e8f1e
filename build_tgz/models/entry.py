import stat
import tarfile
from dataclasses import dataclass

__all__ = ["Entry"]


@dataclass(frozen=True, kw_only=True)
class Entry:
    name: str
    size: int
    mode: int
    mtime: int

    @classmethod
    def from_tarinfo(cls, tarinfo: tarfile.TarInfo):
        return cls(
            name=tarinfo.name,
            size=tarinfo.size,
            mode=stat.S_IMODE(tarinfo.mode),
            mtime=int(tarinfo.mtime),
        )
