import logging
import sys

from build_tgz.models import ArchiveError, Archiver
from build_tgz.utils import parse_args, setup_logging

logger = logging.getLogger(__name__)


def main(argv=None):
    args = parse_args(argv)
    setup_logging()

    archiver = Archiver()
    try:
        out = archiver.create_output(args.tgz_path)
    except OSError as exc:
        logger.error("Error writing archive: %s", exc)
        sys.exit(1)

    with out:
        try:
            entries = archiver.create_archive(args.files, out)
        except (ArchiveError, OSError) as exc:
            logger.error("Error creating archive: %s", exc)
            sys.exit(1)

    logger.info("Wrote %d entries to %s", len(entries), args.tgz_path)
    print("Archive created successfully")
    sys.exit(0)


if __name__ == "__main__":
    main()
