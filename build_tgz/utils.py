import logging
import sys
from argparse import ArgumentParser, RawDescriptionHelpFormatter

USAGE = """
Where,
tgz_path    - relative or absolute path of output archive including file name and extension
fileNN_path - relative path of input file. DO NOT specify folder. Sub-folders shall be exactly as per
              relative directory location of the file.
"""


def get_parser():
    parser = ArgumentParser(
        prog="build-tgz",
        description="Generate a tar.gz archive of the specified files.",
        epilog=USAGE,
        formatter_class=RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser.add_argument("tgz_path")
    parser.add_argument("files", nargs="+", metavar="file_path")
    return parser


def parse_args(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    # every token is a path, including ones that look like flags
    return get_parser().parse_args(["--", *argv])


def setup_logging(level=logging.INFO):
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
