from argparse import Namespace

import pytest

from build_tgz.utils import parse_args


@pytest.mark.parametrize(
    "params, expected",
    [
        (
            ["out.tgz", "a.txt"],
            Namespace(tgz_path="out.tgz", files=["a.txt"]),
        ),
        (
            ["out.tgz", "a.txt", "sub/b.txt"],
            Namespace(tgz_path="out.tgz", files=["a.txt", "sub/b.txt"]),
        ),
        (
            ["/tmp/out.tar.gz", "../c.txt"],
            Namespace(tgz_path="/tmp/out.tar.gz", files=["../c.txt"]),
        ),
        (
            ["out.tgz", "-x.txt", "--help"],
            Namespace(tgz_path="out.tgz", files=["-x.txt", "--help"]),
        ),
        (
            ["-v", "-h"],
            Namespace(tgz_path="-v", files=["-h"]),
        ),
    ],
)
def test_parser(params, expected):
    args = parse_args(params)
    assert args == expected


@pytest.mark.parametrize(
    "params", [[], ["out.tgz"], ["-h"], ["--help"], ["-v"]]
)
def test_parser_too_few_arguments(params, capsys):
    with pytest.raises(SystemExit) as exc_info:
        parse_args(params)
    assert exc_info.value.code != 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "usage: build-tgz" in captured.err
