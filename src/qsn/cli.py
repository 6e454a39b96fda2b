from __future__ import annotations

import argparse
import logging
import sys
from contextlib import nullcontext
from pathlib import Path
from typing import BinaryIO, ContextManager

from qsn.api import decode_prefix, iter_encode
from qsn.config import EncoderConfig
from qsn.error import QsnError, TrailingDataError
from qsn.source import ReaderSource
from qsn.types import Case, UnicodeMode

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="qsn",
        description="Encode raw bytes as QSN string literals and decode them back",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command")

    enc_parser = subparsers.add_parser(
        "encode",
        help="Encode bytes from FILE (or stdin) as one QSN literal",
    )
    enc_parser.add_argument(
        "--mode",
        choices=[m.value for m in UnicodeMode],
        default=UnicodeMode.RAW.value,
        help="How to write non-ASCII bytes",
    )
    enc_parser.add_argument(
        "--case",
        choices=[c.value for c in Case],
        default=Case.LOWER.value,
        help="Letter case of hexadecimal digits",
    )
    enc_parser.add_argument(
        "--padding",
        type=int,
        default=2,
        help="Minimum number of digits in \\u{...} escapes (2-6)",
    )
    enc_parser.add_argument("file", nargs="?", type=Path)

    dec_parser = subparsers.add_parser(
        "decode",
        help="Decode one QSN literal from FILE (or stdin)",
    )
    dec_parser.add_argument("file", nargs="?", type=Path)

    args = parser.parse_args(argv)
    command: str | None = args.command

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if command is None:
        parser.print_help()
        sys.exit(1)

    try:
        if command == "encode":
            config = EncoderConfig.build(
                mode=args.mode, case=args.case, padding=args.padding
            )
            encode_command(args.file, config)
        elif command == "decode":
            decode_command(args.file)
    except (QsnError, OSError) as e:
        logger.debug("Command %s failed", command, exc_info=True)
        print(f"qsn: {e}", file=sys.stderr)
        sys.exit(1)


def encode_command(path: Path | None, config: EncoderConfig) -> None:
    with _open_input(path) as stream:
        encoded = bytes(iter_encode(ReaderSource(stream), config))
    out = sys.stdout.buffer
    out.write(encoded + b"\n")
    out.flush()


def decode_command(path: Path | None) -> None:
    with _open_input(path) as stream:
        data = stream.read()
    decoded, consumed = decode_prefix(data)
    # A single trailing newline, as written by `encode`, is accepted.
    trailing = data[consumed:]
    if trailing not in (b"", b"\n", b"\r\n"):
        raise TrailingDataError(offset=consumed, remaining=len(trailing))
    out = sys.stdout.buffer
    out.write(decoded)
    out.flush()


def _open_input(path: Path | None) -> ContextManager[BinaryIO]:
    if path is None:
        return nullcontext(sys.stdin.buffer)
    return path.open("rb")


if __name__ == "__main__":
    main()
