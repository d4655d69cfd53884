"""CLI entrypoint for morsewave: subcommand dispatcher."""

import argparse
import logging
import os
import sys
from pathlib import Path

from morsewave.types import TranscriptionResult

DEFAULT_FILENAME = "morse.wav"


def _add_shared_args(parser: argparse.ArgumentParser) -> None:
    """Add arguments shared between all subcommands."""
    parser.add_argument("-v", "--verbose", action="store_true", default=False,
                        help="Log debug details such as unmatched tokens (default: off)")


def _default_output() -> Path:
    return Path(os.environ.get("MORSEWAVE_OUTPUT_DIR", ".")) / DEFAULT_FILENAME


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments with subcommands."""
    parser = argparse.ArgumentParser(
        prog="morsewave",
        description="Translate between Latin text and Morse code and render it as WAV audio",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    encode_parser = subparsers.add_parser(
        "encode",
        help="Translate text to Morse code",
    )
    encode_parser.add_argument("text", nargs="?", default=None,
                               help="Text to translate (default: read stdin)")
    _add_shared_args(encode_parser)

    decode_parser = subparsers.add_parser(
        "decode",
        help="Translate Morse code to text",
    )
    decode_parser.add_argument("code", nargs="?", default=None,
                               help="Space-separated code, '/' between words (default: read stdin)")
    _add_shared_args(decode_parser)

    wav_parser = subparsers.add_parser(
        "wav",
        help="Render text (or code) as a WAV file",
        description="Synthesize a 600 Hz Morse tone and write it as 16-bit mono WAV",
    )
    wav_parser.add_argument("text", nargs="?", default=None,
                            help="Text to render (default: read stdin)")
    wav_parser.add_argument("--code", action="store_true", default=False,
                            help="Treat the input as Morse code instead of text")
    wav_parser.add_argument("-o", "--output", type=Path, default=None,
                            help=f"Output WAV path (default: $MORSEWAVE_OUTPUT_DIR/{DEFAULT_FILENAME})")
    _add_shared_args(wav_parser)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    return args


def _read_input(value: str | None) -> str:
    """Return the positional argument, or stdin when it was omitted."""
    if value is not None:
        return value
    if sys.stdin.isatty():
        print("Error: no input given (pass it as an argument or pipe it in)", file=sys.stderr)
        sys.exit(1)
    return sys.stdin.read().rstrip("\n")


def _report_unmatched(result: TranscriptionResult, alphabet: str) -> None:
    from morsewave.transcode import format_unmatched

    if not result.ok:
        print(format_unmatched(result.unmatched, alphabet), file=sys.stderr)


def _run_encode(args: argparse.Namespace) -> None:
    from morsewave.transcode import text_to_code

    result = text_to_code(_read_input(args.text))
    _report_unmatched(result, "Latin")
    print(result.output)


def _run_decode(args: argparse.Namespace) -> None:
    from morsewave.transcode import code_to_text

    result = code_to_text(_read_input(args.code))
    _report_unmatched(result, "Morse")
    print(result.output)


def _run_wav(args: argparse.Namespace) -> None:
    from morsewave.container import encode_container, save_container
    from morsewave.synthesize import SAMPLE_RATE, synthesize
    from morsewave.transcode import text_to_code

    output = args.output or _default_output()
    if output.is_dir():
        print(f"Error: output path is a directory: {output}", file=sys.stderr)
        sys.exit(1)

    source = _read_input(args.text)
    if args.code:
        code = source
    else:
        result = text_to_code(source)
        _report_unmatched(result, "Latin")
        code = result.output

    logger = logging.getLogger("morsewave.cli")
    logger.info(f"Rendering code: {code!r}")

    samples = synthesize(code)
    path = save_container(output, encode_container(samples))

    print(f"Code: {code}")
    print(f"Duration: {len(samples) / SAMPLE_RATE:.1f}s")
    print(f"Output: {path}")


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(name)s %(levelname)s: %(message)s",
    )

    if args.command == "encode":
        _run_encode(args)
    elif args.command == "decode":
        _run_decode(args)
    elif args.command == "wav":
        _run_wav(args)


if __name__ == "__main__":
    main()
