"""GIB parser entry points.

Builds the lark LALR parser from gib.lark once and converges all inputs
(text, bytes, files, streams) on ``parse_string``.
"""

import logging
import os
from pathlib import Path
from typing import IO, Any

import chardet
from lark import Lark
from lark.exceptions import UnexpectedInput

from gibson.common.options import ParseOptions
from gibson.core.extractor import extract
from gibson.core.gib import Gib
from gibson.core.listener import to_parse_error

logger = logging.getLogger(__name__)

GRAMMAR_PATH = Path(__file__).with_name("gib.lark")

_parser: Lark | None = None


def _get_parser() -> Lark:
    """Returns the shared parser, building it on first use."""
    global _parser
    if _parser is None:
        _parser = Lark(
            GRAMMAR_PATH.read_text(encoding="utf-8"),
            parser="lalr",
            lexer="contextual",
            start="start",
            propagate_positions=True,
            maybe_placeholders=False,
        )
    return _parser


def parse_string(text: str) -> Gib:
    """Parses the contents of a GIB file.

    Args:
        text: The GIB document

    Returns:
        The parsed document

    Raises:
        ParseError: If the text isn't a valid GIB document
    """
    if text.startswith("\ufeff"):
        text = text[1:]
    try:
        tree = _get_parser().parse(text)
    except UnexpectedInput as e:
        raise to_parse_error(e) from e
    header, game = extract(tree)
    logger.debug(f"Parsed GIB document: {len(header)} header properties, {len(game)} game properties")
    return Gib(header, game)


# chardet answers below this are retried on the whole buffer
MIN_DETECT_CONFIDENCE = 0.5


def _detect_encoding(data: bytes, options: ParseOptions) -> str | None:
    result = chardet.detect(data[: options.detect_sample_size])
    encoding = result["encoding"]
    # headers often start with long ASCII lines, the player names come later
    if encoding in (None, "ascii") or result.get("confidence", 1.0) < MIN_DETECT_CONFIDENCE:
        if len(data) > options.detect_sample_size:
            logger.debug(f"Inconclusive encoding {encoding} in sample, detecting on all {len(data)} bytes")
            encoding = chardet.detect(data)["encoding"]
    # workaround for GB2312 files using characters outside of it
    if encoding == "GB2312":
        encoding = "GBK"
    return encoding


def decode_bytes(data: bytes, options: ParseOptions | None = None) -> str:
    """Decodes raw GIB bytes, detecting the encoding unless one is configured.

    Tygem files are usually UTF-8, older ones come in Korean or Chinese code pages.
    """
    options = options or ParseOptions()
    if options.encoding:
        encoding = options.encoding
    else:
        try:
            return data.decode("utf-8-sig")
        except UnicodeDecodeError:
            pass
        detected = _detect_encoding(data, options)
        logger.debug(f"GIB is not UTF-8, detected encoding {detected}")
        encoding = detected or options.fallback_encoding
    try:
        return data.decode(encoding, errors=options.decode_errors)
    except LookupError:
        logger.warning(f"Unknown encoding {encoding}, decoding as {options.fallback_encoding}")
        return data.decode(options.fallback_encoding, errors=options.decode_errors)


def parse_bytes(data: bytes, options: ParseOptions | None = None) -> Gib:
    """Parses the raw bytes of a GIB file."""
    return parse_string(decode_bytes(data, options))


def parse_file(path: str | os.PathLike[str], options: ParseOptions | None = None) -> Gib:
    """Parses the GIB file located at the given path.

    Raises:
        ParseError: If the file doesn't contain a valid GIB document
        OSError: If the file can't be read
    """
    logger.debug(f"Parsing GIB file {path}")
    with open(path, "rb") as f:
        return parse_bytes(f.read(), options)


def parse_stream(stream: IO[Any], options: ParseOptions | None = None) -> Gib:
    """Parses a GIB document from an open text or binary stream. The stream is not closed."""
    contents = stream.read()
    if isinstance(contents, (bytes, bytearray)):
        return parse_bytes(bytes(contents), options)
    return parse_string(contents)


def parse(source: str | bytes | os.PathLike[str] | IO[Any], options: ParseOptions | None = None) -> Gib:
    """Parses a GIB document from text, bytes, a file path or a stream.

    A ``str`` is always taken to be the document itself; pass a
    ``pathlib.Path`` to read a file.
    """
    if isinstance(source, str):
        return parse_string(source)
    if isinstance(source, (bytes, bytearray)):
        return parse_bytes(bytes(source), options)
    if isinstance(source, os.PathLike):
        return parse_file(source, options)
    if hasattr(source, "read"):
        return parse_stream(source, options)
    raise TypeError(f"Can't parse GIB from {type(source).__name__}")
