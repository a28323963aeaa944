"""Command that turns files into a generated header holding their bytes.

The header is only regenerated when one of the input files is newer than a
timestamp file, which is touched on every run.
"""

import argparse
import logging
import os
import posixpath
import time
from string import Template

__all__ = [
    "EmbedError",
    "normalize_embed_path",
    "format_byte_list",
    "render_embed_source",
    "files_are_dirty",
    "main",
]

log = logging.getLogger("Embedder")

DEFAULT_MAP_NAME = "myEmbeds"
DEFAULT_TIMESTAMP_PATH = "{outPathDir}/time.stamp"

_HEADER_TEMPLATE = Template(
    "\n"
    "#pragma once\n"
    "#include <unordered_map>\n"
    "#include <string>\n"
    "#include <vector>\n"
    "\n"
    "struct EmbeddedData\n"
    "{\n"
    "private:\n"
    "    std::vector<char> data;\n"
    "\n"
    "public:\n"
    "    EmbeddedData() = default;\n"
    "    EmbeddedData(std::initializer_list<char> bytes) : data{bytes} { }\n"
    "\n"
    "    // Returns data as bytes\n"
    "    const std::vector<char> asBytes() const\n"
    "    { return data; }\n"
    "\n"
    "    // Converts and returns data as a string\n"
    "    String asString() const\n"
    "    { return String(data.begin(), data.end()); }\n"
    "};\n"
    "\n"
    "std::unordered_map<std::string, EmbeddedData> $map_name =\n"
    "{\n"
    "    $map_vars\n"
    "};\n"
    "\n"
)


class EmbedError(Exception):
    """Raised when the embed step cannot go on."""


def normalize_embed_path(path):
    """Normalize a path lexically and use forward slashes throughout."""
    text = os.fspath(path).replace("\\", "/")
    if not text:
        return text
    return posixpath.normpath(text)


def format_byte_list(data):
    """Render bytes as the brace-wrapped hex list used in the generated header."""
    return "{{ " + ", ".join(f"0x{byte:02x}" for byte in bytes(data)) + " }}"


def render_embed_source(map_name, entries):
    """Build the header text for ``entries``, an iterable of (name, bytes) pairs."""
    map_vars = ",\n    ".join(
        f'{{ "{name}", EmbeddedData({format_byte_list(data)}) }}' for name, data in entries
    )
    return _HEADER_TEMPLATE.substitute(map_name=map_name, map_vars=map_vars)


def files_are_dirty(files, timestamp):
    """Return the first file modified after ``timestamp`` (seconds), or None."""
    for path in files:
        try:
            mtime = os.path.getmtime(path)
        except OSError as exc:
            raise EmbedError(f"Cannot read modification time of '{path}': {exc}") from exc
        if mtime > timestamp:
            return path
    return None


def _remove_filename(path):
    head, sep, _ = path.replace("\\", "/").rpartition("/")
    return head + sep


def _read_bytes(path):
    try:
        with open(path, "rb") as handle:
            return handle.read()
    except OSError:
        return b""


def _parse_args(argv):
    parser = argparse.ArgumentParser(prog="embedder", description="Embed files")
    parser.add_argument("-f", "--file", dest="files", action="extend", nargs="+",
                        required=True, help="Individual files to embed")
    parser.add_argument("-o", "--out", dest="out", required=True,
                        help="Output path (including output filename)")
    parser.add_argument("-n", "--mapName", dest="map_name", default=DEFAULT_MAP_NAME,
                        help="Name of the map variable used to access your data")
    parser.add_argument("-t", "--timeStamp", dest="timestamp", default=DEFAULT_TIMESTAMP_PATH,
                        help="Path to timestamp")
    parser.add_argument("--ow", dest="overwrite", action="store_true",
                        help="Overwrite output (false by default to be safe)")
    return parser.parse_args(argv)


def _touch_timestamp(path):
    if not os.path.exists(path):
        log.info("No embed timestamp found, creating one...")
        try:
            with open(path, "wb"):
                pass
        except OSError:
            log.error("Failed to write timestamp '%s'", path)
    try:
        previous = os.path.getmtime(path)
        now = time.time()
        os.utime(path, (now, now))
    except OSError as exc:
        raise EmbedError(f"Cannot use timestamp '{path}': {exc}") from exc
    return previous


def main(argv=None):
    """Run the embedder; return the process exit code."""
    if not logging.getLogger().handlers:
        logging.basicConfig(
            level=logging.INFO,
            format="[%(asctime)s] [%(levelname)s] [%(name)s] [thread %(thread)d] %(message)s",
            datefmt="%H:%M:%S",
        )
    log.info("Working dir: %s", os.getcwd())

    try:
        args = _parse_args(argv)
    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 1

    try:
        timestamp_path = args.timestamp.format(
            outPath=args.out, outPathDir=_remove_filename(args.out)
        )
    except (KeyError, IndexError, ValueError) as exc:
        log.error("Invalid timestamp path '%s': %s", args.timestamp, exc)
        return 1

    files = [normalize_embed_path(path) for path in args.files]

    try:
        last_embed = _touch_timestamp(timestamp_path)
        dirty = files_are_dirty(files, last_embed)
    except EmbedError as exc:
        log.error("%s", exc)
        return 1

    if dirty is None:
        log.info("Files are all clean, doing nothing :)")
        return 0
    log.info("Embedder source file '%s' is dirty, reembedding all source files...", dirty)

    log.info("Got files: ")
    entries = []
    for path in files:
        log.info("%s", path)
        data = _read_bytes(path)
        if not data:
            log.error("Failed to read file: %s\n Exiting...", path)
            return 1
        entries.append((path, data))

    source = render_embed_source(args.map_name, entries)

    if os.path.exists(args.out) and not args.overwrite:
        log.error("Output path '%s' already exists. Use -ow flag to overwrite output.", args.out)
        return 1

    try:
        with open(args.out, "wb") as handle:
            handle.write(source.encode("utf-8"))
    except OSError as exc:
        log.error("Failed to write output '%s': %s", args.out, exc)
    return 0