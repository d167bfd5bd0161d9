"""Prints the entries of a TUM-RGBD benchmark file, one per line"""

import argparse
import logging
import sys

from tumtb.data import (FileReader, FileEntry, TrajectoryEntry, AssociationEntry,
                        make_prefix_file_iterator, SourceUnavailableError,
                        MalformedEntryError)

_ENTRY_TYPE_MAP = {'file': FileEntry,
                   'trajectory': TrajectoryEntry,
                   'association': AssociationEntry}


def _main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("input_file", metavar="input-file",
                        help="Input file list, trajectory or association file")
    parser.add_argument("--kind", choices=list(_ENTRY_TYPE_MAP.keys()),
                        default='file', help="Entry type")
    parser.add_argument("--prefix", help="Prefix prepended to file paths")
    parser.add_argument("--strict", action="store_true",
                        help="Fail on malformed entries instead of stopping")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Debug logging")

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        reader = FileReader(args.input_file, _ENTRY_TYPE_MAP[args.kind],
                            strict=args.strict)
    except SourceUnavailableError as error:
        print(error, file=sys.stderr)
        return 1
    except MalformedEntryError as error:
        print(error, file=sys.stderr)
        return 2

    with reader:
        try:
            entries = reader.begin()
            if args.prefix is not None:
                entries = make_prefix_file_iterator(args.prefix, entries)

            for entry in entries:
                print(entry.format())
        except MalformedEntryError as error:
            print(error, file=sys.stderr)
            return 2

    return 0


if __name__ == '__main__':
    sys.exit(_main())
