import argparse
import logging
import sys

from rapidid.codec.identifier import generate, generate_with_prefix, parse
from rapidid.config.config import Config
from rapidid.errors import IdentifierError
from rapidid.utilities.logger import setup_logger

SORT_SAMPLE_SIZE = 100


def build_parser():
    parser = argparse.ArgumentParser(description="Generate and parse rapid ids")
    parser.add_argument("--prefix", help="3 letter prefix for generated ids")
    parser.add_argument("--count", type=int, help="Number of ids to generate")
    parser.add_argument("--parse", metavar="TEXT", help="Parse an id and show it")
    parser.add_argument("--config", metavar="FILE", help="INI file with [rapidid]")
    parser.add_argument("--verbose", action="store_true", help="Log at DEBUG level")
    return parser


def show_sorted(logger, prefix="acc"):
    ids = []
    for _ in range(SORT_SAMPLE_SIZE):
        ids.append(str(parse(generate_with_prefix(prefix))))
    ids_to_be_sorted = sorted(ids)
    for id_, sorted_id in zip(ids, ids_to_be_sorted):
        if id_ != sorted_id:
            logger.error(f"{id_} != {sorted_id}")
            return False
        print(f"{id_} == {sorted_id}")
    return True


def main(argv=None):
    args = build_parser().parse_args(argv)

    config = Config(args.config)
    settings = config.rapidid if config.has_section("rapidid") else None
    prefix, count, level = "", 1, logging.INFO
    if settings:
        prefix, count, level = settings.prefix, settings.count, settings.log_level
    if args.prefix is not None:
        prefix = args.prefix
    if args.count is not None:
        count = args.count
    if args.verbose:
        level = logging.DEBUG
    logger = setup_logger("rapidid", level=level)

    try:
        if args.parse:
            identifier = parse(args.parse)
            print(f"ID = {identifier}")
            print(f"prefix = {identifier.prefix!r}")
            print(f"created = {identifier.timestamp.isoformat()}")
            return 0

        if args.prefix is None and args.count is None and settings is None:
            id_str0 = generate()
            id_str1 = generate_with_prefix("rid")
            print(f"ID0 = {id_str0}")
            print(f"ID1 = {id_str1}")
            print(f"ID2 = {parse(id_str1)}")
            return 0 if show_sorted(logger) else 1

        for _ in range(count):
            print(generate_with_prefix(prefix))
    except IdentifierError as e:
        logger.error(e.message)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
