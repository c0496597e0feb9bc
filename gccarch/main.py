# gccarch/main.py
import argparse
import logging
import sys

from gccarch import __version__
from gccarch.arch import ArchitectureDatabase
from gccarch.arch.errors import (
    EXIT_FAILURE,
    ConflictingArgumentsError,
    GccArchError,
    NothingRequestedError,
)
from gccarch.config import GccArchConfig, GccArchConfigError
from gccarch.logger import setup_gccarch_logger


logger = logging.getLogger("gccarch.main")


def build_parser():
    parser = argparse.ArgumentParser(
        prog="gccarch",
        description="Provides information on GCC's supported architectures."
    )
    parser.add_argument("-a", "--arch", default="",
                        help="The architecture to ask about.")
    parser.add_argument("-A", "--archs", action="store_true",
                        help="Print all the architectures.")
    parser.add_argument("-f", "--feat", default="",
                        help="The characteristic (by short code) to request architectures that match.")
    parser.add_argument("-F", "--feats", action="store_true",
                        help="Print all the characteristics.")
    parser.add_argument("--table", default=None,
                        help="Read an alternate architecture table instead of the bundled one.")
    parser.add_argument("--config", default=None,
                        help="Optional path to an alternate config file (otherwise uses ~/.gccarch/config.json).")
    parser.add_argument("--log-level", default=None, choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Set the logging level (default: from config, else WARNING).")
    parser.add_argument("--quiet", action="store_true",
                        help="Only log errors (overrides --log-level).")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def exclusion_check(args):
    """Require exactly one query mode."""
    offenders = []
    if args.arch:
        offenders.append("--arch")
    if args.feat:
        offenders.append("--feat")
    if args.archs:
        offenders.append("--archs")
    if args.feats:
        offenders.append("--feats")

    if len(offenders) > 1:
        raise ConflictingArgumentsError(offenders)
    if not offenders:
        raise NothingRequestedError()


def configure(args):
    """Load config, apply CLI overrides and set up logging."""
    cfg = GccArchConfig.load(args.config)

    if args.table:
        cfg.table_file = args.table
    if args.log_level:
        cfg.log_level = args.log_level

    log_level = logging.getLevelName(str(cfg.log_level).upper())
    if not isinstance(log_level, int):
        raise GccArchConfigError(f"Unknown log level in config: {cfg.log_level}")
    if args.quiet:
        log_level = logging.ERROR

    setup_gccarch_logger(log_level, log_to_file=cfg.log_to_file, use_color=cfg.use_color)
    return cfg


def run(args, out=None):
    out = out or sys.stdout
    cfg = configure(args)

    # Load the architecture table before looking at the requested mode.
    if cfg.table_file:
        logger.info("Using architecture table %s", cfg.table_file)
        arch_db = ArchitectureDatabase.from_file(cfg.table_file)
    else:
        arch_db = ArchitectureDatabase.load()

    exclusion_check(args)

    if args.arch:
        items = arch_db.report_by_architecture(args.arch)
    elif args.feat:
        items = arch_db.report_by_characteristic(args.feat)
    elif args.archs:
        items = arch_db.all_architecture_names()
    else:
        items = arch_db.all_characteristics()

    for item in items:
        print(item, file=out)


def main(argv=None):
    args = build_parser().parse_args(argv)
    try:
        run(args)
    except (GccArchError, GccArchConfigError) as e:
        print(f"error: {e}", file=sys.stderr)
        return e.exit_code
    except (OSError, UnicodeDecodeError) as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_FAILURE
    return 0


if __name__ == "__main__":
    sys.exit(main())
