# Command line interface for webscrapper

import sys
from docopt import docopt

from . import __version__
from .scraper import WebScrapper, ScrapeError
from .logger import init_logger

usage = """WEBSCRAPPER command line interface.

Downloads the text of a web page, prints it and saves it to <desktop>/webs/<file>.
Anything not given on the command line is asked for interactively.

Usage:
  webscrapper [<url> [<file>]] [options]
  webscrapper (-h | --help)
  webscrapper --version

Options:
  -h --help           Show this screen.
  --version           Show version.
  --desktop <dir>     Base directory instead of the user's desktop.
  --subdir <name>     Folder under the base directory [default: webs].
  --mkdir             Create the folder if it does not exist.
  --debug             Enable debug mode.
  --log <level>       Set log level [default: INFO].
  --log-file <path>   Write the log here instead of the project directory.

"""

def main(argv=None):
    """Main entry point for webscrapper."""

    args = docopt(usage, argv=argv, version=f"WEBSCRAPPER {__version__}")
    init_logger(args["--log"], args["--log-file"])

    scrapper = WebScrapper(
        url=args["<url>"],
        file_name=args["<file>"],
        desktop_dir=args["--desktop"],
        subdir=args["--subdir"],
        make_dirs=args["--mkdir"],
    )
    try:
        scrapper.run()
    except ScrapeError:
        # Already logged where it was raised
        if args["--debug"]: raise
        sys.exit(1)


__all__ = ["main"]
