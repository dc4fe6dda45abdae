# Description: Fetch a web page and save its text under the desktop.

import logging
from enum import Enum
from pathlib import Path
from typing import Optional

import requests

from .utils import get_desktop_dir, target_path

logger = logging.getLogger(__name__)

URL_PROMPT = "Give me Website URL:"
NAME_PROMPT = "Now give the file Name: "
DEFAULT_SUBDIR = "webs"
DEFAULT_ENCODING = "utf-8"


class Stage(str, Enum):
    """The step of a run where something went wrong."""
    INPUT = "input"
    FETCH = "fetch"
    SAVE = "save"


class WebScrapper:
    """Download the text at a URL, print it and store it on the desktop."""

    def __init__(self, url: Optional[str] = None, file_name: Optional[str] = None,
                 desktop_dir: Optional[str] = None, subdir: str = DEFAULT_SUBDIR,
                 make_dirs: bool = False) -> None:
        """Prepare a run. Values left as None are asked for on stdin.
        Args:
            url: Page to fetch, used as given.
            file_name: Name of the output file under the subdirectory.
            desktop_dir: Base directory, defaults to the user's desktop.
            subdir: Folder under the base directory that receives the file.
            make_dirs: Create the subdirectory when it is missing.
        """
        self.url = url
        self.file_name = file_name
        self.desktop_dir = get_desktop_dir(desktop_dir)
        self.subdir = subdir
        self.make_dirs = make_dirs
        self.content: Optional[str] = None

    @property
    def target(self) -> Path:
        if self.file_name is None:
            raise ScrapeError(Stage.INPUT, "No file name given")
        return target_path(self.desktop_dir, self.subdir, self.file_name)

    def collect_input(self) -> None:
        """Prompt for whatever the constructor did not receive."""
        if self.url is None:
            self.url = ask(URL_PROMPT)
        if self.file_name is None:
            self.file_name = ask(NAME_PROMPT)

    def fetch(self) -> str:
        """Get the response body of the URL as text.
        Raises:
            FetchError: On any network failure or non-2xx status.
        """
        logger.info(f"Fetching {self.url!r}")
        try:
            response = requests.get(self.url)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error(f"Could not fetch {self.url!r}: {e}")
            raise FetchError(f"Could not fetch {self.url!r}: {e}") from e
        # Without a declared charset requests guesses ISO-8859-1 for text/*
        if "charset" not in response.headers.get("Content-Type", "").lower():
            response.encoding = DEFAULT_ENCODING
        self.content = response.text
        logger.debug(f"Received {len(self.content)} characters ({response.status_code})")
        return self.content

    def echo(self) -> None:
        print(self.content)

    def save(self) -> Path:
        """Write the fetched text to the target file, replacing it if present.
        Raises:
            SaveError: If the directory is missing or the file can't be written.
        """
        target = self.target
        try:
            if self.make_dirs:
                target.parent.mkdir(parents=True, exist_ok=True)
            # newline="" keeps the body byte for byte on every platform
            with open(target, "w", encoding=DEFAULT_ENCODING, newline="") as f:
                f.write(self.content or "")
        except OSError as e:
            logger.error(f"Could not write {target}: {e}")
            raise SaveError(f"Could not write {target}: {e}") from e
        logger.info(f"Saved {target}")
        return target

    def run(self) -> Path:
        """Ask, fetch, print and save, in that order.
        Returns:
            Path of the written file.
        """
        self.collect_input()
        self.fetch()
        self.echo()
        return self.save()

    def __repr__(self) -> str:
        return f"WebScrapper(url={self.url!r}, file_name={self.file_name!r})"


def ask(prompt: str) -> str:
    """Print a prompt on its own line and read one line from stdin."""
    print(prompt)
    try:
        return input()
    except EOFError as e:
        logger.error(f"Input ended before {prompt.strip()!r} was answered")
        raise InputError(f"No answer to {prompt.strip()!r}") from e


class ScrapeError(Exception):
    stage: Stage
    message: str

    def __init__(self, stage: Stage, message: str = "Aborting run"):
        self.stage = stage
        self.message = f"[{stage.value}] {message}"
        super().__init__(self.message)


class InputError(ScrapeError):
    def __init__(self, message: str):
        super().__init__(Stage.INPUT, message)


class FetchError(ScrapeError):
    def __init__(self, message: str):
        super().__init__(Stage.FETCH, message)


class SaveError(ScrapeError):
    def __init__(self, message: str):
        super().__init__(Stage.SAVE, message)


__all__ = [
    "WebScrapper",
    "Stage",
    "ScrapeError",
    "InputError",
    "FetchError",
    "SaveError",
    "ask",
]
