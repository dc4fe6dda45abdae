__version__ = "0.1.0"

from .scraper import WebScrapper, Stage, ScrapeError, InputError, FetchError, SaveError
from .utils import get_desktop_dir, target_path

__all__ = [
    "WebScrapper",
    "Stage",
    "ScrapeError",
    "InputError",
    "FetchError",
    "SaveError",
    "get_desktop_dir",
    "target_path",
]
