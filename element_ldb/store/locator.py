# ==============================================
# Store Locator
# ==============================================
#
# PURPOSE:
#   Knows where Element Desktop keeps its Local Storage LevelDB on each
#   OS, and copies the live store to a working directory so that the
#   extractor never fights a running Element instance for the LOCK.
#
#   Linux:   ~/.config/Element/Local Storage/leveldb
#   macOS:   ~/Library/Application Support/Element/Local Storage/leveldb
#   Windows: %APPDATA%\Element\Local Storage\leveldb
#
# FUNCTIONS:
# ----------
# - default_store_path(platform=None, env=None) -> Path
# - snapshot_store(source, destination) -> Path
#
# ==============================================

import logging
import os
import shutil
import sys
from pathlib import Path
from typing import Mapping, Optional, Union

from element_ldb.errors import OpenFailure

logger = logging.getLogger(__name__)

ELEMENT_STORE_PARTS = ("Element", "Local Storage", "leveldb")


def default_store_path(
    platform: Optional[str] = None,
    env: Optional[Mapping[str, str]] = None
) -> Path:
    """
    Return Element's LevelDB directory for the given platform.

    Args:
        platform: A sys.platform value. Defaults to the running platform.
        env: Environment mapping used for HOME / APPDATA. Defaults to os.environ.

    Raises:
        OpenFailure: If the platform is not one Element Desktop ships for
    """
    platform = platform or sys.platform
    env = os.environ if env is None else env

    if platform.startswith("linux"):
        home = Path(env.get("HOME") or Path.home())
        return home.joinpath(".config", *ELEMENT_STORE_PARTS)
    if platform == "darwin":
        home = Path(env.get("HOME") or Path.home())
        return home.joinpath("Library", "Application Support", *ELEMENT_STORE_PARTS)
    if platform in ("win32", "cygwin", "msys"):
        appdata = env.get("APPDATA")
        if not appdata:
            raise OpenFailure("%APPDATA%", "APPDATA is not set")
        return Path(appdata).joinpath(*ELEMENT_STORE_PARTS)

    raise OpenFailure(platform, "unsupported platform")


def snapshot_store(source: Union[str, Path], destination: Union[str, Path]) -> Path:
    """
    Copy a LevelDB directory to `destination`, replacing any previous copy.

    Returns:
        The destination path
    """
    source = Path(source).expanduser()
    destination = Path(destination).expanduser()

    if not source.is_dir():
        raise OpenFailure(source, "Element LevelDB not found")

    # Nothing may be deleted if the copy would overlap the live store
    resolved_source = source.resolve()
    resolved_destination = destination.resolve()
    if (
        resolved_destination == resolved_source
        or resolved_source in resolved_destination.parents
        or resolved_destination in resolved_source.parents
    ):
        raise OpenFailure(source, f"snapshot destination '{destination}' overlaps the store")
    if destination.exists() and not destination.is_dir():
        raise OpenFailure(source, f"snapshot destination '{destination}' is not a directory")

    try:
        if destination.exists():
            shutil.rmtree(destination)
        shutil.copytree(source, destination)
    except OSError as e:
        raise OpenFailure(source, f"snapshot to '{destination}' failed: {e}") from e

    logger.info("LevelDB copied from %s to %s", source, destination)
    return destination
