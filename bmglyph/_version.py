"""
Versioning for bmglyph. The release number is hard-coded; dev installs from
a git checkout get the commit info from ``git describe`` appended.
"""

import logging
import subprocess
from pathlib import Path


# This is the reference version number, to be bumped before each release.
__version__ = "0.1.0"


logger = logging.getLogger("bmglyph")

# The repo root if this is a git checkout, otherwise None
repo_dir = Path(__file__).parents[1]
repo_dir = repo_dir if repo_dir.joinpath(".git").is_dir() else None


def get_version():
    """Get the version string, e.g. "0.1.0" or "0.1.0.post3+g1234abc"."""
    if not repo_dir:
        return __version__

    command = ["git", "describe", "--long", "--always", "--tags", "--dirty"]
    try:
        p = subprocess.run(command, cwd=repo_dir, capture_output=True)
    except OSError as e:
        logger.warning("Could not get bmglyph version: " + str(e))
        return __version__
    if p.returncode:
        logger.warning(
            "Could not get bmglyph version: " + p.stderr.decode(errors="ignore")
        )
        return __version__

    # Output is "v0.1.0-3-g1234abc[-dirty]", or just the hash without tags
    parts = p.stdout.decode(errors="ignore").strip().lstrip("v").split("-")
    if len(parts) < 3:
        return __version__ + "+" + ".".join(parts)
    *release, post, label = parts[:-1] if parts[-1] == "dirty" else parts
    labels = [label] + (["dirty"] if parts[-1] == "dirty" else [])
    version = "-".join(release)
    if version != __version__:
        logger.warning("bmglyph version from git and __version__ don't match.")
    if post != "0":
        version += f".post{post}"
    return version + "+" + ".".join(labels)


__version__ = get_version()
version_info = tuple(
    int(i) if i.isnumeric() else i for i in __version__.split("+")[0].split(".")
)
