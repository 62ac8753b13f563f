"""
Conversion of content locators into local file paths.

Only file:// URLs on the local host can be resolved. Everything else
(http, https, remote hosts, relative references) is rejected with
UnsupportedLocatorError.
"""

from pathlib import Path
from urllib.parse import urlsplit
from urllib.request import url2pathname

from aoide_bridge.core.exceptions import UnsupportedLocatorError


FILE_SCHEME = "file"

_LOCAL_HOSTS = ("", "localhost")


def content_url_to_file_path(url: str, error_prefix: str = "unsupported content URL") -> Path:
    """
    Convert a file URL into a local path.

    Percent-encoded characters are decoded, e.g.
    "file:///music/My%20Song.flac" -> Path("/music/My Song.flac").

    Args:
        url: The content locator.
        error_prefix: Message prefix used when the URL is rejected.

    Returns:
        Path: Absolute local path.

    Raises:
        UnsupportedLocatorError: If the scheme is not 'file', the host is
                                 not local, or the URL carries no path.
    """
    parts = urlsplit(url)

    if parts.scheme.lower() != FILE_SCHEME:
        raise UnsupportedLocatorError(
            f"{error_prefix}: {url}",
            details={"url": url, "scheme": parts.scheme}
        )

    if parts.netloc.lower() not in _LOCAL_HOSTS or not parts.path.startswith("/"):
        raise UnsupportedLocatorError(
            f"{error_prefix}: {url}",
            details={"url": url, "host": parts.netloc}
        )

    # url2pathname decodes percent escapes and Windows drive letters ("/C:/Music")
    return Path(url2pathname(parts.path))
