# Git-Friend Version Check
# Installed version and update check against the package registry

from importlib.metadata import PackageNotFoundError, version
from typing import Optional

import httpx
from packaging.version import InvalidVersion, Version

from gitfriend import __version__
from gitfriend.config.schema import UpdateConfig
from gitfriend.output.console import Console

DISTRIBUTION_NAME = "git-friend"


def get_installed_version() -> str:
    """Version of the installed distribution, or the package version when running from source."""
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return __version__


def fetch_latest_version(
    package: str,
    registry_url: str,
    *,
    timeout: float = 5.0,
    client: Optional[httpx.Client] = None,
) -> str:
    """
    Fetch the latest published version from the registry.

    Args:
        package: Package name on the registry.
        registry_url: JSON endpoint with a ``{package}`` placeholder.
        timeout: Request timeout in seconds.
        client: Optional httpx client (a new one is created otherwise).

    Returns:
        Latest version string.

    Raises:
        httpx.HTTPError: On network errors or a non-success status.
        ValueError: If the response does not contain a version.
    """
    url = registry_url.format(package=package)
    owns_client = client is None
    if client is None:
        client = httpx.Client(timeout=timeout, follow_redirects=True)

    try:
        response = client.get(url, timeout=timeout)
        response.raise_for_status()
        data = response.json()
    finally:
        if owns_client:
            client.close()

    latest = data.get("info", {}).get("version") if isinstance(data, dict) else None
    if not latest:
        raise ValueError(f"No version found in registry response from {url}")
    return latest


def is_newer(latest: str, current: str) -> bool:
    """Return True when ``latest`` is a higher version than ``current``."""
    return Version(latest) > Version(current)


def show_version(
    console: Console,
    settings: Optional[UpdateConfig] = None,
    *,
    client: Optional[httpx.Client] = None,
) -> None:
    """
    Print the installed version and whether an update is available.

    Failures of the update check are reported, never raised.
    """
    settings = settings or UpdateConfig()
    current = get_installed_version()

    console.print(f"[bold bright_green]Git-Friend Version: {current}[/bold bright_green]")
    console.print_info("Checking for updates...")

    try:
        latest = fetch_latest_version(
            settings.package_name,
            settings.registry_url,
            timeout=settings.timeout,
            client=client,
        )
        newer = is_newer(latest, current)
    except (httpx.HTTPError, ValueError, InvalidVersion) as e:
        console.print_error(f"Error checking for updates: {e}")
        return

    if newer:
        console.print_warning(
            f"A new version ({latest}) is available. Please update by running:\n\n"
            f"    pip install --upgrade {settings.package_name}\n"
        )
    else:
        console.print_success("You are using the latest version.")
