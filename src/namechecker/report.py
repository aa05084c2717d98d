"""
Availability report: check each name on every platform and print the results.
"""

import asyncio
from dataclasses import dataclass

import httpx

from . import __version__
from .checkers import PLATFORMS, PlatformChecker
from .config import get_timeout, use_color

GREEN = "\x1b[32m"
RED = "\x1b[31m"
RESET = "\x1b[0m"

DIVIDER = "=" * 60


@dataclass(frozen=True)
class CheckResult:
    """Result of checking one name on one platform."""
    platform: str
    url: str
    create_url: str
    available: bool


def create_client() -> httpx.AsyncClient:
    """HTTP client shared by all checks in one run."""
    return httpx.AsyncClient(
        timeout=get_timeout(),
        headers={"User-Agent": f"namechecker/{__version__}"},
    )


async def _check_platform(
    client: httpx.AsyncClient,
    platform: PlatformChecker,
    identifier: str,
) -> CheckResult:
    available = await platform.check_available(client, identifier)
    return CheckResult(
        platform=platform.name,
        url=platform.url(identifier),
        create_url=platform.create_url,
        available=available,
    )


async def check_all(
    client: httpx.AsyncClient,
    identifier: str,
    platforms: tuple[PlatformChecker, ...] = PLATFORMS,
) -> list[CheckResult]:
    """
    Check one name on every platform concurrently.

    Results come back in platform order, whatever order the checks finish in.
    """
    tasks = [_check_platform(client, p, identifier) for p in platforms]
    results = await asyncio.gather(*tasks)
    return list(results)


def format_result(result: CheckResult, color: bool = True) -> str:
    """Format one report line."""
    if result.available:
        status = "✓ Available"
        url_info = f"{result.url} → Create: {result.create_url}"
    else:
        status = "✗ Taken"
        url_info = result.url

    if color:
        start = GREEN if result.available else RED
        status = f"{start}{status}{RESET}"

    return f"{status} - {result.platform}: {url_info}"


async def check_name(
    client: httpx.AsyncClient,
    identifier: str,
    is_multiple: bool = False,
    platforms: tuple[PlatformChecker, ...] = PLATFORMS,
) -> list[CheckResult]:
    """
    Check one name and print its section of the report.

    The header goes out first so diagnostics on stderr land under it.
    """
    if is_multiple:
        print(f"\n{DIVIDER}")
    print(f"\nChecking availability for: {identifier}\n", flush=True)

    results = await check_all(client, identifier, platforms)

    color = use_color()
    for result in results:
        print(format_result(result, color=color))
    print()

    return results


async def run(
    identifiers: list[str],
    client: httpx.AsyncClient | None = None,
) -> list[list[CheckResult]]:
    """
    Check names one at a time, in input order.

    Opens (and closes) its own client unless one is passed in.
    """
    if client is None:
        async with create_client() as owned:
            return await run(identifiers, client=owned)

    is_multiple = len(identifiers) > 1
    reports = []
    for identifier in identifiers:
        reports.append(await check_name(client, identifier, is_multiple))
    return reports
