"""
Platform availability checkers.

Each checker answers one question: is this identifier still unclaimed on
the platform? Failures never raise; they are logged and reported as taken,
since a failed lookup says nothing about availability.
"""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any

import httpx

logger = logging.getLogger(__name__)

# =============================================================================
# Constants
# =============================================================================

GITHUB_PROFILE_URL = "https://github.com/{id}"
GITHUB_CREATE_URL = "https://github.com/account/organizations/new?plan=free"

NPM_ORG_URL = "https://www.npmjs.com/org/{id}"
NPM_CREATE_URL = "https://www.npmjs.com/org/create"
NPM_SEARCH_URL = "https://registry.npmjs.org/-/v1/search"
NPM_ORG_PACKAGES_URL = "https://registry.npmjs.org/-/org/{id}/package"
NPM_SEARCH_SIZE = 250

# Error string the registry returns for a scope nobody owns
NPM_SCOPE_NOT_FOUND = "Scope not found"


@dataclass(frozen=True)
class PlatformChecker:
    """A platform where a name can be claimed."""
    name: str
    url: Callable[[str], str]
    create_url: str
    check_available: Callable[[httpx.AsyncClient, str], Awaitable[bool]]


# =============================================================================
# npm registry payloads
# =============================================================================

@dataclass
class SearchObject:
    """One hit from the registry search endpoint."""
    package_name: str = ""

    @classmethod
    def from_json(cls, data: Any) -> "SearchObject":
        if not isinstance(data, dict):
            return cls()
        package = data.get("package")
        if not isinstance(package, dict):
            return cls()
        name = package.get("name")
        return cls(package_name=name if isinstance(name, str) else "")


@dataclass
class SearchResponse:
    """
    Registry search payload.

    Shape: {"objects": [{"package": {"name": "@scope/pkg", ...}, ...}, ...]}
    Missing or mistyped fields are read as "no hits".
    """
    objects: list[SearchObject] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Any) -> "SearchResponse":
        if not isinstance(data, dict):
            return cls()
        objects = data.get("objects")
        if not isinstance(objects, list):
            return cls()
        return cls(objects=[SearchObject.from_json(obj) for obj in objects])

    def packages_in_scope(self, scope: str) -> list[str]:
        """Package names that belong to exactly this scope."""
        prefix = f"@{scope}/"
        return [
            obj.package_name for obj in self.objects
            if obj.package_name.startswith(prefix)
        ]


@dataclass
class OrgLookupResponse:
    """
    Registry org lookup payload.

    Unknown scopes return {"error": "Scope not found"}; an existing org
    returns its package map, which is {} for an org with nothing published.
    """
    error: str | None = None

    @classmethod
    def from_json(cls, data: Any) -> "OrgLookupResponse":
        if not isinstance(data, dict):
            return cls()
        error = data.get("error")
        return cls(error=error if isinstance(error, str) else None)

    @property
    def scope_not_found(self) -> bool:
        return self.error == NPM_SCOPE_NOT_FOUND


# =============================================================================
# Checks
# =============================================================================

async def check_url(client: httpx.AsyncClient, url: str) -> bool:
    """
    Probe a profile URL. A 404 means nobody owns it.

    Redirects are not followed: a redirect means something lives there.
    """
    try:
        response = await client.head(url, follow_redirects=False)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.error(f"Error checking {url}: {e!r}")
        return False

    logger.debug(f"{url} -> HTTP {response.status_code}")
    return response.status_code == 404


async def check_github(client: httpx.AsyncClient, identifier: str) -> bool:
    """Check whether a GitHub user/org name is unclaimed."""
    return await check_url(client, GITHUB_PROFILE_URL.format(id=identifier))


async def check_npm_org(client: httpx.AsyncClient, identifier: str) -> bool:
    """
    Check whether an npm org scope is unclaimed.

    Two steps:
    1. Search for packages under the scope. Any hit means taken.
    2. With no packages, ask the org endpoint. Only "Scope not found"
       means available; an empty org still owns the scope.
    """
    try:
        response = await client.get(
            NPM_SEARCH_URL,
            params={"text": f"scope:{identifier}", "size": NPM_SEARCH_SIZE},
            follow_redirects=True,
        )
        search = SearchResponse.from_json(response.json())

        matches = search.packages_in_scope(identifier)
        if matches:
            logger.debug(f"npm scope @{identifier} has {len(matches)} package(s)")
            return False

        response = await client.get(
            NPM_ORG_PACKAGES_URL.format(id=identifier),
            follow_redirects=True,
        )
        org = OrgLookupResponse.from_json(response.json())

    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.error(f"Error checking npm org {identifier}: {e!r}")
        return False
    except ValueError as e:
        logger.error(f"Error checking npm org {identifier}: invalid JSON: {e}")
        return False

    return org.scope_not_found


# Registration order is report order
PLATFORMS: tuple[PlatformChecker, ...] = (
    PlatformChecker(
        name="GitHub",
        url=lambda identifier: GITHUB_PROFILE_URL.format(id=identifier),
        create_url=GITHUB_CREATE_URL,
        check_available=check_github,
    ),
    PlatformChecker(
        name="npm org",
        url=lambda identifier: NPM_ORG_URL.format(id=identifier),
        create_url=NPM_CREATE_URL,
        check_available=check_npm_org,
    ),
)
