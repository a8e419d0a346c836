"""Look up the latest release version of a GitHub repository."""

import dataclasses
import http.client
import json
import urllib.error
import urllib.request
from dataclasses import dataclass

DEFAULT_API_BASE_URL = "https://api.github.com"
USER_AGENT = "ShouldUpdateApp/1.0"
ACCEPT = "application/vnd.github.v3+json"


class VersionLookupError(Exception):
    """Raised when the latest version of an application cannot be determined."""


@dataclass(frozen=True)
class ReleaseInfo:
    """The parts of a GitHub release description that are of interest."""

    tag_name: str = ""
    name: str = ""
    body: str = ""
    html_url: str = ""


def _decode_first_value(raw):
    text = raw.decode("utf-8", errors="replace").lstrip()
    value, _ = json.JSONDecoder().raw_decode(text)
    return value


def _string_fields(value, names):
    """Pick string fields out of a decoded JSON object; null leaves them empty."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"cannot decode JSON {type(value).__name__} into an object")
    fields = {}
    for name in names:
        item = value.get(name)
        if item is None:
            continue
        if not isinstance(item, str):
            raise ValueError(f"field '{name}' is not a string")
        fields[name] = item
    return fields


def _decode_release(raw):
    names = [field.name for field in dataclasses.fields(ReleaseInfo)]
    return ReleaseInfo(**_string_fields(_decode_first_value(raw), names))


def _api_error_detail(raw, url):
    try:
        fields = _string_fields(_decode_first_value(raw), ["message", "documentation_url"])
    except ValueError:
        fields = {}
    message = fields.get("message", "")
    if not message:
        return f" (URL: {url})"
    detail = f": {message}"
    documentation = fields.get("documentation_url", "")
    if documentation:
        detail += f" (see {documentation})"
    return detail


def get_latest_version(app_identifier, api_base_url=None):
    """Return the latest release tag of 'owner/repo', without a leading 'v'."""
    if "/" not in app_identifier:
        raise VersionLookupError(
            f"invalid application identifier: expected 'owner/repo', got '{app_identifier}'"
        )

    base_url = api_base_url or DEFAULT_API_BASE_URL
    url = f"{base_url}/repos/{app_identifier}/releases/latest"

    try:
        request = urllib.request.Request(
            url, method="GET", headers={"User-Agent": USER_AGENT, "Accept": ACCEPT}
        )
    except ValueError as exc:
        raise VersionLookupError(
            f"internal error creating request for {app_identifier}: {exc}"
        ) from exc

    try:
        response = urllib.request.urlopen(request)
    except urllib.error.HTTPError as exc:
        response = exc
    except (urllib.error.URLError, http.client.HTTPException, OSError) as exc:
        raise VersionLookupError(
            f"network error fetching release info for {app_identifier} from {url}: {exc}"
        ) from exc

    with response:
        status = response.getcode()
        try:
            raw = response.read()
            read_error = None
        except (OSError, http.client.HTTPException) as exc:
            raw = b""
            read_error = exc

    if status != 200:
        raise VersionLookupError(
            f"GitHub API error for {app_identifier} (status {status})"
            + _api_error_detail(raw, url)
        )

    try:
        if read_error is not None:
            raise ValueError(str(read_error))
        release = _decode_release(raw)
    except ValueError as exc:
        raise VersionLookupError(
            f"error decoding JSON response for {app_identifier} from {url}: {exc}"
        ) from exc

    if not release.tag_name:
        raise VersionLookupError(
            f"no version tag (tag_name) found in the latest release for {app_identifier} (URL: {url})"
        )

    return release.tag_name.removeprefix("v")