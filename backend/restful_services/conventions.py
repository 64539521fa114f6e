"""
RESTful Services — REST URI Conventions
========================================

What:  Checks resource paths against the URI conventions the API follows,
       and canonicalizes incoming request paths.
Who:   build_resource_router() validates its path at build time;
       PathNormalizationMiddleware normalizes every request path.

Conventions:
    - Use nouns to represent resources
    - Use lowercase letters in URIs
    - Use hyphens, not underscores
    - Do not use trailing slashes; slashes represent a hierarchy
    - Do not add file extensions to routes

Only the mechanical rules are enforced. "Nouns, not verbs" is left to review.
"""

import re
from typing import Iterable, List, Optional

# Route template placeholders such as {code} or {file_path:path} are exempt
# from the character rules; their names are Python identifiers.
_PLACEHOLDER = re.compile(r"^\{[^/{}]+\}$")
_FILE_EXTENSION = re.compile(r"\.[A-Za-z0-9]+$")


def convention_violations(path: str) -> List[str]:
    """
    List every convention `path` breaks; an empty list means it conforms.

    A single leading slash is allowed (and implied when missing).

    Example:
        >>> convention_violations("/API/example_items/")
        ['must use lowercase letters', 'must use hyphens, not underscores',
         'must not end with a trailing slash']
    """
    body = path[1:] if path.startswith("/") else path
    if not body:
        return ["must name at least one path segment"]

    violations: List[str] = []
    trailing = body.endswith("/")
    segments = body.rstrip("/").split("/")
    literal = [s for s in segments if not _PLACEHOLDER.match(s)]

    if any(ch.isupper() for s in literal for ch in s):
        violations.append("must use lowercase letters")
    if any("_" in s for s in literal):
        violations.append("must use hyphens, not underscores")
    if trailing:
        violations.append("must not end with a trailing slash")
    if any(s == "" for s in segments):
        violations.append("must not contain empty segments")
    if segments[-1] in literal and _FILE_EXTENSION.search(segments[-1]):
        violations.append("must not include a file extension")
    return violations


def validate_resource_path(path: str) -> str:
    """
    Return `path` in canonical `/`-prefixed form.

    Raises:
        ValueError: Listing every violated convention.
    """
    violations = convention_violations(path)
    if violations:
        raise ValueError(f"Resource path '{path}' " + "; ".join(violations))
    return path if path.startswith("/") else "/" + path


def _match_template(segments: List[str], template: str) -> Optional[List[str]]:
    """
    Match request path segments against one route template.

    Literal segments compare case-insensitively and come back in the
    template's (canonical) case; placeholder values come back untouched.
    A trailing {name:path} placeholder absorbs the remaining segments.
    """
    pattern = template.split("/")
    matched: List[str] = []
    for i, part in enumerate(pattern):
        if _PLACEHOLDER.match(part):
            if part.endswith(":path}"):
                return matched + segments[i:]
            if i >= len(segments) or not segments[i]:
                return None
            matched.append(segments[i])
        elif i < len(segments) and segments[i].lower() == part:
            matched.append(part)
        else:
            return None
    return matched if len(segments) == len(pattern) else None


def normalize_request_path(path: str, templates: Iterable[str] = ()) -> str:
    """
    Canonicalize a request path against the registered route templates.

    One trailing slash is stripped (the root path stays "/"). If the path
    then matches a template case-insensitively, its literal segments are
    rewritten in the template's lowercase form while placeholder values
    keep their case:

        >>> normalize_request_path("/API/Files/AbC/", ["/api/files/{file_id}"])
        '/api/files/AbC'

    Paths matching no template are returned with only the slash stripped.
    """
    stripped = path[:-1] if len(path) > 1 and path.endswith("/") else path
    segments = stripped.split("/")
    for template in templates:
        matched = _match_template(segments, template)
        if matched is not None:
            return "/".join(matched)
    return stripped
