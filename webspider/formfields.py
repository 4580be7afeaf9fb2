"""Extraction of HTML forms and their parameter names."""

from __future__ import annotations

from dataclasses import dataclass, field
from urllib.parse import quote, unquote, urlsplit, urlunsplit

from bs4 import BeautifulSoup, Tag

_DEFAULT_ENCTYPE = "application/x-www-form-urlencoded"
_PATH_SAFE = "/:@$&+,;=!'()*~"


@dataclass
class Form:
    """A form found in a page."""

    action: str = ""
    method: str = ""
    enctype: str = ""
    parameters: list[str] = field(default_factory=list)


def _clean_path(path: str) -> str:
    if not path:
        return "."
    rooted = path.startswith("/")
    parts: list[str] = []
    for segment in path.split("/"):
        if segment in ("", "."):
            continue
        if segment == "..":
            if parts and parts[-1] != "..":
                parts.pop()
            elif not rooted:
                parts.append("..")
            continue
        parts.append(segment)
    joined = "/".join(parts)
    if rooted:
        return "/" + joined
    return joined or "."


def _join_path(base_path: str, element: str) -> str:
    elements = [base_path, element]
    if not base_path.startswith("/"):
        elements[0] = "/" + base_path
        joined = _clean_path("/".join(e for e in elements if e))[1:]
    else:
        joined = _clean_path("/".join(e for e in elements if e))
    if element.endswith("/") and not joined.endswith("/"):
        joined += "/"
    if not joined.startswith("/"):
        joined = "/" + joined
    return quote(unquote(joined), safe=_PATH_SAFE)


def _is_absolute(action: str) -> bool:
    try:
        return bool(urlsplit(action).scheme)
    except ValueError:
        return False


def _resolve_action(action: str, base_url: str) -> str:
    if _is_absolute(action) or action.startswith("//") or action.startswith("\\\\"):
        return action
    if not action:
        return base_url
    base = urlsplit(base_url)
    if action.startswith("/"):
        return urlunsplit((base.scheme, base.netloc, _join_path("", action), "", ""))
    return urlunsplit(
        (base.scheme, base.netloc, _join_path(base.path, action), base.query, base.fragment)
    )


def _attr(element: Tag, name: str) -> str:
    value = element.get(name)
    if value is None:
        return ""
    if isinstance(value, list):
        return " ".join(value)
    return value


def parse_form_fields(html: str | Tag, base_url: str) -> list[Form]:
    """Return the forms of a document with absolute actions and field names.

    ``html`` is markup or an already parsed document; relative actions are
    resolved against ``base_url``.
    """
    document = html if isinstance(html, Tag) else BeautifulSoup(html, "html.parser")
    forms = []
    for form_elem in document.find_all("form"):
        action = _attr(form_elem, "action")
        method = _attr(form_elem, "method") or "GET"
        enctype = _attr(form_elem, "enctype")
        if not enctype and method != "GET":
            enctype = _DEFAULT_ENCTYPE

        form = Form(
            action=_resolve_action(action, base_url),
            method=method.upper(),
            enctype=enctype,
            parameters=[
                _attr(element, "name")
                for element in form_elem.find_all(["input", "textarea", "select"])
                if element.has_attr("name")
            ],
        )
        if form.action or form.method or form.enctype or form.parameters:
            forms.append(form)
    return forms