"""
Template resolution and HTML rendering for application documents.

Template keys are "<State>Application"; the provider maps a key to a URL path,
and the view generator renders the template found at base URI + that path.
"""
from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import unquote, urlsplit

from jinja2 import Environment, FileSystemLoader, TemplateNotFound, select_autoescape
from pydantic import BaseModel

_LOGGER = logging.getLogger(__name__)

TEMPLATE_KEY_SUFFIX = "Application"
TEMPLATE_EXTENSION = ".html"


def template_key(state: str) -> str:
    return f"{state}{TEMPLATE_KEY_SUFFIX}"


def _normalize_prefix(url_prefix: str) -> str:
    """Leading-slash form without a trailing slash; empty when templates are served from the root."""
    stripped = url_prefix.strip("/")
    return "/" + stripped if stripped else ""


def normalize_base_uri(base_uri: str) -> str:
    """Drop a single trailing '/' so base URI and template path join with exactly one separator."""
    if base_uri.endswith("/"):
        return base_uri[:-1]
    return base_uri


class TemplatePathProvider:
    """Maps template keys to URL paths under a fixed prefix, with optional per-key overrides."""

    def __init__(self, url_prefix: str = "/templates", overrides: Optional[dict[str, str]] = None):
        self.url_prefix = _normalize_prefix(url_prefix)
        self.overrides = dict(overrides or {})

    def get(self, key: str) -> str:
        if key in self.overrides:
            return self.overrides[key]
        return f"{self.url_prefix}/{key}{TEMPLATE_EXTENSION}"


class Jinja2ViewGenerator:
    """
    Renders templates from a local directory addressed by URL.
    The URL path segment after the prefix names the template, so
    "https://host/templates/PendingApplication.html" loads "PendingApplication.html".
    """

    def __init__(self, template_dir: str, url_prefix: str = "/templates"):
        self.url_prefix = _normalize_prefix(url_prefix)
        self.env = Environment(
            loader=FileSystemLoader(template_dir),
            autoescape=select_autoescape(["html", "xml"]),
        )

    def template_name(self, url: str) -> str:
        path = unquote(urlsplit(url).path)
        marker = self.url_prefix + "/"
        if marker in path:
            return path.rsplit(marker, 1)[1]
        return path.lstrip("/")

    def generate_from_path(self, url: str, view_model: BaseModel) -> str:
        name = self.template_name(url)
        try:
            template = self.env.get_template(name)
        except TemplateNotFound:
            _LOGGER.error("Template not found for %s", url, extra={"template": name})
            raise

        return template.render(model=view_model)
