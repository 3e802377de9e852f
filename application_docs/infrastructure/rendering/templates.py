"""Template resolution and Jinja2 view rendering"""

import dataclasses
from pathlib import Path
from typing import Any, Dict, Mapping
from urllib.parse import urlparse
from urllib.request import url2pathname

import httpx
from jinja2 import TemplateError, select_autoescape
from jinja2.sandbox import SandboxedEnvironment

from application_docs.config import settings
from application_docs.domain.exceptions import TemplateNotFoundError, ViewRenderingError
from application_docs.domain.ports import TemplateResolver, ViewRenderer


class TemplatePathProvider(TemplateResolver):
    """Looks up template path fragments by logical name"""

    def __init__(self, paths: Mapping[str, str] | None = None):
        self.paths = dict(paths if paths is not None else settings.template_paths)

    def resolve(self, logical_name: str) -> str:
        try:
            return self.paths[logical_name]
        except KeyError as e:
            raise TemplateNotFoundError(f"No template registered for '{logical_name}'") from e


class JinjaViewRenderer(ViewRenderer):
    """Renders templates loaded from file:// paths or http(s):// URLs"""

    def __init__(self, timeout: float | None = None):
        self.timeout = timeout or settings.http_timeout_seconds
        # Templates may come from remote hosts: no access to unsafe attributes or callables
        self.env = SandboxedEnvironment(
            autoescape=select_autoescape(default_for_string=True, default=True),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, uri: str, view_model: Any) -> str:
        """
        Render the template at ``uri`` with the view model's fields as variables.

        Raises:
            ViewRenderingError: template missing, unreachable, or failing to render
        """
        source = self._load_source(uri)
        try:
            return self.env.from_string(source).render(**_context(view_model))
        except TemplateError as e:
            raise ViewRenderingError(f"Template '{uri}' failed to render: {e}") from e

    def _load_source(self, uri: str) -> str:
        parsed = urlparse(uri)

        if parsed.scheme in ("http", "https"):
            try:
                response = httpx.get(uri, timeout=self.timeout)
                response.raise_for_status()
                return response.text
            except httpx.TimeoutException as e:
                raise ViewRenderingError(f"Template fetch timeout after {self.timeout}s: {uri}") from e
            except httpx.HTTPError as e:
                raise ViewRenderingError(f"Template fetch failed for '{uri}': {e}") from e

        path = Path(url2pathname(parsed.path)) if parsed.scheme == "file" else Path(uri)
        try:
            return path.read_text(encoding="utf-8")
        except OSError as e:
            raise ViewRenderingError(f"Template not readable at '{uri}': {e}") from e


def _context(view_model: Any) -> Dict[str, Any]:
    # Shallow: nested dataclasses stay objects for attribute access in templates
    if dataclasses.is_dataclass(view_model):
        return {f.name: getattr(view_model, f.name) for f in dataclasses.fields(view_model)}
    return dict(view_model)
