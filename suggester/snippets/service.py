"""Merges per-component templates into one importable code block."""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Set, Union

from suggester.catalog.models import CatalogError, ComponentName, UnknownComponentError
from suggester.catalog.service import ComponentCatalog, get_component_catalog

logger = logging.getLogger(__name__)

_IMPORT_NAMES = re.compile(r"\{([^}]+)\}")
_IMPORT_SOURCE = re.compile(r"from\s+['\"]([^'\"]+)['\"]")


@dataclass
class ParsedSnippet:
    imports: Dict[str, Set[str]] = field(default_factory=dict)
    body: List[str] = field(default_factory=list)


def parse_snippet(text: str, package_order: Sequence[str]) -> ParsedSnippet:
    """Split a template into import names grouped by package and body lines.

    Blank lines are dropped. Import lines from packages outside
    ``package_order`` are discarded rather than kept as body.
    """
    parsed = ParsedSnippet()
    for line in text.split("\n"):
        if not line.strip():
            continue
        if not line.startswith("import"):
            parsed.body.append(line)
            continue
        source = _IMPORT_SOURCE.search(line)
        names = _IMPORT_NAMES.search(line)
        if not source or not names or source.group(1) not in package_order:
            continue
        bucket = parsed.imports.setdefault(source.group(1), set())
        bucket.update(name.strip() for name in names.group(1).split(",") if name.strip())
    return parsed


def detect_icon_imports(body: Iterable[str], icon_names: Iterable[str]) -> Set[str]:
    content = "\n".join(body)
    return {icon for icon in icon_names if icon in content}


def _dedupe(components: Iterable[Union[ComponentName, str]]) -> List[str]:
    seen: Dict[str, None] = {}
    for component in components:
        seen.setdefault(str(component), None)
    return list(seen)


class SnippetAssembler:
    def __init__(self, catalog: Optional[ComponentCatalog] = None, icon_package: Optional[str] = None) -> None:
        self.catalog = catalog or get_component_catalog()
        # Last package in the emission order is the icon package unless told otherwise
        self.icon_package = icon_package or self.catalog.package_order[-1]
        if self.icon_package not in self.catalog.package_order:
            raise CatalogError(f"icon package {self.icon_package!r} is not in the package order")

    def assemble(self, components: Iterable[Union[ComponentName, str]]) -> str:
        names = _dedupe(components)
        if not names:
            return ""

        imports: Dict[str, Set[str]] = {package: set() for package in self.catalog.package_order}
        body: List[str] = []
        for name in names:
            template = self.catalog.get_snippet(name)
            if template is None:
                logger.debug("Skipping unknown component %s", name)
                continue
            parsed = parse_snippet(template, self.catalog.package_order)
            for package, package_names in parsed.imports.items():
                imports[package].update(package_names)
            if body:
                body.append("")
            body.extend(parsed.body)

        imports[self.icon_package].update(detect_icon_imports(body, self.catalog.icon_names))

        lines: List[str] = []
        for package in self.catalog.package_order:
            if imports[package]:
                lines.append(f"import {{ {', '.join(sorted(imports[package]))} }} from '{package}';")
        lines.append("")
        lines.extend(body)
        return "\n".join(lines)

    def render_component(self, name: Union[ComponentName, str]) -> str:
        if self.catalog.get_snippet(name) is None:
            raise UnknownComponentError(str(name))
        return self.assemble([name])


_default_assembler: Optional[SnippetAssembler] = None


def get_snippet_assembler() -> SnippetAssembler:
    global _default_assembler
    if _default_assembler is None:
        _default_assembler = SnippetAssembler()
    return _default_assembler


def set_snippet_assembler(assembler: Optional[SnippetAssembler]) -> None:
    global _default_assembler
    _default_assembler = assembler
