"""Optimizer adapter for icon markup.

Runs an ordered chain of plugins over the parsed icon, in the spirit of
svgo's ``preset-default`` followed by ``removeDimensions``, ``prefixIds`` and,
for monochrome icons, ``removeAttrs``. The transform is pure: the same input,
prefix and mode always give the same markup.

Identifier namespacing rewrites every ``id`` and class name to start with
``<prefix><delimiter>`` and updates every local reference accordingly, except
references whose target starts with the shared reference prefix. Those point
at other icons of the merged sprite and must stay resolvable after merging.
"""

import logging
import re
import xml.etree.ElementTree as ET
from collections.abc import Callable
from dataclasses import dataclass, field

from svg_icon_sprite.constants import (
    EDITOR_NAMESPACES,
    NON_RENDERING_ELEMENTS,
    XLINK_NAMESPACE,
    XML_NAMESPACE,
)
from svg_icon_sprite.exceptions import OptimizerError
from svg_icon_sprite.models.config import OptimizerConfig
from svg_icon_sprite.models.icon import IconMode
from svg_icon_sprite.utils.markup import local_name, namespace_of, parse_document, serialize

logger = logging.getLogger(__name__)

_URL_REFERENCE_RE = re.compile(r"""url\(\s*(['"]?)#([^'")\s]+)\1\s*\)""")
_CSS_RULE_RE = re.compile(r"([^{}]*)\{([^{}]*)\}")
_CSS_SELECTOR_NAME_RE = re.compile(r"([#.])(-?[A-Za-z_][\w-]*)")
# Whitespace inside these elements is rendered or parsed, so it is kept
_TEXT_CONTENT_ELEMENTS = frozenset({"text", "tspan", "textPath", "style", "script"})


@dataclass(frozen=True)
class OptimizeContext:
    """Parameters shared by every plugin during one optimization."""

    id_prefix: str
    mode: IconMode
    delimiter: str
    shared_reference_prefix: str
    strip_rules: list[tuple[re.Pattern[str], re.Pattern[str]]] = field(default_factory=list)

    @property
    def prefix(self) -> str:
        return f"{self.id_prefix}{self.delimiter}"

    def prefix_name(self, name: str) -> str:
        """Namespace an id or class name."""
        return f"{self.prefix}{name}"

    def prefix_reference(self, target: str) -> str:
        """Namespace the target of a local reference unless it is shared."""
        if target.startswith(self.shared_reference_prefix):
            return target
        return self.prefix_name(target)


Plugin = Callable[[ET.Element, OptimizeContext], None]


def compile_strip_rules(rules: list[str]) -> list[tuple[re.Pattern[str], re.Pattern[str]]]:
    """Compile removeAttrs-style rules.

    ``"path:(fill|stroke)"`` removes ``fill`` and ``stroke`` from ``path``
    elements; a rule without ``:`` applies to every element. Both parts must
    match the whole name.

    Args:
        rules: Rule strings.

    Returns:
        Pairs of (element pattern, attribute pattern).
    """
    compiled = []
    for rule in rules:
        element_part, _, attribute_part = rule.rpartition(":")
        compiled.append((re.compile(element_part or ".*"), re.compile(attribute_part)))
    return compiled


def remove_editors_ns_data(root: ET.Element, context: OptimizeContext) -> None:
    """Drop elements and attributes that belong to editor namespaces."""
    for parent in list(root.iter()):
        for child in list(parent):
            if namespace_of(child.tag) in EDITOR_NAMESPACES:
                parent.remove(child)
    for element in root.iter():
        for name in [n for n in element.attrib if namespace_of(n) in EDITOR_NAMESPACES]:
            del element.attrib[name]


def remove_non_rendering_elements(root: ET.Element, context: OptimizeContext) -> None:
    """Drop ``metadata``, ``title`` and ``desc`` elements."""
    for parent in list(root.iter()):
        for child in list(parent):
            if local_name(child.tag) in NON_RENDERING_ELEMENTS:
                parent.remove(child)


def strip_namespaces(root: ET.Element, context: OptimizeContext) -> None:
    """Remove namespaces from all tags and attributes.

    ``xlink:href`` becomes ``href`` (an existing ``href`` wins) and attributes
    of the XML namespace keep their reserved ``xml:`` prefix.
    """
    for element in root.iter():
        element.tag = local_name(element.tag)
        attributes: dict[str, str] = {}
        for name, value in element.attrib.items():
            namespace = namespace_of(name)
            if namespace == XML_NAMESPACE:
                attributes[f"xml:{local_name(name)}"] = value
            elif namespace == XLINK_NAMESPACE:
                attributes.setdefault(local_name(name), value)
            else:
                attributes[local_name(name)] = value
        element.attrib.clear()
        element.attrib.update(attributes)


def collapse_whitespace(root: ET.Element, context: OptimizeContext) -> None:
    """Drop whitespace-only text between elements."""
    for element in root.iter():
        keeps_text = element.tag in _TEXT_CONTENT_ELEMENTS
        if not keeps_text and element.text is not None and not element.text.strip():
            element.text = None
        for child in element:
            if not keeps_text and child.tail is not None and not child.tail.strip():
                child.tail = None


def remove_empty_attrs(root: ET.Element, context: OptimizeContext) -> None:
    """Drop attributes with an empty value."""
    for element in root.iter():
        for name in [n for n, v in element.attrib.items() if not v.strip()]:
            del element.attrib[name]


def remove_dimensions(root: ET.Element, context: OptimizeContext) -> None:
    """Drop root ``width``/``height`` when a ``viewBox`` carries the geometry.

    A viewBox is never synthesized: an icon without one is rejected later.
    """
    if root.get("viewBox"):
        root.attrib.pop("width", None)
        root.attrib.pop("height", None)


def _prefix_url_references(value: str, context: OptimizeContext) -> str:
    def replace(match: re.Match[str]) -> str:
        quote, target = match.group(1), match.group(2)
        return f"url({quote}#{context.prefix_reference(target)}{quote})"

    return _URL_REFERENCE_RE.sub(replace, value)


def _prefix_css(css: str, context: OptimizeContext) -> str:
    def replace_selector_name(match: re.Match[str]) -> str:
        sigil, name = match.group(1), match.group(2)
        if sigil == "#":
            return f"#{context.prefix_reference(name)}"
        return f".{context.prefix_name(name)}"

    def replace_rule(match: re.Match[str]) -> str:
        selectors = _CSS_SELECTOR_NAME_RE.sub(replace_selector_name, match.group(1))
        declarations = _prefix_url_references(match.group(2), context)
        return f"{selectors}{{{declarations}}}"

    return _CSS_RULE_RE.sub(replace_rule, css)


def prefix_ids(root: ET.Element, context: OptimizeContext) -> None:
    """Namespace ids, class names and every local reference to them."""
    for element in root.iter():
        for name, value in list(element.attrib.items()):
            if name == "id":
                element.set(name, context.prefix_name(value))
            elif name == "class":
                element.set(name, " ".join(context.prefix_name(c) for c in value.split()))
            elif name == "href" and value.startswith("#"):
                element.set(name, f"#{context.prefix_reference(value[1:])}")
            elif "url(" in value:
                element.set(name, _prefix_url_references(value, context))
        if element.tag == "style" and element.text:
            element.text = _prefix_css(element.text, context)


def remove_attrs(root: ET.Element, context: OptimizeContext) -> None:
    """Strip paint attributes matching the configured rules (monochrome only)."""
    if context.mode != IconMode.MONO:
        return
    for element in root.iter():
        for name in list(element.attrib):
            if any(
                element_re.fullmatch(element.tag) and attribute_re.fullmatch(name)
                for element_re, attribute_re in context.strip_rules
            ):
                del element.attrib[name]


PRESET: list[Plugin] = [
    remove_editors_ns_data,
    remove_non_rendering_elements,
    strip_namespaces,
    collapse_whitespace,
    remove_empty_attrs,
    remove_dimensions,
    prefix_ids,
    remove_attrs,
]


def optimize(
    markup: str,
    id_prefix: str,
    mode: IconMode,
    config: OptimizerConfig | None = None,
) -> str:
    """Normalize raw icon markup.

    Args:
        markup: Raw SVG document.
        id_prefix: Namespace for the icon's internal identifiers (the icon id).
        mode: ``IconMode.MONO`` strips paint attributes, ``IconMode.COLOR`` keeps them.
        config: Namespacing and stripping rules; defaults when omitted.

    Returns:
        The optimized SVG document, serialized without XML declaration.

    Raises:
        OptimizerError: If the markup is not a well-formed SVG document.
    """
    config = config or OptimizerConfig()
    try:
        root = parse_document(markup)
    except ET.ParseError as e:
        raise OptimizerError(
            "Failed to parse SVG markup", {"id_prefix": id_prefix, "error": str(e)}
        ) from e

    if local_name(root.tag) != "svg":
        raise OptimizerError(
            "Root element is not <svg>",
            {"id_prefix": id_prefix, "root": local_name(root.tag)},
        )

    context = OptimizeContext(
        id_prefix=id_prefix,
        mode=mode,
        delimiter=config.id_delimiter,
        shared_reference_prefix=config.shared_reference_prefix,
        strip_rules=compile_strip_rules(config.mono_strip_attrs),
    )
    for plugin in PRESET:
        plugin(root, context)

    logger.debug(f"Optimized markup for {id_prefix} ({IconMode(mode).value})")
    return serialize(root)
