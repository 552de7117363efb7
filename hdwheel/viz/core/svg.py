"""Deterministic SVG scene graph used by band generators and the assembler.

Numbers are serialised with a fixed number of decimals so regenerated
wheels diff cleanly against committed artwork.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

__all__ = ["SVG_NS", "SvgElement", "SvgDocument", "fmt"]

SVG_NS = "http://www.w3.org/2000/svg"


def fmt(value: float, digits: int = 4) -> str:
    """Format ``value`` with ``digits`` decimals, never emitting ``-0.0000``."""

    text = f"{value:.{digits}f}"
    if text.startswith("-") and float(text) == 0:
        return text[1:]
    return text


@dataclass
class SvgElement:
    """A minimal SVG node.

    Attributes are stored as strings. Children keep insertion order so
    serialisation is stable between runs.
    """

    tag: str
    attributes: Dict[str, str] = field(default_factory=dict)
    children: List["SvgElement"] = field(default_factory=list)
    text: Optional[str] = None

    def set(self, **attrs: object) -> "SvgElement":
        """Assign attributes and return ``self``.

        Floats are written with four decimals. ``None`` values are
        skipped and underscores in names become hyphens, so
        ``stroke_width=0.5`` serialises as ``stroke-width="0.5000"``.
        """

        for key, value in attrs.items():
            if value is None:
                continue
            name = key.replace("_", "-")
            if isinstance(value, float):
                self.attributes[name] = fmt(value)
            else:
                self.attributes[name] = str(value)
        return self

    def update(self, attrs: Dict[str, object]) -> "SvgElement":
        """Assign attributes whose names are not valid identifiers (``data-*``)."""

        for name, value in attrs.items():
            if value is None:
                continue
            self.attributes[name] = fmt(value) if isinstance(value, float) else str(value)
        return self

    def add(self, *children: "SvgElement") -> "SvgElement":
        self.children.extend(children)
        return self

    def iter(self) -> Iterator["SvgElement"]:
        """Depth-first iteration over this element and its descendants."""

        yield self
        for child in self.children:
            yield from child.iter()

    def find(self, element_id: str) -> Optional["SvgElement"]:
        for node in self.iter():
            if node.attributes.get("id") == element_id:
                return node
        return None

    def to_string(self, indent: int = 0, pretty: bool = True) -> str:
        pad = "  " * indent if pretty else ""
        child_pad = "  " * (indent + 1) if pretty else ""
        attrs = "".join(
            f" {name}={_quote(value)}" for name, value in sorted(self.attributes.items())
        )
        if not self.children and self.text is None:
            return f"{pad}<{self.tag}{attrs}/>"

        if self.text is not None and not self.children:
            return f"{pad}<{self.tag}{attrs}>{_escape(self.text)}</{self.tag}>"

        parts: List[str] = [f"{pad}<{self.tag}{attrs}>"]
        if self.text is not None:
            parts.append(f"{child_pad}{_escape(self.text.strip() if pretty else self.text)}")
        for child in self.children:
            parts.append(child.to_string(indent + 1, pretty=pretty))
        parts.append(f"{pad}</{self.tag}>")
        return ("\n" if pretty else "").join(parts)


def _quote(value: str) -> str:
    return f'"{_escape(value)}"'


def _escape(value: str) -> str:
    return (
        value.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&apos;")
    )


@dataclass
class SvgDocument:
    """Standalone SVG scene with an optional full-canvas background."""

    width: float
    height: float
    viewbox: Optional[Tuple[float, float, float, float]] = None
    background: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)
    root: SvgElement = field(init=False)

    def __post_init__(self) -> None:
        self.root = SvgElement(
            "svg",
            {
                "xmlns": SVG_NS,
                "width": fmt(self.width),
                "height": fmt(self.height),
            },
        )
        if self.viewbox is not None:
            self.root.set(viewBox=" ".join(fmt(v) for v in self.viewbox))
        if self.background:
            x, y, w, h = self.viewbox_tuple()
            self.root.add(
                SvgElement("rect").set(
                    id="background", x=fmt(x), y=fmt(y), width=fmt(w), height=fmt(h),
                    fill=self.background,
                )
            )
        if self.metadata:
            self._install_metadata()

    def _install_metadata(self) -> None:
        metadata_el = SvgElement("metadata")
        for key, value in sorted(self.metadata.items()):
            metadata_el.add(SvgElement("meta", {"key": key, "value": str(value)}))
        self.root.children.insert(0, metadata_el)

    def set_metadata(self, **metadata: str) -> None:
        self.metadata.update(metadata)
        self.root.children = [child for child in self.root.children if child.tag != "metadata"]
        self._install_metadata()

    # Element factories -------------------------------------------------
    def group(self, **attrs: object) -> SvgElement:
        return SvgElement("g").set(**attrs)

    def circle(self, cx: float, cy: float, r: float, **attrs: object) -> SvgElement:
        return self.add(SvgElement("circle").set(cx=cx, cy=cy, r=r, **attrs))

    def line(self, x1: float, y1: float, x2: float, y2: float, **attrs: object) -> SvgElement:
        return self.add(SvgElement("line").set(x1=x1, y1=y1, x2=x2, y2=y2, **attrs))

    def text(self, x: float, y: float, value: str, **attrs: object) -> SvgElement:
        return self.add(SvgElement("text", text=value).set(x=x, y=y, **attrs))

    def add(self, element: SvgElement) -> SvgElement:
        self.root.add(element)
        return element

    def extend(self, elements: Iterable[SvgElement]) -> None:
        for element in elements:
            self.add(element)

    def find(self, element_id: str) -> Optional[SvgElement]:
        return self.root.find(element_id)

    def to_string(self, pretty: bool = True) -> str:
        return self.root.to_string(indent=0, pretty=pretty)

    def to_bytes(self, pretty: bool = True) -> bytes:
        return self.to_string(pretty=pretty).encode("utf-8")

    def viewbox_tuple(self) -> Tuple[float, float, float, float]:
        if self.viewbox is not None:
            return self.viewbox
        return (0.0, 0.0, self.width, self.height)
