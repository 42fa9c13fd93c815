"""XML (de)serialization of artifacts and package metadata documents."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path

from artinstall.metadata.model import ArtifactMetadata, PackageMetadata
from artinstall.models.artifact import DEFAULT_EXTENSION, DEFAULT_VERSION, Artifact

# (tag, attribute, default) in document order.  A ``None`` default means the
# child is written whenever the value is set.
_ARTIFACT_CHILDREN: tuple[tuple[str, str, str | None], ...] = (
    ("namespace", "namespace", ""),
    ("groupId", "group_id", None),
    ("artifactId", "artifact_id", None),
    ("extension", "extension", DEFAULT_EXTENSION),
    ("classifier", "classifier", ""),
    ("version", "version", DEFAULT_VERSION),
)


def _add_optional_child(parent: ET.Element, tag: str, value: str | None, default: str | None) -> None:
    if value is None:
        return
    if default is None or value != default:
        ET.SubElement(parent, tag).text = value


def _child_text(element: ET.Element, tag: str, default: str | None = None) -> str | None:
    child = element.find(tag)
    if child is None:
        return default
    return child.text or ""


# ---------------------------------------------------------------------------
# Artifacts
# ---------------------------------------------------------------------------


def to_element(artifact: Artifact, tag: str) -> ET.Element:
    """Build ``<tag>`` holding only the coordinates that differ from their defaults."""
    parent = ET.Element(tag)
    for child_tag, attr, default in _ARTIFACT_CHILDREN:
        _add_optional_child(parent, child_tag, getattr(artifact, attr), default)
    return parent


def from_element(element: ET.Element) -> Artifact:
    """Read an artifact written by :func:`to_element`, restoring omitted defaults."""
    values = {attr: _child_text(element, child_tag, default) for child_tag, attr, default in _ARTIFACT_CHILDREN}
    return Artifact(**values)


def serialize(artifact: Artifact, tag: str = "artifact") -> str:
    """Return *artifact* as a standalone XML fragment."""
    return ET.tostring(to_element(artifact, tag), encoding="unicode")


# ---------------------------------------------------------------------------
# Metadata documents
# ---------------------------------------------------------------------------


def _properties_element(tag: str, properties: dict[str, str]) -> ET.Element:
    element = ET.Element(tag)
    for key, value in properties.items():
        ET.SubElement(element, key).text = value
    return element


def _read_properties(parent: ET.Element, tag: str = "properties") -> dict[str, str]:
    element = parent.find(tag)
    if element is None:
        return {}
    return {child.tag: child.text or "" for child in element}


def _artifact_metadata_element(record: ArtifactMetadata) -> ET.Element:
    element = to_element(record.artifact, "artifact")
    if record.path is not None:
        ET.SubElement(element, "path").text = record.path
    if record.properties:
        element.append(_properties_element("properties", record.properties))
    if record.aliases:
        aliases = ET.SubElement(element, "aliases")
        for alias in record.aliases:
            aliases.append(to_element(alias, "alias"))
    dependencies = record.effective_dependencies
    if dependencies:
        deps = ET.SubElement(element, "dependencies")
        for dependency in dependencies:
            deps.append(to_element(dependency, "dependency"))
    return element


def _artifact_metadata_from_element(element: ET.Element) -> ArtifactMetadata:
    aliases = element.find("aliases")
    dependencies = element.find("dependencies")
    return ArtifactMetadata(
        artifact=from_element(element),
        path=_child_text(element, "path"),
        properties=_read_properties(element),
        aliases=[from_element(a) for a in aliases] if aliases is not None else [],
        dependencies=[from_element(d) for d in dependencies] if dependencies is not None else [],
    )


def metadata_to_element(metadata: PackageMetadata) -> ET.Element:
    root = ET.Element("metadata")
    ET.SubElement(root, "uuid").text = metadata.uuid
    if metadata.properties:
        root.append(_properties_element("properties", metadata.properties))
    artifacts = ET.SubElement(root, "artifacts")
    for record in metadata.artifacts:
        artifacts.append(_artifact_metadata_element(record))
    return root


def metadata_from_element(element: ET.Element) -> PackageMetadata:
    if element.tag != "metadata":
        raise ValueError(f"Expected <metadata> document, got <{element.tag}>")
    artifacts = element.find("artifacts")
    return PackageMetadata(
        uuid=_child_text(element, "uuid", ""),
        properties=_read_properties(element),
        artifacts=[_artifact_metadata_from_element(a) for a in artifacts] if artifacts is not None else [],
    )


def write_metadata(metadata: PackageMetadata, path: Path) -> None:
    """Write *metadata* as an indented UTF-8 XML document."""
    tree = ET.ElementTree(metadata_to_element(metadata))
    ET.indent(tree)
    with path.open("wb") as handle:
        tree.write(handle, encoding="utf-8", xml_declaration=True)
        handle.write(b"\n")


def read_metadata(path: Path | str) -> PackageMetadata:
    return metadata_from_element(ET.parse(path).getroot())
