"""Tests for the stereotype table and typed artifact construction."""

from __future__ import annotations

import pytest

from artinstall.stereotypes import STEREOTYPES, StereotypeEntry, create_typed_artifact, lookup


class TestLookup:
    def test_table_contents(self) -> None:
        assert {name: (e.extension, e.classifier) for name, e in STEREOTYPES.items()} == {
            "maven-plugin": ("jar", ""),
            "ejb": ("jar", ""),
            "ejb-client": ("jar", "client"),
            "test-jar": ("jar", "tests"),
            "javadoc": ("jar", "javadoc"),
            "java-source": ("jar", "sources"),
        }

    def test_language_is_java(self) -> None:
        assert all(entry.language == "java" for entry in STEREOTYPES.values())

    def test_lookup_hit(self) -> None:
        assert lookup("test-jar") == StereotypeEntry("test-jar", "jar", "tests")

    def test_lookup_miss(self) -> None:
        assert lookup("war") is None
        assert lookup(None) is None

    def test_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            STEREOTYPES["war"] = StereotypeEntry("war", "war", "")  # type: ignore[index]


class TestCreateTypedArtifact:
    def test_null_type_defaults_to_jar(self) -> None:
        a = create_typed_artifact("g", "a", None, None, "1.0")
        assert a.extension == "jar"
        assert a.classifier == ""
        assert a.version == "1.0"

    def test_plain_type_is_extension(self) -> None:
        assert create_typed_artifact("g", "a", "pom", "", "1.0").extension == "pom"
        assert create_typed_artifact("g", "a", "war", None, "1.0").extension == "war"

    @pytest.mark.parametrize(
        ("type_name", "extension", "classifier"),
        [
            ("maven-plugin", "jar", ""),
            ("ejb", "jar", ""),
            ("ejb-client", "jar", "client"),
            ("test-jar", "jar", "tests"),
            ("javadoc", "jar", "javadoc"),
            ("java-source", "jar", "sources"),
        ],
    )
    def test_stereotype_applied(self, type_name: str, extension: str, classifier: str) -> None:
        a = create_typed_artifact("g", "a", type_name, "", "1.0")
        assert (a.extension, a.classifier) == (extension, classifier)

    def test_explicit_classifier_wins(self) -> None:
        a = create_typed_artifact("g", "a", "test-jar", "custom", "1.0")
        assert a.extension == "jar"
        assert a.classifier == "custom"

    def test_missing_version_is_system(self) -> None:
        assert create_typed_artifact("g", "a", None, None, None).version == "SYSTEM"

    def test_unset_ids_propagate(self) -> None:
        a = create_typed_artifact(None, None, "javadoc", None, "1.0")
        assert a.group_id is None
        assert a.artifact_id is None
        assert not a.is_resolved
