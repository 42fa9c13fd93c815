"""Tests for the artifact identity model."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from artinstall.models.artifact import (
    DEFAULT_VERSION,
    DUMMY,
    DUMMY_JPP,
    UNKNOWN_VERSION,
    Artifact,
    collection_to_string,
    is_void,
)


class TestDefaults:
    def test_defaults(self) -> None:
        a = Artifact(group_id="org.example", artifact_id="foo")
        assert a.extension == "jar"
        assert a.classifier == ""
        assert a.version == "SYSTEM"
        assert a.namespace == ""

    def test_sentinels_are_distinct(self) -> None:
        assert DEFAULT_VERSION == "SYSTEM"
        assert UNKNOWN_VERSION == "UNKNOWN"
        assert DEFAULT_VERSION != UNKNOWN_VERSION

    def test_ids_are_required(self) -> None:
        with pytest.raises(ValidationError):
            Artifact(group_id="org.example")

    def test_xml_aliases_accepted(self) -> None:
        a = Artifact(groupId="g", artifactId="a")
        assert a.group_id == "g"
        assert a.artifact_id == "a"

    def test_immutable(self) -> None:
        a = Artifact(group_id="g", artifact_id="a")
        with pytest.raises(ValidationError):
            a.version = "1.0"


class TestResolved:
    def test_resolved(self) -> None:
        assert Artifact(group_id="g", artifact_id="a").is_resolved

    def test_missing_group_is_unresolved(self) -> None:
        assert not Artifact(group_id=None, artifact_id="a").is_resolved

    def test_empty_artifact_id_is_unresolved(self) -> None:
        assert not Artifact(group_id="g", artifact_id="").is_resolved


class TestEquality:
    def test_equal_by_value(self) -> None:
        assert Artifact(group_id="g", artifact_id="a", version="1") == Artifact(
            group_id="g", artifact_id="a", version="1"
        )

    def test_version_matters(self) -> None:
        assert Artifact(group_id="g", artifact_id="a", version="1") != Artifact(
            group_id="g", artifact_id="a", version="2"
        )

    def test_namespace_ignored(self) -> None:
        a = Artifact(group_id="g", artifact_id="a", namespace="ns")
        b = Artifact(group_id="g", artifact_id="a")
        assert a == b
        assert hash(a) == hash(b)

    def test_usable_in_sets(self) -> None:
        artifacts = {Artifact.parse("g:a:1"), Artifact.parse("g:a:jar:1"), Artifact.parse("g:a:2")}
        assert len(artifacts) == 2


class TestParse:
    def test_three_parts(self) -> None:
        a = Artifact.parse("org.example:foo:1.0")
        assert (a.group_id, a.artifact_id, a.extension, a.classifier, a.version) == (
            "org.example",
            "foo",
            "jar",
            "",
            "1.0",
        )

    def test_four_parts(self) -> None:
        a = Artifact.parse("org.example:foo:pom:1.0")
        assert a.extension == "pom"
        assert a.classifier == ""

    def test_five_parts(self) -> None:
        a = Artifact.parse("org.example:foo:jar:tests:1.0")
        assert a.classifier == "tests"

    def test_namespace_prefix(self) -> None:
        a = Artifact.parse("JPP/maven:empty-dep:SYSTEM")
        assert a.namespace == "JPP"
        assert a.group_id == "maven"

    def test_empty_version_defaults_to_system(self) -> None:
        assert Artifact.parse("g:a:").version == "SYSTEM"

    @pytest.mark.parametrize("bad", ["g:a", "g", "g:a:b:c:d:e", ":a:1", "g::1"])
    def test_bad_coordinates(self, bad: str) -> None:
        with pytest.raises(ValueError, match="Bad artifact coordinates"):
            Artifact.parse(bad)


class TestStringForm:
    def test_plain(self) -> None:
        assert str(Artifact(group_id="g", artifact_id="a")) == "g:a:SYSTEM"

    def test_extension_shown_when_not_jar(self) -> None:
        assert str(Artifact(group_id="g", artifact_id="a", extension="pom", version="1")) == "g:a:pom:1"

    def test_classifier_forces_extension(self) -> None:
        a = Artifact(group_id="g", artifact_id="a", classifier="tests", version="1")
        assert str(a) == "g:a:jar:tests:1"

    def test_namespace_prefix(self) -> None:
        assert str(DUMMY_JPP) == "JPP/maven:empty-dep:SYSTEM"

    def test_with_version(self) -> None:
        a = Artifact(group_id="g", artifact_id="a").with_version("2.0")
        assert a.version == "2.0"

    def test_with_namespace(self) -> None:
        assert Artifact(group_id="g", artifact_id="a").with_namespace("ns").namespace == "ns"


class TestCollectionToString:
    def test_empty(self) -> None:
        assert collection_to_string([]) == "[]"
        assert collection_to_string([], multi_line=True) == "[]"

    def test_single_line(self) -> None:
        artifacts = [Artifact.parse("g:a:1"), Artifact.parse("g:b:2")]
        assert collection_to_string(artifacts) == "[ g:a:1, g:b:2 ]"

    def test_multi_line(self) -> None:
        artifacts = [Artifact.parse("g:a:1"), Artifact.parse("g:b:2")]
        assert collection_to_string(artifacts, multi_line=True) == "[\n  g:a:1,\n  g:b:2\n]"


class TestVoidSentinels:
    def test_plain_spelling(self) -> None:
        assert str(DUMMY) == "org.fedoraproject.xmvn:xmvn-void:SYSTEM"
        assert is_void(DUMMY)

    def test_jpp_spelling(self) -> None:
        assert is_void(DUMMY_JPP)

    def test_jpp_spelling_without_namespace_split(self) -> None:
        assert is_void(Artifact(group_id="JPP/maven", artifact_id="empty-dep"))

    def test_other_versions_still_void(self) -> None:
        assert is_void(Artifact.parse("org.fedoraproject.xmvn:xmvn-void:pom:1.0"))

    def test_real_artifact_not_void(self) -> None:
        assert not is_void(Artifact.parse("org.fedoraproject.xmvn:xmvn-api:SYSTEM"))
        assert not is_void(Artifact.parse("maven:empty-dep:SYSTEM"))
