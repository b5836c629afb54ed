import pytest

from dircontainer.core.config.settings import settings
from dircontainer.core.common.enums import ContainerKind, EntryKind, Severity
from dircontainer.core.diagnostics import RecordingDiagnosticSink
from dircontainer.features.library_resolver.domain.models import DirectoryError
from dircontainer.features.classpath_container.domain.models import ContainerPath
from dircontainer.features.classpath_container.service.container import DirectoryContainer

# --- CONTAINER PATH ---

def test_parse_container_path():
    path = ContainerPath.parse(f"{settings.CONTAINER_ID}/lib/JAR,zip")

    assert path.directory == "lib"
    assert path.extensions == frozenset({"jar", "zip"})
    assert not path.is_project_root

def test_parse_multi_segment_directory():
    path = ContainerPath.parse(f"{settings.CONTAINER_ID}/third_party/java/jar")

    assert path.directory == "third_party/java"
    assert path.relative_directory == "third_party/java"

def test_parse_project_root_marker():
    path = ContainerPath.parse(f"{settings.CONTAINER_ID}/{settings.ROOT_DIR}/jar")

    assert path.is_project_root
    assert path.relative_directory == ""

@pytest.mark.parametrize("encoded", [
    "some.other.CONTAINER/lib/jar",
    f"{settings.CONTAINER_ID}/jar",
    f"{settings.CONTAINER_ID}/lib/ , ",
])
def test_parse_rejects_malformed_paths(encoded):
    with pytest.raises(ValueError):
        ContainerPath.parse(encoded)

def test_build_and_parse_agree():
    encoded = ContainerPath.build("lib/ext", ["zip", "jar"])

    assert encoded == f"{settings.CONTAINER_ID}/lib/ext/jar,zip"
    parsed = ContainerPath.parse(encoded)
    assert parsed.directory == "lib/ext"
    assert parsed.extensions == frozenset({"jar", "zip"})
    assert parsed.encode() == encoded

def test_build_maps_empty_directory_to_root_marker():
    assert ContainerPath.build("", ["jar"]) == f"{settings.CONTAINER_ID}/{settings.ROOT_DIR}/jar"

# --- DIRECTORY CONTAINER ---

def test_container_entries_carry_attachments(project_root):
    """
    Verifies that the container:
    1. Emits one LIBRARY entry per main archive.
    2. Attaches the -src archive with root '/'.
    3. Adds the javadoc location attribute.
    """
    container = DirectoryContainer.from_encoded(
        ContainerPath.build("lib", ["jar"]), project_root, sink=RecordingDiagnosticSink()
    )

    entries = container.get_classpath_entries()

    assert len(entries) == 1
    entry = entries[0]
    lib = project_root / "lib"
    assert entry.kind == EntryKind.LIBRARY
    assert entry.path == str(lib / "a.jar")
    assert entry.source_attachment_path == lib / "a-src.jar"
    assert entry.source_attachment_root == "/"
    assert entry.javadoc_location == str(lib / "a-javadoc.jar")
    assert entry.access_rules == ()
    assert entry.exported is False

def test_entry_without_javadoc_has_no_attributes(project_root):
    container = DirectoryContainer.from_encoded(ContainerPath.build("lib", ["zip"]), project_root)

    entries = container.get_classpath_entries()

    assert len(entries) == 1
    assert entries[0].extra_attributes == ()
    assert entries[0].source_attachment_path is None

def test_container_metadata(project_root):
    container = DirectoryContainer.from_encoded(ContainerPath.build("lib", ["jar"]), project_root)

    assert container.directory == project_root / "lib"
    assert container.description == "/lib Libraries"
    assert container.kind == ContainerKind.APPLICATION
    assert container.path == f"{settings.CONTAINER_ID}/lib/jar"
    assert container.is_valid()

def test_root_container_uses_project_directory(project_root):
    (project_root / "tool.jar").write_bytes(b"PK")
    container = DirectoryContainer.from_encoded(
        ContainerPath.build(settings.ROOT_DIR, ["jar"]), project_root
    )

    assert container.directory == project_root
    assert container.description == "/ Libraries"
    assert [e.path for e in container.get_classpath_entries()] == [str(project_root / "tool.jar")]

def test_missing_directory_degrades_to_empty(project_root):
    """
    A container pointing at a missing folder is invalid, yields no entries,
    and reports exactly one ERROR instead of raising.
    """
    sink = RecordingDiagnosticSink()
    container = DirectoryContainer.from_encoded(
        ContainerPath.build("does_not_exist", ["jar"]), project_root, sink=sink
    )

    assert not container.is_valid()
    assert container.get_classpath_entries() == ()

    errors = sink.by_severity(Severity.ERROR)
    assert len(errors) == 1
    assert isinstance(errors[0], DirectoryError)

def test_container_is_contained_delegates(project_root):
    container = DirectoryContainer.from_encoded(ContainerPath.build("lib", ["jar"]), project_root)
    lib = project_root / "lib"

    assert container.is_contained(lib / "a.jar")
    assert container.is_contained(lib / "a-src.jar")
    assert not container.is_contained(lib / "b.zip")
    assert not container.is_contained(project_root / "a.jar")

def test_build_normalizes_extensions():
    assert ContainerPath.build("lib", [".JAR", " zip ", ""]) == f"{settings.CONTAINER_ID}/lib/jar,zip"

def test_build_rejects_empty_extensions():
    with pytest.raises(ValueError):
        ContainerPath.build("lib", [])
    with pytest.raises(ValueError):
        ContainerPath.build("lib", [" ", "."])

def test_build_falls_back_to_default_extensions():
    encoded = ContainerPath.build("lib")

    assert ContainerPath.parse(encoded).extensions == settings.default_extensions
