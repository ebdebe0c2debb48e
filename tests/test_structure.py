"""
Structure lint tests.
Verify the component layout and the files the app needs at startup.
"""

from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent
PACKAGE = PROJECT_ROOT / "contacts_app"


class TestProjectStructure:
    def test_runtime_files_exist(self) -> None:
        assert (PROJECT_ROOT / "rules.yaml").is_file()
        assert (PROJECT_ROOT / "migrations").is_dir()
        assert sorted(p.name for p in (PROJECT_ROOT / "migrations").glob("*.sql"))

    def test_components_export_public_api(self) -> None:
        components = [
            p for p in (PACKAGE / "components").iterdir() if p.is_dir() and not p.name.startswith("__")
        ]
        assert {p.name for p in components} >= {"contacts", "search", "sidebar"}
        for component in components:
            assert (component / "__init__.py").is_file(), component.name
            assert (component / "_impl.py").is_file(), component.name

    def test_stateful_components_have_shell_layer(self) -> None:
        for name in ("contacts", "search"):
            component = PACKAGE / "components" / name
            assert (component / "component.py").is_file()
            assert (component / "models.py").is_file()
            assert (component / "tests" / "test_unit.py").is_file()

    def test_migrations_have_down_section(self) -> None:
        for migration in (PROJECT_ROOT / "migrations").glob("*.sql"):
            assert "-- Down" in migration.read_text(), migration.name
