"""
Tests for vueforge.renderer
===========================

Test Organization
-----------------
- TestCopyRules: Tests for plain copies, renames and skipped entries
- TestManifestMerging: Tests for package.json / extensions.json merging
- TestGitignore: Tests for .gitignore accumulation
- TestDataProviders: Tests for data-provider registration and chaining
- TestTemplateRendering: Tests for the *.j2 pass
"""

import json
import pytest
from pathlib import Path

from vueforge.generator import FRAGMENTS_ROOT
from vueforge.renderer import (
    collect_template_data,
    render_data_templates,
    render_template,
)


@pytest.fixture
def dest(tmp_path: Path) -> Path:
    """Destination project root."""
    root = tmp_path / "out"
    root.mkdir()
    return root


# =============================================================================
# Copy Rule Tests
# =============================================================================

class TestCopyRules:
    """Tests for the basic overlay behaviour."""

    def test_copies_nested_files(self, tmp_path: Path, dest: Path, make_tree) -> None:
        """Test files are copied and directories created."""
        src = make_tree(tmp_path / "frag", {"src/components/A.vue": "<template/>"})
        render_template(src, dest, [])
        assert (dest / "src" / "components" / "A.vue").read_text() == "<template/>"

    def test_overwrites_plain_files(self, tmp_path: Path, dest: Path, make_tree) -> None:
        """Test a later fragment replaces an ordinary file."""
        render_template(make_tree(tmp_path / "f1", {"App.vue": "one"}), dest, [])
        render_template(make_tree(tmp_path / "f2", {"App.vue": "two"}), dest, [])
        assert (dest / "App.vue").read_text() == "two"

    def test_untouched_files_survive(self, tmp_path: Path, dest: Path, make_tree) -> None:
        """Test files not targeted by a later fragment are left alone."""
        render_template(make_tree(tmp_path / "f1", {"a.js": "a"}), dest, [])
        render_template(make_tree(tmp_path / "f2", {"b.js": "b"}), dest, [])
        assert (dest / "a.js").read_text() == "a"
        assert (dest / "b.js").read_text() == "b"

    def test_underscore_becomes_dot(self, tmp_path: Path, dest: Path, make_tree) -> None:
        """Test _name files are written as .name."""
        src = make_tree(tmp_path / "frag", {"_prettierrc.json": "{}", "src/_env": "X=1"})
        render_template(src, dest, [])
        assert (dest / ".prettierrc.json").exists()
        assert (dest / "src" / ".env").read_text() == "X=1"
        assert not (dest / "_prettierrc.json").exists()

    def test_skips_node_modules(self, tmp_path: Path, dest: Path, make_tree) -> None:
        """Test node_modules and __pycache__ are never copied."""
        src = make_tree(
            tmp_path / "frag",
            {
                "node_modules/vue/index.js": "",
                "src/__pycache__/x.pyc": "",
                "index.html": "",
            },
        )
        render_template(src, dest, [])
        assert not (dest / "node_modules").exists()
        assert not (dest / "src" / "__pycache__").exists()
        assert (dest / "index.html").exists()

    def test_existing_directory_not_cleared(self, tmp_path: Path, dest: Path, make_tree) -> None:
        """Test rendering into an existing directory keeps its files."""
        make_tree(dest, {"src/keep.js": "keep"})
        render_template(make_tree(tmp_path / "frag", {"src/new.js": "new"}), dest, [])
        assert (dest / "src" / "keep.js").read_text() == "keep"

    def test_missing_source_raises(self, tmp_path: Path, dest: Path) -> None:
        """Test a missing fragment surfaces the OS error."""
        with pytest.raises(FileNotFoundError):
            render_template(tmp_path / "missing", dest, [])


# =============================================================================
# Manifest Merging Tests
# =============================================================================

class TestManifestMerging:
    """Tests for JSON-aware merging of manifests."""

    def test_package_json_merged_and_sorted(self, tmp_path: Path, dest: Path, make_tree) -> None:
        """Test package.json fields are merged and dependencies sorted."""
        (dest / "package.json").write_text(
            json.dumps({"name": "app", "dependencies": {"vue": "^3"}})
        )
        src = make_tree(
            tmp_path / "frag",
            {"package.json": json.dumps({"dependencies": {"axios": "^1"}, "private": True})},
        )
        render_template(src, dest, [])

        text = (dest / "package.json").read_text()
        pkg = json.loads(text)
        assert pkg["name"] == "app"
        assert pkg["private"] is True
        assert list(pkg["dependencies"]) == ["axios", "vue"]
        assert text.endswith("}\n")

    def test_package_json_copied_when_absent(self, tmp_path: Path, dest: Path, make_tree) -> None:
        """Test a manifest without a destination is copied verbatim."""
        raw = '{"devDependencies": {"vite": "4", "a": "1"}}'
        render_template(make_tree(tmp_path / "frag", {"package.json": raw}), dest, [])
        assert (dest / "package.json").read_text() == raw

    def test_base_rendered_twice_not_duplicated(self, dest: Path) -> None:
        """Test re-rendering base merges and re-sorts dependencies."""
        (dest / "package.json").write_text(json.dumps({"name": "app", "version": "0.0.0"}))
        render_template(FRAGMENTS_ROOT / "base", dest, [])
        first = json.loads((dest / "package.json").read_text())
        render_template(FRAGMENTS_ROOT / "base", dest, [])
        second = json.loads((dest / "package.json").read_text())

        assert second == first
        assert list(second["devDependencies"]) == sorted(second["devDependencies"])

    def test_extensions_json_merged(self, tmp_path: Path, dest: Path, make_tree) -> None:
        """Test extension recommendations accumulate."""
        make_tree(dest, {".vscode/extensions.json": '{"recommendations": ["Vue.volar"]}'})
        src = make_tree(
            tmp_path / "frag",
            {".vscode/extensions.json": '{"recommendations": ["vitest.explorer"]}'},
        )
        render_template(src, dest, [])

        text = (dest / ".vscode" / "extensions.json").read_text()
        assert json.loads(text) == {"recommendations": ["Vue.volar", "vitest.explorer"]}
        assert text.endswith("\n")

    def test_malformed_destination_raises(self, tmp_path: Path, dest: Path, make_tree) -> None:
        """Test invalid JSON at the destination aborts the merge."""
        (dest / "package.json").write_text("{not json")
        src = make_tree(tmp_path / "frag", {"package.json": "{}"})
        with pytest.raises(json.JSONDecodeError):
            render_template(src, dest, [])

    def test_malformed_extensions_raises(self, tmp_path: Path, dest: Path, make_tree) -> None:
        """Test invalid JSON in an existing extensions.json aborts the merge."""
        make_tree(dest, {".vscode/extensions.json": "{\"recommendations\": ["})
        src = make_tree(
            tmp_path / "frag",
            {".vscode/extensions.json": '{"recommendations": ["vitest.explorer"]}'},
        )
        with pytest.raises(json.JSONDecodeError):
            render_template(src, dest, [])


# =============================================================================
# .gitignore Tests
# =============================================================================

class TestGitignore:
    """Tests for .gitignore accumulation."""

    def test_gitignore_appended(self, tmp_path: Path, dest: Path, make_tree) -> None:
        """Test a second _gitignore is appended, separated by a newline."""
        render_template(make_tree(tmp_path / "f1", {"_gitignore": "node_modules\n"}), dest, [])
        render_template(make_tree(tmp_path / "f2", {"_gitignore": "coverage\n"}), dest, [])
        assert (dest / ".gitignore").read_text() == "node_modules\n\ncoverage\n"

    def test_same_fragment_twice_not_deduplicated(
        self, tmp_path: Path, dest: Path, make_tree
    ) -> None:
        """Test rendering the same ignore rules twice keeps both copies."""
        src = make_tree(tmp_path / "frag", {"_gitignore": "dist\n"})
        render_template(src, dest, [])
        render_template(src, dest, [])
        assert (dest / ".gitignore").read_text() == "dist\n\ndist\n"


# =============================================================================
# Data Provider Tests
# =============================================================================

class TestDataProviders:
    """Tests for *.data.py registration and chaining."""

    def test_provider_not_copied(self, tmp_path: Path, dest: Path, make_tree) -> None:
        """Test providers register a callback instead of being copied."""
        src = make_tree(
            tmp_path / "frag",
            {"src/main.js.data.py": "def get_data(*, old_data):\n    return {'a': 1}\n"},
        )
        callbacks: list = []
        render_template(src, dest, callbacks)

        assert len(callbacks) == 1
        assert not (dest / "src" / "main.js.data.py").exists()
        assert not (dest / "src" / "main.js").exists()
        assert collect_template_data(callbacks) == {dest / "src" / "main.js": {"a": 1}}

    def test_providers_chain_in_render_order(
        self, tmp_path: Path, dest: Path, make_tree
    ) -> None:
        """Test a later provider receives the earlier provider's output."""
        f1 = make_tree(
            tmp_path / "f1",
            {
                "x.j2": "{{ items | join(',') }}\n",
                "x.data.py": (
                    "def get_data(*, old_data):\n"
                    "    return {'items': old_data.get('items', []) + ['f1']}\n"
                ),
            },
        )
        f2 = make_tree(
            tmp_path / "f2",
            {
                "x.data.py": (
                    "async def get_data(*, old_data):\n"
                    "    return {'items': old_data['items'] + ['f2']}\n"
                ),
            },
        )
        callbacks: list = []
        render_template(f1, dest, callbacks)
        render_template(f2, dest, callbacks)

        data_store = collect_template_data(callbacks)
        render_data_templates(dest, data_store)

        assert (dest / "x").read_text() == "f1,f2\n"
        assert not (dest / "x.j2").exists()

    def test_first_provider_gets_empty_dict(self, tmp_path: Path, dest: Path, make_tree) -> None:
        """Test the first provider for a destination receives {}."""
        src = make_tree(
            tmp_path / "frag",
            {"y.data.py": "def get_data(*, old_data):\n    return {'seen': old_data}\n"},
        )
        callbacks: list = []
        render_template(src, dest, callbacks)
        assert collect_template_data(callbacks)[dest / "y"] == {"seen": {}}

    def test_provider_without_get_data(self, tmp_path: Path, dest: Path, make_tree) -> None:
        """Test a provider missing get_data fails when collected."""
        src = make_tree(tmp_path / "frag", {"z.data.py": "VALUE = 1\n"})
        callbacks: list = []
        render_template(src, dest, callbacks)
        with pytest.raises(AttributeError, match="get_data"):
            collect_template_data(callbacks)

    def test_no_bytecode_written_to_fragment(
        self, tmp_path: Path, dest: Path, make_tree
    ) -> None:
        """Test loading a provider leaves the fragment directory clean."""
        frag = make_tree(
            tmp_path / "frag",
            {"w.data.py": "def get_data(*, old_data):\n    return {}\n"},
        )
        callbacks: list = []
        render_template(frag, dest, callbacks)
        collect_template_data(callbacks)
        assert not (frag / "__pycache__").exists()

    def test_no_callbacks(self) -> None:
        """Test an empty callback list yields an empty store."""
        assert collect_template_data([]) == {}


# =============================================================================
# Template Rendering Tests
# =============================================================================

class TestTemplateRendering:
    """Tests for render_data_templates."""

    def test_renders_without_data(self, dest: Path, make_tree) -> None:
        """Test templates with no provider render against an empty context."""
        make_tree(dest, {"src/hello.txt.j2": "Hello{% if name %} {{ name }}{% endif %}!\n"})
        rendered = render_data_templates(dest, {})
        assert rendered == [dest / "src" / "hello.txt"]
        assert (dest / "src" / "hello.txt").read_text() == "Hello!\n"

    def test_other_files_untouched(self, dest: Path, make_tree) -> None:
        """Test non-template files are not modified."""
        make_tree(dest, {"a.js": "{{ not_rendered }}"})
        render_data_templates(dest, {})
        assert (dest / "a.js").read_text() == "{{ not_rendered }}"

    def test_main_js_plugins(self, dest: Path) -> None:
        """Test the base entry template installs the given plugins."""
        render_template(FRAGMENTS_ROOT / "base" / "src", dest / "src", [])
        render_data_templates(
            dest,
            {dest / "src" / "main.js": {"imports": ["import router from './router'"], "plugins": ["router"]}},
        )
        main_js = (dest / "src" / "main.js").read_text()
        assert "import router from './router'" in main_js
        assert "app.use(router)" in main_js
        assert main_js.endswith("app.mount('#app')\n")

    def test_values_are_not_html_escaped(self, dest: Path, make_tree) -> None:
        """Test quotes and markup characters in data are written verbatim."""
        make_tree(dest, {"src/main.js.j2": "{% for line in imports %}{{ line }}\n{% endfor %}"})
        render_data_templates(
            dest,
            {dest / "src" / "main.js": {"imports": ["import { a } from 'b' // <c> & \"d\""]}},
        )
        main_js = (dest / "src" / "main.js").read_text()
        assert main_js == "import { a } from 'b' // <c> & \"d\"\n"
        assert "&#39;" not in main_js

    def test_non_mapping_data_raises(self, dest: Path, make_tree) -> None:
        """Test provider data that is not a mapping names the target file."""
        make_tree(dest, {"src/main.js.j2": "{{ value }}"})
        with pytest.raises(TypeError, match=r"main\.js returned list"):
            render_data_templates(dest, {dest / "src" / "main.js": ["not", "a", "mapping"]})
        assert (dest / "src" / "main.js.j2").exists()
