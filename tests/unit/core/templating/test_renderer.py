from __future__ import annotations

"""
Unit tests for the Template Rendering Service.

Verifies:
1. Token substitution order and in-place rewriting.
2. Rendering of bundled templates.
3. Static file copies (dotfiles included).
4. Service name conversion.
"""

import os
from pathlib import Path

import pytest

from packager.core.templating.renderer import (
    FILES_DIR,
    TEMPLATES_DIR,
    convert_package_name_to_service_name,
    copy_static_file,
    render_template,
    replace_and_save,
    replace_tokens,
)
from packager.domain.constants import SKELETON_CLASS_TEMPLATE, STATIC_FILES, TEMPLATE_TARGETS


def test_replace_tokens_applies_mapping_in_order() -> None:
    """TC-01: Earlier replacements are visible to later ones."""
    text = replace_tokens(":a: and :b:", {":a:": ":b:", ":b:": "x"})
    assert text == "x and x"


def test_replace_and_save_in_place(tmp_path: Path) -> None:
    """TC-02: Without a destination the source file is rewritten."""
    target = tmp_path / "README.md"
    target.write_text("# :vendor/:package_name\n", encoding="utf-8")

    written = replace_and_save(str(target), {":vendor": "acme", ":package_name": "blog"})

    assert written == str(target)
    assert target.read_text(encoding="utf-8") == "# acme/blog\n"


def test_replace_and_save_to_new_file(tmp_path: Path) -> None:
    source = tmp_path / "in.txt"
    source.write_text("hello :name:", encoding="utf-8")
    dest = tmp_path / "out.txt"

    replace_and_save(str(source), {":name:": "world"}, str(dest))

    assert dest.read_text(encoding="utf-8") == "hello world"
    assert source.read_text(encoding="utf-8") == "hello :name:"


def test_render_facade_template(tmp_path: Path) -> None:
    """TC-03: Bundled templates render with every token replaced."""
    output = tmp_path / "Blog.php"
    tokens = {
        ":package_name:": "Blog",
        ":facade_namespace:": "Acme\\Blog\\Facades",
        ":service_name:": "blog",
    }

    render_template("facade_template.txt", tokens, str(output))

    content = output.read_text(encoding="utf-8")
    assert "namespace Acme\\Blog\\Facades;" in content
    assert "class Blog extends Facade" in content
    assert "return 'blog';" in content
    assert ":package_name:" not in content


def test_render_template_requires_existing_directory(tmp_path: Path) -> None:
    """No directories are created on the caller's behalf."""
    with pytest.raises(FileNotFoundError):
        render_template(SKELETON_CLASS_TEMPLATE, {}, str(tmp_path / "missing" / "X.php"))


def test_template_catalogue_is_bundled() -> None:
    """TC-04: Every catalogued template and static file ships with the package."""
    for target in TEMPLATE_TARGETS:
        assert os.path.isfile(os.path.join(TEMPLATES_DIR, target["template"]))
    assert os.path.isfile(os.path.join(TEMPLATES_DIR, SKELETON_CLASS_TEMPLATE))
    for name in STATIC_FILES:
        assert os.path.isfile(os.path.join(FILES_DIR, name))


def test_copy_static_dotfile(tmp_path: Path) -> None:
    dest = copy_static_file(".gitignore", str(tmp_path))
    assert dest == os.path.join(str(tmp_path), ".gitignore")
    assert Path(dest).read_bytes() == Path(FILES_DIR, ".gitignore").read_bytes()


@pytest.mark.parametrize("name, expected", [
    ("MyPackage", "my.package"),
    ("HTTPClient", "http.client"),
    ("Blog", "blog"),
    ("UserAPI", "user.api"),
    ("lowercase", "lowercase"),
])
def test_convert_package_name_to_service_name(name: str, expected: str) -> None:
    """TC-05: Each uppercase run opens a new dotted segment."""
    assert convert_package_name_to_service_name(name) == expected
