from pathlib import Path

import pytest

from readme_forge.config import DEFAULT_LAYOUT, DEFAULT_TEMPLATE, TEMPLATES, get_template


def test_default_template_exists():
    assert DEFAULT_TEMPLATE in TEMPLATES


@pytest.mark.parametrize("name", sorted(TEMPLATES))
def test_templates_keep_primary_before_secondary(name):
    body = TEMPLATES[name].body
    assert "{{PRIMARY}}\n\n{{SECONDARY}}" in body
    assert body.endswith("\n")


def test_get_template_unknown_name():
    with pytest.raises(KeyError) as exc_info:
        get_template("nope")
    assert "read_more" in exc_info.value.args[0]


def test_layout_resolves_against_root(tmp_path):
    assert DEFAULT_LAYOUT.resolve(DEFAULT_LAYOUT.output_readme, tmp_path) == tmp_path / "README.md"


def test_layout_paths_are_relative():
    paths = [
        DEFAULT_LAYOUT.primary_readme,
        DEFAULT_LAYOUT.secondary_readme,
        DEFAULT_LAYOUT.output_readme,
        DEFAULT_LAYOUT.changelog,
        *DEFAULT_LAYOUT.changelog_destinations,
    ]
    assert all(isinstance(p, Path) and not p.is_absolute() for p in paths)


def test_read_more_link_credit_stays_on_one_line():
    assert TEMPLATES["read_more"].body.endswith(" by _Darshan Kawar_\n")
