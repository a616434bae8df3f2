"""
Repository layout and the built-in README templates.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional


@dataclass(frozen=True)
class DocsLayout:
    """Relative locations of every file the docs update reads or writes."""

    primary_readme: Path = Path("packages/span_builder/README.md")
    secondary_readme: Path = Path("packages/span_builder_test/README.md")
    output_readme: Path = Path("README.md")
    changelog: Path = Path("CHANGELOG.md")
    changelog_destinations: tuple = (
        Path("packages/span_builder/CHANGELOG.md"),
        Path("packages/span_builder_test/CHANGELOG.md"),
    )

    def resolve(self, path: Path, root: Optional[Path] = None) -> Path:
        return Path(root or Path.cwd()) / path


@dataclass(frozen=True)
class ReadmeTemplate:
    name: str
    body: str
    description: str = ""


DEFAULT_LAYOUT = DocsLayout()

TITLE = "# Span Builder For Flutter"

_TITLED_BODY = TITLE + "\n\n{{PRIMARY}}\n\n{{SECONDARY}}\n"

TEMPLATES: Dict[str, ReadmeTemplate] = {
    "plain": ReadmeTemplate(
        name="plain",
        body="{{PRIMARY}}\n\n{{SECONDARY}}\n",
        description="Both READMEs, no title",
    ),
    "titled": ReadmeTemplate(
        name="titled",
        body=_TITLED_BODY,
        description="Project title followed by both READMEs",
    ),
    "read_more": ReadmeTemplate(
        name="read_more",
        body=(
            _TITLED_BODY
            + "\n### Read More\n\n"
            "- [Make text styling more effective with RichText widget]"
            "(https://medium.com/flutter-community/make-text-styling-more-effective-with-richtext-widget-b0e0cb4771ef)"
            " by _Darshan Kawar_\n"
        ),
        description="Titled READMEs with a Read More link",
    ),
    "related_content": ReadmeTemplate(
        name="related_content",
        body=(
            _TITLED_BODY
            + "\n### Related Content\n\n"
            "- [Make text styling more effective with RichText widget]"
            "(https://medium.com/flutter-community/make-text-styling-more-effective-with-richtext-widget-b0e0cb4771ef)"
            " by _Darshan Kawar_\n"
            "- [RichText class](https://api.flutter.dev/flutter/widgets/RichText-class.html)\n"
            "- [TextSpan class](https://api.flutter.dev/flutter/painting/TextSpan-class.html)\n"
        ),
        description="Titled READMEs with a Related Content link list",
    ),
}

DEFAULT_TEMPLATE = "read_more"


def get_template(name: str) -> ReadmeTemplate:
    """Look up a built-in template by name."""
    try:
        return TEMPLATES[name]
    except KeyError:
        known = ", ".join(sorted(TEMPLATES))
        raise KeyError(f"Unknown template '{name}' (known: {known})") from None
