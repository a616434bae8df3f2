"""
Builds the root README from the package READMEs and copies the root
changelog into each package.
"""

import re
import shutil
from pathlib import Path
from typing import Dict, List, Optional

from loguru import logger

from readme_forge.config import DEFAULT_LAYOUT, DEFAULT_TEMPLATE, DocsLayout, ReadmeTemplate, get_template

PLACEHOLDER = re.compile(r"\{\{(\w+)\}\}")


def render_template(body: str, variables: Dict[str, str]) -> str:
    """Render a template body, replacing each ``{{KEY}}`` with its value.

    Substitution is done in a single pass, so placeholder-like text inside a
    value is written out as-is.
    """

    def _substitute(match: "re.Match") -> str:
        key = match.group(1)
        if key not in variables:
            raise KeyError(f"No value for template placeholder '{key}'")
        return str(variables[key])

    return PLACEHOLDER.sub(_substitute, body)


def build_readme(primary: str, secondary: str, template: Optional[ReadmeTemplate] = None) -> str:
    """Combine two README texts using the given template."""
    template = template or get_template(DEFAULT_TEMPLATE)
    return render_template(
        template.body,
        {
            "PRIMARY": primary.strip(),
            "SECONDARY": secondary.strip(),
        },
    )


def build_and_write_readme(
    root: Optional[Path] = None,
    layout: DocsLayout = DEFAULT_LAYOUT,
    template: Optional[ReadmeTemplate] = None,
) -> Path:
    """Read both package READMEs and overwrite the root README with the combined text."""
    primary = layout.resolve(layout.primary_readme, root).read_text(encoding="utf-8")
    secondary = layout.resolve(layout.secondary_readme, root).read_text(encoding="utf-8")

    readme = build_readme(primary, secondary, template)

    output = layout.resolve(layout.output_readme, root)
    with output.open("w", encoding="utf-8", newline="\n") as f:
        f.write(readme)
    logger.info(f"Wrote combined README to {output}")
    return output


def propagate_changelog(root: Optional[Path] = None, layout: DocsLayout = DEFAULT_LAYOUT) -> List[Path]:
    """Copy the root changelog into every package directory.

    All destinations are attempted; if any copy fails, the first error is
    raised once the others have been tried.
    """
    src = layout.resolve(layout.changelog, root)
    if not src.is_file():
        raise FileNotFoundError(f"Changelog not found: {src}")

    written: List[Path] = []
    first_error: Optional[OSError] = None
    for destination in layout.changelog_destinations:
        dest = layout.resolve(destination, root)
        try:
            shutil.copyfile(src, dest)
        except OSError as e:
            logger.error(f"Failed to copy {src} -> {dest}: {e}")
            if first_error is None:
                first_error = e
            continue
        logger.info(f"Copied {src} -> {dest}")
        written.append(dest)

    if first_error is not None:
        raise first_error
    return written


def update_docs(
    root: Optional[Path] = None,
    layout: DocsLayout = DEFAULT_LAYOUT,
    template: Optional[ReadmeTemplate] = None,
) -> None:
    """Regenerate the root README, then share the changelog with the packages."""
    build_and_write_readme(root, layout, template)
    propagate_changelog(root, layout)
