#!/usr/bin/env python3
"""Regenerate the monorepo docs from the repository root.

Makes the combined root README out of the span_builder and
span_builder_test package READMEs, then copies the root CHANGELOG.md into
both packages.
"""

from pathlib import Path

from readme_forge.aggregator import update_docs


def main():
    """Run the docs update against the repository containing this script."""
    root = Path(__file__).parent.parent
    update_docs(root)
    print(f"Updated docs in {root}")


if __name__ == "__main__":
    main()
