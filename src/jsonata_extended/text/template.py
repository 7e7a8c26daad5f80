"""Logic-less template rendering.

Implements the mustache() host function on top of chevron. Values are
HTML-escaped by ``{{name}}`` and inserted raw by ``{{{name}}}``, as in any
Mustache implementation.

Python 3.13+. Uses chevron.
"""

from __future__ import annotations

import chevron

from jsonata_extended.core import undefined_passthrough

__all__ = ["mustache"]


@undefined_passthrough
def mustache(value: object, template: str | None = None) -> object:
    """Render template against value.

    Args:
        value: Data object (None returns None)
        template: Mustache template; None returns value unchanged

    Returns:
        Rendered string, or value itself when no template is given

    Example:
        >>> mustache({"name": "Martin Holden", "role": "Learner"}, "{{name}} is a {{role}}")
        'Martin Holden is a Learner'
    """
    if template is None:
        return value
    return chevron.render(template, value)
