"""Badge URL rendering."""


def build_url(template: str, label: str, color: str) -> str:
    """Substitute ``{{status}}`` and ``{{color}}`` into a badge service template.

    Values are inserted verbatim; status words and color names are URL-safe.
    """
    return template.replace("{{status}}", label).replace("{{color}}", color)
