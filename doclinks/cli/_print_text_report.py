"""Plain-text link report for CI logs."""

import typer

from doclinks.templating import render_template

REPORT_TEMPLATE = """\
{% if errors %}
{% for error in errors %}
Error: {{ error }}
{% endfor %}
{% elif broken_links %}
Broken links:
{% for link in broken_links %}
{{ link.source_document }} → {{ link.target }}
{% endfor %}
{{ broken_links|length }} broken {{ "link"|pluralize(broken_links|length) }}
{% else %}
All links valid
{% endif %}
"""


def _print_text_report(output: dict) -> None:
    """Print the link check output as ``<file> → <target>`` lines."""
    text = render_template(
        REPORT_TEMPLATE,
        {"errors": output.get("errors", []), "broken_links": output.get("broken_links", [])},
    )
    typer.echo(text, nl=False)
