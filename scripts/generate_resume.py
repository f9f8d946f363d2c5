#!/usr/bin/env python3
"""
Resume Generation CLI

Renders resume JSON into HTML templates and generates PDFs using the templating
and rendering contexts.

Commands:
    render    - Render resume JSON to an HTML file
    pdf       - Render resume JSON and generate a PDF
    batch     - Generate PDFs for several resume JSON files
    print     - Open the rendered resume in a browser print dialog
    templates - List available templates
    validate  - Check resume JSON for required fields

Examples:\n

    generate_resume.py render data/sample_resume.json                     # HTML with template1

    generate_resume.py pdf data/sample_resume.json --template template2   # Single tall page

    generate_resume.py pdf data/sample_resume.json --mode a4              # Paginated A4

    generate_resume.py batch data/*.json --delay 2                        # Several resumes
"""

import asyncio
import json
import os
from pathlib import Path
from typing import List, Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from vitae.contexts.rendering import (
    PageMode,
    RasterizationError,
    batch_generate,
    load_rasterizer_options,
    open_pdf_generator,
    resume_filename,
)
from vitae.contexts.rendering.logger import setup_rendering_logger
from vitae.contexts.rendering.preview import print_fallback
from vitae.contexts.templating import (
    InvalidResumeDataError,
    MissingDataError,
    ResumeRecord,
    ResumeSession,
    TemplateLoadError,
    TemplateRenderError,
    validate_resume_data,
)
from vitae.contexts.templating.logger import setup_templating_logger
from vitae.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("VITAE_LOGS_PATH", "outs/logs"))
OUTPUT_PATH = Path(os.getenv("VITAE_OUTPUT_PATH", "outs/results"))


app = typer.Typer(
    help="Render resume JSON into HTML templates and generate PDFs",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _open_session(template: str, escape: bool = False) -> ResumeSession:
    """Load templates and select one, exiting on failure."""
    try:
        session = ResumeSession.initialize(escape=escape)
    except TemplateLoadError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if not session.set_template(template):
        typer.secho(
            f"Error: unknown template '{template}'. Available: {session.available_templates()}\n",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(code=1)
    return session


def _render_file(session: ResumeSession, data_path: Path) -> str:
    """Render one resume JSON file with the session's current template."""
    try:
        session.set_resume_data(data_path.read_text(encoding="utf-8"))
        return session.generate_html()
    except (OSError, json.JSONDecodeError, TypeError, MissingDataError, TemplateRenderError) as e:
        typer.secho(f"Error rendering {data_path}: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


TemplateOption = Annotated[
    str, typer.Option("--template", "-t", help="Template name (see 'templates' command)")
]
EscapeOption = Annotated[
    bool, typer.Option("--escape", help="HTML-escape resume values (use for untrusted input)")
]
ModeOption = Annotated[
    PageMode,
    typer.Option("--mode", "-m", help="single_page: one page sized to content; a4: paginated A4"),
]
PresetOption = Annotated[
    Optional[List[str]],
    typer.Option("--preset", "-p", help="Rasterizer preset from pdf_presets.yaml (repeatable)"),
]


@app.command("render")
def render_command(
    data_path: Annotated[Path, typer.Argument(help="Resume JSON file", exists=True, dir_okay=False)],
    template: TemplateOption = "template1",
    out: Annotated[
        Optional[Path], typer.Option("--out", "-o", help="Output HTML path")
    ] = None,
    escape: EscapeOption = False,
):
    """
    Render resume JSON to an HTML file.

    Examples:\n

        $ generate_resume.py render data/sample_resume.json

        $ generate_resume.py render data/sample_resume.json -t template2 -o preview.html
    """
    setup_templating_logger(LOGS_PATH / f"template_{now()}", template_name=template)

    session = _open_session(template, escape=escape)
    html = _render_file(session, data_path)

    if out is None:
        out = OUTPUT_PATH / f"{data_path.stem}.html"
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(html, encoding="utf-8")

    typer.secho("✓ Rendered", fg=typer.colors.GREEN, bold=True)
    typer.echo(f"  HTML: {out}")


@app.command("pdf")
def pdf_command(
    data_path: Annotated[Path, typer.Argument(help="Resume JSON file", exists=True, dir_okay=False)],
    template: TemplateOption = "template1",
    filename: Annotated[
        Optional[str], typer.Option("--filename", "-f", help="Output PDF name")
    ] = None,
    mode: ModeOption = PageMode.SINGLE_PAGE,
    preset: PresetOption = None,
    escape: EscapeOption = False,
):
    """
    Render resume JSON and generate a PDF.

    Examples:\n

        $ generate_resume.py pdf data/sample_resume.json

        $ generate_resume.py pdf data/sample_resume.json --mode a4 -p margins_wide
    """
    setup_rendering_logger(LOGS_PATH / f"render_{now()}", page_mode=mode.value)

    session = _open_session(template, escape=escape)
    html = _render_file(session, data_path)
    if filename is None:
        filename = resume_filename(session.resume_data.personal_info.name)

    try:
        options = load_rasterizer_options(preset or [])
    except ValueError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    async def _generate():
        async with open_pdf_generator(output_dir=OUTPUT_PATH, options=options) as generator:
            return await generator.generate(html, filename=filename, mode=mode)

    try:
        result = asyncio.run(_generate())
    except RasterizationError as e:
        typer.secho(f"✗ PDF generation failed: {e}", fg=typer.colors.RED, bold=True)
        raise typer.Exit(code=1)

    typer.secho("✓ PDF generated", fg=typer.colors.GREEN, bold=True)
    typer.echo(f"  Page: {result.geometry.width_mm:.1f} x {result.geometry.height_mm:.1f} mm")
    typer.echo(f"  Pages: {result.page_count}")
    typer.echo(f"  PDF: {result.pdf_path}")


@app.command("batch")
def batch_command(
    data_paths: Annotated[
        List[Path], typer.Argument(help="Resume JSON files", exists=True, dir_okay=False)
    ],
    template: TemplateOption = "template1",
    mode: ModeOption = PageMode.SINGLE_PAGE,
    delay: Annotated[
        float, typer.Option("--delay", "-d", help="Seconds between generations", min=0)
    ] = 1.0,
):
    """
    Generate PDFs for several resumes, one at a time.

    Stops at the first failure; there are no retries.

    Examples:\n

        $ generate_resume.py batch data/*.json

        $ generate_resume.py batch data/*.json --delay 2 --mode a4
    """
    setup_rendering_logger(LOGS_PATH / f"batch_{now()}", page_mode=mode.value)

    session = _open_session(template)
    documents = []
    for data_path in data_paths:
        html = _render_file(session, data_path)
        documents.append((resume_filename(session.resume_data.personal_info.name), html))

    async def _generate():
        async with open_pdf_generator(output_dir=OUTPUT_PATH) as generator:
            return await batch_generate(generator, documents, mode=mode, delay_s=delay)

    try:
        results = asyncio.run(_generate())
    except RasterizationError as e:
        typer.secho(f"✗ Batch stopped: {e}", fg=typer.colors.RED, bold=True)
        raise typer.Exit(code=1)

    typer.secho(f"✓ Generated {len(results)} PDF(s)", fg=typer.colors.GREEN, bold=True)
    for result in results:
        typer.echo(f"  {result.pdf_path}")


@app.command("print")
def print_command(
    data_path: Annotated[Path, typer.Argument(help="Resume JSON file", exists=True, dir_okay=False)],
    template: TemplateOption = "template1",
):
    """Open the rendered resume in the system browser and show the print dialog."""
    setup_templating_logger(LOGS_PATH / f"print_{now()}", template_name=template)

    session = _open_session(template)
    print_fallback(_render_file(session, data_path))


@app.command("templates")
def templates_command():
    """List available templates."""
    setup_templating_logger(LOGS_PATH / f"templates_{now()}")

    session = _open_session("template1")
    for name in session.available_templates():
        marker = "*" if name == session.current_template else " "
        typer.echo(f" {marker} {name}")


@app.command("validate")
def validate_command(
    data_path: Annotated[Path, typer.Argument(help="Resume JSON file", exists=True, dir_okay=False)],
):
    """Check resume JSON for the fields a complete resume needs."""
    try:
        data = json.loads(data_path.read_text(encoding="utf-8"))
        validate_resume_data(data)
    except json.JSONDecodeError as e:
        typer.secho(f"✗ Invalid JSON: {e}", fg=typer.colors.RED, bold=True)
        raise typer.Exit(code=1)
    except InvalidResumeDataError as e:
        typer.secho(f"✗ {e}", fg=typer.colors.RED, bold=True)
        raise typer.Exit(code=1)

    record = ResumeRecord.from_dict(data)
    typer.secho("✓ Valid resume data", fg=typer.colors.GREEN, bold=True)
    typer.echo(f"  Name: {record.personal_info.name}")
    typer.echo(f"  Experience entries: {len(record.experience)}")


if __name__ == "__main__":
    app()
