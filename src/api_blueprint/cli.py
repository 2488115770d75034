"""CLI entry point for api-blueprint."""

from pathlib import Path

import click

from api_blueprint.config import get_settings
from api_blueprint.errors import DocumentationLoadError
from api_blueprint.log import configure_logging
from api_blueprint.model.base import Api
from api_blueprint.model.loader import load_documentation
from api_blueprint.renderer.blueprint import BlueprintRenderer


def _load(doc_path: Path) -> Api:
    try:
        return load_documentation(doc_path)
    except DocumentationLoadError as e:
        raise click.ClickException(str(e)) from e


@click.group()
@click.option("--log-level", default=None, help="Logging level (default from API_BLUEPRINT_LOG_LEVEL).")
@click.pass_context
def main(ctx: click.Context, log_level: str | None):
    """Render documentation trees into API Blueprint documents."""
    settings = get_settings()
    configure_logging(log_level or settings.log_level)
    ctx.obj = settings


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Output file path (default: stdout).")
@click.option("--scheme", default=None, help="URL scheme for the HOST line.")
@click.option("--host", default=None, help="Host for the HOST line.")
@click.option("--tag", default=None, help="Only render resource groups with this tag.")
@click.pass_obj
def render(settings, doc_path: Path, output: Path | None, scheme: str | None, host: str | None, tag: str | None):
    """Render an API Blueprint document from a documentation file."""
    api = _load(doc_path)
    document = BlueprintRenderer().render(
        api,
        scheme=scheme or settings.scheme,
        host=host or settings.host,
        tag=tag,
    )

    if output is None:
        click.echo(document, nl=False)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(document, encoding="utf-8")
    click.echo(f"API Blueprint saved to {output}", err=True)


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, path_type=Path))
@click.option("--tag", default=None, help="Only list resource groups with this tag.")
def groups(doc_path: Path, tag: str | None):
    """List the resource groups a render would include."""
    api = _load(doc_path)
    for group in api.resource_groups:
        if not group.matches_tag(tag):
            continue
        tags = ", ".join(group.tags)
        click.echo(f"{group.name} [{tags}]" if tags else group.name)
