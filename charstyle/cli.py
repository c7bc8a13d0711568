"""Command line interface for the style customizer"""
import click

from .common_imports import *
from .core.classifier import classify
from .core.sinks import FileSink, BodyClassList
from .core.style_aggregator import StyleAggregator
from .models.entity import entity_marker_class
from .utils.file_manager import SettingsManager


@click.group()
@click.version_option(package_name="charstyle")
def cli():
    """Character Style Customizer - generate chat theme CSS from style settings."""


@cli.command()
@click.argument("settings_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--out-dir", "-o", type=click.Path(file_okay=False, path_type=Path),
              default=Path("build"), show_default=True, help="Directory for main.css and global.css")
@click.option("--active", "active_entity", default=None,
              help="Entity id whose global CSS should be active")
def build(settings_file: Path, out_dir: Path, active_entity: Optional[str]):
    """Generate main.css (and global.css for the active entity) from SETTINGS_FILE."""
    manager = SettingsManager(settings_file)
    body = BodyClassList()
    aggregator = StyleAggregator(
        main_sink=FileSink(out_dir / "main.css"),
        global_sink=FileSink(out_dir / "global.css"),
        body=body,
    )

    css = aggregator.rebuild_main_stylesheet(manager.settings)
    if manager.settings.enabled and active_entity:
        aggregator.apply_global_freeform_css(manager.settings, active_entity)
    else:
        aggregator.clear_global_css()

    click.echo(f"✅ Wrote {len(css)} characters of CSS to {out_dir / 'main.css'}")
    if body.classes:
        click.echo(f"🎨 Body marker class: {body.class_name}")


@cli.command("classify")
@click.option("--user", "is_user", is_flag=True, help="Message was written by the user (persona)")
@click.option("--name", "display_name", default="", help="Author name shown on the message")
@click.option("--avatar", "avatar_src", required=True, help="src of the message avatar image")
def classify_command(is_user: bool, display_name: str, avatar_src: str):
    """Print the entity id a message with these attributes is tagged with."""
    entity_id = classify(is_user, display_name, avatar_src)
    if not entity_id:
        click.echo("❌ Could not derive an entity id from this avatar", err=True)
        sys.exit(1)
    click.echo(entity_id)


@cli.command()
@click.argument("entity_id")
def marker(entity_id: str):
    """Print the body marker class used while ENTITY_ID's global CSS is active."""
    click.echo(entity_marker_class(entity_id))
