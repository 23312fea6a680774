"""Typer CLI for elevation codes and BOM matching."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from elevations.application import ElevationCatalog, ElevationEditor, SaveElevationCommand
from elevations.application.config import (
    ConfigError,
    ElevationConfiguration,
    UnknownBomError,
    config_to_attributes,
    load_config,
    resolve_selection,
)
from elevations.application.data import load_sample_elevations
from elevations.cli.commands import (
    CatalogOption,
    display_load_error,
    resolve_catalog,
    validate_command,
)
from elevations.domain import OPTIONS, ElevationAttributes, generate_code, search_boms
from elevations.domain.services import (
    bom_statistics,
    elevation_statistics,
    filter_bom_catalog,
    filter_elevations,
    match_boms,
    missing_fields,
)
from elevations.domain.value_objects import (
    GLASS_GROOVES,
    LEAF_COUNTS,
    BomType,
    HingeDirection,
    InsectScreen,
    InterlockingStile,
    OpenDirection,
    Series,
    Sill,
    WindowType,
)
from elevations.infrastructure import (
    BomTableFormatter,
    DraftFormatter,
    EditorViewFormatter,
    ElevationTableFormatter,
    ExporterRegistry,
    ExportManager,
)

app = typer.Typer(
    name="elevations",
    help="Generate elevation codes and match BOMs for windows and doors.",
)

app.command(name="validate")(validate_command)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log debug output to stderr"),
    ] = False,
) -> None:
    """Elevation code generation and BOM matching."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


SeriesOption = Annotated[Series | None, typer.Option("--series", help="Product series")]
WindowTypeOption = Annotated[
    WindowType | None, typer.Option("--window-type", help="Window system code")
]
HingeOption = Annotated[
    HingeDirection | None, typer.Option("--hinge-direction", help="Hinge side")
]
OpenOption = Annotated[
    OpenDirection | None, typer.Option("--open-direction", help="Swing direction")
]
SillOption = Annotated[Sill | None, typer.Option("--sill", help="Sill profile")]
ScreenOption = Annotated[
    InsectScreen | None, typer.Option("--insect-screen", help="Insect screen option")
]
StileOption = Annotated[
    InterlockingStile | None,
    typer.Option("--interlocking-stile", help="Interlocking stile profile"),
]
ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Path to JSON configuration file"),
]


def _load_config_or_exit(config_file: Path) -> ElevationConfiguration:
    try:
        return load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)


def _attributes_from_options(
    config_file: Path | None,
    overrides: dict,
) -> ElevationAttributes:
    """Start from the config file (if any) and apply the CLI options set."""
    attrs = ElevationAttributes()
    if config_file is not None:
        attrs = config_to_attributes(_load_config_or_exit(config_file).elevation)

    if overrides.get("no_of_leaves") not in (None, *LEAF_COUNTS):
        typer.echo(
            f"Error: --leaves must be one of {', '.join(map(str, LEAF_COUNTS))}",
            err=True,
        )
        raise typer.Exit(code=1)
    if overrides.get("glass_groove") not in (None, *GLASS_GROOVES):
        typer.echo(
            f"Error: --glass-groove must be one of "
            f"{', '.join(map(str, GLASS_GROOVES))}",
            err=True,
        )
        raise typer.Exit(code=1)

    changes = {k: v for k, v in overrides.items() if v is not None}
    return attrs.with_changes(**changes)


@app.command()
def code(
    config_file: ConfigOption = None,
    series: SeriesOption = None,
    window_type: WindowTypeOption = None,
    leaves: Annotated[
        int | None,
        typer.Option("--leaves", help="Number of leaves: 1, 2, 3, 4, 6 or 8"),
    ] = None,
    hinge_direction: HingeOption = None,
    open_direction: OpenOption = None,
    sill: SillOption = None,
    glass_groove: Annotated[
        int | None,
        typer.Option("--glass-groove", help="Glass groove in mm: 18, 24, 28 or 32"),
    ] = None,
    insect_screen: ScreenOption = None,
    interlocking_stile: StileOption = None,
    big_opening: Annotated[
        bool | None,
        typer.Option("--big-opening/--no-big-opening", help="Big-opening variant"),
    ] = None,
) -> None:
    """Generate the elevation code for a set of attributes.

    Exits with code 1 and lists the missing fields when the attributes are
    incomplete.

    Examples:
        elevations code --series IWS --window-type SD --leaves 2 \\
            --hinge-direction R --open-direction IN --sill Step \\
            --insect-screen IS --interlocking-stile A --big-opening
        elevations code --config sliding-door.json --leaves 4
    """
    attrs = _attributes_from_options(
        config_file,
        {
            "series": series,
            "window_type": window_type,
            "no_of_leaves": leaves,
            "hinge_direction": hinge_direction,
            "open_direction": open_direction,
            "sill": sill,
            "glass_groove": glass_groove,
            "insect_screen": insect_screen,
            "interlocking_stile": interlocking_stile,
            "big_opening": big_opening,
        },
    )

    result = generate_code(attrs)
    if not result:
        typer.echo(
            f"Error: Incomplete attributes, missing: {', '.join(missing_fields(attrs))}",
            err=True,
        )
        raise typer.Exit(code=1)
    typer.echo(result)


@app.command()
def match(
    series: Annotated[
        str | None, typer.Option("--series", help="Series code to match")
    ] = None,
    window_system: Annotated[
        str | None,
        typer.Option("--window-system", "--window-type", help="Window system to match"),
    ] = None,
    open_direction: Annotated[
        str | None, typer.Option("--open-direction", help="Handing to match")
    ] = None,
    bom_type: Annotated[
        str,
        typer.Option("--type", "-t", help="BOM type: outer, inner or all"),
    ] = "all",
    search: Annotated[
        str,
        typer.Option("--search", "-s", help="Filter by BOM code or handle type"),
    ] = "",
    no_auto_match: Annotated[
        bool,
        typer.Option("--no-auto-match", help="List the whole catalog instead of matches"),
    ] = False,
    config_file: ConfigOption = None,
    catalog_file: CatalogOption = None,
) -> None:
    """List the BOMs matching series, window system and open direction.

    The three drivers are compared exactly. With --config they are taken
    from the elevation in the file, and any option given here overrides them.

    Examples:
        elevations match --series IWS --window-system SD --open-direction L
        elevations match --config sliding-door.json --search lock
        elevations match --no-auto-match --type inner --search 510
    """
    if bom_type not in ("all", BomType.OUTER.value, BomType.INNER.value):
        typer.echo("Error: --type must be one of outer, inner, all", err=True)
        raise typer.Exit(code=1)

    config = _load_config_or_exit(config_file) if config_file is not None else None
    try:
        catalog = resolve_catalog(config, catalog_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    attrs = config_to_attributes(config.elevation) if config else ElevationAttributes()
    drivers = {
        "series": series if series is not None else attrs.series,
        "window_system": (
            window_system if window_system is not None else attrs.window_type
        ),
        "open_direction": (
            open_direction if open_direction is not None else attrs.open_direction
        ),
    }

    formatter = BomTableFormatter()
    sections = []
    for kind in (BomType.OUTER, BomType.INNER):
        if bom_type not in ("all", kind.value):
            continue
        records = catalog.by_type(kind)
        base = records if no_auto_match else match_boms(records, **drivers)
        found = search_boms(base, search)
        sections.append(formatter.format(found, f"{kind.value.upper()} BOMS"))

    typer.echo(
        f"Matching series={drivers['series'] or '-'} "
        f"window_system={drivers['window_system'] or '-'} "
        f"open_direction={drivers['open_direction'] or '-'}"
        + (" (auto-match off)" if no_auto_match else "")
    )
    typer.echo()
    typer.echo("\n\n".join(sections))


@app.command()
def save(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the elevation configuration file"),
    ],
    catalog_file: CatalogOption = None,
    output_formats: Annotated[
        str | None,
        typer.Option(
            "--format",
            "-f",
            help="Comma-separated export formats for the elevation list: json,csv (or 'all')",
        ),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", "-o", help="Output directory for exported files"),
    ] = None,
    project_name: Annotated[
        str,
        typer.Option("--project-name", help="Base name of exported files"),
    ] = "elevations",
) -> None:
    """Save the elevation in a configuration file as a new catalog entry.

    The elevation is added to the bundled sample list for the duration of
    the command. With --format, the resulting list is exported.

    Examples:
        elevations save sliding-door.json
        elevations save sliding-door.json --format json,csv --output-dir ./out
    """
    config = _load_config_or_exit(config_file)
    try:
        catalog = resolve_catalog(config, catalog_file)
        outer_bom, inner_bom = resolve_selection(config.elevation, catalog)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)
    except UnknownBomError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    store = ElevationCatalog(load_sample_elevations())
    command = SaveElevationCommand(store)
    result = command.execute(
        config_to_attributes(config.elevation),
        config.elevation.name,
        outer_bom,
        inner_bom,
        status=config.elevation.status,
    )

    if not result.saved:
        typer.echo(f"Error: {result.validation.message}", err=True)
        raise typer.Exit(code=1)

    typer.echo(DraftFormatter().format(result.draft))

    if output_formats:
        _export(output_formats, output_dir, project_name, store)


def _export(
    output_formats: str,
    output_dir: Path | None,
    project_name: str,
    store: ElevationCatalog,
) -> None:
    if output_formats.lower() == "all":
        formats = ExporterRegistry.available_formats()
    else:
        formats = [f.strip().lower() for f in output_formats.split(",") if f.strip()]

    available = ExporterRegistry.available_formats()
    invalid = [f for f in formats if f not in available]
    if invalid:
        typer.echo(f"Unknown formats: {', '.join(invalid)}", err=True)
        typer.echo(f"Available formats: {', '.join(available)}", err=True)
        raise typer.Exit(code=1)

    manager = ExportManager(output_dir or Path("."))
    try:
        files = manager.export_all(formats, store.records(), project_name)
    except OSError as e:
        typer.echo(f"Export error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo("\nExported files:")
    for fmt, path in files.items():
        typer.echo(f"  {fmt.upper()}: {path}")


@app.command()
def edit(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the elevation configuration file"),
    ],
    catalog_file: CatalogOption = None,
) -> None:
    """Show the editor view for a configuration file.

    Prints the generated code, the BOM candidates offered for selection and
    whether the elevation can be saved.
    """
    config = _load_config_or_exit(config_file)
    try:
        catalog = resolve_catalog(config, catalog_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    elevation = config.elevation
    editor = ElevationEditor(
        catalog,
        attributes=config_to_attributes(elevation),
        name=elevation.name,
        auto_match=elevation.auto_match,
        search_term=elevation.bom_search,
    )
    try:
        editor.select_bom(BomType.OUTER, elevation.outer_bom_id)
        editor.select_bom(BomType.INNER, elevation.inner_bom_id)
    except KeyError as e:
        typer.echo(f"Error: {e.args[0]}", err=True)
        raise typer.Exit(code=1)

    view = editor.view()
    typer.echo(EditorViewFormatter().format(view))
    typer.echo()
    typer.echo(f"Ready to save: {'yes' if view.can_save else 'no'}")
    if not view.can_save and view.validation is not None:
        typer.echo(f"  {view.validation.message}")


@app.command(name="list")
def list_elevations(
    search: Annotated[
        str,
        typer.Option("--search", "-s", help="Search code, name, series and type"),
    ] = "",
    series: Annotated[
        str, typer.Option("--series", help="Series code or 'all'")
    ] = "all",
    window_type: Annotated[
        str, typer.Option("--window-type", help="Window type code or 'all'")
    ] = "all",
) -> None:
    """List the sample elevation catalog."""
    records = list(load_sample_elevations())
    found = filter_elevations(records, search, series=series, window_type=window_type)
    formatter = ElevationTableFormatter()
    typer.echo(formatter.format(found))
    typer.echo(formatter.format_statistics(elevation_statistics(records)))


@app.command()
def boms(
    search: Annotated[
        str,
        typer.Option("--search", "-s", help="Search code, name, series and system"),
    ] = "",
    bom_type: Annotated[
        str, typer.Option("--type", "-t", help="outer, inner, connector or 'all'")
    ] = "all",
    series: Annotated[
        str, typer.Option("--series", help="Series code or 'all'")
    ] = "all",
    catalog_file: CatalogOption = None,
) -> None:
    """List the BOM catalog."""
    if bom_type != "all" and bom_type not in {t.value for t in BomType}:
        typer.echo("Error: --type must be one of outer, inner, connector, all", err=True)
        raise typer.Exit(code=1)
    try:
        catalog = resolve_catalog(catalog_file=catalog_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    records = catalog.all_records()
    found = filter_bom_catalog(records, search, bom_type=bom_type, series=series)
    stats = bom_statistics(records)
    typer.echo(BomTableFormatter().format(found, "BOM CATALOG"))
    by_type = ", ".join(f"{k}: {v}" for k, v in stats["by_type"].items())
    typer.echo(f"Total: {stats['total']}  |  Active: {stats['active']}  |  {by_type}")


@app.command()
def options() -> None:
    """Show the allowed values for every elevation attribute."""
    width = max(len(name) for name in OPTIONS)
    for name, values in OPTIONS.items():
        typer.echo(f"{name:<{width}}  {', '.join(str(v) for v in values)}")


if __name__ == "__main__":
    app()
