# Copyright Krafter SAS <developer@krafter.io>
# MIT License (see LICENSE file).

from fastsort.cli import command, argument, option, pass_cli_context, CliContext


@command()
@argument("values", nargs=-1)
@option("--qualifier", default=None, help="Qualifier of the sort parameter.")
@option(
    "--default",
    "defaults",
    multiple=True,
    help="Default sort expression used when the values give no sort (repeatable).",
)
@option("--json", "as_json", is_flag=True, help="Print the resolved sort as JSON.")
@pass_cli_context
def parse(
    ctx: CliContext,
    values: tuple[str, ...],
    qualifier: str | None,
    defaults: tuple[str, ...],
    as_json: bool,
):
    """Resolve sort parameter values the way a request would."""
    from fastsort.cli import console, echo, getCliLogger, Table
    from fastsort.params import SortParameterResolver
    from fastsort.schemas import SortSchema
    from fastsort.sort import parse_sort_values

    logger = getCliLogger("parse")
    resolver = SortParameterResolver.from_settings(ctx.settings)
    fallback = parse_sort_values(defaults, resolver.property_delimiter) or None
    sort = resolver.resolve(values, qualifier=qualifier, fallback=fallback)

    logger.debug(f"Resolved {len(sort)} order(s) from {len(values)} value(s)")

    if as_json:
        echo(SortSchema.from_sort(sort).model_dump_json())
        return

    table = Table(title=f"Sort parameter '{resolver.get_sort_parameter(qualifier)}'")
    table.add_column("#", style="dim")
    table.add_column("Property", style="cyan")
    table.add_column("Direction", style="green")

    for index, order in enumerate(sort, start=1):
        table.add_row(str(index), order.property, order.direction.name)

    if sort.is_unsorted:
        console.print("[yellow]Unsorted[/yellow]")
    else:
        console.print(table)


__all__ = [
    "parse",
]
