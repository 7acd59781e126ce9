"""CLI principale per consultare i dataset di relazioni."""

import click
import json
import logging
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.markup import escape

from ..config.settings import Config
from ..datasets.modes import DatasetMode
from ..datasets.registry import DatasetRegistry, build_registry, default_sources
from ..datasets.relation_table import RelationTable
from ..exceptions import StoryRelationsError, UnknownEntityError
from ..reports import compute_statistics, statistics_frame, to_edge_list

console = Console()
logger = logging.getLogger(__name__)

MODE_CHOICE = click.Choice(DatasetMode.values(), case_sensitive=False)


@click.group()
@click.option('--config', '-c', default='config/config.yaml', help='Path al file di configurazione')
@click.option('--verbose', '-v', is_flag=True, help='Log a livello DEBUG')
@click.pass_context
def cli(ctx, config, verbose):
    """📚 Dataset di relazioni tra personaggi e luoghi."""
    ctx.ensure_object(dict)
    try:
        ctx.obj['config'] = Config.load(config)
    except StoryRelationsError as e:
        console.print(f"[red]Configurazione non valida ({config}): {escape(str(e))}[/red]")
        ctx.exit(1)

    level_name = 'DEBUG' if verbose else ctx.obj['config'].logging.level
    level = getattr(logging, level_name.upper(), None)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level)
    logging.getLogger('story_relations').setLevel(level)


def load_registry(ctx) -> DatasetRegistry:
    """Costruisce il registro o termina con errore."""
    config = ctx.obj['config']
    try:
        return build_registry(config)
    except StoryRelationsError as e:
        console.print(f"[red]Errore nel caricamento dati: {escape(str(e))}[/red]")
        ctx.exit(1)


@cli.command()
@click.pass_context
def modes(ctx):
    """🗂️  Elenca le modalità disponibili."""
    registry = load_registry(ctx)

    table = Table(title="🗂️  Modalità", show_header=True, header_style="bold cyan")
    table.add_column("Modalità", style="cyan")
    table.add_column("Sorgente", style="white")
    table.add_column("Entità", style="green", justify="right")
    table.add_column("Relazioni", style="yellow", justify="right")

    for mode in registry.modes:
        relations = registry[mode]
        table.add_row(
            mode.value,
            registry.source_of(mode) or "N/A",
            str(len(relations)),
            str(relations.relation_count()),
        )

    console.print(table)


@cli.command()
@click.argument('mode', type=MODE_CHOICE)
@click.option('--entity', '-e', default=None, help='Mostra solo questa entità')
@click.option('--limit', '-n', default=None, type=click.IntRange(min=1), help='Numero massimo di righe')
@click.pass_context
def show(ctx, mode, entity, limit):
    """🔎 Mostra la tabella di relazioni di una modalità."""
    config = ctx.obj['config']
    registry = load_registry(ctx)
    relations = registry[mode]

    if entity is not None:
        try:
            related = relations.related(entity)
        except UnknownEntityError as e:
            console.print(f"[red]{escape(str(e))}[/red]")
            ctx.exit(1)
        console.print(Panel(
            "\n".join(f"• {name}" for name in related) or "[dim](nessuna relazione)[/dim]",
            title=f"{entity} | {mode}",
        ))
        return

    display_relation_table(
        relations,
        title=f"🔎 {mode}",
        max_rows=limit if limit is not None else config.display.max_rows,
        max_related=config.display.max_related,
    )


@cli.command()
@click.argument('mode', type=MODE_CHOICE, required=False)
@click.pass_context
def stats(ctx, mode):
    """📈 Statistiche per una o tutte le modalità."""
    registry = load_registry(ctx)

    if mode is None:
        display_statistics_frame(registry)
        return

    s = compute_statistics(registry[mode])

    table = Table(title=f"📈 Statistiche {mode}", show_header=True, header_style="bold magenta")
    table.add_column("Metrica", style="magenta")
    table.add_column("Valore", style="green")

    table.add_row("Entità", str(s.entities))
    table.add_row("Relazioni", str(s.relations))
    table.add_row("Grado medio", f"{s.avg_degree:.2f}")
    table.add_row("Grado massimo", str(s.max_degree))
    table.add_row("Liste vuote", ", ".join(s.empty_entities) or "-")
    table.add_row("Target non censiti", ", ".join(s.dangling_targets) or "-")
    table.add_row("Top entità", ", ".join(f"{n} ({d})" for n, d in s.top_entities) or "-")

    console.print(table)


@cli.command()
@click.argument('mode', type=MODE_CHOICE)
@click.option('--output', '-o', required=True, help='File di output')
@click.option('--format', '-f', 'fmt', default='csv',
              type=click.Choice(['csv', 'json']), help='csv = lista archi, json = tabella')
@click.pass_context
def export(ctx, mode, output, fmt):
    """💾 Esporta una modalità su file."""
    registry = load_registry(ctx)
    relations = registry[mode]

    if fmt == 'csv':
        to_edge_list(relations).to_csv(output, index=False)
    else:
        with open(output, 'w', encoding='utf-8') as f:
            json.dump(relations.to_dict(), f, indent=2, ensure_ascii=False)

    logger.info(f"Esportato {mode} in {output}")
    console.print(f"[green]✅ {mode} esportato in {output}[/green]")


@cli.command()
@click.pass_context
def validate(ctx):
    """✅ Verifica che tutte le sorgenti siano caricabili e valide."""
    config = ctx.obj['config']
    failures = 0

    for mode, source in default_sources(config.data).items():
        try:
            relations = RelationTable.from_dict(source.load(), name=source.description)
        except StoryRelationsError as e:
            failures += 1
            console.print(f"[red]✗ {mode.value}: {escape(str(e))}[/red]")
            continue
        console.print(f"[green]✓ {mode.value}[/green]: {len(relations)} entità ({source.description})")

    if failures:
        console.print(f"\n[red]{failures} sorgenti non valide[/red]")
        ctx.exit(1)

    console.print("\n[green]Tutte le sorgenti sono valide.[/green]")


@cli.command('init-config')
@click.option('--output', '-o', default='config/config.yaml', help='Dove scrivere la configurazione')
@click.pass_context
def init_config(ctx, output):
    """⚙️  Scrive la configurazione corrente su file YAML."""
    ctx.obj['config'].save(output)
    console.print(f"[green]✅ Configurazione salvata in {output}[/green]")


# ============ Funzioni Helper ============

def display_relation_table(relations: RelationTable, title: str,
                           max_rows: int, max_related: int):
    """Mostra una tabella di relazioni."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Entità", style="cyan")
    table.add_column("N.", style="yellow", justify="right")
    table.add_column("Collegate", style="white")

    for entity in relations.entities[:max_rows]:
        related = relations[entity]
        shown = ", ".join(related[:max_related])
        if len(related) > max_related:
            shown += f", … (+{len(related) - max_related})"
        table.add_row(entity, str(len(related)), shown)

    console.print(table)

    if len(relations) > max_rows:
        console.print(f"[dim]Mostrate {max_rows} di {len(relations)} entità[/dim]")


def display_statistics_frame(registry: DatasetRegistry):
    """Mostra le statistiche di tutte le modalità."""
    df = statistics_frame(registry)

    table = Table(title="📈 Statistiche Dataset", show_header=True, header_style="bold magenta")
    table.add_column("Modalità", style="magenta")
    for col in df.columns:
        table.add_column(col, justify="right")

    for mode, row in df.iterrows():
        table.add_row(
            mode,
            *[f"{v:.2f}" if col == 'avg_degree' else str(int(v)) for col, v in row.items()]
        )

    console.print(table)


def main():
    """Entry point."""
    cli(obj={})


if __name__ == '__main__':
    main()
