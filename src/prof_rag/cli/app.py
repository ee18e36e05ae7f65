"""Main CLI application for prof-rag."""

import asyncio
import json
from dataclasses import asdict
from typing import Any, NoReturn

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from prof_rag import __version__
from prof_rag.cli.options import (
    FormatChoice,
    FormatOption,
    MockOption,
    ThresholdOption,
    VerboseOption,
)
from prof_rag.config import get_config
from prof_rag.directory import FACULTY, expand_entries, faculty_entries, get_professor_suggestions
from prof_rag.exceptions import ProfRagError
from prof_rag.providers import MockEmbeddingProvider
from prof_rag.resolver import ResolutionResult, build_resolver
from prof_rag.search import FuzzyMatcher, MatchCandidate, generate_patterns
from prof_rag.utils.logging import setup_logging
from prof_rag.vectorstore import InMemoryVectorStore

app = typer.Typer(
    name="prof-rag",
    help="Fuzzy professor-name resolution and review retrieval",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"prof-rag version {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: VerboseOption = False,
) -> None:
    """Fuzzy professor-name resolution and review retrieval."""
    try:
        config = get_config()
    except ProfRagError as e:
        _fail(e)
    setup_logging(
        level="DEBUG" if verbose else config.logging.level,
        log_file=config.logging.file,
        json_format=config.logging.json_format,
    )


def _fail(error: ProfRagError) -> NoReturn:
    err_console.print(f"[red]Error:[/red] {error.user_message}")
    err_console.print(f"[dim]{error}[/dim]")
    raise typer.Exit(error.exit_code) from None


def _candidates_table(candidates: list[MatchCandidate], title: str = "Candidates") -> Table:
    table = Table(title=title)
    table.add_column("Id", style="cyan")
    table.add_column("Name")
    table.add_column("Distance", justify="right")
    for candidate in candidates:
        table.add_row(candidate.id, candidate.name, f"{candidate.score:.4f}")
    return table


@app.command()
def patterns(
    query: str = typer.Argument(..., help="User query."),
    format: FormatOption = FormatChoice.RICH,
) -> None:
    """Show the fuzzy search patterns generated for a query."""
    config = get_config()
    result = generate_patterns(
        query,
        honorifics=config.matching.honorifics,
        min_word_length=config.matching.min_word_length,
    )

    if format == FormatChoice.JSON:
        typer.echo(json.dumps(result, ensure_ascii=False))
        return

    if not result:
        console.print("[dim]No patterns[/dim]")
        return
    for pattern in result:
        console.print(f"  {pattern}")
    console.print(f"\n[dim]{len(result)} patterns[/dim]")


@app.command()
def match(
    query: str = typer.Argument(..., help="User query."),
    threshold: ThresholdOption = None,
    format: FormatOption = FormatChoice.RICH,
) -> None:
    """Fuzzy-match a query against the faculty list."""
    config = get_config()
    matching = config.matching
    if threshold is not None:
        matching = matching.model_copy(update={"threshold": threshold})

    directory = expand_entries(faculty_entries())
    matcher = FuzzyMatcher.from_config(matching)
    search_patterns = generate_patterns(
        query,
        honorifics=matching.honorifics,
        min_word_length=matching.min_word_length,
    )
    candidates = sorted(
        matcher.match_candidates(search_patterns, directory), key=lambda c: c.score
    )
    suggestions = matcher.suggestions(candidates, limit=matching.max_suggestions)

    if format == FormatChoice.JSON:
        data = {
            "candidates": [asdict(c) for c in candidates],
            "suggestions": suggestions,
        }
        typer.echo(json.dumps(data, ensure_ascii=False))
        return

    if not candidates:
        console.print("[dim]No matching professors[/dim]")
        return
    console.print(_candidates_table(candidates))
    console.print("\n[bold]Suggestions:[/bold] " + "; ".join(suggestions))


@app.command()
def suggest(
    text: str = typer.Argument(..., help="Part of a name or subject."),
    format: FormatOption = FormatChoice.RICH,
) -> None:
    """List professors whose name or subjects contain the text."""
    found = get_professor_suggestions(text)

    if format == FormatChoice.JSON:
        typer.echo(json.dumps(found, ensure_ascii=False))
        return

    if not found:
        console.print("[dim]No professors found[/dim]")
        return
    table = Table(title="Professors")
    table.add_column("Name", style="cyan")
    table.add_column("Subjects")
    for prof in found:
        table.add_row(prof["name"], ", ".join(prof["subjects"]))
    console.print(table)


def demo_vector_store(embedder: MockEmbeddingProvider) -> InMemoryVectorStore:
    """One synthetic review per faculty member, embedded with mock vectors."""
    vectors: list[dict[str, Any]] = []
    for entry, prof in zip(faculty_entries(), FACULTY, strict=True):
        subjects = ", ".join(prof["subjects"])
        vectors.append(
            {
                "id": f"review-{entry['id']}",
                "values": embedder.vector_for(f"{prof['name']} {subjects}"),
                "metadata": {
                    "professor_id": entry["id"],
                    "professor": prof["name"],
                    "subject": subjects,
                    "review": f"Teaches {subjects}.",
                },
            }
        )
    return InMemoryVectorStore(vectors)


def _print_resolution(result: ResolutionResult) -> None:
    if result.candidates:
        console.print(_candidates_table(result.candidates))
    else:
        console.print("[dim]No professor names recognized[/dim]")

    if result.suggestions:
        console.print("\n[bold]Suggestions:[/bold] " + "; ".join(result.suggestions))

    context = result.context
    if context.fell_back:
        subtitle = "unfiltered fallback"
    elif context.filtered:
        subtitle = "filtered by candidates"
    else:
        subtitle = "unfiltered"
    console.print(
        Panel(context.to_prompt(), title=f"Context ({len(context)} reviews)", subtitle=subtitle)
    )


@app.command()
def resolve(
    query: str = typer.Argument(..., help="User query."),
    mock: MockOption = False,
    format: FormatOption = FormatChoice.RICH,
) -> None:
    """Run the full resolution pipeline and show the retrieval context."""
    config = get_config()
    try:
        if mock:
            embedder = MockEmbeddingProvider(dimensions=config.embedding.dimensions)
            resolver = build_resolver(
                config, embedder=embedder, vector_store=demo_vector_store(embedder)
            )
        else:
            resolver = build_resolver(config)
        result = asyncio.run(resolver.resolve(query))
    except ProfRagError as e:
        _fail(e)

    if format == FormatChoice.JSON:
        data = {
            "query": result.query,
            "patterns": result.patterns,
            "candidates": [asdict(c) for c in result.candidates],
            "suggestions": result.suggestions,
            "context": {
                "records": [asdict(r) for r in result.context.records],
                "filtered": result.context.filtered,
                "fell_back": result.context.fell_back,
                "is_empty": result.context.is_empty,
            },
        }
        typer.echo(json.dumps(data, ensure_ascii=False))
        return

    _print_resolution(result)


@app.command("config")
def config_cmd(
    show_path: bool = typer.Option(
        False,
        "--path",
        "-p",
        help="Print only the config file path.",
    ),
) -> None:
    """Print the effective configuration (file values plus environment overrides)."""
    from prof_rag.config.defaults import get_config_path

    if show_path:
        console.print(str(get_config_path()))
        return

    config = get_config()
    console.print("[bold]prof-rag configuration[/bold]\n")
    console.print(f"Config file: {get_config_path()}")
    console.print(
        f"Embedding: {config.embedding.provider.value} "
        f"({config.embedding.model}, {config.embedding.dimensions} dims)"
    )
    console.print(
        f"Vector store: {config.vector_store.backend.value} "
        f"(index {config.vector_store.index_name}, top_k {config.vector_store.top_k})"
    )
    console.print(f"Match threshold: {config.matching.threshold}")
    console.print(
        "Cache TTL: "
        f"directory {config.cache.directory_ttl_seconds:g}s, "
        f"embeddings {config.cache.embedding_ttl_seconds:g}s"
    )
    console.print(
        f"Retries: {config.retry.max_retries} (base delay {config.retry.base_delay:g}s)"
    )


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
