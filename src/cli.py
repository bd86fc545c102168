#!/usr/bin/env python3
"""
BillBot Statement Analyzer CLI
"""
import asyncio
import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table
from rich.panel import Panel

from api.v1.dependencies import get_statement_store, get_analyze_use_case
from application.session import StatementSession
from application.use_cases.load_statement import LoadStatementUseCase
from domain.entities.analysis import AnalysisQuery
from domain.enums import Intent
from domain.exceptions import StatementAnalyzerError
from infrastructure.analysis.summarizer import StatementSummarizer
from infrastructure.ingestion import get_statement_ingestor
from config import settings

console = Console()

EXAMPLE_QUERIES = [
    "What are my spending patterns?",
    "How is my income?",
    "Help me with a budget",
]


def _use_case() -> LoadStatementUseCase:
    return LoadStatementUseCase(store=get_statement_store(), session=StatementSession())


def _fail(message: str) -> None:
    console.print(f"[bold red]Error:[/bold red] {message}")
    sys.exit(1)


@click.group()
@click.version_option(version="1.0.0")
@click.option('--verbose', '-v', is_flag=True, help='Show debug logging (including analysis prompts)')
def cli(verbose: bool):
    """
    BillBot - ask questions about your bank statement

    Load a statement (JSON, CSV, or a scanned PDF/image), then ask about
    spending, income or budgeting.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.LOG_LEVEL,
        format="%(levelname)s [%(name)s] %(message)s"
    )


@cli.command()
@click.argument('statement_file', type=click.Path(exists=True, dir_okay=False))
def load(statement_file: str):
    """
    Load a statement file as the current statement.

    Example:
        billbot load statement.csv
    """
    try:
        ingestor = get_statement_ingestor(statement_file)
        result = asyncio.run(_use_case().execute(ingestor, statement_file, Path(statement_file).name))
    except StatementAnalyzerError as e:
        _fail(str(e))

    statement = result.statement
    console.print(f"[green]✓[/green] Loaded {statement.file_name} ({statement.transaction_count} transactions)")

    if not result.persisted:
        console.print(f"[yellow]Warning:[/yellow] not saved, kept for this run only ({result.persistence_error})")


@cli.command()
def show():
    """Show the current statement summary."""
    use_case = _use_case()

    try:
        statement = asyncio.run(use_case.restore())
    except StatementAnalyzerError as e:
        _fail(str(e))

    if statement is None:
        _fail("No statement loaded. Run 'billbot load <file>' first.")

    summary = StatementSummarizer(recent_rows_limit=settings.RECENT_ROWS_LIMIT).summarize(statement)

    table = Table(title=f"Statement Summary: {statement.file_name}", show_header=True)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("Period", f"{statement.first_date} to {statement.last_date}")
    table.add_row("Total Transactions", str(statement.transaction_count))
    table.add_row("Balance", f"${statement.total:,.2f}")
    table.add_row("Total Income", f"${summary.total_income:,.2f}")
    table.add_row("Total Expenses", f"${summary.total_expenses:,.2f}")
    table.add_row("Net Cash Flow", f"${summary.net_cash_flow:,.2f}")

    console.print(table)

    if summary.category_totals:
        categories = Table(title="By Category", show_header=True)
        categories.add_column("Category", style="cyan")
        categories.add_column("Amount", style="magenta", justify="right")
        for name, total in summary.sorted_categories():
            categories.add_row(name, f"${total:,.2f}")
        console.print(categories)


@cli.command()
@click.argument('query')
def ask(query: str):
    """
    Ask a question about the current statement.

    Example:
        billbot ask "What are my spending patterns?"
    """
    use_case = _use_case()

    async def _ask():
        await use_case.restore()
        return await get_analyze_use_case().execute(AnalysisQuery(query=query), use_case.session.current)

    try:
        result = asyncio.run(_ask())
    except StatementAnalyzerError as e:
        _fail(str(e))

    style = "red" if result.failed else "green"
    console.print(Panel(result.response, title="Answer", style=style))

    for insight in result.insights:
        console.print(f"  • {insight}")

    if result.intent == Intent.GENERIC:
        console.print("\n[dim]Try:[/dim]")
        for example in EXAMPLE_QUERIES:
            console.print(f"[dim]  billbot ask \"{example}\"[/dim]")


@cli.command()
def clear():
    """Forget the current statement."""
    try:
        asyncio.run(_use_case().clear())
    except StatementAnalyzerError as e:
        _fail(str(e))

    console.print("[green]✓[/green] Statement cleared")


if __name__ == '__main__':
    cli()
