import asyncio
import json
import logging
import random
from pathlib import Path
from typing import Optional

import typer

from wiki_race.adapters import LiveLinkOracle, StaticLinkOracle
from wiki_race.capabilities import ILinkOracle
from wiki_race.config import NavigatorConfig
from wiki_race.exceptions import WikiRaceException
from wiki_race.logging_config import setup_logging
from wiki_race.models import NavigationStep, NavigatorStatus, Task
from wiki_race.navigation import STRATEGIES, create_navigator, suggest_links
from wiki_race.utils.wiki_helpers import titles_equal
from wiki_race.wikipedia import select_random_task


app = typer.Typer(help="Race an automated navigator across Wikipedia links.")
logger = logging.getLogger(__name__)


@app.command()
def race(
    start: Optional[str] = typer.Option(None, "--start", help="Start article; random when omitted."),
    goal: Optional[str] = typer.Option(None, "--goal", help="Goal article; random when omitted."),
    strategy: Optional[str] = typer.Option(
        None,
        "--strategy",
        "-s",
        help=f"Path-finding strategy: {', '.join(STRATEGIES)}. Defaults to WIKI_RACE_STRATEGY or greedy.",
    ),
    max_attempts: Optional[int] = typer.Option(None, "--max-attempts", "-m", help="Greedy walk hop budget."),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for reproducible link choices."),
    fast: bool = typer.Option(False, "--fast", help="Skip the human-like pauses between steps."),
    graph: Optional[Path] = typer.Option(
        None,
        "--graph",
        exists=True,
        dir_okay=False,
        help="JSON article graph to race on offline instead of the live API.",
    ),
    log_level: str = typer.Option("INFO", "--log-level", help="Log level."),
    plain_logs: bool = typer.Option(False, "--plain-logs", help="Plain log lines instead of rich output."),
):
    """
    Run a navigator from START to GOAL against the live Wikipedia API,
    or against a local article graph with --graph.
    """
    setup_logging(level=log_level, use_rich=not plain_logs)

    if graph and not (start and goal):
        raise typer.BadParameter("--graph needs both --start and --goal")
    if start and goal and titles_equal(start, goal):
        raise typer.BadParameter("--start and --goal must name different articles")

    updates = {}
    if strategy:
        if strategy not in STRATEGIES:
            raise typer.BadParameter(f"Unknown strategy '{strategy}'. Available: {list(STRATEGIES)}")
        updates["strategy"] = strategy
    if max_attempts:
        updates["max_attempts"] = max_attempts
    if fast:
        updates.update(step_delay_min=0.0, step_delay_max=0.0, expansion_delay=0.0)
    config = NavigatorConfig.from_env().model_copy(update=updates)

    oracle = load_graph_oracle(graph) if graph else None
    status = asyncio.run(run_race_async(config, start, goal, seed, oracle=oracle))
    if status is not NavigatorStatus.SUCCEEDED:
        raise typer.Exit(code=1)


@app.command()
def hint(
    current: str = typer.Argument(..., help="The article you are on."),
    goal: str = typer.Argument(..., help="The article you are heading for."),
    count: int = typer.Option(5, "--count", "-n", help="Number of links to suggest."),
):
    """Suggest the most promising links on CURRENT toward GOAL."""
    setup_logging(level="WARNING")
    oracle = LiveLinkOracle.from_config(NavigatorConfig.from_env())
    hints = asyncio.run(suggest_links(oracle, current, goal, limit=count))
    if not hints:
        typer.echo(f"No links found on '{current}'.")
        raise typer.Exit(code=1)
    for candidate in hints:
        typer.echo(f"{candidate.score:>5}  {candidate.article}")


@app.command()
def search(
    query: str = typer.Argument(..., help="Free-text query."),
    limit: int = typer.Option(10, "--limit", "-n", help="Maximum number of titles."),
):
    """Look up article titles matching QUERY."""
    setup_logging(level="WARNING")
    oracle = LiveLinkOracle.from_config(NavigatorConfig.from_env())
    try:
        titles = asyncio.run(oracle.service.search_titles(query, limit=limit))
    except WikiRaceException as e:
        typer.echo(f"Search failed: {e.message}")
        raise typer.Exit(code=1)
    for title in titles:
        typer.echo(title)


def load_graph_oracle(graph_file: Path) -> StaticLinkOracle:
    """
    Load an offline article graph. The file holds either a plain
    ``{title: [links]}`` mapping or ``{"links": {...}, "extracts": {...}}``.
    """
    with open(graph_file, encoding="utf-8") as f:
        data = json.load(f)
    if "links" in data and isinstance(data["links"], dict):
        return StaticLinkOracle(data["links"], extracts=data.get("extracts"))
    return StaticLinkOracle(data)


async def run_race_async(
    config: NavigatorConfig,
    start: Optional[str],
    goal: Optional[str],
    seed: Optional[int] = None,
    oracle: Optional[ILinkOracle] = None,
) -> NavigatorStatus:
    oracle = oracle or LiveLinkOracle.from_config(config)
    logger.info(f"Oracle: {oracle.get_capability_info()}")

    if start and goal:
        task = Task(start_page_title=start, target_page_title=goal)
    else:
        # A supplied title must not come back as its own random partner
        task = await select_random_task(oracle.service, exclude=[title for title in (start, goal) if title])
        if not task:
            logger.error("Could not retrieve a valid task. Exiting.")
            return NavigatorStatus.FAILED
        if start or goal:
            task = Task(
                start_page_title=start or task.start_page_title,
                target_page_title=goal or task.target_page_title,
            )

    def print_step(step: NavigationStep):
        typer.echo(f"{step.order:>3}. {step.article}  ({step.reasoning})")

    navigator = create_navigator(
        task.start_page_title,
        task.target_page_title,
        oracle,
        on_step=print_step,
        config=config,
        rng=random.Random(seed),
    )
    logger.info(f"Racing '{task.start_page_title}' -> '{task.target_page_title}' with {navigator.strategy_name}")

    await navigator.run()

    result = navigator.result()
    typer.echo(f"Status: {result.status.value}")
    typer.echo(f"Path: {' -> '.join(result.path_titles)}")
    typer.echo(f"Hops: {result.hops}  Oracle calls: {result.oracle_calls}  Duration: {result.duration_ms / 1000:.2f}s")
    return result.status


if __name__ == "__main__":
    app()
