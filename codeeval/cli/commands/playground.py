"""Playground command implementation."""

from typing import Annotated

import typer
from rich.console import Console
from rich.markdown import Markdown

from codeeval.cli.utils.llm_command import get_config, initialize_llm_client
from codeeval.cli.utils.options import MODEL_OPTION
from codeeval.services.playground import PlaygroundService

console = Console()


def playground(
    prompt: Annotated[
        str | None,
        typer.Argument(help="Coding prompt to send (defaults to a sample data-science task)"),
    ] = None,
    model: MODEL_OPTION = None,
) -> None:
    """Send a coding prompt to the model and print the answer."""
    llm_client = initialize_llm_client(get_config())
    service = PlaygroundService(llm_client, model=model)

    with console.status("[bold blue]Generating...[/bold blue]", spinner="dots"):
        text = service.generate(prompt)

    console.print(Markdown(text))
