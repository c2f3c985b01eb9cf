"""
Console tracing with Rich.

Prints request and response panels when tracing is enabled on the settings
(or with FETCH_LAYERED_TRACE=1). Authorization-like headers are masked.
"""
import json
from typing import Any, Dict, Optional

from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax

from .core.request_builder import mask_headers
from .types import ResolvedRequest

console = Console(stderr=True)


def print_panel(content: str, title: Optional[str] = None) -> None:
    """Print content in a bordered box."""
    console.print(Panel(content, title=title))


def print_syntax_panel(code: str, lexer: str = "json", title: Optional[str] = None) -> None:
    """Print syntax-highlighted text in a panel."""
    console.print(Panel(Syntax(code, lexer, theme="monokai"), title=title, expand=True))


def _format_body(body: Any) -> str:
    """Format body for pretty printing."""
    if body is None:
        return ""
    if isinstance(body, (dict, list)):
        return json.dumps(body, indent=2, ensure_ascii=False)
    if isinstance(body, str):
        try:
            return json.dumps(json.loads(body), indent=2, ensure_ascii=False)
        except ValueError:
            return body
    return str(body)


def print_request(request: ResolvedRequest) -> None:
    request_info = f"[bold cyan]{request.method}[/bold cyan] {request.url}"
    print_panel(request_info, title="[bold blue]Request[/bold blue]")
    console.print("[bold]Headers:[/bold]", mask_headers(request.headers))
    if request.body is not None:
        print_syntax_panel(_format_body(request.body), title="[bold]Request Body[/bold]")


def print_response(url: str, status: int, status_text: str, data: Any = None,
                   headers: Optional[Dict[str, str]] = None) -> None:
    status_color = "green" if 200 <= status < 300 else "red"
    response_info = f"[bold {status_color}]{status}[/bold {status_color}] {status_text}"
    print_panel(response_info, title=f"[bold blue]Response[/bold blue] ({url})")
    if headers:
        console.print("[bold]Headers:[/bold]", dict(headers))
    if data is not None:
        print_syntax_panel(_format_body(data), title=f"[bold]Response Body[/bold] (URL: {url})")
