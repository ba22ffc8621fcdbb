"""
display.py — terminal rendering of a reading with rich.
"""

from __future__ import annotations
from typing import List, Optional

from rich.console import Console
from rich.panel import Panel

from divination import DivinationResult
from trigrams import Yao

APP_TITLE = "易经随机卦象演示"
APP_SUBTITLE = "随机生成三组数字：下爻卦(1-8)、上爻卦(1-8)、主爻(1-6)"
GENERATE_LABEL = "生成随机卦"

YANG_LINE = "────────"
YIN_LINE = "────  ────"
MOVING_MARK = "  ← 主爻"


def format_hexagram_lines(result: DivinationResult) -> List[str]:
    """Hexagram lines for display, top to bottom, moving line marked."""
    lines = []
    for position in range(6, 0, -1):
        line = YANG_LINE if result.lines[position - 1] == Yao.YANG else YIN_LINE
        if position == result.moving_line:
            line += MOVING_MARK
        lines.append(line)
    return lines


def _highlight(lines: List[str], result: DivinationResult) -> List[str]:
    # Index 0 is the top line
    marked = 6 - result.moving_line
    return [
        f"[bold red]{line}[/bold red]" if i == marked else line
        for i, line in enumerate(lines)
    ]


def build_reading_panel(result: DivinationResult) -> Panel:
    hexagram = result.hexagram
    lower, upper = result.lower, result.upper

    content = [
        f"[dim]随机数：[/dim]下爻={lower.index}，上爻={upper.index}，主爻={result.moving_line}",
        f"[bold]下卦：[/bold]{lower.symbol} {lower.name}    [bold]上卦：[/bold]{upper.symbol} {upper.name}",
        f"[bold]本卦：[/bold][cyan]{hexagram.symbol} {hexagram.name}[/cyan]",
        "",
        "[bold]卦象（上到下）：[/bold]",
        *_highlight(format_hexagram_lines(result), result),
        "",
        f"[bold]卦辞：[/bold]{hexagram.gua_ci}",
        f"[bold yellow]主爻爻辞（第{result.moving_line}爻）：[/bold yellow]{result.moving_line_text}",
        f"[bold]易传：[/bold]{hexagram.yi_zhuan}",
        f"[bold]系辞传：[/bold]{hexagram.xi_ci_zhuan}",
        f"[bold]象传：[/bold]{hexagram.xiang_zhuan}",
    ]
    if hexagram.is_placeholder:
        content += ["", "[dim]此卦文本尚未收录，以上为占位内容。[/dim]"]

    return Panel("\n".join(content), title=f"[bold]{hexagram.symbol} {hexagram.name}[/bold]", border_style="cyan")


def display_welcome(console: Console):
    console.rule(f"[bold cyan]☯ {APP_TITLE} ☯[/bold cyan]")
    console.print(f"[dim]{APP_SUBTITLE}[/dim]")
    console.print()


def display_idle(console: Console):
    console.print(f"按回车“{GENERATE_LABEL}”开始，输入 q 退出。")


def display_reading(result: DivinationResult, console: Optional[Console] = None):
    """Print a complete reading."""
    console = console or Console()
    console.print(build_reading_panel(result))
