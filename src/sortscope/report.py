# src/sortscope/report.py
from __future__ import annotations

import importlib.resources as pkg_resources
import json
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import plotly.io as pio
from jinja2 import BaseLoader, Environment
from markupsafe import escape

from .utils import human_count, human_time


def load_template_text() -> str:
    """
    Load the Jinja2 template text from package resources.
    """
    tmpl = pkg_resources.files("sortscope.templates").joinpath("report.html.j2")
    return tmpl.read_text(encoding="utf-8")


def fig_to_div(fig) -> str:
    """
    Convert a Plotly figure to an HTML div without plotly.js (the template
    loads it from the CDN once).
    """
    if fig is None:
        return ""
    return pio.to_html(fig, include_plotlyjs=False, full_html=False, default_width="100%")


def simple_markdown_to_html(text: str) -> str:
    """
    Convert a small subset of markdown-like syntax -> safe HTML.

    - **bold** -> <strong>, `code` -> <code>
    - lines starting with '- ' -> <ul><li>...</li></ul>
    - everything else -> <p>
    Arbitrary text is escaped first, so only the tags generated here survive.
    """
    if not text:
        return ""

    out_lines: List[str] = []
    in_list = False
    for raw in text.strip().splitlines():
        line = str(escape(raw.strip()))
        line = re.sub(r"\*\*(.+?)\*\*", r"<strong>\1</strong>", line)
        line = re.sub(r"`(.+?)`", r"<code>\1</code>", line)
        if not line:
            if in_list:
                out_lines.append("</ul>")
                in_list = False
            continue
        if line.startswith("- "):
            if not in_list:
                out_lines.append("<ul>")
                in_list = True
            out_lines.append("<li>" + line[2:].strip() + "</li>")
            continue
        if in_list:
            out_lines.append("</ul>")
            in_list = False
        out_lines.append(f"<p>{line}</p>")

    if in_list:
        out_lines.append("</ul>")
    return "\n".join(out_lines)


@dataclass
class ReportSections:
    methods_text: str
    scaling_summaries: Dict[str, str]
    exchange_names: Dict[str, str]
    errors: Optional[Dict[str, List[str]]] = None


def build_report_html(
    title: str,
    notes: Optional[str],
    ns: List[int],
    summary_table: List[Dict[str, Any]],
    comparison_rows: List[Dict[str, Any]],
    comparisons_fig,
    exchanges_fig,
    runtime_fig,
    sections: ReportSections,
    html_path: Optional[str] = None,
) -> str:
    """
    Build the final HTML by rendering the Jinja2 template.
    """
    env = Environment(loader=BaseLoader(), autoescape=True)
    env.filters["human_time"] = human_time
    env.filters["human_count"] = human_count

    tpl = env.from_string(load_template_text())

    return tpl.render(
        title=title,
        notes=notes,
        ns=ns,
        labels=list(sections.exchange_names),
        summary_table=summary_table,
        comparison_rows=comparison_rows,
        comparisons_div=fig_to_div(comparisons_fig),
        exchanges_div=fig_to_div(exchanges_fig),
        runtime_div=fig_to_div(runtime_fig),
        methods_html=simple_markdown_to_html(sections.methods_text),
        scaling_summaries=sections.scaling_summaries,
        exchange_names=sections.exchange_names,
        errors=sections.errors or {},
        html_path=html_path,
        summary_table_json=json.dumps(summary_table, default=str),
    )
