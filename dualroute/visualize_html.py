"""Export several Plotly figures to one HTML page with tabs."""

import html
import os
import webbrowser
from typing import List, Tuple

import plotly.graph_objects as go


def export_figures_to_tabbed_html(
    figures: List[Tuple[str, go.Figure]],
    output_path: str,
    title: str = "Shortest Path Results",
    open_browser: bool = False,
) -> str:
    """
    Write ``figures`` to ``output_path`` as a single tabbed page.

    Args:
        figures: List of (tab_name, figure) tuples
        output_path: Path to save HTML file
        title: Page title
        open_browser: Open the written file in the default browser

    Returns:
        Absolute path of the written file.
    """

    fig_divs = []
    tab_buttons = []
    for i, (tab_name, fig) in enumerate(figures):
        fig_html = fig.to_html(full_html=False, include_plotlyjs=False, div_id=f"fig-{i}")
        display = "block" if i == 0 else "none"
        fig_divs.append(
            f'<div id="tab-{i}" class="tab-content" style="display:{display}">{fig_html}</div>'
        )
        active_class = "active" if i == 0 else ""
        tab_buttons.append(
            f'<button class="tab-btn {active_class}" onclick="openTab(event, \'tab-{i}\')">'
            f"{html.escape(tab_name)}</button>"
        )

    page_title = html.escape(title)
    html_content = f'''<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <title>{page_title}</title>
    <script src="https://cdn.plot.ly/plotly-2.35.2.min.js"></script>
    <style>
        body {{
            font-family: Arial, sans-serif;
            margin: 0;
            padding: 20px;
            background-color: #f5f5f5;
        }}
        .tab-container {{
            display: flex;
            flex-wrap: wrap;
            gap: 5px;
            margin-bottom: 20px;
        }}
        .tab-btn {{
            padding: 10px 20px;
            border: none;
            background-color: #e0e0e0;
            cursor: pointer;
            border-radius: 4px;
        }}
        .tab-btn.active {{
            background-color: #4CAF50;
            color: white;
        }}
        .tab-content {{
            background-color: #fff;
            padding: 20px;
            border-radius: 8px;
        }}
    </style>
</head>
<body>
    <h1>{page_title}</h1>
    <div class="tab-container">
        {''.join(tab_buttons)}
    </div>
    {''.join(fig_divs)}
    <script>
        function openTab(evt, tabId) {{
            var tabContents = document.getElementsByClassName("tab-content");
            for (var i = 0; i < tabContents.length; i++) {{
                tabContents[i].style.display = "none";
            }}
            var tabBtns = document.getElementsByClassName("tab-btn");
            for (var i = 0; i < tabBtns.length; i++) {{
                tabBtns[i].classList.remove("active");
            }}
            document.getElementById(tabId).style.display = "block";
            evt.currentTarget.classList.add("active");
            document.querySelectorAll('#' + tabId + ' .plotly-graph-div').forEach(function(plotDiv) {{
                Plotly.Plots.resize(plotDiv);
            }});
        }}
    </script>
</body>
</html>
'''

    output_path = os.path.abspath(output_path)
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(html_content)

    print(f"Saved visualization to: {output_path}")

    if open_browser:
        webbrowser.open("file://" + output_path)
    return output_path
