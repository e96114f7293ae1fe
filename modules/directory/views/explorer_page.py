"""
Explorer Page Templates.

Server-rendered HTML for the leadership explorer: search box, facet
selects, tabbed body hierarchy and leader cards. Every dynamic value is
escaped before it is interpolated.
"""

from html import escape
from urllib.parse import urlencode

from modules.directory.schemas import (
    BodyNode,
    ExplorerFilters,
    FacetOption,
    Facets,
    HierarchyView,
    LeaderView,
)

EXPLORER_PATH = "/explorer"
LOAD_ERROR_MESSAGE = "Failed to load data. Please try again later."

_STYLE = """
        * { box-sizing: border-box; margin: 0; padding: 0; }
        body { font-family: -apple-system, sans-serif; background: #F9FAFB; color: #111827; padding: 24px; }
        .container { max-width: 1200px; margin: 0 auto; }
        h1 { font-size: 28px; margin-bottom: 20px; }
        .search input { width: 100%; padding: 12px; border: 2px solid #E5E7EB; border-radius: 8px; font-size: 16px; }
        .facets { display: grid; grid-template-columns: repeat(4, 1fr); gap: 12px; margin-top: 12px; }
        .facets select { padding: 10px; border: 2px solid #E5E7EB; border-radius: 8px; background: white; }
        .toolbar { display: flex; justify-content: flex-end; min-height: 32px; margin: 8px 0; }
        .reset { font-size: 14px; color: #6B7280; text-decoration: none; padding: 4px 8px; }
        .reset.disabled { opacity: 0.5; cursor: not-allowed; }
        .tabs { display: flex; gap: 4px; border-bottom: 2px solid #E5E7EB; margin-bottom: 16px; flex-wrap: wrap; }
        .tabs a { padding: 10px 16px; text-decoration: none; color: #374151; border-radius: 8px 8px 0 0; }
        .tabs a.active { background: #DC2626; color: white; }
        .caption { color: #6B7280; margin-bottom: 12px; white-space: pre-line; }
        .card { background: white; border-radius: 12px; box-shadow: 0 1px 3px rgba(0,0,0,0.1); padding: 16px; margin-bottom: 16px; }
        .card h2 { font-size: 20px; margin-bottom: 8px; }
        .section { border-left: 3px solid #E5E7EB; padding-left: 12px; margin-top: 12px; }
        .section h3 { font-size: 16px; margin-bottom: 8px; }
        .leaders { display: grid; grid-template-columns: repeat(auto-fill, minmax(180px, 1fr)); gap: 12px; margin: 8px 0; }
        .leader { background: white; border: 1px solid #E5E7EB; border-radius: 8px; padding: 10px; transition: opacity 0.5s; }
        .leader.hidden { opacity: 0.3; pointer-events: none; }
        .leader.highlight { box-shadow: 0 0 0 2px #DC2626; }
        .leader .cn { color: #6B7280; font-size: 12px; margin-left: 6px; }
        .leader .role { color: #4B5563; font-size: 13px; margin-top: 4px; }
        .leader dl { margin-top: 8px; font-size: 13px; }
        .leader dt { font-weight: 600; margin-top: 6px; }
        .leader dd { white-space: pre-line; }
        .empty { color: #6B7280; font-style: italic; padding: 8px 0; }
        .error { text-align: center; padding: 80px 0; color: #DC2626; }
        .error button { margin-top: 16px; padding: 8px 16px; background: #DC2626; color: white; border: none; border-radius: 6px; cursor: pointer; }
"""


def _page(title: str, body: str) -> str:
    return f"""
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{escape(title)}</title>
    <style>{_STYLE}    </style>
</head>
<body>
    <div class="container">
{body}
    </div>
</body>
</html>
"""


def explorer_url(search_query: str, filters: ExplorerFilters, tab: int | None = None) -> str:
    """Build an explorer link carrying the current search, filters and tab."""
    params = {
        "q": search_query,
        "hometown": filters.hometown,
        "education_level": filters.education_level,
        "education_type": filters.education_type,
        "generation": filters.generation,
    }
    if tab is not None:
        params["tab"] = str(tab)
    query = urlencode({k: v for k, v in params.items() if v})
    return f"{EXPLORER_PATH}?{query}" if query else EXPLORER_PATH


def _select(name: str, all_label: str, options: list[FacetOption], selected: str) -> str:
    rendered = [f'<option value="all">{escape(all_label)}</option>']
    for option in options:
        is_selected = " selected" if option.value == selected else ""
        rendered.append(
            f'<option value="{escape(option.value)}"{is_selected}>'
            f"{escape(option.value)} ({option.count})</option>"
        )
    return (
        f'<select name="{name}" aria-label="{escape(all_label)}" onchange="this.form.submit()">'
        + "".join(rendered)
        + "</select>"
    )


def _render_leader(leader: LeaderView) -> str:
    classes = ["leader"]
    if not leader.visible:
        classes.append("hidden")
    if leader.highlight and leader.visible:
        classes.append("highlight")

    chinese_name = f'<span class="cn">{escape(leader.chinese_name)}</span>' if leader.chinese_name else ""
    role = (
        f'<div class="role">{escape(leader.specific_title_in_body)}</div>'
        if leader.specific_title_in_body else ""
    )

    # Hidden leaders expose no profile
    profile = ""
    if leader.visible:
        fields = [
            ("Position", leader.title),
            ("Education", leader.education),
            ("Age", leader.age),
            ("Generation", leader.generation),
            ("Hometown", leader.hometown),
        ]
        items = "".join(
            f"<dt>{label}</dt><dd>{escape(value)}</dd>" for label, value in fields if value
        )
        if items:
            profile = f"<details><summary>Profile</summary><dl>{items}</dl></details>"

    return (
        f'<div class="{" ".join(classes)}" data-id="{escape(leader.id)}">'
        f"<strong>{escape(leader.name)}</strong>{chinese_name}{role}{profile}</div>"
    )


def _render_leaders(leaders: list[LeaderView]) -> str:
    if not leaders:
        return ""
    return '<div class="leaders">' + "".join(_render_leader(l) for l in leaders) + "</div>"


def _render_caption(node: BodyNode) -> str:
    return f'<p class="caption">{escape(node.caption)}</p>' if node.caption else ""


def _render_section(node: BodyNode) -> str:
    heading = f"<h3>{escape(node.name)}</h3>" if node.name else ""
    children = "".join(_render_section(child) for child in node.children)
    return (
        f'<div class="section">{heading}{_render_caption(node)}'
        f"{_render_leaders(node.leaders)}{children}</div>"
    )


def _render_card(node: BodyNode) -> str:
    empty = f'<p class="empty">{escape(node.empty_message)}</p>' if node.empty_message else ""
    sections = "".join(_render_section(child) for child in node.children)
    return (
        f'<div class="card"><h2>{escape(node.name)}</h2>{_render_caption(node)}'
        f"{_render_leaders(node.leaders)}{sections}{empty}</div>"
    )


def _render_tab(node: BodyNode) -> str:
    empty = f'<p class="empty">{escape(node.empty_message)}</p>' if node.empty_message else ""
    cards = "".join(_render_card(child) for child in node.children)
    return f"{_render_caption(node)}{_render_leaders(node.leaders)}{cards}{empty}"


def _render_hierarchy(
    hierarchy: HierarchyView,
    active_tab: int | None,
    search_query: str,
    filters: ExplorerFilters,
) -> str:
    if hierarchy.empty_message:
        return f'<p class="empty">{escape(hierarchy.empty_message)}</p>'

    selected = hierarchy.get_tab(active_tab)
    links = []
    for tab in hierarchy.tabs:
        is_active = selected is not None and tab.id == selected.id
        css = ' class="active"' if is_active else ""
        href = escape(explorer_url(search_query, filters, tab.id))
        links.append(f'<a href="{href}"{css}>{escape(tab.name)}</a>')

    content = _render_tab(selected) if selected else ""
    return f'<nav class="tabs">{"".join(links)}</nav><div class="tab-content">{content}</div>'


def render_explorer_page(
    title: str,
    hierarchy: HierarchyView,
    facets: Facets,
    filters: ExplorerFilters,
    search_query: str = "",
    active_tab: int | None = None,
) -> str:
    """
    Render the full explorer page.

    Args:
        title: Page heading.
        hierarchy: Tree built for the current search and filters.
        facets: Facet options with their counts.
        filters: Currently selected filters.
        search_query: Current name search.
        active_tab: Requested tab id; falls back to the default tab.
    """
    tab_input = ""
    selected = hierarchy.get_tab(active_tab)
    if selected is not None:
        tab_input = f'<input type="hidden" name="tab" value="{selected.id}">'

    if filters.is_active:
        reset = f'<a class="reset" href="{escape(explorer_url("", ExplorerFilters(), active_tab))}">Reset Filters</a>'
    else:
        reset = '<span class="reset disabled" aria-disabled="true">Reset Filters</span>'

    body = f"""
        <h1>{escape(title)}</h1>
        <form method="GET" action="{EXPLORER_PATH}">
            {tab_input}
            <div class="search">
                <input type="search" name="q" placeholder="Search by name..." value="{escape(search_query)}">
            </div>
            <div class="facets">
                {_select("education_level", "All Levels", facets.education_levels, filters.education_level)}
                {_select("education_type", "All Types", facets.education_types, filters.education_type)}
                {_select("generation", "All Generations", facets.generations, filters.generation)}
                {_select("hometown", "All Hometowns", facets.hometowns, filters.hometown)}
            </div>
        </form>
        <div class="toolbar">{reset}</div>
        {_render_hierarchy(hierarchy, active_tab, search_query, filters)}
"""
    return _page(title, body)


def render_error_page(title: str, message: str = LOAD_ERROR_MESSAGE) -> str:
    """Generic load failure with a Retry button that reloads the page."""
    body = f"""
        <div class="error">
            <p>{escape(message)}</p>
            <button type="button" onclick="window.location.reload()">Retry</button>
        </div>
"""
    return _page(title, body)
