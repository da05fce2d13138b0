"""
Presentation tables and rich renderables.

The core carries node types as data only. Everything that depends on the
type for display (labels, colours) is looked up here in tables keyed by
NodeType that cover every member.
"""

from typing import Dict, List, Union

from rich.console import Group
from rich.panel import Panel
from rich.text import Text
from rich.tree import Tree

from ..core.graph import CatalogGraph
from ..core.paths import format_breadcrumb
from ..core.search import highlight_match
from ..core.types import Node, NodeType, Playbook, RuleOutcome
from ..core.visibility import ExpandReason, ExpandResult, VisibleGraph

TYPE_LABELS: Dict[NodeType, str] = {
    NodeType.LAYER: "Layer",
    NodeType.CATEGORY: "Category",
    NodeType.CONCEPT: "Concept",
    NodeType.TOOL: "Tool",
    NodeType.PLAYBOOK: "Playbook",
}

TYPE_COLORS: Dict[NodeType, str] = {
    NodeType.LAYER: "#6366f1",
    NodeType.CATEGORY: "#0ea5e9",
    NodeType.CONCEPT: "#10b981",
    NodeType.TOOL: "#f59e0b",
    NodeType.PLAYBOOK: "#ef4444",
}

DETAIL_LABELS: Dict[str, str] = {
    "what_is": "What it is",
    "why_matters": "Why it matters",
    "common_confusion": "Common confusion",
    "free_tier": "Free tier",
    "learning_curve": "Learning curve",
    "when_use": "When to use",
    "when_not": "When NOT to use",
    "lock_in": "Lock-in",
    "best_combos": "Best combos",
}

VARIANT_LABELS: Dict[str, str] = {
    "rapida": "⚡ Fast",
    "robusta": "🛡️ Robust",
}

MAX_RATING = 5
TOP_TOOLS = 5


def type_label(node_type: NodeType) -> str:
    return TYPE_LABELS[node_type]


def styled_name(node: Node) -> Text:
    return Text(node.name, style=f"bold {TYPE_COLORS[node.type]}")


def format_rating(value: Union[int, float]) -> str:
    filled = max(0, min(MAX_RATING, int(value)))
    return "⭐" * filled + "☆" * (MAX_RATING - filled)


def format_detail_value(key: str, value) -> str:
    if isinstance(value, list):
        return ", ".join(str(v) for v in value)
    if key == "learning_curve" and isinstance(value, (int, float)):
        return format_rating(value)
    return str(value)


def highlighted_name(node: Node, query: str) -> Text:
    before, match, after = highlight_match(node.name, query)
    text = Text(before)
    text.append(match, style="bold #6366f1")
    text.append(after)
    return text


def expand_feedback(node: Node, result: ExpandResult) -> str:
    if result.reason == ExpandReason.NO_CHILDREN:
        return f"{node.name} has no children to expand."
    if result.reason == ExpandReason.ALREADY_VISIBLE:
        return f"All children of {node.name} are already visible."
    return f"{result.added_count} node(s) expanded under {node.name}."


def visible_tree(graph: CatalogGraph, visible: VisibleGraph) -> Tree:
    """
    Render the visible subgraph as a hierarchy tree.

    Visible nodes whose parent is hidden are shown as extra roots.
    """
    visible_ids = {n.id for n in visible.nodes}
    tree = Tree(Text(f"{len(visible.nodes)} nodes · {len(visible.edges)} connections", style="dim"))

    placed = set()

    def _attach(branch: Tree, node: Node) -> None:
        if node.id in placed:
            return
        placed.add(node.id)
        label = Text.assemble(styled_name(node), (f"  {type_label(node.type)}", "dim"))
        child_branch = branch.add(label)
        for child in graph.children_of(node.id):
            if child.id in visible_ids:
                _attach(child_branch, child)

    for node in visible.nodes:
        parent = graph.parent_of(node.id)
        if parent is None or parent not in visible_ids:
            _attach(tree, node)
    # Anything left sits on a visible cycle
    for node in visible.nodes:
        _attach(tree, node)
    return tree


def node_card(node: Node, path: List[Node]) -> Panel:
    body: List = [
        Text(format_breadcrumb(path), style="dim"),
        Text(node.summary),
    ]
    for key, value in node.details.items():
        row = Text.assemble((f"{DETAIL_LABELS.get(key, key)}: ", "bold"), format_detail_value(key, value))
        body.append(row)
    if node.tags:
        body.append(Text(" ".join(f"#{t}" for t in node.tags), style="cyan"))

    title = Text.assemble(styled_name(node), (f"  [{type_label(node.type)}]", "dim"))
    return Panel(Group(*body), title=title, title_align="left", border_style=TYPE_COLORS[node.type])


def _bullets(items: List[str], numbered: bool = False) -> Text:
    text = Text()
    for i, item in enumerate(items, 1):
        prefix = f"{i}. " if numbered else "• "
        text.append(f"{prefix}{item}\n")
    text.rstrip()
    return text


def playbook_panel(playbook: Playbook) -> Panel:
    sections: List = [Text.assemble(("🎯 Goal\n", "bold"), playbook.goal)]
    if playbook.prerequisites:
        sections.append(Text.assemble(("📋 Prerequisites\n", "bold"), _bullets(playbook.prerequisites)))
    if playbook.steps:
        sections.append(Text.assemble(("📌 Steps\n", "bold"), _bullets(playbook.steps, numbered=True)))
    if playbook.pitfalls:
        sections.append(Text.assemble(("⚠️ Common risks\n", "bold"), _bullets(playbook.pitfalls)))
    if playbook.done_definition:
        sections.append(Text.assemble(("✅ Definition of done\n", "bold"), playbook.done_definition))
    for variant, stack in playbook.stack_variants.items():
        label = VARIANT_LABELS.get(variant, variant)
        sections.append(Text.assemble((f"🔧 {label}: ", "bold"), ", ".join(stack)))
    if playbook.prompts:
        sections.append(Text.assemble(("💬 Suggested prompts\n", "bold"), _bullets([f'"{p}"' for p in playbook.prompts])))
    return Panel(Group(*sections), title=Text(f"Playbook {playbook.id}"), title_align="left", border_style="red")


def recommendation_group(explain: str, outcome: RuleOutcome) -> Group:
    parts: List = []
    if explain:
        parts.append(Panel(Text(explain), border_style="dim"))
    parts.append(Text.assemble(("⭐ Primary stack: ", "bold green"), ", ".join(outcome.primary_stack)))
    for alt in outcome.alt_stacks:
        parts.append(Text.assemble((f"   {alt.label}: ", "bold"), ", ".join(alt.stack)))
    if outcome.tools_to_master:
        top = outcome.tools_to_master[:TOP_TOOLS]
        parts.append(Text(f"\n{len(top)} tools to master", style="bold"))
        parts.append(_bullets(list(top), numbered=True))
    if outcome.checklist:
        parts.append(Text("\nExecution checklist", style="bold"))
        parts.append(Text("\n".join(f"☐ {item}" for item in outcome.checklist)))
    if outcome.risks:
        parts.append(Text("\nCommon risks", style="bold"))
        parts.append(Text("\n".join(f"⚠ {risk}" for risk in outcome.risks), style="yellow"))
    return Group(*parts)
