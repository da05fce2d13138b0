"""
Demo Manager - Scaffolds a small but complete catalog.

The demo catalog exercises every part of the engine: a five-layer
hierarchy, cross-links between tools, three playbooks with prompt
generators and a decision rule table, so a first `stackmap explore` or
`stackmap recommend` shows something useful right away.
"""

import json
import logging
from pathlib import Path

from .catalog import Catalog

logger = logging.getLogger(__name__)


def _node(node_id, name, node_type, level, summary, tags=(), **details):
    return {
        "id": node_id,
        "name": name,
        "type": node_type,
        "level": level,
        "summary_leigo": summary,
        "details": details,
        "tags": list(tags),
    }


def _belongs(parent, *children):
    return [{"from": parent, "to": child, "relation": "BELONGS_TO"} for child in children]


DEMO_NODES = [
    _node("L0", "Build Journey", "LAYER", 0, "Everything you need to ship a software product.", ["start"]),
    _node("L1_FRONT", "Frontend", "LAYER", 1, "What the user sees and clicks.", ["ui"]),
    _node("L1_BACK", "Backend & Data", "LAYER", 1, "Where data is stored and business rules run.", ["server", "data"]),
    _node("L1_AI", "Artificial Intelligence", "LAYER", 1, "Models, agents and retrieval.", ["ai", "llm"]),
    _node("L1_AUTO", "Automation", "LAYER", 1, "Workflows that connect systems without manual work.", ["workflow"]),
    _node("L1_PLAY", "Playbooks", "LAYER", 1, "Step-by-step recipes for common products.", ["guide"]),
    _node("C_BUILDERS", "AI App Builders", "CATEGORY", 2, "Generate full apps from a text description.", ["no-code", "builder"]),
    _node("C_FRAMEWORKS", "Web Frameworks", "CATEGORY", 2, "Code foundations for web applications.", ["code"]),
    _node("C_DB", "Databases", "CATEGORY", 2, "Persistent storage for users, products and transactions.", ["sql"]),
    _node("C_AUTH", "Authentication", "CATEGORY", 2, "Sign-up, login and user sessions.", ["login", "security"]),
    _node("C_LLM", "LLM Platforms", "CATEGORY", 2, "APIs that give access to language models.", ["api"]),
    _node("C_WORKFLOWS", "Workflow Tools", "CATEGORY", 2, "Visual builders for integrations.", ["integration"]),
    _node(
        "K_RAG", "RAG", "CONCEPT", 3,
        "Retrieval-augmented generation: the model answers using your documents.",
        ["embeddings", "memory"],
        what_is="Search relevant passages first, then ask the model with them as context.",
        why_matters="Answers stay grounded in your own data.",
        common_confusion="RAG is not fine-tuning.",
    ),
    _node(
        "K_RLS", "Row Level Security", "CONCEPT", 3,
        "Database rules that decide which rows each user may read.",
        ["security", "postgres"],
        what_is="Policies evaluated by the database on every query.",
        why_matters="A leaked API key cannot read other users' data.",
    ),
    _node(
        "T_LOVABLE", "Lovable", "TOOL", 3, "AI builder that turns prompts into React apps.",
        ["builder", "no-code", "react"],
        free_tier="Limited daily messages", learning_curve=1,
        when_use="Prototypes and MVPs", when_not="Heavy custom backends",
        lock_in="Low: exports code to GitHub", best_combos=["Supabase", "Stripe"],
    ),
    _node(
        "T_BOLT", "Bolt", "TOOL", 3, "In-browser AI builder for full-stack apps.",
        ["builder", "no-code"],
        free_tier="Token-limited", learning_curve=1, best_combos=["Supabase", "Netlify"],
    ),
    _node(
        "T_NEXT", "Next.js", "TOOL", 3, "React framework with routing and server rendering.",
        ["react", "frontend", "fullstack"],
        free_tier="Open source", learning_curve=3, best_combos=["Vercel", "Supabase"],
    ),
    _node(
        "T_SUPABASE", "Supabase", "TOOL", 3, "Postgres database with auth and storage built in.",
        ["postgres", "database", "auth"],
        free_tier="2 free projects", learning_curve=2, lock_in="Low: plain Postgres underneath",
        best_combos=["Next.js", "Lovable"],
    ),
    _node(
        "T_POSTGRES", "Postgres", "TOOL", 3, "Open-source relational database.",
        ["sql", "database"], learning_curve=3,
    ),
    _node(
        "T_CLERK", "Clerk", "TOOL", 3, "Hosted authentication with prebuilt login screens.",
        ["login", "auth"], free_tier="10k monthly users", learning_curve=2,
    ),
    _node(
        "T_OPENAI", "OpenAI API", "TOOL", 3, "Access to GPT models and embeddings.",
        ["llm", "embeddings"], free_tier="Pay as you go", learning_curve=2,
    ),
    _node(
        "T_N8N", "n8n", "TOOL", 3, "Open-source workflow automation with a visual editor.",
        ["automation", "workflow"], free_tier="Self-hosted", learning_curve=2,
    ),
    _node("P_CRM_SIMPLE", "CRM Simples", "PLAYBOOK", 2, "Build a simple CRM to track contacts and deals.", ["crm", "sales"]),
    _node("P_SAAS_MVP", "SaaS MVP", "PLAYBOOK", 2, "Launch a subscription web app with login and billing.", ["saas", "mvp"]),
    _node("P_LP_LEADS", "Landing Page with Leads", "PLAYBOOK", 2, "Capture leads with a landing page and a form.", ["landing", "marketing"]),
]

DEMO_EDGES = [
    *_belongs("L0", "L1_FRONT", "L1_BACK", "L1_AI", "L1_AUTO", "L1_PLAY"),
    *_belongs("L1_FRONT", "C_BUILDERS", "C_FRAMEWORKS"),
    *_belongs("L1_BACK", "C_DB", "C_AUTH"),
    *_belongs("L1_AI", "C_LLM"),
    *_belongs("L1_AUTO", "C_WORKFLOWS"),
    *_belongs("L1_PLAY", "P_CRM_SIMPLE", "P_SAAS_MVP", "P_LP_LEADS"),
    *_belongs("C_BUILDERS", "T_LOVABLE", "T_BOLT"),
    *_belongs("C_FRAMEWORKS", "T_NEXT"),
    *_belongs("C_DB", "T_SUPABASE", "T_POSTGRES", "K_RLS"),
    *_belongs("C_AUTH", "T_CLERK"),
    *_belongs("C_LLM", "T_OPENAI", "K_RAG"),
    *_belongs("C_WORKFLOWS", "T_N8N"),
    {"from": "T_SUPABASE", "to": "T_POSTGRES", "relation": "USES"},
    {"from": "T_SUPABASE", "to": "K_RLS", "relation": "REQUIRES"},
    {"from": "K_RAG", "to": "T_OPENAI", "relation": "USES"},
    {"from": "T_NEXT", "to": "T_SUPABASE", "relation": "RECOMMENDED_WITH"},
    {"from": "T_LOVABLE", "to": "T_SUPABASE", "relation": "RECOMMENDED_WITH"},
    {"from": "P_CRM_SIMPLE", "to": "T_LOVABLE", "relation": "USES"},
    {"from": "P_CRM_SIMPLE", "to": "T_SUPABASE", "relation": "USES"},
    {"from": "P_SAAS_MVP", "to": "T_NEXT", "relation": "USES"},
    {"from": "P_SAAS_MVP", "to": "T_CLERK", "relation": "USES"},
    {"from": "P_LP_LEADS", "to": "T_BOLT", "relation": "USES"},
]

DEMO_PLAYBOOKS = [
    {
        "id": "P_CRM_SIMPLE",
        "goal": "A CRM where a small team records contacts, deals and next steps.",
        "prerequisites": ["Supabase account", "List of pipeline stages"],
        "steps": [
            "Model contacts, companies and deals tables",
            "Generate the UI with an AI builder",
            "Enable row level security per team",
            "Add a kanban view for the pipeline",
        ],
        "pitfalls": ["Skipping RLS", "Too many custom fields on day one"],
        "done_definition": "Two users can log in and move a deal across every stage.",
        "stack_variants": {"rapida": ["Lovable", "Supabase"], "robusta": ["Next.js", "Supabase", "Clerk"]},
        "prompts": ["Create a CRM with contacts, companies and a deals kanban"],
        "prompt_generator": {
            "inputs": [
                {"id": "business", "label": "Business type", "placeholder": "e.g. real estate agency"},
                {"id": "stages", "label": "Pipeline stages", "placeholder": "e.g. lead, visit, proposal, closed"},
            ],
            "template": "Build a CRM for a {{business}} with pipeline stages {{ stages }}. Use {{stack_recomendada}}.",
        },
    },
    {
        "id": "P_SAAS_MVP",
        "goal": "A paid web app with login, a core feature and billing.",
        "prerequisites": ["Clear core feature", "Stripe account"],
        "steps": ["Set up auth", "Build the core CRUD", "Add billing", "Deploy"],
        "pitfalls": ["Building admin panels before the core feature"],
        "done_definition": "A stranger can sign up, pay and use the core feature.",
        "stack_variants": {"rapida": ["Lovable", "Supabase", "Stripe"], "robusta": ["Next.js", "Postgres", "Clerk", "Stripe"]},
        "prompts": ["Scaffold a SaaS with auth, a dashboard and Stripe checkout"],
        "prompt_generator": {
            "inputs": [
                {"id": "product", "label": "Product", "placeholder": "e.g. invoice generator"},
                {"id": "audience", "label": "Audience", "placeholder": "e.g. freelancers"},
            ],
            "template": "Create a SaaS MVP: {{product}} for {{audience}}, built with {{stack_recomendada}}.",
        },
    },
    {
        "id": "P_LP_LEADS",
        "goal": "A landing page that turns visitors into leads.",
        "prerequisites": ["Offer and headline"],
        "steps": ["Write the copy", "Generate the page", "Connect the form", "Publish"],
        "pitfalls": ["Form submissions going nowhere"],
        "done_definition": "A test submission lands in the lead list.",
        "stack_variants": {"rapida": ["Bolt", "n8n"]},
        "prompts": ["Create a landing page with a hero, benefits and a lead form"],
        "prompt_generator": {
            "inputs": [{"id": "offer", "label": "Offer", "placeholder": "e.g. free consultation"}],
            "template": "Landing page for {{offer}} using {{stack_recomendada}}.",
        },
    },
]

DEMO_RULES = [
    {
        "id": "R1",
        "if": {"app_type": "landing"},
        "then": {
            "primary_stack": ["Bolt", "n8n"],
            "alt_stacks": [{"label": "Code-first", "stack": ["Next.js", "Vercel"]}],
            "tools_to_master": ["Bolt", "n8n", "Google Analytics"],
            "checklist": ["Headline and offer", "Lead form wired", "Analytics installed"],
            "risks": ["Leads lost when the form webhook fails"],
        },
        "explain_leigo": "A landing page needs speed more than architecture.",
    },
    {
        "id": "R2",
        "if": {"app_type": "saas", "needs_auth": True, "needs_db": True},
        "then": {
            "primary_stack": ["Next.js", "Supabase", "Stripe"],
            "alt_stacks": [{"label": "Builder", "stack": ["Lovable", "Supabase"]}],
            "tools_to_master": ["Next.js", "Supabase", "Stripe", "Vercel", "GitHub"],
            "checklist": ["Auth flows", "Core CRUD", "Billing", "Deploy"],
            "risks": ["Scope creep before launch", "Missing RLS policies"],
        },
        "explain_leigo": "A classic SaaS: login, data and billing on a proven stack.",
    },
    {
        "id": "R3",
        "if": {"app_type": "crm", "needs_db": True},
        "then": {
            "primary_stack": ["Lovable", "Supabase"],
            "alt_stacks": [{"label": "Custom", "stack": ["Next.js", "Postgres", "Clerk"]}],
            "tools_to_master": ["Lovable", "Supabase", "SQL basics"],
            "checklist": ["Contacts table", "Deals pipeline", "Per-team access"],
            "risks": ["Data leaks without RLS"],
        },
        "explain_leigo": "A CRM is mostly tables and views; a builder plus Supabase gets there fast.",
    },
    {
        "id": "R4",
        "if": {"app_type": "agent", "needs_rag": True},
        "then": {
            "primary_stack": ["Next.js", "OpenAI API", "Supabase pgvector"],
            "alt_stacks": [{"label": "Low-code", "stack": ["n8n", "OpenAI API"]}],
            "tools_to_master": ["OpenAI API", "Embeddings", "pgvector", "Prompting"],
            "checklist": ["Document ingestion", "Retrieval eval set", "Tool calling"],
            "risks": ["Hallucinations on missing context", "Token costs"],
        },
        "explain_leigo": "An agent with memory needs retrieval over your own documents.",
    },
    {
        "id": "R5",
        "if": {"app_type": "automation", "budget": "low"},
        "then": {
            "primary_stack": ["n8n"],
            "tools_to_master": ["n8n", "Webhooks", "Google Sheets"],
            "checklist": ["Map the trigger", "Handle failures", "Log runs"],
            "risks": ["Silent failures"],
        },
        "explain_leigo": "Cheap automation: one visual workflow tool covers most cases.",
    },
]


DEMO_CATALOG = {
    "nodes": DEMO_NODES,
    "edges": DEMO_EDGES,
    "playbooks": DEMO_PLAYBOOKS,
    "decision_rules": DEMO_RULES,
}


def build_demo_catalog() -> Catalog:
    return Catalog.from_dict(DEMO_CATALOG)


class DemoManager:
    """
    Manages the creation of the demo dataset on disk.
    """

    def __init__(self, root_dir: Path):
        self.root_dir = root_dir

    def provision(self, relative_path: str = ".stackmap/seed.json") -> Path:
        """
        Write the demo catalog as JSON.

        Returns:
            Path: The path of the written seed file.
        """
        seed_path = self.root_dir / relative_path
        seed_path.parent.mkdir(parents=True, exist_ok=True)
        seed_path.write_text(json.dumps(DEMO_CATALOG, indent=2, ensure_ascii=False), encoding="utf-8")
        logger.debug(f"Demo catalog written to {seed_path}")
        return seed_path
