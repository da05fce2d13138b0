"""
Core type definitions for stackmap.

Every record in the catalog payload maps to a frozen pydantic model here.
Payload keys that collide with Python keywords (``from``, ``to``, ``if``,
``then``) or carry legacy names (``summary_leigo``, ``explain_leigo``) are
accepted through validation aliases, so a seed file can be loaded as-is.
"""

from enum import StrEnum
from typing import Dict, List, Optional, Tuple, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class NodeType(StrEnum):
    """Kinds of nodes in the technology taxonomy."""
    LAYER = "LAYER"
    CATEGORY = "CATEGORY"
    CONCEPT = "CONCEPT"
    TOOL = "TOOL"
    PLAYBOOK = "PLAYBOOK"


class RelationType(StrEnum):
    """Relationships between taxonomy nodes."""
    BELONGS_TO = "BELONGS_TO"
    REQUIRES = "REQUIRES"
    USES = "USES"
    RECOMMENDED_WITH = "RECOMMENDED_WITH"


class Direction(StrEnum):
    """Direction of an edge relative to the node it was looked up from."""
    OUTGOING = "outgoing"
    INCOMING = "incoming"


DetailValue = Union[str, List[str], int, float]


class Node(BaseModel):
    """
    A single entry of the taxonomy.

    ``details`` holds free-form named fields (``what_is``, ``free_tier``,
    ``learning_curve`` ...). Values are strings, string lists, or a numeric
    rating.
    """
    id: str
    name: str
    type: NodeType
    level: int = Field(default=0, ge=0)
    summary: str = Field(default="", validation_alias=AliasChoices("summary", "summary_leigo"))
    details: Dict[str, DetailValue] = Field(default_factory=dict)
    tags: List[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    @field_validator("tags")
    @classmethod
    def _dedupe_tags(cls, tags: List[str]) -> List[str]:
        return list(dict.fromkeys(tags))

    @property
    def searchable_text(self) -> str:
        """Lowercased name, summary and tags joined for substring search."""
        return " ".join([self.name, self.summary, *self.tags]).lower()

    def __hash__(self):
        return hash(self.id)

    def __eq__(self, other):
        if isinstance(other, Node):
            return self.id == other.id
        return False


class Edge(BaseModel):
    """
    Directed relationship between two Nodes.

    For BELONGS_TO the source is the parent and the target the child.
    """
    source_id: str = Field(validation_alias=AliasChoices("from", "source_id"))
    target_id: str = Field(validation_alias=AliasChoices("to", "target_id"))
    relation: RelationType = Field(validation_alias=AliasChoices("relation", "type"))

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    def is_hierarchy(self) -> bool:
        return self.relation == RelationType.BELONGS_TO

    def touches(self, node_id: str) -> bool:
        return node_id in (self.source_id, self.target_id)


class EdgeRef(BaseModel):
    """
    An edge as seen from one of its endpoints.

    ``index`` is the edge's position in the catalog edge list, which is its
    identity (the same source/target pair may appear under several
    relations).
    """
    index: int
    edge: Edge
    direction: Direction

    model_config = ConfigDict(frozen=True)

    @property
    def neighbor_id(self) -> str:
        if self.direction == Direction.OUTGOING:
            return self.edge.target_id
        return self.edge.source_id


class PromptInput(BaseModel):
    id: str
    label: str = ""
    placeholder: str = ""

    model_config = ConfigDict(frozen=True, extra="ignore")


class PromptGenerator(BaseModel):
    """Form inputs plus a ``{{id}}`` template for a playbook's prompt."""
    inputs: List[PromptInput] = Field(default_factory=list)
    template: str = ""

    model_config = ConfigDict(frozen=True, extra="ignore")


class Playbook(BaseModel):
    """A step-by-step guide attached to the PLAYBOOK node with the same id."""
    id: str
    goal: str = ""
    prerequisites: List[str] = Field(default_factory=list)
    steps: List[str] = Field(default_factory=list)
    pitfalls: List[str] = Field(default_factory=list)
    done_definition: str = ""
    stack_variants: Dict[str, List[str]] = Field(default_factory=dict)
    prompts: List[str] = Field(default_factory=list)
    prompt_generator: Optional[PromptGenerator] = None

    model_config = ConfigDict(frozen=True, extra="ignore")


class AltStack(BaseModel):
    label: str = "Alternative"
    stack: Tuple[str, ...] = ()

    model_config = ConfigDict(frozen=True, extra="ignore")

    @field_validator("stack", mode="before")
    @classmethod
    def _coerce_stack(cls, value):
        if isinstance(value, str):
            return [value]
        return value


class RuleCondition(BaseModel):
    """
    Partial predicate over the wizard answers.

    A field left as None is a wildcard and never contributes to the score.
    """
    app_type: Optional[str] = None
    needs_auth: Optional[bool] = None
    needs_db: Optional[bool] = None
    needs_rag: Optional[bool] = None
    budget: Optional[str] = None

    model_config = ConfigDict(frozen=True, extra="ignore")


class RuleOutcome(BaseModel):
    """The recommendation payload of a DecisionRule."""
    primary_stack: Tuple[str, ...] = ()
    alt_stacks: Tuple[AltStack, ...] = ()
    tools_to_master: Tuple[str, ...] = ()
    checklist: Tuple[str, ...] = ()
    risks: Tuple[str, ...] = ()

    model_config = ConfigDict(frozen=True, extra="ignore")


class DecisionRule(BaseModel):
    id: str
    condition: RuleCondition = Field(
        default_factory=RuleCondition,
        validation_alias=AliasChoices("if", "condition"),
    )
    outcome: RuleOutcome = Field(
        default_factory=RuleOutcome,
        validation_alias=AliasChoices("then", "outcome"),
    )
    explain: str = Field(default="", validation_alias=AliasChoices("explain", "explain_leigo"))

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class AnswerSet(BaseModel):
    """
    Complete wizard answers.

    All six fields are required: a partially filled wizard cannot be turned
    into an AnswerSet, so rule matching never sees missing answers.
    """
    app_type: str
    needs_auth: bool
    needs_db: bool
    needs_rag: bool
    budget: str
    user_level: str

    model_config = ConfigDict(frozen=True, extra="ignore")
