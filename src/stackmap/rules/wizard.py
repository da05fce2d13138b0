"""
Stack recommendation wizard.

Six ordered questions build an AnswerSet one step at a time. The wizard
will not move past a question that has no answer, and only accepts the
option values each question declares.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from ..core.exceptions import IncompleteAnswersError, InvalidAnswerError
from ..core.types import AnswerSet

OptionValue = Union[bool, str]


class QuestionOption(BaseModel):
    value: OptionValue
    label: str
    description: str = ""

    model_config = ConfigDict(frozen=True)


class Question(BaseModel):
    id: str
    title: str
    subtitle: str = ""
    options: List[QuestionOption] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    def accepts(self, value: Any) -> bool:
        # bool is an int subclass: compare type as well as value
        return any(type(opt.value) is type(value) and opt.value == value for opt in self.options)

    def option_for(self, value: Any) -> Optional[QuestionOption]:
        for opt in self.options:
            if type(opt.value) is type(value) and opt.value == value:
                return opt
        return None


def _yes_no(yes: str, no: str) -> List[QuestionOption]:
    return [
        QuestionOption(value=True, label="Yes", description=yes),
        QuestionOption(value=False, label="No", description=no),
    ]


WIZARD_QUESTIONS: List[Question] = [
    Question(
        id="app_type",
        title="What kind of application do you want to build?",
        subtitle="Pick the closest match to your goal.",
        options=[
            QuestionOption(value="landing", label="Landing Page", description="Lead capture page"),
            QuestionOption(value="saas", label="SaaS / Web App", description="Login, CRUD, dashboard"),
            QuestionOption(value="crm", label="CRM", description="Contacts, sales and pipeline"),
            QuestionOption(value="dashboard", label="Dashboard", description="KPIs and charts"),
            QuestionOption(value="agent", label="AI Agent", description="AI that runs tasks with tools"),
            QuestionOption(value="automation", label="Automation", description="Workflows and integrations"),
            QuestionOption(value="bot_whatsapp", label="WhatsApp Bot", description="Chatbot with automatic replies"),
            QuestionOption(value="ecommerce", label="E-commerce", description="Online store with cart and payments"),
            QuestionOption(value="marketplace", label="Marketplace", description="Sellers and buyers platform"),
            QuestionOption(value="internal_tool", label="Internal Tool", description="System for your team"),
            QuestionOption(value="mobile", label="Mobile App", description="iOS/Android application"),
        ],
    ),
    Question(
        id="needs_auth",
        title="Do you need login and authentication?",
        subtitle="Do users have to sign up and log in?",
        options=_yes_no("Login, sign-up, user profiles", "Public access, no accounts"),
    ),
    Question(
        id="needs_db",
        title="Do you need a database?",
        subtitle="Will you store users, products, transactions?",
        options=_yes_no("Store and query data", "Static or external content"),
    ),
    Question(
        id="needs_rag",
        title="Do you need AI with memory (RAG)?",
        subtitle="A chat that answers from your documents or data?",
        options=_yes_no("Document chat, semantic search", "No RAG needed"),
    ),
    Question(
        id="budget",
        title="What is your budget and pace?",
        subtitle="This shapes how complex the recommended stack is.",
        options=[
            QuestionOption(value="low", label="Fast and Cheap", description="MVP on free or cheap tools"),
            QuestionOption(value="medium", label="Balanced", description="Good value, scalable"),
            QuestionOption(value="high", label="Robust and Complete", description="Invest in quality and monitoring"),
        ],
    ),
    Question(
        id="user_level",
        title="What is your technical level?",
        subtitle="This calibrates the recommendations.",
        options=[
            QuestionOption(value="beginner", label="Beginner", description="Never coded, uses no-code tools"),
            QuestionOption(value="intermediate", label="Intermediate", description="Knows the basics, codes with AI"),
            QuestionOption(value="advanced", label="Advanced", description="Codes with AI assistance"),
        ],
    ),
]

QUESTION_IDS = [q.id for q in WIZARD_QUESTIONS]


def get_question(question_id: str) -> Optional[Question]:
    for question in WIZARD_QUESTIONS:
        if question.id == question_id:
            return question
    return None


class Wizard:
    """Step-by-step answer collection, over WIZARD_QUESTIONS unless given a list."""

    def __init__(self, questions: Optional[List[Question]] = None):
        self.questions = list(WIZARD_QUESTIONS if questions is None else questions)
        self.step = 0
        self.answers: Dict[str, OptionValue] = {}
        self.finished = False

    @property
    def current_question(self) -> Question:
        return self.questions[self.step]

    @property
    def is_last_step(self) -> bool:
        return self.step == len(self.questions) - 1

    def get_question(self, question_id: str) -> Optional[Question]:
        for question in self.questions:
            if question.id == question_id:
                return question
        return None

    def answer(self, value: OptionValue, question_id: Optional[str] = None) -> None:
        """
        Record an answer for the current (or the named) question.

        Raises:
            InvalidAnswerError: The value is not one of the question's options.
        """
        question = self.current_question if question_id is None else self.get_question(question_id)
        if question is None or not question.accepts(value):
            raise InvalidAnswerError(question_id or self.current_question.id, value)
        self.answers[question.id] = value

    def next(self) -> bool:
        """
        Advance one step.

        Returns False without moving when the current question is
        unanswered. On the last step a successful call marks the wizard
        finished instead of advancing.
        """
        if self.current_question.id not in self.answers:
            return False
        if self.is_last_step:
            self.finished = True
        else:
            self.step += 1
        return True

    def prev(self) -> None:
        if self.step > 0:
            self.step -= 1
        self.finished = False

    def missing(self) -> List[str]:
        return [q.id for q in self.questions if q.id not in self.answers]

    def is_complete(self) -> bool:
        return not self.missing()

    def to_answers(self) -> AnswerSet:
        """
        Raises:
            IncompleteAnswersError: Some question has no answer yet.
        """
        missing = self.missing()
        if missing:
            raise IncompleteAnswersError(missing)
        return AnswerSet(**self.answers)

    def reset(self) -> None:
        self.step = 0
        self.answers.clear()
        self.finished = False
