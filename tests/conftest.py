import pytest

from rag_pipeline.knowledge_base import Importance, KnowledgeBase, KnowledgeItem
from rag_pipeline.retriever import Retriever


CGPA_ITEM = KnowledgeItem(
    topic="CGPA Calculation",
    category="Academic",
    question="How is CGPA calculated?",
    answer="CGPA is computed by...",
    keywords=("cgpa", "gpa", "grade point"),
    importance=Importance.high,
)

LIBRARY_ITEM = KnowledgeItem(
    topic="Library Hours",
    category="Student Services",
    question="When is the library open?",
    answer="The main library opens at 8am.",
    keywords=("library",),
    importance=Importance.low,
)

DEADLINE_ITEM = KnowledgeItem(
    topic="Registration Deadline",
    category="Registration",
    question="What is the deadline for registration?",
    answer="The registration deadline is the Friday of week one.",
    keywords=("deadline", "registration"),
    importance=Importance.medium,
)

COURSE_REG_ITEM = KnowledgeItem(
    topic="Course Registration",
    category="Registration",
    question="How do I register for courses?",
    answer="Register online through the student portal.",
    keywords=("register", "course", "portal"),
    importance=Importance.high,
)

HOSTEL_ITEM = KnowledgeItem(
    topic="Hostel Application",
    category="Campus Life",
    question="How do I apply for a hostel room?",
    answer="Submit the hostel form online.",
    keywords=("hostel",),
    importance=Importance.medium,
)

CAMPUS_ITEMS = [CGPA_ITEM, LIBRARY_ITEM, DEADLINE_ITEM, COURSE_REG_ITEM, HOSTEL_ITEM]


@pytest.fixture
def campus_kb():
    return KnowledgeBase(CAMPUS_ITEMS)


@pytest.fixture
def retriever(campus_kb):
    return Retriever(campus_kb)


@pytest.fixture
def cgpa_retriever():
    return Retriever(KnowledgeBase([CGPA_ITEM]))


@pytest.fixture(autouse=True)
def _reset_defaults():
    from rag_pipeline.knowledge_base import reset_knowledge_base
    from rag_pipeline.retriever import reset_retriever

    reset_knowledge_base()
    reset_retriever()
    yield
    reset_knowledge_base()
    reset_retriever()
