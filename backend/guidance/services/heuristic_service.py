"""
Keyword-table suggestions used when remote generation is unavailable.
Fully offline and deterministic.
"""
from dataclasses import dataclass
from typing import Callable

from guidance.schemas.guidance import SearchQuery, SearchType, Suggestion, SuggestionResponse

SuggestionBuilder = Callable[[str], list[Suggestion]]


@dataclass(frozen=True)
class KeywordRule:
    keywords: tuple[str, ...]
    build: SuggestionBuilder

    def matches(self, query_lower: str) -> bool:
        return any(kw in query_lower for kw in self.keywords)


@dataclass(frozen=True)
class CategoryTable:
    rules: tuple[KeywordRule, ...]
    default: SuggestionBuilder


def _fixed(*items: tuple[str, str]) -> SuggestionBuilder:
    suggestions = [Suggestion(title=title, description=desc) for title, desc in items]
    return lambda query: list(suggestions)


def _job_roles(query: str) -> list[Suggestion]:
    return [
        Suggestion(
            title=f"Junior {query} Role",
            description="Entry level position at TechCorp. Great for recent graduates.",
            link="#",
        ),
        Suggestion(
            title=f"Senior {query} Specialist",
            description="Leading industry player seeks experienced professional.",
            link="#",
        ),
        Suggestion(
            title=f"{query} Intern",
            description="Summer internship program with mentorship opportunities.",
            link="#",
        ),
    ]


def _generic_careers(query: str) -> list[Suggestion]:
    return [
        Suggestion(title="Consultant", description=f"Professional consultant in the field of {query}."),
        Suggestion(title="Researcher", description=f"Academic or industrial research in {query}."),
        Suggestion(title="Teacher/Professor", description=f"Educating others about {query}."),
    ]


# Rules are checked in order; the first match wins.
HEURISTIC_TABLES: dict[SearchType, CategoryTable] = {
    SearchType.JOB_APPS: CategoryTable(rules=(), default=_job_roles),
    SearchType.RELATED_CAREERS: CategoryTable(
        rules=(
            KeywordRule(
                ("computer", "software"),
                _fixed(
                    ("Software Engineer", "Design and build software applications."),
                    ("Data Scientist", "Analyze complex data to help make decisions."),
                    ("Product Manager", "Oversee the development of products."),
                ),
            ),
            KeywordRule(
                ("art", "design"),
                _fixed(
                    ("UX Designer", "Design user experiences for products."),
                    ("Graphic Designer", "Create visual concepts to communicate ideas."),
                    ("Art Director", "Manage design staff and creative vision."),
                ),
            ),
        ),
        default=_generic_careers,
    ),
    SearchType.SUGGEST_MAJOR: CategoryTable(
        rules=(
            KeywordRule(
                ("developer", "engineer"),
                _fixed(
                    ("Computer Science", "Study of computation, automation, and information."),
                    ("Software Engineering", "Systematic application of engineering to software."),
                    ("Mathematics", "Abstract science of number, quantity, and space."),
                ),
            ),
            KeywordRule(
                ("doctor", "nurse"),
                _fixed(
                    ("Biology", "Study of life and living organisms."),
                    ("Chemistry", "Scientific study of the properties and behavior of matter."),
                    ("Nursing", "Profession focused on the care of individuals."),
                ),
            ),
        ),
        default=_fixed(
            ("Business Administration", "Versatile degree for many corporate roles."),
            ("Communications", "Focus on how messages are created and interpreted."),
            ("Liberal Arts", "Broad education in arts and sciences."),
        ),
    ),
}


def resolve_heuristic(query: SearchQuery) -> SuggestionResponse:
    table = HEURISTIC_TABLES[query.type]
    query_lower = query.query.lower()
    for rule in table.rules:
        if rule.matches(query_lower):
            return SuggestionResponse(results=rule.build(query.query))
    return SuggestionResponse(results=table.default(query.query))
