"""
Official Matching.

Normalisation and filter predicates shared by the facet counts and the
hierarchy renderer. Free-text degree levels and types are folded into a
small vocabulary; anything outside it passes through with its first letter
capitalised.
"""

from modules.directory.schemas import UNKNOWN, ExplorerFilters, OfficialSchema

BACHELOR = "Bachelor's"
MASTER = "Master's"
DOCTOR = "Doctor's"
STEM = "STEM"
ASSOCIATE = "Associate's"


def is_blank(value: str | None) -> bool:
    return value is None or value.strip() == ""


def capitalize_first(value: str) -> str:
    """Upper-case the first character only ("high school" -> "High school")."""
    return value[:1].upper() + value[1:]


def format_generation(generation: float | int | str | None) -> str | None:
    """Render a generation the way it is displayed and filtered: 5.0 -> "5"."""
    if generation is None:
        return None
    if isinstance(generation, float) and generation.is_integer():
        return str(int(generation))
    return str(generation)


def normalize_education_level(level: str | None) -> str:
    if is_blank(level):
        return UNKNOWN
    normalized = level.lower().strip()
    if "bachelor" in normalized:
        return BACHELOR
    if "master" in normalized:
        return MASTER
    if "doctor" in normalized:
        return DOCTOR
    if "stem" in normalized:
        return STEM
    if "associate" in normalized:
        return ASSOCIATE
    return capitalize_first(normalized)


def normalize_education_type(degree_type: str | None) -> str:
    if is_blank(degree_type):
        return UNKNOWN
    normalized = degree_type.lower().strip()
    if "stem" in normalized:
        return STEM
    return capitalize_first(normalized)


# =============================================================================
# Predicates
# =============================================================================

def matches_search(official: OfficialSchema, search_query: str) -> bool:
    """Case-insensitive substring match on the English or Chinese name."""
    if search_query == "":
        return True
    needle = search_query.lower()
    if needle in (official.name_en or "").lower():
        return True
    return bool(official.name_cn) and needle in official.name_cn.lower()


def matches_hometown(official: OfficialSchema, hometown: str) -> bool:
    if hometown == UNKNOWN:
        return not official.home_province
    return not hometown or official.home_province == hometown


def matches_generation(official: OfficialSchema, generation: str) -> bool:
    if generation == UNKNOWN:
        return not official.generation
    return not generation or format_generation(official.generation) == generation


def _lacks_degree_field(official: OfficialSchema, field: str) -> bool:
    if not official.degrees:
        return True
    return all(is_blank(getattr(degree, field)) for degree in official.degrees)


def _level_matches(level: str | None, wanted: str) -> bool:
    if is_blank(level):
        return False
    level = level.lower().strip()
    wanted_lower = wanted.lower().strip()
    if wanted_lower == BACHELOR.lower():
        return "bachelor" in level
    if wanted_lower == MASTER.lower():
        return "master" in level
    if wanted_lower == DOCTOR.lower():
        return "doctor" in level or "phd" in level
    if wanted_lower == STEM.lower():
        return "stem" in level
    if wanted_lower == ASSOCIATE.lower():
        return "associate" in level
    return capitalize_first(level) == wanted


def _type_matches(degree_type: str | None, wanted: str) -> bool:
    if is_blank(degree_type):
        return False
    degree_type = degree_type.lower().strip()
    wanted_lower = wanted.lower().strip()
    if wanted_lower.upper() == STEM:
        return "stem" in degree_type
    return degree_type == wanted_lower


def matches_education_level(official: OfficialSchema, education_level: str) -> bool:
    if education_level == UNKNOWN:
        return _lacks_degree_field(official, "level")
    if not education_level:
        return True
    return any(_level_matches(d.level, education_level) for d in official.degrees)


def matches_education_type(official: OfficialSchema, education_type: str) -> bool:
    if education_type == UNKNOWN:
        return _lacks_degree_field(official, "type")
    if not education_type:
        return True
    return any(_type_matches(d.type, education_type) for d in official.degrees)


def matches_filters(official: OfficialSchema, filters: ExplorerFilters) -> bool:
    """AND of the four facet predicates."""
    return (
        matches_hometown(official, filters.hometown)
        and matches_generation(official, filters.generation)
        and matches_education_level(official, filters.education_level)
        and matches_education_type(official, filters.education_type)
    )
