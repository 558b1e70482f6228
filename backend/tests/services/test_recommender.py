import pytest

from app.services.analysis.catalog import SECTION_CATALOG
from app.services.analysis.classifier import CLASSIFICATION_RULES, DEFAULT_RULE
from app.services.analysis.models import Category
from app.services.analysis.recommender import compose, recommend, retrieve

REACHABLE_GROUPS = [rule.offence_group for rule in CLASSIFICATION_RULES] + [DEFAULT_RULE.offence_group]

@pytest.mark.parametrize("group", REACHABLE_GROUPS)
def test_every_reachable_group_has_sections_and_checklist(group):
    assert len(recommend(group)) > 0
    assert len(compose(group)) > 0

@pytest.mark.parametrize("category", list(Category))
def test_every_category_has_sections_and_checklist(category):
    assert len(recommend(category)) > 0
    assert len(compose(category)) > 0

def test_theft_sections_in_catalog_order():
    sections = recommend("theft")
    assert [s.section_code for s in sections] == ["Section 378", "Section 379"]
    assert all(s.act_name == "Indian Penal Code, 1860" for s in sections)

def test_assault_sections():
    sections = recommend("assault")
    assert [(s.section_code, s.applicability_score) for s in sections] == [("Section 321", 90), ("Section 324", 85)]

def test_cybercrime_sections_by_category():
    sections = recommend(Category.CYBERCRIME)
    assert [s.section_code for s in sections] == ["Section 66", "Section 66C"]
    assert all(s.category == Category.CYBERCRIME for s in sections)

def test_unknown_group_falls_back_to_crpc():
    for key in ("traffic", Category.DOMESTIC, "", "no-such-group"):
        sections = recommend(key)
        assert [(s.section_code, s.act_name) for s in sections] == [("Section 107", "Code of Criminal Procedure, 1973")]
        assert compose(key) == [
            "Conduct thorough investigation",
            "Record all witness statements",
            "Collect physical evidence",
            "Maintain chain of custody",
        ]

def test_precedents():
    assert retrieve("theft")[0].citation == "AIR 1965 SC 722"
    assert retrieve("assault")[0].title == "Virsa Singh v. State of Punjab"
    assert retrieve(Category.CYBERCRIME)[0].year == 2015
    assert retrieve("criminal") == []
    assert retrieve(Category.CIVIL) == []

def test_scores_within_bounds():
    for group in REACHABLE_GROUPS:
        assert all(0 <= s.applicability_score <= 100 for s in recommend(group))
        assert all(0 <= p.relevance_score <= 100 for p in retrieve(group))

def test_results_do_not_alias_catalog():
    sections = recommend("theft")
    sections.clear()
    checklist = compose("theft")
    checklist.append("extra step")

    assert len(SECTION_CATALOG["theft"]) == 2
    assert "extra step" not in compose("theft")
    assert recommend("theft")[0] is not SECTION_CATALOG["theft"][0]
