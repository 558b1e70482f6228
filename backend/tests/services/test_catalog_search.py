from app.core.config import settings
from app.services.analysis.search import paginate, search_catalog
from app.services.analysis.suggestions import suggest_incidents

def test_search_by_keyword():
    result = search_catalog("theft")

    codes = [s.section_code for s in result.sections]
    assert codes == ["Section 378", "Section 379", "Section 66C"]  # 66C: "Identity theft"
    assert result.precedents[0].citation == "AIR 1965 SC 722"

def test_search_category_filter():
    result = search_catalog("theft", category="cybercrime")

    assert [s.section_code for s in result.sections] == ["Section 66C"]
    assert result.precedents == []

def test_search_all_category_and_empty_query():
    result = search_catalog("", category="all")

    assert result.total_sections == 10
    assert result.total_precedents == 5
    assert result.total_judgments == 2
    assert result.category is None

def test_search_reference_sections():
    assert [s.section_code for s in search_catalog("dowry").sections] == ["Section 498A"]

    women = search_catalog("", category="crimes_against_women")
    assert [s.section_code for s in women.sections] == ["Section 354", "Section 498A"]
    assert women.sections[0].is_bailable is True

def test_search_reference_case_laws():
    result = search_catalog("modesty")

    assert [s.section_code for s in result.sections] == ["Section 354"]
    assert [c.title for c in result.precedents] == ["State of Punjab v. Gurmit Singh & Ors"]
    assert search_catalog("vishaka").precedents[0].importance == "landmark"

def test_search_landmark_judgments():
    result = search_catalog("")
    assert [j.year for j in result.judgments] == [1978, 1973]

    doctrine = search_catalog("basic structure")
    assert [j.case for j in doctrine.judgments] == ["Kesavananda Bharati v. State of Kerala"]
    assert doctrine.sections == []

def test_search_pages_keep_totals():
    page_two = search_catalog("", limit=4, page=2)

    assert page_two.page == 2
    assert [s.section_code for s in page_two.sections] == ["Section 66", "Section 66C", "Section 107", "Section 354"]
    assert page_two.total_sections == 10

    page_three = search_catalog("", limit=4, page=3)
    assert [s.section_code for s in page_three.sections] == ["Section 420", "Section 498A"]
    assert page_three.judgments == []
    assert page_three.total_judgments == 2

def test_search_past_last_page_is_empty():
    result = search_catalog("", limit=10, page=5)
    assert result.sections == []
    assert result.total_sections == 10

def test_search_clamps_paging_input():
    result = search_catalog("", limit=-1, page=0)

    assert result.page == 1
    assert result.limit == settings.SEARCH_RESULT_LIMIT
    assert len(result.sections) == 10

def test_paginate_caps_limit():
    assert paginate(3, 1000) == (3, settings.SEARCH_MAX_LIMIT, 2 * settings.SEARCH_MAX_LIMIT)
    assert paginate(None, None) == (1, settings.SEARCH_RESULT_LIMIT, 0)

def test_search_no_match():
    result = search_catalog("zzz-nothing")
    assert result.sections == []
    assert result.precedents == []
    assert result.judgments == []

def test_suggestions_filter_case_insensitive():
    assert suggest_incidents("THEFT") == ["Theft of mobile phone"]
    assert suggest_incidents("online") == ["Cybercrime - online fraud"]

def test_suggestions_limit():
    assert len(suggest_incidents("", limit=5)) == 5
    assert suggest_incidents("", limit=0) == []
    assert suggest_incidents("e", limit=3) == ["Theft of mobile phone", "Assault and battery", "Domestic violence"]
