from app.services.analysis.extractor import (
    extract, extract_crime_keywords, extract_dates, extract_locations, extract_persons,
)

def test_extract_sample_report(sample_description):
    """Persons, locations, dates and keywords from a typical report."""
    bundle = extract(sample_description)

    assert "Rajesh Kumar" in bundle.persons
    assert any(loc.endswith("Street") for loc in bundle.locations)
    assert "15 January 2024" in bundle.dates
    assert "theft" in bundle.crime_keywords

def test_extract_no_matches_gives_empty_lists():
    bundle = extract("nothing of note happened here")

    assert bundle.persons == []
    assert bundle.locations == []
    assert bundle.dates == []
    assert bundle.crime_keywords == []

def test_persons_accept_false_positives():
    """Sentence-initial capitalised pairs are reported too."""
    persons = extract_persons("Last Monday Priya Sharma met Amit Verma.")

    assert persons == ["Last Monday", "Priya Sharma", "Amit Verma"]

def test_persons_require_lowercase_tail():
    assert extract_persons("The ATM Machine was broken") == []

def test_locations_case_insensitive_and_text_ordered():
    locations = extract_locations("He ran from the central STATION towards Gandhi road near the old market")

    assert locations == ["central STATION", "Gandhi road", "old market"]

def test_locations_keep_duplicates():
    locations = extract_locations("Main Street and Main Street again")

    assert locations == ["Main Street", "Main Street"]

def test_dates_numeric_and_spelled():
    dates = extract_dates("Seen on 3/4/2023, again on 12-11-23 and finally on 5 march 2024.")

    assert dates == ["3/4/2023", "12-11-23", "5 march 2024"]

def test_dates_reject_malformed():
    assert extract_dates("Version 123/4/5 and 7 Smarch 2024") == []

def test_crime_keywords_in_list_order_once_each():
    keywords = extract_crime_keywords("FRAUD and assault, then another fraud and a theft")

    assert keywords == ["theft", "assault", "fraud"]

def test_crime_keywords_substring_match():
    """Containment, not whole words."""
    assert extract_crime_keywords("repeated dowry-related harassments") == ["harassment", "dowry"]

def test_patterns_are_ascii_only():
    """Non-ASCII digits and letters are outside the pattern alphabet."""
    assert extract_dates("registered on १५/०१/२०२४") == []
    assert extract_locations("stopped at the café street corner") == []
    assert extract_persons("Zoë Åkesson met Ravi Rao") == ["Ravi Rao"]
