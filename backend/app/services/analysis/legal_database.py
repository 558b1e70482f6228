"""
Legal database: the reference listing searched by the legal-database page.

Holds every section and precedent the analysis catalogs can suggest, plus
reference entries that no classification rule points at. Built once at import.
"""
from typing import Tuple

from app.services.analysis.catalog import (
    GROUP_CATEGORIES, IPC, PRECEDENT_CATALOG, SECTION_CATALOG, SUPREME_COURT,
)
from app.services.analysis.models import CaseLawRecord, LandmarkJudgment, LegalSection

REFERENCE_SECTIONS: Tuple[LegalSection, ...] = (
    LegalSection(
        section_code="Section 354",
        act_name=IPC,
        title="Assault or criminal force to woman with intent to outrage her modesty",
        description=(
            "Whoever assaults or uses criminal force to any woman, intending to outrage or knowing it "
            "to be likely that he will thereby outrage her modesty, shall be punished with imprisonment "
            "of either description for a term which may extend to two years, or with fine, or with both."
        ),
        category="crimes_against_women",
        keywords=["assault", "woman", "modesty", "criminal force"],
        related_sections=["354A", "354B", "354C", "354D"],
        punishment="Imprisonment up to 2 years or fine or both",
        is_bailable=True,
        is_cognizable=True,
    ),
    LegalSection(
        section_code="Section 420",
        act_name=IPC,
        title="Cheating and dishonestly inducing delivery of property",
        description=(
            "Whoever cheats and thereby dishonestly induces the person deceived to deliver any property "
            "to any person, or to make, alter or destroy the whole or any part of a valuable security, "
            "shall be punished with imprisonment of either description for a term which may extend to "
            "seven years, and shall also be liable to fine."
        ),
        category="property_crimes",
        keywords=["cheating", "fraud", "property", "deception"],
        related_sections=["415", "417", "418", "419"],
        punishment="Imprisonment up to 7 years and fine",
        is_bailable=False,
        is_cognizable=True,
    ),
    LegalSection(
        section_code="Section 498A",
        act_name=IPC,
        title="Husband or relative of husband of a woman subjecting her to cruelty",
        description=(
            "Whoever, being the husband or the relative of the husband of a woman, subjects such woman "
            "to cruelty shall be punished with imprisonment for a term which may extend to three years "
            "and shall also be liable to fine."
        ),
        category="crimes_against_women",
        keywords=["dowry", "cruelty", "husband", "domestic violence"],
        related_sections=["304B", "406", "34"],
        punishment="Imprisonment up to 3 years and fine",
        is_bailable=False,
        is_cognizable=True,
    ),
)

REFERENCE_CASE_LAWS: Tuple[CaseLawRecord, ...] = (
    CaseLawRecord(
        title="Vishaka & Ors v. State of Rajasthan & Ors",
        citation="AIR 1997 SC 3011",
        court=SUPREME_COURT,
        year=1997,
        summary=(
            "Established guidelines for prevention of sexual harassment of women at workplace "
            "and the obligations of employers."
        ),
        category="women_rights",
        importance="landmark",
        key_points=[
            "Established Vishaka Guidelines",
            "Sexual harassment as violation of fundamental rights",
            "Employer obligations",
            "Complaint procedures",
        ],
        sections=["354", "509"],
    ),
    CaseLawRecord(
        title="State of Punjab v. Gurmit Singh & Ors",
        citation="AIR 1996 SC 1393",
        court=SUPREME_COURT,
        year=1996,
        summary="Clarified the scope and meaning of outraging modesty under Section 354 IPC.",
        category="criminal_law",
        importance="significant",
        key_points=[
            "Definition of outraging modesty",
            "Physical contact not always necessary",
            "Mens rea requirement",
            "Victim testimony importance",
        ],
        sections=["354"],
    ),
)

LANDMARK_JUDGMENTS: Tuple[LandmarkJudgment, ...] = (
    LandmarkJudgment(
        case="Kesavananda Bharati v. State of Kerala",
        court=SUPREME_COURT,
        year=1973,
        significance="Established the Basic Structure Doctrine of the Constitution",
        impact="Fundamental principle that limits Parliament's power to amend the Constitution",
        key_principles=["Basic Structure Doctrine", "Parliamentary limitations", "Constitutional supremacy", "Judicial review"],
        legal_doctrine="Basic Structure Doctrine",
        precedent="Constitutional amendments cannot alter the basic structure of the Constitution",
    ),
    LandmarkJudgment(
        case="Maneka Gandhi v. Union of India",
        court=SUPREME_COURT,
        year=1978,
        significance="Expanded the scope of Article 21 (Right to Life and Personal Liberty)",
        impact="Established that right to life includes right to live with dignity",
        key_principles=["Expanded Article 21", "Right to dignity", "Procedural due process", "Interconnected rights"],
        legal_doctrine="Expanded interpretation of fundamental rights",
        precedent="Right to life and personal liberty includes various facets of human dignity",
    ),
)


def _catalog_sections() -> Tuple[LegalSection, ...]:
    seen = set()
    sections = []
    for entries in SECTION_CATALOG.values():
        for entry in entries:
            key = (entry.act_name, entry.section_code)
            if key in seen:
                continue
            seen.add(key)
            sections.append(LegalSection(
                section_code=entry.section_code,
                act_name=entry.act_name,
                title=entry.description,
                description=entry.description,
                category=entry.category.value,
            ))
    return tuple(sections)


def _catalog_case_laws() -> Tuple[CaseLawRecord, ...]:
    seen = set()
    records = []
    for group, entries in PRECEDENT_CATALOG.items():
        for entry in entries:
            if entry.citation in seen:
                continue
            seen.add(entry.citation)
            records.append(CaseLawRecord(
                title=entry.title,
                citation=entry.citation,
                court=entry.court,
                year=entry.year,
                summary=entry.summary,
                category=GROUP_CATEGORIES[group].value,
            ))
    return tuple(records)


LEGAL_SECTIONS: Tuple[LegalSection, ...] = _catalog_sections() + REFERENCE_SECTIONS
CASE_LAWS: Tuple[CaseLawRecord, ...] = _catalog_case_laws() + REFERENCE_CASE_LAWS
