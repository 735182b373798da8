"""Tests for lexical CV feature extraction."""

from shortlist_ai.cv_pipeline import feature_extractor
from shortlist_ai.cv_pipeline.feature_extractor import (
    extract,
    extract_certifications,
    extract_education_level,
    extract_skills,
    extract_years_of_experience,
)
from shortlist_ai.schemas.cv_profile import EducationLevel, ParsingStatus


def _lower(values):
    return [v.lower() for v in values]


class TestYearsOfExperience:
    def test_explicit_phrase(self):
        assert extract_years_of_experience("I have 5 years of experience in Java.") == 5

    def test_plus_and_range_forms_take_first_number(self):
        assert extract_years_of_experience("5+ years of experience") == 5
        assert extract_years_of_experience("3-5 years experience with cloud") == 3

    def test_phrase_wins_over_date_ranges(self):
        text = "Acme 2010-2020\n4 years of experience"
        assert extract_years_of_experience(text) == 4

    def test_date_range_fallback(self):
        assert extract_years_of_experience("Acme Corp 2018-2021\nBuilt things") == 3

    def test_date_ranges_are_summed(self):
        text = "Acme 2012-2015\nGlobex 2015 - 2019"
        assert extract_years_of_experience(text) == 7

    def test_present_uses_reference_year(self):
        text = "Globex 2020 - Present"
        assert extract_years_of_experience(text, reference_year=2026) == 6
        assert extract_years_of_experience("Globex 2020-current", reference_year=2026) == 6

    def test_absent_is_none_not_zero(self):
        assert extract_years_of_experience("Enthusiastic graduate") is None


class TestEducationLevel:
    def test_phd_beats_bachelors(self):
        assert extract_education_level("PhD in Physics, BSc in Mathematics") == EducationLevel.PHD

    def test_doctorate(self):
        assert extract_education_level("Doctorate in Economics") == EducationLevel.PHD

    def test_msc_is_masters(self):
        assert extract_education_level("MSc Computer Science") == EducationLevel.MASTERS

    def test_masters_degree_phrase(self):
        assert extract_education_level("Holds a Master's degree in Finance") == EducationLevel.MASTERS
        assert extract_education_level("Master of Science, 2019") == EducationLevel.MASTERS

    def test_scrum_master_alone_is_not_masters(self):
        level = extract_education_level("Certified Scrum Master")
        assert level != EducationLevel.MASTERS
        assert level == EducationLevel.UNKNOWN

    def test_scrum_master_of_is_excluded_by_window(self):
        assert extract_education_level("Scrum Master of the release train") != EducationLevel.MASTERS

    def test_real_masters_after_scrum_master_still_counts(self):
        text = "Scrum Master. Also hold a Master of Science."
        assert extract_education_level(text) == EducationLevel.MASTERS

    def test_web_master_of_is_excluded(self):
        assert extract_education_level("Web Master of company intranet") != EducationLevel.MASTERS

    def test_bachelors(self):
        assert extract_education_level("Bachelor of Engineering") == EducationLevel.BACHELORS
        assert extract_education_level("Bachelors in Accounting") == EducationLevel.BACHELORS

    def test_diploma(self):
        assert extract_education_level("HND in Computing") == EducationLevel.DIPLOMA

    def test_certificate(self):
        assert extract_education_level("Certificate in Project Management") == EducationLevel.CERTIFICATE

    def test_unknown(self):
        assert extract_education_level("Hello world") == EducationLevel.UNKNOWN


class TestSkills:
    def test_dictionary_terms(self):
        skills = _lower(extract_skills("Experienced with Python, Docker and PostgreSQL."))
        assert {"python", "docker", "postgresql"} <= set(skills)

    def test_section_line_tokens(self):
        skills = extract_skills("Skills: Kotlin Multiplatform; Figma | UX Research, Go")
        assert "Kotlin Multiplatform" in skills
        assert "Figma" in skills
        assert "UX Research" in skills
        assert "Go" not in skills

    def test_case_insensitive_dedup(self):
        skills = extract_skills("Skills: Python, Java, SQL")
        assert sorted(_lower(skills)) == ["java", "python", "sql"]

    def test_section_keeps_original_casing(self):
        skills = extract_skills("Skills: Figma, Sketch, InVision")
        assert "InVision" in skills


class TestCertifications:
    def test_dictionary_and_section(self):
        certs = extract_certifications("Certifications: AWS Certified Solutions Architect; PMP")
        assert "pmp" in certs
        assert "aws certified" in certs
        assert "AWS Certified Solutions Architect" in certs
        assert "PMP" not in certs

    def test_none(self):
        assert extract_certifications("Nothing to see") == []


class TestExtract:
    def test_full_profile(self):
        text = "Jane\nSkills: Java, SQL\n5 years of experience\nMSc Computer Science\nCCNA"
        profile = extract(text)
        assert profile.parsing_status == ParsingStatus.SUCCESS
        assert profile.years_of_experience == 5
        assert profile.education_level == EducationLevel.MASTERS
        assert "ccna" in profile.certifications
        assert {"java", "sql"} <= set(_lower(profile.skills))
        assert profile.raw_text == text

    def test_empty_text_is_partial_not_error(self):
        profile = extract("")
        assert profile.parsing_status == ParsingStatus.PARTIAL
        assert profile.skills == []
        assert profile.years_of_experience is None
        assert profile.education_level == EducationLevel.UNKNOWN

    def test_failing_heuristic_degrades_field(self, monkeypatch):
        def boom(text):
            raise RuntimeError("bad regex day")

        monkeypatch.setattr(feature_extractor, "extract_years_of_experience", boom)
        profile = extract("Skills: Java, SQL\n5 years of experience")
        assert profile.parsing_status == ParsingStatus.PARTIAL
        assert profile.years_of_experience is None
        assert "years_of_experience" in profile.parsing_error
        assert profile.skills

    def test_deterministic(self):
        text = "Skills: Java, SQL, Docker\n2015-2020\nBSc"
        assert extract(text) == extract(text)


class TestEducationOrdering:
    def test_levels_sort_by_rank_not_name(self):
        assert sorted(reversed(list(EducationLevel))) == list(EducationLevel)
        assert max(EducationLevel) == EducationLevel.PHD

    def test_strict_total_order(self):
        levels = list(EducationLevel)
        for lower, higher in zip(levels, levels[1:]):
            assert lower < higher
            assert higher > lower
            assert lower <= higher and not lower >= higher
        assert EducationLevel.CERTIFICATE < EducationLevel.PHD
        assert EducationLevel.UNKNOWN < EducationLevel.CERTIFICATE
        assert EducationLevel.MASTERS >= EducationLevel.MASTERS

    def test_rank_follows_declaration(self):
        assert [level.rank for level in EducationLevel] == list(range(6))
