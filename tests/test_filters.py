from __future__ import annotations

import pytest

from doctor_directory.filters import FilterState, filter_doctors, suggest_doctors


def _names(docs):
    return [d["name"] for d in docs]


DR_A = {"name": "Dr. A", "mode": "Video Consult", "specialties": ["Dentist"], "fees": 500, "experience": 5}
DR_B = {"name": "Dr. B", "mode": "In Clinic", "specialties": ["Dentist"], "fees": 300, "experience": 10}


def test_dentists_sorted_by_fees():
    out = filter_doctors([DR_A, DR_B], FilterState(specialties=["Dentist"], sort_option="fees"))
    assert _names(out) == ["Dr. B", "Dr. A"]


def test_dentists_sorted_by_experience():
    out = filter_doctors([DR_A, DR_B], FilterState(specialties=["Dentist"], sort_option="experience"))
    assert _names(out) == ["Dr. B", "Dr. A"]


def test_mode_filter():
    out = filter_doctors([DR_A, DR_B], FilterState(consult_mode="Video Consult"))
    assert _names(out) == ["Dr. A"]


def test_no_filters_keeps_original_order(doctors):
    assert filter_doctors(doctors, FilterState()) == doctors


def test_returns_original_objects(doctors):
    out = filter_doctors(doctors, FilterState(consult_mode="In Clinic"))
    assert all(any(d is r for r in doctors) for d in out)


def test_empty_records():
    assert filter_doctors([], FilterState(search_term="x", sort_option="fees")) == []


def test_search_is_case_insensitive_substring(doctors):
    out = filter_doctors(doctors, FilterState(search_term="RAO"))
    assert _names(out) == ["Dr. Asha Rao", "Dr. Arjun Rao"]


def test_blank_search_is_ignored(doctors):
    assert filter_doctors(doctors, FilterState(search_term="   ")) == doctors


def test_specialties_match_any(doctors):
    out = filter_doctors(doctors, FilterState(specialties=["ENT", "Cardiologist"]))
    assert _names(out) == ["Dr. Bhavin Shah", "Dr. Chitra Iyer", "Dr. Deepa Nair"]


def test_specialty_match_is_case_sensitive(doctors):
    assert filter_doctors(doctors, FilterState(specialties=["ent"])) == []


def test_dimensions_are_anded(doctors):
    state = FilterState(search_term="dr.", consult_mode="In Clinic", specialties=["ENT", "General Physician"])
    assert _names(filter_doctors(doctors, state)) == ["Dr. Bhavin Shah", "Dr. Arjun Rao"]


def test_result_is_subset_matching_all_predicates(doctors):
    state = FilterState(search_term="a", consult_mode="Video Consult", specialties=["ENT"])
    out = filter_doctors(doctors, state)
    expected = [
        d for d in doctors
        if "a" in d["name"].lower() and d["mode"] == "Video Consult" and "ENT" in d["specialties"]
    ]
    assert out == expected


def test_fee_sort_is_stable_for_ties(doctors):
    out = filter_doctors(doctors, FilterState(sort_option="fees"))
    assert _names(out) == [
        "Dr. Arjun Rao",
        "Dr. Bhavin Shah",
        "Dr. Deepa Nair",
        "Dr. Asha Rao",
        "Dr. Chitra Iyer",
    ]


def test_experience_sort_is_descending_and_stable(doctors):
    out = filter_doctors(doctors, FilterState(sort_option="experience"))
    assert _names(out) == [
        "Dr. Chitra Iyer",
        "Dr. Bhavin Shah",
        "Dr. Deepa Nair",
        "Dr. Asha Rao",
        "Dr. Arjun Rao",
    ]


@pytest.mark.parametrize("sort_option", ["fees", "experience"])
def test_sorting_is_idempotent(doctors, sort_option):
    once = filter_doctors(doctors, FilterState(sort_option=sort_option))
    twice = filter_doctors(once, FilterState(sort_option=sort_option))
    assert twice == once


def test_unknown_sort_keeps_order(doctors):
    state = FilterState(sort_option="rating")
    assert state.sort_option == ""
    assert filter_doctors(doctors, state) == doctors


def test_string_fees_sort_numerically():
    records = [
        {"name": "X", "fees": "₹ 1,200", "experience": "3 Years of experience"},
        {"name": "Y", "fees": "₹ 450", "experience": "12 Years of experience"},
        {"name": "Z", "fees": "free", "experience": None},
    ]
    assert _names(filter_doctors(records, FilterState(sort_option="fees"))) == ["Y", "X", "Z"]
    assert _names(filter_doctors(records, FilterState(sort_option="experience"))) == ["Y", "X", "Z"]


def test_missing_fields_never_raise():
    records = [
        {"name": "Dr. Full", "mode": "In Clinic", "specialties": ["ENT"], "fees": 100, "experience": 1},
        {"name": "Dr. No Mode", "specialties": ["ENT"]},
        {"mode": "In Clinic", "specialties": None},
        "not a record",
    ]
    state = FilterState(search_term="dr", consult_mode="In Clinic", specialties=["ENT"], sort_option="fees")
    assert _names(filter_doctors(records, state)) == ["Dr. Full"]
    assert len(filter_doctors(records, FilterState(sort_option="experience"))) == 4


def test_filter_state_dedupes_specialties():
    state = FilterState(specialties=["ENT", "Dentist", "ENT", None])
    assert state.specialties == ["ENT", "Dentist"]


def test_empty_specialty_matches_nothing(doctors):
    state = FilterState(specialties=[""])
    assert state.specialties == [""]
    assert filter_doctors(doctors, state) == []


def test_suggest_blank_input_is_empty(doctors):
    assert suggest_doctors(doctors, "") == []
    assert suggest_doctors(doctors, "   ") == []
    assert suggest_doctors(doctors, None) == []


def test_suggest_caps_at_three_in_original_order(doctors):
    out = suggest_doctors(doctors, "dr")
    assert _names(out) == ["Dr. Asha Rao", "Dr. Bhavin Shah", "Dr. Chitra Iyer"]


def test_suggest_matches_case_insensitively(doctors):
    out = suggest_doctors(doctors, "rAo")
    assert _names(out) == ["Dr. Asha Rao", "Dr. Arjun Rao"]
    assert all("rao" in d["name"].lower() for d in out)


def test_suggest_does_not_dedupe_names():
    records = [{"name": "Dr. Same"}, {"name": "Dr. Same"}]
    assert len(suggest_doctors(records, "same")) == 2


def test_suggest_respects_limit(doctors):
    assert len(suggest_doctors(doctors, "dr", limit=1)) == 1
