# tests/test_report_view.py
"""Tests for the compiled report view."""

import pytest


@pytest.fixture
def filled_store(draft_response, tows_response):
    from context_wizard.agents.schemas import InitialDraft, TowsDraft
    from context_wizard.records.store import RecordStore

    store = RecordStore()
    store.load_initial_draft(InitialDraft.model_validate(draft_response))
    store.replace_tows(TowsDraft.model_validate(tows_response))
    return store


def test_sort_tows_descending_and_stable(filled_store):
    from context_wizard.report.view import sort_tows

    # ids 0..5; raise two of them, leaving ties among the rest
    filled_store.update_tows_strategy(4, "priority", 5)
    filled_store.update_tows_strategy(1, "priority", 5)
    filled_store.update_tows_strategy(3, "priority", 1)

    ordered = sort_tows(filled_store.tows)

    assert [s.id for s in ordered] == [1, 4, 0, 2, 5, 3]
    assert [s.priority for s in ordered] == [5, 5, 3, 3, 3, 1]


def test_sort_tows_all_equal_keeps_generation_order(filled_store):
    from context_wizard.report.view import sort_tows

    assert [s.id for s in sort_tows(filled_store.tows)] == [0, 1, 2, 3, 4, 5]


def test_build_report_view(complete_profile, filled_store):
    from context_wizard.report.view import ISO_SUMMARY, build_report_view

    view = build_report_view(complete_profile, filled_store)

    assert view.company_name == "PT Manufaktur Maju"
    assert ("Tanggal Analisa", "17 Oktober 2026") in view.identity
    assert ("Sektor", "manufaktur") in view.identity
    assert view.summary == ISO_SUMMARY
    assert [r.category for r in view.swot_rows] == [
        "Kekuatan", "Kekuatan", "Kelemahan", "Peluang", "Ancaman", "Ancaman",
    ]
    assert [r.category for r in view.pestle_rows] == [
        "Politik", "Ekonomi", "Sosial", "Teknologi", "Hukum/Legal", "Lingkungan",
    ]
    assert view.swot_rows[0].impact == "Sedang"
    assert len(view.tows_rows) == 6


def test_build_report_view_resolves_custom_sector(complete_profile, filled_store):
    from context_wizard.report.view import build_report_view

    complete_profile.sector = "lainnya"
    complete_profile.custom_sector = "Energi"

    view = build_report_view(complete_profile, filled_store)

    assert ("Sektor", "Energi") in view.identity


def test_format_analysis_date():
    from context_wizard.report.view import format_analysis_date

    assert format_analysis_date("2026-01-05") == "5 Januari 2026"
    assert format_analysis_date("bukan tanggal") == "bukan tanggal"
